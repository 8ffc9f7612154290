"""Interactive integer calculator."""

import argparse
import sys

__all__ = ["calculate", "main"]

_BANNER = "\n\t\t **********CALCULATOR********** "
_MENU = "\n 1. '+' \n 2. '-' \n 3. '*' \n 4. '/'"
_WRONG_CHOICE = " Wrong Choice Entered!! "


def _truncating_divmod(a, b):
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - b * quotient


def calculate(a, b, choice):
    """Apply menu ``choice`` ('1' to '4') to ``a`` and ``b`` and return the result line.

    Division truncates toward zero. Raises ValueError for an unknown choice
    and ZeroDivisionError when dividing by zero.
    """
    choice = str(choice)
    if choice == "1":
        return f" Addition = {a + b}"
    if choice == "2":
        return f" Subtraction = {a - b}"
    if choice == "3":
        return f" Multiplication = {a * b}"
    if choice == "4":
        if b == 0:
            raise ZeroDivisionError("division by zero")
        quotient, remainder = _truncating_divmod(a, b)
        return f" Quotient = {quotient} Remainder = {remainder}"
    raise ValueError(f"unknown choice {choice!r}")


def main(argv=None):
    """Run the calculator on standard input until the user declines to continue."""
    argparse.ArgumentParser(
        prog="algonotes-calculator", description="Interactive integer calculator."
    ).parse_args(argv)
    try:
        while True:
            print(_BANNER, end="")
            a = int(input("\n Enter first number : "))
            b = int(input(" Enter second number : "))
            print(_MENU, end="")
            choice = input("\n Enter the choice : ").strip()[:1]
            try:
                print(calculate(a, b, choice), end="")
            except ValueError:
                print(_WRONG_CHOICE, end="")
            again = input(" \n Do you want to continue.....(Y/N): ").strip()[:1]
            if again not in ("Y", "y"):
                return 0
    except EOFError:
        return 0
    except ValueError as exc:
        print(f"\n invalid number: {exc}", file=sys.stderr)
        return 1
    except ZeroDivisionError:
        print("\n cannot divide by zero", file=sys.stderr)
        return 1