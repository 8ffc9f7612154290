import io

import pytest

from algonotes.calculator import calculate, main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr()


def test_calculate_labels():
    assert calculate(12, 5, "1").startswith(" Addition = ")
    assert calculate(12, 5, "2").startswith(" Subtraction = ")
    assert calculate(12, 5, "3").startswith(" Multiplication = ")
    assert calculate(12, 5, "4").startswith(" Quotient = ")


def test_calculate_division_truncates_toward_zero():
    assert calculate(-7, 2, "4") == " Quotient = -3 Remainder = -1"


@pytest.mark.parametrize("a,b", [(17, 5), (-17, 5), (17, -5), (-17, -5), (0, 3)])
def test_calculate_division_invariant(a, b):
    parts = calculate(a, b, "4").split()
    quotient, remainder = int(parts[2]), int(parts[5])
    assert quotient * b + remainder == a
    assert abs(remainder) < abs(b)
    assert remainder == 0 or (remainder < 0) == (a < 0)


def test_calculate_unknown_choice():
    with pytest.raises(ValueError):
        calculate(1, 2, "9")


def test_calculate_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        calculate(1, 0, "4")


def test_main_single_round(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "12\n5\n1\nn\n")
    assert code == 0
    assert calculate(12, 5, "1") in captured.out
    assert captured.out.count("CALCULATOR") == 1


def test_main_repeats_on_yes(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "3\n4\n3\ny\n9\n2\n2\nN\n")
    assert code == 0
    assert captured.out.count("CALCULATOR") == 2
    assert calculate(3, 4, "3") in captured.out
    assert calculate(9, 2, "2") in captured.out


def test_main_wrong_choice(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "1\n2\n7\nn\n")
    assert code == 0
    assert " Wrong Choice Entered!! " in captured.out


def test_main_bad_number(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "abc\n")
    assert code == 1
    assert "invalid number" in captured.err


def test_main_divide_by_zero(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "5\n0\n4\n")
    assert code == 1
    assert "divide by zero" in captured.err


def test_main_end_of_input(monkeypatch, capsys):
    code, captured = _run(monkeypatch, capsys, "")
    assert code == 0
    assert "CALCULATOR" in captured.out