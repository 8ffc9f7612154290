"""Meeting scheduling: busiest slot and greedy room booking."""

import heapq
from itertools import count

__all__ = ["max_concurrent_meeting_slot", "max_meetings"]


def max_concurrent_meeting_slot(meetings):
    """Return ``(start, end)`` of the slot where the most meetings overlap.

    Each meeting is a ``(start, end)`` pair; a meeting ending at time ``t``
    does not overlap one starting at ``t``.
    """
    ordered = sorted((start, end) for start, end in meetings)
    if not ordered:
        raise ValueError("at least one meeting is required")
    ends = []
    busiest = 0
    slot = (0, 0)
    for start, end in ordered:
        while ends and start >= ends[0]:
            heapq.heappop(ends)
        heapq.heappush(ends, end)
        if len(ends) > busiest:
            busiest = len(ends)
            slot = (start, ends[0])
    return slot


def max_meetings(starts, ends):
    """Return 1-based positions of a largest set of non-overlapping meetings.

    Meetings are chosen greedily by earliest finish time.
    """
    starts, ends = list(starts), list(ends)
    if len(starts) != len(ends):
        raise ValueError("starts and ends must have the same length")
    ordered = sorted(zip(starts, ends, count(1)), key=lambda meeting: meeting[1])
    selected = []
    limit = None
    for start, end, position in ordered:
        if limit is None or start >= limit:
            selected.append(position)
            limit = end
    return selected