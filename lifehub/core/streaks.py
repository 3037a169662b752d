"""
Habit Streaks
=============

Streak and completion-rate arithmetic for habit completion logs.

``completion_rate`` is the single definition of a completion rate used
across the API (completed records over logged records).  The 66-day
habit-formation heuristic is exposed separately as
``formation_progress``.
"""

import math
from datetime import date, timedelta
from typing import Iterable, Mapping, Protocol

HABIT_FORMATION_DAYS = 66


class CompletionRecord(Protocol):
    date: date
    completed: bool


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def percentage(part: float, whole: float) -> int:
    """Integer percentage of ``part`` in ``whole``; 0 when ``whole`` is empty."""
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)


def build_completion_log(records: Iterable[CompletionRecord]) -> dict[date, bool]:
    """
    Collapse completion rows into a ``date -> completed`` mapping.

    If a day somehow holds more than one row, a completed row wins.
    """
    log: dict[date, bool] = {}
    for record in records:
        log[record.date] = log.get(record.date, False) or bool(record.completed)
    return log


def current_streak(log: Mapping[date, bool], today: date) -> int:
    """
    Count consecutive completed days ending at ``today``.

    Walks backward one day at a time and stops at the first day without
    a completed record, so an unfinished ``today`` yields 0.
    """
    streak = 0
    day = today
    while log.get(day, False):
        streak += 1
        day -= timedelta(days=1)
    return streak


def completion_rate(flags: Iterable[bool]) -> int:
    """Percentage of completed records among all logged records (0..100)."""
    flags = list(flags)
    if not flags:
        return 0
    completed = sum(1 for flag in flags if flag)
    return min(max(percentage(completed, len(flags)), 0), 100)


def formation_progress(streak: int) -> int:
    """Progress toward the 66-day habit-formation mark (0..100)."""
    if streak <= 0:
        return 0
    return round_half_up(min(streak / HABIT_FORMATION_DAYS, 1) * 100)
