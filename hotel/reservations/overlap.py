"""Half-open date range intersection."""
from __future__ import annotations

from typing import Any

from sqlalchemy import and_
from sqlalchemy.sql.elements import ColumnElement


def overlaps(a_start: Any, a_end: Any, b_start: Any, b_end: Any) -> bool:
    """Return True when ``[a_start, a_end)`` and ``[b_start, b_end)`` intersect.

    A stay ending on day D and another starting on day D do not overlap.
    Works for any totally ordered values (``date`` objects or ISO strings).
    """
    return not (a_end <= b_start or b_end <= a_start)


def overlap_clause(start_col: Any, end_col: Any, start: Any, end: Any) -> ColumnElement[bool]:
    """SQL form of :func:`overlaps` for a row range against ``[start, end)``."""
    return and_(start_col < end, end_col > start)
