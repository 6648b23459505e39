from __future__ import annotations

from enum import Enum
from typing import Callable, Optional, Union

import numpy as np

from ._dates import DateArrayLike, DateLike, to_days
from .reference import ReferenceData
from .uk import UK_REFERENCE

BoolLike = Union[bool, "np.ndarray"]


class DayStatus(Enum):
    """How a single day is billed, in display precedence order."""

    UNPAID = "unpaid"
    TERM = "term"
    HOLIDAY = "holiday"


class CalendarClassifier:
    """
    Date → category lookups against a ReferenceData bundle.

    Every predicate takes a single date and returns a bool, or an array of
    dates and returns a boolean array of the same shape.

    Dates outside the tables' span are silently "not term time" and "not a
    bank holiday"; the Christmas window applies to every year.
    """

    def __init__(self, reference: Optional[ReferenceData] = None) -> None:
        self._reference: ReferenceData = (
            reference if reference is not None else UK_REFERENCE
        )

    # ── predicates ───────────────────────────────────────────────────────

    def is_term_time(self, day: DateArrayLike) -> BoolLike:
        return self._apply(day, self._term_mask)

    def is_bank_holiday(self, day: DateArrayLike) -> BoolLike:
        return self._apply(day, self._bank_holiday_mask)

    def is_christmas_period(self, day: DateArrayLike) -> BoolLike:
        return self._apply(day, self._christmas_mask)

    def is_unpaid_day(self, day: DateArrayLike) -> BoolLike:
        # Independent of term status: a bank holiday in term is still unpaid.
        return self._apply(
            day, lambda d: self._bank_holiday_mask(d) | self._christmas_mask(d)
        )

    def day_status(self, day: DateLike) -> DayStatus:
        if self.is_unpaid_day(day):
            return DayStatus.UNPAID
        if self.is_term_time(day):
            return DayStatus.TERM
        return DayStatus.HOLIDAY

    # ── masks over flat datetime64[D] arrays ─────────────────────────────

    def _term_mask(self, d: np.ndarray) -> np.ndarray:
        starts = self._reference.term_starts
        ends = self._reference.term_ends
        if starts.size == 0:
            return np.zeros(d.shape, dtype=bool)
        # Terms are sorted and disjoint: only the last one starting on or
        # before ``d`` can contain it.
        idx = np.searchsorted(starts, d, side="right") - 1
        return (idx >= 0) & (d <= ends[np.clip(idx, 0, None)])

    def _bank_holiday_mask(self, d: np.ndarray) -> np.ndarray:
        return np.isin(d, self._reference.bank_holidays)

    @staticmethod
    def _christmas_mask(d: np.ndarray) -> np.ndarray:
        months = d.astype("datetime64[M]")
        month = months.astype(np.int64) % 12 + 1
        day = (d - months.astype("datetime64[D]")).astype(np.int64) + 1
        return ((month == 12) & (day >= 24)) | ((month == 1) & (day <= 2))

    @staticmethod
    def _apply(
        day: DateArrayLike, mask: Callable[[np.ndarray], np.ndarray]
    ) -> BoolLike:
        days = to_days(day)
        scalar = np.ndim(days) == 0
        flat = np.atleast_1d(days).ravel()
        result = mask(flat)
        return bool(result[0]) if scalar else result.reshape(np.shape(days))

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def reference(self) -> ReferenceData:
        return self._reference

    def __repr__(self) -> str:
        return f"CalendarClassifier(reference={self._reference.version!r})"
