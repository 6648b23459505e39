from __future__ import annotations

from datetime import date, datetime
from typing import Any, Union

import numpy as np

DateLike = Union[date, datetime, str, np.datetime64]
DateArrayLike = Union[DateLike, "np.ndarray"]


def _day(value: Any) -> np.datetime64:
    # Time-of-day is dropped; only the calendar date takes part in comparisons.
    if isinstance(value, np.datetime64):
        return value.astype("datetime64[D]")
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return np.datetime64(value, "D")
    if isinstance(value, str):
        return np.datetime64(value.strip()).astype("datetime64[D]")
    raise TypeError(f"Unsupported type for date: {type(value)}")


def to_days(value: DateArrayLike) -> np.datetime64 | np.ndarray:
    """Coerce a date-like scalar or array to ``datetime64[D]``."""
    if isinstance(value, np.ndarray):
        if value.dtype.kind == "M":
            return value.astype("datetime64[D]")
        flat = [_day(v) for v in value.ravel()]
        return np.array(flat, dtype="datetime64[D]").reshape(value.shape)
    if isinstance(value, (list, tuple)):
        return np.array([_day(v) for v in value], dtype="datetime64[D]")
    return _day(value)


def to_date(value: DateLike) -> date:
    return _day(value).astype(object)
