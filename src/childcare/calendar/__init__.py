"""
childcare.calendar
~~~~~~~~~~~~~~~~~~

Date classification for term-time-only childcare billing.  A
CalendarClassifier answers "is this day term time?" and "is this day unpaid?"
against an injected, versioned ReferenceData bundle of term dates and bank
holidays.

Basic usage::

    from datetime import date
    from childcare.calendar import CalendarClassifier

    cal = CalendarClassifier()                      # UK tables, 2025–2028
    cal.is_term_time(date(2025, 9, 8))              # → True
    cal.is_unpaid_day(date(2025, 12, 24))           # → True (Christmas closure)

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    week = np.datetime64("2025-12-22") + np.arange(7)
    cal.is_unpaid_day(week)     # → [False, False, True, True, True, True, True]

Custom tables::

    from childcare.calendar import ReferenceData
    ref = ReferenceData.from_mapping({
        "version": "test",
        "terms": [["2030-01-07", "2030-02-15"]],
        "bank_holidays": ["2030-01-01"],
    })
    cal = CalendarClassifier(ref)

Public API
----------
CalendarClassifier  Date predicates.
DayStatus           Unpaid / term / holiday label for a single day.
ReferenceData       Term and bank holiday tables.
UK_REFERENCE        The shipped UK dataset.
"""

from __future__ import annotations

from childcare.calendar.classifier import CalendarClassifier, DayStatus
from childcare.calendar.reference import ReferenceData
from childcare.calendar.uk import UK_REFERENCE

__all__ = [
    "CalendarClassifier",
    "DayStatus",
    "ReferenceData",
    "UK_REFERENCE",
]
