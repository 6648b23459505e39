"""
UK (England) school term dates and bank holidays.

Term dates run from spring 2025 to the end of the 2028 autumn term; bank
holidays cover 2025 .. 2028.  Dates outside this span classify as neither
term time nor bank holiday.
"""

from __future__ import annotations

from datetime import date

from .reference import ReferenceData

UK_TERM_DATES: list[tuple[date, date]] = [
    # 2025 (approximate)
    (date(2025, 1, 6), date(2025, 2, 14)),
    (date(2025, 2, 24), date(2025, 4, 4)),
    (date(2025, 4, 22), date(2025, 5, 23)),
    (date(2025, 6, 2), date(2025, 7, 18)),
    # 2025/26
    (date(2025, 9, 1), date(2025, 10, 24)),
    (date(2025, 11, 3), date(2025, 12, 19)),
    (date(2026, 1, 5), date(2026, 2, 13)),
    (date(2026, 2, 23), date(2026, 3, 27)),
    (date(2026, 4, 13), date(2026, 5, 22)),
    (date(2026, 6, 1), date(2026, 7, 17)),
    # 2026/27
    (date(2026, 9, 3), date(2026, 10, 23)),
    (date(2026, 11, 2), date(2026, 12, 18)),
    (date(2027, 1, 4), date(2027, 2, 12)),
    (date(2027, 2, 22), date(2027, 3, 25)),
    (date(2027, 4, 12), date(2027, 5, 28)),
    (date(2027, 6, 7), date(2027, 7, 22)),
    # 2027/28
    (date(2027, 9, 2), date(2027, 10, 22)),
    (date(2027, 11, 1), date(2027, 12, 17)),
    (date(2028, 1, 3), date(2028, 2, 11)),
    (date(2028, 2, 21), date(2028, 3, 24)),
    (date(2028, 4, 10), date(2028, 5, 26)),
    (date(2028, 6, 5), date(2028, 7, 21)),
    # 2028/29, autumn only
    (date(2028, 9, 4), date(2028, 10, 27)),
    (date(2028, 11, 6), date(2028, 12, 22)),
]

UK_BANK_HOLIDAYS: list[date] = [
    # 2025
    date(2025, 1, 1),
    date(2025, 4, 18),
    date(2025, 4, 21),
    date(2025, 5, 5),
    date(2025, 5, 26),
    date(2025, 8, 25),
    date(2025, 12, 25),
    date(2025, 12, 26),
    # 2026, Boxing Day substitute on the 28th
    date(2026, 1, 1),
    date(2026, 4, 3),
    date(2026, 4, 6),
    date(2026, 5, 4),
    date(2026, 5, 25),
    date(2026, 8, 31),
    date(2026, 12, 25),
    date(2026, 12, 28),
    # 2027, both Christmas days substituted
    date(2027, 1, 1),
    date(2027, 3, 26),
    date(2027, 3, 29),
    date(2027, 5, 3),
    date(2027, 5, 31),
    date(2027, 8, 30),
    date(2027, 12, 27),
    date(2027, 12, 28),
    # 2028, New Year substitute on the 3rd
    date(2028, 1, 3),
    date(2028, 4, 14),
    date(2028, 4, 17),
    date(2028, 5, 1),
    date(2028, 5, 29),
    date(2028, 8, 28),
    date(2028, 12, 25),
    date(2028, 12, 26),
]

UK_REFERENCE = ReferenceData(UK_TERM_DATES, UK_BANK_HOLIDAYS, version="uk-2025-2029")
