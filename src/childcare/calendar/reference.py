from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Sequence

import numpy as np

from childcare._exceptions import ReferenceDataError
from ._dates import DateLike, to_date, to_days

logger = logging.getLogger(__name__)


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.setflags(write=False)
    return arr


class ReferenceData:
    """
    Versioned, immutable term-date and bank-holiday tables.

    Terms are inclusive ``(start, end)`` intervals; they are sorted on
    construction and must not overlap.  Bank holidays are de-duplicated.
    Nothing here knows whether the tables are stale: a maintainer refreshes
    them as new academic calendars are published.
    """

    def __init__(
        self,
        terms: Iterable[Sequence[DateLike]],
        bank_holidays: Iterable[DateLike],
        version: str = "custom",
    ) -> None:
        try:
            pairs = [(to_days(start), to_days(end)) for start, end in terms]
            holidays = [to_days(d) for d in bank_holidays]
        except (TypeError, ValueError) as exc:
            raise ReferenceDataError(f"Unreadable reference data: {exc}") from exc

        starts = np.array([s for s, _ in pairs], dtype="datetime64[D]")
        ends = np.array([e for _, e in pairs], dtype="datetime64[D]")

        inverted = np.nonzero(ends < starts)[0]
        if inverted.size:
            i = int(inverted[0])
            raise ReferenceDataError(
                f"Term ends before it starts: {starts[i]} .. {ends[i]}."
            )

        order = np.argsort(starts, kind="stable")
        starts, ends = starts[order], ends[order]
        overlap = np.nonzero(starts[1:] <= ends[:-1])[0]
        if overlap.size:
            i = int(overlap[0])
            raise ReferenceDataError(
                f"Terms overlap: {starts[i]} .. {ends[i]} and "
                f"{starts[i + 1]} .. {ends[i + 1]}."
            )

        self._version: str = str(version)
        self._term_starts: np.ndarray = _frozen(starts)
        self._term_ends: np.ndarray = _frozen(ends)
        self._bank_holidays: np.ndarray = _frozen(
            np.unique(np.array(holidays, dtype="datetime64[D]"))
        )
        logger.debug(
            "Reference data %r: %s terms, %s bank holidays",
            self._version, len(self._term_starts), len(self._bank_holidays),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ReferenceData":
        """
        Build from plain data, e.g. a parsed JSON document::

            {
                "version": "uk-2029",
                "terms": [{"start": "2029-01-08", "end": "2029-02-16"}, ...],
                "bank_holidays": ["2029-01-01", ...]
            }

        Terms may also be given as ``[start, end]`` pairs.
        """
        try:
            raw_terms = data["terms"]
            raw_holidays = data.get("bank_holidays", [])
        except (KeyError, AttributeError) as exc:
            raise ReferenceDataError(f"Missing reference data field: {exc}") from exc

        terms = []
        for term in raw_terms:
            if isinstance(term, Mapping):
                if "start" not in term or "end" not in term:
                    raise ReferenceDataError(f"Term needs 'start' and 'end': {term!r}")
                terms.append((term["start"], term["end"]))
            else:
                terms.append(tuple(term))
        return cls(terms, raw_holidays, version=data.get("version", "custom"))

    # ── coverage ─────────────────────────────────────────────────────────

    @property
    def first_day(self):
        days = np.concatenate([self._term_starts, self._bank_holidays])
        return to_date(days.min()) if days.size else None

    @property
    def last_day(self):
        days = np.concatenate([self._term_ends, self._bank_holidays])
        return to_date(days.max()) if days.size else None

    def covers(self, day: DateLike) -> bool:
        """Whether ``day`` falls inside the span the tables were written for."""
        first, last = self.first_day, self.last_day
        if first is None:
            return False
        return first <= to_date(day) <= last

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def version(self) -> str:
        return self._version

    @property
    def term_starts(self) -> np.ndarray:
        return self._term_starts

    @property
    def term_ends(self) -> np.ndarray:
        return self._term_ends

    @property
    def bank_holidays(self) -> np.ndarray:
        return self._bank_holidays

    def __repr__(self) -> str:
        return (
            f"ReferenceData(version={self._version!r}, "
            f"terms={len(self._term_starts)}, "
            f"bank_holidays={len(self._bank_holidays)}, "
            f"span={self.first_day}..{self.last_day})"
        )
