"""
In-memory flight store.

Holds the ordered collection of flight records behind the REST API:
- Insertion-ordered records, mutated in place
- Lookup by numeric id with lenient parsing of the path segment
- Thread-safe operations for concurrent request handling

Records are open-ended key-value maps. Nothing is validated: duplicate
ids, missing ids and non-numeric ids are all stored as given, and every
lookup only ever sees the first matching record in insertion order.
"""

import copy
import logging
import threading
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

Flight = Dict[str, Any]

_DECIMAL_DIGITS = '0123456789'
_HEX_DIGITS = '0123456789abcdef'


class FlightNotFoundError(LookupError):
    """No record matches the requested flight id."""

    def __init__(self, flight_id: str):
        super().__init__(f'Flight not found: {flight_id!r}')
        self.flight_id = flight_id


def parse_flight_id(value: Optional[str]) -> Optional[int]:
    """
    Leniently parse a path segment into a flight id.

    Reads leading whitespace, an optional sign, an optional 0x prefix
    and then as many digits as possible, ignoring whatever follows.
    Returns None when no digits could be read; None matches no record.

        >>> parse_flight_id('12abc')
        12
        >>> parse_flight_id('0x1A')
        26
        >>> parse_flight_id('abc') is None
        True
    """
    if value is None:
        return None

    text = str(value).lstrip()
    sign = 1
    if text[:1] in ('+', '-'):
        if text[0] == '-':
            sign = -1
        text = text[1:]

    base, digits = 10, _DECIMAL_DIGITS
    if text[:2].lower() == '0x':
        base, digits = 16, _HEX_DIGITS
        text = text[2:]

    end = 0
    while end < len(text) and text[end].lower() in digits:
        end += 1

    if end == 0:
        return None
    return sign * int(text[:end], base)


def _matches(record: Any, flight_id: Optional[int]) -> bool:
    """True if the record's id is a number equal to flight_id."""
    if flight_id is None or not isinstance(record, Mapping):
        return False
    value = record.get('id')
    # bool is an int subclass but never a numeric id
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return value == flight_id


def _patch_items(patch: Any) -> Iterable:
    """Key/value pairs a patch contributes to a record."""
    if isinstance(patch, Mapping):
        return patch.items()
    if isinstance(patch, list):
        return ((str(i), v) for i, v in enumerate(patch))
    return ()


class FlightStore:
    """
    Thread-safe ordered collection of flight records.

    One lock guards every operation, so a scan never observes a
    half-applied mutation from another request thread.
    """

    def __init__(self, flights: Optional[Iterable[Flight]] = None):
        self._flights: List[Flight] = list(flights or [])
        self._lock = threading.RLock()

        # Statistics
        self._creates = 0
        self._updates = 0
        self._deletes = 0
        self._misses = 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._flights)

    def create(self, record: Flight) -> Flight:
        """Append a record unchanged and return it."""
        with self._lock:
            self._flights.append(record)
            self._creates += 1

        logger.debug(f'Created flight {_describe(record)}')
        return record

    def list(self) -> List[Flight]:
        """
        All records in insertion order.

        This is the live sequence, not a copy.
        """
        with self._lock:
            return self._flights

    def get(self, flight_id: str) -> Flight:
        """Return the first record whose id matches the parsed flight_id."""
        with self._lock:
            return self._flights[self._index_of(flight_id)]

    def update(self, flight_id: str, patch: Flight) -> Flight:
        """
        Merge patch into the first matching record, in place.

        Every key in the patch overwrites (or adds to) the record. The id
        itself may be overwritten, after which the record is no longer
        found by its old id.
        """
        with self._lock:
            record = self._flights[self._index_of(flight_id)]
            for key, value in _patch_items(patch):
                record[key] = value
            self._updates += 1

        logger.debug(f'Updated flight {flight_id!r}')
        return record

    def delete(self, flight_id: str) -> List[Flight]:
        """Remove the first matching record, returned as a one-element list."""
        with self._lock:
            index = self._index_of(flight_id)
            removed = self._flights[index:index + 1]
            del self._flights[index]
            self._deletes += 1

        logger.debug(f'Deleted flight {flight_id!r}')
        return removed

    def snapshot(self, value: Any) -> Any:
        """
        Deep copy of a record or list of records, taken under the lock.

        Responses are encoded from a snapshot, never from a live record.
        """
        with self._lock:
            return copy.deepcopy(value)

    def clear(self) -> None:
        """Drop every record."""
        with self._lock:
            self._flights.clear()

    def _index_of(self, flight_id: str) -> int:
        """Position of the first match. Caller must hold the lock."""
        parsed = parse_flight_id(flight_id)
        for index, record in enumerate(self._flights):
            if _matches(record, parsed):
                return index

        self._misses += 1
        logger.debug(f'No flight matches id {flight_id!r} (parsed as {parsed})')
        raise FlightNotFoundError(flight_id)

    @property
    def stats(self) -> dict:
        """Get store statistics."""
        with self._lock:
            return {
                'flights': len(self._flights),
                'creates': self._creates,
                'updates': self._updates,
                'deletes': self._deletes,
                'misses': self._misses,
            }


def _describe(record: Any) -> str:
    if isinstance(record, Mapping) and 'id' in record:
        return f'id={record["id"]!r}'
    return '(no id)'
