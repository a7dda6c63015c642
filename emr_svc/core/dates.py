"""
Date utilities for stored clinical records.

Dates of birth in the patients table were written over the years in three
textual encodings:

- canonical ``YYYY-MM-DD`` (the only encoding written today)
- US ``MM/DD/YYYY``
- legacy ``DD/MM/YYYY``

Reads try them in that order and succeed on the first match. A slash date whose
first two parts are both <= 12 (and differ) matches the US *and* the legacy
encoding; those values are flagged and resolved by an explicit policy rather
than by whichever format happens to be tried first:

- ``day_first``: read as legacy day/month ("03/04/2020" -> 2020-04-03)
- ``month_first``: read as US month/day ("03/04/2020" -> 2020-03-04)
- ``reject``: refuse to decode; the row must be repaired by hand

Usage:
    from core.dates import parse_stored_date, to_canonical

    decoded = parse_stored_date("12/25/1990")
    decoded.value      # date(1990, 12, 25)
    decoded.encoding   # "us"
    to_canonical(decoded.value)  # "1990-12-25"
"""
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

logger = logging.getLogger(__name__)

CANONICAL_FORMAT = "%Y-%m-%d"
US_FORMAT = "%m/%d/%Y"
LEGACY_FORMAT = "%d/%m/%Y"

# Tried in this order
ENCODINGS = (
    ("canonical", CANONICAL_FORMAT),
    ("us", US_FORMAT),
    ("legacy", LEGACY_FORMAT),
)

AMBIGUOUS_POLICIES = ("day_first", "month_first", "reject")

_SLASH_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")


class DateDecodeError(ValueError):
    """Raised when a stored date cannot be decoded."""

    def __init__(self, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot decode stored date '{value}': {reason}")


@dataclass(frozen=True)
class DecodedDate:
    """Result of decoding a stored date string."""

    value: date
    encoding: str
    ambiguous: bool = False

    @property
    def is_canonical(self) -> bool:
        return self.encoding == "canonical"


def is_ambiguous(value: str) -> bool:
    """
    Check whether a slash date reads differently as MM/DD and DD/MM.

    Both readings must be real calendar dates for the value to be ambiguous,
    so "13/04/2020" and "04/04/2020" are not.
    """
    match = _SLASH_DATE.match(value.strip())
    if not match:
        return False
    first, second = int(match.group(1)), int(match.group(2))
    if first == second:
        return False
    return _try_format(value.strip(), US_FORMAT) is not None and \
        _try_format(value.strip(), LEGACY_FORMAT) is not None


def parse_stored_date(value: str, ambiguous_policy: str = "day_first") -> DecodedDate:
    """
    Decode a stored date string in any of the three historical encodings.

    Args:
        value: Raw text from the database.
        ambiguous_policy: One of ``day_first``, ``month_first`` or ``reject``.

    Returns:
        DecodedDate: The calendar date, which encoding matched, and whether
            the value was ambiguous.

    Raises:
        DateDecodeError: If no encoding matches, or the value is ambiguous and
            the policy is ``reject``.
        ValueError: If ``ambiguous_policy`` is unknown.
    """
    if ambiguous_policy not in AMBIGUOUS_POLICIES:
        raise ValueError(f"Unknown ambiguous date policy: {ambiguous_policy!r}")

    if not isinstance(value, str):
        raise DateDecodeError(repr(value), f"expected text, got {type(value).__name__}")

    text = value.strip()
    if not text:
        raise DateDecodeError(value, "empty value")

    if is_ambiguous(text):
        if ambiguous_policy == "reject":
            raise DateDecodeError(value, "ambiguous day/month order")
        encoding = "legacy" if ambiguous_policy == "day_first" else "us"
        fmt = LEGACY_FORMAT if encoding == "legacy" else US_FORMAT
        decoded = DecodedDate(value=_try_format(text, fmt), encoding=encoding, ambiguous=True)
        logger.warning(
            f"Ambiguous stored date '{value}' resolved as {decoded.value.isoformat()}",
            extra={"policy": ambiguous_policy, "encoding": encoding}
        )
        return decoded

    for encoding, fmt in ENCODINGS:
        parsed = _try_format(text, fmt)
        if parsed is not None:
            if encoding != "canonical":
                logger.debug(f"Decoded non-canonical date '{value}' as {encoding}")
            return DecodedDate(value=parsed, encoding=encoding)

    raise DateDecodeError(value, "matches no known encoding")


def to_canonical(value: date) -> str:
    """
    Encode a date for storage.

    Args:
        value: A date (a datetime is truncated to its date).

    Returns:
        str: ``YYYY-MM-DD``, the year zero-padded to four digits.
    """
    if isinstance(value, datetime):
        value = value.date()
    # strftime("%Y") does not pad years before 1000
    return value.isoformat()


def parse_canonical(value: str) -> date:
    """
    Parse a date that is only ever written canonically.

    Raises:
        DateDecodeError: If the value is not ``YYYY-MM-DD``.
    """
    parsed = _try_format(value.strip(), CANONICAL_FORMAT) if isinstance(value, str) else None
    if parsed is None:
        raise DateDecodeError(str(value), "expected YYYY-MM-DD")
    return parsed


def _try_format(text: str, fmt: str) -> Optional[date]:
    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        return None
