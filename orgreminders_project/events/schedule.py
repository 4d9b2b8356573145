"""
events/schedule.py

Reminder schedule attached to every Event.

A schedule is an ordered list of offset tokens such as "3d", "12h",
"30m" or "2w". Tokens are persisted as text; each one is parsed once
into an Offset and the result is cached for later evaluations.
"""

import enum
import logging
import re
from dataclasses import dataclass
from datetime import timedelta, timezone

logger = logging.getLogger(__name__)

OFFSET_PATTERN = re.compile(r"(?P<magnitude>\d+)(?P<unit>[mhdw])")


class InvalidOffset(ValueError):
    """Raised when a token does not match <integer><m|h|d|w>."""


class OffsetUnit(str, enum.Enum):
    MINUTES = "m"
    HOURS = "h"
    DAYS = "d"
    WEEKS = "w"


UNIT_DURATIONS = {
    OffsetUnit.MINUTES: timedelta(minutes=1),
    OffsetUnit.HOURS: timedelta(hours=1),
    OffsetUnit.DAYS: timedelta(hours=24),
    OffsetUnit.WEEKS: timedelta(hours=168),
}


@dataclass(frozen=True)
class Offset:
    magnitude: int
    unit: OffsetUnit

    @property
    def delta(self):
        return self.magnitude * UNIT_DURATIONS[self.unit]

    def token(self):
        return f"{self.magnitude}{self.unit.value}"

    def __str__(self):
        return self.token()


def parse_offset(token):
    """
    Parse an offset token into an Offset.

    Raises InvalidOffset for anything other than a non-negative
    integer followed by exactly one of m, h, d, w.
    """
    if not isinstance(token, str):
        raise InvalidOffset(f"offset token must be a string, got {token!r}")

    match = OFFSET_PATTERN.fullmatch(token)
    if match is None:
        raise InvalidOffset(f"cannot parse reminder offset {token!r}")

    return Offset(
        magnitude=int(match.group("magnitude")),
        unit=OffsetUnit(match.group("unit")),
    )


class Schedule:
    """
    Named, ordered list of reminder offsets.

    - add() appends without validating
    - remove() drops every exact match
    - trigger_times() turns a due instant into reminder instants
    """

    def __init__(self, name="", offsets=None):
        self.name = name
        self.offsets = list(offsets or [])
        self._parsed = {}

    @classmethod
    def from_list(cls, offsets, name=""):
        return cls(name=name, offsets=offsets)

    def to_list(self):
        return list(self.offsets)

    def add(self, token):
        self.offsets.append(token)

    def remove(self, token):
        self.offsets = [val for val in self.offsets if val != token]

    def parsed(self, token):
        """
        Return the cached Offset for a token, parsing it on first use.
        Malformed tokens cache as None.
        """
        if token not in self._parsed:
            try:
                self._parsed[token] = parse_offset(token)
            except InvalidOffset as exc:
                logger.warning("Skipping reminder offset: %s", exc)
                self._parsed[token] = None

        return self._parsed[token]

    def trigger_times(self, due):
        """
        Map each valid token to `due` minus its offset.

        Offsets are elapsed time, so the subtraction happens on the UTC
        instant; results come back in the zone of `due`. Invalid tokens
        are left out.
        """
        times = {}
        due_utc = due.astimezone(timezone.utc)

        for token in self.offsets:
            offset = self.parsed(token)
            if offset is None:
                continue
            times[token] = (due_utc - offset.delta).astimezone(due.tzinfo)

        return times

    def as_pairs(self):
        """
        Token -> [magnitude, unit] as strings, for pre-filling the
        reminder rows of the event edit form.
        """
        pairs = {}

        for token in self.offsets:
            offset = self.parsed(token)
            if offset is None:
                pairs[token] = ["", ""]
            else:
                pairs[token] = [str(offset.magnitude), offset.unit.value]

        return pairs

    def __len__(self):
        return len(self.offsets)

    def __iter__(self):
        return iter(self.offsets)

    def __eq__(self, other):
        if not isinstance(other, Schedule):
            return NotImplemented
        return self.name == other.name and self.offsets == other.offsets

    def __repr__(self):
        return f"Schedule(name={self.name!r}, offsets={self.offsets!r})"
