# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""A point in time measured from the reference epoch."""

import math
from datetime import datetime, timedelta
from typing import Any, NoReturn, Self, overload

from ._clock import seconds_since_reference_date
from .datetime import EPOCH_DELTA_SECONDS, REFERENCE_EPOCH
from .logging import get_public_logger
from .math import is_close_to_zero
from .typing import Seconds, disable_init

_logger = get_public_logger(__name__)


@disable_init(
    error=TypeError(
        "ReferenceDate can't be created directly, use ReferenceDate.now() or "
        "ReferenceDate.from_offset() instead."
    )
)
class ReferenceDate:
    """An immutable point in time, as seconds from 1 January 2001 00:00:00 UTC.

    The only state is the [offset][frequenz.refdate.ReferenceDate.offset], a float
    that can be negative (dates before the reference epoch) and carries sub-second
    precision. Instances are created with the named constructors
    [now()][frequenz.refdate.ReferenceDate.now] and
    [from_offset()][frequenz.refdate.ReferenceDate.from_offset]; calling the class
    directly raises a `TypeError`.

    Dates are ordered by their offsets. Equality is exact float equality, use
    [is_close_to()][frequenz.refdate.ReferenceDate.is_close_to] to compare with a
    tolerance.

    Offsets are not validated: `NaN` and infinities are stored as given and
    propagate through the arithmetic like any other float.

    Example:
        ```python
        from frequenz.refdate import ReferenceDate

        start = ReferenceDate.from_offset(10.5)
        end = start.advanced_by(-0.5)
        assert end.offset == 10.0
        assert start.difference(end) == 0.5
        assert end < start

        # The same, using operators
        assert start - 0.5 == end
        assert start - end == 0.5
        ```
    """

    _offset: float

    @classmethod
    def now(cls) -> Self:
        """Create a date for the current wall-clock time.

        Returns:
            A date with microsecond precision.
        """
        return cls.from_offset(seconds_since_reference_date())

    @classmethod
    def from_offset(cls, seconds: Seconds) -> Self:
        """Create a date the given seconds away from the reference epoch.

        Args:
            seconds: The offset from the reference epoch. Any float is accepted,
                including `NaN` and infinities.

        Returns:
            The new date.

        Raises:
            TypeError: If `seconds` is not an `int` or a `float`.
        """
        if not isinstance(seconds, (int, float)):
            raise TypeError(
                f"The offset must be an int or a float, got {type(seconds).__name__}"
            )
        seconds = float(seconds)
        if not math.isfinite(seconds):
            _logger.debug(
                "Creating a ReferenceDate with a non-finite offset: %s", seconds
            )
        self = cls.__new__(cls)
        object.__setattr__(self, "_offset", seconds)
        return self

    @classmethod
    def from_unix_timestamp(cls, timestamp: Seconds) -> Self:
        """Create a date from seconds since the UNIX epoch.

        Args:
            timestamp: The seconds since 1 January 1970 00:00:00 UTC.

        Returns:
            The new date.
        """
        return cls.from_offset(timestamp - EPOCH_DELTA_SECONDS)

    @classmethod
    def from_datetime(cls, dt: datetime) -> Self:
        """Create a date from a timezone-aware `datetime`.

        Args:
            dt: The `datetime` to convert.

        Returns:
            The new date.

        Raises:
            ValueError: If `dt` is naive.
        """
        if dt.tzinfo is None or dt.utcoffset() is None:
            raise ValueError(f"A timezone-aware datetime is required, got {dt!r}")
        return cls.from_offset((dt - REFERENCE_EPOCH).total_seconds())

    @property
    def offset(self) -> Seconds:
        """The seconds between the reference epoch and this date."""
        return self._offset

    @property
    def unix_timestamp(self) -> Seconds:
        """The seconds between the UNIX epoch and this date."""
        return self._offset + EPOCH_DELTA_SECONDS

    def to_datetime(self) -> datetime:
        """Convert this date to a `datetime` in UTC.

        `datetime` has microsecond resolution, so the offset is rounded.

        Returns:
            The timezone-aware `datetime` for this date.

        Raises:
            ValueError: If the offset is `NaN`.
            OverflowError: If the offset is infinite or outside the range of
                `datetime`.
        """
        return REFERENCE_EPOCH + timedelta(seconds=self._offset)

    def difference(self, other: Self, /) -> Seconds:
        """Return the seconds elapsed from `other` to this date.

        Args:
            other: The date to measure from.

        Returns:
            A positive amount if this date is after `other`, negative otherwise.
        """
        return self._offset - other._offset

    def advanced_by(self, delta: Seconds, /) -> Self:
        """Return a new date `delta` seconds after this one.

        Args:
            delta: The seconds to move, negative values move backwards.

        Returns:
            The new date.
        """
        return self.from_offset(self._offset + delta)

    def compare_to(self, other: Self, /) -> int:
        """Compare this date to another one.

        Args:
            other: The date to compare to.

        Returns:
            `-1` if this date is before `other`, `1` if it is after and `0` if they
                are equal or can't be ordered (one of the offsets is `NaN`).
        """
        if self._offset < other._offset:
            return -1
        if self._offset > other._offset:
            return 1
        return 0

    def is_close_to(self, other: Self, /, *, abs_tol: Seconds = 1e-6) -> bool:
        """Check if two dates are at most `abs_tol` seconds apart.

        Args:
            other: The date to compare to.
            abs_tol: The maximum distance in seconds.

        Returns:
            Whether the dates are close to each other.
        """
        return is_close_to_zero(self.difference(other), abs_tol=abs_tol)

    def __eq__(self, other: object) -> bool:
        """Return whether both dates have exactly the same offset."""
        if not isinstance(other, ReferenceDate):
            return NotImplemented
        return self._offset == other._offset

    def __lt__(self, other: Self) -> bool:
        """Return whether this date is before `other`."""
        if not isinstance(other, ReferenceDate):
            return NotImplemented
        return self._offset < other._offset

    def __le__(self, other: Self) -> bool:
        """Return whether this date is before or equal to `other`."""
        if not isinstance(other, ReferenceDate):
            return NotImplemented
        return self._offset <= other._offset

    def __gt__(self, other: Self) -> bool:
        """Return whether this date is after `other`."""
        if not isinstance(other, ReferenceDate):
            return NotImplemented
        return self._offset > other._offset

    def __ge__(self, other: Self) -> bool:
        """Return whether this date is after or equal to `other`."""
        if not isinstance(other, ReferenceDate):
            return NotImplemented
        return self._offset >= other._offset

    def __hash__(self) -> int:
        """Return the hash of the offset."""
        return hash(self._offset)

    def __add__(self, delta: Seconds) -> Self:
        """Return a new date `delta` seconds after this one."""
        if not isinstance(delta, (int, float)):
            return NotImplemented
        return self.advanced_by(delta)

    def __radd__(self, delta: Seconds) -> Self:
        """Return a new date `delta` seconds after this one."""
        return self.__add__(delta)

    @overload
    def __sub__(self, other: Self) -> Seconds: ...

    @overload
    def __sub__(self, other: Seconds) -> Self: ...

    def __sub__(self, other: Self | Seconds) -> Self | Seconds:
        """Return the difference to another date, or a date `other` seconds before."""
        if isinstance(other, ReferenceDate):
            return self.difference(other)
        if isinstance(other, (int, float)):
            return self.advanced_by(-other)
        return NotImplemented

    def __float__(self) -> float:
        """Return the offset."""
        return self._offset

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        """Refuse to modify the date.

        Raises:
            AttributeError: Always.
        """
        raise AttributeError(f"{type(self).__name__} is immutable, can't set {name!r}")

    def __delattr__(self, name: str) -> NoReturn:
        """Refuse to modify the date.

        Raises:
            AttributeError: Always.
        """
        raise AttributeError(
            f"{type(self).__name__} is immutable, can't delete {name!r}"
        )

    def __copy__(self) -> Self:
        """Return this same date."""
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        """Return this same date."""
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        """Return the date's representation for pickling."""
        return (type(self).from_offset, (self._offset,))

    def __str__(self) -> str:
        """Return the offset as text."""
        return str(self._offset)

    def __repr__(self) -> str:
        """Return a string representation of this date."""
        return f"{type(self).__name__}.from_offset({self._offset!r})"
