"""Expiration tracking for cached media resources."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from dms_tools.core.utils import current_time_millis, format_datetime

T = TypeVar("T")

Clock = Callable[[], int]


class Expirable(ABC):
    """Something that stops being valid at a fixed point in time."""

    __slots__ = ()

    @abstractmethod
    def is_expired(self) -> bool:
        """Check whether this instance is currently expired."""
        ...

    @abstractmethod
    def expiration_time(self) -> int:
        """Get the expiration time in milliseconds since the epoch."""
        ...


class BasicExpirable(Expirable):
    """Expirable holding a fixed expiration timestamp.

    Instances are immutable. The clock is consulted on every call to
    ``is_expired``, so the result changes as time passes.
    """

    __slots__ = ("_expires", "_clock")

    def __init__(self, expires: int, clock: Clock | None = None):
        """Initialize with an absolute expiration time.

        Args:
            expires: Expiration time in milliseconds since the epoch. Times in
                the past are accepted and report expired immediately.
            clock: Callable returning the current time in epoch milliseconds,
                defaults to the system clock
        """
        object.__setattr__(self, "_expires", expires)
        object.__setattr__(self, "_clock", clock or current_time_millis)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def is_expired(self) -> bool:
        return self._expires <= self._clock()

    def expiration_time(self) -> int:
        return self._expires

    def expiry_text(self) -> str:
        """Describe the expiry as ``Expired: <time>`` or ``Expires: <time>``."""
        prefix = "Expired: " if self.is_expired() else "Expires: "
        return prefix + format_datetime(self._expires)

    def __str__(self) -> str:
        return self.expiry_text()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(expires={self._expires})"


class ExpiringValue(BasicExpirable, Generic[T]):
    """A value, such as a thumbnail, that is only valid until it expires."""

    __slots__ = ("_value",)

    def __init__(self, value: T | None, expires: int, clock: Clock | None = None):
        super().__init__(expires, clock)
        object.__setattr__(self, "_value", value)

    @classmethod
    def after(
        cls,
        value: T | None,
        ttl_seconds: float,
        clock: Clock | None = None,
    ) -> ExpiringValue[T]:
        """Create a value expiring ``ttl_seconds`` from now.

        Args:
            value: Payload, may be None
            ttl_seconds: Time to live in seconds
            clock: Clock used both for the start time and for expiry checks

        Returns:
            New expiring value
        """
        now = (clock or current_time_millis)()
        return cls(value, now + int(ttl_seconds * 1000), clock)

    @property
    def value(self) -> T | None:
        """The payload, regardless of expiry."""
        return self._value

    def __str__(self) -> str:
        payload = "None" if self._value is None else type(self._value).__name__
        return f"{type(self).__name__}[Value={payload}, {self.expiry_text()}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self._value!r}, expires={self._expires})"
