# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Tests for the request module."""

from dataclasses import dataclass

from frequenz.refdate import RequestDescriptor


@dataclass(frozen=True)
class _Get:
    """A request implemented as a dataclass."""

    target: str
    timeout: float = 30.0


class _Ping:
    """A request implemented with properties."""

    @property
    def target(self) -> str:
        """The URL to ping."""
        return "https://example.com/ping"

    @property
    def timeout(self) -> float:
        """Pings are quick."""
        return 0.5


class _NoTimeout:
    """An object missing the timeout."""

    target = "https://example.com"


def test_implementations() -> None:
    """Test that objects with a target and a timeout are requests."""
    request = _Get("https://example.com", timeout=2.5)
    assert isinstance(request, RequestDescriptor)
    assert request.target == "https://example.com"
    assert request.timeout == 2.5
    assert isinstance(_Ping(), RequestDescriptor)


def test_incomplete_implementation() -> None:
    """Test that objects missing a member are not requests."""
    assert not isinstance(_NoTimeout(), RequestDescriptor)
    assert not isinstance("https://example.com", RequestDescriptor)
