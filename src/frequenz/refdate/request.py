# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""The minimal interface of a URL request.

Only the description of a request lives here. Building, sending or retrying
requests is left to the code implementing
[RequestDescriptor][frequenz.refdate.request.RequestDescriptor].
"""

from typing import Protocol, runtime_checkable

from .typing import Seconds


@runtime_checkable
class RequestDescriptor(Protocol):
    """A request to a URL that must complete within a timeout.

    Any object with `target` and `timeout` attributes satisfies this protocol, for
    example a frozen dataclass:

    Example:
        ```python
        from dataclasses import dataclass

        from frequenz.refdate.request import RequestDescriptor

        @dataclass(frozen=True)
        class Get:
            target: str
            timeout: float = 30.0

        assert isinstance(Get("https://example.com"), RequestDescriptor)
        ```
    """

    @property
    def target(self) -> str:
        """The URL the request is addressed to."""
        ...  # pylint: disable=unnecessary-ellipsis

    @property
    def timeout(self) -> Seconds:
        """The seconds to wait for the request to complete."""
        ...  # pylint: disable=unnecessary-ellipsis
