# License: MIT
# Copyright © 2024 Frequenz Energy-as-a-Service GmbH

"""Type aliases, protocols and class decorators shared by the package.

* [Seconds][frequenz.refdate.typing.Seconds]: the unit used for offsets, deltas and
  timeouts.
* [DateLike][frequenz.refdate.typing.DateLike]: the capabilities every date value
  offers.
* [disable_init][frequenz.refdate.typing.disable_init]: a decorator that forces the
  use of factory methods to create instances.
"""

from collections.abc import Callable
from typing import (
    Any,
    NoReturn,
    Protocol,
    Self,
    TypeAlias,
    TypeVar,
    cast,
    overload,
    runtime_checkable,
)

Seconds: TypeAlias = float
"""A signed amount of seconds, with sub-second precision."""

TypeT = TypeVar("TypeT", bound=type)
"""A type variable that is bound to a type."""


@runtime_checkable
class DateLike(Protocol):
    """A point in time measured as an offset from a fixed reference epoch."""

    @property
    def offset(self) -> Seconds:
        """The seconds between the reference epoch and this date."""
        ...  # pylint: disable=unnecessary-ellipsis

    def difference(self, other: Self, /) -> Seconds:
        """Return the seconds elapsed from `other` to this date."""
        ...  # pylint: disable=unnecessary-ellipsis

    def advanced_by(self, delta: Seconds, /) -> Self:
        """Return a new date moved `delta` seconds from this one."""
        ...  # pylint: disable=unnecessary-ellipsis

    def compare_to(self, other: Self, /) -> int:
        """Return `-1`, `0` or `1` if this date is before, equal to or after `other`."""
        ...  # pylint: disable=unnecessary-ellipsis


@overload
def disable_init(
    cls: None = None,
    *,
    error: Exception | None = None,
) -> Callable[[TypeT], TypeT]: ...


@overload
def disable_init(cls: TypeT) -> TypeT: ...


def disable_init(
    cls: TypeT | None = None,
    *,
    error: Exception | None = None,
) -> TypeT | Callable[[TypeT], TypeT]:
    """Disable the `__init__` constructor of a class.

    Instances of the decorated class can only be created by factory methods that
    call `cls.__new__(cls)` themselves. Declaring an `__init__` in the decorated
    class, or in any subclass, raises a `TypeError` as soon as the class body is
    executed, and calling the class raises `TypeError` too.

    Warning:
        The class is rebuilt with a custom metaclass, so it can't be combined with
        classes that already use one (like `abc.ABC` or `typing.Protocol`).

    Example:
        ```python
        from typing import Self

        @disable_init
        class Stamp:
            seconds: float

            @classmethod
            def at(cls, seconds: float) -> Self:
                self = cls.__new__(cls)
                self.seconds = seconds
                return self

        stamp = Stamp.at(1.5)

        try:
            Stamp()
        except TypeError as e:
            print(e)
        ```

    Args:
        cls: The class to be decorated.
        error: The error to raise if the class is called or declares an `__init__`.
            If `None`, a generic [TypeError][] is raised.

    Returns:
        The rebuilt class, or a decorator producing it if `cls` is `None`.
    """

    def decorator(inner_cls: TypeT) -> TypeT:
        # The instance dict and weakref descriptors belong to the original class,
        # the rebuilt class must get its own.
        namespace = {
            name: value
            for name, value in inner_cls.__dict__.items()
            if name not in ("__dict__", "__weakref__")
        }
        return cast(
            TypeT,
            _FactoryOnlyMeta(
                inner_cls.__name__,
                inner_cls.__bases__,
                namespace,
                no_init_error=error,
            ),
        )

    if cls is None:
        return decorator
    return decorator(cls)


class _FactoryOnlyMeta(type):
    """A metaclass for classes that can only be created by factory methods."""

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> type:
        """Create the class, refusing it if it declares an `__init__`.

        Args:
            name: The name of the new class.
            bases: The base classes of the new class.
            namespace: The namespace of the new class.
            **kwargs: May contain the `no_init_error` to use.

        Returns:
            The new class.

        Raises:
            TypeError: If the namespace declares an `__init__`.
        """
        if "__init__" in namespace:
            raise _no_init_error(name, bases, kwargs.get("no_init_error"))
        return super().__new__(mcs, name, bases, namespace)

    def __init__(
        cls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        **kwargs: Any,
    ) -> None:
        """Remember the error to raise when the class is called."""
        super().__init__(name, bases, namespace)
        cls._no_init_error = kwargs.get("no_init_error")

    def __call__(cls, *args: Any, **kwargs: Any) -> NoReturn:
        """Refuse to create an instance through the default constructor.

        Args:
            *args: ignored positional arguments.
            **kwargs: ignored keyword arguments.

        Raises:
            TypeError: Always.
        """
        raise _no_init_error(cls.__name__, cls.__bases__, cls._no_init_error)


def _no_init_error(
    name: str, bases: tuple[type, ...], error: Exception | None
) -> Exception:
    if error is not None:
        return error
    for base in bases:
        if inherited := getattr(base, "_no_init_error", None):
            return cast(Exception, inherited)
    return TypeError(
        f"{name} doesn't provide a default constructor, you must use a "
        "factory method to create instances."
    )
