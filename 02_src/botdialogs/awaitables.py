"""Helpers for callables that may or may not be coroutines."""

import inspect
from typing import Any, Awaitable, TypeVar, Union

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]


async def resolve(value: MaybeAwaitable[T]) -> T:
    """Await value if it is awaitable, otherwise return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value  # type: ignore[return-value]


def is_hook(obj: Any, name: str) -> bool:
    """True when obj exposes a callable attribute called name."""
    return callable(getattr(obj, name, None))
