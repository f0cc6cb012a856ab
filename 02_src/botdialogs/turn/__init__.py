"""Turn processing module."""

from .adapter import (
    BotAdapter,
    BotLogic,
    Middleware,
    MiddlewareSet,
    NextHandler,
    TestAdapter,
)
from .context import TurnContext

__all__ = [
    "BotAdapter",
    "BotLogic",
    "Middleware",
    "MiddlewareSet",
    "NextHandler",
    "TestAdapter",
    "TurnContext",
]
