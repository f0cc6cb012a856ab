"""BotState: load-before / persist-after state middleware."""

from typing import Any, Callable

from ..awaitables import MaybeAwaitable, resolve
from ..errors import StateNotLoaded
from ..logging_config import get_logger
from ..storage import IStorage, StoreItem
from ..turn import NextHandler, TurnContext

logger = get_logger(__name__)


StorageKeyFactory = Callable[[TurnContext], MaybeAwaitable[str]]


class CachedBotState:
    """A loaded record and the key it was loaded from."""

    def __init__(self, key: str, state: StoreItem):
        self.key = key
        self.state = state


class BotState:
    """Reads a state record before the bot's logic runs and writes it back after.

    The loaded record is cached in a slot on the TurnContext, so concurrent
    turns for different conversations never share a record.
    """

    def __init__(
        self,
        storage: IStorage,
        storage_key: StorageKeyFactory,
        state_name: str = "botState",
    ):
        self.storage = storage
        self.state_name = state_name
        self._storage_key = storage_key

    async def on_turn(self, context: TurnContext, next_handler: NextHandler) -> None:
        """Middleware entry point."""
        await self.read(context, force=True)
        try:
            await next_handler()
        finally:
            await self.write(context)

    async def read(self, context: TurnContext, force: bool = False) -> StoreItem:
        """
        Load the record for this turn into the context.

        Args:
            context: Context for the current turn.
            force: Reload from storage even if the record is already cached.

        Returns:
            The cached record. A key with no stored record yields {}.
        """
        cached: CachedBotState | None = context.get(self.state_name)
        if cached is not None and not force:
            return cached.state

        key = await resolve(self._storage_key(context))
        items = await self.storage.read([key])
        state = items.get(key) or {}
        context.set(self.state_name, CachedBotState(key, state))
        logger.debug(
            "State loaded",
            extra={"context": {"state": self.state_name, "key": key, "found": key in items}},
        )
        return state

    async def write(self, context: TurnContext) -> None:
        """Persist the cached record under the key it was loaded from."""
        cached = self._cached(context)
        await self.storage.write({cached.key: cached.state})
        logger.debug(
            "State persisted",
            extra={"context": {"state": self.state_name, "key": cached.key}},
        )

    def clear(self, context: TurnContext) -> None:
        """Replace the cached record with an empty one. Persisted at turn end."""
        cached = self._cached(context)
        cached.state = {}

    def get(self, context: TurnContext) -> StoreItem:
        """Return the record loaded for this turn."""
        return self._cached(context).state

    def _cached(self, context: TurnContext) -> CachedBotState:
        cached: Any = context.get(self.state_name)
        if not isinstance(cached, CachedBotState):
            raise StateNotLoaded(self.state_name)
        return cached
