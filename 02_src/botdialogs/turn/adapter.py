"""Adapters and the middleware pipeline."""

from typing import Any, Awaitable, Callable, Protocol, Union

from ..awaitables import is_hook, resolve
from ..logging_config import get_logger
from ..models import Activity, ActivityTypes, ConversationAccount
from .context import TurnContext

logger = get_logger(__name__)


NextHandler = Callable[[], Awaitable[None]]
BotLogic = Callable[[TurnContext], Any]


class Middleware(Protocol):
    """Component that runs before and after the bot's turn logic."""

    async def on_turn(self, context: TurnContext, next_handler: NextHandler) -> None:
        """Process the turn; call next_handler() to run the rest of the chain."""
        ...


MiddlewareLike = Union[Middleware, Callable[[TurnContext, NextHandler], Awaitable[None]]]


class MiddlewareSet:
    """Ordered middleware chain. Earlier middleware wraps later middleware."""

    def __init__(self) -> None:
        self._middleware: list[MiddlewareLike] = []

    def use(self, *middleware: MiddlewareLike) -> "MiddlewareSet":
        """Append middleware to the chain."""
        for item in middleware:
            if not (is_hook(item, "on_turn") or callable(item)):
                raise TypeError(f"Invalid middleware: {item!r}")
            self._middleware.append(item)
        return self

    async def run(self, context: TurnContext, logic: BotLogic | None = None) -> None:
        """Run the chain, then logic, for one turn."""

        async def run_from(index: int) -> None:
            if index < len(self._middleware):
                item = self._middleware[index]

                async def next_handler() -> None:
                    await run_from(index + 1)

                if is_hook(item, "on_turn"):
                    await item.on_turn(context, next_handler)
                else:
                    await item(context, next_handler)
            elif logic is not None:
                await resolve(logic(context))

        await run_from(0)


class BotAdapter:
    """Base adapter: owns the middleware chain and delivers replies."""

    def __init__(self) -> None:
        self._middleware = MiddlewareSet()

    def use(self, *middleware: MiddlewareLike) -> "BotAdapter":
        """Register middleware. Returns the adapter for chaining."""
        self._middleware.use(*middleware)
        return self

    async def send_activities(
        self, context: TurnContext, activities: list[Activity]
    ) -> None:
        """Deliver outgoing activities to the channel."""
        raise NotImplementedError

    async def run_middleware(
        self, context: TurnContext, logic: BotLogic | None = None
    ) -> None:
        """Run the middleware chain and the bot logic for a turn."""
        await self._middleware.run(context, logic)


class TestAdapter(BotAdapter):
    """Adapter for tests: records every outgoing activity in `sent`."""

    __test__ = False  # keep pytest from collecting this class

    def __init__(
        self,
        channel_id: str = "test",
        conversation_id: str = "convo",
        locale: str | None = "en-us",
    ) -> None:
        super().__init__()
        self.channel_id = channel_id
        self.conversation_id = conversation_id
        self.locale = locale
        self.sent: list[Activity] = []

    async def send_activities(
        self, context: TurnContext, activities: list[Activity]
    ) -> None:
        self.sent.extend(activities)

    def make_activity(self, text: str | None = None) -> Activity:
        """Build a message activity in the adapter's default conversation."""
        return Activity(
            type=ActivityTypes.MESSAGE.value,
            text=text,
            locale=self.locale,
            channel_id=self.channel_id,
            conversation=ConversationAccount(id=self.conversation_id),
        )

    async def receive_activity(
        self, activity_or_text: Activity | str, logic: BotLogic | None = None
    ) -> TurnContext:
        """Process an inbound activity as a full turn. Returns the turn's context."""
        if isinstance(activity_or_text, str):
            activity = self.make_activity(activity_or_text)
        else:
            activity = activity_or_text

        context = TurnContext(self, activity)
        logger.debug(
            "Test turn received",
            extra={"context": {"type": activity.type, "text": activity.text}},
        )
        await self.run_middleware(context, logic)
        return context

    @property
    def sent_texts(self) -> list[str | None]:
        return [activity.text for activity in self.sent]
