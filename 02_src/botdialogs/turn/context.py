"""TurnContext: one turn of conversation with a user."""

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from ..models import Activity, ActivityTypes

if TYPE_CHECKING:
    from .adapter import BotAdapter


class TurnContext:
    """Wraps the inbound activity and the adapter used to reply to it.

    Turn-scoped values (loaded state, caches) live in named slots that are
    dropped with the context at the end of the turn.
    """

    def __init__(self, adapter: "BotAdapter", request: Activity):
        self.adapter = adapter
        self.request = request
        self.responded = False
        self._services: dict[str, Any] = {}

    def get(self, key: str) -> Any:
        """Return the value in a turn slot, or None."""
        return self._services.get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a value in a turn slot. Setting None empties the slot."""
        if value is None:
            self._services.pop(key, None)
        else:
            self._services[key] = value

    def has(self, key: str) -> bool:
        return key in self._services

    async def send_activity(
        self,
        activity_or_text: Activity | str,
        speak: str | None = None,
        input_hint: str | None = None,
    ) -> None:
        """Send a reply in the request's conversation."""
        if isinstance(activity_or_text, str):
            activity = Activity(
                type=ActivityTypes.MESSAGE.value,
                text=activity_or_text,
            )
        else:
            activity = replace(activity_or_text)

        if speak:
            activity.speak = speak
        if input_hint:
            activity.input_hint = input_hint
        if activity.channel_id is None:
            activity.channel_id = self.request.channel_id
        if activity.conversation is None:
            activity.conversation = self.request.conversation

        await self.adapter.send_activities(self, [activity])
        self.responded = True
