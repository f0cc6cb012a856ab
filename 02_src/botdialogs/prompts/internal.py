"""Shared prompt helpers."""

from dataclasses import replace
from typing import Any, Callable

from ..awaitables import MaybeAwaitable
from ..models import Activity, ActivityTypes, InputHints
from ..turn import TurnContext


# (context, recognized value or None) -> refined value or None
PromptValidator = Callable[[TurnContext, Any], MaybeAwaitable[Any]]


async def send_prompt(
    context: TurnContext, prompt: str | Activity, speak: str | None = None
) -> None:
    """Send a prompt flagged as expecting input."""
    if isinstance(prompt, str):
        activity = Activity(type=ActivityTypes.MESSAGE.value, text=prompt)
    else:
        activity = replace(prompt)

    if speak:
        activity.speak = speak
    if not activity.input_hint:
        activity.input_hint = InputHints.EXPECTING_INPUT.value

    await context.send_activity(activity)
