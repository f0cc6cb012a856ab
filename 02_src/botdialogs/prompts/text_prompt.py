"""Prompts the user to reply with some text."""

from ..turn import TurnContext
from .base import Prompt


class TextPrompt(Prompt):
    """Recognizes the reply's text, or "" when the reply has none."""

    def _recognize_raw(self, context: TurnContext) -> str:
        request = context.request
        return request.text if request and request.text else ""
