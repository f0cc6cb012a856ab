"""Base prompt: send a question, recognize the reply."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..awaitables import resolve
from ..models import Activity, DialogResult
from ..turn import TurnContext
from .internal import PromptValidator, send_prompt

if TYPE_CHECKING:
    from ..dialogs import DialogContext


class Prompt(ABC):
    """Stateless prompt. Subclasses supply _recognize_raw()."""

    def __init__(self, validator: PromptValidator | None = None):
        self.validator = validator

    async def prompt(
        self,
        context: TurnContext,
        prompt: str | Activity,
        speak: str | None = None,
    ) -> None:
        """
        Send a formatted prompt to the user.

        Args:
            context: Context for the current turn of conversation.
            prompt: Text or activity to send as the prompt.
            speak: Optional SSML to speak for the prompt.
        """
        await send_prompt(context, prompt, speak)

    async def recognize(self, context: TurnContext) -> Any:
        """Recognize the user's reply; the validator may refine or reject (None) it."""
        value = self._recognize_raw(context)
        if self.validator is None:
            return value
        return await resolve(self.validator(context, value))

    async def dialog_begin(
        self, dc: "DialogContext", dialog_args: Any = None
    ) -> DialogResult:
        """Send the prompt in dialog_args["prompt"]; the reply is handled by the caller."""
        args = dialog_args or {}
        if args.get("prompt"):
            await self.prompt(dc.context, args["prompt"], args.get("speak"))
        return DialogResult(active=True)

    @abstractmethod
    def _recognize_raw(self, context: TurnContext) -> Any:
        """Pull the raw value out of the current request."""
        raise NotImplementedError
