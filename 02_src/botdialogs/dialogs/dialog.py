"""Dialog capability interface."""

from typing import TYPE_CHECKING, Any, Protocol

from ..awaitables import MaybeAwaitable, is_hook
from ..models import DialogResult

if TYPE_CHECKING:
    from .dialog_context import DialogContext


class Dialog(Protocol):
    """A named unit of conversational logic.

    Only dialog_begin is required. Two hooks are optional and detected at
    runtime:

    - dialog_continue(dc): called with each new turn while the dialog is on
      top of the stack. Without it the dialog is one-shot: the next
      continuation ends it.
    - dialog_resume(dc, result): called when a child dialog ends. Without it
      the dialog ends too and the result cascades to its own parent.

    Hooks may be coroutine functions or plain functions. Returning a
    DialogResult (or a mapping with a boolean "active") is optional.
    """

    def dialog_begin(
        self, dc: "DialogContext", dialog_args: Any = None
    ) -> MaybeAwaitable[DialogResult | None]:
        ...


def can_continue(dialog: Any) -> bool:
    """True if the dialog handles continuation turns itself."""
    return is_hook(dialog, "dialog_continue")


def can_resume(dialog: Any) -> bool:
    """True if the dialog accepts results from child dialogs."""
    return is_hook(dialog, "dialog_resume")
