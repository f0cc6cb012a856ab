"""DialogSet: registry of dialogs by id."""

from typing import Any, Callable, Sequence

from ..logging_config import get_logger
from ..models import DialogInstance
from ..turn import TurnContext
from .dialog import Dialog
from .dialog_context import DialogContext
from .waterfall import Waterfall

logger = get_logger(__name__)


class DialogSet:
    """Maps dialog ids to dialogs.

    Populate once at startup, then share across conversations; the set holds
    no per-conversation state.
    """

    def __init__(self) -> None:
        self._dialogs: dict[str, Dialog] = {}

    def add(self, dialog_id: str, dialog_or_steps: Dialog | Sequence[Callable[..., Any]]) -> Dialog:
        """
        Register a dialog.

        Args:
            dialog_id: Unique id. Re-adding an id replaces the earlier dialog.
            dialog_or_steps: A dialog, or a list of waterfall steps.

        Returns:
            The registered dialog.
        """
        if isinstance(dialog_or_steps, (list, tuple)):
            dialog: Dialog = Waterfall(dialog_or_steps)
        else:
            dialog = dialog_or_steps

        if dialog_id in self._dialogs:
            logger.warning("Dialog '%s' registered twice; replacing", dialog_id)
        self._dialogs[dialog_id] = dialog
        return dialog

    def find(self, dialog_id: str) -> Dialog | None:
        """Return the dialog registered under dialog_id, or None."""
        return self._dialogs.get(dialog_id)

    def create_context(
        self, context: TurnContext, stack: list[DialogInstance]
    ) -> DialogContext:
        """Create a DialogContext over a conversation's persisted stack."""
        return DialogContext(self, context, stack)

    def __contains__(self, dialog_id: str) -> bool:
        return dialog_id in self._dialogs
