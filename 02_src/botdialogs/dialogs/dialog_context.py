"""DialogContext: per-turn controller for a conversation's dialog stack."""

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..awaitables import resolve
from ..errors import DialogNotFound
from ..logging_config import get_logger
from ..models import DialogInstance, DialogResult
from ..turn import TurnContext
from .dialog import Dialog, can_continue, can_resume

if TYPE_CHECKING:
    from .dialog_set import DialogSet

logger = get_logger(__name__)


class DialogContext:
    """Runs begin/continue/end/replace transitions over a dialog stack.

    The stack is owned by the caller (usually a list inside conversation
    state) and is mutated in place. Frames are pushed and popped only here.
    Nothing is rolled back when a lookup or hook fails: the stack keeps
    whatever changes were made before the error.
    """

    def __init__(
        self,
        dialogs: "DialogSet",
        context: TurnContext,
        stack: list[DialogInstance],
    ):
        self.dialogs = dialogs
        self.context = context
        self.stack = stack

    @property
    def instance(self) -> DialogInstance | None:
        """The active dialog's frame, or None if the stack is empty."""
        return self.stack[-1] if self.stack else None

    async def begin(self, dialog_id: str, dialog_args: Any = None) -> DialogResult:
        """
        Push a new dialog onto the stack and run its begin hook.

        Args:
            dialog_id: ID of the dialog to start.
            dialog_args: Passed unchanged to the dialog's begin hook.

        Raises:
            DialogNotFound: dialog_id is not registered. The stack is unchanged.
        """
        dialog = self._find(
            dialog_id,
            "begin",
            f"DialogContext.begin(): A dialog with an id of '{dialog_id}' wasn't found.",
        )

        self.stack.append({"id": dialog_id, "state": {}})
        logger.debug("Dialog begin: %s (depth %d)", dialog_id, len(self.stack))
        result = await resolve(dialog.dialog_begin(self, dialog_args))
        return self._ensure_dialog_result(result)

    async def prompt(
        self,
        dialog_id: str,
        prompt: Any = None,
        choices_or_options: list[Any] | Mapping[str, Any] | None = None,
    ) -> DialogResult:
        """Begin a prompt dialog with a `{"prompt": ..., **options}` argument."""
        if isinstance(choices_or_options, (list, tuple)):
            args: dict[str, Any] = {"choices": list(choices_or_options)}
        else:
            args = dict(choices_or_options or {})
        if prompt:
            args["prompt"] = prompt
        return await self.begin(dialog_id, args)

    async def continue_dialog(self) -> DialogResult:
        """
        Route the current turn to the active dialog.

        With an empty stack this is a no-op returning an inactive result. A
        dialog without a continue hook is ended, with no result, so its
        parent resumes as after any other end().
        """
        instance = self.instance
        if instance is None:
            return DialogResult(active=False)

        dialog = self._find(
            instance["id"],
            "continue",
            f"DialogContext.continue_dialog(): Can't continue dialog. "
            f"A dialog with an id of '{instance['id']}' wasn't found.",
        )
        if can_continue(dialog):
            result = await resolve(dialog.dialog_continue(self))
            return self._ensure_dialog_result(result)

        return await self.end()

    async def end(self, result: Any = None) -> DialogResult:
        """
        Pop the active dialog and hand result to its parent.

        The parent's resume hook receives result. A parent without one is
        ended as well and the result moves up again, so ending costs
        O(depth) in the worst case. When the stack empties the final result
        is returned as inactive. Ending an empty stack is not an error.
        """
        if self.stack:
            popped = self.stack.pop()
            logger.debug("Dialog end: %s (depth %d)", popped["id"], len(self.stack))

        instance = self.instance
        if instance is None:
            return DialogResult(active=False, result=result)

        dialog = self._find(
            instance["id"],
            "end",
            f"DialogContext.end(): Can't resume previous dialog. "
            f"A dialog with an id of '{instance['id']}' wasn't found.",
        )
        if can_resume(dialog):
            resumed = await resolve(dialog.dialog_resume(self, result))
            return self._ensure_dialog_result(resumed)

        return await self.end(result)

    def end_all(self) -> "DialogContext":
        """
        Cancel every dialog above the root frame.

        Returns the context so a fresh dialog can be started on top of the root
        in one expression:
        `await dc.end_all().begin("mainMenu")`.
        """
        if self.stack:
            del self.stack[1:]
        return self

    async def replace(self, dialog_id: str, dialog_args: Any = None) -> DialogResult:
        """
        Pop the active dialog without resuming its parent, then begin dialog_id.

        Used for loops and redirects. If begin() fails the popped frame is not
        restored.
        """
        if self.stack:
            popped = self.stack.pop()
            logger.debug("Dialog replace: %s -> %s", popped["id"], dialog_id)
        return await self.begin(dialog_id, dialog_args)

    def _find(self, dialog_id: str, operation: str, message: str) -> Dialog:
        dialog = self.dialogs.find(dialog_id)
        if dialog is None:
            logger.warning(message)
            raise DialogNotFound(dialog_id, operation, message)
        return dialog

    def _ensure_dialog_result(self, result: Any) -> DialogResult:
        if isinstance(result, DialogResult):
            return result
        if isinstance(result, Mapping) and isinstance(result.get("active"), bool):
            return DialogResult(active=result["active"], result=result.get("result"))
        return DialogResult(active=len(self.stack) > 0)
