"""Waterfall: a dialog built from a sequence of step functions."""

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Sequence

from ..awaitables import resolve
from ..models import ActivityTypes, DialogResult

if TYPE_CHECKING:
    from .dialog_context import DialogContext

WaterfallStep = Callable[["DialogContext", Any, Callable[[Any], Awaitable[Any]]], Any]


class Waterfall:
    """Runs steps in order, one per turn or child-dialog result.

    Each step is called as `step(dc, args, next)`. A step typically sends a
    prompt or begins a child dialog; the following step receives the user's
    reply or the child's result. Calling `await next(value)` skips straight to
    the following step. Running past the last step ends the dialog with the
    last value passed along.
    """

    def __init__(self, steps: Sequence[WaterfallStep]):
        self.steps = list(steps)

    async def dialog_begin(self, dc: "DialogContext", dialog_args: Any = None) -> Any:
        dc.instance["state"]["step"] = 0
        return await self._run_step(dc, dialog_args)

    async def dialog_continue(self, dc: "DialogContext") -> Any:
        request = dc.context.request
        if request is None or request.type != ActivityTypes.MESSAGE.value:
            return DialogResult(active=True)
        dc.instance["state"]["step"] += 1
        return await self._run_step(dc, request.text)

    async def dialog_resume(self, dc: "DialogContext", result: Any = None) -> Any:
        dc.instance["state"]["step"] += 1
        return await self._run_step(dc, result)

    async def _run_step(self, dc: "DialogContext", result: Any) -> Any:
        frame = dc.instance
        step = frame["state"]["step"]
        if not 0 <= step < len(self.steps):
            return await dc.end(result)

        async def next_step(value: Any = None) -> Any:
            frame["state"]["step"] += 1
            return await self._run_step(dc, value)

        return await resolve(self.steps[step](dc, result, next_step))
