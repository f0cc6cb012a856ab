"""Dialog stack data models."""

from dataclasses import dataclass
from typing import Any, TypedDict


class DialogInstance(TypedDict):
    """One frame of the dialog stack.

    Kept as a plain dict so the stack can live inside a JSON state record.
    """

    id: str
    state: dict[str, Any]


@dataclass
class DialogResult:
    """Outcome of a dialog stack transition."""

    active: bool
    result: Any = None
