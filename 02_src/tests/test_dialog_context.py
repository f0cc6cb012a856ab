"""Tests for DialogContext."""

import pytest

from botdialogs.dialogs import DialogContext
from botdialogs.errors import DialogNotFound
from botdialogs.models import DialogResult


@pytest.fixture
def calls():
    return []


@pytest.fixture
def stack():
    return []


@pytest.fixture
def dc(dialogs, turn_context, stack):
    return dialogs.create_context(turn_context, stack)


class TestDialogContextInstance:
    """Tests for the instance accessor."""

    def test_instance_empty_stack(self, dc):
        """Test that instance is None for an empty stack."""
        assert dc.instance is None

    def test_instance_is_top_frame(self, dc, stack):
        """Test that instance returns the last frame."""
        stack.extend([{"id": "a", "state": {}}, {"id": "b", "state": {"x": 1}}])
        assert dc.instance == {"id": "b", "state": {"x": 1}}


class TestDialogContextBegin:
    """Tests for DialogContext.begin()."""

    @pytest.mark.asyncio
    async def test_begin_pushes_frame(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that begin pushes exactly one frame with empty state."""
        dialogs.add("a", recording_dialog(calls, "a"))

        await dc.begin("a", {"name": "Ann"})

        assert stack == [{"id": "a", "state": {}}]
        assert calls == [("a", "begin", {"name": "Ann"})]

    @pytest.mark.asyncio
    async def test_begin_increases_depth_by_one(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that each begin adds one frame on top."""
        dialogs.add("a", recording_dialog(calls, "a"))
        dialogs.add("b", recording_dialog(calls, "b"))

        await dc.begin("a")
        await dc.begin("b")

        assert [frame["id"] for frame in stack] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_begin_unknown_dialog(self, dc, stack):
        """Test that begin with an unregistered id raises and leaves the stack alone."""
        with pytest.raises(DialogNotFound) as exc_info:
            await dc.begin("missing")

        assert exc_info.value.dialog_id == "missing"
        assert exc_info.value.operation == "begin"
        assert "missing" in str(exc_info.value)
        assert stack == []

    @pytest.mark.asyncio
    async def test_begin_none_result_reports_active(self, dc, dialogs, calls, recording_dialog):
        """Test that a hook returning None is normalized to active=True."""
        dialogs.add("a", recording_dialog(calls, "a"))

        result = await dc.begin("a")

        assert result == DialogResult(active=True)

    @pytest.mark.asyncio
    async def test_begin_mapping_result(self, dc, dialogs):
        """Test that a mapping with a boolean active flag is honoured."""

        class Fixed:
            def dialog_begin(self, dc, args=None):
                return {"active": False, "result": 3}

        dialogs.add("fixed", Fixed())

        result = await dc.begin("fixed")

        assert result == DialogResult(active=False, result=3)

    @pytest.mark.asyncio
    async def test_begin_non_result_value_is_coerced(self, dc, dialogs):
        """Test that arbitrary return values become active=stack-not-empty."""

        class Chatty:
            def dialog_begin(self, dc, args=None):
                return {"active": "yes"}

        dialogs.add("chatty", Chatty())

        result = await dc.begin("chatty")

        assert result == DialogResult(active=True)

    @pytest.mark.asyncio
    async def test_begin_hook_error_keeps_frame(self, dc, dialogs, stack):
        """Test that a failing begin hook propagates and the pushed frame stays."""

        class Broken:
            async def dialog_begin(self, dc, args=None):
                raise ValueError("boom")

        dialogs.add("broken", Broken())

        with pytest.raises(ValueError, match="boom"):
            await dc.begin("broken")

        assert stack == [{"id": "broken", "state": {}}]


class TestDialogContextContinue:
    """Tests for DialogContext.continue_dialog()."""

    @pytest.mark.asyncio
    async def test_continue_empty_stack(self, dc):
        """Test that continue on an empty stack is a no-op."""
        result = await dc.continue_dialog()
        assert result == DialogResult(active=False)

    @pytest.mark.asyncio
    async def test_continue_calls_hook(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that continue routes to the active dialog's hook."""
        dialogs.add("a", recording_dialog(calls, "a", has_continue=True))
        await dc.begin("a")

        result = await dc.continue_dialog()

        assert calls[-1] == ("a", "continue", None)
        assert result == DialogResult(active=True)
        assert len(stack) == 1

    @pytest.mark.asyncio
    async def test_continue_without_hook_ends_dialog(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that a one-shot dialog is ended and its parent resumed with None."""
        dialogs.add("parent", recording_dialog(calls, "parent", has_resume=True))
        dialogs.add("child", recording_dialog(calls, "child"))
        await dc.begin("parent")
        await dc.begin("child")

        result = await dc.continue_dialog()

        assert calls[-1] == ("parent", "resume", None)
        assert [frame["id"] for frame in stack] == ["parent"]
        assert result == DialogResult(active=True)

    @pytest.mark.asyncio
    async def test_continue_without_hook_on_root(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that continuing a lone one-shot dialog empties the stack."""
        dialogs.add("a", recording_dialog(calls, "a"))
        await dc.begin("a")

        result = await dc.continue_dialog()

        assert result == DialogResult(active=False, result=None)
        assert stack == []

    @pytest.mark.asyncio
    async def test_continue_stale_id(self, dc, stack):
        """Test that a top frame with an unknown id raises DialogNotFound."""
        stack.append({"id": "ghost", "state": {}})

        with pytest.raises(DialogNotFound) as exc_info:
            await dc.continue_dialog()

        assert exc_info.value.operation == "continue"
        assert stack == [{"id": "ghost", "state": {}}]


class TestDialogContextEnd:
    """Tests for DialogContext.end()."""

    @pytest.mark.asyncio
    async def test_end_empty_stack(self, dc):
        """Test that end on an empty stack returns inactive without raising."""
        result = await dc.end()
        assert result == DialogResult(active=False, result=None)

    @pytest.mark.asyncio
    async def test_end_last_dialog_returns_result(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that ending the root dialog surfaces its result."""
        dialogs.add("a", recording_dialog(calls, "a"))
        await dc.begin("a")

        result = await dc.end("R")

        assert result == DialogResult(active=False, result="R")
        assert stack == []

    @pytest.mark.asyncio
    async def test_end_resumes_parent(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that the parent's resume hook receives the result."""
        dialogs.add("parent", recording_dialog(calls, "parent", has_resume=True))
        dialogs.add("child", recording_dialog(calls, "child"))
        await dc.begin("parent")
        await dc.begin("child")

        result = await dc.end(42)

        assert calls[-1] == ("parent", "resume", 42)
        assert result.active is True
        assert [frame["id"] for frame in stack] == ["parent"]

    @pytest.mark.asyncio
    async def test_end_cascades_through_transparent_dialogs(
        self, dc, dialogs, stack, calls, recording_dialog
    ):
        """Test that the result skips ancestors without resume hooks."""
        dialogs.add("c", recording_dialog(calls, "c", has_resume=True))
        dialogs.add("b", recording_dialog(calls, "b"))
        dialogs.add("a", recording_dialog(calls, "a"))
        await dc.begin("c")
        await dc.begin("b")
        await dc.begin("a")

        await dc.end("R")

        resumes = [call for call in calls if call[1] == "resume"]
        assert resumes == [("c", "resume", "R")]
        assert [frame["id"] for frame in stack] == ["c"]

    @pytest.mark.asyncio
    async def test_end_cascades_to_empty_stack(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that a cascade with no resume hook anywhere empties the stack."""
        for name in ("a", "b", "c"):
            dialogs.add(name, recording_dialog(calls, name))
            await dc.begin(name)

        result = await dc.end("R")

        assert result == DialogResult(active=False, result="R")
        assert stack == []

    @pytest.mark.asyncio
    async def test_end_stale_parent(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that an unknown parent id raises after the pop."""
        dialogs.add("a", recording_dialog(calls, "a"))
        stack.append({"id": "ghost", "state": {}})
        await dc.begin("a")

        with pytest.raises(DialogNotFound) as exc_info:
            await dc.end()

        assert exc_info.value.operation == "end"
        assert stack == [{"id": "ghost", "state": {}}]

    @pytest.mark.asyncio
    async def test_end_resume_hook_error_propagates(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that errors from a resume hook reach the caller."""

        class Fragile:
            async def dialog_begin(self, dc, args=None):
                return None

            async def dialog_resume(self, dc, result=None):
                raise RuntimeError("resume failed")

        dialogs.add("fragile", Fragile())
        dialogs.add("child", recording_dialog(calls, "child"))
        await dc.begin("fragile")
        await dc.begin("child")

        with pytest.raises(RuntimeError, match="resume failed"):
            await dc.end()

        assert [frame["id"] for frame in stack] == ["fragile"]


class TestDialogContextReplace:
    """Tests for DialogContext.replace()."""

    @pytest.mark.asyncio
    async def test_replace_swaps_top_frame(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that replace keeps depth and does not resume the parent."""
        dialogs.add("parent", recording_dialog(calls, "parent", has_resume=True))
        dialogs.add("a", recording_dialog(calls, "a"))
        dialogs.add("b", recording_dialog(calls, "b"))
        await dc.begin("parent")
        await dc.begin("a")
        stack[-1]["state"]["counter"] = 1

        await dc.replace("b", {"again": True})

        assert stack == [{"id": "parent", "state": {}}, {"id": "b", "state": {}}]
        assert ("parent", "resume", None) not in calls
        assert calls[-1] == ("b", "begin", {"again": True})

    @pytest.mark.asyncio
    async def test_replace_on_empty_stack_begins(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that replace with nothing to pop behaves like begin."""
        dialogs.add("a", recording_dialog(calls, "a"))

        await dc.replace("a")

        assert stack == [{"id": "a", "state": {}}]

    @pytest.mark.asyncio
    async def test_replace_unknown_dialog_leaves_stack_shorter(
        self, dc, dialogs, stack, calls, recording_dialog
    ):
        """Test that a failed replace does not restore the popped frame."""
        dialogs.add("parent", recording_dialog(calls, "parent"))
        dialogs.add("a", recording_dialog(calls, "a"))
        await dc.begin("parent")
        await dc.begin("a")

        with pytest.raises(DialogNotFound):
            await dc.replace("missing")

        assert [frame["id"] for frame in stack] == ["parent"]


class TestDialogContextEndAll:
    """Tests for DialogContext.end_all()."""

    @pytest.mark.asyncio
    async def test_end_all_keeps_root_frame(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that end_all removes every frame above the bottom one."""
        for name in ("a", "b", "c"):
            dialogs.add(name, recording_dialog(calls, name))
            await dc.begin(name)

        returned = dc.end_all()

        assert returned is dc
        assert [frame["id"] for frame in stack] == ["a"]

    @pytest.mark.asyncio
    async def test_end_all_calls_no_hooks(self, dc, dialogs, stack, calls, recording_dialog):
        """Test that cancelled dialogs are dropped without being resumed or ended."""
        dialogs.add("a", recording_dialog(calls, "a", has_resume=True))
        dialogs.add("b", recording_dialog(calls, "b"))
        await dc.begin("a")
        await dc.begin("b")
        calls.clear()

        dc.end_all()

        assert calls == []
        assert stack[0]["id"] == "a"
        assert len(stack) == 1

    def test_end_all_empty_stack(self, dc, stack):
        """Test that end_all on an empty stack is harmless."""
        assert dc.end_all() is dc
        assert stack == []

    @pytest.mark.asyncio
    async def test_end_all_then_begin(self, dc, dialogs, stack, calls, recording_dialog):
        """Test chaining end_all into begin."""
        for name in ("a", "b"):
            dialogs.add(name, recording_dialog(calls, name))
            await dc.begin(name)
        dialogs.add("fresh", recording_dialog(calls, "fresh"))

        await dc.end_all().begin("fresh")

        assert [frame["id"] for frame in stack] == ["a", "fresh"]


class TestDialogContextPrompt:
    """Tests for DialogContext.prompt()."""

    @pytest.mark.asyncio
    async def test_prompt_with_choices(self, dc, dialogs, calls, recording_dialog):
        """Test that a choice list is wrapped into options."""
        dialogs.add("choice", recording_dialog(calls, "choice"))

        await dc.prompt("choice", "Pick one", ["red", "blue"])

        assert calls[-1] == (
            "choice",
            "begin",
            {"choices": ["red", "blue"], "prompt": "Pick one"},
        )

    @pytest.mark.asyncio
    async def test_prompt_with_options(self, dc, dialogs, calls, recording_dialog):
        """Test that an options mapping is copied, not mutated."""
        dialogs.add("text", recording_dialog(calls, "text"))
        options = {"speak": "<speak>Name?</speak>"}

        await dc.prompt("text", "Name?", options)

        assert calls[-1][2] == {"speak": "<speak>Name?</speak>", "prompt": "Name?"}
        assert options == {"speak": "<speak>Name?</speak>"}


class TestDialogContextSyncHooks:
    """Tests for dialogs implemented with plain functions."""

    @pytest.mark.asyncio
    async def test_sync_hooks(self, dialogs, turn_context):
        """Test that non-coroutine hooks work the same as async ones."""
        seen = []

        class Plain:
            def dialog_begin(self, dc, args=None):
                seen.append("begin")

            def dialog_continue(self, dc):
                seen.append("continue")
                return DialogResult(active=True, result="still here")

        dialogs.add("plain", Plain())
        dc = DialogContext(dialogs, turn_context, [])

        await dc.begin("plain")
        result = await dc.continue_dialog()

        assert seen == ["begin", "continue"]
        assert result == DialogResult(active=True, result="still here")
