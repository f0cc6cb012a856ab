"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def memory_storage():
    """Create empty in-memory storage."""
    from botdialogs.storage import MemoryStorage

    return MemoryStorage()


@pytest_asyncio.fixture
async def sqlite_storage():
    """Create in-memory SQLite storage for testing."""
    from botdialogs.storage import SqliteStorage

    st = SqliteStorage(":memory:")
    await st.init()
    yield st
    await st.close()


@pytest.fixture
def adapter():
    """Create TestAdapter in the default test conversation."""
    from botdialogs.turn import TestAdapter

    return TestAdapter()


@pytest.fixture
def turn_context(adapter):
    """Create a TurnContext for a plain message turn."""
    from botdialogs.turn import TurnContext

    return TurnContext(adapter, adapter.make_activity("hello"))


@pytest.fixture
def conversation_state(memory_storage):
    """Create ConversationState over in-memory storage."""
    from botdialogs.state import ConversationState

    return ConversationState(memory_storage)


@pytest.fixture
def dialogs():
    """Create an empty DialogSet."""
    from botdialogs.dialogs import DialogSet

    return DialogSet()


class RecordingDialog:
    """Dialog that records every hook call.

    Continue and resume hooks are only exposed when requested, so tests can
    build one-shot and transparent dialogs.
    """

    def __init__(self, calls, name, has_continue=False, has_resume=False, on_begin=None):
        self.calls = calls
        self.name = name
        self.on_begin = on_begin
        if has_continue:
            self.dialog_continue = self._continue
        if has_resume:
            self.dialog_resume = self._resume

    async def dialog_begin(self, dc, dialog_args=None):
        self.calls.append((self.name, "begin", dialog_args))
        if self.on_begin is not None:
            return await self.on_begin(dc, dialog_args)
        return None

    async def _continue(self, dc):
        self.calls.append((self.name, "continue", None))
        return None

    async def _resume(self, dc, result=None):
        self.calls.append((self.name, "resume", result))
        return None


@pytest.fixture
def recording_dialog():
    """Factory for RecordingDialog."""
    return RecordingDialog
