import pytest
import streamlit as st

from scopestyle.adapters.memory_sheet import InMemoryStyleSheet
from scopestyle.application.registry import StyleRegistry
from scopestyle.domain.style import Style


class MockSessionState(dict):
    """
    Mock for st.session_state that behaves like both a dict and an object.
    Allows both dict-style and attribute-style access.
    """

    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        try:
            del self[name]
        except KeyError as err:
            raise AttributeError(
                f"'MockSessionState' object has no attribute '{name}'"
            ) from err


@pytest.fixture(autouse=True)
def mock_streamlit_session():
    """
    Auto-use fixture that ensures st.session_state exists for all tests.
    Uses a custom MockSessionState that supports both dict and attribute access.
    """
    original_session_state = getattr(st, "session_state", None)

    st.session_state = MockSessionState()

    yield st.session_state

    st.session_state.clear()

    if original_session_state is not None:
        st.session_state = original_session_state


@pytest.fixture
def sheet():
    """A clean, empty in-memory stylesheet."""
    return InMemoryStyleSheet()


@pytest.fixture
def registry(sheet):
    """A fresh registry bound to the `sheet` fixture."""
    return StyleRegistry(sheet_factory=lambda: sheet)


@pytest.fixture
def box_style():
    style = Style()
    style.add(".box", "width", "10px")
    style.add(".box:hover", "color", "red")
    return style
