from scopestyle.adapters.memory_sheet import InMemoryStyleSheet
from scopestyle.adapters.streamlit_sheet import StreamlitStyleSheet
from scopestyle.config import SinkKind
from scopestyle.domain.ports import IStyleSheet


def create_sheet(kind: SinkKind) -> IStyleSheet:
    """Factory for the configured stylesheet sink."""
    if kind is SinkKind.STREAMLIT:
        return StreamlitStyleSheet()
    return InMemoryStyleSheet()


__all__ = [
    "InMemoryStyleSheet",
    "StreamlitStyleSheet",
    "create_sheet",
]
