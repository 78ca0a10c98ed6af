from abc import ABC, abstractmethod
from typing import ClassVar, TypeVar

from scopestyle.application.registry import StyleRegistry, default_registry
from scopestyle.domain.identity import kind_name_of, scoped_class_name
from scopestyle.domain.style import Style

T = TypeVar("T")


class Styled(ABC):
    """
    Base class for components that own a scoped stylesheet.

    Subclasses implement ``style()`` and wrap whatever they render with
    ``styled()``. The CSS of a kind is injected the first time one of its
    instances renders; class names come from ``class_name()``.

    ``kind`` is the stable key the scope is derived from. Set it explicitly to
    keep class names stable across module moves; otherwise the class's
    fully-qualified name is used.
    """

    kind: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if "kind" not in cls.__dict__:
            cls.kind = kind_name_of(cls)

    @classmethod
    @abstractmethod
    def style(cls) -> Style:
        """Returns the component's style. Called at most once per registry."""
        pass

    @classmethod
    def class_name(cls, local_name: str) -> str:
        return scoped_class_name(cls.kind, local_name)

    @classmethod
    def styled(cls, node: T, registry: StyleRegistry | None = None) -> T:
        """Ensures the kind's CSS is injected, then returns ``node`` unchanged."""
        (registry or default_registry()).ensure_injected(cls.kind, cls.style)
        return node
