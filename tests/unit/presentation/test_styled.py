from unittest.mock import patch

import pytest

from scopestyle.application.registry import StyleRegistry
from scopestyle.domain.builder import style
from scopestyle.domain.identity import prefix_of
from scopestyle.domain.style import Style
from scopestyle.presentation import styled as styled_module
from scopestyle.presentation.styled import Styled


class Card(Styled):
    kind = "tests.Card"

    @classmethod
    def style(cls) -> Style:
        return style({".box": {"width": "10px"}})


class Badge(Styled):
    @classmethod
    def style(cls) -> Style:
        return style({".box": {"width": "20px"}})


class WideBadge(Badge):
    pass


def test_explicit_kind_is_kept():
    assert Card.kind == "tests.Card"


def test_default_kind_is_qualified_class_name():
    assert Badge.kind == f"{__name__}.Badge"


def test_subclass_gets_its_own_kind():
    assert WideBadge.kind == f"{__name__}.WideBadge"
    assert WideBadge.class_name("box") != Badge.class_name("box")


def test_class_name_uses_kind_prefix():
    assert Card.class_name("box") == f"_{prefix_of('tests.Card')}__box"


def test_class_name_does_not_need_injection(registry):
    Card.class_name("box")

    assert not registry.is_injected(Card.kind)


def test_styled_returns_node_unchanged(registry):
    node = object()

    assert Card.styled(node, registry) is node


def test_styled_injects_once(registry, sheet):
    """
    GIVEN a component rendered three times
    THEN its rules are inserted once
    """
    for _ in range(3):
        Card.styled("<div/>", registry)

    assert sheet.css_rules == [f"._{prefix_of('tests.Card')}__box{{width:10px;}}"]
    assert len(registry.reports) == 1


def test_kinds_with_same_local_names_are_isolated(registry, sheet):
    Card.styled(None, registry)
    Badge.styled(None, registry)

    assert sheet.css_rules == [
        f"{'.' + Card.class_name('box')}{{width:10px;}}",
        f"{'.' + Badge.class_name('box')}{{width:20px;}}",
    ]


def test_styled_uses_default_registry_when_none_given(sheet):
    fallback = StyleRegistry(sheet_factory=lambda: sheet)

    with patch.object(styled_module, "default_registry", return_value=fallback):
        Card.styled("node")

    assert fallback.is_injected(Card.kind)


def test_base_class_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Styled()
