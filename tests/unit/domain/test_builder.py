from scopestyle.domain.builder import style
from scopestyle.domain.style import Style


def test_builder_matches_manual_adds():
    manual = Style()
    manual.add("foo", "width", "100px")
    manual.add("foo", "height", "100px")
    manual.add("bar", "width", "100px")
    manual.add("bar", "height", "100px")

    built = style(
        {
            "foo": {"width": "100px", "height": "100px"},
            "bar": {"width": "100px", "height": "100px"},
        }
    )

    assert built == manual


def test_builder_with_media_matches_manual_adds():
    media = Style()
    media.add("foo", "width", "100px")
    manual = Style()
    manual.add("foo", "width", "100px")
    manual.add_media("query", media)

    built = style(
        {
            "foo": {"width": "100px"},
            "@media query": {"foo": {"width": "100px"}},
        }
    )

    assert built == manual


def test_empty_definition():
    assert style() == Style()
    assert style({}) == Style()


def test_numbers_are_stringified():
    built = style({".a": {"flex": 1, "opacity": 0.5}})

    assert built.declarations(".a") == [("flex", "1"), ("opacity", "0.5")]


def test_import_is_applied_before_local_rules():
    """
    GIVEN an imported style and a local rule for the same selector
    WHEN built
    THEN the local value wins and the imported selector order is kept
    """
    base = style({".root": {"color": "black", "margin": "0"}, ".x": {"a": "b"}})

    built = style({".root": {"color": "red"}, "@import": [base]})

    assert built.selectors() == [".root", ".x"]
    assert built.declarations(".root") == [("color", "red"), ("margin", "0")]


def test_import_accepts_a_single_style():
    base = style({"div": {"color": "red"}})

    assert style({"@import": base}) == base


def test_import_does_not_mutate_the_imported_style():
    base = style({"div": {"color": "red"}})

    built = style({"@import": base, "div": {"color": "blue"}})

    assert base.declarations("div") == [("color", "red")]
    assert built.declarations("div") == [("color", "blue")]


def test_nested_media_and_imports():
    base = style({"@media print": {".a": {"display": "none"}}})

    built = style(
        {
            "@import": base,
            "@media (max-width: 600px)": {
                ".a": {"width": "100%"},
                "@media (orientation: portrait)": {".a": {"height": "auto"}},
            },
        }
    )

    assert [m.query for m in built.media] == ["print", "(max-width: 600px)"]
    assert built.render("P") == (
        "@media print{._P__a{display:none;}}"
        "@media (max-width: 600px){._P__a{width:100%;}"
        "@media (orientation: portrait){._P__a{height:auto;}}}"
    )


def test_media_list_keeps_blocks_with_the_same_query():
    """
    GIVEN two print blocks that cannot share one mapping key
    WHEN they are listed under the bare @media key
    THEN both survive as separate media rules, in list order
    """
    built = style(
        {
            ".a": {"color": "red"},
            "@media": [
                ("print", {".a": {"display": "none"}}),
                ("print", {".b": {"display": "block"}}),
            ],
        }
    )

    assert [m.query for m in built.media] == ["print", "print"]
    assert built.rules("P") == [
        "._P__a{color:red;}",
        "@media print{._P__a{display:none;}}",
        "@media print{._P__b{display:block;}}",
    ]
