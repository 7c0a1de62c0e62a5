import pytest
from css_selector_builder import (
    EMPTY,
    SelectorBuilder,
    OrderOrCardinalityError,
    ViolationReason,
    FragmentKind,
    combine
)

def test_id_and_classes(builder):
    selector = builder.id("main").class_("container").class_("editable")
    assert selector.stringify() == "#main.container.editable"

def test_element_attribute_pseudo_class(builder):
    selector = builder.element("a").attr('href$=".png"').pseudo_class("focus")
    assert selector.stringify() == 'a[href$=".png"]:focus'

def test_every_fragment_kind_in_order(builder):
    selector = (
        builder.element("p")
        .id("intro")
        .class_("lead")
        .attribute("data-x")
        .pseudo_class("hover")
        .pseudo_element("first-line")
    )
    assert selector.stringify() == "p#intro.lead[data-x]:hover::first-line"
    assert selector.fragments == (
        FragmentKind.ELEMENT,
        FragmentKind.ID,
        FragmentKind.CLASS,
        FragmentKind.ATTRIBUTE,
        FragmentKind.PSEUDO_CLASS,
        FragmentKind.PSEUDO_ELEMENT,
    )

def test_repeatable_fragments_never_fail(builder):
    selector = (
        builder.class_("a").class_("b")
        .attribute("x").attribute("y")
        .pseudo_class("hover").pseudo_class("focus")
    )
    assert selector.stringify() == ".a.b[x][y]:hover:focus"

def test_class_before_element_fails(builder):
    with pytest.raises(OrderOrCardinalityError, match="arranged in the following order") as exc:
        builder.class_("a").element("div")
    assert exc.value.reason is ViolationReason.ORDER
    assert exc.value.kind is FragmentKind.ELEMENT

@pytest.mark.parametrize("chain", [
    lambda b: b.id("a").element("div"),
    lambda b: b.pseudo_class("hover").class_("x"),
    lambda b: b.pseudo_element("after").pseudo_class("hover"),
    lambda b: b.attribute("x").id("main"),
])
def test_order_violations(builder, chain):
    with pytest.raises(OrderOrCardinalityError) as exc:
        chain(builder)
    assert exc.value.reason is ViolationReason.ORDER

def test_second_id_fails(builder):
    with pytest.raises(OrderOrCardinalityError, match="should not occur more than one time") as exc:
        builder.id("a").id("b")
    assert exc.value.reason is ViolationReason.DUPLICATE
    assert exc.value.kind is FragmentKind.ID

@pytest.mark.parametrize("chain", [
    lambda b: b.element("div").element("span"),
    lambda b: b.pseudo_element("before").pseudo_element("after"),
    lambda b: b.element("div").class_("x").element("span"),
])
def test_duplicate_violations(builder, chain):
    with pytest.raises(OrderOrCardinalityError) as exc:
        chain(builder)
    assert exc.value.reason is ViolationReason.DUPLICATE

def test_combine_siblings(builder):
    selector = builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("table").id("data")
    )
    assert selector.stringify() == "div#main + table#data"
    assert selector.fragments == (FragmentKind.ELEMENT, FragmentKind.ID)

def test_nested_combine(builder):
    selector = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)")
            )
        )
    )
    assert selector.stringify() == (
        "div#main.container.draggable + table#data ~ "
        "tr:nth-of-type(even)   td:nth-of-type(even)"
    )

def test_left_nested_combine_renders_flat(builder):
    a = builder.element("a")
    b = builder.class_("b")
    c = builder.id("c")
    selector = combine(combine(a, "+", b), "~", c)
    assert selector.stringify() == a.stringify() + " + " + b.stringify() + " ~ " + c.stringify()

def test_combine_accepts_unknown_combinator(builder, caplog):
    selector = builder.combine(builder.element("ul"), "||", builder.element("li"))
    assert selector.stringify() == "ul || li"
    assert "Unknown combinator" in caplog.text

def test_combine_known_combinator_does_not_warn(builder, caplog):
    builder.combine(builder.element("ul"), ">", builder.element("li"))
    assert "Unknown combinator" not in caplog.text

def test_fragment_after_combine_extends_right_compound(builder):
    selector = builder.combine(builder.element("ul"), ">", builder.element("li"))
    extended = selector.class_("active")
    assert extended.stringify() == "ul > li.active"
    assert extended.fragments == (FragmentKind.ELEMENT, FragmentKind.CLASS)

@pytest.mark.parametrize("right, chain", [
    (lambda b: b.element("li").id("b"), lambda s: s.id("a")),
    (lambda b: b.element("li"), lambda s: s.element("div")),
    (lambda b: b.class_("item").pseudo_element("after"), lambda s: s.pseudo_element("before")),
])
def test_combined_builder_rejects_duplicates(builder, right, chain):
    selector = builder.combine(builder.element("ul"), ">", right(builder))
    with pytest.raises(OrderOrCardinalityError) as exc:
        chain(selector)
    assert exc.value.reason is ViolationReason.DUPLICATE

@pytest.mark.parametrize("right, chain", [
    (lambda b: b.element("li").pseudo_element("after"), lambda s: s.class_("x")),
    (lambda b: b.class_("item"), lambda s: s.id("main")),
])
def test_combined_builder_rejects_order_violations(builder, right, chain):
    selector = builder.combine(builder.element("ul"), ">", right(builder))
    with pytest.raises(OrderOrCardinalityError) as exc:
        chain(selector)
    assert exc.value.reason is ViolationReason.ORDER

def test_nested_combine_checks_innermost_right(builder):
    selector = builder.combine(
        builder.element("div"),
        "+",
        builder.combine(builder.element("table"), "~", builder.element("tr").id("row"))
    )
    with pytest.raises(OrderOrCardinalityError):
        selector.id("other")
    assert selector.pseudo_class("hover").stringify() == "div + table ~ tr#row:hover"

def test_stringify_is_idempotent(builder):
    selector = builder.element("span")
    assert selector.stringify() == "span"
    assert selector.stringify() == "span"
    assert builder.stringify(selector) == "span"
    assert str(selector) == "span"

def test_builders_are_immutable(builder):
    base = builder.element("div")
    first = base.class_("one")
    second = base.class_("two")
    assert base.stringify() == "div"
    assert first.stringify() == "div.one"
    assert second.stringify() == "div.two"
    with pytest.raises(AttributeError):
        base.rendered = "span"

def test_failed_chain_leaves_builder_usable(builder):
    base = builder.id("main")
    with pytest.raises(OrderOrCardinalityError):
        base.id("other")
    assert base.class_("ok").stringify() == "#main.ok"

def test_empty_builder():
    assert EMPTY == SelectorBuilder()
    assert EMPTY.stringify() == ""
    assert EMPTY.fragments == ()
    assert EMPTY.element("div").stringify() == "div"
    assert EMPTY.stringify() == ""
