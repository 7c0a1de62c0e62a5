"""
Immutable, chainable CSS selector builder.

Every fragment method returns a new ``SelectorBuilder``; the receiver is left
untouched, so a valid builder can always be reused after a failed chain.

    >>> css_selector_builder.id("main").class_("container").class_("editable").stringify()
    '#main.container.editable'
"""
from dataclasses import dataclass, replace
from typing import Tuple
import logging

from .fragments import (
    FragmentKind,
    check_cardinality,
    check_order,
    render_fragment
)

logger = logging.getLogger(__name__)

COMBINATORS: Tuple[str, ...] = (" ", ">", "+", "~")

@dataclass(frozen=True)
class SelectorBuilder:
    """A compound or combined selector under construction."""
    fragments: Tuple[FragmentKind, ...] = ()
    rendered: str = ""

    def _extend(self, kind: FragmentKind, value: str) -> "SelectorBuilder":
        check_cardinality(self.fragments, kind)
        fragments = self.fragments + (kind,)
        check_order(fragments)
        return replace(
            self,
            fragments=fragments,
            rendered=self.rendered + render_fragment(kind, value)
        )

    def element(self, value: str) -> "SelectorBuilder":
        """Append a type selector."""
        return self._extend(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> "SelectorBuilder":
        """Append ``#value``."""
        return self._extend(FragmentKind.ID, value)

    def class_(self, value: str) -> "SelectorBuilder":
        """Append ``.value``."""
        return self._extend(FragmentKind.CLASS, value)

    def attribute(self, value: str) -> "SelectorBuilder":
        """Append ``[value]``; the bracket interior is taken verbatim."""
        return self._extend(FragmentKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> "SelectorBuilder":
        """Append ``:value``."""
        return self._extend(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> "SelectorBuilder":
        """Append ``::value``."""
        return self._extend(FragmentKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Return the rendered selector."""
        return self.rendered

    def __str__(self) -> str:
        return self.rendered

EMPTY = SelectorBuilder()

def combine(left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
    """
    Join two built selectors with a combinator.

    The combinator is rendered verbatim between single spaces, so the
    descendant combinator ``" "`` produces three spaces. Glyphs outside the
    four CSS combinators are accepted but logged.

    Args:
        left: Selector on the left-hand side
        combinator: One of ``" "``, ``">"``, ``"+"``, ``"~"``
        right: Selector on the right-hand side

    Returns:
        A new builder that keeps the fragments of ``right``, so further
        fragments are checked against the compound they extend
    """
    if combinator not in COMBINATORS:
        logger.warning(f"Unknown combinator {combinator!r}, rendering it verbatim")
    return SelectorBuilder(
        fragments=right.fragments,
        rendered=f"{left.rendered} {combinator} {right.rendered}"
    )

class CssSelectorBuilder:
    """Facade starting every chain from the shared empty builder."""

    def __init__(self, empty: SelectorBuilder = EMPTY):
        self.empty = empty

    def element(self, value: str) -> SelectorBuilder:
        return self.empty.element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self.empty.id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self.empty.class_(value)

    def attribute(self, value: str) -> SelectorBuilder:
        return self.empty.attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self.empty.pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self.empty.pseudo_element(value)

    def combine(self, left: SelectorBuilder, combinator: str, right: SelectorBuilder) -> SelectorBuilder:
        return combine(left, combinator, right)

    def stringify(self, selector: SelectorBuilder) -> str:
        return selector.stringify()

css_selector_builder = CssSelectorBuilder()
