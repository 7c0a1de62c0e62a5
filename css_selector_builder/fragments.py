from enum import Enum
from typing import Sequence, Set, Tuple

from .exceptions import OrderOrCardinalityError, ViolationReason

class FragmentKind(Enum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

# Order in which fragments must appear inside one compound selector.
PRIORITY: Tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)

SINGLE_OCCURRENCE: Set[FragmentKind] = {
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.PSEUDO_ELEMENT,
}

_AFFIXES = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)

def render_fragment(kind: FragmentKind, value: str) -> str:
    """Render a single fragment with the prefix (and suffix) of its kind."""
    prefix, suffix = _AFFIXES[kind]
    return f"{prefix}{value}{suffix}"

def priority_index(kind: FragmentKind) -> int:
    return PRIORITY.index(kind)

def check_cardinality(fragments: Sequence[FragmentKind], kind: FragmentKind) -> None:
    """
    Reject a second element, id or pseudo-element.

    Args:
        fragments: Fragments already present in the chain
        kind: Kind of the fragment about to be added

    Raises:
        OrderOrCardinalityError: If ``kind`` may occur once and already does
    """
    if kind in SINGLE_OCCURRENCE and kind in fragments:
        raise OrderOrCardinalityError(
            DUPLICATE_MESSAGE, ViolationReason.DUPLICATE, kind
        )

def check_order(fragments: Sequence[FragmentKind]) -> None:
    """
    Walk the fragment sequence and make sure priority indices never decrease.

    Raises:
        OrderOrCardinalityError: On the first fragment ranked below its predecessor
    """
    indices = [priority_index(kind) for kind in fragments]
    for i in range(1, len(indices)):
        if indices[i] < indices[i - 1]:
            raise OrderOrCardinalityError(
                ORDER_MESSAGE, ViolationReason.ORDER, fragments[i]
            )
