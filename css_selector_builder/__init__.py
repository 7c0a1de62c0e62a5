# css_selector_builder/__init__.py
from .builder import (
    SelectorBuilder,
    CssSelectorBuilder,
    EMPTY,
    COMBINATORS,
    combine,
    css_selector_builder
)
from .fragments import FragmentKind, PRIORITY, render_fragment
from .parser import SelectorLoader, SelectorSpec, CombinationSpec
from .exceptions import (
    ValidationError,
    ParseError,
    InvalidSelectorError,
    OrderOrCardinalityError,
    ViolationReason
)
from .utils import (
    is_well_formed,
    ensure_well_formed,
    is_valid_file_path,
    load_json_data
)

__version__ = "0.1.0"

__all__ = [
    # Builder
    "SelectorBuilder",
    "CssSelectorBuilder",
    "EMPTY",
    "COMBINATORS",
    "combine",
    "css_selector_builder",
    "FragmentKind",
    "PRIORITY",
    "render_fragment",

    # Declarative documents
    "SelectorLoader",
    "SelectorSpec",
    "CombinationSpec",

    # Exceptions
    "ValidationError",
    "ParseError",
    "InvalidSelectorError",
    "OrderOrCardinalityError",
    "ViolationReason",

    # Utility functions
    "is_well_formed",
    "ensure_well_formed",
    "is_valid_file_path",
    "load_json_data"
]
