from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .fragments import FragmentKind


class ViolationReason(Enum):
    DUPLICATE = "duplicate"
    ORDER = "order"

class ValidationError(Exception):
    """Base validation error."""
    pass

class ParseError(Exception):
    """Error parsing input data."""
    pass

class InvalidSelectorError(ValidationError):
    """Rendered selector rejected by the CSS grammar."""
    pass

class OrderOrCardinalityError(ValidationError):
    """A fragment broke the single-occurrence or priority-order rule."""

    def __init__(self, message: str, reason: ViolationReason, kind: Optional["FragmentKind"] = None):
        super().__init__(message)
        self.reason = reason
        self.kind = kind
