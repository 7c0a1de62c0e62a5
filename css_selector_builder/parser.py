from typing import Any, Dict, List, Optional, Tuple, Union
import json
from pathlib import Path
import logging

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic import ValidationError as ModelValidationError

from .builder import CssSelectorBuilder, SelectorBuilder, css_selector_builder
from .exceptions import ParseError
from .utils import ensure_well_formed, is_valid_file_path, load_json_data

logger = logging.getLogger(__name__)

class SelectorSpec(BaseModel):
    """Declarative description of one compound selector."""
    model_config = ConfigDict(extra="forbid")

    element: Optional[str] = None
    id: Optional[str] = None
    classes: List[str] = Field(default_factory=list)
    attributes: List[str] = Field(default_factory=list)
    pseudo_classes: List[str] = Field(default_factory=list)
    pseudo_element: Optional[str] = None

    def build(self, factory: CssSelectorBuilder) -> SelectorBuilder:
        # Fields are applied in priority order, so the chain is always valid.
        selector = factory.empty
        if self.element is not None:
            selector = selector.element(self.element)
        if self.id is not None:
            selector = selector.id(self.id)
        for value in self.classes:
            selector = selector.class_(value)
        for value in self.attributes:
            selector = selector.attribute(value)
        for value in self.pseudo_classes:
            selector = selector.pseudo_class(value)
        if self.pseudo_element is not None:
            selector = selector.pseudo_element(self.pseudo_element)
        return selector

class CombinationSpec(BaseModel):
    """``{"combine": [left, combinator, right]}``, operands may nest."""
    model_config = ConfigDict(extra="forbid")

    combine: Tuple[Union[SelectorSpec, "CombinationSpec"], str, Union[SelectorSpec, "CombinationSpec"]]

    def build(self, factory: CssSelectorBuilder) -> SelectorBuilder:
        left, combinator, right = self.combine
        return factory.combine(left.build(factory), combinator, right.build(factory))

CombinationSpec.model_rebuild()

class SelectorDocument(RootModel[Dict[str, Union[SelectorSpec, CombinationSpec]]]):
    pass

class SelectorLoader:
    """Builds named selectors from JSON documents."""

    def __init__(self, factory: Optional[CssSelectorBuilder] = None, check_syntax: bool = False):
        self.factory = factory or css_selector_builder
        self.check_syntax = check_syntax

    def load(self, data: Union[str, Path, Dict[str, Any]]) -> Dict[str, str]:
        """
        Build every selector of a document.

        Args:
            data: JSON string, file path, or already decoded mapping

        Returns:
            Mapping of selector name to rendered selector

        Raises:
            ParseError: If the document cannot be read or has the wrong shape
            InvalidSelectorError: If ``check_syntax`` is set and cssselect
                rejects a rendered selector
        """
        if isinstance(data, Path) or (isinstance(data, str) and is_valid_file_path(data)):
            return self.parse_json_file(data)
        if isinstance(data, str):
            return self.parse_json_string(data)
        return self._build_selectors(data)

    def parse_json_string(self, json_string: str) -> Dict[str, str]:
        """Build selectors from a JSON string."""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON string: {str(e)}") from e
        return self._build_selectors(data)

    def parse_json_file(self, file_path: Union[str, Path]) -> Dict[str, str]:
        """Build selectors from a JSON file."""
        if not is_valid_file_path(file_path):
            raise ParseError(f"Invalid or non-existent file: {file_path}")
        return self._build_selectors(load_json_data(file_path))

    def _build_selectors(self, data: Any) -> Dict[str, str]:
        try:
            document = SelectorDocument.model_validate(data)
        except ModelValidationError as e:
            raise ParseError(f"Invalid selector data format: {str(e)}") from e

        selectors = {}
        for name, spec in document.root.items():
            rendered = spec.build(self.factory).stringify()
            if self.check_syntax:
                ensure_well_formed(rendered)
            logger.debug(f"Built selector {name}: {rendered}")
            selectors[name] = rendered
        return selectors
