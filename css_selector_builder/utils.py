from typing import Dict, Any, Union
from pathlib import Path
import json
import logging

import cssselect

from .exceptions import InvalidSelectorError, ParseError

logger = logging.getLogger(__name__)

def is_valid_file_path(path: Union[str, Path]) -> bool:
    """Check if a given path is a valid file path."""
    try:
        return Path(path).exists() and Path(path).is_file()
    except (OSError, ValueError):
        return False

def load_json_data(file_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a selector document from a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        Dict containing the JSON data

    Raises:
        ParseError: If file cannot be read or JSON is invalid
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON format: {str(e)}") from e
    except OSError as e:
        logger.warning(f"Could not read selector file {file_path}: {str(e)}")
        raise ParseError(f"Error reading file: {str(e)}") from e

def is_well_formed(selector: str) -> bool:
    """Check whether cssselect accepts the rendered selector."""
    if not selector or not isinstance(selector, str):
        return False
    try:
        cssselect.parse(selector)
        return True
    except cssselect.SelectorSyntaxError:
        return False

def ensure_well_formed(selector: str) -> str:
    """
    Return the selector unchanged if it parses, otherwise raise.

    Raises:
        InvalidSelectorError: If cssselect rejects the selector
    """
    try:
        cssselect.parse(selector)
    except cssselect.SelectorSyntaxError as e:
        raise InvalidSelectorError(f"Invalid CSS selector {selector!r}: {str(e)}") from e
    return selector
