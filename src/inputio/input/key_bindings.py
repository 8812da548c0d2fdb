"""
Key Bindings

Import/export of action mappings as dictionaries and JSON files.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..config.settings import DEFAULT_BINDINGS_PATH
from ..errors import ValidationError
from .input_map import InputMapping, MappingTable

logger = logging.getLogger(__name__)


def export_bindings(table: MappingTable) -> Dict:
    """
    Export bindings as a dictionary.

    Returns:
        Dict with a "mappings" list of {"action", "keys", "buttons"}, sorted by action
    """
    return {
        "mappings": [table.get_mapping(action).to_dict() for action in table]
    }


def parse_bindings(data: Dict) -> List[InputMapping]:
    """
    Parse a bindings dictionary into mappings.

    Raises:
        ValidationError: If the document does not have a "mappings" list of objects
    """
    if not isinstance(data, dict) or not isinstance(data.get("mappings"), list):
        raise ValidationError("bindings must be an object with a 'mappings' list")

    mappings = []
    for entry in data["mappings"]:
        if not isinstance(entry, dict):
            raise ValidationError(f"invalid binding entry: {entry!r}")
        mappings.append(InputMapping.from_dict(entry))
    return mappings


def import_bindings(table: MappingTable, data: Dict, replace: bool = True):
    """
    Import bindings from a dictionary.

    Args:
        table: Table to update
        data: Dict with a "mappings" list
        replace: Overwrite existing mappings of the same actions (set) instead of
            appending to them (add)
    """
    mappings = parse_bindings(data)
    if replace:
        table.set(*mappings)
    else:
        table.add(*mappings)


def load_bindings(path: Optional[Path] = None) -> List[InputMapping]:
    """
    Load bindings from a JSON file.

    Args:
        path: Bindings file (default: DEFAULT_BINDINGS_PATH)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the file is not a valid bindings document
    """
    path = Path(path or DEFAULT_BINDINGS_PATH)
    with open(path, 'r') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"invalid bindings file {path}: {e}") from e

    mappings = parse_bindings(data)
    logger.info("Loaded %d bindings from %s", len(mappings), path)
    return mappings


def save_bindings(table: MappingTable, path: Optional[Path] = None):
    """Save bindings to a JSON file."""
    path = Path(path or DEFAULT_BINDINGS_PATH)
    with open(path, 'w') as f:
        json.dump(export_bindings(table), f, indent=2)
