# ============================================================================
# src/critical_medications/registry/alias_loader.py
# ============================================================================
"""
Drug Alias Loader

Reads the canonical drug alias dataset: a JSON array of
``{"name": str, "aliases": [str, ...]}`` objects.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from src.utils.exceptions import LoadError
from src.utils.file_utils import read_json

logger = logging.getLogger(__name__)


class AliasEntry(BaseModel):
    """Canonical drug name with its trade/brand aliases."""
    name: str = Field(min_length=1)
    aliases: List[str]

    @property
    def canonical(self) -> str:
        """Lower-cased canonical name"""
        return self.name.lower()


_entries_adapter = TypeAdapter(List[AliasEntry])


def parse_aliases(data) -> List[AliasEntry]:
    """
    Validate already-decoded alias data.

    Args:
        data: Decoded JSON document

    Returns:
        Alias entries in dataset order

    Raises:
        LoadError: If the document is not an array of {name, aliases} objects
    """
    try:
        return _entries_adapter.validate_python(data)
    except PydanticValidationError as e:
        raise LoadError(f"Alias data does not match the expected shape: {e}") from e


def load_aliases(path: Union[str, Path]) -> List[AliasEntry]:
    """
    Load the drug alias dataset from disk.

    Args:
        path: Path to drug_aliases.json

    Returns:
        Alias entries in dataset order

    Raises:
        LoadError: If the file is missing, unreadable, not JSON, or malformed
    """
    path = Path(path)

    try:
        data = read_json(path)
    except FileNotFoundError as e:
        raise LoadError(f"Alias file not found: {path}", path) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Alias file is not valid JSON: {path}: {e}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"Cannot read alias file {path}: {e}", path) from e

    try:
        entries = parse_aliases(data)
    except LoadError as e:
        raise LoadError(f"{path}: {e}", path) from e

    logger.debug(f"Loaded {len(entries)} alias entries from {path}")
    return entries
