# ============================================================================
# src/critical_medications/registry/writer.py
# ============================================================================
"""
Registry Writer

Persists the critical medication registry as a pretty-printed
``{category: [names]}`` JSON document, replacing any previous artifact
atomically.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from src.utils.exceptions import WriteError
from src.utils.file_utils import write_json_atomic
from .classifier import CriticalRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WriteSummary:
    path: Path
    total_entries: int
    category_count: int

    def message(self) -> str:
        return (
            f"Wrote {self.total_entries} canonical critical medication entries "
            f"across {self.category_count} categories to {self.path}"
        )


def write_registry(registry: CriticalRegistry, path: Union[str, Path]) -> WriteSummary:
    """
    Write the registry to disk.

    Args:
        registry: Fully built registry
        path: Destination JSON file; its directory must exist and be writable

    Returns:
        WriteSummary with entry and category counts

    Raises:
        WriteError: If the file cannot be written
    """
    path = Path(path)
    data = registry.to_dict()

    try:
        write_json_atomic(data, path)
    except OSError as e:
        raise WriteError(f"Cannot write critical medication registry to {path}: {e}", path) from e

    summary = WriteSummary(
        path=path,
        total_entries=sum(len(names) for names in data.values()),
        category_count=len(data),
    )
    logger.debug(summary.message())
    return summary
