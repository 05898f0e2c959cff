# ============================================================================
# src/critical_medications/registry/builder.py
# ============================================================================
"""
Registry Build Pipeline

load aliases -> classify -> write artifact. The registry is built completely
in memory before anything is written, so a failed build never leaves a
truncated file behind.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, TypeAdapter, model_validator
from pydantic import ValidationError as PydanticValidationError

from src.utils.exceptions import ConfigurationError
from src.utils.logging import log_performance
from ..constants import Category
from .alias_loader import load_aliases
from .classifier import classify
from .writer import WriteSummary, write_registry

logger = logging.getLogger(__name__)


class ExtraSeed(BaseModel):
    """
    Supplementary critical drug supplied at build time.

    Every addition names its category; there is no default category.
    """
    category: Category
    name: str

    @model_validator(mode="before")
    @classmethod
    def reject_bare_name(cls, value):
        if isinstance(value, str):
            raise ValueError(
                f"bare name '{value}' has no category; use "
                f"{{\"category\": <category>, \"name\": \"{value}\"}}"
            )
        return value


_extra_adapter = TypeAdapter(List[ExtraSeed])


def parse_extra(raw: Optional[str]) -> List[Tuple[Category, str]]:
    """
    Parse the ``--extra`` argument.

    Args:
        raw: Inline JSON array, or path to a file containing one. Elements must
            be ``{"category": <category>, "name": <drug name>}`` objects; a
            bare list of names is rejected because it carries no category.

    Returns:
        (category, name) pairs

    Raises:
        ConfigurationError: If the payload is not valid
    """
    if not raw:
        return []

    text = raw
    if not raw.lstrip().startswith("["):
        try:
            text = Path(raw).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Cannot read --extra file {raw}: {e}") from e

    try:
        seeds = _extra_adapter.validate_json(text)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid --extra payload: {e}") from e

    return [(seed.category, seed.name) for seed in seeds if seed.name.strip()]


@log_performance(logger, "Critical medication registry build")
def build_critical_list(
    aliases_path: Union[str, Path],
    output_path: Union[str, Path],
    extra: Optional[List[Tuple[Category, str]]] = None,
) -> WriteSummary:
    """
    Rebuild the critical medication registry from the alias dataset.

    Args:
        aliases_path: Path to drug_aliases.json
        output_path: Path of the registry artifact to (over)write
        extra: Supplementary (category, name) pairs

    Returns:
        WriteSummary of the written artifact

    Raises:
        LoadError: If the alias dataset cannot be loaded
        WriteError: If the artifact cannot be written
    """
    entries = load_aliases(aliases_path)
    logger.info(f"Loaded {len(entries)} drug alias entries from {aliases_path}")

    registry = classify(entries, extra=extra)
    for category, names in registry.to_dict().items():
        logger.debug(f"  {category}: {len(names)}")

    summary = write_registry(registry, output_path)
    logger.info(summary.message())
    return summary
