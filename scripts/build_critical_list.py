#!/usr/bin/env python3
"""
Critical Medication List Builder

Builds the critical medication registry from:
1. Broad classes (antibiotics, antifungals, antivirals/antiretrovirals)
   recognised by name patterns
2. Explicit drug names/brands per category
3. Optional additions fed via --extra

Reads data/drug_aliases.json and writes data/critical_medications.json
(paths are configurable; see RegistrySettings).

Usage:
    python scripts/build_critical_list.py
    python scripts/build_critical_list.py --extra '[{"category": "opioids", "name": "morphine"}]'
    python scripts/build_critical_list.py --extra extra_criticals.json --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.critical_medications.config import LOG_LEVELS, logging_settings, registry_settings
from src.critical_medications.registry import build_critical_list, parse_extra
from src.utils.exceptions import ConfigurationError, LoadError, WriteError
from src.utils.logging import setup_logging

logger = logging.getLogger("build_critical_list")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the critical medication registry")
    parser.add_argument(
        "--aliases", type=Path, default=None,
        help=f"Drug alias dataset (default: {registry_settings.aliases_path})"
    )
    parser.add_argument(
        "--output", type=Path, default=None,
        help=f"Registry output file (default: {registry_settings.output_path})"
    )
    parser.add_argument(
        "--extra", type=str, default=None,
        help=(
            'JSON array (inline or file path) of {"category": ..., "name": ...} '
            'objects; every addition must name its category'
        )
    )
    parser.add_argument(
        "--log-level", type=str.upper, default=logging_settings.LOG_LEVEL,
        choices=LOG_LEVELS,
        help="Logging level"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=logging_settings.LOG_FILE,
        format_json=logging_settings.LOG_JSON,
    )

    aliases_path = args.aliases or registry_settings.aliases_path
    output_path = args.output or registry_settings.output_path

    try:
        extra = parse_extra(args.extra)
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_USAGE

    try:
        build_critical_list(aliases_path, output_path, extra=extra)
    except LoadError as e:
        logger.error(f"Failed to load drug aliases from {e.path or aliases_path}: {e}")
        return EXIT_FAILURE
    except WriteError as e:
        logger.error(f"Failed to write critical medication registry to {e.path or output_path}: {e}")
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
