"""Shared data loading utilities.

Finds packaged data files (with an optional environment variable override)
and reads tabular files by extension.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

import pandas as pd

logger = logging.getLogger(__name__)


def find_data_file(
    module_file: str,
    subdirectory: str,
    filenames: List[str],
    module_local_data: bool = False,
    env_var: Optional[str] = None,
) -> Optional[Path]:
    """Find data file by searching standard locations.

    Search priority:
    0. Environment variable override (if env_var is given and set)
    1. Module-local data: {module_dir}/data/ (if module_local_data=True)
    2. Package data: globeguess/data/{subdirectory}/

    Args:
        module_file: __file__ from the calling module
        subdirectory: Subdirectory name (e.g., 'countries')
        filenames: Candidate filenames in priority order (e.g., ['countries.parquet'])
        module_local_data: If True, search module_dir/data/ first
        env_var: Environment variable holding an explicit path

    Returns:
        Path to found file, or None if not found

    Examples:
        >>> path = find_data_file(__file__, 'countries', ['countries.parquet'],
        ...                       module_local_data=True)
    """
    if env_var:
        env_path = os.environ.get(env_var)
        if env_path:
            p = Path(env_path)
            if p.exists():
                logger.debug("Using %s from %s", p, env_var)
                return p
            logger.warning("%s points at missing file %s, searching defaults", env_var, p)

    if module_local_data:
        data_dir = Path(module_file).parent / "data"
        for filename in filenames:
            p = data_dir / filename
            if p.exists():
                return p

    pkg_dir = Path(module_file).parent.parent
    data_dir = pkg_dir / "data" / subdirectory
    for filename in filenames:
        p = data_dir / filename
        if p.exists():
            return p

    return None


def load_parquet_or_csv(file_path: Path) -> pd.DataFrame:
    """Load DataFrame from parquet or CSV file based on extension.

    CSV columns are read as strings with empty cells kept empty, to match
    the all-string parquet tables.

    Raises:
        ValueError: If file extension is not .parquet or .csv
    """
    if file_path.suffix == ".parquet":
        return pd.read_parquet(file_path)
    elif file_path.suffix == ".csv":
        return pd.read_csv(file_path, dtype=str, keep_default_na=False)
    else:
        raise ValueError(f"Unsupported file format: {file_path.suffix}. Use .parquet or .csv")


def format_not_found_error(
    subdirectory: str,
    searched_locations: List[Tuple[str, Path]],
    fix_instructions: List[str],
) -> str:
    """Format a helpful FileNotFoundError message.

    Args:
        subdirectory: Data subdirectory name (e.g., 'countries')
        searched_locations: List of (description, path) tuples for locations searched
        fix_instructions: List of commands/instructions to fix the issue

    Returns:
        Formatted error message string
    """
    lines = [f"No {subdirectory} data found in standard locations.\n"]

    lines.append("Searched:")
    for i, (desc, path) in enumerate(searched_locations, 1):
        lines.append(f"  {i}. {desc}: {path}")

    lines.append("\nTo fix:")
    for instruction in fix_instructions:
        lines.append(f"  • {instruction}")

    return "\n".join(lines)


__all__ = [
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
]
