"""
Build Utility Functions
-----------------------

Common functions used by the data loaders and build scripts.

Functions:
  - load_yaml_file: Load and parse YAML file
  - expand_localized_names: Expand a {lang: name} mapping into NAME_XX columns
"""

from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional


def load_yaml_file(path: Path) -> dict:
    """
    Load and parse YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data as dictionary

    Raises:
        FileNotFoundError: If file does not exist

    Examples:
        >>> data = load_yaml_file(Path("countries.yaml"))
        >>> data['version']
        '1.0'
    """
    import yaml

    if not path.exists():
        raise FileNotFoundError(f"Required file not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f)


def expand_localized_names(
    names: Optional[Mapping[str, str]],
    columns: Iterable[str] = (),
) -> Dict[str, str]:
    """
    Expand a language -> name mapping into NAME_XX columns.

    Every column in `columns` is present in the result (empty when the
    language is missing); languages outside `columns` are added as well.

    Args:
        names: Mapping of language code to display name
        columns: Column names that must always be present

    Returns:
        Dictionary mapping NAME_XX column names to values

    Examples:
        >>> expand_localized_names({'fr': 'Allemagne', 'de': 'Deutschland'}, ['NAME_EN', 'NAME_FR'])
        {'NAME_EN': '', 'NAME_FR': 'Allemagne', 'NAME_DE': 'Deutschland'}

        >>> expand_localized_names(None, ['NAME_EN'])
        {'NAME_EN': ''}
    """
    result = {column: "" for column in columns}
    if not names:
        return result

    for lang, value in names.items():
        column = f"NAME_{str(lang).upper()}"
        result[column] = "" if value is None else str(value).strip()

    return result


__all__ = [
    "load_yaml_file",
    "expand_localized_names",
]
