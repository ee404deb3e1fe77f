"""
Shared framework for building entity tables from YAML files.

build_countries.py supplies the entity-specific callbacks; this module does
the loading, string coercion, validation report, parquet write and summary.
"""

from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional
from dataclasses import dataclass

import pandas as pd

from globeguess.utils.build_utils import load_yaml_file


@dataclass
class BuildConfig:
    """Configuration for building an entity table."""

    # Input source (one of these required)
    input_yaml: Optional[Path] = None  # For YAML-based entities
    input_data: Optional[dict] = None  # For direct data (e.g., downloaded files)

    # File paths (required)
    output_parquet: Path = None

    # Entity-specific callbacks (required)
    process_entity: Callable[[dict], dict] = None  # Convert YAML entry to DataFrame row
    validate_data: Callable[[pd.DataFrame, Optional[Any]], List[str]] = None  # Return validation issues
    generate_summary: Callable[[pd.DataFrame, Optional[Any]], None] = None  # Print summary stats

    # Entity metadata (required)
    entity_plural: str = None  # "countries"
    yaml_key: Optional[str] = None  # Key in YAML file ("countries")

    # Optional fields
    aux_yaml: Optional[Path] = None  # For countries' aliases.yaml
    aux_yaml_key: Optional[str] = None  # Key in auxiliary YAML


def entities_to_frame(
    entities: Iterable[dict],
    process_entity: Callable[[dict], dict],
) -> pd.DataFrame:
    """Turn source entries into a DataFrame with every column as a string.

    Source order is preserved.
    """
    rows = [process_entity(entity) for entity in entities]
    df = pd.DataFrame(rows)

    for col in df.columns:
        df[col] = df[col].fillna("").astype(str)
        # Replace 'None' strings with empty strings
        df[col] = df[col].replace("None", "")

    return df


def build_entity_database(config: BuildConfig) -> int:
    """
    Generic build process for entity tables.

    Returns:
        0 on success, 1 if validation issues found
    """
    if config.input_data is not None:
        print(f"Building {config.entity_plural} database from direct data")
        entities = config.input_data.get(config.yaml_key, [])
    elif config.input_yaml is not None:
        print(f"Building {config.entity_plural} database from {config.input_yaml}")
        print("Loading YAML files...")
        yaml_data = load_yaml_file(config.input_yaml)
        entities = yaml_data.get(config.yaml_key, [])
    else:
        raise ValueError("Either input_yaml or input_data must be provided")

    # Auxiliary data for validation (e.g., aliases for countries)
    aux_data = None
    if config.aux_yaml and config.aux_yaml.exists():
        aux_yaml_data = load_yaml_file(config.aux_yaml)
        aux_data = aux_yaml_data.get(config.aux_yaml_key, [])
        print(f"Loaded {len(aux_data)} {config.aux_yaml_key}")

    print(f"Processing {len(entities)} {config.entity_plural}...")
    df = entities_to_frame(entities, config.process_entity)

    print("\nValidating data...")
    issues = config.validate_data(df, aux_data)

    if issues:
        print("\n⚠️  Validation issues found:")
        for issue in issues:
            print(f"  - {issue}")
        print()
    else:
        print("✅ All validations passed")

    print(f"\nWriting {len(df)} {config.entity_plural} to {config.output_parquet}")
    df.to_parquet(config.output_parquet, index=False, engine='pyarrow')

    print("\n" + "=" * 60)
    print("BUILD SUMMARY")
    print("=" * 60)
    print(f"Total {config.entity_plural}: {len(df)}")
    print(f"Output file: {config.output_parquet}")
    print(f"File size: {config.output_parquet.stat().st_size / 1024:.1f} KB")

    config.generate_summary(df, aux_data)

    if issues:
        print(f"\n⚠️  Build completed with {len(issues)} validation issues")
        return 1
    else:
        print("\n✅ Build completed successfully")
        return 0


def validate_duplicate_keys(df: pd.DataFrame, key_field: str, name_field: str = "name") -> List[str]:
    """Check for duplicate keys."""
    issues = []
    dup_keys = df[df.duplicated(subset=[key_field], keep=False)]
    if not dup_keys.empty:
        columns = [name_field] if name_field == key_field else [name_field, key_field]
        dup_key_names = dup_keys[columns].to_dict("records")
        issues.append(f"Duplicate {key_field}s found: {dup_key_names}")
    return issues


def validate_required_fields(df: pd.DataFrame, required_fields: List[str], name_field: str = "name") -> List[str]:
    """Check for missing required fields."""
    issues = []
    for field in required_fields:
        if field not in df.columns:
            issues.append(f"Missing column: {field}")
            continue
        missing = df[df[field].isna() | (df[field] == "")]
        if not missing.empty:
            missing_names = missing[name_field].tolist()
            issues.append(f"Missing {field} for entities: {missing_names}")
    return issues
