"""Shared utilities for the globeguess package."""

from globeguess.utils.dataloader import (
    find_data_file,
    load_parquet_or_csv,
    format_not_found_error,
)
from globeguess.utils.normalize import (
    strip_accents,
    fold_accents,
    slugify_name,
    normalize_quotes,
)
from globeguess.utils.editdistance import (
    substitution_cost,
    weighted_distance,
    distance_lower_bound,
    block_candidates,
)
from globeguess.utils.build_utils import (
    load_yaml_file,
    expand_localized_names,
)

__all__ = [
    # Data loading
    "find_data_file",
    "load_parquet_or_csv",
    "format_not_found_error",
    # Normalization
    "strip_accents",
    "fold_accents",
    "slugify_name",
    "normalize_quotes",
    # Edit distance
    "substitution_cost",
    "weighted_distance",
    "distance_lower_bound",
    "block_candidates",
    # Build utilities
    "load_yaml_file",
    "expand_localized_names",
]
