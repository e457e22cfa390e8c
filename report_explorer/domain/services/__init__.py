"""Domain services package."""

from .aggregation import (
    filter_rows,
    group_key,
    group_rows,
    summarize,
    summarize_pairs,
)
from .generator import (
    compute_seed,
    generate_detail_rows,
    make_row_id,
    make_run,
    scenario_factor,
)
from .treemap import TREEMAP_INSET, layout_treemap, split_index

__all__ = [
    "compute_seed",
    "generate_detail_rows",
    "make_row_id",
    "make_run",
    "scenario_factor",
    "filter_rows",
    "group_key",
    "group_rows",
    "summarize",
    "summarize_pairs",
    "TREEMAP_INSET",
    "layout_treemap",
    "split_index",
]
