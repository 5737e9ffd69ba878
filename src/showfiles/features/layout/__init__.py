# Path: `src/showfiles/features/layout/__init__.py`
# Summary: Export layout configuration and the column-fit engine.
# Why: Provide a stable import surface for the renderer and tests.

from .domain.models import (
    DEFAULT_MIN_COLUMN_SPACING,
    DEFAULT_TERMINAL_WIDTH,
    LayoutConfig,
    SpaceStyle,
)
from .usecases.engine import (
    RowPacker,
    Rows,
    choose_column_widths,
    column_offsets,
    column_widths,
    is_dense_enough,
    layout_rows,
)

__all__ = [
    "DEFAULT_MIN_COLUMN_SPACING",
    "DEFAULT_TERMINAL_WIDTH",
    "LayoutConfig",
    "RowPacker",
    "Rows",
    "SpaceStyle",
    "choose_column_widths",
    "column_offsets",
    "column_widths",
    "is_dense_enough",
    "layout_rows",
]
