# Path: `src/showfiles/features/selection/__init__.py`
# Summary: Export selection domain types and use cases.
# Why: Provide a stable import surface for the CLI and tests.

from .domain.errors import (
    ExitStatus,
    InvalidGlobSyntaxError,
    OtherIOFailureError,
    PermissionDeniedError,
    SelectionError,
    UserNotFoundError,
    fold_statuses,
    merge_status,
)
from .domain.models import (
    Entry,
    SelectionCriteria,
    SortDirection,
    SortKey,
    SortSpec,
    TypeFilter,
    VisibilityFilter,
    needs_metadata,
)
from .usecases.globbing import GlobExpander, GlobOptions, GlobSyntaxError, is_glob
from .usecases.selector import Selection, SelectionKind, Selector
from .usecases.sorter import Sorter

__all__ = [
    "Entry",
    "ExitStatus",
    "GlobExpander",
    "GlobOptions",
    "GlobSyntaxError",
    "InvalidGlobSyntaxError",
    "OtherIOFailureError",
    "PermissionDeniedError",
    "Selection",
    "SelectionCriteria",
    "SelectionError",
    "SelectionKind",
    "Selector",
    "SortDirection",
    "SortKey",
    "SortSpec",
    "Sorter",
    "TypeFilter",
    "UserNotFoundError",
    "VisibilityFilter",
    "fold_statuses",
    "is_glob",
    "merge_status",
    "needs_metadata",
]
