"""Command line argument options."""

from dataclasses import dataclass, field
from typing import final

from showfiles.features.selection import SelectionCriteria


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for a listing run."""

    patterns: list[str]
    criteria: SelectionCriteria = field(default_factory=SelectionCriteria)
    verbose: bool = False


__all__ = ["ListArgs"]
