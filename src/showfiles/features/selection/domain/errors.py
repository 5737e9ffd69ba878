"""
Summary: Per-argument error taxonomy and the composite exit status fold.
Why: Let each argument report one error class that merges order-independently into the process status.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntFlag
from functools import reduce


class ExitStatus(IntFlag):
    """Process exit status; system and user error classes combine bitwise."""

    OK = 0
    SYSTEM = 1
    USER = 2
    BOTH = SYSTEM | USER


def merge_status(current: ExitStatus, observed: ExitStatus) -> ExitStatus:
    """Merge one observed error class into the running status.

    The merge is monotonic: once both classes were observed the result stays
    ``BOTH``, and observing a class again changes nothing.
    """

    return ExitStatus(current | observed)


def fold_statuses(statuses: Iterable[ExitStatus]) -> ExitStatus:
    """Reduce per-argument statuses into the composite exit status."""

    return reduce(merge_status, statuses, ExitStatus.OK)


class SelectionError(Exception):
    """Base class for failures while resolving one listing argument."""

    status: ExitStatus = ExitStatus.SYSTEM

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{argument}: {message}")
        self.argument = argument


class UserNotFoundError(SelectionError):
    """Literal argument does not exist and is not a glob pattern."""

    status = ExitStatus.USER

    def __init__(self, argument: str) -> None:
        super().__init__(argument, "the system cannot find the file specified")


class InvalidGlobSyntaxError(SelectionError):
    """Glob pattern could not be compiled."""

    status = ExitStatus.USER

    def __init__(self, argument: str, reason: str) -> None:
        super().__init__(argument, f"invalid glob pattern: {reason}")
        self.reason = reason


class PermissionDeniedError(SelectionError):
    """Stat or directory read was refused."""

    status = ExitStatus.SYSTEM

    def __init__(self, argument: str) -> None:
        super().__init__(argument, "permission denied")


class OtherIOFailureError(SelectionError):
    """Any other I/O failure, including resource exhaustion during globbing."""

    status = ExitStatus.SYSTEM

    def __init__(self, argument: str, error: BaseException) -> None:
        super().__init__(argument, f"error: {error}")
        self.error = error


__all__ = [
    "ExitStatus",
    "InvalidGlobSyntaxError",
    "OtherIOFailureError",
    "PermissionDeniedError",
    "SelectionError",
    "UserNotFoundError",
    "fold_statuses",
    "merge_status",
]
