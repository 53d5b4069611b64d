"""Exceptions raised by graphicloader."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from graphicloader.util.config import LocationPolicy


class ArgumentErrorReason(str, Enum):
    MISSING = "missing"
    NOT_A_DIRECTORY = "not_a_directory"


class InvalidArgumentError(ValueError):
    """A base directory candidate is missing or is not a directory."""

    def __init__(self, path: Path, reason: ArgumentErrorReason) -> None:
        self.path = Path(path)
        self.reason = ArgumentErrorReason(reason)
        if self.reason is ArgumentErrorReason.MISSING:
            message = f"directory does not exist: {self.path}"
        else:
            message = f"path is not a directory: {self.path}"
        super().__init__(message)


class InvalidLocationError(ValueError):
    """A symbolic location was rejected before resolution."""

    def __init__(self, location: str, policy: LocationPolicy, detail: str) -> None:
        self.location = location
        self.policy = policy
        super().__init__(f"Invalid asset location {location!r} ({policy.value}): {detail}")


__all__ = ["ArgumentErrorReason", "InvalidArgumentError", "InvalidLocationError"]
