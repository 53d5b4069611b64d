"""AssetLocation helper for validating symbolic asset locations.

A symbolic location names an asset relative to the base directory, with
segments joined by a single separator character, e.g. ``"ui:button"``.
Under the strict policy every segment may contain ASCII letters only.
Rooted segments never escape the base directory: their anchor is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath
import re
from typing import Tuple

from graphicloader.errors import InvalidLocationError
from graphicloader.util.config import LocationPolicy


_STRICT_SEGMENT_PATTERN = re.compile(r"[a-zA-Z]+")


@dataclass(frozen=True)
class AssetLocation:
    """Symbolic location validated against a :class:`LocationPolicy`."""

    value: str
    separator: str = ":"
    policy: LocationPolicy = LocationPolicy.PERMISSIVE

    def __post_init__(self) -> None:
        object.__setattr__(self, "policy", LocationPolicy(self.policy))
        if not isinstance(self.value, str):
            raise TypeError(f"Asset location must be a string, got {type(self.value).__name__}")
        if not self.value:
            raise InvalidLocationError(self.value, self.policy, "location cannot be empty")
        if self.policy is LocationPolicy.STRICT:
            for segment in self.segments:
                if not _STRICT_SEGMENT_PATTERN.fullmatch(segment):
                    raise InvalidLocationError(
                        self.value,
                        self.policy,
                        f"segments must contain only letters, got {segment!r}",
                    )
        if not self._path_parts():
            raise InvalidLocationError(self.value, self.policy, "location has no path segments")

    @property
    def segments(self) -> Tuple[str, ...]:
        return tuple(self.value.split(self.separator))

    def _path_parts(self) -> Tuple[str, ...]:
        parts = []
        for segment in self.segments:
            path = PurePath(segment)
            parts.extend(path.parts[1:] if path.anchor else path.parts)
        return tuple(parts)

    def relative_path(self, extension: str = ".png") -> PurePath:
        """Return the path of the asset relative to the base directory."""
        path = PurePath(*self._path_parts())
        if self.policy is LocationPolicy.STRICT or not str(path).endswith(extension):
            path = PurePath(f"{path}{extension}")
        return path

    def __str__(self) -> str:
        return self.value


__all__ = ["AssetLocation"]
