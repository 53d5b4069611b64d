"""Loader configuration for graphicloader.

The configuration is explicit and does not read any environment variables.
Callers construct a :class:`LoaderConfig` with concrete values so asset
resolution is predictable across runs.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path


class LocationPolicy(str, Enum):
    """How symbolic locations are validated before resolution."""

    PERMISSIVE = "permissive"
    STRICT = "strict"


@dataclass(frozen=True)
class LoaderConfig:
    """Settings shared by an :class:`~graphicloader.backend.asset_cache.AssetCache`."""

    base_dir: Path = Path("assets/textures")
    separator: str = ":"
    extension: str = ".png"
    policy: LocationPolicy = LocationPolicy.PERMISSIVE
    resource_package: str = "graphicloader"

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_dir", Path(self.base_dir))
        object.__setattr__(self, "policy", LocationPolicy(self.policy))
        if len(self.separator) != 1:
            raise ValueError("Location separator must be a single character.")
        if not self.extension.startswith("."):
            raise ValueError("Extension must start with a dot.")

    def with_base_dir(self, base_dir: str | Path) -> "LoaderConfig":
        """Return a copy with an updated base directory."""
        return replace(self, base_dir=Path(base_dir))


__all__ = ["LoaderConfig", "LocationPolicy"]
