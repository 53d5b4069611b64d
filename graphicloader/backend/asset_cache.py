"""Memoizing asset cache for graphicloader.

Symbolic locations such as ``"ui:button"`` are resolved under the cache's base
directory, decoded through an :class:`ImageLoader`, and stored under the
original location string. Repeated unforced requests return the same image
instance; a forced request decodes again and replaces the stored image.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Dict, Optional, Protocol

from PIL import Image

from graphicloader.backend.image_io import ImageLoader
from graphicloader.errors import ArgumentErrorReason, InvalidArgumentError
from graphicloader.util.config import LoaderConfig
from graphicloader.util.location import AssetLocation
from graphicloader.util.logging import get_logger


_logger = get_logger("asset_cache")


class SupportsLoad(Protocol):
    def load(self, path: Path) -> Image.Image: ...


class AssetCache:
    """Cache of decoded images keyed by symbolic location."""

    def __init__(
        self,
        config: Optional[LoaderConfig] = None,
        *,
        loader: Optional[SupportsLoad] = None,
    ) -> None:
        self.config = config or LoaderConfig()
        self.loader = loader or ImageLoader(self.config.resource_package)
        self._base_dir = self.config.base_dir
        self._images: Dict[str, Image.Image] = {}
        self._lock = threading.Lock()

    def get(self, location: str, force: bool = False) -> Image.Image:
        """Return the image at ``location``, loading it on first use.

        Args:
            location: Symbolic location in the form ``"folder:[folder:]name"``.
            force: Decode the image again even if it is cached. The fresh
                image replaces the cached one.

        Raises:
            InvalidLocationError: ``location`` is rejected by the configured policy.
        """
        path = self.resolve(location)
        if not force:
            with self._lock:
                cached = self._images.get(location)
            if cached is not None:
                _logger.debug("Cache hit for %s", location)
                return cached

        _logger.debug("Loading %s from %s (force=%s)", location, path, force)
        image = self.loader.load(path)
        with self._lock:
            if force:
                self._images[location] = image
                return image
            return self._images.setdefault(location, image)

    def resolve(self, location: str) -> Path:
        """Translate a symbolic location into the path that would be loaded."""
        parsed = AssetLocation(location, separator=self.config.separator, policy=self.config.policy)
        return self.get_base_directory() / parsed.relative_path(self.config.extension)

    def set_base_directory(self, path: str | Path) -> None:
        """Replace the base directory after checking it is an existing directory.

        Cached images are kept as they are.
        """
        candidate = Path(path)
        if not candidate.exists():
            raise InvalidArgumentError(candidate, ArgumentErrorReason.MISSING)
        if not candidate.is_dir():
            raise InvalidArgumentError(candidate, ArgumentErrorReason.NOT_A_DIRECTORY)
        with self._lock:
            self._base_dir = candidate
        _logger.info("Asset base directory set to %s", candidate)

    def get_base_directory(self) -> Path:
        return self._base_dir

    def __contains__(self, location: object) -> bool:
        with self._lock:
            return location in self._images

    def __len__(self) -> int:
        with self._lock:
            return len(self._images)

    def __repr__(self) -> str:
        return f"AssetCache(base_dir={str(self._base_dir)!r}, cached={len(self)})"


__all__ = ["AssetCache", "SupportsLoad"]
