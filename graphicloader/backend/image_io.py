"""Image loading for graphicloader assets.

Absolute paths are decoded straight from the filesystem. Relative paths are
looked up through a bundled-resource root so packaged deployments (wheels,
zip apps, frozen builds) can ship textures inside the package.
"""

from __future__ import annotations

from importlib import resources as importlib_resources
import io
from pathlib import Path, PurePath
from typing import TYPE_CHECKING, Optional

from PIL import Image

from graphicloader.util.logging import get_logger

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable


_logger = get_logger("image_io")


class ImageLoader:
    """Decode PNG assets with Pillow from disk or from bundled resources."""

    def __init__(
        self,
        resource_package: str = "graphicloader",
        *,
        resource_root: Optional[Traversable | Path] = None,
    ) -> None:
        self.resource_package = resource_package
        self._resource_root = resource_root

    @property
    def resource_root(self) -> Traversable | Path:
        if self._resource_root is None:
            self._resource_root = importlib_resources.files(self.resource_package)
        return self._resource_root

    def load(self, path: str | PurePath) -> Image.Image:
        path = Path(path)
        if path.is_absolute():
            return self._load_file(path)
        return self._load_resource(path)

    def _load_file(self, path: Path) -> Image.Image:
        _logger.debug("Decoding image file %s", path)
        image = Image.open(path)
        image.load()
        return image

    def _load_resource(self, path: Path) -> Image.Image:
        resource = self.resource_root.joinpath(*path.parts)
        if not resource.is_file():
            raise FileNotFoundError(f"Bundled resource not found: {path} (root={self.resource_root})")
        _logger.debug("Decoding bundled resource %s", path)
        image = Image.open(io.BytesIO(resource.read_bytes()))
        image.load()
        return image


__all__ = ["ImageLoader"]
