"""Backend helpers for loading and caching image assets."""

from graphicloader.backend.asset_cache import AssetCache
from graphicloader.backend.image_io import ImageLoader

__all__ = ["AssetCache", "ImageLoader"]
