"""Top-level package for the graphicloader asset cache."""

from graphicloader.backend.asset_cache import AssetCache
from graphicloader.backend.image_io import ImageLoader
from graphicloader.errors import ArgumentErrorReason, InvalidArgumentError, InvalidLocationError
from graphicloader.util.config import LoaderConfig, LocationPolicy
from graphicloader import backend, util

__all__ = [
    "ArgumentErrorReason",
    "AssetCache",
    "ImageLoader",
    "InvalidArgumentError",
    "InvalidLocationError",
    "LoaderConfig",
    "LocationPolicy",
    "backend",
    "util",
]
