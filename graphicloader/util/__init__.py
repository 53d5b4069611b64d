"""Utility helpers for graphicloader."""

from graphicloader.util.config import LoaderConfig, LocationPolicy
from graphicloader.util.location import AssetLocation
from graphicloader.util.logging import get_logger, setup_logging

__all__ = ["AssetLocation", "LoaderConfig", "LocationPolicy", "get_logger", "setup_logging"]
