from __future__ import annotations

from .config import Config, load_config
from .errors import (
    AssetNotFoundError,
    DataError,
    GlotError,
    MisconfiguredWidgetError,
    PageNotFoundError,
    ResourceNotFoundError,
)
from .renderer import Renderer
from .widget import Widget, WidgetContext

__version__ = "0.1.0"

__all__ = [
    "AssetNotFoundError",
    "Config",
    "DataError",
    "GlotError",
    "MisconfiguredWidgetError",
    "PageNotFoundError",
    "Renderer",
    "ResourceNotFoundError",
    "Widget",
    "WidgetContext",
    "load_config",
]
