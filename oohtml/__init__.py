"""Object-oriented HTML builder."""

from .blocks import BlockLoader
from .config import OohtmlConfig, load_config
from .container import Container
from .element import Element
from .errors import BlockNotFound, ConfigError, InvalidArgumentType, InvalidRenderable, OohtmlError
from .renderable import Renderable, is_renderable

__all__ = [
    "BlockLoader",
    "BlockNotFound",
    "ConfigError",
    "Container",
    "Element",
    "InvalidArgumentType",
    "InvalidRenderable",
    "OohtmlConfig",
    "OohtmlError",
    "Renderable",
    "is_renderable",
    "load_config",
]
