from __future__ import annotations

from .commands import app, key, open_target, rectangle, shell
from .frontend import LayoutFrontend
from .ir import Binding, HyperKey, HyperLayout, LayerCommand, LayoutError, Navigation, Shortcut, Sublayer

__all__ = [
    "Binding",
    "HyperKey",
    "HyperLayout",
    "LayerCommand",
    "LayoutError",
    "LayoutFrontend",
    "Navigation",
    "Shortcut",
    "Sublayer",
    "app",
    "key",
    "open_target",
    "rectangle",
    "shell",
]
