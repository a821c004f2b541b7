from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, TypeVar
import tomllib

from .commands import key_name
from .config import Config, LayerConfig
from .ir import Binding, HyperKey, HyperLayout, Navigation, Shortcut, Sublayer, unique_mapping

logger = logging.getLogger(__name__)

V = TypeVar("V")

class LayoutFrontend:
    """Parse a layout file (TOML) into a HyperLayout."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML layout file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Dict[str, Any]) -> tuple[HyperLayout, Config]:
        cfg = Config.model_validate(config)

        layers: Dict[str, Binding] = {}
        for name, layer in _normalize_keys(cfg.layers, where="layers").items():
            layers[name] = _binding(name, layer)

        layout = HyperLayout(
            hyper=HyperKey(
                from_key=key_name(cfg.hyper.from_key),
                alone=key_name(cfg.hyper.alone),
                variable=cfg.hyper.variable,
                disable_command_tab=cfg.hyper.disable_command_tab,
            ),
            layers=layers,
            navigation=Navigation(
                description=cfg.navigation.description,
                keys={
                    name: key_name(target)
                    for name, target in _normalize_keys(cfg.navigation.keys, where="navigation").items()
                },
            ),
        )
        logger.debug("parsed %d top-level layers", len(layout.layers))
        return layout, cfg

    def load(self, path: str | Path) -> tuple[HyperLayout, Config]:
        return self.parse_config(self.load_toml(path))

def _binding(name: str, layer: LayerConfig) -> Binding:
    if layer.keys is None:
        return Shortcut(command=layer.to_command(), priority=layer.priority)
    commands = _normalize_keys(layer.keys, where=f"layers.{name}.keys")
    return Sublayer(
        commands={k: v.to_command() for k, v in commands.items()},
        description=layer.description,
        priority=layer.priority,
    )


def _normalize_keys(mapping: Mapping[str, V], *, where: str) -> dict[str, V]:
    return unique_mapping(((k.strip().lower(), v) for k, v in mapping.items()), where=where)
