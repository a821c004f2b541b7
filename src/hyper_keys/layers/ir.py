from __future__ import annotations

from typing import Annotated, Dict, Iterable, Literal, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hyper_keys.karabiner.models.keys import KeyCode
from hyper_keys.karabiner.models.to_event import ToEvent

V = TypeVar("V")


class LayoutError(ValueError):
    """A layer description that cannot be compiled."""


class LayerCommand(BaseModel):
    """What to do when a bound key is pressed: shell commands and/or key events."""

    model_config = ConfigDict(frozen=True)

    to: Tuple[ToEvent, ...] = Field(min_length=1)
    description: Optional[str] = None

    @model_validator(mode="after")
    def _check_actions(self) -> LayerCommand:
        for event in self.to:
            if event.set_variable is not None:
                # activation variables are owned by HyperState
                raise ValueError("commands cannot set variables")
            if event.key_code is None and event.shell_command is None:
                raise ValueError("every `to` event needs a key_code or shell_command")
            if event.modifiers and event.key_code is None:
                raise ValueError("modifiers require a key_code")
        return self


class Shortcut(BaseModel):
    """Hyper + key runs a command directly, no second level."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["shortcut"] = "shortcut"
    command: LayerCommand
    priority: int = 0


class Sublayer(BaseModel):
    """Hyper + key activates a second level of bindings."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["sublayer"] = "sublayer"
    commands: Dict[KeyCode, LayerCommand] = Field(min_length=1)
    description: Optional[str] = None
    priority: int = 0

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, LayerCommand]],
        *,
        description: str | None = None,
        priority: int = 0,
    ) -> Sublayer:
        """Build a sublayer, rejecting a key bound twice."""

        commands = unique_mapping(pairs, where="sublayer")
        return cls(commands=commands, description=description, priority=priority)


Binding = Annotated[Union[Shortcut, Sublayer], Field(discriminator="kind")]


class HyperKey(BaseModel):
    """The physical key that carries the Hyper modifier."""

    model_config = ConfigDict(frozen=True)

    from_key: KeyCode = KeyCode.CAPS_LOCK
    alone: KeyCode = KeyCode.ESCAPE
    variable: str = Field(default="hyper", min_length=1)
    disable_command_tab: bool = False


class Navigation(BaseModel):
    """Plain key substitutions active while Hyper is held."""

    model_config = ConfigDict(frozen=True)

    description: str = "Change hyper to hjkl arrows"
    keys: Dict[KeyCode, KeyCode] = Field(default_factory=dict)


class HyperLayout(BaseModel):
    """Everything the backend needs to produce the rule list."""

    model_config = ConfigDict(frozen=True)

    hyper: HyperKey = Field(default_factory=HyperKey)
    layers: Dict[KeyCode, Binding] = Field(default_factory=dict)
    navigation: Navigation = Field(default_factory=Navigation)

    @model_validator(mode="after")
    def _check_hyper_key(self) -> HyperLayout:
        if self.hyper.from_key in self.layers:
            raise ValueError(f"{self.hyper.from_key.value!r} is the Hyper key and cannot be bound as a layer")
        return self


def unique_mapping(pairs: Iterable[tuple[str, V]], *, where: str) -> dict[str, V]:
    """Collect (key, value) pairs into a dict; a repeated key is an error."""

    out: dict[str, V] = {}
    for key, value in pairs:
        if key in out:
            raise LayoutError(f"duplicate key {key!r} in {where}")
        out[key] = value
    return out
