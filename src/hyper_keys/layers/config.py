from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from hyper_keys.karabiner.models.document import OutputSettings

from .commands import app, key, open_target, rectangle, shell
from .ir import LayerCommand, LayoutError

_ACTION_FIELDS = ("app", "open", "shell", "rectangle", "key")


class CommandFields(BaseModel):
    """The ways a layout file can spell a command."""

    model_config = ConfigDict(extra="forbid")

    app: str | None = None
    open: List[str] | None = None
    shell: str | None = None
    rectangle: str | None = None
    key: str | None = None
    modifiers: List[str] = Field(default_factory=list)
    description: str | None = None

    def _actions(self) -> List[str]:
        return [name for name in _ACTION_FIELDS if getattr(self, name) is not None]

    def to_command(self) -> LayerCommand:
        actions = self._actions()
        if len(actions) != 1:
            raise LayoutError(f"a command needs exactly one of {', '.join(_ACTION_FIELDS)}; got {actions or 'none'}")
        if self.modifiers and self.key is None:
            raise LayoutError("`modifiers` can only be used together with `key`")

        if self.app is not None:
            command = app(self.app)
        elif self.open is not None:
            command = open_target(*self.open)
        elif self.shell is not None:
            command = shell(self.shell)
        elif self.rectangle is not None:
            command = rectangle(self.rectangle)
        else:
            command = key(self.key, *self.modifiers)

        if self.description is not None:
            command = command.model_copy(update={"description": self.description})
        return command


class CommandConfig(CommandFields):
    @model_validator(mode="after")
    def _one_action(self) -> CommandConfig:
        self.to_command()
        return self


class LayerConfig(CommandFields):
    """A `[layers.<key>]` table: a sublayer when it has `keys`, otherwise a shortcut."""

    keys: Dict[str, CommandConfig] | None = None
    priority: int = 0

    @model_validator(mode="after")
    def _sublayer_or_shortcut(self) -> LayerConfig:
        if self.keys is not None:
            if self._actions() or self.modifiers:
                raise LayoutError("a layer has either `keys` or a command, not both")
            if not self.keys:
                raise LayoutError("a sublayer needs at least one key")
        else:
            self.to_command()
        return self


class HyperConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    from_key: str = Field(default="caps_lock", alias="from")
    alone: str = "escape"
    variable: str = "hyper"
    disable_command_tab: bool = False


class NavigationConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    description: str = "Change hyper to hjkl arrows"
    keys: Dict[str, str] = Field(default_factory=dict)


class Config(BaseModel):
    model_config = ConfigDict(extra="forbid")

    version: int | None = None
    description: str | None = None
    hyper: HyperConfig = Field(default_factory=HyperConfig)
    output: OutputSettings = Field(default_factory=OutputSettings)
    layers: Dict[str, LayerConfig] = Field(default_factory=dict)
    navigation: NavigationConfig = Field(default_factory=NavigationConfig)
