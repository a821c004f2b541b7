from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .keys import KeyCode, Modifier


class Variable(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class ToEvent(BaseModel):
    """
    Karabiner `to` event model.

    https://karabiner-elements.pqrs.org/docs/json/complex-modifications-manipulator-definition/to/
    """

    model_config = ConfigDict(frozen=True)

    key_code: Optional[KeyCode] = None
    modifiers: Optional[List[Modifier]] = None
    shell_command: Optional[str] = None
    set_variable: Optional[Variable] = None


def set_var(name: str, value: int) -> ToEvent:
    return ToEvent(set_variable=Variable(name=name, value=value))
