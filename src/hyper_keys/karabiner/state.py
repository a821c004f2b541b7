from __future__ import annotations

from typing import Iterable, List

from .models.condition import VarCondition, var_if
from .models.keys import KeyCode
from .models.to_event import ToEvent, set_var


def sublayer_variable(key: KeyCode) -> str:
    return f"hyper_sublayer_{key.value}"


class HyperState:
    """
    Which sublayer, if any, is active while Hyper is held.

    The engine only knows independent 0/1 variables, so the single state is
    lowered to one flag per top-level key. Every guard that depends on the
    state is built here, so a cross-guard cannot be left out by a caller.
    Unset variables read as 0 in Karabiner, which makes "== 0" safe on
    startup.
    """

    def __init__(self, keys: Iterable[KeyCode], *, hyper_variable: str = "hyper") -> None:
        self.hyper_variable = hyper_variable
        self._variables = {key: sublayer_variable(key) for key in keys}
        if hyper_variable in self._variables.values():
            raise ValueError(f"hyper variable {hyper_variable!r} collides with a sublayer variable")

    @property
    def variables(self) -> List[str]:
        return list(self._variables.values())

    def variable(self, key: KeyCode) -> str:
        return self._variables[key]

    def hyper_held(self) -> VarCondition:
        return var_if(self.hyper_variable, 1)

    def press_hyper(self) -> ToEvent:
        return set_var(self.hyper_variable, 1)

    def release_hyper(self) -> ToEvent:
        return set_var(self.hyper_variable, 0)

    def activate(self, key: KeyCode) -> ToEvent:
        return set_var(self._variables[key], 1)

    def deactivate(self, key: KeyCode) -> ToEvent:
        return set_var(self._variables[key], 0)

    def active(self, key: KeyCode) -> List[VarCondition]:
        """Guards for a binding inside the sublayer on `key`."""

        return [var_if(self._variables[key], 1)]

    def can_enter(self, key: KeyCode) -> List[VarCondition]:
        """Guards for the toggle of `key`: Hyper held and no other sublayer active."""

        others = [var_if(name, 0) for other, name in self._variables.items() if other != key]
        return [*others, self.hyper_held()]

    def idle(self) -> List[VarCondition]:
        """Guards for a bare Hyper shortcut: Hyper held and no sublayer active."""

        return [self.hyper_held(), *(var_if(name, 0) for name in self._variables.values())]
