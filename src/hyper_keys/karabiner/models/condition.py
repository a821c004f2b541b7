from __future__ import annotations

from enum import Enum
from typing import Literal, TypeAlias

from pydantic import BaseModel

class ConditionType(str, Enum):
    """Karabiner condition type."""

    VARIABLE_IF = "variable_if"


class BaseCondition(BaseModel):
    """
    Karabiner condition model.

    https://karabiner-elements.pqrs.org/docs/json/complex-modifications-manipulator-definition/conditions/
    """

    type: ConditionType


class VarCondition(BaseCondition):
    type: Literal[ConditionType.VARIABLE_IF] = ConditionType.VARIABLE_IF
    name: str
    value: int


Condition: TypeAlias = VarCondition


def var_if(name: str, value: int) -> VarCondition:
    return VarCondition(name=name, value=value)
