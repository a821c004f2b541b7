from __future__ import annotations

from .models.condition import Condition, ConditionType, VarCondition
from .models.document import GlobalSettings, KarabinerConfig, OutputSettings, Profile
from .models.from_event import FromEvent
from .models.keys import KeyCode, Modifier
from .models.manipulator import Manipulator
from .models.rule import Rule
from .models.to_event import ToEvent, Variable

__all__ = [
    "Condition",
    "ConditionType",
    "FromEvent",
    "GlobalSettings",
    "KarabinerConfig",
    "KeyCode",
    "Manipulator",
    "Modifier",
    "OutputSettings",
    "Profile",
    "Rule",
    "ToEvent",
    "VarCondition",
    "Variable",
]
