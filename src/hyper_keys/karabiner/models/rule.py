from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .manipulator import Manipulator


class Rule(BaseModel):
    """Karabiner complex modification rule."""

    description: str
    manipulators: List[Manipulator] = Field(min_length=1)
