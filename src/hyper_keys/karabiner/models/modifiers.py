from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from .keys import Modifier


class FromModifiers(BaseModel):
    """Karabiner `from.modifiers` model."""

    mandatory: Optional[List[Modifier]] = None
    optional: Optional[List[Modifier]] = None


def any_modifiers() -> FromModifiers:
    """Match the key regardless of which modifiers are held."""

    return FromModifiers(optional=[Modifier.ANY])
