from __future__ import annotations

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .rule import Rule


class GlobalSettings(BaseModel):
    """Karabiner `global` block."""

    model_config = ConfigDict(extra="forbid")

    show_in_menu_bar: bool = True
    ask_for_confirmation_before_quitting: bool = False
    check_for_updates_on_startup: bool = True
    show_profile_name_in_menu_bar: bool = False
    unsafe_ui: bool = False


class ComplexModifications(BaseModel):
    rules: List[Rule]


class Profile(BaseModel):
    name: str
    complex_modifications: ComplexModifications


class KarabinerConfig(BaseModel):
    """Top-level `karabiner.json` document."""

    model_config = ConfigDict(populate_by_name=True)

    global_: GlobalSettings = Field(alias="global")
    profiles: List[Profile]


class OutputSettings(BaseModel):
    """Where the document is written and what goes into its envelope."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    path: Path = Path("karabiner.json")
    profile: str = "Default"
    global_: GlobalSettings = Field(default_factory=GlobalSettings, alias="global")
