from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from .models.document import ComplexModifications, KarabinerConfig, OutputSettings, Profile
from .models.rule import Rule

logger = logging.getLogger(__name__)


def build_document(rules: List[Rule], settings: OutputSettings) -> KarabinerConfig:
    """Wrap the rule list in the `karabiner.json` envelope."""

    return KarabinerConfig(
        global_=settings.global_,
        profiles=[
            Profile(
                name=settings.profile,
                complex_modifications=ComplexModifications(rules=rules),
            )
        ],
    )


def render_document(rules: List[Rule], settings: OutputSettings, *, indent: int | None = 2) -> str:
    document = build_document(rules, settings)
    return document.model_dump_json(indent=indent, by_alias=True, exclude_none=True) + "\n"


def write_document(
    rules: List[Rule],
    settings: OutputSettings,
    *,
    indent: int | None = 2,
) -> Path:
    """
    Render and write the document to `settings.path`, replacing any old file.

    The text goes to a sibling temporary file first and is renamed over the
    target, so readers never see a truncated document. A symlinked target
    keeps its link; the file it points to is replaced.
    """

    text = render_document(rules, settings, indent=indent)
    out_path = Path(settings.path)
    target = out_path.resolve()
    tmp_path = target.with_name(target.name + ".tmp")

    try:
        tmp_path.write_text(text, encoding="utf-8")
        os.replace(tmp_path, target)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info("wrote %d rules to %s", len(rules), out_path)
    return out_path
