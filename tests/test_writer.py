from __future__ import annotations

import json
from pathlib import Path

import pytest

from hyper_keys.karabiner.backend import HyperBackend
from hyper_keys.karabiner.compiler import compile_layout_file, main
from hyper_keys.karabiner.models.document import OutputSettings
from hyper_keys.karabiner.writer import render_document, write_document
from hyper_keys.layers.commands import app, open_target
from hyper_keys.layers.ir import HyperLayout, Shortcut, Sublayer

LAYOUT_TOML = Path(__file__).with_name("test_layout.toml")


def _layout() -> HyperLayout:
    return HyperLayout(
        layers={
            "b": Shortcut(command=open_target("https://github.com")),
            "o": Sublayer(commands={"c": app("Google Chrome")}),
        }
    )


def test_document_envelope() -> None:
    rules = HyperBackend().compile(_layout())
    doc = json.loads(render_document(rules, OutputSettings()))

    assert doc["global"] == {
        "show_in_menu_bar": True,
        "ask_for_confirmation_before_quitting": False,
        "check_for_updates_on_startup": True,
        "show_profile_name_in_menu_bar": False,
        "unsafe_ui": False,
    }
    assert len(doc["profiles"]) == 1
    profile = doc["profiles"][0]
    assert profile["name"] == "Default"
    assert len(profile["complex_modifications"]["rules"]) == 3


def test_manipulator_schema() -> None:
    rules = HyperBackend().compile(_layout())
    doc = json.loads(render_document(rules, OutputSettings()))
    rules_json = doc["profiles"][0]["complex_modifications"]["rules"]

    hyper = rules_json[0]["manipulators"][0]
    assert hyper == {
        "description": "Caps Lock -> Hyper Key",
        "type": "basic",
        "from": {"key_code": "caps_lock", "modifiers": {"optional": ["any"]}},
        "to": [{"set_variable": {"name": "hyper", "value": 1}}],
        "to_after_key_up": [{"set_variable": {"name": "hyper", "value": 0}}],
        "to_if_alone": [{"key_code": "escape"}],
    }

    toggle = rules_json[2]["manipulators"][0]
    assert toggle["conditions"] == [
        {"type": "variable_if", "name": "hyper_sublayer_b", "value": 0},
        {"type": "variable_if", "name": "hyper", "value": 1},
    ]


def test_render_is_idempotent() -> None:
    first = render_document(HyperBackend().compile(_layout()), OutputSettings())
    second = render_document(HyperBackend().compile(_layout()), OutputSettings())
    assert first == second
    assert first.endswith("}\n")
    # non-ASCII stays readable
    assert "Hyper Key (⌃⌥⇧⌘)" in first


def test_write_overwrites_and_leaves_no_temp(tmp_path: Path) -> None:
    out = tmp_path / "karabiner.json"
    out.write_text("old content that is much longer than nothing" * 100, encoding="utf-8")

    settings = OutputSettings(path=out)
    rules = HyperBackend().compile(_layout())
    write_document(rules, settings)
    first = out.read_bytes()
    write_document(rules, settings)

    assert out.read_bytes() == first
    assert json.loads(first)["profiles"][0]["name"] == "Default"
    assert [p.name for p in tmp_path.iterdir()] == ["karabiner.json"]


def test_write_failure_raises(tmp_path: Path) -> None:
    settings = OutputSettings(path=tmp_path / "missing" / "karabiner.json")
    with pytest.raises(OSError):
        write_document(HyperBackend().compile(_layout()), settings)


def test_compile_layout_file(tmp_path: Path) -> None:
    out = tmp_path / "out.json"
    assert compile_layout_file(LAYOUT_TOML, out) == out

    doc = json.loads(out.read_text(encoding="utf-8"))
    assert doc["global"]["show_in_menu_bar"] is False
    profile = doc["profiles"][0]
    assert profile["name"] == "Work"

    descriptions = [r["description"] for r in profile["complex_modifications"]["rules"]]
    assert descriptions == [
        "Hyper Key (⌃⌥⇧⌘)",
        "Hyper Key + spacebar",
        "Open applications",
        'Hyper Key sublayer "w"',
        "Change hyper to hjkl arrows",
        "Disable CMD + Tab to force Hyper Key usage",
    ]


def test_cli(tmp_path: Path) -> None:
    out = tmp_path / "karabiner.json"
    assert main([str(LAYOUT_TOML), "-o", str(out), "--indent", "4"]) == 0
    assert out.read_text(encoding="utf-8").startswith('{\n    "global"')


def test_cli_bad_layout_writes_nothing(tmp_path: Path) -> None:
    layout = tmp_path / "layout.toml"
    layout.write_text('[layers.o.keys]\nc = { app = "Notes", open = ["x"] }\n', encoding="utf-8")
    out = tmp_path / "karabiner.json"

    assert main([str(layout), "-o", str(out)]) == 1
    assert not out.exists()


def test_cli_missing_layout(tmp_path: Path) -> None:
    assert main([str(tmp_path / "nope.toml"), "-o", str(tmp_path / "k.json")]) == 1


def test_cli_rejects_negative_indent(tmp_path: Path) -> None:
    out = tmp_path / "karabiner.json"
    with pytest.raises(SystemExit) as exc_info:
        main([str(LAYOUT_TOML), "-o", str(out), "--indent", "-1"])

    assert exc_info.value.code == 2
    assert not out.exists()


def test_write_through_symlink(tmp_path: Path) -> None:
    real = tmp_path / "dotfiles" / "karabiner.json"
    real.parent.mkdir()
    real.write_text("{}", encoding="utf-8")
    link = tmp_path / "karabiner.json"
    link.symlink_to(real)

    write_document(HyperBackend().compile(_layout()), OutputSettings(path=link))

    assert link.is_symlink()
    assert json.loads(real.read_text(encoding="utf-8"))["profiles"][0]["name"] == "Default"
    assert sorted(p.name for p in real.parent.iterdir()) == ["karabiner.json"]


def test_failed_replace_removes_temp_file(tmp_path: Path) -> None:
    target = tmp_path / "karabiner.json"
    target.mkdir()

    with pytest.raises(OSError):
        write_document(HyperBackend().compile(_layout()), OutputSettings(path=target))

    assert target.is_dir()
    assert [p.name for p in tmp_path.iterdir()] == ["karabiner.json"]
