from __future__ import annotations

from hyper_keys.karabiner.models.keys import KeyCode, Modifier
from hyper_keys.karabiner.models.to_event import ToEvent

from .ir import LayerCommand, LayoutError


def open_target(*targets: str) -> LayerCommand:
    """Run `open <target>` for each target (URLs, files, `-a 'App.app'`)."""

    if not targets:
        raise LayoutError("open_target() needs at least one target")
    return LayerCommand(
        to=[ToEvent(shell_command=f"open {target}") for target in targets],
        description=f"Open {' & '.join(targets)}",
    )


def app(name: str) -> LayerCommand:
    """Open (or focus) an application by name."""

    if not name.strip():
        raise LayoutError("app() needs an application name")
    return open_target(f"-a '{name}.app'")


def shell(script: str) -> LayerCommand:
    """One shell command per non-blank line of `script`."""

    lines = [line.strip() for line in script.splitlines() if line.strip()]
    if not lines:
        raise LayoutError("shell() script has no commands")
    return LayerCommand(
        to=[ToEvent(shell_command=line) for line in lines],
        description=" && ".join(lines),
    )


def rectangle(action: str) -> LayerCommand:
    """Window management through Rectangle.app's URL scheme."""

    if not action.strip():
        raise LayoutError("rectangle() needs an action name")
    return LayerCommand(
        to=[ToEvent(shell_command=f"open -g rectangle://execute-action?name={action}")],
        description=f"Window: {action}",
    )


def key(
    key_code: KeyCode | str,
    *modifiers: Modifier | str,
    description: str | None = None,
) -> LayerCommand:
    """Send a key, optionally with modifiers held."""

    return LayerCommand(
        to=[
            ToEvent(
                key_code=key_name(key_code),
                modifiers=[modifier_name(mod) for mod in modifiers] or None,
            )
        ],
        description=description,
    )


def key_name(name: KeyCode | str) -> KeyCode:
    """`" TAB "` -> `KeyCode.TAB`; unknown names raise ValueError."""

    return KeyCode(name.strip().lower())


def modifier_name(name: Modifier | str) -> Modifier:
    return Modifier(name.strip().lower())
