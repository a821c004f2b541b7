from __future__ import annotations

import logging
from typing import List, Mapping

from hyper_keys.layers.ir import HyperKey, HyperLayout, LayerCommand, Navigation, Shortcut, Sublayer

from .models.from_event import FromEvent
from .models.keys import KeyCode, Modifier
from .models.manipulator import Manipulator
from .models.modifiers import FromModifiers, any_modifiers
from .models.rule import Rule
from .models.to_event import ToEvent
from .state import HyperState

logger = logging.getLogger(__name__)


class HyperBackend:
    """Compile a Hyper layout into Karabiner rules, in engine priority order."""

    def compile(self, layout: HyperLayout) -> List[Rule]:
        state = HyperState(layout.layers.keys(), hyper_variable=layout.hyper.variable)

        rules: List[Rule] = [self.hyper_rule(layout.hyper, state)]
        rules.extend(self.layer_rules(layout.layers, state))

        if layout.navigation.keys:
            rules.append(self.navigation_rule(layout.navigation, state))
        if layout.hyper.disable_command_tab:
            rules.append(self.command_tab_rule())

        logger.debug(
            "compiled %d rules (%d manipulators)",
            len(rules),
            sum(len(rule.manipulators) for rule in rules),
        )
        return rules

    @staticmethod
    def hyper_rule(hyper: HyperKey, state: HyperState) -> Rule:
        """Held: sets the Hyper variable. Tapped alone: sends `hyper.alone`."""

        return Rule(
            description="Hyper Key (⌃⌥⇧⌘)",
            manipulators=[
                Manipulator(
                    description=f"{_key_title(hyper.from_key)} -> Hyper Key",
                    from_=FromEvent(key_code=hyper.from_key, modifiers=any_modifiers()),
                    to=[state.press_hyper()],
                    to_after_key_up=[state.release_hyper()],
                    to_if_alone=[ToEvent(key_code=hyper.alone)],
                )
            ],
        )

    def layer_rules(self, layers: Mapping[KeyCode, Shortcut | Sublayer], state: HyperState) -> List[Rule]:
        """One rule per top-level binding, higher priority first."""

        # sorted() is stable: equal priorities keep declaration order
        ordered = sorted(layers.items(), key=lambda item: -item[1].priority)

        rules: List[Rule] = []
        for key, binding in ordered:
            if isinstance(binding, Sublayer):
                rules.append(
                    Rule(
                        description=binding.description or f'Hyper Key sublayer "{key.value}"',
                        manipulators=self.expand_sublayer(key, binding, state),
                    )
                )
            elif isinstance(binding, Shortcut):
                rules.append(
                    Rule(
                        description=f"Hyper Key + {key.value}",
                        manipulators=[self.shortcut(key, binding.command, state)],
                    )
                )
            else:
                raise TypeError(f"unsupported binding for {key.value!r}: {type(binding).__name__}")
        return rules

    @staticmethod
    def expand_sublayer(key: KeyCode, sublayer: Sublayer, state: HyperState) -> List[Manipulator]:
        """Toggle manipulator for `key`, then one manipulator per bound command."""

        logger.debug("sublayer %s: %d commands", key.value, len(sublayer.commands))

        manipulators = [
            Manipulator(
                description=f"Toggle Hyper sublayer {key.value}",
                from_=FromEvent(key_code=key, modifiers=any_modifiers()),
                to=[state.activate(key)],
                to_after_key_up=[state.deactivate(key)],
                conditions=state.can_enter(key),
            )
        ]
        for command_key, command in sublayer.commands.items():
            manipulators.append(
                _command_manipulator(command_key, command, conditions=state.active(key))
            )
        return manipulators

    @staticmethod
    def shortcut(key: KeyCode, command: LayerCommand, state: HyperState) -> Manipulator:
        return _command_manipulator(key, command, conditions=state.idle())

    @staticmethod
    def navigation_rule(navigation: Navigation, state: HyperState) -> Rule:
        return Rule(
            description=navigation.description,
            manipulators=[
                Manipulator(
                    from_=FromEvent(key_code=from_key),
                    to=[ToEvent(key_code=to_key)],
                    conditions=[state.hyper_held()],
                )
                for from_key, to_key in navigation.keys.items()
            ],
        )

    @staticmethod
    def command_tab_rule() -> Rule:
        return Rule(
            description="Disable CMD + Tab to force Hyper Key usage",
            manipulators=[
                Manipulator(
                    description="Disable CMD + Tab to force Hyper Key usage",
                    from_=FromEvent(
                        key_code=KeyCode.TAB,
                        modifiers=FromModifiers(mandatory=[Modifier.LEFT_COMMAND]),
                    ),
                    to=[ToEvent(key_code=KeyCode.TAB)],
                )
            ],
        )


def _command_manipulator(key: KeyCode, command: LayerCommand, *, conditions) -> Manipulator:
    return Manipulator(
        description=command.description,
        from_=FromEvent(key_code=key, modifiers=any_modifiers()),
        to=list(command.to),
        conditions=conditions,
    )


def _key_title(key: KeyCode) -> str:
    return key.value.replace("_", " ").title()
