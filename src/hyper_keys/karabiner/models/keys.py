from __future__ import annotations

from enum import Enum


class KeyCode(str, Enum):
    """
    Karabiner `key_code` names.

    Covers the keys a layout is expected to bind or emit; anything outside
    this set is rejected when the layout is built.
    https://github.com/pqrs-org/Karabiner-Elements/blob/main/src/apps/SettingsWindow/Resources/simple_modifications.json
    """

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    DIGIT_1 = "1"
    DIGIT_2 = "2"
    DIGIT_3 = "3"
    DIGIT_4 = "4"
    DIGIT_5 = "5"
    DIGIT_6 = "6"
    DIGIT_7 = "7"
    DIGIT_8 = "8"
    DIGIT_9 = "9"
    DIGIT_0 = "0"

    RETURN_OR_ENTER = "return_or_enter"
    ESCAPE = "escape"
    DELETE_OR_BACKSPACE = "delete_or_backspace"
    DELETE_FORWARD = "delete_forward"
    TAB = "tab"
    SPACEBAR = "spacebar"
    HYPHEN = "hyphen"
    EQUAL_SIGN = "equal_sign"
    OPEN_BRACKET = "open_bracket"
    CLOSE_BRACKET = "close_bracket"
    BACKSLASH = "backslash"
    NON_US_POUND = "non_us_pound"
    SEMICOLON = "semicolon"
    QUOTE = "quote"
    GRAVE_ACCENT_AND_TILDE = "grave_accent_and_tilde"
    COMMA = "comma"
    PERIOD = "period"
    SLASH = "slash"
    NON_US_BACKSLASH = "non_us_backslash"

    CAPS_LOCK = "caps_lock"
    LEFT_CONTROL = "left_control"
    LEFT_SHIFT = "left_shift"
    LEFT_OPTION = "left_option"
    LEFT_COMMAND = "left_command"
    RIGHT_CONTROL = "right_control"
    RIGHT_SHIFT = "right_shift"
    RIGHT_OPTION = "right_option"
    RIGHT_COMMAND = "right_command"
    FN = "fn"

    F1 = "f1"
    F2 = "f2"
    F3 = "f3"
    F4 = "f4"
    F5 = "f5"
    F6 = "f6"
    F7 = "f7"
    F8 = "f8"
    F9 = "f9"
    F10 = "f10"
    F11 = "f11"
    F12 = "f12"
    F13 = "f13"
    F14 = "f14"
    F15 = "f15"
    F16 = "f16"
    F17 = "f17"
    F18 = "f18"
    F19 = "f19"
    F20 = "f20"

    PRINT_SCREEN = "print_screen"
    SCROLL_LOCK = "scroll_lock"
    PAUSE = "pause"
    INSERT = "insert"
    HOME = "home"
    PAGE_UP = "page_up"
    END = "end"
    PAGE_DOWN = "page_down"
    RIGHT_ARROW = "right_arrow"
    LEFT_ARROW = "left_arrow"
    DOWN_ARROW = "down_arrow"
    UP_ARROW = "up_arrow"

    KEYPAD_NUM_LOCK = "keypad_num_lock"
    KEYPAD_SLASH = "keypad_slash"
    KEYPAD_ASTERISK = "keypad_asterisk"
    KEYPAD_HYPHEN = "keypad_hyphen"
    KEYPAD_PLUS = "keypad_plus"
    KEYPAD_ENTER = "keypad_enter"
    KEYPAD_1 = "keypad_1"
    KEYPAD_2 = "keypad_2"
    KEYPAD_3 = "keypad_3"
    KEYPAD_4 = "keypad_4"
    KEYPAD_5 = "keypad_5"
    KEYPAD_6 = "keypad_6"
    KEYPAD_7 = "keypad_7"
    KEYPAD_8 = "keypad_8"
    KEYPAD_9 = "keypad_9"
    KEYPAD_0 = "keypad_0"
    KEYPAD_PERIOD = "keypad_period"
    KEYPAD_EQUAL_SIGN = "keypad_equal_sign"
    KEYPAD_COMMA = "keypad_comma"

    APPLICATION = "application"
    HELP = "help"
    JAPANESE_EISUU = "japanese_eisuu"
    JAPANESE_KANA = "japanese_kana"

    DISPLAY_BRIGHTNESS_DECREMENT = "display_brightness_decrement"
    DISPLAY_BRIGHTNESS_INCREMENT = "display_brightness_increment"
    MISSION_CONTROL = "mission_control"
    LAUNCHPAD = "launchpad"
    DASHBOARD = "dashboard"
    ILLUMINATION_DECREMENT = "illumination_decrement"
    ILLUMINATION_INCREMENT = "illumination_increment"
    REWIND = "rewind"
    PLAY_OR_PAUSE = "play_or_pause"
    FASTFORWARD = "fastforward"
    MUTE = "mute"
    VOLUME_DECREMENT = "volume_decrement"
    VOLUME_INCREMENT = "volume_increment"

    VK_NONE = "vk_none"


class Modifier(str, Enum):
    """Karabiner modifier token, as used in `from.modifiers` and `to[].modifiers`."""

    ANY = "any"

    COMMAND = "command"
    CONTROL = "control"
    OPTION = "option"
    SHIFT = "shift"
    FN = "fn"
    CAPS_LOCK = "caps_lock"

    LEFT_COMMAND = "left_command"
    LEFT_CONTROL = "left_control"
    LEFT_OPTION = "left_option"
    LEFT_SHIFT = "left_shift"

    RIGHT_COMMAND = "right_command"
    RIGHT_CONTROL = "right_control"
    RIGHT_OPTION = "right_option"
    RIGHT_SHIFT = "right_shift"
