"""Keyboard scancodes and conversion of printable characters to scancodes."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["KeypressType", "InvalidKeyError", "scancode_for_char"]


class InvalidKeyError(ValueError):
    """Raised when a key cannot be mapped to a valid scancode."""


class KeypressType(IntEnum):
    """Named keys, valued by their keyboard scancode."""

    KEY_A = 4
    KEY_B = 5
    KEY_C = 6
    KEY_D = 7
    KEY_E = 8
    KEY_F = 9
    KEY_G = 10
    KEY_H = 11
    KEY_I = 12
    KEY_J = 13
    KEY_K = 14
    KEY_L = 15
    KEY_M = 16
    KEY_N = 17
    KEY_O = 18
    KEY_P = 19
    KEY_Q = 20
    KEY_R = 21
    KEY_S = 22
    KEY_T = 23
    KEY_U = 24
    KEY_V = 25
    KEY_W = 26
    KEY_X = 27
    KEY_Y = 28
    KEY_Z = 29
    KEY_RETURN = 40
    KEY_BACKSPACE = 42
    KEY_TAB = 43
    KEY_SPACE = 44
    KEY_MINUS = 45
    KEY_EQUALS = 46
    KEY_LBRACKET = 47
    KEY_RBRACKET = 48
    KEY_BACKSLASH = 49
    KEY_SEMICOLON = 51
    KEY_APOSTROPHE = 52
    KEY_GRAVE = 53
    KEY_COMMA = 54
    KEY_PERIOD = 55
    KEY_FSLASH = 56
    KEY_CAPSLOCK = 57
    KEY_F1 = 58
    KEY_F2 = 59
    KEY_F3 = 60
    KEY_F4 = 61
    KEY_F5 = 62
    KEY_F6 = 63
    KEY_F7 = 64
    KEY_F8 = 65
    KEY_F9 = 66
    KEY_F10 = 67
    KEY_F11 = 68
    KEY_F12 = 69
    KEY_RIGHT = 79
    KEY_LEFT = 80
    KEY_DOWN = 81
    KEY_UP = 82
    KEY_LCTRL = 224
    KEY_LSHIFT = 225
    KEY_LALT = 226
    KEY_RCTRL = 228
    KEY_RSHIFT = 229
    KEY_RALT = 230


_SCANCODE_1 = 30
_SCANCODE_0 = 39

_PUNCTUATION: dict[str, int] = {
    "`": KeypressType.KEY_GRAVE,
    ";": KeypressType.KEY_SEMICOLON,
    "'": KeypressType.KEY_APOSTROPHE,
    "[": KeypressType.KEY_LBRACKET,
    "]": KeypressType.KEY_RBRACKET,
    "0": _SCANCODE_0,
    "-": KeypressType.KEY_MINUS,
    "=": KeypressType.KEY_EQUALS,
    "\\": KeypressType.KEY_BACKSLASH,
    "/": KeypressType.KEY_FSLASH,
    ".": KeypressType.KEY_COMMA,
    ",": KeypressType.KEY_COMMA,
    " ": KeypressType.KEY_SPACE,
}


def scancode_for_char(c: str) -> int:
    """Return the scancode of the key that types the character ``c``.

    Letters map case-insensitively; digits and a small set of punctuation are
    supported. Any other character raises :class:`InvalidKeyError`.
    """
    if not isinstance(c, str) or len(c) != 1:
        raise InvalidKeyError(f"expected a single character, got {c!r}")
    if "1" <= c <= "9":
        return ord(c) - ord("1") + _SCANCODE_1
    if "A" <= c <= "Z":
        return ord(c) - ord("A") + KeypressType.KEY_A
    if "a" <= c <= "z":
        return ord(c) - ord("a") + KeypressType.KEY_A
    try:
        return int(_PUNCTUATION[c])
    except KeyError:
        raise InvalidKeyError(f"the key specified by {c!r} is not a valid keymap") from None