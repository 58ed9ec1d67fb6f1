"""Default physical-key bindings for the pager's abstract actions."""

from __future__ import annotations

from ..runtime.session import Action
from .key_registry import KeyComboBinding, KeyComboRegistry

DEFAULT_BINDINGS: tuple[KeyComboBinding, ...] = (
    KeyComboBinding(("q", "Q", "ESC", "CTRL_C"), Action.QUIT),
    KeyComboBinding(("TAB",), Action.CYCLE_VIEW),
    KeyComboBinding(("UP", "k"), Action.SCROLL_UP),
    KeyComboBinding(("DOWN", "j", "ENTER_CR", "ENTER_LF"), Action.SCROLL_DOWN),
    KeyComboBinding(("PAGE_UP", "b", "CTRL_B"), Action.PAGE_UP),
    KeyComboBinding(("PAGE_DOWN", " ", "f", "CTRL_F"), Action.PAGE_DOWN),
    KeyComboBinding(("HOME", "g"), Action.HOME),
    KeyComboBinding(("END", "G"), Action.END),
    KeyComboBinding(("CTRL_H", "?"), Action.SHOW_HELP),
)


def default_key_registry() -> KeyComboRegistry:
    return KeyComboRegistry().register_bindings(*DEFAULT_BINDINGS)
