"""Keyboard navigation rules for the project list and the detail view."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

BACK = "back"
INSTALL = "install"


class Key(IntEnum):
    """Control key codes delivered by the input device."""

    BACKSPACE = 8
    UP = 17
    DOWN = 18
    RIGHT = 19
    LEFT = 20
    ESC = 27
    DEL = 127


class NavKind(Enum):
    """What a key press on a project card leads to."""

    NONE = "none"
    FOCUS = "focus"
    PREVIOUS_PAGE = "previous_page"
    NEXT_PAGE = "next_page"
    SEARCH = "search"


@dataclass(frozen=True)
class NavAction:
    """Result of a key press: a card index to focus, or text to type."""

    kind: NavKind
    target: int | None = None
    char: str | None = None


def card_key_action(key: int, index: int, count: int) -> NavAction:
    """Decide what a key pressed on card *index* of *count* cards does."""
    if key == Key.UP:
        if index == 0:
            return NavAction(NavKind.PREVIOUS_PAGE)
        return NavAction(NavKind.FOCUS, target=index - 1)
    if key == Key.DOWN:
        if index == count - 1:
            return NavAction(NavKind.NEXT_PAGE)
        return NavAction(NavKind.FOCUS, target=index + 1)
    if ord(" ") <= key < Key.DEL:
        return NavAction(NavKind.SEARCH, char=chr(key))
    if key in (Key.ESC, Key.BACKSPACE, Key.DEL):
        return NavAction(NavKind.SEARCH)
    return NavAction(NavKind.NONE)


def detail_key_focus(key: int, focused: str) -> str | None:
    """Return the detail-view button to focus after *key*, or None.

    Up and down move between the ``back`` and ``install`` buttons.
    """
    if key == Key.UP:
        return INSTALL if focused == BACK else BACK
    if key == Key.DOWN:
        return BACK if focused == INSTALL else INSTALL
    return None