"""menu.events — Click events delivered to buttons.

A ``ClickEvent`` is built by the dispatcher for every qualifying click.
The event itself is frozen; the only mutable thing it carries is the
``SlotRef`` pointing at the clicked slot's displayed icon, which a
button may overwrite so the view updates without a full redraw.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from menu.icon import Icon


class ClickType(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    SHIFT_LEFT = "shift_left"
    SHIFT_RIGHT = "shift_right"

    @property
    def is_left(self) -> bool:
        return self in (ClickType.LEFT, ClickType.SHIFT_LEFT)

    @property
    def is_right(self) -> bool:
        return self in (ClickType.RIGHT, ClickType.SHIFT_RIGHT)

    @property
    def is_shift(self) -> bool:
        return self in (ClickType.SHIFT_LEFT, ClickType.SHIFT_RIGHT)


class MenuView(Protocol):
    """The open, user-facing menu.  Closable once."""

    def close(self) -> None: ...


class SlotRef:
    """Mutable handle on one cell of a menu's displayed icons."""

    __slots__ = ("_icons", "_index")

    def __init__(self, icons: list, index: int) -> None:
        if not 0 <= index < len(icons):
            raise IndexError(f"slot {index} out of range (size {len(icons)})")
        self._icons = icons
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    def get(self) -> Icon | None:
        return self._icons[self._index]

    def set(self, icon: Icon | None) -> None:
        self._icons[self._index] = icon

    def __repr__(self) -> str:
        return f"SlotRef({self._index}, {self.get()!r})"


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """One user click on a slot."""
    view: MenuView
    slot: SlotRef
    click: ClickType = ClickType.LEFT

    @property
    def slot_index(self) -> int:
        return self.slot.index

    @property
    def current_icon(self) -> Icon | None:
        """Icon currently displayed in the clicked slot."""
        return self.slot.get()

    def set_current_icon(self, icon: Icon | None) -> None:
        self.slot.set(icon)
