"""menu.holder — A menu's slot grid and click dispatcher.

``MenuHolder`` owns the buttons placed in a menu and the icons currently
displayed in each slot.  It is also the context object passed to every
button: it knows the owning host (identity + scheduler).

    holder = MenuHolder(host, rows=3, title="Shop")
    holder.set_button(26, CloseButton())
    holder.click(26, view)            # the view forwards user clicks here

Dispatch rules:
  - Clicks on empty or out-of-range slots are ignored.
  - A click that arrives while another is being dispatched (e.g. from
    inside a hook) is queued and handled after it, in arrival order.
    If its button is removed first, the queued click is dropped.
  - Whatever a button raises is logged here and counted in ``errors``;
    it never reaches the view or the event loop.
"""

from __future__ import annotations
import traceback
from collections import deque
from typing import TYPE_CHECKING, Iterator, Protocol

from core import tuning
from menu.button import Button
from menu.errors import ConstructionError
from menu.events import ClickEvent, ClickType, MenuView, SlotRef

if TYPE_CHECKING:
    from core.scheduler import TickScheduler
    from menu.icon import Icon


class MenuHostLike(Protocol):
    name: str
    scheduler: TickScheduler

    def open_menu(self, holder: MenuHolder): ...


class MenuHolder:
    """Slot grid + dispatcher for one menu."""

    def __init__(self, host: MenuHostLike, rows: int | None = None,
                 title: str = "Menu") -> None:
        self.columns: int = int(tuning.get("menu", "columns", 9))
        max_rows = int(tuning.get("menu", "max_rows", 6))
        if rows is None:
            rows = int(tuning.get("menu", "default_rows", 3))
        if not 1 <= rows <= max_rows:
            raise ConstructionError(f"menu rows must be 1..{max_rows}, got {rows}")
        if host is None:
            raise ConstructionError("MenuHolder needs a host")

        self._host = host
        self.rows = rows
        self.title = title

        self._buttons: list[Button | None] = [None] * self.size
        self._icons: list[Icon | None] = [None] * self.size

        self._pending: deque[tuple[int, MenuView, ClickType]] = deque()
        self._dispatching: bool = False

        # Stats
        self.clicks: int = 0
        self.errors: int = 0

    # ── context surface ─────────────────────────────────────────────

    @property
    def host(self) -> MenuHostLike:
        return self._host

    @property
    def owner(self) -> str:
        return self._host.name

    @property
    def scheduler(self) -> TickScheduler:
        return self._host.scheduler

    # ── slots ───────────────────────────────────────────────────────

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def _check_slot(self, slot: int) -> None:
        if not 0 <= slot < self.size:
            raise IndexError(f"slot {slot} out of range for {self.title!r} (size {self.size})")

    def set_button(self, slot: int, button: Button) -> None:
        """Place *button* in *slot*, replacing whatever was there."""
        self._check_slot(slot)
        if not isinstance(button, Button):
            raise TypeError(f"expected a Button, got {button!r}")
        self._buttons[slot] = button
        self._icons[slot] = button.icon

    def add_button(self, button: Button) -> int | None:
        """Place *button* in the first empty slot.  Returns the slot or None if full."""
        for slot, existing in enumerate(self._buttons):
            if existing is None:
                self.set_button(slot, button)
                return slot
        return None

    def unset_button(self, slot: int) -> Button | None:
        self._check_slot(slot)
        button = self._buttons[slot]
        self._buttons[slot] = None
        self._icons[slot] = None
        return button

    def get_button(self, slot: int) -> Button | None:
        if not 0 <= slot < self.size:
            return None
        return self._buttons[slot]

    def buttons(self) -> Iterator[tuple[int, Button]]:
        """Yield (slot, button) for every occupied slot."""
        for slot, button in enumerate(self._buttons):
            if button is not None:
                yield slot, button

    def slot_icon(self, slot: int) -> Icon | None:
        """Icon currently displayed in *slot*."""
        self._check_slot(slot)
        return self._icons[slot]

    def clear(self) -> None:
        for slot in range(self.size):
            self._buttons[slot] = None
            self._icons[slot] = None

    # ── dispatch ────────────────────────────────────────────────────

    def click(self, slot: int, view: MenuView,
              click: ClickType = ClickType.LEFT) -> bool:
        """Deliver a click on *slot*.

        Returns True if the click was accepted, False if the slot was empty
        or out of range.  Accepted is not handled: a click queued during
        another dispatch is dropped if its button is removed before it runs.
        """
        if self.get_button(slot) is None:
            return False
        self._pending.append((slot, view, click))
        if self._dispatching:
            return True

        self._dispatching = True
        try:
            while self._pending:
                self._dispatch(*self._pending.popleft())
        finally:
            self._dispatching = False
        return True

    def _dispatch(self, slot: int, view: MenuView, click: ClickType) -> None:
        button = self._buttons[slot]
        if button is None:      # removed while the click was queued
            return
        event = ClickEvent(view=view, slot=SlotRef(self._icons, slot), click=click)
        self.clicks += 1
        try:
            button.on_click(self, event)
        except Exception as exc:
            self.errors += 1
            print(f"[MENU] {self.title}: {button!r} in slot {slot} failed: {exc}")
            traceback.print_exc()

    def __repr__(self) -> str:
        used = sum(1 for b in self._buttons if b is not None)
        return f"MenuHolder({self.title!r}, {self.rows}x{self.columns}, buttons={used})"
