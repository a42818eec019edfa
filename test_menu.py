"""test_menu.py — MenuHolder dispatch, MenuModal input and MenuHost wiring.

Headless: pygame events are built by hand and fed to the host; nothing
is drawn and no window is opened.

Run:  python test_menu.py
"""
from __future__ import annotations
import os, sys, traceback

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# ── Bootstrap ────────────────────────────────────────────────────────
from core.tuning import load as _load_tuning
_load_tuning()

import pygame

from menu import (
    ClickType, CloseButton, ConstructionError, Icon, ItemButton,
    IteratingButton, MenuHolder, RedirectButton, ToggleButton,
)
from ui.host import MenuHost


# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
        raise AssertionError(f"{label} {detail}".strip())


# ── Helpers ──────────────────────────────────────────────────────────

class FakeView:
    def __init__(self):
        self.closes = 0

    def close(self):
        self.closes += 1


DOOR = Icon("oak_door", "Door")


def _mouse_down(view, slot: int, button: int = 1, mod: int = 0) -> pygame.event.Event:
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN,
                              pos=view.slot_rect(slot).center, button=button, mod=mod)


def _recorder(log: list):
    """IteratingButton that logs the click type of every click it sees."""
    return IteratingButton(DOOR, 0, lambda n: n + 1,
                           before_toggle=lambda b, c, e: log.append(e.click) or True)


# ════════════════════════════════════════════════════════════════════════
#  1 — MenuHolder
# ════════════════════════════════════════════════════════════════════════

def test_holder():
    print("\n=== 1: MenuHolder ===")
    host = MenuHost("shop")
    holder = MenuHolder(host, rows=2, title="Shop")
    view = FakeView()

    check(holder.size == 2 * holder.columns, "1a: size is rows × columns",
          f"size={holder.size}")
    check(holder.owner == "shop" and holder.scheduler is host.scheduler,
          "1b: holder exposes the host identity and scheduler")

    toggle = ToggleButton(Icon("lime_dye", "On"), Icon("gray_dye", "Off"))
    holder.set_button(3, toggle)
    check(holder.slot_icon(3) is toggle.icon, "1c: placing a button shows its icon")
    check(holder.add_button(ItemButton(DOOR)) == 0, "1d: add_button takes the first free slot")

    check(holder.click(3, view), "1e: click on a button is handled")
    check(holder.slot_icon(3).name == "On" and toggle.icon is holder.slot_icon(3),
          "1e: slot icon refreshed in place")
    check(not holder.click(5, view), "1f: empty slot ignored")
    check(not holder.click(holder.size, view) and not holder.click(-1, view),
          "1f: out-of-range slots ignored")
    check(holder.get_button(holder.size + 4) is None, "1f: get_button out of range is None")

    removed = holder.unset_button(3)
    check(removed is toggle and holder.slot_icon(3) is None, "1g: unset_button clears the slot")

    try:
        MenuHolder(host, rows=7)
        check(False, "1h: 7 rows rejected")
    except ConstructionError:
        ok("1h: 7 rows rejected")

    try:
        holder.set_button(0, "not a button")
        check(False, "1i: non-button rejected")
    except TypeError:
        ok("1i: non-button rejected")


def test_dispatch():
    print("\n=== 2: Dispatch ordering and errors ===")
    host = MenuHost("shop")
    holder = MenuHolder(host, rows=1)
    view = FakeView()
    order: list[str] = []

    def after_a(b, ctx, ev):
        order.append("A-after")
        ctx.click(1, ev.view)           # re-entrant click on another slot
        order.append("A-after-done")

    holder.set_button(0, IteratingButton(
        DOOR, 0, lambda n: n + 1,
        after_toggle=after_a,
        update_icon=lambda b, c, e, s: order.append("A-icon") or b.icon,
    ))
    holder.set_button(1, IteratingButton(
        DOOR, 0, lambda n: n + 1,
        after_toggle=lambda b, c, e: order.append("B"),
    ))
    holder.click(0, view)
    check(order == ["A-after", "A-after-done", "A-icon", "B"],
          "2a: click raised during dispatch runs after the current one",
          f"order={order}")

    def explode(b, ctx, ev):
        raise RuntimeError("hook exploded")

    holder.set_button(2, IteratingButton(DOOR, 0, lambda n: n + 1, before_toggle=explode))
    handled = holder.click(2, view)
    check(handled and holder.errors == 1, "2b: button failure logged and counted, not raised")
    holder.click(1, view)
    check(order[-1] == "B", "2b: holder keeps dispatching after a failure")

    # Queued click whose button is removed before it runs
    late: list[str] = []
    accepted: list[bool] = []

    def remove_b(b, ctx, ev):
        accepted.append(ctx.click(4, ev.view))
        ctx.unset_button(4)

    holder.set_button(3, IteratingButton(DOOR, 0, lambda n: n + 1, after_toggle=remove_b))
    holder.set_button(4, IteratingButton(DOOR, 0, lambda n: n + 1,
                                         after_toggle=lambda b, c, e: late.append("ran")))
    clicks_before = holder.clicks
    holder.click(3, view)
    check(accepted == [True] and late == [] and holder.clicks == clicks_before + 1,
          "2c: queued click is accepted but dropped once its button is removed",
          f"accepted={accepted} late={late}")


# ════════════════════════════════════════════════════════════════════════
#  3 — MenuModal input
# ════════════════════════════════════════════════════════════════════════

def test_modal_input():
    print("\n=== 3: MenuModal input ===")
    host = MenuHost("shop")
    holder = MenuHolder(host, rows=3)
    log: list[ClickType] = []
    holder.set_button(4, _recorder(log))
    view = host.open_menu(holder)

    check(view.slot_at(view.slot_rect(4).center) == 4, "3a: hit test finds the slot")
    check(view.slot_at((0, 0)) is None, "3a: outside the grid is no slot")

    host.handle_event(_mouse_down(view, 4, button=1))
    host.handle_event(_mouse_down(view, 4, button=3))
    host.handle_event(_mouse_down(view, 4, button=2))
    host.handle_event(_mouse_down(view, 4, button=1, mod=pygame.KMOD_LSHIFT))
    host.handle_event(_mouse_down(view, 4, button=3, mod=pygame.KMOD_RSHIFT))
    host.handle_event(_mouse_down(view, 4, button=4))       # wheel
    check(log == [ClickType.LEFT, ClickType.RIGHT, ClickType.MIDDLE,
                  ClickType.SHIFT_LEFT, ClickType.SHIFT_RIGHT],
          "3b: mouse buttons and shift map to click types", f"log={log}")

    host.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(0, 0), button=1, mod=0))
    check(len(log) == 5, "3c: click outside the grid does nothing")

    host.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0))
    check(view.is_closed and not host.modals.is_open, "3d: Escape closes the menu")

    host.handle_event(_mouse_down(view, 4))
    check(len(log) == 5, "3e: closed view ignores input")


# ════════════════════════════════════════════════════════════════════════
#  4 — MenuHost with deferred buttons
# ════════════════════════════════════════════════════════════════════════

def test_host_deferred():
    print("\n=== 4: MenuHost with deferred buttons ===")
    host = MenuHost("shop")
    holder = MenuHolder(host, rows=1, title="Main")
    holder.set_button(8, CloseButton())
    view = host.open_menu(holder)

    host.handle_event(_mouse_down(view, 8))
    check(not view.is_closed and host.active_view is view,
          "4a: close button does not close inside the click")
    ran = host.update(1 / 60)
    check(ran == 1 and view.is_closed and not host.modals.is_open,
          "4a: close happens on the next tick")

    view.close()
    check(view.is_closed, "4b: closing twice is harmless")

    # Redirect swaps menus one tick later
    host = MenuHost("shop")
    first = MenuHolder(host, rows=1, title="First")
    second = MenuHolder(host, rows=2, title="Second")
    first.set_button(0, RedirectButton(Icon("arrow", "Next"), lambda: second))
    view = host.open_menu(first)
    host.handle_event(_mouse_down(view, 0))
    check(host.active_view is view, "4c: redirect waits for the tick")
    host.update(1 / 60)
    check(view.is_closed and host.active_view.holder is second and len(host.modals) == 1,
          "4c: redirect replaced the menu")

    # Escape before the tick: the redirect is dropped
    host = MenuHost("shop")
    first = MenuHolder(host, rows=1, title="First")
    built: list[str] = []
    first.set_button(0, RedirectButton(Icon("arrow", "Next"),
                                       lambda: built.append("second") or MenuHolder(host, rows=2, title="Second")))
    view = host.open_menu(first)
    host.handle_event(_mouse_down(view, 0))
    host.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, mod=0))
    check(view.is_closed and not host.modals.is_open, "4e: Escape closes the menu before the tick")
    host.update(1 / 60)
    check(not host.modals.is_open and built == [],
          "4e: dismissed menu does not redirect on the next tick",
          f"open={len(host.modals)} built={built}")

    # Shutdown: later closes are silently dropped
    host = MenuHost("shop")
    holder = MenuHolder(host, rows=1)
    holder.set_button(0, CloseButton())
    view = host.open_menu(holder)
    host.shutdown()
    check(view.is_closed and not host.modals.is_open, "4d: shutdown closes open menus")
    holder.click(0, FakeView())
    check(holder.errors == 0 and host.scheduler.pending_count() == 0,
          "4d: close after shutdown is a silent no-op")


if __name__ == "__main__":
    sections = [
        ("MenuHolder", test_holder),
        ("Dispatch", test_dispatch),
        ("MenuModal input", test_modal_input),
        ("MenuHost deferred", test_host_deferred),
    ]

    for name, fn in sections:
        try:
            fn()
        except AssertionError:
            pass    # already reported by check()
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    total = _passed + _failed
    print(f"\n{'=' * 60}")
    print(f"  Menu Tests: {_passed} passed, {_failed} failed  (total {total})")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
