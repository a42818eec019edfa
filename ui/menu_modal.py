"""ui.menu_modal — The on-screen view of a ``MenuHolder``.

Draws the holder's slot grid as a centred panel and turns pygame mouse
clicks into ``MenuHolder.click`` calls.  The modal is the ``MenuView``
buttons receive in their click events: ``close()`` takes it off the
modal stack, once.
"""

from __future__ import annotations
import pygame

from core import tuning
from menu.events import ClickType
from menu.holder import MenuHolder
from menu.icon import MaterialRegistry
from ui.commands import CloseModal, UICommand
from ui.helpers import draw_overlay, draw_title_bar, draw_slot, grid_size, slot_rects
from ui.modal import Modal, ModalStack

PANEL_PAD = 14
FOOTER_H = 40

_MOUSE_BUTTONS = {1: ClickType.LEFT, 2: ClickType.MIDDLE, 3: ClickType.RIGHT}
_SHIFTED = {ClickType.LEFT: ClickType.SHIFT_LEFT, ClickType.RIGHT: ClickType.SHIFT_RIGHT}


class MenuModal(Modal):
    """Overlay showing one menu."""

    def __init__(
        self,
        holder: MenuHolder,
        stack: ModalStack,
        registry: MaterialRegistry | None = None,
        screen_size: tuple[int, int] = (960, 640),
    ) -> None:
        self.holder = holder
        self.stack = stack
        self.registry = registry if registry is not None else MaterialRegistry.with_defaults()

        self._closed = False
        self._hover_slot: int = -1
        self._panel = pygame.Rect(0, 0, 0, 0)
        self._slot_rects: list[pygame.Rect] = []
        self._layout(*screen_size)

    # ── MenuView ────────────────────────────────────────────────────

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.stack.remove(self)

    def on_close(self) -> None:
        self._closed = True

    # ── layout ──────────────────────────────────────────────────────

    def _layout(self, sw: int, sh: int) -> None:
        title_h = int(tuning.get("menu", "title_height", 30))
        gw, gh = grid_size(self.holder.rows, self.holder.columns)
        pw = gw + PANEL_PAD * 2
        ph = title_h + gh + PANEL_PAD * 2 + FOOTER_H
        px = (sw - pw) // 2
        py = (sh - ph) // 2
        self._panel = pygame.Rect(px, py, pw, ph)
        self._slot_rects = slot_rects(px + PANEL_PAD, py + title_h + PANEL_PAD,
                                      self.holder.rows, self.holder.columns)

    def slot_at(self, pos: tuple[int, int]) -> int | None:
        """Slot index under *pos*, or None."""
        for slot, rect in enumerate(self._slot_rects):
            if rect.collidepoint(pos):
                return slot
        return None

    def slot_rect(self, slot: int) -> pygame.Rect:
        return self._slot_rects[slot]

    # ── Modal interface ─────────────────────────────────────────────

    def update(self, dt: float) -> None:
        pass

    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        if self._closed:
            return []

        if event.type == pygame.MOUSEMOTION:
            slot = self.slot_at(event.pos)
            self._hover_slot = -1 if slot is None else slot
            return []

        if event.type == pygame.MOUSEBUTTONDOWN:
            self._handle_mouse_click(event)
            return []

        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return [CloseModal()]

        return []

    def draw(self, surface: pygame.Surface, app) -> None:
        self._layout(*surface.get_size())
        draw_overlay(surface)

        panel = self._panel
        pygame.draw.rect(surface, (35, 35, 55), panel)
        pygame.draw.rect(surface, (140, 140, 180), panel, 2)
        draw_title_bar(surface, app, panel.x, panel.y, panel.w, self.holder.title)

        for slot, rect in enumerate(self._slot_rects):
            icon = self.holder.slot_icon(slot)
            if icon is None:
                draw_slot(surface, app, rect, hovered=(slot == self._hover_slot))
                continue
            char, color = self.registry.sprite_info(icon.material)
            draw_slot(surface, app, rect, char=char, color=color,
                      amount=icon.amount, hovered=(slot == self._hover_slot))

        # Hovered icon label
        y = panel.bottom - FOOTER_H + 4
        if 0 <= self._hover_slot < self.holder.size:
            icon = self.holder.slot_icon(self._hover_slot)
            if icon is not None:
                text = icon.label
                if icon.lore:
                    text += "  — " + " / ".join(icon.lore)
                app.draw_text(surface, text, panel.x + PANEL_PAD, y,
                              (220, 220, 220), font=app.font_sm)

        app.draw_text(surface, "[Click] Use  [Shift+Click] Alt  [Esc] Close",
                      panel.x + PANEL_PAD, panel.bottom - 18,
                      (100, 180, 100), font=app.font_sm)

    # ── mouse ───────────────────────────────────────────────────────

    def _handle_mouse_click(self, event: pygame.event.Event) -> None:
        click = _MOUSE_BUTTONS.get(getattr(event, "button", 0))
        if click is None:           # wheel, side buttons
            return
        slot = self.slot_at(event.pos)
        if slot is None:
            return
        mods = getattr(event, "mod", None)
        if mods is None:
            mods = pygame.key.get_mods() if pygame.display.get_init() else 0
        if mods & pygame.KMOD_SHIFT:
            click = _SHIFTED.get(click, click)
        self.holder.click(slot, self, click)

    def __repr__(self) -> str:
        return f"MenuModal({self.holder.title!r}, closed={self._closed})"
