"""ui.helpers — Shared drawing utilities for menu panels."""

from __future__ import annotations
import pygame

from core import tuning


def draw_overlay(surface: pygame.Surface, alpha: int = 200) -> None:
    """Full-screen semi-transparent dark overlay."""
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, alpha))
    surface.blit(overlay, (0, 0))


def draw_title_bar(
    surface: pygame.Surface, app,
    x: int, y: int, w: int, text: str,
) -> None:
    """Draw the title bar at the top of a panel."""
    h = int(tuning.get("menu", "title_height", 30))
    pygame.draw.rect(surface, (50, 50, 75), (x, y, w, h))
    app.draw_text(surface, text, x + 12, y + 7,
                  (200, 200, 255), font=app.font_lg)


# ── slot grid ──────────────────────────────────────────────────────

def grid_size(rows: int, columns: int) -> tuple[int, int]:
    """Pixel (w, h) of a slot grid, gaps included."""
    size = int(tuning.get("menu", "slot_size", 40))
    gap = int(tuning.get("menu", "slot_gap", 4))
    return columns * size + (columns - 1) * gap, rows * size + (rows - 1) * gap


def slot_rects(x: int, y: int, rows: int, columns: int) -> list[pygame.Rect]:
    """Slot boxes in slot-index order (row-major), top-left at (x, y)."""
    size = int(tuning.get("menu", "slot_size", 40))
    gap = int(tuning.get("menu", "slot_gap", 4))
    return [
        pygame.Rect(x + col * (size + gap), y + row * (size + gap), size, size)
        for row in range(rows)
        for col in range(columns)
    ]


def draw_slot(
    surface: pygame.Surface,
    app,
    rect: pygame.Rect,
    *,
    char: str = "",
    color: tuple = (200, 200, 200),
    amount: int = 1,
    hovered: bool = False,
) -> None:
    """Draw one slot box and, if *char* is set, its icon glyph."""
    pygame.draw.rect(surface, (60, 60, 90) if hovered else (45, 45, 65), rect)
    pygame.draw.rect(surface, (110, 110, 150), rect, 1)
    if not char:
        return
    app.draw_text(surface, char, rect.x + rect.w // 2 - 5, rect.y + rect.h // 2 - 9,
                  color, font=app.font_lg)
    if amount > 1:
        app.draw_text(surface, str(amount), rect.right - 14, rect.bottom - 13,
                      (230, 230, 230), font=app.font_sm)
