"""
core/app.py — Pygame application shell

Handles the window and main loop, and drives a ``MenuHost``: pygame
events go to its open menus, and every frame runs one scheduler tick.

    app = App(title="Shop", width=960, height=640)
    app.run(host)

The loop ends when the window is closed or the last menu is closed.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ui.host import MenuHost


class App:
    def __init__(self, title: str = "Menus", width: int = 960, height: int = 640):
        pygame.init()
        # The virtual (design) resolution — all rendering targets this.
        self._virtual_size = (width, height)
        self._render_surface = pygame.Surface((width, height))
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 60
        self.dt = 0.0

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 11)
        self.font_lg = pygame.font.SysFont("monospace", 18)

    # -- Coordinate mapping --

    def _remap_mouse_event(self, event: pygame.event.Event) -> pygame.event.Event:
        """Return a copy of *event* with .pos mapped to virtual coords."""
        if not hasattr(event, "pos"):
            return event
        sw, sh = self.screen.get_size()
        vw, vh = self._virtual_size
        attrs = {k: v for k, v in event.dict.items() if k != "pos"}
        attrs["pos"] = (int(event.pos[0] * vw / sw), int(event.pos[1] * vh / sh))
        return pygame.event.Event(event.type, **attrs)

    # -- Main loop --

    def run(self, host: MenuHost):
        while self.running and host.modals.is_open:
            self.dt = self.clock.tick(self.fps) / 1000.0

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.VIDEORESIZE:
                    self.screen = pygame.display.set_mode(
                        (event.w, event.h), pygame.RESIZABLE)
                else:
                    if event.type in (pygame.MOUSEBUTTONDOWN,
                                      pygame.MOUSEBUTTONUP,
                                      pygame.MOUSEMOTION):
                        event = self._remap_mouse_event(event)
                    host.handle_event(event)

            host.update(self.dt)

            self._render_surface.fill((20, 20, 28))
            host.draw(self._render_surface, self)
            pygame.transform.scale(self._render_surface,
                                   self.screen.get_size(), self.screen)
            pygame.display.flip()

        host.shutdown()
        pygame.quit()

    # -- Convenience --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None):
        """Quick text draw. Returns the rect for layout chaining."""
        f = font or self.font
        img = f.render(text, True, color)
        return surface.blit(img, (x, y))
