"""ui.host — The application side of the menu framework.

``MenuHost`` is what buttons see as their owner: it has a name (the
task owner id), the ``TickScheduler`` deferred actions go to, and the
``ModalStack`` that open menus live on.

    host = MenuHost("shop")
    view = host.open_menu(holder)
    ...
    host.handle_event(event)     # per pygame event
    host.update(dt)              # per frame: one scheduler tick
    host.draw(surface, app)
"""

from __future__ import annotations
import pygame

from core.scheduler import TickScheduler
from menu.holder import MenuHolder
from menu.icon import MaterialRegistry
from ui.commands import CloseModal, UICommand
from ui.menu_modal import MenuModal
from ui.modal import ModalStack


class MenuHost:
    """Owns the scheduler and modal stack for a set of menus."""

    def __init__(
        self,
        name: str = "menus",
        scheduler: TickScheduler | None = None,
        registry: MaterialRegistry | None = None,
        screen_size: tuple[int, int] = (960, 640),
    ) -> None:
        self.name = name
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.registry = registry if registry is not None else MaterialRegistry.with_defaults()
        self.screen_size = screen_size
        self.modals = ModalStack()

    # ── menus ───────────────────────────────────────────────────────

    @property
    def active_view(self) -> MenuModal | None:
        return self.modals.active

    def open_menu(self, holder: MenuHolder) -> MenuModal:
        """Show *holder* on top of any open menu and return its view."""
        view = MenuModal(holder, self.modals, self.registry, self.screen_size)
        self.modals.push(view)
        return view

    # ── per-frame ───────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> None:
        for cmd in self.modals.handle_event(event):
            self.apply(cmd)

    def apply(self, cmd: UICommand) -> None:
        if isinstance(cmd, CloseModal):
            view = self.modals.active
            if view is not None:
                view.close()
        else:
            print(f"[MENU] unknown command {cmd!r}")

    def update(self, dt: float) -> int:
        """Advance open menus and run one scheduler tick.  Returns tasks run."""
        self.modals.update(dt)
        return self.scheduler.tick()

    def draw(self, surface: pygame.Surface, app) -> None:
        self.modals.draw(surface, app)

    def shutdown(self) -> None:
        """Stop scheduling and close every open menu."""
        dropped = self.scheduler.shutdown()
        self.modals.clear()
        print(f"[MENU] {self.name} shut down ({dropped} pending tasks dropped)")

    def __repr__(self) -> str:
        return f"MenuHost({self.name!r}, open={len(self.modals)}, {self.scheduler!r})"
