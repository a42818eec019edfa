"""menu.redirect — Button that swaps the open menu for another one."""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable

from menu.button import ItemButton
from menu.errors import ConstructionError
from menu.icon import Icon

if TYPE_CHECKING:
    from menu.events import ClickEvent
    from menu.holder import MenuHolder


class RedirectButton(ItemButton):
    """On click, close this view and open the menu built by *target*.

    Both steps run on the next scheduler tick, for the same reason
    ``CloseButton`` defers its close.  *target* is called at that point,
    so it can build a fresh menu each time.
    If the view was closed before the tick, the redirect is dropped.
    """

    def __init__(self, icon: Icon, target: Callable[[], MenuHolder]) -> None:
        super().__init__(icon)
        if not callable(target):
            raise ConstructionError(f"RedirectButton target must be callable, got {target!r}")
        self._target = target

    def on_click(self, context: MenuHolder, event: ClickEvent) -> None:
        host = context.host
        view = event.view
        target = self._target

        def redirect() -> None:
            if getattr(view, "is_closed", False):   # dismissed before the tick
                return
            view.close()
            host.open_menu(target())

        context.scheduler.run_task(context.owner, redirect)
