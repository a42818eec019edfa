"""menu.button — The button contract and its icon-holding base.

Every slot in a menu holds at most one ``Button``.  The dispatcher calls
``on_click(context, event)`` once per click, synchronously; whatever the
handler raises goes back to the dispatcher untouched.

``ItemButton`` is the plain implementation: it shows an icon and does
nothing when clicked.  Buttons with behaviour build on it.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

from menu.errors import ConstructionError
from menu.icon import Icon

if TYPE_CHECKING:
    from core.scheduler import TickScheduler
    from menu.events import ClickEvent


class MenuContext(Protocol):
    """Read-only host services handed to every click handler and hook."""

    @property
    def owner(self) -> str:
        """Identity of the owning application; used as the task owner."""

    @property
    def scheduler(self) -> TickScheduler:
        """The host's cooperative task scheduler."""


class Button(ABC):
    """Anything that can sit in a slot."""

    @property
    @abstractmethod
    def icon(self) -> Icon:
        """The icon currently shown for this button."""

    @abstractmethod
    def on_click(self, context: MenuContext, event: ClickEvent) -> None:
        """Handle one click on the slot holding this button."""


class ItemButton(Button):
    """A button that displays an icon and ignores clicks."""

    def __init__(self, icon: Icon) -> None:
        if icon is None:
            raise ConstructionError(f"{type(self).__name__} needs an icon")
        if not isinstance(icon, Icon):
            raise ConstructionError(f"expected an Icon, got {type(icon).__name__}")
        self._icon = icon

    @property
    def icon(self) -> Icon:
        return self._icon

    def _set_icon(self, icon: Icon) -> Icon:
        # Single mutation path for the icon field.
        if not isinstance(icon, Icon):
            raise TypeError(f"expected an Icon, got {icon!r}")
        self._icon = icon
        return icon

    def on_click(self, context: MenuContext, event: ClickEvent) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._icon.label!r})"
