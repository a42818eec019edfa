"""menu — Clickable slot buttons.

Buttons live in the slots of a ``MenuHolder``.  The holder dispatches
clicks to them; each button reacts by changing its own state, swapping
its icon, or scheduling work on the host for the next tick.
"""

from menu.button import Button, ItemButton, MenuContext
from menu.close import CloseButton
from menu.cycle import CycleButton, ToggleButton
from menu.errors import ConstructionError, MenuError
from menu.events import ClickEvent, ClickType, MenuView, SlotRef
from menu.holder import MenuHolder
from menu.icon import Icon, IconBuilder, MaterialRegistry
from menu.iterating import IteratingButton
from menu.redirect import RedirectButton

__all__ = [
    "Button", "ItemButton", "MenuContext",
    "IteratingButton", "CycleButton", "ToggleButton",
    "CloseButton", "RedirectButton",
    "ClickEvent", "ClickType", "MenuView", "SlotRef",
    "MenuHolder",
    "Icon", "IconBuilder", "MaterialRegistry",
    "MenuError", "ConstructionError",
]
