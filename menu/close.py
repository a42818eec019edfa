"""menu.close — Button that closes the menu it sits in."""

from __future__ import annotations
from typing import TYPE_CHECKING

from core import tuning
from menu.button import ItemButton, MenuContext
from menu.errors import ConstructionError
from menu.icon import Icon, IconBuilder

if TYPE_CHECKING:
    from menu.events import ClickEvent

DEFAULT_MATERIAL = "oak_door"
DEFAULT_LABEL = "Close"


def _close_icon(icon_or_material: Icon | str | None, label: str | None) -> Icon:
    if isinstance(icon_or_material, Icon):
        if label is not None:
            raise ConstructionError("CloseButton takes an Icon or a material + label, not both")
        return icon_or_material
    if icon_or_material is not None and not isinstance(icon_or_material, str):
        raise ConstructionError(
            f"CloseButton expects an Icon or a material id, got {icon_or_material!r}")
    material = icon_or_material or tuning.get("menu.close_button", "material", DEFAULT_MATERIAL)
    if label is None:
        label = tuning.get("menu.close_button", "label", DEFAULT_LABEL)
    return IconBuilder(material).name(label).build()


class CloseButton(ItemButton):
    """Closes the view one tick after being clicked.

    Closing the view from inside its own click event is not safe, so the
    close is handed to the host scheduler instead.  If the scheduler has
    shut down the close simply never happens.

        CloseButton()                     # oak door labelled "Close"
        CloseButton("barrier")            # custom material
        CloseButton("barrier", "Leave")   # custom material and label
        CloseButton(my_icon)              # pre-built icon
    """

    def __init__(self, icon: Icon | str | None = None, label: str | None = None) -> None:
        super().__init__(_close_icon(icon, label))

    def on_click(self, context: MenuContext, event: ClickEvent) -> None:
        context.scheduler.run_task(context.owner, event.view.close)
