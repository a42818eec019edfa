"""menu.cycle — Ready-made iterating buttons.

``CycleButton`` steps through a fixed list of icons; ``ToggleButton``
flips a boolean and shows an on or off icon.  Both are plain
``IteratingButton`` instances with the icon refresh hook filled in.
Guard and post-effect hooks can still be passed through.
"""

from __future__ import annotations
from typing import Sequence

from menu.errors import ConstructionError
from menu.icon import Icon
from menu.iterating import AfterToggle, BeforeToggle, IteratingButton


class CycleButton(IteratingButton[int]):
    """Cycles through *icons*; the state is the index of the one shown."""

    def __init__(
        self,
        icons: Sequence[Icon],
        start: int = 0,
        *,
        before_toggle: BeforeToggle | None = None,
        after_toggle: AfterToggle | None = None,
    ) -> None:
        icons = tuple(icons)
        if not icons:
            raise ConstructionError("CycleButton needs at least one icon")
        if not 0 <= start < len(icons):
            raise ConstructionError(f"start index {start} out of range for {len(icons)} icons")
        self.icons = icons
        n = len(icons)
        super().__init__(
            icons[start], start, lambda i: (i + 1) % n,
            before_toggle=before_toggle,
            after_toggle=after_toggle,
            update_icon=_icon_for_index,
        )


def _icon_for_index(button: CycleButton, context, event, toggle_success: bool) -> Icon:
    return button.icons[button.current_state]


class ToggleButton(IteratingButton[bool]):
    """Two-state button: *on_icon* while enabled, *off_icon* otherwise."""

    def __init__(
        self,
        on_icon: Icon,
        off_icon: Icon,
        enabled: bool = False,
        *,
        before_toggle: BeforeToggle | None = None,
        after_toggle: AfterToggle | None = None,
    ) -> None:
        if on_icon is None or off_icon is None:
            raise ConstructionError("ToggleButton needs both an on and an off icon")
        self.on_icon = on_icon
        self.off_icon = off_icon
        super().__init__(
            on_icon if enabled else off_icon, bool(enabled), _flip,
            before_toggle=before_toggle,
            after_toggle=after_toggle,
            update_icon=_icon_for_flag,
        )

    @property
    def enabled(self) -> bool:
        return self.current_state


def _flip(enabled: bool) -> bool:
    return not enabled


def _icon_for_flag(button: ToggleButton, context, event, toggle_success: bool) -> Icon:
    return button.on_icon if button.current_state else button.off_icon
