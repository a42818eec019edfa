"""menu.iterating — Generic cyclic-state button.

An ``IteratingButton`` owns one state value and a pure transition
function.  Each click runs the toggle protocol:

  1. guard        ``before_toggle(button, ctx, event) -> bool``
  2. transition   ``state = transition(state)``       (only if permitted)
  3. post-effect  ``after_toggle(button, ctx, event)`` (only if permitted)
  4. icon refresh ``update_icon(button, ctx, event, toggle_success) -> Icon``

The refreshed icon becomes the button's icon and is written into the
clicked slot.  A refused guard still refreshes the icon (with
``toggle_success=False``) so a "denied" look can be shown; it does not
undo anything an earlier toggle changed.

Hooks are plain callables passed at construction; any hook left out
uses the module default below.  Nothing here catches exceptions: a
failing hook or transition propagates to the dispatcher.

    counter = IteratingButton(
        Icon("paper", "Count: 0"), 0, lambda n: n + 1,
        update_icon=lambda b, ctx, ev, ok: b.icon.with_name(f"Count: {b.current_state}"),
    )
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from menu.button import ItemButton, MenuContext
from menu.errors import ConstructionError, MenuError
from menu.icon import Icon

if TYPE_CHECKING:
    from menu.events import ClickEvent

T = TypeVar("T")

BeforeToggle = Callable[["IteratingButton", MenuContext, "ClickEvent"], bool]
AfterToggle = Callable[["IteratingButton", MenuContext, "ClickEvent"], None]
UpdateIcon = Callable[["IteratingButton", MenuContext, "ClickEvent", bool], Icon]


class _Unset:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


# ── default hooks ────────────────────────────────────────────────────

def always_permit(button: IteratingButton, context: MenuContext,
                  event: ClickEvent) -> bool:
    return True


def no_effect(button: IteratingButton, context: MenuContext,
              event: ClickEvent) -> None:
    return None


def keep_icon(button: IteratingButton, context: MenuContext,
              event: ClickEvent, toggle_success: bool) -> Icon:
    return button.icon


def _require_callable(value, what: str, default):
    if value is None:
        return default
    if not callable(value):
        raise ConstructionError(f"{what} must be callable, got {value!r}")
    return value


# ── button ───────────────────────────────────────────────────────────

class IteratingButton(ItemButton, Generic[T]):
    """Button that advances its state one step per permitted click."""

    def __init__(
        self,
        icon: Icon,
        initial_state: T = UNSET,
        transition: Callable[[T], T] | None = None,
        *,
        state_factory: Callable[[], T] | None = None,
        before_toggle: BeforeToggle | None = None,
        after_toggle: AfterToggle | None = None,
        update_icon: UpdateIcon | None = None,
    ) -> None:
        super().__init__(icon)
        if transition is None:
            raise ConstructionError("IteratingButton transition cannot be None")
        if not callable(transition):
            raise ConstructionError(f"transition must be callable, got {transition!r}")
        if state_factory is not None and initial_state is not UNSET:
            raise ConstructionError("pass either initial_state or state_factory, not both")
        if state_factory is None and initial_state is UNSET:
            raise ConstructionError("IteratingButton needs initial_state or state_factory")

        self._transition = transition
        self._state = initial_state
        self._state_factory = _require_callable(state_factory, "state_factory", None)
        self._before_toggle = _require_callable(before_toggle, "before_toggle", always_permit)
        self._after_toggle = _require_callable(after_toggle, "after_toggle", no_effect)
        self._update_icon = _require_callable(update_icon, "update_icon", keep_icon)
        self.toggles: int = 0

    # ── state ───────────────────────────────────────────────────────

    @property
    def current_state(self) -> T:
        if self._state is UNSET:
            self._state = self._state_factory()
            self._state_factory = None
        return self._state

    @property
    def transition(self) -> Callable[[T], T]:
        return self._transition

    # ── toggle protocol ─────────────────────────────────────────────

    def on_click(self, context: MenuContext, event: ClickEvent) -> None:
        toggle_success = self.try_toggle(context, event)
        icon = self._update_icon(self, context, event, toggle_success)
        if icon is None:
            raise MenuError(f"update_icon for {self!r} returned None")
        event.set_current_icon(self._set_icon(icon))

    def try_toggle(self, context: MenuContext, event: ClickEvent) -> bool:
        """Run guard, transition and post-effect.  Returns whether it toggled."""
        if not self._before_toggle(self, context, event):
            return False
        self._state = self._transition(self.current_state)
        self.toggles += 1
        self._after_toggle(self, context, event)
        return True

    def __repr__(self) -> str:
        state = self._state if self._state is not UNSET else "<unset>"
        return f"{type(self).__name__}({self.icon.label!r}, state={state!r})"
