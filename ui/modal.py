"""ui.modal — Abstract Modal base class and ModalStack manager.

Every overlay the host shows (menus today, prompts later) is a
``Modal`` subclass.  ``ModalStack`` keeps them layered and routes
events / updates / draws to the topmost one.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ui.commands import UICommand


class Modal(ABC):
    """Base class for all UI modals."""

    # ── lifecycle ───────────────────────────────────────────────────

    def on_close(self) -> None:
        """Called when this modal leaves the stack."""

    # ── per-frame ───────────────────────────────────────────────────

    @abstractmethod
    def update(self, dt: float) -> None:
        """Tick timers, animations, etc.  Called once per frame."""

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> list[UICommand]:
        """Process one pygame event.

        Returns a (possibly empty) list of commands for the host to
        execute.
        """

    @abstractmethod
    def draw(self, surface: pygame.Surface, app) -> None:
        """Render the modal onto *surface*."""


# ────────────────────────────────────────────────────────────────────
# Modal stack
# ────────────────────────────────────────────────────────────────────

class ModalStack:
    """Ordered stack of ``Modal`` overlays.

    Draws go bottom → top; events and updates only reach the top.
    """

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[Modal] = []

    # ── queries ─────────────────────────────────────────────────────

    @property
    def active(self) -> Modal | None:
        """The topmost modal, or *None* if the stack is empty."""
        return self._stack[-1] if self._stack else None

    @property
    def is_open(self) -> bool:
        return bool(self._stack)

    def __len__(self) -> int:
        return len(self._stack)

    # ── mutation ────────────────────────────────────────────────────

    def push(self, modal: Modal) -> None:
        self._stack.append(modal)

    def pop(self) -> Modal | None:
        if not self._stack:
            return None
        modal = self._stack.pop()
        modal.on_close()
        return modal

    def remove(self, modal: Modal) -> bool:
        """Take *modal* off the stack wherever it is.  False if absent."""
        try:
            self._stack.remove(modal)
        except ValueError:
            return False
        modal.on_close()
        return True

    def clear(self) -> None:
        while self._stack:
            self.pop()

    # ── per-frame dispatch ──────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event) -> list:
        """Route *event* to the topmost modal."""
        if self._stack:
            return self._stack[-1].handle_event(event)
        return []

    def update(self, dt: float) -> None:
        """Tick the topmost modal."""
        if self._stack:
            self._stack[-1].update(dt)

    def draw(self, surface: pygame.Surface, app) -> None:
        """Draw all modals bottom-to-top."""
        for modal in self._stack:
            modal.draw(surface, app)
