"""ui.commands — Command objects emitted by modals.

Modals return these instead of reaching into the host.  ``MenuHost``
reads the list after each event and applies every command.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class CloseModal:
    """Close the top modal."""


# Union of every command type — extend as new commands are added.
UICommand = Union[CloseModal]
