"""ui — pygame side of the menu framework.

``MenuHost`` keeps a ``ModalStack`` of ``MenuModal`` views, forwards
pygame events to the top one and ticks the scheduler once per frame.
"""

from ui.modal import Modal, ModalStack
from ui.commands import CloseModal, UICommand
from ui.menu_modal import MenuModal
from ui.host import MenuHost

__all__ = [
    "Modal", "ModalStack",
    "CloseModal", "UICommand",
    "MenuModal", "MenuHost",
]
