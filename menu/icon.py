"""menu.icon — Slot icons and the builder that makes them.

An ``Icon`` is the renderable value shown in a slot: a material id, a
display name, optional lore lines and a stack amount.  Icons are frozen;
a button that wants to look different swaps in a new icon.

    icon = IconBuilder("oak_door").name("Close").lore("Leave the shop").build()

``MaterialRegistry`` maps material ids to the glyph and colour the
modal draws for them, the same way ``ItemRegistry`` serves sprite info
for inventory rows.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace

MAX_AMOUNT = 64


@dataclass(frozen=True, slots=True)
class Icon:
    """Immutable slot icon."""
    material: str
    name: str = ""
    lore: tuple[str, ...] = ()
    amount: int = 1

    def __post_init__(self) -> None:
        if not self.material:
            raise ValueError("Icon material cannot be empty")
        if not 1 <= self.amount <= MAX_AMOUNT:
            raise ValueError(f"Icon amount must be 1..{MAX_AMOUNT}, got {self.amount}")
        # Accept any iterable of lines but always store a tuple
        if not isinstance(self.lore, tuple):
            object.__setattr__(self, "lore", tuple(self.lore))

    @property
    def label(self) -> str:
        """Display name, falling back to the material id."""
        return self.name or self.material

    def with_name(self, name: str) -> Icon:
        return replace(self, name=name)

    def with_lore(self, *lines: str) -> Icon:
        return replace(self, lore=tuple(lines))

    def with_amount(self, amount: int) -> Icon:
        return replace(self, amount=amount)


class IconBuilder:
    """Fluent builder producing an ``Icon`` from a material and a label."""

    __slots__ = ("_material", "_name", "_lore", "_amount")

    def __init__(self, material: str) -> None:
        self._material = material
        self._name = ""
        self._lore: list[str] = []
        self._amount = 1

    def name(self, name: str) -> IconBuilder:
        self._name = name
        return self

    def lore(self, *lines: str) -> IconBuilder:
        self._lore.extend(lines)
        return self

    def amount(self, amount: int) -> IconBuilder:
        self._amount = amount
        return self

    def build(self) -> Icon:
        return Icon(
            material=self._material,
            name=self._name,
            lore=tuple(self._lore),
            amount=self._amount,
        )


@dataclass
class MaterialRegistry:
    """Lookup table mapping material ids → glyph and colour.

    Unknown materials draw as the first letter of the id in grey.
    """
    _entries: dict = field(default_factory=dict)

    def register(self, material: str, char: str = "?",
                 color: tuple = (200, 200, 200)) -> None:
        self._entries[material] = {"char": char, "color": color}

    def sprite_info(self, material: str) -> tuple[str, tuple]:
        """Return (char, color) for a material, with sensible defaults."""
        entry = self._entries.get(material)
        if entry:
            return entry["char"], entry["color"]
        return (material[:1].upper() or "?"), (200, 200, 200)

    @classmethod
    def with_defaults(cls) -> MaterialRegistry:
        """Registry pre-filled with the materials the built-in buttons use."""
        reg = cls()
        reg.register("oak_door", "D", (170, 120, 60))
        reg.register("barrier", "X", (220, 60, 60))
        reg.register("lime_dye", "+", (120, 220, 80))
        reg.register("gray_dye", "-", (140, 140, 140))
        reg.register("arrow", ">", (210, 210, 210))
        return reg
