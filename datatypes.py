# --------------------------- Catalog item value type ---------------------------


import math
import numbers
from dataclasses import dataclass
from typing import List

from errors import InvalidItem


@dataclass(frozen=True)
class Item:
    """
    One catalog entry that can be bought for ``cost`` and yields ``benefit``.

    Items are immutable once built, so collections (catalog, filtered subset,
    selection result) may share them freely.

    Attributes
    ----------
    label   : human-readable description, must be non-empty
    cost    : price in budget units, must be > 0
    benefit : score being maximized, must be >= 0
    """
    label: str
    cost: float
    benefit: float

    def __post_init__(self) -> None:
        if not isinstance(self.label, str) or not self.label:
            raise InvalidItem("Item.label must be a non-empty string.")
        for name in ("cost", "benefit"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, numbers.Real):
                raise InvalidItem(f"Item[{self.label}] {name} must be a real number, got {val!r}.")
            if not math.isfinite(val):
                raise InvalidItem(f"Item[{self.label}] {name} must be finite, got {val!r}.")
        if not (self.cost > 0):
            raise InvalidItem(f"Item[{self.label}] cost must be > 0, got {self.cost!r}.")
        if not (self.benefit >= 0):
            raise InvalidItem(f"Item[{self.label}] benefit must be >= 0, got {self.benefit!r}.")

    @property
    def ratio(self) -> float:
        """Benefit per unit of cost; the greedy ranking key."""
        return self.benefit / self.cost


ItemCollection = List[Item]
