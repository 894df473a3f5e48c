from typing import Iterable, List, Sequence
from datatypes import Item, ItemCollection
from errors import InputTooLarge

# Subset masks are limited to 63 usable bits.
MAX_EXHAUSTIVE_ITEMS = 64


def validate_items(items: Iterable[Item]) -> ItemCollection:
	"""Validate that every element of ``items`` is an Item and return them as a list.

	Parameters
	----------
	items : Iterable[Item]
		Collection handed to a selector. May be empty.

	Returns
	-------
	ItemCollection
		A new list holding the same Item objects, in the same order.

	Raises
	------
	TypeError
		If ``items`` is None, a string, or contains anything other than Item.
	"""
	if items is None:
		raise TypeError("items must be a collection of Item, not None.")
	if isinstance(items, (str, bytes)):
		raise TypeError("items must be a collection of Item, not a string.")
	out: List[Item] = []
	for idx, it in enumerate(items):
		if not isinstance(it, Item):
			raise TypeError(f"items[{idx}] must be an Item, got {type(it).__name__}.")
		out.append(it)
	return out


def validate_exhaustive_size(items: Sequence[Item]) -> None:
	"""Raise InputTooLarge when ``items`` cannot be enumerated with a 64-bit mask."""
	n = len(items)
	if n >= MAX_EXHAUSTIVE_ITEMS:
		raise InputTooLarge(
			f"exhaustive search supports fewer than {MAX_EXHAUSTIVE_ITEMS} items, got {n}; filter the catalog first."
		)


def validate_settings(
	*,
	budget: float,
	min_benefit: float,
	max_benefit: float,
	max_size: int,
	repeats: int,
	greedy_size_step: int,
) -> None:
	"""Validate run/benchmark settings.

	Parameters
	----------
	budget : float
		Total cost allowed for a selection; must be >= 0.
	min_benefit, max_benefit : float
		Inclusive benefit range passed to the filter; min must not exceed max.
	max_size : int
		Largest exhaustive input size; 1 <= max_size < 64.
	repeats : int
		Timed runs per size step; >= 1.
	greedy_size_step : int
		Greedy input size multiplier per step; >= 1.

	Raises
	------
	ValueError
		If any value is out of range or of the wrong type.
	InputTooLarge
		If ``max_size`` would overflow the exhaustive subset mask.
	"""
	for name, val in (("budget", budget), ("min_benefit", min_benefit), ("max_benefit", max_benefit)):
		if isinstance(val, bool) or not isinstance(val, (int, float)):
			raise ValueError(f"{name} must be a number, got {val!r}.")
	if not (budget >= 0):
		raise ValueError(f"budget must be >= 0, got {budget!r}.")
	if min_benefit > max_benefit:
		raise ValueError(f"min_benefit ({min_benefit}) must not exceed max_benefit ({max_benefit}).")

	for name, val in (("max_size", max_size), ("repeats", repeats), ("greedy_size_step", greedy_size_step)):
		if isinstance(val, bool) or not isinstance(val, int):
			raise ValueError(f"{name} must be an integer, got {val!r}.")
		if val < 1:
			raise ValueError(f"{name} must be >= 1, got {val}.")
	if max_size >= MAX_EXHAUSTIVE_ITEMS:
		raise InputTooLarge(f"max_size must be < {MAX_EXHAUSTIVE_ITEMS}, got {max_size}.")
