from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from datatypes import Item, ItemCollection
from errors import CatalogLoadError, InvalidItem

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "^"
FIELD_COUNT = 3


def _parse_number(field: str) -> Optional[float]:
	try:
		return float(field.strip())
	except ValueError:
		return None


def load_catalog(catalog_file: str | Path) -> ItemCollection:
	"""Load every valid item from a ``^``-delimited catalog file.

	Parameters
	----------
	catalog_file : str | Path
		Path to a UTF-8 text file. The first line is a header and is skipped;
		every other non-blank line must be ``label^cost^benefit``, e.g.::

			description^cost^benefit
			new enchanted helmet^120.5^300

	Returns
	-------
	ItemCollection
		Items in file order. Records with a non-numeric cost/benefit, an empty
		label, a non-positive cost or a negative benefit are skipped (logged
		at WARNING).

	Raises
	------
	FileNotFoundError
		If the given file path does not exist.
	CatalogLoadError
		If any record does not have exactly three fields; nothing is returned.
	"""
	path = Path(catalog_file)
	if not path.exists():
		raise FileNotFoundError(f"catalog file not found: {path}")

	items: List[Item] = []
	skipped: List[Tuple[int, str]] = []

	with path.open("r", encoding="utf-8") as f:
		for line_number, raw in enumerate(f, start=1):
			if line_number == 1:
				continue
			line = raw.rstrip("\r\n")
			if line.strip() == "":
				continue

			fields = line.split(FIELD_SEPARATOR)
			if len(fields) != FIELD_COUNT:
				raise CatalogLoadError(
					f"{path}: invalid field count at line {line_number}; want {FIELD_COUNT} but got {len(fields)}. Line: {line!r}"
				)

			label, cost_field, benefit_field = fields
			cost = _parse_number(cost_field)
			benefit = _parse_number(benefit_field)
			if cost is None or benefit is None:
				logger.warning("%s:%d: skipping record with non-numeric cost/benefit: %r", path, line_number, line)
				skipped.append((line_number, "non-numeric"))
				continue

			try:
				items.append(Item(label=label, cost=cost, benefit=benefit))
			except InvalidItem as exc:
				logger.warning("%s:%d: skipping invalid record: %s", path, line_number, exc)
				skipped.append((line_number, "invalid"))

	logger.info("loaded %d item(s) from %s (%d record(s) skipped)", len(items), path, len(skipped))
	return items
