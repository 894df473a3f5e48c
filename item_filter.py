"""
Catalog filtering ahead of selection.

The exhaustive solver is exponential in the number of items, so callers
bound its input here: only items with a strictly positive benefit inside
``[min_benefit, max_benefit]`` are kept, and at most ``max_count`` of them.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Iterable, List

from datatypes import Item, ItemCollection

logger = logging.getLogger(__name__)


def filter_items(
    source: Iterable[Item],
    min_benefit: float,
    max_benefit: float,
    max_count: int,
) -> ItemCollection:
    """Return copies of the first ``max_count`` items of ``source`` whose benefit qualifies.

    Parameters
    ----------
    source : Iterable[Item]
        Items in catalog order. Never modified.
    min_benefit, max_benefit : float
        Inclusive benefit bounds.
    max_count : int
        Maximum number of items in the result; 0 (or less) yields an empty list.

    Returns
    -------
    ItemCollection
        New Item values (equal to, but not the same objects as, the source
        items) in source order. Empty when nothing matches.
    """
    out: List[Item] = []
    if max_count <= 0:
        return out

    for it in source:
        b = it.benefit
        if b > 0 and min_benefit <= b <= max_benefit:
            out.append(dataclasses.replace(it))
            if len(out) >= max_count:
                break

    logger.debug(
        "filter kept %d item(s) with benefit in [%s, %s], cap %d",
        len(out), min_benefit, max_benefit, max_count,
    )
    return out


__all__ = ["filter_items"]
