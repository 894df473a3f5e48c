"""
Unit tests for filter_items (item_filter.py).
"""
import random
import unittest

from datatypes import Item
from item_filter import filter_items


def _by_benefits(benefits):
    # negative benefits cannot be built as Item, so stand-ins are used for them
    out = []
    for i, b in enumerate(benefits):
        out.append(_Raw(f"i{i}", 1.0, b) if b < 0 else Item(f"i{i}", 1.0, b))
    return out


class _Raw:
    """Duck-typed record carrying a benefit an Item would refuse."""

    def __init__(self, label, cost, benefit):
        self.label = label
        self.cost = cost
        self.benefit = benefit


class TestFilterItems(unittest.TestCase):
    def test_example_excludes_zero_negative_and_caps_count(self) -> None:
        source = _by_benefits([0, 5, -1, 10, 3])
        out = filter_items(source, 1, 10, 2)
        self.assertEqual([it.benefit for it in out], [5, 10])
        self.assertEqual([it.label for it in out], ["i1", "i3"])

    def test_bounds_are_inclusive(self) -> None:
        source = [Item("lo", 1, 2), Item("mid", 1, 3), Item("hi", 1, 4), Item("out", 1, 5)]
        out = filter_items(source, 2, 4, 10)
        self.assertEqual([it.label for it in out], ["lo", "mid", "hi"])

    def test_zero_benefit_excluded_even_when_in_range(self) -> None:
        source = [Item("zero", 1, 0), Item("one", 1, 1)]
        out = filter_items(source, 0, 10, 10)
        self.assertEqual([it.label for it in out], ["one"])

    def test_result_items_are_copies(self) -> None:
        source = [Item("a", 2, 7), Item("b", 3, 8)]
        snapshot = list(source)
        out = filter_items(source, 1, 10, 5)
        self.assertEqual(out, source)
        for got, orig in zip(out, source):
            self.assertIsNot(got, orig)
        self.assertEqual(source, snapshot)
        out.clear()
        self.assertEqual(len(source), 2)

    def test_zero_or_negative_max_count_gives_empty(self) -> None:
        source = [Item("a", 1, 1)]
        self.assertEqual(filter_items(source, 0, 10, 0), [])
        self.assertEqual(filter_items(source, 0, 10, -3), [])

    def test_no_matches_gives_empty(self) -> None:
        self.assertEqual(filter_items([Item("a", 1, 50)], 1, 10, 5), [])
        self.assertEqual(filter_items([], 1, 10, 5), [])

    def test_stops_scanning_once_cap_reached(self) -> None:
        def gen():
            yield Item("a", 1, 1)
            yield Item("b", 1, 2)
            raise AssertionError("source read past the cap")

        out = filter_items(gen(), 0, 10, 2)
        self.assertEqual([it.label for it in out], ["a", "b"])

    def test_random_sources_respect_all_properties(self) -> None:
        rng = random.Random(7)
        for _ in range(50):
            source = [Item(f"i{k}", rng.randint(1, 9), rng.randint(0, 20)) for k in range(rng.randint(0, 30))]
            lo = rng.randint(0, 10)
            hi = rng.randint(lo, 20)
            cap = rng.randint(0, 12)
            out = filter_items(source, lo, hi, cap)
            self.assertLessEqual(len(out), cap)
            for it in out:
                self.assertGreater(it.benefit, 0)
                self.assertTrue(lo <= it.benefit <= hi)
            labels = [it.label for it in source]
            positions = [labels.index(it.label) for it in out]
            self.assertEqual(positions, sorted(positions))


if __name__ == "__main__":
    unittest.main()
