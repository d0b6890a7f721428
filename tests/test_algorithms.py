"""
Tests for the sorting algorithms and the registry.

Every registered algorithm is driven headless (the step callback never
pauses) and must leave the view ordered, keep the multiset of values,
leave the sentinel alone and only ever report indices inside the view.
"""

import asyncio
import random
import unittest

from algorithms import REGISTRY, algorithms_by_tag, get_algorithm, list_algorithms, no_pause
from chart import SequenceView, prepare_sequence


def _drive(fn, raw):
    """Run ``fn`` over prepared ``raw`` and return (sequence, reported index tuples)."""
    sequence = prepare_sequence(raw)
    view = SequenceView(sequence, len(sequence) - 1)
    reported = []

    async def on_step(*indices):
        reported.append(indices)

    asyncio.run(fn(view, on_step))
    return sequence, reported


def _inputs():
    rng = random.Random(1234)
    yield []
    yield [7]
    yield [2, 1]
    yield [1, 2, 3, 4, 5, 6]
    yield [9, 8, 7, 6, 5, 4, 3, 2, 1]
    yield [4, 4, 4, 4]
    yield [3, 1, 3, 1, 2, 2, 5]
    for size in (10, 17, 33):
        yield [rng.randint(1, 50) for _ in range(size)]


class TestSortingAlgorithms(unittest.TestCase):

    def test_every_algorithm_sorts(self):
        for info in list_algorithms():
            for raw in _inputs():
                with self.subTest(algorithm=info.key, raw=raw):
                    sequence, _ = _drive(info.fn, raw)
                    self.assertEqual(sequence[:-1], sorted(raw))

    def test_sentinel_untouched(self):
        raw = [5, 3, 8, 1]
        for info in list_algorithms():
            with self.subTest(algorithm=info.key):
                sequence, _ = _drive(info.fn, raw)
                self.assertEqual(sequence, [1, 3, 5, 8, 9])

    def test_reported_indices_stay_inside_view(self):
        raw = [6, 2, 9, 1, 5, 3, 8]
        for info in list_algorithms():
            with self.subTest(algorithm=info.key):
                _, reported = _drive(info.fn, raw)
                self.assertTrue(reported)
                for indices in reported:
                    self.assertTrue(indices)
                    self.assertTrue(all(0 <= i < len(raw) for i in indices))

    def test_bubble_reports_adjacent_pairs(self):
        _, reported = _drive(REGISTRY["bubble"].fn, [3, 2, 1])
        self.assertEqual(reported, [(0, 1), (1, 2), (0, 1)])

    def test_bubble_stops_after_clean_pass(self):
        _, reported = _drive(REGISTRY["bubble"].fn, [1, 2, 3, 4])
        self.assertEqual(len(reported), 3)

    def test_no_pause_callback(self):
        sequence = prepare_sequence([3, 1, 2])
        asyncio.run(REGISTRY["quick"].fn(SequenceView(sequence, 3), no_pause))
        self.assertEqual(sequence, [1, 2, 3, 4])


class TestRegistry(unittest.TestCase):

    def test_lookup(self):
        self.assertEqual(get_algorithm("merge").label, "Merge Sort")
        self.assertIsNone(get_algorithm("bogo"))

    def test_keys_match_entries(self):
        for key, info in REGISTRY.items():
            self.assertEqual(key, info.key)
            self.assertTrue(info.pseudocode)

    def test_tags(self):
        keys = {a.key for a in algorithms_by_tag("divide-and-conquer")}
        self.assertEqual(keys, {"quick", "merge"})


if __name__ == "__main__":
    unittest.main()
