from __future__ import annotations

import unittest

from intervalgraph.aggregator import aggregate, reduce_values
from intervalgraph.config import default_combine
from intervalgraph.errors import ConfigurationError
from intervalgraph.flattener import flatten
from intervalgraph.model import AggregatedSpan, FlatSpan


def _sum(a, b):
    return a + b


class TestAggregatorContract(unittest.TestCase):
    def test_sum_of_two_overlapping_intervals(self) -> None:
        ivs = [(0, 2, 1), (1, 3, 1)]
        out = aggregate(flatten(ivs), ivs, _sum)
        self.assertEqual(out, [AggregatedSpan(0, 1, 1), AggregatedSpan(1, 2, 2), AggregatedSpan(2, 3, 1)])

    def test_empty_active_set_aggregates_to_none(self) -> None:
        ivs = [(0, 1, 3), (2, 3, 4)]
        out = aggregate(flatten(ivs), ivs, _sum)
        self.assertIsNone(out[1].value)

    def test_reaggregation_without_resweeping(self) -> None:
        ivs = [(0, 4, 1), (1, 3, 5), (2, 6, 2)]
        flat = flatten(ivs)
        summed = aggregate(flat, ivs, _sum)
        maxed = aggregate(flat, ivs, max)
        self.assertEqual([s.value for s in summed], [1, 6, 8, 3, 2])
        self.assertEqual([s.value for s in maxed], [1, 5, 5, 2, 2])

    def test_values_are_folded_in_original_order(self) -> None:
        ivs = [(0, 2, "a"), (1, 3, "b"), (0, 3, "c")]
        out = aggregate(flatten(ivs), ivs, lambda a, b: a + b)
        self.assertEqual([s.value for s in out], ["ac", "abc", "bc"])

    def test_single_value_is_returned_unchanged(self) -> None:
        calls = []

        def combine(a, b):
            calls.append((a, b))
            return a

        ivs = [(0, 1, 0.333)]
        out = aggregate(flatten(ivs), ivs, combine)
        self.assertEqual(out[0].value, 0.333)
        self.assertEqual(calls, [])

    def test_valueless_intervals_contribute_explicit_none(self) -> None:
        seen = []

        def combine(a, b):
            seen.append((a, b))
            return default_combine(a, b)

        ivs = [(0, 2), (1, 3, 0.25)]
        out = aggregate(flatten(ivs), ivs, combine)
        self.assertEqual(seen, [(None, 0.25)])
        self.assertEqual([s.value for s in out], [None, 0.25, 0.25])

    def test_discrete_points_aggregate_to_none(self) -> None:
        ivs = [(0, 2, 1), (1, 1, 7)]
        out = aggregate(flatten(ivs), ivs, _sum)
        self.assertEqual(out[-1], AggregatedSpan(1, 1, None))

    def test_default_combine(self) -> None:
        self.assertIsNone(default_combine(None, None))
        self.assertEqual(default_combine(0.1, 0.2), 0.3)
        self.assertEqual(default_combine(None, 0.125), 0.13)

    def test_reduce_on_empty_collection_is_a_configuration_error(self) -> None:
        with self.assertRaises(ConfigurationError):
            reduce_values([], _sum)

    def test_aggregate_accepts_flat_spans_built_elsewhere(self) -> None:
        out = aggregate([FlatSpan(0, 5, frozenset({1, 0}))], [(0, 5, 2), (0, 5, 3)], _sum)
        self.assertEqual(out, [AggregatedSpan(0, 5, 5)])


if __name__ == "__main__":
    unittest.main(verbosity=2)
