from __future__ import annotations

import datetime as dt
import unittest

from intervalgraph.errors import ValidationError
from intervalgraph.model import AggregatedSpan, PointView, SpanView, view_from_row
from intervalgraph.serialize import dumps, dumps_view, loads, loads_view, spans_from_rows, spans_to_rows


class TestSerializeContract(unittest.TestCase):
    def test_view_rows_are_ordered_arrays(self) -> None:
        view = [SpanView(0.0, 50.0, "#ff9431", "0", "1", "25%"), PointView(75.0, "2")]
        self.assertEqual(loads(dumps_view(view)), [[0.0, 50.0, "#ff9431", "0", "1", "25%"], [75.0, "2"]])
        self.assertEqual(loads_view(dumps_view(view)), view)

    def test_null_slots_survive(self) -> None:
        view = [SpanView(10.0, 20.0, None, "a", "b", None)]
        self.assertEqual(loads_view(dumps_view(view)), view)

    def test_malformed_views_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            loads_view('{"rows": []}')
        with self.assertRaises(ValidationError):
            loads_view("[[1, 2, 3]]")
        with self.assertRaises(ValidationError):
            view_from_row("not a row")

    def test_span_rows_keep_date_bounds(self) -> None:
        t0 = dt.datetime(2019, 1, 1, 12, 30, tzinfo=dt.timezone.utc)
        spans = [
            AggregatedSpan(t0, t0 + dt.timedelta(hours=1), 0.5),
            AggregatedSpan(dt.date(2019, 1, 2), dt.date(2019, 1, 3), None),
            AggregatedSpan(1, 2, 3),
        ]
        rows = spans_to_rows(spans)
        self.assertEqual(rows[0][0], "2019-01-01T12:30:00+00:00")
        self.assertEqual(rows[1][:2], ["2019-01-02", "2019-01-03"])
        self.assertEqual(spans_from_rows(loads(dumps(rows))), spans)

    def test_span_rows_must_be_triples(self) -> None:
        with self.assertRaises(ValidationError):
            spans_from_rows([[1, 2]])

    def test_unparseable_strings_stay_strings(self) -> None:
        self.assertEqual(spans_from_rows([["a", "b", None]]), [AggregatedSpan("a", "b", None)])


if __name__ == "__main__":
    unittest.main(verbosity=2)
