"""Tests for the engine tracer."""

from uuid import UUID

from villa_engines.progress import derive_villa_progress
from villa_engines.tracer import compute_input_fingerprint

VILLA_ID = UUID("00000000-0000-4000-a000-0000000000aa")


class TestFingerprint:
    def test_deterministic(self):
        args = {"villa_id": VILLA_ID, "contracts": []}

        assert compute_input_fingerprint(("villa_id",), args) == compute_input_fingerprint(
            ("villa_id",), args
        )

    def test_only_named_fields_count(self):
        first = compute_input_fingerprint(("villa_id",), {"villa_id": VILLA_ID, "x": 1})
        second = compute_input_fingerprint(("villa_id",), {"villa_id": VILLA_ID, "x": 2})

        assert first == second
        assert len(first) == 16

    def test_missing_field_is_null(self):
        assert compute_input_fingerprint(("a",), {}) == compute_input_fingerprint(
            ("a",), {"a": None}
        )


class TestTracedEngine:
    def test_emits_trace_record(self, captured_logs):
        derive_villa_progress(VILLA_ID, [])

        traces = [r for r in captured_logs() if r["message"] == "villa_engine_trace"]
        assert len(traces) == 1
        assert traces[0]["engine_name"] == "progress"
        assert traces[0]["engine_version"] == "1.0"
        assert traces[0]["input_fingerprint"] == compute_input_fingerprint(
            ("villa_id",), {"villa_id": VILLA_ID}
        )
