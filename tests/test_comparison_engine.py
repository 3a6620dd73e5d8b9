"""
Unit tests for the comparison engine.

Covers the status rules, run detection and the structural properties of
the insights a report carries.
"""

import random

import pytest

from bytediff.application.comparison_engine import ComparisonEngine, compare
from bytediff.domain.models import BinaryPayload, DiffInsight, ReportStatus
from helpers import SIXTEEN_BYTES, invert


def _payload(data: bytes) -> BinaryPayload:
    return BinaryPayload.of(data)


def _differing_positions(left: bytes, right: bytes) -> list[int]:
    return [i for i, (a, b) in enumerate(zip(left, right)) if a != b]


class TestStatus:
    """Status selection."""

    def test_empty_payloads_are_equal(self):
        report = compare(BinaryPayload.empty(), BinaryPayload.empty())
        assert report.status is ReportStatus.EQUAL
        assert report.insights == ()

    def test_identical_payloads_are_equal(self):
        report = compare(_payload(SIXTEEN_BYTES), _payload(SIXTEEN_BYTES))
        assert report.status is ReportStatus.EQUAL
        assert report.insights == ()

    def test_length_mismatch_carries_no_insights(self):
        report = compare(_payload(b"abc"), _payload(b"abcd"))
        assert report.status is ReportStatus.LENGTH_MISMATCH
        assert report.insights == ()

    def test_one_empty_side_is_length_mismatch(self):
        report = compare(_payload(SIXTEEN_BYTES), BinaryPayload.empty())
        assert report.status is ReportStatus.LENGTH_MISMATCH

    def test_length_mismatch_does_not_inspect_bytes(self):
        """Mismatched lengths are decided before any byte is read."""

        class LengthOnly:
            def __init__(self, size):
                self.size = size

            def __len__(self):
                return self.size

            @property
            def data(self):
                raise AssertionError("bytes inspected")

            def byte_at(self, position):
                raise AssertionError("byte inspected")

        report = compare(LengthOnly(3), LengthOnly(2))
        assert report.status is ReportStatus.LENGTH_MISMATCH


class TestInsights:
    """Run detection."""

    def test_single_run_in_the_middle(self):
        """Bytes 6, 7, 8 inverted on a 16-byte buffer."""
        right = invert(SIXTEEN_BYTES, [6, 7, 8])
        report = compare(_payload(SIXTEEN_BYTES), _payload(right))

        assert report.status is ReportStatus.NOT_EQUAL
        assert report.insights == (DiffInsight(6, 3),)

    def test_several_runs_in_order(self):
        positions = [3, 4, 7, 9, 10, 11, 14, 15]
        right = invert(SIXTEEN_BYTES, positions)
        report = compare(_payload(SIXTEEN_BYTES), _payload(right))

        assert report.status is ReportStatus.NOT_EQUAL
        assert report.insights == (
            DiffInsight(3, 2),
            DiffInsight(7, 1),
            DiffInsight(9, 3),
            DiffInsight(14, 2),
        )

    def test_run_at_start(self):
        report = compare(_payload(b"xxcdef"), _payload(b"abcdef"))
        assert report.insights == (DiffInsight(0, 2),)

    def test_trailing_run_is_closed(self):
        report = compare(_payload(b"abcdef"), _payload(b"abcdzz"))
        assert report.insights == (DiffInsight(4, 2),)

    def test_everything_different_is_one_run(self):
        left = SIXTEEN_BYTES
        right = invert(left, range(len(left)))
        report = compare(_payload(left), _payload(right))
        assert report.insights == (DiffInsight(0, len(left)),)

    def test_single_byte_payloads(self):
        assert compare(_payload(b"a"), _payload(b"b")).insights == (DiffInsight(0, 1),)
        assert compare(_payload(b"a"), _payload(b"a")).status is ReportStatus.EQUAL

    def test_alternating_differences_are_separate_runs(self):
        left = bytes(8)
        right = bytes([1, 0, 1, 0, 1, 0, 1, 0])
        report = compare(_payload(left), _payload(right))
        assert [i.offset for i in report.insights] == [0, 2, 4, 6]
        assert all(i.length == 1 for i in report.insights)


class TestProperties:
    """Structural properties over random inputs."""

    @pytest.mark.parametrize("seed", range(20))
    def test_reflexive(self, seed):
        rng = random.Random(seed)
        data = bytes(rng.randrange(256) for _ in range(rng.randrange(0, 64)))
        report = compare(_payload(data), _payload(data))
        assert report.status is ReportStatus.EQUAL
        assert report.insights == ()

    @pytest.mark.parametrize("seed", range(20))
    def test_length_mismatch_iff_lengths_differ(self, seed):
        rng = random.Random(seed)
        left = bytes(rng.randrange(4) for _ in range(rng.randrange(0, 8)))
        right = bytes(rng.randrange(4) for _ in range(rng.randrange(0, 8)))
        report = compare(_payload(left), _payload(right))
        assert (report.status is ReportStatus.LENGTH_MISMATCH) == (len(left) != len(right))

    @pytest.mark.parametrize("seed", range(30))
    def test_insights_cover_exactly_the_differing_positions(self, seed):
        rng = random.Random(seed)
        size = rng.randrange(1, 80)
        left = bytes(rng.randrange(3) for _ in range(size))
        right = bytes(rng.randrange(3) for _ in range(size))
        report = compare(_payload(left), _payload(right))

        differing = _differing_positions(left, right)
        covered = [
            position
            for insight in report.insights
            for position in range(insight.offset, insight.end)
        ]
        assert covered == differing
        assert report.differing_bytes == len(differing)

        # Ascending and separated by at least one matching byte
        for previous, current in zip(report.insights, report.insights[1:]):
            assert current.offset > previous.end
            assert left[previous.end] == right[previous.end]

        for insight in report.insights:
            assert insight.end <= size

        expected = ReportStatus.NOT_EQUAL if differing else ReportStatus.EQUAL
        assert report.status is expected


class TestComparisonEngine:
    """The injectable engine wrapper."""

    def test_delegates_to_compare(self):
        engine = ComparisonEngine()
        left = _payload(SIXTEEN_BYTES)
        right = _payload(invert(SIXTEEN_BYTES, [0]))
        assert engine.compare(left, right) == compare(left, right)
