"""Tests for history selection and trend classification."""

import random
from datetime import date, timedelta

import pytest

from utility_csr_api.app.core.errors import NotFound
from utility_csr_api.app.services.usage_analysis import (
    HISTORY_WINDOW,
    TrendLabel,
    TrendSummary,
    classify_trend,
    select_recent_history,
)


@pytest.fixture
def window_of(make_record):
    """Build records ordered most recent first, one month apart."""

    def build(*usages):
        start = date(2024, 11, 1)
        return [make_record(issue_date=start - timedelta(days=31 * i), usage=u) for i, u in enumerate(usages)]

    return build


# =============================================================================
# classify_trend
# =============================================================================


class TestClassifyTrend:
    def test_flat_usage_is_stable(self, window_of):
        summary = classify_trend(window_of(100, 100, 100))
        assert summary.average == 100
        assert summary.latest == 100
        assert summary.label is TrendLabel.STABLE

    def test_spike_is_increasing(self, window_of):
        summary = classify_trend(window_of(150, 100, 100))
        assert summary.average == pytest.approx(116.6667, rel=1e-4)
        assert summary.latest == 150
        assert summary.label is TrendLabel.INCREASING
        assert summary.rounded_average == 117

    def test_drop_is_decreasing(self, window_of):
        summary = classify_trend(window_of(80, 100, 100))
        assert summary.average == pytest.approx(93.3333, rel=1e-4)
        assert summary.label is TrendLabel.DECREASING

    def test_zero_average_is_stable(self, window_of):
        summary = classify_trend(window_of(0, 0, 0))
        assert summary.average == 0
        assert summary.label is TrendLabel.STABLE

    def test_single_record_is_stable(self, window_of):
        assert classify_trend(window_of(42)).label is TrendLabel.STABLE

    def test_empty_window_is_a_programming_error(self):
        with pytest.raises(ValueError):
            classify_trend([])

    def test_band_edges_are_exclusive(self, window_of):
        # latest == average * 1.1 exactly is not "increasing".
        assert classify_trend(window_of(110, 110, 80)).label is TrendLabel.STABLE

    def test_custom_band(self, window_of):
        window = window_of(105, 100, 95)
        assert classify_trend(window).label is TrendLabel.STABLE
        assert classify_trend(window, band=0.01).label is TrendLabel.INCREASING

    def test_rounding_does_not_change_label(self, window_of):
        # Mean 100.45: threshold 110.495 keeps 110.45 stable, while a
        # rounded mean of 100 would have flagged it as increasing.
        summary = classify_trend(window_of(110.45, 90.45))
        assert summary.rounded_average == 100
        assert summary.label is TrendLabel.STABLE

    def test_label_matches_unrounded_reference(self, window_of):
        rng = random.Random(20241101)
        for _ in range(500):
            usages = [rng.randint(0, 2000) / rng.choice([1, 3, 7]) for _ in range(rng.randint(1, 6))]
            mean = sum(usages) / len(usages)
            if usages[0] > mean * 1.1:
                expected = TrendLabel.INCREASING
            elif usages[0] < mean * 0.9:
                expected = TrendLabel.DECREASING
            else:
                expected = TrendLabel.STABLE
            assert classify_trend(window_of(*usages)).label is expected


class TestRoundedAverage:
    @pytest.mark.parametrize(
        "average, expected",
        [(882.5, 883), (882.49, 882), (0.5, 1), (2366.6667, 2367), (123.0, 123)],
    )
    def test_rounds_half_up(self, average, expected):
        assert TrendSummary(average=average, latest=0, label=TrendLabel.STABLE).rounded_average == expected


# =============================================================================
# select_recent_history
# =============================================================================


class TestSelectRecentHistory:
    def test_filters_by_account_exactly(self, make_record):
        records = [
            make_record("ACC-1", "2024-11-01"),
            make_record("acc-1", "2024-10-01"),
            make_record("ACC-2", "2024-09-01"),
            make_record("ACC-1", "2024-08-01"),
        ]
        selected = select_recent_history("ACC-1", records)
        assert [r.account_identifier for r in selected] == ["ACC-1", "ACC-1"]

    def test_sorts_most_recent_first(self, make_record):
        records = [
            make_record(issue_date="2024-07-01"),
            make_record(issue_date="2024-11-01"),
            make_record(issue_date="2024-09-01"),
        ]
        selected = select_recent_history("ACC-1", records)
        assert [r.issue_date.isoformat() for r in selected] == ["2024-11-01", "2024-09-01", "2024-07-01"]

    def test_ties_keep_insertion_order(self, make_record):
        records = [
            make_record(issue_date="2024-10-01", bill_id="first"),
            make_record(issue_date="2024-11-01", bill_id="newest"),
            make_record(issue_date="2024-10-01", bill_id="second"),
            make_record(issue_date="2024-10-01", bill_id="third"),
        ]
        selected = select_recent_history("ACC-1", records)
        assert [r.bill_id for r in selected] == ["newest", "first", "second", "third"]

    def test_truncates_to_window(self, make_record):
        records = [make_record(issue_date=date(2024, 1, 1) + timedelta(days=31 * i)) for i in range(10)]
        selected = select_recent_history("ACC-1", records, window_size=4)
        assert len(selected) == 4
        assert selected[0].issue_date == max(r.issue_date for r in records)

    def test_default_window_is_six(self, make_record):
        records = [make_record(issue_date=date(2024, 1, 1) + timedelta(days=31 * i)) for i in range(9)]
        assert HISTORY_WINDOW == 6
        assert len(select_recent_history("ACC-1", records)) == 6

    def test_no_match_raises_not_found(self, make_record):
        with pytest.raises(NotFound) as excinfo:
            select_recent_history("MISSING", [make_record()], not_found_message="No usage history found")
        assert excinfo.value.message == "No usage history found"
        assert excinfo.value.status_code == 404

    def test_invalid_window_size(self, make_record):
        with pytest.raises(ValueError):
            select_recent_history("ACC-1", [make_record()], window_size=0)

    def test_does_not_reorder_input(self, make_record):
        records = [make_record(issue_date="2024-07-01"), make_record(issue_date="2024-11-01")]
        select_recent_history("ACC-1", records)
        assert records[0].issue_date.isoformat() == "2024-07-01"
