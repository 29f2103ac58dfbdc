"""Tests for run statistics."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from tidy_tools.organization.stats import CategoryStats, RunSummary


class TestCategoryStats:
    """Test category stats model."""

    def test_defaults(self):
        """Test zero-initialized stats."""
        stats = CategoryStats()
        assert stats.count == 0
        assert stats.total_size == 0

    def test_negative_rejected(self):
        """Test that negative values are rejected."""
        with pytest.raises(ValidationError):
            CategoryStats(count=-1)


class TestRunSummary:
    """Test run summary aggregation."""

    def test_empty_summary(self):
        """Test a summary with nothing recorded."""
        summary = RunSummary()
        assert summary.processed_files == 0
        assert summary.total_size == 0
        assert summary.categories == {}

    def test_record_creates_category(self):
        """Test that categories are created lazily."""
        summary = RunSummary()

        stats = summary.record("Images", 10)

        assert stats.count == 1
        assert stats.total_size == 10
        assert summary.categories["Images"] is stats
        assert summary.processed_files == 1

    def test_record_accumulates(self):
        """Test that repeated records add up."""
        summary = RunSummary()

        summary.record("Images", 10)
        summary.record("Images", 15)
        summary.record("Documents", 20)

        assert summary.categories["Images"].count == 2
        assert summary.categories["Images"].total_size == 25
        assert summary.categories["Documents"].count == 1
        assert summary.processed_files == 3
        assert summary.total_size == 45

    def test_totals_match_categories(self):
        """Test that global totals always equal the category sums."""
        summary = RunSummary()
        for category, size in [("A", 1), ("B", 2), ("A", 3), ("C", 0), ("B", 7)]:
            summary.record(category, size)

        assert summary.processed_files == sum(
            s.count for s in summary.categories.values()
        )
        assert summary.total_size == sum(
            s.total_size for s in summary.categories.values()
        )

    def test_record_with_paths_keeps_move(self):
        """Test that moves are kept when paths are given."""
        summary = RunSummary()

        summary.record("Images", 10, Path("/in/a.jpg"), Path("/in/Images/a.jpg"))
        summary.record("Images", 5)

        assert len(summary.moves) == 1
        move = summary.moves[0]
        assert move.source_path == Path("/in/a.jpg")
        assert move.target_path == Path("/in/Images/a.jpg")
        assert move.category == "Images"
        assert move.size_bytes == 10

    def test_summaries_are_isolated(self):
        """Test that separate summaries never share state."""
        first = RunSummary()
        second = RunSummary()

        first.record("Images", 10)

        assert second.categories == {}
        assert second.processed_files == 0
