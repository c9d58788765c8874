"""
Tests for DataValidator normalization helpers and CLI statistics.
"""
import pytest
from datetime import date, datetime

from postkit.core.cli import ListingStats, OperationStats
from postkit.core.exceptions import ValidationError
from postkit.core.validators import DataValidator


class TestNormalizeDate:
    def test_date_passthrough(self):
        assert DataValidator.normalize_date(date(2021, 3, 14)) == date(2021, 3, 14)

    def test_datetime_drops_time(self):
        value = datetime(2021, 3, 14, 9, 30)
        result = DataValidator.normalize_date(value)
        assert result == date(2021, 3, 14)
        assert not isinstance(result, datetime)

    @pytest.mark.parametrize(
        "text",
        ["2021-03-14", "2021-03-14T09:30:00Z", "2021-03-14 09:30:00 +0200", " 2021-03-14 "],
    )
    def test_iso_like_strings(self, text):
        assert DataValidator.normalize_date(text) == date(2021, 3, 14)

    @pytest.mark.parametrize("value", ["March 14, 2021", "2021-02-30", "14/03/2021", 20210314, None])
    def test_invalid_values(self, value):
        assert DataValidator.normalize_date(value) is None


class TestRequiredFields:
    def test_passes_with_values(self):
        DataValidator.validate_required_fields({"title": "x", "date": "2021-01-01"}, ["title", "date"])

    @pytest.mark.parametrize("data", [{}, {"title": None}, {"title": "   "}])
    def test_missing_or_empty(self, data):
        with pytest.raises(ValidationError, match="'title'"):
            DataValidator.validate_required_fields(data, ["title"])


class TestOtherNormalizers:
    def test_normalize_bool(self):
        assert DataValidator.normalize_bool("yes") is True
        assert DataValidator.normalize_bool(0) is False
        assert DataValidator.normalize_bool(None) is None
        with pytest.raises(ValidationError):
            DataValidator.normalize_bool("maybe")

    def test_normalize_string(self):
        assert DataValidator.normalize_string("  hi ") == "hi"
        assert DataValidator.normalize_string("   ") is None
        assert DataValidator.normalize_string(None) is None

    def test_normalize_str_list(self):
        assert DataValidator.normalize_str_list("graphql") == ["graphql"]
        assert DataValidator.normalize_str_list(["a", None, " b ", 3]) == ["a", "b", "3"]
        assert DataValidator.normalize_str_list(None) == []
        with pytest.raises(ValidationError):
            DataValidator.normalize_str_list({"a": 1})


class TestStats:
    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            OperationStats(files_processed=-1)
        with pytest.raises(ValueError):
            ListingStats(posts_listed=-1)

    def test_listing_summary(self):
        stats = ListingStats(files_processed=3, posts_listed=2, drafts_skipped=1)
        summary = stats.summary()
        assert "3 files processed" in summary
        assert "2 listed" in summary
        assert "1 drafts skipped" in summary
        assert stats.to_dict()["posts_listed"] == 2
