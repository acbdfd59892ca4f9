"""Tests for the practice input rules and date coercion.

Pure unit tests: no database involved.
"""

import datetime

import pytest

from app.core.exceptions import ValidationError
from app.schemas.swimming_practice import (
    SwimmingPracticeCreate,
    SwimmingPracticeUpdate,
    coerce_practice_date,
    validate_practice_input,
)

UTC = datetime.timezone.utc


def _valid(**overrides) -> dict:
    raw = {
        "date": "2024-01-15",
        "duration_minutes": 60,
        "distance_meters": 2000.5,
        "notes": "Great practice session",
    }
    raw.update(overrides)
    return raw


# ======================================================================
# coerce_practice_date
# ======================================================================


class TestCoercePracticeDate:
    def test_calendar_date_is_midnight_utc(self):
        result = coerce_practice_date(datetime.date(2024, 1, 15))
        assert result == datetime.datetime(2024, 1, 15, tzinfo=UTC)

    def test_date_only_string(self):
        assert coerce_practice_date("2024-01-15") == datetime.datetime(2024, 1, 15, tzinfo=UTC)

    def test_string_is_stripped(self):
        assert coerce_practice_date("  2024-01-15 ") == datetime.datetime(2024, 1, 15, tzinfo=UTC)

    def test_iso_datetime_with_z(self):
        result = coerce_practice_date("2024-01-15T10:30:00Z")
        assert result == datetime.datetime(2024, 1, 15, 10, 30, tzinfo=UTC)

    def test_iso_datetime_with_offset_is_converted_to_utc(self):
        result = coerce_practice_date("2024-01-15T23:30:00-05:00")
        assert result == datetime.datetime(2024, 1, 16, 4, 30, tzinfo=UTC)

    def test_naive_datetime_taken_as_utc(self):
        result = coerce_practice_date(datetime.datetime(2024, 1, 15, 8, 0))
        assert result.tzinfo == UTC
        assert result.hour == 8

    def test_unix_timestamp_seconds(self):
        assert coerce_practice_date(1705276800) == datetime.datetime(2024, 1, 15, tzinfo=UTC)

    def test_unix_timestamp_milliseconds(self):
        assert coerce_practice_date(1705276800000) == datetime.datetime(2024, 1, 15, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["not a date", "2024-13-45", "", None, True, [2024, 1, 15], {"y": 2024},
                                       "9999-12-31T23:00:00-05:00", "0001-01-01T00:30:00+01:00"])
    def test_uncoercible_values_raise(self, value):
        with pytest.raises(ValueError):
            coerce_practice_date(value)

    def test_deterministic(self):
        assert coerce_practice_date("2024-01-15T10:30:00Z") == coerce_practice_date("2024-01-15T10:30:00Z")


# ======================================================================
# validate_practice_input
# ======================================================================


class TestValidatePracticeInput:
    def test_valid_input(self):
        data = validate_practice_input(_valid())
        assert isinstance(data, SwimmingPracticeCreate)
        assert data.date == datetime.datetime(2024, 1, 15, tzinfo=UTC)
        assert data.duration_minutes == 60
        assert data.distance_meters == 2000.5
        assert data.notes == "Great practice session"

    def test_notes_absent_is_none(self):
        raw = _valid()
        del raw["notes"]
        assert validate_practice_input(raw).notes is None

    def test_empty_notes_accepted_unchanged(self):
        """Normalization to None happens at the persistence layer."""
        assert validate_practice_input(_valid(notes="")).notes == ""

    def test_numeric_strings_are_coerced(self):
        data = validate_practice_input(_valid(duration_minutes="45", distance_meters="1500.25"))
        assert data.duration_minutes == 45
        assert data.distance_meters == 1500.25

    def test_whole_float_duration_is_coerced(self):
        assert validate_practice_input(_valid(duration_minutes=60.0)).duration_minutes == 60

    def test_integer_distance_becomes_float(self):
        data = validate_practice_input(_valid(distance_meters=1500))
        assert data.distance_meters == 1500.0
        assert isinstance(data.distance_meters, float)

    def test_already_validated_input_passes_through(self):
        data = SwimmingPracticeCreate(**_valid())
        assert validate_practice_input(data) is data

    @pytest.mark.parametrize("duration", [0, -5, 60.5, "abc", None, True, 2**31, 2**70])
    def test_invalid_duration(self, duration):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(_valid(duration_minutes=duration))
        assert exc_info.value.fields == ["duration_minutes"]

    @pytest.mark.parametrize("distance", [0, -100, "far", None, False, float("nan"), float("inf")])
    def test_invalid_distance(self, distance):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(_valid(distance_meters=distance))
        assert exc_info.value.fields == ["distance_meters"]

    def test_invalid_date(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(_valid(date="yesterday-ish"))
        assert exc_info.value.fields == ["date"]

    @pytest.mark.parametrize("value", ["9999-12-31T23:00:00-05:00", "0001-01-01T00:30:00+01:00"])
    def test_date_outside_utc_range(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(_valid(date=value))
        assert exc_info.value.fields == ["date"]

    def test_largest_storable_duration(self):
        assert validate_practice_input(_valid(duration_minutes=2**31 - 1)).duration_minutes == 2**31 - 1

    def test_non_text_notes(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(_valid(notes=42))
        assert exc_info.value.fields == ["notes"]

    def test_missing_fields_are_all_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input({})
        assert sorted(exc_info.value.fields) == ["date", "distance_meters", "duration_minutes"]

    def test_every_failing_field_is_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(_valid(date="nope", duration_minutes=0, distance_meters=-1))
        assert sorted(exc_info.value.fields) == ["date", "distance_meters", "duration_minutes"]
        assert all(e.message for e in exc_info.value.errors)

    def test_error_message_names_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(_valid(duration_minutes=0))
        assert "duration_minutes" in str(exc_info.value)

    def test_non_mapping_input(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_practice_input(["2024-01-15", 60, 2000])
        assert exc_info.value.fields == ["input"]


# ======================================================================
# SwimmingPracticeUpdate
# ======================================================================


class TestSwimmingPracticeUpdate:
    def test_all_fields_optional(self):
        update = SwimmingPracticeUpdate()
        assert update.model_dump(exclude_unset=True) == {}

    def test_same_rules_as_create(self):
        update = SwimmingPracticeUpdate(date="2024-02-01", duration_minutes="30")
        assert update.date == datetime.datetime(2024, 2, 1, tzinfo=UTC)
        assert update.duration_minutes == 30

    def test_rejects_non_positive_distance(self):
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            SwimmingPracticeUpdate(distance_meters=0)

    def test_rejects_duration_beyond_integer_column(self):
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            SwimmingPracticeUpdate(duration_minutes=2**70)
