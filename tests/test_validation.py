"""Tests for RecordValidator."""

import pytest

from job_monitor.validation import RecordValidationError, RecordValidator


@pytest.fixture
def validator() -> RecordValidator:
    return RecordValidator()


class TestRecordValidator:
    """Tests for single-record validation."""

    @pytest.mark.core
    def test_valid_record_passes(self, validator: RecordValidator) -> None:
        """A well-formed record raises nothing."""
        validator.validate(["09:00:00", "Backup", "START", "100"], 1)

    @pytest.mark.core
    @pytest.mark.parametrize(
        "fields",
        [
            ["09:00:00", "Backup", "START"],
            ["09:00:00", "Backup", "START", "100", "extra"],
        ],
    )
    def test_wrong_column_count(self, validator: RecordValidator, fields: list[str]) -> None:
        """Three or five fields fail with expected/actual counts and the line number."""
        with pytest.raises(RecordValidationError) as exc_info:
            validator.validate(fields, 3)
        message = str(exc_info.value)
        assert message.startswith("Line 3: ")
        assert f"Expected 4 columns, found {len(fields)}" in message
        assert exc_info.value.record_number == 3

    @pytest.mark.core
    def test_invalid_timestamp_includes_literal(self, validator: RecordValidator) -> None:
        """Timestamp errors quote the offending value."""
        with pytest.raises(RecordValidationError, match="Invalid timestamp format '9:61:00'"):
            validator.validate(["9:61:00", "Backup", "START", "100"], 1)

    @pytest.mark.core
    def test_lowercase_event_type_is_rejected(self, validator: RecordValidator) -> None:
        """Event types are case-sensitive."""
        with pytest.raises(RecordValidationError, match="Invalid process type 'start'"):
            validator.validate(["09:00:00", "Backup", "start", "100"], 2)

    @pytest.mark.core
    def test_event_type_whitespace_is_trimmed(self, validator: RecordValidator) -> None:
        """Surrounding whitespace around START/END is tolerated."""
        validator.validate(["09:00:00", "Backup", " END ", "100"], 1)

    @pytest.mark.core
    def test_invalid_pid(self, validator: RecordValidator) -> None:
        """Non-numeric pids are rejected."""
        with pytest.raises(RecordValidationError, match="Invalid PID format 'abc'"):
            validator.validate(["09:00:00", "Backup", "START", "abc"], 1)

    @pytest.mark.core
    @pytest.mark.parametrize("stamp", ["9:00:00", "09:5:00", "09:05:0", "9:5:3"])
    def test_unpadded_timestamp_is_rejected(
        self, validator: RecordValidator, stamp: str
    ) -> None:
        """Timestamps must be zero-padded HH:MM:SS."""
        with pytest.raises(RecordValidationError, match=f"Invalid timestamp format '{stamp}'"):
            validator.validate([stamp, "Job", "START", "1"], 1)

    @pytest.mark.core
    def test_checks_run_in_order(self, validator: RecordValidator) -> None:
        """With several bad fields, the timestamp is reported first."""
        with pytest.raises(RecordValidationError, match="Invalid timestamp"):
            validator.validate(["bad", "Backup", "bad", "bad"], 1)

    @pytest.mark.core
    def test_event_type_is_checked_before_pid(self, validator: RecordValidator) -> None:
        """A bad event type wins over a bad pid on the same record."""
        with pytest.raises(RecordValidationError) as exc_info:
            validator.validate(["09:00:00", "J", "bad", "bad"], 1)
        assert "Invalid process type 'bad'" in str(exc_info.value)
        assert "Invalid PID format" not in str(exc_info.value)

    @pytest.mark.core
    def test_column_count_is_checked_before_fields(self, validator: RecordValidator) -> None:
        """A short record reports its column count even with a bad timestamp."""
        with pytest.raises(RecordValidationError, match="Expected 4 columns, found 2"):
            validator.validate(["bad", "bad"], 1)


class TestValidateAll:
    """Tests for whole-input validation."""

    @pytest.mark.core
    def test_returns_record_count(self, validator: RecordValidator) -> None:
        """validate_all reports how many rows were checked."""
        rows = [
            ["09:00:00", "A", "START", "1"],
            ["09:01:00", "A", "END", "1"],
        ]
        assert validator.validate_all(rows) == 2

    @pytest.mark.core
    def test_reports_first_invalid_record(self, validator: RecordValidator) -> None:
        """The first violation in scan order wins."""
        rows = [
            ["09:00:00", "A", "START", "1"],
            ["09:01:00", "A", "FINISH", "1"],
            ["09:02:00", "A"],
        ]
        with pytest.raises(RecordValidationError) as exc_info:
            validator.validate_all(rows)
        assert exc_info.value.record_number == 2
