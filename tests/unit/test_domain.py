from __future__ import annotations

from datetime import time

import pytest
from pydantic import ValidationError

from storage_estimator.domain import (
    DATA_TYPES,
    ActivityWindow,
    ColumnSpec,
    ColumnType,
    EstimationResult,
    available_types,
    get_descriptor,
)

EXPECTED_TYPES = {
    "int": ("Integer", 4, False),
    "bigint": ("Big Integer", 8, False),
    "float": ("Float", 4, False),
    "double": ("Double", 8, False),
    "uuid": ("UUID", 16, False),
    "datetime": ("DateTime", 8, False),
    "date": ("Date", 3, False),
    "boolean": ("Boolean", 1, False),
    "varchar": ("String", 0, True),
    "text": ("Text", 0, True),
}


class TestCatalog:
    def test_catalog_matches_type_table(self):
        assert available_types() == list(EXPECTED_TYPES)
        for type_id, (label, size, variable) in EXPECTED_TYPES.items():
            descriptor = get_descriptor(type_id)
            assert descriptor.id.value == type_id
            assert descriptor.label == label
            assert descriptor.fixed_size == size
            assert descriptor.is_variable_length is variable

    def test_catalog_is_read_only(self):
        with pytest.raises(TypeError):
            DATA_TYPES[ColumnType.INT] = DATA_TYPES[ColumnType.BIGINT]  # type: ignore[index]

    def test_descriptors_are_frozen(self):
        with pytest.raises(ValidationError):
            DATA_TYPES[ColumnType.INT].fixed_size = 99

    def test_unknown_type(self):
        with pytest.raises(ValueError, match="Unknown column type 'money'"):
            get_descriptor("money")


class TestColumnSpec:
    def test_parse_variable_with_length(self):
        column = ColumnSpec.parse("varchar:50")
        assert column.type is ColumnType.VARCHAR
        assert column.length == 50
        assert column.size_bytes == 52
        assert column.label() == "varchar(50)"

    def test_parse_is_case_insensitive(self):
        column = ColumnSpec.parse(" UUID ")
        assert column.type is ColumnType.UUID
        assert column.length is None
        assert column.size_bytes == 16
        assert column.label() == "uuid"

    def test_variable_without_length(self):
        assert ColumnSpec.parse("text").size_bytes == 2

    def test_fixed_type_ignores_length(self):
        assert ColumnSpec.parse("int:10").size_bytes == 4

    @pytest.mark.parametrize("token", ["bogus", "varchar:-1", "varchar:abc"])
    def test_parse_rejects(self, token):
        with pytest.raises(ValueError):
            ColumnSpec.parse(token)

    def test_negative_length_rejected_by_model(self):
        with pytest.raises(ValidationError):
            ColumnSpec(type=ColumnType.VARCHAR, length=-1)

    def test_accepts_raw_type_string(self):
        assert ColumnSpec(type="double").size_bytes == 8


class TestActivityWindow:
    def test_between_parses_times(self):
        window = ActivityWindow.between("22:00", "06:30")
        assert not window.always_active
        assert window.start == time(22, 0)
        assert window.end == time(6, 30)

    def test_parse_range(self):
        window = ActivityWindow.parse("09:00-17:00")
        assert window.start == time(9, 0)
        assert window.end == time(17, 0)

    def test_parse_requires_separator(self):
        with pytest.raises(ValueError):
            ActivityWindow.parse("0900")

    def test_bounds_required_when_not_always_active(self):
        with pytest.raises(ValidationError):
            ActivityWindow(always_active=False, start=time(9, 0))


class TestEstimationResult:
    def test_zeroed(self):
        result = EstimationResult.zeroed("bad", column_count=3)
        assert not result.ok
        assert result.error == "bad"
        assert result.column_count == 3
        assert result.daily_bytes == 0
        assert result.active_hours_per_day == 0
        assert result.data_bytes == 0

    def test_data_bytes_excludes_base_overhead(self):
        assert EstimationResult(row_size_bytes=72).data_bytes == 52
