import pytest

from storage_estimator.utils.units import format_bytes, format_count


@pytest.mark.parametrize(
    ("num_bytes", "expected"),
    [
        (0, "0 Bytes"),
        (1, "1 Bytes"),
        (1023, "1023 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (10_368_000, "9.89 MB"),
        (1024**3, "1 GB"),
        (5 * 1024**4, "5 TB"),
        (1024**5, "1 PB"),
        (1024**6, "1024 PB"),
    ],
)
def test_format_bytes(num_bytes, expected):
    assert format_bytes(num_bytes) == expected


def test_format_bytes_decimals():
    assert format_bytes(1_500_000, 1) == "1.4 MB"
    assert format_bytes(1_500_000, 3) == "1.431 MB"


def test_format_bytes_negative_decimals_treated_as_zero():
    assert format_bytes(3 * 1024, -2) == "3 KB"


def test_format_bytes_fractional_bytes():
    assert format_bytes(0.5) == "0.5 Bytes"


def test_format_count():
    assert format_count(144_000) == "144,000"
    assert format_count(144_000.0) == "144,000"
    assert format_count(246_857.142857) == "246,857.14"
