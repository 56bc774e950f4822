import pytest

from pr_labeler.core.application.exceptions import ConfigurationError
from pr_labeler.infrastructure.configuration import parse_size


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2048", 2048),
        ("100KB", 102400),
        ("1K", 1024),
        ("10 kb", 10240),
        ("1.5MB", 1572864),
        ("1M", 1048576),
        ("2GB", 2 * 1024**3),
        ("512B", 512),
        ("  100KB  ", 102400),
        ("0.5B", 1),
    ],
)
def test_parses_sizes(value: str, expected: int) -> None:
    assert parse_size(value) == expected


@pytest.mark.parametrize("value", ["", "   ", "abc", "KB", "5XB", "1.2.3MB", "10 K B"])
def test_rejects_malformed_sizes(value: str) -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        parse_size(value)
    assert exc_info.value.field == "file_size_limit"


def test_rejects_negative_sizes() -> None:
    with pytest.raises(ConfigurationError, match="negative"):
        parse_size("-5KB")


@pytest.mark.parametrize("value", ["1TB", "2 PB", "3tb"])
def test_rejects_terabyte_units(value: str) -> None:
    with pytest.raises(ConfigurationError, match="TB and larger"):
        parse_size(value)


def test_field_name_is_reported() -> None:
    with pytest.raises(ConfigurationError) as exc_info:
        parse_size("lots", field="max_size")
    assert exc_info.value.field == "max_size"
