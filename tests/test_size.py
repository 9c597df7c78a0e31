"""Tests for size token parsing."""

import logging

import pytest

from gpu_mem_for_llm.errors import EstimateError, InvalidSizeFormat
from gpu_mem_for_llm.size import (
    SizeSpec,
    SizeUnit,
    format_params,
    get_parameter_size,
    parse_size_spec,
)


class TestParseSizeSpec:
    """Test parse_size_spec and get_parameter_size."""

    def test_million(self):
        assert get_parameter_size("100m") == 100_000_000

    def test_billion(self):
        assert get_parameter_size("7b") == 7_000_000_000

    def test_uppercase_units(self):
        assert get_parameter_size("100M") == 100_000_000
        assert get_parameter_size("7B") == 7_000_000_000

    def test_leading_zeros(self):
        assert get_parameter_size("007b") == 7_000_000_000

    def test_zero_is_valid(self):
        assert get_parameter_size("0m") == 0

    def test_large_magnitude_stays_exact(self):
        assert get_parameter_size("405b") == 405_000_000_000
        assert get_parameter_size("123456789b") == 123_456_789 * 1_000_000_000

    def test_returns_size_spec(self):
        spec = parse_size_spec("13B")
        assert spec == SizeSpec(magnitude=13, unit=SizeUnit.BILLION)
        assert spec.parameter_count == 13_000_000_000
        assert str(spec) == "13b"

    @pytest.mark.parametrize(
        "token",
        ["", "7", "b", "7.5b", "-7b", "+7b", " 7b", "7b ", "7b\n", "7k", "7bb", "7mb", "seven b", "١٢b"],
    )
    def test_invalid_tokens_rejected(self, token):
        with pytest.raises(InvalidSizeFormat):
            parse_size_spec(token)

    def test_debug_log_shows_normalized_token(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="gpu_mem_for_llm"):
            get_parameter_size("007B")
        assert "Parsed size 7b as 7,000,000,000 parameters" in caplog.text

    def test_non_string_rejected(self):
        with pytest.raises(InvalidSizeFormat):
            parse_size_spec(None)
        with pytest.raises(InvalidSizeFormat):
            parse_size_spec(7)

    def test_error_message_and_base_class(self):
        with pytest.raises(EstimateError) as excinfo:
            get_parameter_size("7gb")
        assert "must be an integer followed by 'm' or 'b'" in str(excinfo.value)
        assert excinfo.value.token == "7gb"
        assert isinstance(excinfo.value, ValueError)


class TestFormatParams:
    """Test human-readable parameter counts."""

    def test_billions(self):
        assert format_params(7_000_000_000) == "7.0B"

    def test_millions(self):
        assert format_params(100_000_000) == "100.0M"

    def test_small_counts(self):
        assert format_params(12_345) == "12,345"
