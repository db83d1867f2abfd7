"""Tests for conversion functions."""

from dataclasses import dataclass
from datetime import date

import pytest

from inputwarden import (
  ConversionError,
  identity,
  parse_float,
  parse_int,
  parse_iso_date,
  parse_long,
  split_record,
)
from inputwarden.converters import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN


class TestParseInt:
  """Tests for 32-bit and 64-bit integer parsing."""

  @pytest.mark.parametrize(
    ("text", "expected"),
    [("0", 0), ("12", 12), ("-12", -12), ("+7", 7), ("007", 7)],
  )
  def test_valid_literals(self, text, expected):
    assert parse_int(text) == expected

  @pytest.mark.parametrize("text", ["", "abc", "1.5", " 1", "1 ", "1_000", "--1", "+"])
  def test_invalid_literals_raise(self, text):
    with pytest.raises(ConversionError, match="For input string"):
      parse_int(text)

  def test_failure_names_input(self):
    with pytest.raises(ConversionError, match="'abc'"):
      parse_int("abc")

  def test_32_bit_bounds(self):
    assert parse_int(str(INT32_MAX)) == INT32_MAX
    assert parse_int(str(INT32_MIN)) == INT32_MIN
    with pytest.raises(ConversionError, match="out of range for a 32-bit"):
      parse_int(str(INT32_MAX + 1))
    with pytest.raises(ConversionError, match="out of range for a 32-bit"):
      parse_int(str(INT32_MIN - 1))

  def test_long_accepts_values_beyond_32_bits(self):
    assert parse_long(str(INT32_MAX + 1)) == INT32_MAX + 1

  def test_64_bit_bounds(self):
    assert parse_long(str(INT64_MAX)) == INT64_MAX
    assert parse_long(str(INT64_MIN)) == INT64_MIN
    with pytest.raises(ConversionError, match="out of range for a 64-bit"):
      parse_long(str(INT64_MAX + 1))


class TestParseFloat:
  """Tests for floating-point parsing."""

  @pytest.mark.parametrize(
    ("text", "expected"),
    [
      ("5", 5.0),
      ("-2.5", -2.5),
      ("1e3", 1000.0),
      (".5", 0.5),
      ("2E-2", 0.02),
      ("inf", float("inf")),
      ("-Infinity", float("-inf")),
    ],
  )
  def test_valid_numbers(self, text, expected):
    assert parse_float(text) == expected

  @pytest.mark.parametrize(
    "text", ["", "five", "1,5", "1_0", "1.2.3", " 5", "5 ", "\u0665", "1\u0665", "infinit"]
  )
  def test_invalid_numbers_raise(self, text):
    with pytest.raises(ConversionError, match="For input string"):
      parse_float(text)


class TestParseIsoDate:
  """Tests for YYYY-MM-DD date parsing."""

  def test_valid_date(self):
    assert parse_iso_date("2024-03-01") == date(2024, 3, 1)

  def test_leap_day(self):
    assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

  @pytest.mark.parametrize("text", ["2024-02-30", "2023-02-29", "2024-13-01", "2024-00-10"])
  def test_impossible_dates_raise(self, text):
    with pytest.raises(ConversionError, match=f"'{text}' is not a valid date"):
      parse_iso_date(text)

  @pytest.mark.parametrize(
    "text", ["20240301", "2024-3-1", "01-03-2024", "2024-W10-1", "2024-03-01T00:00", ""]
  )
  def test_other_formats_raise(self, text):
    with pytest.raises(ConversionError, match="YYYY-MM-DD"):
      parse_iso_date(text)


@dataclass
class Login:
  username: str
  last_login: date
  count: int


class TestSplitRecord:
  """Tests for one-line record conversion."""

  def test_builds_record_from_fields(self):
    convert = split_record("#", Login, identity, parse_iso_date, parse_int)
    assert convert("Alice#2024-01-02#3") == Login("Alice", date(2024, 1, 2), 3)

  def test_wrong_field_count_raises(self):
    convert = split_record("#", Login, identity, parse_iso_date, parse_int)
    with pytest.raises(ConversionError, match="Expected 3 fields separated by '#', got 2"):
      convert("Alice#2024-01-02")

  def test_field_failure_names_position(self):
    convert = split_record("#", Login, identity, parse_iso_date, parse_int)
    with pytest.raises(ConversionError, match="Field 3: For input string: 'many'"):
      convert("Alice#2024-01-02#many")

  def test_factory_value_error_is_a_rejection(self):
    def positive(value):
      if value <= 0:
        raise ValueError("count must be positive")
      return value

    convert = split_record(",", positive, parse_int)
    with pytest.raises(ValueError, match="count must be positive"):
      convert("0")

  def test_invalid_configuration_raises(self):
    with pytest.raises(ValueError, match="separator"):
      split_record("", Login, identity)
    with pytest.raises(ValueError, match="at least one field"):
      split_record("#", Login)


class TestNumberSyntaxConsistency:
  """Integers and floats reject the same non-ASCII and padded input."""

  @pytest.mark.parametrize("text", ["٥", " 5", "5\t"])
  def test_both_parsers_reject(self, text):
    with pytest.raises(ConversionError):
      parse_int(text)
    with pytest.raises(ConversionError):
      parse_float(text)
