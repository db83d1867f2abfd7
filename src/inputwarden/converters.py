"""Conversion functions from a raw line to a typed value.

Every converter raises ConversionError naming the offending text when the
line cannot be converted.
"""

from __future__ import annotations

from datetime import date, datetime
import re
from typing import TYPE_CHECKING, Any

from inputwarden.base import failure_detail
from inputwarden.exceptions import ConversionError

if TYPE_CHECKING:
  from collections.abc import Callable

  from inputwarden.base import Converter

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

ISO_DATE_FORMAT = "%Y-%m-%d"

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
  r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
  r"|[iI][nN][fF](?:[iI][nN][iI][tT][yY])?|[nN][aA][nN])"
)
_ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def identity(text: str) -> str:
  """Return the line unchanged."""
  return text


def _parse_bounded_int(text: str, lower: int, upper: int, kind: str) -> int:
  # int() alone would also accept whitespace and digit separators
  if _INTEGER_PATTERN.fullmatch(text) is None:
    raise ConversionError(f"For input string: {text!r}")
  value = int(text)
  if not lower <= value <= upper:
    raise ConversionError(
      f"Value {text!r} is out of range for a {kind} integer [{lower}, {upper}]"
    )
  return value


def parse_int(text: str) -> int:
  """Parse a decimal integer that fits in 32 signed bits."""
  return _parse_bounded_int(text, INT32_MIN, INT32_MAX, "32-bit")


def parse_long(text: str) -> int:
  """Parse a decimal integer that fits in 64 signed bits."""
  return _parse_bounded_int(text, INT64_MIN, INT64_MAX, "64-bit")


def parse_float(text: str) -> float:
  """Parse a floating-point number.

  Accepts ASCII decimal notation with an optional exponent, plus `inf` and
  `nan`. Surrounding whitespace, `_` separators and non-ASCII digits are
  rejected, as they are for integers.
  """
  if _FLOAT_PATTERN.fullmatch(text) is None:
    raise ConversionError(f"For input string: {text!r}")
  return float(text)


def parse_iso_date(text: str) -> date:
  """Parse a calendar date written exactly as YYYY-MM-DD.

  Compact or week-based ISO forms are rejected, as are dates that do not
  exist such as 2024-02-30.
  """
  if _ISO_DATE_PATTERN.fullmatch(text) is None:
    raise ConversionError(f"Text {text!r} is not a date in YYYY-MM-DD format")
  try:
    return datetime.strptime(text, ISO_DATE_FORMAT).date()
  except ValueError as e:
    raise ConversionError(f"Text {text!r} is not a valid date: {e}") from e


def split_record[R](
  separator: str,
  factory: Callable[..., R],
  *field_converters: Converter[Any],
) -> Converter[R]:
  """Build a converter for a record typed on one line.

  The line is split on `separator` into exactly one field per converter.
  Each field is converted in order and the results are passed positionally
  to `factory`.

  Example:
    ```python
    convert = split_record("#", User, identity, identity, parse_iso_date, parse_int)
    user = reader.read_object(
      "Enter <name>#<password>#<last login>#<logins>", "Wrong user format:", convert
    )
    ```
  """
  if not separator:
    raise ValueError("Record separator must not be empty")
  if not field_converters:
    raise ValueError("A record needs at least one field converter")

  def convert_record(text: str) -> R:
    fields = text.split(separator)
    if len(fields) != len(field_converters):
      raise ConversionError(
        f"Expected {len(field_converters)} fields separated by {separator!r}, "
        f"got {len(fields)}"
      )
    values = []
    for position, (field, convert) in enumerate(
      zip(fields, field_converters, strict=True), start=1
    ):
      try:
        values.append(convert(field))
      except ValueError as e:
        raise ConversionError(f"Field {position}: {failure_detail(e)}") from e
    return factory(*values)

  convert_record.__qualname__ = (
    f"split_record({separator!r}, {getattr(factory, '__name__', repr(factory))})"
  )
  return convert_record
