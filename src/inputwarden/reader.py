"""Typed readers built from the generic engine."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from inputwarden.converters import (
  identity,
  parse_float,
  parse_int,
  parse_iso_date,
  parse_long,
)
from inputwarden.engine import read_validated, read_validated_with_predicate
from inputwarden.predicates import in_range, one_of, strictly_between
from inputwarden.sources import ConsoleLineSource

if TYPE_CHECKING:
  from collections.abc import Iterable
  from datetime import date

  from inputwarden.base import Converter, Predicate
  from inputwarden.protocols import LineSource


class InputReader:
  """Read validated values from a line source.

  Each `read_*` method prompts until the line is acceptable, printing
  `error_prompt` followed by the failure detail after every rejected line.
  None of them give up on bad input; only errors raised by the source (such
  as EOFError) end a read early.

  Example:
    ```python
    reader = InputReader()
    age = reader.read_number_range("Age: ", "Invalid age:", 0, 150)
    answer = reader.read_string_options("Continue? ", "Answer yes or no:", {"yes", "no"})
    ```
  """

  def __init__(self, source: LineSource | None = None) -> None:
    self.source = source if source is not None else ConsoleLineSource()

  def read_string(self, prompt: str) -> str:
    """Return the next line as typed, without validation."""
    return self.source.read_line(prompt)

  def write_string(self, text: str) -> None:
    self.source.write_line(text)

  def write_line(self, obj: Any) -> None:
    """Write the string form of any object as one line."""
    self.source.write_line(str(obj))

  def read_object[T](self, prompt: str, error_prompt: str, convert: Converter[T]) -> T:
    return read_validated(self.source, prompt, error_prompt, convert)

  def read_object_with_predicate[T](
    self,
    prompt: str,
    error_prompt: str,
    convert: Converter[T],
    accept: Predicate[T],
  ) -> T:
    return read_validated_with_predicate(
      self.source, prompt, error_prompt, convert, accept
    )

  def read_int(self, prompt: str, error_prompt: str) -> int:
    """Read a 32-bit signed integer."""
    return self.read_object(prompt, error_prompt, parse_int)

  def read_long(self, prompt: str, error_prompt: str) -> int:
    """Read a 64-bit signed integer."""
    return self.read_object(prompt, error_prompt, parse_long)

  def read_float(self, prompt: str, error_prompt: str) -> float:
    return self.read_object(prompt, error_prompt, parse_float)

  def read_number_range(
    self, prompt: str, error_prompt: str, min_value: float, max_value: float
  ) -> float:
    """Read a number between `min_value` and `max_value`, both included.

    Raises:
      LogicError: If `min_value` is greater than `max_value`.
    """
    return self.read_object_with_predicate(
      prompt, error_prompt, parse_float, in_range(min_value, max_value)
    )

  def read_string_predicate(
    self, prompt: str, error_prompt: str, predicate: Predicate[str]
  ) -> str:
    return self.read_object_with_predicate(prompt, error_prompt, identity, predicate)

  def read_string_options(
    self, prompt: str, error_prompt: str, options: Iterable[str]
  ) -> str:
    """Read a line exactly equal to one of `options`.

    Raises:
      LogicError: If `options` is empty.
    """
    return self.read_object_with_predicate(
      prompt, error_prompt, identity, one_of(options)
    )

  def read_iso_date(self, prompt: str, error_prompt: str) -> date:
    """Read a date typed as YYYY-MM-DD."""
    return self.read_object(prompt, error_prompt, parse_iso_date)

  def read_iso_date_range(
    self, prompt: str, error_prompt: str, start: date, end: date
  ) -> date:
    """Read a YYYY-MM-DD date strictly after `start` and strictly before `end`.

    Unlike `read_number_range`, both bounds are excluded.

    Raises:
      LogicError: If no date lies strictly between the bounds.
    """
    return self.read_object_with_predicate(
      prompt, error_prompt, parse_iso_date, strictly_between(start, end)
    )
