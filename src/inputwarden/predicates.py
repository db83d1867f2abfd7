"""Acceptance predicates used by the typed readers."""

from __future__ import annotations

from datetime import timedelta
import math
import re
from typing import TYPE_CHECKING

from inputwarden.exceptions import LogicError

if TYPE_CHECKING:
  from collections.abc import Iterable
  from datetime import date

  from inputwarden.base import Predicate


def in_range(min_value: float, max_value: float) -> Predicate[float]:
  """Accept numbers in [min_value, max_value], both ends included.

  Raises:
    LogicError: If no number can satisfy the bounds.
  """
  if math.isnan(min_value) or math.isnan(max_value):
    raise LogicError(f"Range bounds must be numbers, got [{min_value}, {max_value}]")
  if min_value > max_value:
    raise LogicError(
      f"Empty range: minimum {min_value} is greater than maximum {max_value}"
    )

  def check(value: float) -> bool:
    return min_value <= value <= max_value

  check.__qualname__ = f"in_range({min_value}, {max_value})"
  return check


def strictly_between(start: date, end: date) -> Predicate[date]:
  """Accept dates after `start` and before `end`, both ends excluded.

  Raises:
    LogicError: If no calendar date lies strictly between the bounds.
  """
  if end - start <= timedelta(days=1):
    raise LogicError(f"No date lies strictly between {start} and {end}")

  def check(value: date) -> bool:
    return start < value < end

  check.__qualname__ = f"strictly_between({start}, {end})"
  return check


def one_of(options: Iterable[str]) -> Predicate[str]:
  """Accept a line equal to one of `options`.

  Membership is literal string equality. Entries are never interpreted as
  patterns; use `matches` with `read_string_predicate` for that.

  Raises:
    LogicError: If `options` is empty.
  """
  allowed = frozenset(options)
  if not allowed:
    raise LogicError("At least one option is required")

  def check(value: str) -> bool:
    return value in allowed

  check.__qualname__ = f"one_of({sorted(allowed)})"
  return check


def matches(pattern: str | re.Pattern[str]) -> Predicate[str]:
  """Accept a line the regular expression matches in full."""
  compiled = re.compile(pattern)

  def check(value: str) -> bool:
    return compiled.fullmatch(value) is not None

  check.__qualname__ = f"matches({compiled.pattern!r})"
  return check
