"""Core types shared by the engine, converters and predicates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

# A conversion function maps one raw line to a typed value and raises
# ValueError to reject it.
type Converter[T] = Callable[[str], T]

# An acceptance predicate tests an already converted value.
type Predicate[T] = Callable[[T], bool]


@dataclass(frozen=True, slots=True)
class Accepted[T]:
  """A line that converted successfully."""

  value: T


@dataclass(frozen=True, slots=True)
class Rejected:
  """A line that failed conversion or an acceptance check."""

  detail: str


type Outcome[T] = Accepted[T] | Rejected


def failure_detail(exc: BaseException) -> str:
  """Return the user-facing detail for a rejected line."""
  detail = getattr(exc, "detail", None)
  if detail is None:
    detail = str(exc)
  return detail or exc.__class__.__name__


def describe_callable(func: Callable[..., Any]) -> str:
  """Return a short name for a converter or predicate, for log messages."""
  return getattr(func, "__qualname__", None) or repr(func)
