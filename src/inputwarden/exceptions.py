"""Custom exceptions for inputwarden."""

from __future__ import annotations


class ConversionError(ValueError):
  """Raised by a conversion function to reject a line of input.

  This is the designated failure signal: the engine reports `detail` to the
  user and prompts again. Any `ValueError` is treated the same way, so plain
  builtins such as `int` can be used as converters directly.
  """

  def __init__(self, detail: str) -> None:
    super().__init__(detail)
    self.detail = detail


class PredicateError(RuntimeError):
  """Raised when an acceptance predicate itself fails.

  A predicate answers yes or no. If it raises instead, the problem is in the
  predicate, not in the user's input, so it must never be retried.
  """


class LogicError(Exception):
  """Raised when a reader is configured with constraints nothing can satisfy."""


class AttemptsExhaustedError(EOFError):
  """Raised by `AttemptLimitedSource` once its read budget is spent."""
