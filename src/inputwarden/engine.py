"""The read-validate-retry loop and predicate composition."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from inputwarden.base import Accepted, Rejected, describe_callable, failure_detail
from inputwarden.config import get_config
from inputwarden.exceptions import ConversionError, PredicateError

if TYPE_CHECKING:
  from inputwarden.base import Converter, Outcome, Predicate
  from inputwarden.protocols import LineSource


def attempt[T](convert: Converter[T], text: str) -> Outcome[T]:
  """Run one conversion and classify the result.

  Only ValueError (which includes ConversionError) counts as a rejection.
  Any other exception is a bug in the converter and propagates unchanged.
  """
  try:
    value = convert(text)
  except ValueError as e:
    return Rejected(failure_detail(e))
  return Accepted(value)


def with_predicate[T](convert: Converter[T], accept: Predicate[T]) -> Converter[T]:
  """Combine a converter with an acceptance predicate.

  The composite rejects values the predicate turns down with the same
  failure signal a malformed line produces, so both take the same retry path.
  Exceptions raised by the predicate are wrapped in PredicateError, which is
  not a ValueError and therefore is never retried.
  """

  def composite(text: str) -> T:
    result = convert(text)
    try:
      accepted = accept(result)
    except Exception as e:
      raise PredicateError(
        f"Predicate {describe_callable(accept)} raised {e.__class__.__name__}: {e}"
      ) from e
    if not accepted:
      raise ConversionError(get_config().criteria_detail)
    return result

  composite.__qualname__ = (
    f"{describe_callable(convert)} if {describe_callable(accept)}"
  )
  return composite


def read_validated[T](
  source: LineSource,
  prompt: str,
  error_prompt: str,
  convert: Converter[T],
) -> T:
  """Prompt through `source` until `convert` accepts a line.

  Every rejected line produces exactly one output line,
  `f"{error_prompt} {detail}"`, followed by a fresh prompt. There is no retry
  limit. Errors raised by the source itself (for example EOFError at the end
  of piped input) are not caught.

  Args:
    source: The line device to prompt through.
    prompt: Text shown before every attempt.
    error_prompt: Text prefixed to the failure detail of a rejected line.
    convert: Maps a line to the result; raises ValueError to reject it.

  Returns:
    The first successfully converted value.
  """
  config = get_config()
  attempts = 0
  while True:
    text = source.read_line(prompt)
    attempts += 1
    if config.strip_input:
      text = text.strip()

    outcome = attempt(convert, text)
    if isinstance(outcome, Accepted):
      logger.debug(
        "{} accepted input after {} attempt(s)", describe_callable(convert), attempts
      )
      return outcome.value

    if config.log_input_text:
      logger.debug(
        "Attempt {} rejected {!r}: {}", attempts, text, outcome.detail
      )
    else:
      logger.debug("Attempt {} rejected: {}", attempts, outcome.detail)
    source.write_line(f"{error_prompt} {outcome.detail}")


def read_validated_with_predicate[T](
  source: LineSource,
  prompt: str,
  error_prompt: str,
  convert: Converter[T],
  accept: Predicate[T],
) -> T:
  """Like `read_validated`, but also require `accept(value)` to be true.

  A value the predicate turns down is reported and retried exactly like a
  malformed line. If the predicate raises instead, the read stops with
  PredicateError, whose `__cause__` is the original exception.
  """
  return read_validated(source, prompt, error_prompt, with_predicate(convert, accept))
