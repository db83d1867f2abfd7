"""Global configuration for the inputwarden library."""

from __future__ import annotations

import contextlib
import dataclasses
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Iterator

CRITERIA_DETAIL = "Input does not meet the criteria"


@dataclasses.dataclass
class Config:
  """Global configuration settings.

  Attributes:
    strip_input: Strip surrounding whitespace from each line before it is
      converted (default: False, the line is converted exactly as typed).
    criteria_detail: Failure detail reported when a value converts but is
      rejected by an acceptance predicate.
    log_input_text: Whether debug logs include the raw text the user typed
      (default: False, since prompts may ask for passwords).
  """

  strip_input: bool = False
  criteria_detail: str = CRITERIA_DETAIL
  log_input_text: bool = False


# Singleton instance
_config = Config()


def get_config() -> Config:
  """Get the global configuration."""
  return _config


def reset_config() -> None:
  """Reset configuration to defaults (mostly for testing)."""
  global _config
  _config = Config()


@contextlib.contextmanager
def overrides(**kwargs: Any) -> Iterator[None]:
  """Context manager to temporarily override configuration.

  Example:
    ```python
    # Tolerate stray spaces around numbers for one form
    with overrides(strip_input=True):
      age = reader.read_int("Age: ", "Not a number:")
    ```
  """
  for key in kwargs:
    if not hasattr(_config, key):
      raise AttributeError(f"Config has no attribute '{key}'")

  original = {}
  try:
    for key, value in kwargs.items():
      original[key] = getattr(_config, key)
      setattr(_config, key, value)
    yield
  finally:
    for key, value in original.items():
      setattr(_config, key, value)
