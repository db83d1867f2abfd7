"""Inputwarden - validated console input with prompt-until-valid readers."""

from loguru import logger

__version__ = "0.1.0"

# Core types
from inputwarden.base import Accepted, Converter, Outcome, Predicate, Rejected

# Conversion functions
from inputwarden.converters import (
  identity,
  parse_float,
  parse_int,
  parse_iso_date,
  parse_long,
  split_record,
)

# Engine
from inputwarden.engine import (
  attempt,
  read_validated,
  read_validated_with_predicate,
  with_predicate,
)

# Exceptions
from inputwarden.exceptions import (
  AttemptsExhaustedError,
  ConversionError,
  LogicError,
  PredicateError,
)

# Predicates
from inputwarden.predicates import in_range, matches, one_of, strictly_between
from inputwarden.protocols import LineSource

# Readers and sources
from inputwarden.reader import InputReader
from inputwarden.sources import AttemptLimitedSource, ConsoleLineSource, ScriptedLineSource

# Library logging is opt-in: logger.enable("inputwarden")
logger.disable("inputwarden")

__all__ = [
  "Accepted",
  "AttemptLimitedSource",
  "AttemptsExhaustedError",
  "ConsoleLineSource",
  "ConversionError",
  "Converter",
  "InputReader",
  "LineSource",
  "LogicError",
  "Outcome",
  "Predicate",
  "PredicateError",
  "Rejected",
  "ScriptedLineSource",
  "__version__",
  "attempt",
  "identity",
  "in_range",
  "matches",
  "one_of",
  "parse_float",
  "parse_int",
  "parse_iso_date",
  "parse_long",
  "read_validated",
  "read_validated_with_predicate",
  "split_record",
  "strictly_between",
  "with_predicate",
]
