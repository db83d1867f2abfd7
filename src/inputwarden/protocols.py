"""Protocols for inputwarden collaborators."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSource(Protocol):
  """A line-based text device the readers prompt through.

  Implementations are not expected to be thread-safe. A source shared
  between threads must be synchronized by the caller, and programs reading
  several independent streams should give each its own source.
  """

  def read_line(self, prompt: str) -> str:
    """Display `prompt` and return one line of input without its newline.

    May block. Raises (typically EOFError) when no more input is available;
    readers never catch this.
    """
    ...

  def write_line(self, text: str) -> None:
    """Display one line of output."""
    ...
