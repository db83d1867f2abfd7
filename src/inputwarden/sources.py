"""Line sources: the text devices readers prompt through."""

from __future__ import annotations

from collections import deque
import sys
from typing import TYPE_CHECKING, TextIO

from loguru import logger

from inputwarden.exceptions import AttemptsExhaustedError

if TYPE_CHECKING:
  from collections.abc import Iterable

  from inputwarden.protocols import LineSource


class ConsoleLineSource:
  """Prompt on a text stream and read answers from another.

  Defaults to the process's standard streams. Like `input()`, reading past
  the end of the stream raises EOFError.
  """

  def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    self._stdin = stdin
    self._stdout = stdout

  @property
  def stdin(self) -> TextIO:
    return self._stdin if self._stdin is not None else sys.stdin

  @property
  def stdout(self) -> TextIO:
    return self._stdout if self._stdout is not None else sys.stdout

  def read_line(self, prompt: str) -> str:
    self.stdout.write(prompt)
    self.stdout.flush()
    line = self.stdin.readline()
    if not line:
      raise EOFError("End of input while waiting for a response")
    return line.removesuffix("\n").removesuffix("\r")

  def write_line(self, text: str) -> None:
    self.stdout.write(text + "\n")
    self.stdout.flush()


class ScriptedLineSource:
  """Replay a fixed sequence of responses.

  Every prompt and output line is recorded, which makes this source suitable
  for tests and for driving readers non-interactively.

  Example:
    ```python
    source = ScriptedLineSource(["abc", "12"])
    assert InputReader(source).read_int("Number: ", "Not a number:") == 12
    assert source.output == ["Not a number: For input string: 'abc'"]
    ```
  """

  def __init__(self, lines: Iterable[str]) -> None:
    self._pending = deque(lines)
    self.prompts: list[str] = []
    self.output: list[str] = []

  @property
  def remaining(self) -> int:
    """Number of responses not yet consumed."""
    return len(self._pending)

  def read_line(self, prompt: str) -> str:
    self.prompts.append(prompt)
    if not self._pending:
      raise EOFError(f"No scripted response left for prompt {prompt!r}")
    return self._pending.popleft()

  def write_line(self, text: str) -> None:
    self.output.append(text)


class AttemptLimitedSource:
  """Wrap a source and stop after a fixed number of reads.

  Readers retry forever by design. When input comes from an automated
  context, wrap the source in this to turn an endless retry into an
  AttemptsExhaustedError (an EOFError) after `max_reads` lines.
  """

  def __init__(self, source: LineSource, max_reads: int) -> None:
    if max_reads < 1:
      raise ValueError(f"max_reads must be at least 1, got {max_reads}")
    self.source = source
    self.max_reads = max_reads
    self.reads = 0

  def read_line(self, prompt: str) -> str:
    if self.reads >= self.max_reads:
      logger.warning("Giving up on prompt {!r} after {} reads", prompt, self.reads)
      raise AttemptsExhaustedError(
        f"No valid input after {self.max_reads} attempt(s) for prompt {prompt!r}"
      )
    self.reads += 1
    return self.source.read_line(prompt)

  def write_line(self, text: str) -> None:
    self.source.write_line(text)
