"""Console sink for listings and menu messages."""

import sys
from typing import Any, TextIO

from realty.models import Property

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
CYAN = "\033[36m"


class ConsoleSink:
    """Print listings and colourised status lines."""

    def __init__(
        self,
        color: bool = True,
        max_records: int | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        color : bool
            Wrap status lines in ANSI colour codes.
        max_records : int | None
            Maximum listings to print per batch (None for all).
        stream : TextIO | None
            Output stream (defaults to ``sys.stdout`` at write time).
        """
        self.color = color
        self.max_records = max_records
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def echo(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self.stream, flush=True)

    def _paint(self, color: str, text: str) -> str:
        return f"{color}{text}{RESET}" if self.color else text

    def heading(self, text: str) -> None:
        self.echo("\n" + self._paint(BLUE, text))

    def title(self, text: str) -> None:
        self.echo("\n" + self._paint(CYAN, text))

    def success(self, text: str) -> None:
        self.echo(self._paint(GREEN, text))

    def warning(self, text: str) -> None:
        self.echo(self._paint(YELLOW, text))

    def error(self, text: str) -> None:
        self.echo(self._paint(RED, f"Error: {text}"))

    def write_batch(self, entity_type: str, records: list[Property]) -> None:
        """Print a batch of listings, one per line."""
        if not records:
            self.warning("No properties available.")
            return

        display_records = records[: self.max_records] if self.max_records else records
        for record in display_records:
            self.echo(str(record))

        if self.max_records and len(records) > self.max_records:
            self.echo(f"... and {len(records) - self.max_records} more records")

    def write_summary(self, summary: dict[str, Any]) -> None:
        """Print listing counts on one line."""
        self.echo(" | ".join(f"{key.title()}: {value}" for key, value in summary.items()))
