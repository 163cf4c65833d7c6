"""Flat-file sink backing the inventory."""

import logging
from pathlib import Path
from typing import Iterable

from realty.exceptions import FormatError, PersistenceError
from realty.models import Property
from realty.sinks.serialization import DEFAULT_DELIMITER, from_line, to_line
from realty.store import InventoryStore

logger = logging.getLogger(__name__)


class FlatFileSink:
    """Persist listings as delimited lines, rewriting the whole file each save."""

    def __init__(self, file_path: str | Path, delimiter: str = DEFAULT_DELIMITER) -> None:
        """Initialize flat-file sink.

        Parameters
        ----------
        file_path : str | Path
            Backing file. It does not need to exist yet.
        delimiter : str
            Field separator.
        """
        self.file_path = Path(file_path)
        self.delimiter = delimiter
        self.skipped_lines = 0

    def save(self, records: Iterable[Property]) -> int:
        """Overwrite the backing file with ``records`` in the given order.

        Returns
        -------
        int
            Number of lines written.

        Raises
        ------
        PersistenceError
            If the file cannot be written.
        """
        lines = [to_line(record, self.delimiter) for record in records]
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.file_path, "w", encoding="utf-8", newline="\n") as f:
                for line in lines:
                    f.write(line + "\n")
        except OSError as e:
            logger.error("Error saving properties to %s: %s", self.file_path, e)
            raise PersistenceError(f"Error saving properties to {self.file_path}: {e}") from e

        logger.debug(
            "Saved %d properties to %s",
            len(lines),
            self.file_path,
            extra={"context": {"file_path": str(self.file_path), "count": len(lines)}},
        )
        return len(lines)

    def load(self) -> list[Property]:
        """Read every parsable listing from the backing file.

        A missing or unreadable file yields an empty list. Malformed
        lines are skipped with a warning and counted in ``skipped_lines``.
        """
        self.skipped_lines = 0
        if not self.file_path.exists():
            logger.info("No data file at %s, starting empty", self.file_path)
            return []

        try:
            with open(self.file_path, "rb") as f:
                raw_lines = f.read().splitlines()
        except OSError as e:
            logger.warning("Unable to load properties from %s: %s", self.file_path, e)
            return []

        records: list[Property] = []
        for line_no, raw in enumerate(raw_lines, start=1):
            try:
                line = raw.decode("utf-8")
                if not line.strip():
                    continue
                records.append(from_line(line, self.delimiter))
            except (UnicodeDecodeError, FormatError) as e:
                self.skipped_lines += 1
                logger.warning(
                    "Skipping line %d of %s: %s",
                    line_no,
                    self.file_path,
                    e,
                    extra={"context": {"file_path": str(self.file_path), "line_no": line_no}},
                )

        logger.info(
            "Loaded %d properties from %s",
            len(records),
            self.file_path,
            extra={"context": {"file_path": str(self.file_path), "count": len(records)}},
        )
        return records

    def load_into(self, store: InventoryStore) -> int:
        """Load the file and feed each listing to ``store`` in file order."""
        records = self.load()
        for record in records:
            store.restore(record)
        return len(records)
