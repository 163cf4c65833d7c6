"""JSON file sink for exporting the inventory."""

import json
import logging
from pathlib import Path

from realty.exceptions import PersistenceError
from realty.models import Property
from realty.sinks.serialization import to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output listings to a JSON file."""

    def __init__(self, output_path: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_path : str | Path
            File to write. Parent directories are created.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_path = Path(output_path)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Property]) -> None:
        """Write listings as a JSON array, replacing the file."""
        data = [to_dict(record) for record in records]

        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise PersistenceError(f"Error writing {self.output_path}: {e}") from e

        self._counts[entity_type] = len(records)
        logger.info("Exported %d %s to %s", len(records), entity_type, self.output_path)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON written to: {self.output_path}")
        for entity_type, count in self._counts.items():
            print(f"  {entity_type}: {count} records")
