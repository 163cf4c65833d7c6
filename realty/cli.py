"""Command-line entry point for the listing inventory.

Usage::

    realty                         # interactive menu on ./properties.csv
    realty --data-file x.csv list --order price
    realty export --output inventory.json --pretty
    realty seed --count 20 --seed 42
    realty dedupe
"""

import argparse
import logging
import sys

from realty.config import LOG_FORMATS, InventoryConfig
from realty.exceptions import RealtyError
from realty.generators import PropertyGenerator
from realty.logging import setup_logging
from realty.menu import InventoryMenu
from realty.models import ListingOrder
from realty.sinks import ConsoleSink, FlatFileSink, JsonFileSink
from realty.store import InventoryStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="realty",
        description="Manage real-estate listings stored in a flat file",
    )
    parser.add_argument(
        "--data-file",
        type=str,
        default=None,
        help="Backing file (default: properties.csv or $REALTY_DATA_FILE)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-format",
        type=str,
        default=None,
        choices=list(LOG_FORMATS),
        help="Log line format (default: standard)",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("run", help="Start the interactive menu (default)")

    list_parser = subparsers.add_parser("list", help="Print listings and exit")
    list_parser.add_argument(
        "--order",
        type=str,
        default=ListingOrder.INSERTION.value,
        choices=[order.value for order in ListingOrder],
        help="Listing order (default: insertion)",
    )

    export_parser = subparsers.add_parser("export", help="Write listings to a JSON file")
    export_parser.add_argument("--output", type=str, required=True, help="JSON file to write")
    export_parser.add_argument("--pretty", action="store_true", help="Pretty-print JSON output")

    seed_parser = subparsers.add_parser("seed", help="Add synthetic listings")
    seed_parser.add_argument(
        "--count",
        type=int,
        default=10,
        help="Number of listings to add (default: 10)",
    )
    seed_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: $REALTY_SEED)",
    )

    subparsers.add_parser("dedupe", help="Remove duplicate listings and exit")
    return parser


def load_store(sink: FlatFileSink) -> InventoryStore:
    """Build a store from the backing file."""
    store = InventoryStore()
    count = sink.load_into(store)
    if sink.skipped_lines:
        logger.warning("Skipped %d malformed lines in %s", sink.skipped_lines, sink.file_path)
    logger.info("Inventory ready with %d properties", count)
    return store


def cmd_list(store: InventoryStore, order: str, console: ConsoleSink) -> None:
    order_enum = ListingOrder(order)
    if order_enum is ListingOrder.PRICE:
        records = store.list_by_price()
    elif order_enum is ListingOrder.ADDRESS:
        records = store.list_by_address()
    else:
        records = store.list_in_order()
    console.write_batch("properties", records)


def cmd_seed(store: InventoryStore, sink: FlatFileSink, count: int, seed: int | None) -> int:
    generator = PropertyGenerator(seed=seed)
    taken = {record.property_id for record in store}
    start_id = max(taken, default=0) + 1
    added = 0
    for record in generator.generate_batch(count, start_id=start_id, taken_ids=taken):
        store.add(record)
        added += 1
    sink.save(store.list_in_order())
    return added


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = InventoryConfig.from_env().with_overrides(
            data_file=args.data_file,
            log_level=args.log_level,
            log_format=args.log_format,
        )
    except RealtyError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, config.log_format)
    sink = FlatFileSink(config.data_file, delimiter=config.delimiter)
    store = load_store(sink)
    console = ConsoleSink(color=sys.stdout.isatty())

    try:
        if args.command in (None, "run"):
            InventoryMenu(store, sink, console=console).run()
        elif args.command == "list":
            cmd_list(store, args.order, console)
        elif args.command == "export":
            json_sink = JsonFileSink(args.output, pretty=args.pretty)
            json_sink.write_batch("properties", store.list_in_order())
            json_sink.close()
        elif args.command == "seed":
            seed = args.seed if args.seed is not None else config.seed
            added = cmd_seed(store, sink, args.count, seed)
            console.success(f"Added {added} properties to {config.data_file}")
        elif args.command == "dedupe":
            removed = store.remove_duplicates()
            sink.save(store.list_in_order())
            console.success(f"Removed {len(removed)} duplicate properties.")
    except RealtyError as e:
        logger.error("%s failed: %s", args.command, e)
        console.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
