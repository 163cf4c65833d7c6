"""Interactive menu driving the inventory."""

import logging
from typing import Callable

from realty.exceptions import FormatError, InvalidActionError, NotFoundError, RealtyError
from realty.models import EditAction, ListingOrder, Property, TradeAction
from realty.sinks import ConsoleSink, FlatFileSink
from realty.sinks.serialization import parse_price
from realty.store import InventoryStore

logger = logging.getLogger(__name__)

MENU_TITLE = "Real-estate Management System"
MENU_OPTIONS = [
    "Add New Property",
    "Display Properties",
    "Search Property",
    "Buy/Sell Property",
    "Edit/Delete Property",
    "Remove Duplicate Properties",
    "Exit",
]
EXIT_CHOICE = str(len(MENU_OPTIONS))


class InventoryMenu:
    """Numbered menu with one handler per entry.

    Every mutating handler saves the whole inventory through ``sink``
    before reporting success. Domain errors raised by a handler are
    printed and control returns to the menu.

    Parameters
    ----------
    store : InventoryStore
        Loaded inventory.
    sink : FlatFileSink
        Backing file, rewritten after each mutation.
    console : ConsoleSink | None
        Output. Defaults to a colour console on stdout.
    input_fn : Callable[[str], str] | None
        Prompt reader (builtin ``input`` when None).
    """

    def __init__(
        self,
        store: InventoryStore,
        sink: FlatFileSink,
        console: ConsoleSink | None = None,
        input_fn: Callable[[str], str] | None = None,
    ) -> None:
        self.store = store
        self.sink = sink
        self.console = console or ConsoleSink()
        self._input = input_fn or input
        self._handlers: dict[str, Callable[[], None]] = {
            "1": self.add_property,
            "2": self.display_properties,
            "3": self.search_property,
            "4": self.buy_or_sell_property,
            "5": self.edit_or_delete_property,
            "6": self.remove_duplicates,
        }

    # Prompts
    def prompt(self, text: str) -> str:
        # Flush pending output so the prompt is not printed ahead of it
        self.console.stream.flush()
        return self._input(text)

    def prompt_int(self, text: str) -> int:
        while True:
            raw = self.prompt(text)
            try:
                return int(raw.strip())
            except ValueError:
                self.console.error("Please enter a valid integer value.")

    def prompt_price(self, text: str) -> float:
        while True:
            raw = self.prompt(text)
            try:
                return parse_price(raw.strip())
            except FormatError:
                self.console.error("Please enter a valid price.")

    # Loop
    def show_menu(self) -> None:
        self.console.title(MENU_TITLE)
        for number, label in enumerate(MENU_OPTIONS, start=1):
            self.console.echo(f"{number}. {label}")

    def run(self) -> None:
        """Run the menu until Exit is chosen or input ends."""
        while True:
            self.show_menu()
            try:
                choice = self.prompt("Enter your choice: ").strip()
                if not self.handle(choice):
                    break
            except (EOFError, KeyboardInterrupt):
                self.console.echo()
                break
        self.console.success("Exiting...")

    def handle(self, choice: str) -> bool:
        """Dispatch one menu choice; return False when the menu should stop."""
        if choice == EXIT_CHOICE:
            return False

        handler = self._handlers.get(choice)
        if handler is None:
            self.console.error("Invalid choice. Please select a valid option.")
            return True

        try:
            handler()
        except RealtyError as e:
            logger.debug("Menu option %s failed: %s", choice, e)
            self.console.error(str(e))
        return True

    def _persist(self) -> None:
        self.sink.save(self.store.list_in_order())

    # Handlers
    def add_property(self) -> None:
        self.console.heading("Add New Property")
        property_id = self.prompt_int("Enter property ID: ")
        address = self.prompt("Enter property address: ")
        price = self.prompt_price("Enter property price: ")
        property_type = self.prompt("Enter property type (e.g., apartment, house): ")
        category = self.prompt("Enter property category (e.g., residential, commercial): ")

        self.store.add(
            Property(
                property_id=property_id,
                address=address,
                price=price,
                property_type=property_type,
                category=category,
            )
        )
        self._persist()
        self.console.success("Property added successfully.")

    def display_properties(self) -> None:
        self.console.heading("Display Properties")
        raw = self.prompt("Order by (insertion/price/address) [insertion]: ").strip().lower()
        try:
            order = ListingOrder(raw) if raw else ListingOrder.INSERTION
        except ValueError:
            raise InvalidActionError(
                f"Invalid order {raw!r}. Please enter insertion, price or address."
            ) from None

        if order is ListingOrder.PRICE:
            records = self.store.list_by_price()
        elif order is ListingOrder.ADDRESS:
            records = self.store.list_by_address()
        else:
            records = self.store.list_in_order()

        self.console.write_batch("properties", records)
        if records:
            self.console.write_summary(self.store.summary())

    def search_property(self) -> None:
        self.console.heading("Search for a Property")
        mode = self.prompt("Search by (id/price) [id]: ").strip().lower()

        if mode in ("", "id"):
            property_id = self.prompt_int("Enter property ID to search: ")
            record = self.store.find_by_id(property_id)
            if record is None:
                raise NotFoundError("Property not found.")
            self.console.echo(str(record))
        elif mode == "price":
            low = self.prompt_price("Enter minimum price: ")
            high = self.prompt_price("Enter maximum price: ")
            self.console.write_batch("search", self.store.find_by_price_range(low, high))
        else:
            raise InvalidActionError(f"Invalid search {mode!r}. Please enter either 'id' or 'price'.")

    def buy_or_sell_property(self) -> None:
        self.console.heading("Buy/Sell a Property")
        property_id = self.prompt_int("Enter property ID to buy/sell: ")
        action_text = self.prompt("Enter action (Buy/Sell): ")
        if self.store.find_by_id(property_id) is None:
            raise NotFoundError("Property not found.")

        action = TradeAction.parse(action_text)
        self.store.transact(property_id, action)
        self._persist()
        if action is TradeAction.BUY:
            self.console.success("Success: You have bought the property.")
        else:
            self.console.success("Success: You have sold the property.")

    def edit_or_delete_property(self) -> None:
        self.console.heading("Edit/Delete a Property")
        property_id = self.prompt_int("Enter property ID to edit/delete: ")
        action_text = self.prompt("Enter action (Edit/Delete): ")
        if self.store.find_by_id(property_id) is None:
            raise NotFoundError("Property not found.")

        action = EditAction.parse(action_text)
        if action is EditAction.EDIT:
            address = self.prompt("Enter new property address: ")
            price = self.prompt_price("Enter new property price: ")
            property_type = self.prompt("Enter new property type: ")
            category = self.prompt("Enter new property category: ")
            self.store.update(property_id, address, price, property_type, category)
            self._persist()
            self.console.success("Property updated successfully.")
        else:
            self.store.delete(property_id)
            self._persist()
            self.console.success("Property deleted successfully.")

    def remove_duplicates(self) -> None:
        self.console.heading("Remove Duplicate Properties")
        removed = self.store.remove_duplicates()
        self._persist()
        if removed:
            self.console.success(f"Removed {len(removed)} duplicate properties.")
        else:
            self.console.success("No duplicate properties found.")
