"""Main Textual app class."""

from __future__ import annotations

from functools import partial
from pathlib import Path

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from restaurant_billing.catalog import Catalog
from restaurant_billing.confirm_modal import ConfirmModal
from restaurant_billing.errors import InvalidQuantity
from restaurant_billing.logging_setup import get_logger
from restaurant_billing.models import MenuItem
from restaurant_billing.order import Order
from restaurant_billing.parsing import parse_int, parse_price, parse_text
from restaurant_billing.prompt_modal import PromptModal, digits_only, price_chars
from restaurant_billing.rendering import format_menu_listing, format_order_lines
from restaurant_billing.session import CheckoutResult, checkout

logger = get_logger(__name__)

MAIN_MENU_HELP = "1 View Menu  2 Place Order  3 Admin - Add Menu Item  4 Admin - Remove Menu Item  5 Exit"


class BillingApp(App):
    """A Textual app for taking restaurant orders and printing bills."""

    TITLE = "Simple Restaurant Billing"
    SUB_TITLE = "Menu / Orders / Receipts"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #menu-pane {
        width: 2fr;
        border: round $primary;
        padding: 1;
    }

    #order-pane {
        width: 3fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        height: 4;
    }

    #menu-list, #order-body {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, catalog: Catalog, tax_rate_percent: float, receipt_dir: Path | str) -> None:
        super().__init__()
        self.catalog = catalog
        self.tax_rate_percent = tax_rate_percent
        self.receipt_dir = Path(receipt_dir)
        self.current_order: Order | None = None
        self.last_checkout: CheckoutResult | None = None
        self.system_status = "Welcome to Simple Restaurant Billing System"

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="menu-pane"):
                yield Static("Menu", classes="pane-title")
                yield Static(id="menu-list")
            with Vertical(id="order-pane"):
                yield Static("Current Order", id="order-title", classes="pane-title")
                yield Static(id="order-body")
        yield Static(id="status-bar")

    def on_mount(self) -> None:
        logger.info(
            "app_mount items=%d tax_rate=%s receipt_dir=%s",
            len(self.catalog),
            self.tax_rate_percent,
            self.receipt_dir,
        )
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        # While a modal is active, let the modal own keyboard handling.
        if isinstance(self.screen, ModalScreen):
            return

        if not event.is_printable or not event.character:
            return

        choice = event.character
        if choice == "1":
            self.action_view_menu()
        elif choice == "2":
            self.action_place_order()
        elif choice == "3":
            self.action_add_menu_item()
        elif choice == "4":
            self.action_remove_menu_item()
        elif choice == "5":
            self.action_exit_app()
        else:
            self._set_status("Invalid choice. Try again.")
        event.stop()

    def action_view_menu(self) -> None:
        self.current_order = None
        self.last_checkout = None
        self._refresh_all()
        self._set_status(f"Showing {len(self.catalog)} menu items.")

    def action_exit_app(self) -> None:
        logger.info("app_exit")
        self.exit(return_code=0, message="Thank you! Exiting...")

    def action_place_order(self) -> None:
        if self.catalog.is_empty():
            self._set_status("Menu is empty. Ask admin to add items.")
            return

        self.current_order = Order()
        self.last_checkout = None
        self._refresh_order()
        self._prompt_menu_id()

    def _prompt_menu_id(self) -> None:
        self.push_screen(
            PromptModal(
                "Place Order",
                "Enter Menu ID to add to order (0 to finish)",
                parse_int,
                accept_char=digits_only,
                max_length=6,
            ),
            callback=self._on_menu_id,
        )

    def _on_menu_id(self, menu_id: int | None) -> None:
        if menu_id is None or menu_id == 0:
            self._finish_order()
            return

        item = self.catalog.find_by_id(menu_id)
        if item is None:
            self._set_status("Invalid Menu ID. Try again.")
            self._prompt_menu_id()
            return

        self.push_screen(
            PromptModal(
                "Place Order",
                f"Enter quantity for {item.name}",
                parse_int,
                accept_char=digits_only,
                max_length=6,
            ),
            callback=partial(self._on_quantity, item),
        )

    def _on_quantity(self, item: MenuItem, quantity: int | None) -> None:
        if self.current_order is None:
            return
        if quantity is None:
            self._prompt_menu_id()
            return

        try:
            self.current_order.add_item(item, quantity)
        except InvalidQuantity:
            self._set_status("Quantity must be >= 1")
            self._prompt_menu_id()
            return

        self._set_status(f"Added: {item.name} x{quantity}")
        self._refresh_order()
        self.push_screen(ConfirmModal("Add more? (y/n)"), callback=self._on_add_more)

    def _on_add_more(self, more: bool | None) -> None:
        if more:
            self._prompt_menu_id()
            return
        self._finish_order()

    def _finish_order(self) -> None:
        order = self.current_order
        self.current_order = None
        if order is None or order.is_empty():
            self._set_status("No items ordered.")
            self._refresh_order()
            return

        result = checkout(order, self.tax_rate_percent, self.receipt_dir)
        self.last_checkout = result
        self._refresh_order()
        if result is None:
            return
        if result.saved:
            self._set_status(f"Receipt saved to {result.saved_path}")
        else:
            self._set_status(f"Could not save receipt: {result.error}")

    def action_add_menu_item(self) -> None:
        self.push_screen(
            PromptModal("Admin - Add Menu Item", "Enter item name", parse_text),
            callback=self._on_new_item_name,
        )

    def _on_new_item_name(self, name: str | None) -> None:
        if name is None:
            self._set_status("Add item cancelled.")
            return
        self.push_screen(
            PromptModal(
                "Admin - Add Menu Item",
                f"Enter price (Rs) for {name}",
                parse_price,
                accept_char=price_chars,
                max_length=12,
            ),
            callback=partial(self._on_new_item_price, name),
        )

    def _on_new_item_price(self, name: str, price: float | None) -> None:
        if price is None:
            self._set_status("Add item cancelled.")
            return
        item = self.catalog.add(name, price)
        self._refresh_menu()
        self._set_status(f"Item added with ID {item.id}")

    def action_remove_menu_item(self) -> None:
        self.push_screen(
            PromptModal(
                "Admin - Remove Menu Item",
                "Enter Menu ID to remove",
                parse_int,
                accept_char=digits_only,
                max_length=6,
            ),
            callback=self._on_remove_id,
        )

    def _on_remove_id(self, menu_id: int | None) -> None:
        if menu_id is None:
            self._set_status("Remove item cancelled.")
            return
        if self.catalog.remove_by_id(menu_id):
            self._set_status("Item removed.")
        else:
            self._set_status("Item id not found.")
        self._refresh_menu()

    def _set_status(self, message: str) -> None:
        self.system_status = message
        logger.debug("status %s", message)
        self._refresh_status()

    def _refresh_all(self) -> None:
        self._refresh_menu()
        self._refresh_order()
        self._refresh_status()

    def _refresh_menu(self) -> None:
        try:
            menu_widget = self.query_one("#menu-list", Static)
        except NoMatches:
            return
        menu_widget.update(format_menu_listing(self.catalog.items()))

    def _refresh_order(self) -> None:
        try:
            title_widget = self.query_one("#order-title", Static)
            body_widget = self.query_one("#order-body", Static)
        except NoMatches:
            return

        if self.current_order is not None:
            title_widget.update("Current Order")
            body_widget.update(format_order_lines(self.current_order))
            return

        if self.last_checkout is not None:
            title_widget.update("Receipt")
            body_widget.update(Text(self.last_checkout.receipt_text))
            return

        title_widget.update("Current Order")
        body_widget.update(Text("Press 2 to place an order.", style="dim"))

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        bar.update(f"{MAIN_MENU_HELP}\n{self.system_status}")
