"""
Interactive storefront search harness.

Usage:
  python -m storefront.main

Edits go straight to the stored filter; nothing is searched until /submit.
"""

from __future__ import annotations

import asyncio
import logging

from storefront.application.use_cases.search_controller import SearchController
from storefront.core.config import settings
from storefront.domain.entities.filter_state import ALL_CATEGORIES
from storefront.infrastructure.console.console_view import ConsoleItemList, ConsoleNotifier
from storefront.infrastructure.marketplace.http_client import MarketplaceHttpClient
from storefront.wiring.dependencies import get_marketplace, get_search_controller

HELP = """Commands:
  /category <id|all>   select a category
  /keyword [text]      set the keyword (empty clears it)
  /min <price>         set the minimum price
  /max <price>         set the maximum price
  /soldout             toggle including sold-out items
  /submit              run the search
  /filter              show the current filter
  /categories          list selectable categories
  /help, /quit"""


class ContextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        extras = []
        for key in ("status", "submission", "category", "keyword", "query", "count", "reason"):
            value = getattr(record, key, None)
            if value not in (None, ""):
                extras.append(f"{key}={value}")
        base = super().format(record)
        if extras:
            return f"{base} | " + " ".join(extras)
        return base


def configure_logging() -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(ContextFormatter("%(levelname)s:%(name)s:%(message)s"))

    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)


def _print_filter(controller: SearchController) -> None:
    state = controller.state
    category = "all" if state.is_all_categories else state.category
    print(
        f"category={category} keyword={state.keyword!r} "
        f"price={state.price_min}-{state.price_max} "
        f"include_soldout={str(state.include_sold_out).lower()}"
    )


def _parse_int(raw: str) -> int | None:
    try:
        return int(raw.strip())
    except ValueError:
        print(f"Not a number: {raw!r}")
        return None


async def handle_command(controller: SearchController, line: str) -> bool:
    """Apply one command line. Returns False when the session should end.

    Everything after the first space following the command word is the
    argument, kept as typed.
    """
    command, _, arg = line.lstrip().partition(" ")
    command = command.lower()

    if command in {"/quit", "/exit"}:
        return False
    if command == "/help":
        print(HELP)
    elif command == "/category":
        if arg.strip().lower() in {"", "all"}:
            controller.set_category(ALL_CATEGORIES)
        else:
            value = _parse_int(arg)
            if value is not None:
                controller.set_category(value)
        _print_filter(controller)
    elif command == "/keyword":
        controller.set_keyword(arg)
        _print_filter(controller)
    elif command in {"/min", "/max"}:
        value = _parse_int(arg)
        if value is not None:
            if command == "/min":
                controller.set_price_min(value)
            else:
                controller.set_price_max(value)
        _print_filter(controller)
    elif command == "/soldout":
        controller.toggle_include_sold_out()
        _print_filter(controller)
    elif command == "/submit":
        await controller.submit()
    elif command == "/filter":
        _print_filter(controller)
    elif command == "/categories":
        for category in controller.categories:
            print(f"  {category.id:>3}  {category.name}")
    else:
        print("Unknown command. Type /help.")
    return True


async def main() -> None:
    configure_logging()
    controller = get_search_controller(item_list=ConsoleItemList(), notifier=ConsoleNotifier())
    await controller.start()
    _print_filter(controller)
    print("Type /help for commands.")

    while True:
        try:
            line = input("search> ")
        except (KeyboardInterrupt, EOFError):
            print("\nExiting.")
            break

        if not line.strip():
            continue
        if not await handle_command(controller, line):
            break

    marketplace = get_marketplace()
    if isinstance(marketplace, MarketplaceHttpClient):
        await marketplace.aclose()


def _run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    _run()
