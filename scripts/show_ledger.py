#!/usr/bin/env python3
"""
Show Ledger Script.

Loads the stored ledger (optionally seeding an empty store with demo bets),
prints the bets with profit/loss and running totals, and the bank summary.
"""

import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse

from config import settings
from config.logging_config import bind_context, clear_context, get_logger, setup_logging
from bet_ledger.database import LedgerStore, StoreError, sample_bets
from bet_ledger.editor import SORTABLE_FIELDS, LedgerSession
from bet_ledger.reporting import report_generator

logger = get_logger(__name__)


async def main(
    starting_bank: float | None = None,
    seed: bool = False,
    sort_by: str | None = None,
    descending: bool = False,
    search: str | None = None,
    page: int = 1,
    page_size: int | None = None,
    output_file: str | None = None,
) -> int:
    """
    Load and print the ledger.

    Args:
        starting_bank: Bank before the first bet (default from settings)
        seed: Write demo bets if the store is empty
        sort_by: Field to sort the displayed rows by
        descending: Reverse the sort
        search: Only show bets matching this text
        page: Page number to show
        page_size: Rows per page
        output_file: Optional file path to save the report

    Returns:
        Process exit code
    """
    setup_logging(
        log_level=settings.log_level,
        log_file=settings.log_file,
        json_format=settings.log_json,
    )
    bind_context(command="show_ledger")

    store = LedgerStore()
    session = LedgerSession(store, starting_bank=starting_bank)

    try:
        notification = await session.load()
        if notification:
            print(notification.message)
            return 1

        if seed and not session.bets:
            try:
                await store.save_all(sample_bets())
            except StoreError as e:
                print(f"Could not seed ledger: {e}")
                return 1
            notification = await session.load()
            if notification:
                print(notification.message)
                return 1
            logger.info("Seeded empty ledger with demo bets", bets=len(session.bets))

        view = session.view(
            sort_by=sort_by,
            descending=descending,
            search=search,
            page=page,
            page_size=page_size,
        )
        table = report_generator.format_table(view.items)
        summary = report_generator.format_summary(session.stats())

        text = f"{table}\nPage {view.page} of {view.total_pages}\n\n{summary}"
        print("\n" + text + "\n")

        if output_file:
            output_path = Path(output_file)
            output_path.write_text(text, encoding="utf-8")
            logger.info("Report saved to file", path=str(output_path))

    finally:
        await store.close()
        clear_context()

    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Show the bet ledger")

    parser.add_argument(
        "--starting-bank",
        type=float,
        help=f"Starting bank (default {settings.ledger.starting_bank:g})",
    )

    parser.add_argument(
        "--seed",
        action="store_true",
        help="Populate an empty ledger with demo bets",
    )

    parser.add_argument(
        "--sort",
        choices=SORTABLE_FIELDS,
        help="Sort displayed rows by this field",
    )

    parser.add_argument(
        "--desc",
        action="store_true",
        help="Sort descending",
    )

    parser.add_argument(
        "--search",
        type=str,
        help="Filter by bookie, horse, trainer or jockey",
    )

    parser.add_argument("--page", type=int, default=1, help="Page to show")

    parser.add_argument("--page-size", type=int, help="Rows per page")

    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Save report to file",
    )

    args = parser.parse_args()

    sys.exit(
        asyncio.run(
            main(
                starting_bank=args.starting_bank,
                seed=args.seed,
                sort_by=args.sort,
                descending=args.desc,
                search=args.search,
                page=args.page,
                page_size=args.page_size,
                output_file=args.output,
            )
        )
    )
