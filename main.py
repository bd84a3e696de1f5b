"""Hotels of Athens — static site pipeline.

Usage:
    python main.py                  # Seed the data store, then generate the site
    python main.py generate         # Generate dist/ from the existing data store
    python main.py fetch            # Rewrite data/hotels/*.json and data/all-hotels.json
    python main.py fetch --live     # Also search the web for uncurated hotels
    python main.py generate --output-dir public
"""

import argparse
import logging
import sys
from datetime import date

from builder.assembler import generate_site
from config.settings import Settings
from exceptions.custom import SiteError
from fetchers.pipeline import run_discovery, run_fetch
from store.loader import load_snapshot

logger = logging.getLogger("hotels_of_athens")

EXIT_OK = 0

STEPS = ("fetch", "generate", "all")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main(
    step: str = "all",
    live: bool = False,
    settings: Settings | None = None,
    today: date | None = None,
) -> int:
    """Run the requested step(s) and return a process exit code.

    0 on success, 2 for bad input data, 3 when output cannot be written,
    4 when live discovery cannot reach its services.
    """
    settings = settings or Settings()
    setup_logging(settings.log_level)

    try:
        if step in ("fetch", "all"):
            index = run_fetch(settings, today=today)
            if live:
                run_discovery(settings, index)

        if step in ("generate", "all"):
            snapshot = load_snapshot(settings.data_dir)
            report = generate_site(snapshot, settings, build_date=today)
            logger.info(
                f"Wrote {len(report.files_written)} files to {report.output_dir}"
            )
    except SiteError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return e.exit_code

    return EXIT_OK


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Hotels of Athens site generator")
    parser.add_argument(
        "step",
        nargs="?",
        choices=STEPS,
        default="all",
        help="Pipeline step to run (default: all)",
    )
    parser.add_argument(
        "--live",
        action="store_true",
        help="During fetch, search the web for hotels missing from the seed data",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Data store directory (overrides DATA_DIR)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Output directory for the generated site (overrides OUTPUT_DIR)",
    )
    args = parser.parse_args()

    overrides = {}
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    sys.exit(main(step=args.step, live=args.live, settings=Settings(**overrides)))
