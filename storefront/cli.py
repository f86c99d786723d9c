# storefront/cli.py
from __future__ import annotations

from .catalog import Category
from .config import load_settings
from .demo import run_demo
from .logger import get_logger, setup_logging

logger = get_logger(__name__)

def main(argv=None):
    import argparse
    ap = argparse.ArgumentParser(description="In-memory inventory and shopping cart demo")
    ap.add_argument("--config", default="store.yaml")
    ap.add_argument("--category", action="append", default=[],
                    choices=[c.value for c in Category],
                    help="print the listing for a category after the demo (repeatable)")
    ap.add_argument("--log-level", default=None)
    args = ap.parse_args(argv)

    settings = load_settings(args.config)
    if args.log_level:
        settings.log_level = args.log_level.upper()
    setup_logging(settings.log_level)

    inventory, _, results = run_demo(settings)
    logger.info("Demo finished: %d step(s), %d reported an error", len(results), results.count(False))

    for name in args.category:
        print()
        inventory.print_category(Category(name))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
