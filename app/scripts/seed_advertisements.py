from __future__ import annotations

import argparse
import logging

from app.core.logging import configure_logging
from app.core.settings import get_settings
from app.db import bootstrap

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Create the advertisements table and insert baseline rows."
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="Override DATABASE_URL for this run.",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_logging(settings)

    inserted = bootstrap(args.database_url)
    logger.info("Seed finished. inserted=%d", inserted)


if __name__ == "__main__":
    main()
