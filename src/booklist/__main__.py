"""CLI for booklist. Usage: python -m booklist [-h] [-d] config_file"""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger("booklist")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="booklist",
        description=(
            "Search a public library's catalog website for this year's "
            "publications from authors listed in the given config file."
        ),
    )
    parser.add_argument(
        "config_file",
        nargs="?",
        help="Config file containing catalog url and list of authors",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Print debug information to stderr",
    )
    return parser


def _init_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(levelname)-5s %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: list[str] | None = None) -> int:
    from booklist.catalog import CatalogError, CatalogSearch, CatalogTransport
    from booklist.config import ConfigError, load_config, load_settings
    from booklist.report import format_report

    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.config_file is None:
        parser.print_usage(sys.stderr)
        print("ERROR: config filename is required argument.", file=sys.stderr)
        return 1

    try:
        settings = load_settings()
    except ConfigError as e:
        _init_logging("ERROR")
        logger.error("%s", e)
        return 1

    _init_logging("DEBUG" if args.debug else settings.log_level)

    try:
        config = load_config(args.config_file)
    except ConfigError as e:
        logger.error("%s", e)
        return 1
    logger.debug("Config:\n%s", config)

    failures = 0
    with CatalogTransport(timeout_s=settings.timeout_s) as transport:
        searcher = CatalogSearch(transport)
        for query in config.queries():
            try:
                results = searcher.search(query)
            except CatalogError as e:
                failures += 1
                logger.error("Search for '%s' failed: %s", query.author, e)
                continue
            print(format_report(query, results))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
