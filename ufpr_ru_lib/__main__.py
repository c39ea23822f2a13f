"""
Command-line access to the RU menu: python -m ufpr_ru_lib --date 2024-03-25
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from .errors import DateParseError, FetchError
from .handler import LOG_LEVELS, configure_logging, handler

logger = logging.getLogger(__name__)


def _format_json_output(data: dict, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='ufpr-ru-menu',
        description='Fetch the UFPR RU Jardim Botânico menu for one day and print it as JSON',
    )
    parser.add_argument(
        '--date',
        type=str,
        help='Date to fetch (YYYY-MM-DD), defaults to today',
    )
    parser.add_argument(
        '--log-level',
        type=str.upper,
        choices=LOG_LEVELS,
        help='Logging level (default: $RU_MENU_LOG_LEVEL or INFO)',
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        result = handler({'date': args.date})
    except (DateParseError, FetchError) as e:
        logger.error(f"Error scraping menu: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(_format_json_output(result))
    return 0


if __name__ == '__main__':
    sys.exit(main())
