"""
Entry point that turns a request payload into a menu record.
"""
import logging
import os
import re
from datetime import date, datetime
from typing import Dict, Mapping, Optional

import requests

from .errors import DateParseError
from .model import ScrapeRequest
from .parser import ru_menu_retrieve
from .webpage import JARDIM_BOTANICO, REQUEST_DATE_FORMAT, RestaurantSite

logger = logging.getLogger(__name__)

_REQUEST_DATE_PATTERN = re.compile(r'\d{4}-\d{2}-\d{2}')

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def configure_logging(level: Optional[str] = None) -> None:
    """
    Set up root logging.

    The level comes from the argument, then $RU_MENU_LOG_LEVEL, then INFO. An
    unknown level name falls back to INFO with a warning.
    """
    requested = (level or os.getenv('RU_MENU_LOG_LEVEL') or 'INFO').upper()
    known = isinstance(logging.getLevelName(requested), int)
    logging.basicConfig(format=LOG_FORMAT, level=requested if known else 'INFO')
    if not known:
        logger.warning(f"Unknown log level {requested!r}, using INFO")


def parse_request_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a caller-supplied date.

    Parameters:
        value (str): A date in YYYY-MM-DD form, or None/"" for "not given"

    Returns:
        Optional[date]: The parsed date, or None when no date was given

    Raises:
        DateParseError: When the value is not exactly YYYY-MM-DD or not a real date
    """
    if not value:
        return None
    if not isinstance(value, str) or not _REQUEST_DATE_PATTERN.fullmatch(value):
        raise DateParseError(str(value))
    try:
        return datetime.strptime(value, REQUEST_DATE_FORMAT).date()
    except ValueError as e:
        raise DateParseError(value) from e


def build_scrape_request(event: Mapping) -> ScrapeRequest:
    raw_date = event.get('date') if event else None
    target_date = parse_request_date(raw_date)
    if target_date is None:
        logger.info("No date provided, using today's date")
    else:
        logger.info(f"Received date: {raw_date}")
    return ScrapeRequest(target_date=target_date)


def handler(
    event: Optional[Mapping] = None,
    site: RestaurantSite = JARDIM_BOTANICO,
    session: Optional[requests.Session] = None,
) -> Dict:
    """
    Handle one menu request.

    Parameters:
        event (Mapping): Request payload, e.g. {"date": "2024-03-25"}; the date
                         is optional and defaults to today
        site (RestaurantSite): Which RU page to read
        session (requests.Session): Optional HTTP session for the fetch

    Returns:
        Dict: The menu record as produced by MenuResult.to_dict()

    Raises:
        DateParseError: Bad date in the payload; nothing is fetched
        FetchError: The menu page could not be downloaded
    """
    request = build_scrape_request(event or {})
    target_date = request.resolve_date()
    logger.info(f"Scraping menu for {target_date.isoformat()}")
    result = ru_menu_retrieve(target_date, site=site, session=session)
    return result.to_dict()
