import logging
import re
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

import requests
from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from .errors import FetchError, MarkupParseError
from .model import MealItem, MealPeriod, MenuResult, create_menu_result
from .webpage import (
    BROWSER_HEADERS,
    FETCH_TIMEOUT,
    JARDIM_BOTANICO,
    RestaurantSite,
    ru_menu_date_label,
)

logger = logging.getLogger(__name__)

_LINE_BREAK = re.compile(r'<br\b[^>]*>', re.IGNORECASE)


# =============================================================================
# HTTP FETCH
# =============================================================================

def _build_http_session() -> requests.Session:
    session = requests.Session()
    session.headers.update(BROWSER_HEADERS)
    return session


def fetch_menu_page(url: str, session: Optional[requests.Session] = None) -> str:
    """
    Download the menu page with a single GET request.

    Parameters:
        url (str): The menu page URL
        session (requests.Session): Optional session to reuse; a short-lived one
                                    with browser-like headers is opened otherwise

    Returns:
        str: The decoded HTML of the page

    Raises:
        FetchError: On timeout, connection failure or a non-2xx status
    """
    owns_session = session is None
    if owns_session:
        session = _build_http_session()

    logger.info(f"Visiting: {url}")
    try:
        response = session.get(url, timeout=FETCH_TIMEOUT, allow_redirects=True)
    except requests.Timeout as e:
        logger.error(f"Request to {url} timed out after {FETCH_TIMEOUT}s")
        raise FetchError(f"Timed out after {FETCH_TIMEOUT}s fetching {url}", url) from e
    except requests.RequestException as e:
        logger.error(f"Request to {url} failed: {e}")
        raise FetchError(f"Failed to fetch URL: {e}", url) from e
    finally:
        if owns_session:
            session.close()

    logger.info(f"Response received from {url} with status code {response.status_code}")
    if not 200 <= response.status_code < 300:
        raise FetchError(
            f"Unexpected status code {response.status_code} from {url}",
            url,
            status_code=response.status_code,
        )

    # requests assumes ISO-8859-1 for text/* without a declared charset
    if 'charset' not in response.headers.get('Content-Type', '').lower():
        response.encoding = response.apparent_encoding
    return response.text


# =============================================================================
# MEAL ITEM PARSER
# =============================================================================

def _parse_fragment(fragment: str) -> Optional[MealItem]:
    """Turn one line of a content cell into a MealItem, or None if it has no text"""
    try:
        soup = BeautifulSoup(fragment, 'html.parser')
    except ParserRejectedMarkup as e:
        raise MarkupParseError(fragment, str(e)) from e

    icons = [img['src'] for img in soup.find_all('img') if img.has_attr('src')]
    name = soup.get_text().strip()
    if not name:
        return None
    return MealItem(name=name, icons=icons)


def parse_meal_items(cell_markup: str) -> List[MealItem]:
    """
    Split a content cell's inner HTML into meal items.

    Each <br>-separated fragment becomes at most one item: its visible text is
    the name and the src of every <img> inside it, in order, are the icons.
    Fragments without text (blank lines, icon-only lines) are dropped.

    Parameters:
        cell_markup (str): Inner HTML of a <td>

    Returns:
        List[MealItem]: Items in the order they appear in the cell
    """
    items = []
    for fragment in _LINE_BREAK.split(cell_markup):
        if not fragment.strip():
            continue
        try:
            item = _parse_fragment(fragment)
        except MarkupParseError as e:
            logger.warning(f"Skipping meal fragment: {e}")
            continue
        if item is not None:
            logger.debug(f"Meal parsed: {item.name}")
            items.append(item)
    return items


# =============================================================================
# SECTION EXTRACTOR
# =============================================================================

class ExtractionState(Enum):
    SEEKING_DATE = "seeking_date"
    SEEKING_TABLE = "seeking_table"
    IN_TABLE = "in_table"


def _is_date_node(tag: Tag) -> bool:
    return tag.name == 'strong'


def _is_table_block(tag: Tag) -> bool:
    return tag.name == 'figure' and 'wp-block-table' in (tag.get('class') or [])


def _is_section_node(tag: Tag) -> bool:
    return _is_date_node(tag) or _is_table_block(tag)


def next_extraction_state(state: ExtractionState, node: Tag, date_label: str) -> ExtractionState:
    """
    Advance the document walk by one node.

    Only <strong> nodes are looked at while seeking the date and only
    wp-block-table figures while seeking the table; IN_TABLE is terminal.
    The date check is a substring test, so "25/03/24" also matches a label
    such as "25/03/245".
    """
    if state is ExtractionState.SEEKING_DATE and _is_date_node(node):
        text = node.get_text().strip()
        logger.debug(f"Found date: {text}")
        if date_label in text:
            logger.info(f"Matching date found: {date_label}")
            return ExtractionState.SEEKING_TABLE
    elif state is ExtractionState.SEEKING_TABLE and _is_table_block(node):
        logger.info("Found the table after matching date.")
        return ExtractionState.IN_TABLE
    return state


def find_menu_table(soup: BeautifulSoup, target_date: date) -> Optional[Tag]:
    """Return the first table block following the target date's label, if any"""
    date_label = ru_menu_date_label(target_date)
    state = ExtractionState.SEEKING_DATE

    for node in soup.find_all(_is_section_node):
        state = next_extraction_state(state, node, date_label)
        if state is ExtractionState.IN_TABLE:
            return node

    if state is ExtractionState.SEEKING_DATE:
        logger.info(f"No section labelled {date_label} on the page")
    else:
        logger.info(f"Section {date_label} found but no menu table follows it")
    return None


class _MealSectionBuilder:
    """Collects items under the meal period opened by the latest marker cell."""

    def __init__(self):
        self.meals: Dict[MealPeriod, List[MealItem]] = {}
        self.current_period: Optional[MealPeriod] = None
        self.pending: List[MealItem] = []

    def start_period(self, period: MealPeriod) -> None:
        self._commit()
        self.current_period = period
        logger.info(f"Current meal type: {period.value}")

    def add(self, items: List[MealItem]) -> None:
        self.pending.extend(items)

    def finish(self) -> Dict[MealPeriod, List[MealItem]]:
        self._commit()
        return self.meals

    def _commit(self) -> None:
        if not self.pending:
            return
        if self.current_period is None:
            logger.warning(f"Discarding {len(self.pending)} meals listed before any meal period marker")
        else:
            logger.info(f"Saving {len(self.pending)} meals for: {self.current_period.value}")
            self.meals[self.current_period] = self.pending
        self.pending = []


def extract_meals(html: str, target_date: date) -> Dict[MealPeriod, List[MealItem]]:
    """
    Extract the meals published for one date from the menu page.

    Parameters:
        html (str): Full HTML of the menu page
        target_date (date): The day to extract

    Returns:
        Dict[MealPeriod, List[MealItem]]: Items per period in page order; empty
                                          when the page has no menu for that day
    """
    soup = BeautifulSoup(html, 'html.parser')
    table = find_menu_table(soup, target_date)
    if table is None:
        return {}

    builder = _MealSectionBuilder()
    for row in table.find_all('tr'):
        for cell in row.find_all('td'):
            period = MealPeriod.from_cell_text(cell.get_text())
            if period is not None:
                builder.start_period(period)
                continue

            items = parse_meal_items(cell.decode_contents())
            if items:
                logger.debug(f"Extracted {len(items)} meals")
                builder.add(items)

    return builder.finish()


# =============================================================================
# MENU RETRIEVAL
# =============================================================================

def ru_menu_parse(html: str, target_date: date, site: RestaurantSite = JARDIM_BOTANICO) -> MenuResult:
    """Build the menu record for target_date from already-fetched HTML"""
    meals = extract_meals(html, target_date)
    return create_menu_result(target_date, meals, site)


def ru_menu_retrieve(
    target_date: date,
    site: RestaurantSite = JARDIM_BOTANICO,
    session: Optional[requests.Session] = None,
) -> MenuResult:
    """
    Fetch the RU menu page and extract the menu for one date.

    Parameters:
        target_date (date): The day to extract
        site (RestaurantSite): Which RU page to read (default: Jardim Botânico)
        session (requests.Session): Optional session used for the single GET

    Returns:
        MenuResult: The menu record; its meals are empty when the page has
                    nothing for that date

    Raises:
        FetchError: When the page cannot be downloaded
    """
    logger.info(f"Starting to scrape the page: {site.url}")
    html = fetch_menu_page(site.url, session=session)
    result = ru_menu_parse(html, target_date, site)
    logger.info(f"Successfully scraped menu for {result.date} ({len(result.meals)} meal periods)")
    return result
