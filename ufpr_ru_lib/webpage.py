from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class RestaurantSite:
    """Fixed metadata describing one RU (university restaurant) menu page."""
    name: str
    url: str
    code: str


JARDIM_BOTANICO = RestaurantSite(
    name="JARDIM BOTÂNICO",
    url="https://pra.ufpr.br/ru/cardapio-ru-jardim-botanico/",
    code="BOT",
)

FETCH_TIMEOUT = 15  # seconds

USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/92.0.4515.107 Safari/537.36"
)

BROWSER_HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,image/webp,*/*;q=0.8',
    'Accept-Language': 'pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7',
    'Connection': 'keep-alive',
    'Upgrade-Insecure-Requests': '1',
}

# Labels published on the page, e.g. "Segunda-feira 25/03/24"
DATE_LABEL_FORMAT = "%d/%m/%y"

# Format accepted from callers
REQUEST_DATE_FORMAT = "%Y-%m-%d"


def ru_menu_date_label(dt: date) -> str:
    """
    Format a date the way the menu page labels its daily sections.

    Parameters:
        dt (date): The date (datetime.date object).

    Returns:
        str: The date as DD/MM/YY, e.g. "25/03/24".
    """
    return dt.strftime(DATE_LABEL_FORMAT)
