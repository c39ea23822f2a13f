"""
UFPR RU (Restaurante Universitário) Menu Parser

A Python package for retrieving the UFPR Jardim Botânico cafeteria menu and
parsing one day of it into meals grouped by breakfast, lunch and dinner.
"""

from .parser import (
    ru_menu_retrieve,
    ru_menu_parse,
    extract_meals,
    parse_meal_items,
    fetch_menu_page,
)
from .webpage import JARDIM_BOTANICO, RestaurantSite, ru_menu_date_label
from .model import MealItem, MealPeriod, MenuResult, ScrapeRequest, create_menu_result
from .errors import RuMenuError, DateParseError, FetchError, MarkupParseError
from .handler import handler, parse_request_date


__version__ = "0.1.0"
__author__ = "UFPR RU Parser Team"

__all__ = [
    "ru_menu_retrieve",
    "ru_menu_parse",
    "extract_meals",
    "parse_meal_items",
    "fetch_menu_page",
    "JARDIM_BOTANICO",
    "RestaurantSite",
    "ru_menu_date_label",
    "MealItem",
    "MealPeriod",
    "MenuResult",
    "ScrapeRequest",
    "create_menu_result",
    "RuMenuError",
    "DateParseError",
    "FetchError",
    "MarkupParseError",
    "handler",
    "parse_request_date",
]
