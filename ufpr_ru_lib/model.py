from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from .webpage import JARDIM_BOTANICO, RestaurantSite, ru_menu_date_label


class MealPeriod(str, Enum):
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @property
    def marker(self) -> str:
        """Uppercase phrase the menu table uses to open this period's block."""
        return _PERIOD_MARKERS[self]

    @classmethod
    def from_cell_text(cls, text: str) -> Optional["MealPeriod"]:
        """
        Classify a table cell by its text.

        Returns the period whose marker phrase the text contains (case-sensitive),
        or None when the cell is not a marker cell.
        """
        for period in cls:
            if period.marker in text:
                return period
        return None


_PERIOD_MARKERS = {
    MealPeriod.BREAKFAST: "CAFÉ DA MANHÃ",
    MealPeriod.LUNCH: "ALMOÇO",
    MealPeriod.DINNER: "JANTAR",
}

SERVED_PERIODS = [MealPeriod.BREAKFAST, MealPeriod.LUNCH, MealPeriod.DINNER]


@dataclass
class MealItem:
    """A single dish listed on the menu, with the icons drawn next to it."""
    name: str
    icons: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {"name": self.name, "icons": list(self.icons)}


@dataclass
class ScrapeRequest:
    target_date: Optional[date] = None

    def resolve_date(self) -> date:
        """Return the requested date, or today when none was given."""
        return self.target_date if self.target_date is not None else date.today()


@dataclass
class MenuResult:
    date: str
    ru_name: str
    ru_url: str
    ru_code: str
    served: List[MealPeriod] = field(default_factory=lambda: list(SERVED_PERIODS))
    meals: Dict[MealPeriod, List[MealItem]] = field(default_factory=dict)
    img_menu: Optional[str] = None

    def to_dict(self) -> Dict:
        """
        Serialize into the public response shape.

        Returns:
            Dict: JSON-ready record with camelCase keys; "meals" only holds
                  the periods that were found on the page, in page order.
        """
        return {
            "date": self.date,
            "imgMenu": self.img_menu,
            "ruName": self.ru_name,
            "ruUrl": self.ru_url,
            "ruCode": self.ru_code,
            "served": [period.value for period in self.served],
            "meals": {
                period.value: [item.to_dict() for item in items]
                for period, items in self.meals.items()
            },
        }


def create_menu_result(
    target_date: date,
    meals: Dict[MealPeriod, List[MealItem]],
    site: RestaurantSite = JARDIM_BOTANICO,
) -> MenuResult:
    """
    Assemble the final menu record for one date.

    Parameters:
        target_date (date): The date the menu was extracted for
        meals (Dict): Items grouped by meal period, in the order they were found
        site (RestaurantSite): Metadata stamped onto the record

    Returns:
        MenuResult: The assembled record
    """
    return MenuResult(
        date=ru_menu_date_label(target_date),
        ru_name=site.name,
        ru_url=site.url,
        ru_code=site.code,
        meals={period: list(items) for period, items in meals.items()},
    )
