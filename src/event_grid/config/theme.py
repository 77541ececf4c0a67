from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..domain import Country, EventCategory, Industry


@dataclass(frozen=True)
class CategoryStyle:
    label: str
    background: str
    text: str
    border: str


# Every member must appear in these tables; tests check they stay total.
CATEGORY_STYLES: Dict[EventCategory, CategoryStyle] = {
    EventCategory.INTERNAL: CategoryStyle(
        label="Internal activity",
        background="#fef9c3",
        text="#854d0e",
        border="#fef08a",
    ),
    EventCategory.EXTERNAL: CategoryStyle(
        label="External activity",
        background="#fce7f3",
        text="#9d174d",
        border="#fbcfe8",
    ),
    EventCategory.FOREIGN: CategoryStyle(
        label="Foreign activity",
        background="#f3f4f6",
        text="#1f2937",
        border="#e5e7eb",
    ),
}

INDUSTRY_LABELS: Dict[Industry, str] = {
    Industry.CROSS_INDUSTRY: "Cross-industry",
    Industry.PHARMA: "Pharma",
    Industry.AGRO: "Agro",
    Industry.IT: "IT",
    Industry.INDUSTRIAL: "Industrial",
    Industry.RETAIL: "Retail",
}

COUNTRY_LABELS: Dict[Country, str] = {
    Country.USA: "USA",
    Country.UK: "United Kingdom",
    Country.EU: "European Union",
    Country.GERMANY: "Germany",
    Country.JAPAN: "Japan",
    Country.INDIA: "India",
    Country.BRAZIL: "Brazil",
    Country.CHINA: "China",
}


def category_style(category: EventCategory) -> CategoryStyle:
    return CATEGORY_STYLES[EventCategory(category)]


def industry_label(industry: Industry) -> str:
    return INDUSTRY_LABELS[Industry(industry)]


def country_label(country: Optional[Country]) -> Optional[str]:
    if country is None:
        return None
    return COUNTRY_LABELS[Country(country)]
