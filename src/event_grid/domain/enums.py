from __future__ import annotations

from enum import Enum


class EventCategory(str, Enum):
    INTERNAL = "internal"
    EXTERNAL = "external"
    FOREIGN = "foreign"


class Industry(str, Enum):
    CROSS_INDUSTRY = "cross_industry"
    PHARMA = "pharma"
    AGRO = "agro"
    IT = "it"
    INDUSTRIAL = "industrial"
    RETAIL = "retail"


class Country(str, Enum):
    USA = "usa"
    UK = "uk"
    EU = "eu"
    GERMANY = "germany"
    JAPAN = "japan"
    INDIA = "india"
    BRAZIL = "brazil"
    CHINA = "china"
