"""Configuration models and helpers."""

from __future__ import annotations

from .settings import (
    AccountCredential,
    AppSettings,
    AuthSettings,
    LayoutSettings,
    ServerSettings,
    StorageSettings,
    get_settings,
    parse_accounts,
)
from .theme import CategoryStyle, category_style, country_label, industry_label

__all__ = [
    "AccountCredential",
    "AppSettings",
    "AuthSettings",
    "CategoryStyle",
    "LayoutSettings",
    "ServerSettings",
    "StorageSettings",
    "category_style",
    "country_label",
    "get_settings",
    "industry_label",
    "parse_accounts",
]
