from __future__ import annotations

from typing import Optional

import bleach

ALLOWED_TAGS = bleach.sanitizer.ALLOWED_TAGS | {
    "p",
    "br",
    "u",
    "s",
    "h1",
    "h2",
    "h3",
}

ALLOWED_ATTRIBUTES = {
    **bleach.sanitizer.ALLOWED_ATTRIBUTES,
    "a": ["href", "title", "rel", "target"],
}


def sanitize_description(html: Optional[str]) -> Optional[str]:
    """Reduce rich-text event descriptions to an allow-listed HTML subset."""

    if html is None:
        return None
    cleaned = bleach.clean(html, tags=ALLOWED_TAGS, attributes=ALLOWED_ATTRIBUTES, strip=True).strip()
    return cleaned or None
