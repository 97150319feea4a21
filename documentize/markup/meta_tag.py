"""Locating the marker ``<meta>`` tag inside component markup."""

from __future__ import annotations

import re
from typing import List, Optional

from ..errors import AmbiguousMetaError
from ..models import MetaTag
from .attributes import parse_attributes

_META_PATTERN = re.compile(r"<meta\b(?P<attributes>[^>]*)>", re.IGNORECASE)


def locate_meta_tag(content: str, marker: str) -> Optional[MetaTag]:
    """Return the single ``<meta>`` tag carrying ``marker``, or ``None``.

    This is a text scan rather than a markup parse: attribute values
    containing ``>`` are not supported.

    Raises:
        AmbiguousMetaError: when more than one tag carries the marker.
    """
    marker_pattern = re.compile(rf"(?<![\w-]){re.escape(marker)}(?![\w-])")
    found: List[MetaTag] = []
    for match in _META_PATTERN.finditer(content):
        raw = match.group("attributes")
        if not marker_pattern.search(raw):
            continue
        attributes = parse_attributes(raw)
        if not any(attribute.name == marker for attribute in attributes):
            # Marker text only appears inside another attribute's value.
            continue
        found.append(
            MetaTag(
                attributes=tuple(attributes),
                pattern=re.compile(re.escape(match.group(0))),
            )
        )

    if len(found) > 1:
        raise AmbiguousMetaError(marker, len(found))
    return found[0] if found else None


__all__ = ["locate_meta_tag"]
