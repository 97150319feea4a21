"""Parsing of raw tag attribute strings."""

from __future__ import annotations

import re
from typing import List

from ..errors import DuplicateAttributeError
from ..models import Attribute

# `name`, optionally followed by `='single'` or `="double"` quoted value.
_ATTRIBUTE_PATTERN = re.compile(
    r"(?P<name>[a-zA-Z_-][a-zA-Z0-9_-]*)(?:=(?:'(?P<single>.*?)'|\"(?P<double>.*?)\"))?",
    re.DOTALL,
)


def parse_attributes(raw: str, default: str = "") -> List[Attribute]:
    """Parse ``raw`` into attributes, preserving source order.

    Attributes without a value (or with an empty one) receive ``default``.
    Quoted values are returned verbatim, without entity decoding.

    Raises:
        DuplicateAttributeError: when the same attribute name appears twice.
    """
    attributes: List[Attribute] = []
    seen = set()
    for match in _ATTRIBUTE_PATTERN.finditer(raw):
        name = match.group("name")
        if name in seen:
            raise DuplicateAttributeError(name)
        seen.add(name)
        value = match.group("single") or match.group("double") or default
        attributes.append(Attribute(name=name, value=value))
    return attributes


__all__ = ["parse_attributes"]
