"""
Helpers for reading upstream response bodies.

Each helper returns None instead of raising when the body is missing or
malformed; providers turn that into the right `NoResult` message.
"""

import json
from typing import Any, Dict, Optional
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException


def load_json(content: Optional[str]) -> Any:
    """Decode a JSON body, or return None if it is empty or invalid."""
    if not content or not content.strip():
        return None
    try:
        return json.loads(content)
    except ValueError:
        return None


def load_xml(content: Optional[str]) -> Optional[Element]:
    """Parse an XML body with entity expansion disabled, or return None."""
    if not content or not content.strip():
        return None
    try:
        return ET.fromstring(content)
    except (ET.ParseError, DefusedXmlException):
        return None


def dig(data: Any, *keys: Any) -> Any:
    """
    Walk nested dicts/lists, returning None as soon as a step is missing.

    Example:
        >>> dig({"result": {"location": {"lat": 1.5}}}, "result", "location", "lat")
        1.5
        >>> dig({"items": []}, "items", 0, "position")
    """
    current = data
    for key in keys:
        if isinstance(current, dict):
            current = current.get(key)
        elif isinstance(current, list) and isinstance(key, int):
            current = current[key] if -len(current) <= key < len(current) else None
        else:
            return None
        if current is None:
            return None
    return current


def find_text(
    element: Optional[Element],
    path: str,
    namespaces: Optional[Dict[str, str]] = None,
) -> Optional[str]:
    """Return the stripped text of the first match for `path`, or None."""
    if element is None:
        return None
    if element.tag == path:
        node = element
    else:
        node = element.find(path, namespaces)
        if node is None:
            node = element.find(f".//{path}", namespaces)
    if node is None or node.text is None:
        return None
    return node.text.strip() or None


def own_text(element: Optional[Element]) -> Optional[str]:
    """
    Return the text nodes that sit directly inside `element`, joined and
    stripped. Text inside child elements is left out; text after a child is
    kept.
    """
    if element is None:
        return None
    text = "".join([element.text or ""] + [child.tail or "" for child in element])
    return text.strip() or None
