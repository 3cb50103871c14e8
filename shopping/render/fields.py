"""
Declarative field rendering.

A field list is a sequence of Field(label, get, present, fmt) entries. Each
entry is applied the same way: look the value up, skip it unless present()
accepts it, then print "label: fmt(value)".
"""

from collections import namedtuple
from typing import Any, Callable

Field = namedtuple("Field", ["label", "get", "present", "fmt"])


def dig(resource: dict, path: str, default=None) -> Any:
    """Look up a dotted key path ("shippingDetails.method.carrier")."""
    value = resource
    for key in path.split("."):
        if not isinstance(value, dict):
            return default
        value = value.get(key)
        if value is None:
            return default
    return value


# Presence predicates

def truthy(value) -> bool:
    return bool(value)


def always(value) -> bool:
    return True


# Formatters

def text(value) -> str:
    return "" if value is None else str(value)


def price(value) -> str:
    """{"value": "9.99", "currency": "USD"} -> "9.99 USD"."""
    if not value:
        return ""
    return f"{value.get('value', '')} {value.get('currency', '')}".strip()


def yes_no(value) -> str:
    return "yes" if value else "no"


def field(label: str, get, present: Callable = truthy, fmt: Callable = text) -> Field:
    """Build a Field; get is a dotted key path or a callable(resource)."""
    if isinstance(get, str):
        path = get
        get = lambda resource: dig(resource, path)
    return Field(label, get, present, fmt)


def render_fields(resource: dict, fields: list, indent: str = "") -> list:
    """Render the present fields of resource as "- label: value" lines."""
    lines = []
    for f in fields:
        value = f.get(resource)
        if not f.present(value):
            continue
        lines.append(f"{indent}- {f.label}: {f.fmt(value)}")
    return lines
