"""
CSS class-name composition.

    >>> cn("card", False, ["p-4", None], {"active": True, "muted": 0})
    'card p-4 active'
"""

from collections.abc import Mapping


def _stringify(value) -> str:
    if not value or value is True:
        return ""
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, Mapping):
        return " ".join(str(key) for key, flag in value.items() if flag)
    if isinstance(value, (list, tuple)):
        return " ".join(part for part in map(_stringify, value) if part)
    return ""


def cn(*inputs) -> str:
    """Join the truthy class fragments of ``inputs`` with single spaces."""
    return " ".join(part for part in map(_stringify, inputs) if part)
