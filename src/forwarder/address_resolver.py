"""Resolves the forwarding target for an original recipient."""

from typing import Iterable

from .config import ForwardRule


def resolve(source_address: str, rules: Iterable[ForwardRule], default: str) -> str:
    """Determine the address to forward a message to.

    Every rule is checked; when several rules share a source address the
    last one wins.

    Args:
        source_address: Trimmed value of the original To header
        rules: Forward rules in configured order
        default: Fallback recipient when no rule matches

    Returns:
        Target address
    """
    result = default
    wanted = source_address.lower()

    for rule in rules:
        if rule.source_address.lower() == wanted:
            result = rule.target_address or ""

    return result
