"""Rewrites raw inbound messages for forwarding."""

import logging
import re
from typing import Dict, Tuple

from .address_resolver import resolve
from .config import ForwarderConfig

logger = logging.getLogger(__name__)

HEADER_SEPARATOR = "\r\n\r\n"
LINE_ENDING = "\r\n"

# Lowercased names of the only header fields carried over
RECOGNISED_FIELDS = ("to", "subject", "from", "content-type")

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_message(content: str) -> Tuple[str, str]:
    """Split a raw message into header and body regions.

    The body region starts at the first blank-line separator and keeps it.
    Without a separator the whole content is header and the body is empty.

    Args:
        content: Raw message text

    Returns:
        Tuple of (header, body)
    """
    index = content.find(HEADER_SEPARATOR)
    if index == -1:
        return content, ""
    return content[:index], content[index:]


def extract_header_fields(header: str) -> Dict[str, str]:
    """Extract the recognised header fields from a header region.

    Only the start of each line is matched, and the first occurrence of a
    field wins.

    Args:
        header: Header region of a raw message

    Returns:
        Dict of lowercased field name to trimmed value
    """
    fields: Dict[str, str] = {}
    for line in _LINE_BREAK.split(header):
        name, colon, value = line.partition(":")
        if not colon:
            continue
        name = name.lower()
        if name in RECOGNISED_FIELDS and name not in fields:
            fields[name] = value.strip()
    return fields


def rewrite(content: str, config: ForwarderConfig) -> str:
    """Rewrite a raw message so it can be re-sent through SES.

    The new header block holds From (the configured sender), To (the
    resolved forward target), Subject, Reply-To (the original sender) and
    Content-Type. All other headers are dropped and the body is appended
    unchanged.

    Args:
        content: Raw message text with headers and body
        config: Forwarder configuration

    Returns:
        Rewritten raw message
    """
    header, body = split_message(content)
    if not body:
        logger.warning("Message has no header separator, body will be dropped")

    fields = extract_header_fields(header)

    lines = [f"From: {config.sender_address}"]

    if "to" in fields:
        target = resolve(fields["to"], config.rules, config.default_recipient)
        logger.info(f"Forwarding mail for {fields['to']} to {target}")
        lines.append(f"To: {target}")

    if "subject" in fields:
        lines.append(f"Subject: {fields['subject']}")

    if "from" in fields:
        lines.append(f"Reply-To: {fields['from']}")

    if "content-type" in fields:
        lines.append(f"Content-Type: {fields['content-type']}")

    # The body region starts with the separator, which ends the last header line
    return LINE_ENDING.join(lines) + (body or LINE_ENDING)
