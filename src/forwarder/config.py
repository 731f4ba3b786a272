"""Forwarder configuration loaded from environment variables."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

logger = logging.getLogger(__name__)

FORWARD_RULE_PREFIX = "FORWARD_RULE_"
RULE_DELIMITER = ";"


@dataclass
class ForwardRule:
    """Maps an original recipient address to a forwarding target."""

    source_address: str
    target_address: str

    @classmethod
    def parse(cls, value: str) -> "ForwardRule":
        """Parse a ``"<source>;<target>"`` rule value.

        A value without a delimiter yields an empty target.
        """
        source, _, target = value.partition(RULE_DELIMITER)
        return cls(source_address=source.strip(), target_address=target.strip())


@dataclass
class ForwarderConfig:
    """Settings for a single forwarding invocation."""

    sender_address: str
    default_recipient: str
    rules: List[ForwardRule] = field(default_factory=list)
    email_bucket: Optional[str] = None
    email_key_prefix: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ForwarderConfig":
        """Build configuration from an environment mapping.

        Rules keep the enumeration order of the mapping, so that address
        resolution sees them in the order they were defined.

        Args:
            environ: Mapping to read from, defaults to ``os.environ``

        Returns:
            Populated ForwarderConfig
        """
        if environ is None:
            environ = os.environ

        sender_address = environ.get("SENDER_ADDRESS")
        if not sender_address:
            logger.warning("SENDER_ADDRESS is not set, forwarded mail will have an empty From")
            sender_address = ""

        default_recipient = environ.get("DEFAULT_RECIPIENT")
        if not default_recipient:
            logger.warning("DEFAULT_RECIPIENT is not set, unmatched mail has no target")
            default_recipient = ""

        rules = []
        for name, value in environ.items():
            if not name.startswith(FORWARD_RULE_PREFIX):
                continue
            if RULE_DELIMITER not in value:
                logger.warning(f"Forward rule {name} has no '{RULE_DELIMITER}' delimiter")
            rules.append(ForwardRule.parse(value))

        logger.info(f"Loaded {len(rules)} forward rules")

        return cls(
            sender_address=sender_address,
            default_recipient=default_recipient,
            rules=rules,
            email_bucket=environ.get("EMAIL_BUCKET") or None,
            email_key_prefix=environ.get("EMAIL_KEY_PREFIX", ""),
        )
