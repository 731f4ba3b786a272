"""Runs the fetch, rewrite and send pipeline for a batch of notifications."""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .config import ForwarderConfig
from .mail_sender import SESMailSender
from .mail_store import S3MailStore
from .message_rewriter import rewrite

logger = logging.getLogger(__name__)


@dataclass
class NotificationRecord:
    """Location of a stored raw message."""

    region: Optional[str]
    bucket: str
    key: str


def parse_records(event: Dict[str, Any], config: ForwarderConfig) -> List[NotificationRecord]:
    """Extract message locations from a Lambda event.

    An event without a Records list is treated as an empty batch.

    Args:
        event: Lambda event from S3 or an SES receipt rule
        config: Forwarder configuration

    Returns:
        Notification records in event order
    """
    raw_records = event.get("Records") if isinstance(event, dict) else None
    if not isinstance(raw_records, list):
        logger.info("Event has no Records, nothing to forward")
        return []

    records = []
    for raw in raw_records:
        if not isinstance(raw, dict):
            logger.warning(f"Skipping malformed record: {raw!r}")
            continue

        region = raw.get("awsRegion")

        # Handle S3 event (when Lambda is triggered by S3)
        if "s3" in raw:
            try:
                bucket = raw["s3"]["bucket"]["name"]
                key = raw["s3"]["object"]["key"]
            except (KeyError, TypeError):
                logger.warning("Skipping S3 record without bucket or object key")
                continue
            records.append(NotificationRecord(region=region, bucket=bucket, key=key))

        # Handle SES event (when Lambda is triggered directly by SES)
        elif "ses" in raw:
            ses = raw["ses"]
            mail = ses.get("mail") if isinstance(ses, dict) else None
            if not isinstance(mail, dict):
                logger.warning("Skipping SES record without mail metadata")
                continue
            message_id = mail.get("messageId")
            if not message_id or not config.email_bucket:
                logger.warning("Skipping SES record, no message ID or EMAIL_BUCKET configured")
                continue
            records.append(
                NotificationRecord(
                    region=region,
                    bucket=config.email_bucket,
                    key=f"{config.email_key_prefix}{message_id}",
                )
            )
        else:
            logger.warning("Skipping record of unknown event type - neither SES nor S3 event")

    return records


def forward_message(
    record: NotificationRecord,
    config: ForwarderConfig,
    store: S3MailStore,
    sender: SESMailSender,
) -> str:
    """Fetch, rewrite and re-send a single message.

    Returns:
        SES message ID of the forwarded message
    """
    content = store.fetch(record.bucket, record.key)
    transformed = rewrite(content, config)
    return sender.send(transformed)


async def dispatch(
    records: List[NotificationRecord],
    config: ForwarderConfig,
    store: S3MailStore,
    sender: SESMailSender,
) -> List[str]:
    """Forward all records concurrently.

    Each record gets its own worker thread, so every pipeline starts
    before waiting. The first failure is raised from the single wait, but
    only after all sibling pipelines have finished; their messages are
    still sent.

    Args:
        records: Messages to forward
        config: Forwarder configuration
        store: Source of raw messages
        sender: Outbound transport

    Returns:
        SES message IDs in record order
    """
    if not records:
        return []

    loop = asyncio.get_running_loop()
    executor = ThreadPoolExecutor(max_workers=len(records), thread_name_prefix="forward")
    try:
        futures = [
            loop.run_in_executor(executor, forward_message, record, config, store, sender)
            for record in records
        ]
        return list(await asyncio.gather(*futures))
    finally:
        executor.shutdown(wait=True)
