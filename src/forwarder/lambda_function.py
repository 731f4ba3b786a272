"""AWS Lambda handler that forwards inbound SES mail.

SES stores each inbound message in S3; this handler fetches the stored
message, rewrites its headers and re-sends it to the configured recipient.
"""

import asyncio
import json
import logging
from typing import Any, Dict

from .config import ForwarderConfig
from .dispatcher import dispatch, parse_records
from .exceptions import ForwarderError
from .mail_sender import SESMailSender
from .mail_store import S3MailStore

logger = logging.getLogger()
logger.setLevel(logging.INFO)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Forward every message referenced by the event.

    Args:
        event: Lambda event with S3 or SES records
        context: Lambda context

    Returns:
        Response dict with status code and number of forwarded messages

    Raises:
        ForwarderError: If any fetch or send fails, even when other
            messages in the batch were forwarded
    """
    config = ForwarderConfig.from_env()
    records = parse_records(event, config)
    if not records:
        return {"statusCode": 200, "body": json.dumps({"forwarded": 0, "message_ids": []})}

    # Use the region of the bucket the first record came from
    region = records[0].region
    store = S3MailStore(region_name=region)
    sender = SESMailSender(region_name=region)

    logger.info(f"Forwarding {len(records)} messages (region: {region or 'default'})")

    try:
        message_ids = asyncio.run(dispatch(records, config, store, sender))
    except ForwarderError as e:
        logger.error(f"Error forwarding email: {str(e)}", exc_info=True)
        raise

    return {
        "statusCode": 200,
        "body": json.dumps({"forwarded": len(message_ids), "message_ids": message_ids}),
    }
