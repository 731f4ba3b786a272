"""Sends rewritten messages through AWS SES."""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import SendError
from .mail_store import MESSAGE_ENCODING, MESSAGE_ERRORS

logger = logging.getLogger(__name__)

SES_API_VERSION = "2010-12-01"


class SESMailSender:
    """Transmits raw messages with SES SendRawEmail."""

    def __init__(self, ses_client=None, region_name: Optional[str] = None):
        """Initialize sender.

        Args:
            ses_client: Optional SES client (for testing)
            region_name: Region to send from
        """
        self.ses_client = ses_client or boto3.client(
            "ses", region_name=region_name, api_version=SES_API_VERSION
        )

    def send(self, raw_message: str) -> str:
        """Send a raw message.

        Sender and recipients are taken from the message headers.

        Args:
            raw_message: Complete rewritten message

        Returns:
            SES message ID

        Raises:
            SendError: If SES rejects the message or the call fails
        """
        data = raw_message.encode(MESSAGE_ENCODING, MESSAGE_ERRORS)
        try:
            response = self.ses_client.send_raw_email(RawMessage={"Data": data})
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            raise SendError(f"SES rejected message ({code})", original_error=e) from e
        except BotoCoreError as e:
            raise SendError(f"Failed to send message: {str(e)}", original_error=e) from e

        ses_message_id = response.get("MessageId", "")
        logger.info(f"Email forwarded successfully. MessageId: {ses_message_id}")
        return ses_message_id
