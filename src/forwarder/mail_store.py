"""S3 access for raw inbound messages."""

import logging
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import FetchError

logger = logging.getLogger(__name__)

# Decoding with surrogateescape lets 8-bit content survive the round trip to SES
MESSAGE_ENCODING = "utf-8"
MESSAGE_ERRORS = "surrogateescape"


class S3MailStore:
    """Reads raw messages stored in S3 by SES receipt rules."""

    def __init__(self, s3_client=None, region_name: Optional[str] = None):
        """Initialize S3 store.

        Args:
            s3_client: Optional S3 client (for testing)
            region_name: Region of the bucket holding the messages
        """
        self.s3_client = s3_client or boto3.client("s3", region_name=region_name)

    def fetch(self, bucket: str, key: str) -> str:
        """Fetch a raw message.

        Args:
            bucket: S3 bucket name
            key: Object key of the message

        Returns:
            Raw message text

        Raises:
            FetchError: If the object cannot be read
        """
        logger.info(f"Fetching email from S3: {bucket}/{key}")
        try:
            response = self.s3_client.get_object(Bucket=bucket, Key=key)
            raw_email = response["Body"].read()
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "Unknown")
            raise FetchError(
                f"Failed to fetch s3://{bucket}/{key} ({code})",
                bucket=bucket,
                key=key,
                original_error=e,
            ) from e
        except BotoCoreError as e:
            raise FetchError(
                f"Failed to fetch s3://{bucket}/{key}: {str(e)}",
                bucket=bucket,
                key=key,
                original_error=e,
            ) from e

        logger.info(f"Fetched {len(raw_email)} bytes from s3://{bucket}/{key}")
        return raw_email.decode(MESSAGE_ENCODING, MESSAGE_ERRORS)
