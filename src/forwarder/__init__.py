"""SES mail forwarder for messages stored in S3."""

from .address_resolver import resolve
from .config import ForwarderConfig, ForwardRule
from .dispatcher import NotificationRecord, dispatch, forward_message, parse_records
from .exceptions import FetchError, ForwarderError, SendError
from .lambda_function import lambda_handler
from .mail_sender import SESMailSender
from .mail_store import S3MailStore
from .message_rewriter import extract_header_fields, rewrite, split_message

__all__ = [
    "lambda_handler",
    "ForwarderConfig",
    "ForwardRule",
    "NotificationRecord",
    "S3MailStore",
    "SESMailSender",
    "ForwarderError",
    "FetchError",
    "SendError",
    "dispatch",
    "forward_message",
    "parse_records",
    "resolve",
    "rewrite",
    "split_message",
    "extract_header_fields",
]
