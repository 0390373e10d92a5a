"""Webhook LINE: assinatura, parsing seguro e modelos de eventos."""

from ..signature import SignatureResult, verify_line_signature
from .events import (
    BeaconEvent,
    EventMessage,
    EventSource,
    FollowEvent,
    JoinEvent,
    LeaveEvent,
    MessageEvent,
    PostbackEvent,
    PostbackParams,
    UnfollowEvent,
    UserProfile,
    WebhookEvent,
    WebhookPayload,
    parse_event,
)
from .receive import (
    InvalidJsonError,
    InvalidPayloadError,
    InvalidSignatureError,
    WebhookRequestError,
    parse_webhook_request,
)

__all__ = [
    "BeaconEvent",
    "EventMessage",
    "EventSource",
    "FollowEvent",
    "InvalidJsonError",
    "InvalidPayloadError",
    "InvalidSignatureError",
    "JoinEvent",
    "LeaveEvent",
    "MessageEvent",
    "PostbackEvent",
    "PostbackParams",
    "SignatureResult",
    "UnfollowEvent",
    "UserProfile",
    "WebhookEvent",
    "WebhookPayload",
    "WebhookRequestError",
    "parse_event",
    "parse_webhook_request",
    "verify_line_signature",
]
