from .deadline import ReadDeadline
from .keepalive import KeepaliveLoop
from .read_loop import run_read_loop
from .event_handler import EventHandler
from .acks import send_ack, encode_ack
from .finalize import close_ws_gracefully
from .dispatch import HANDLERS, AckSender, dispatch_message
from .parser import DECODERS, parse_v2_payload, parse_event_payload, parse_inbound_message

__all__ = [
    "AckSender",
    "DECODERS",
    "EventHandler",
    "HANDLERS",
    "KeepaliveLoop",
    "ReadDeadline",
    "close_ws_gracefully",
    "dispatch_message",
    "encode_ack",
    "parse_event_payload",
    "parse_inbound_message",
    "parse_v2_payload",
    "run_read_loop",
    "send_ack",
]
