"""Transports for remote-controlling Yakuake."""

from yakuake_session.transport.base import Session, TitleResult, Transport, TransportKind
from yakuake_session.transport.detection import detect_transport

__all__ = [
    "Session",
    "TitleResult",
    "Transport",
    "TransportKind",
    "detect_transport",
]
