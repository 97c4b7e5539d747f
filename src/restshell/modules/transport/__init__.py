"""HTTP client collaborators -- curl subprocess or in-process httpx."""

import logging

from restshell.errors import TransportFailure
from restshell.modules.modes.tools import resolve_binary

from .base import DEFAULT_USER_AGENT, RequestDescriptor, Transport, TransportResult
from .curl import CurlTransport
from .httpx_transport import HttpxTransport, exit_code_for, format_header_blob

logger = logging.getLogger(__name__)

TRANSPORT_CHOICES = ("auto", "curl", "httpx")


def create_transport(kind: str = "auto", curl_binary: str = "curl") -> Transport:
    """Build the configured transport; ``auto`` prefers curl when installed.

    Raises:
        TransportFailure: unknown kind, or curl requested but not installed
    """
    kind = (kind or "auto").lower()
    if kind not in TRANSPORT_CHOICES:
        raise TransportFailure(
            f"Unknown transport '{kind}'", {"choices": ", ".join(TRANSPORT_CHOICES)}
        )
    if kind == "httpx":
        return HttpxTransport()

    binary = resolve_binary(curl_binary)
    if binary:
        return CurlTransport(binary)
    if kind == "curl":
        raise TransportFailure(f"{curl_binary} not found in PATH")
    logger.info("curl not found, using the httpx transport")
    return HttpxTransport()


__all__ = [
    "DEFAULT_USER_AGENT",
    "TRANSPORT_CHOICES",
    "CurlTransport",
    "HttpxTransport",
    "RequestDescriptor",
    "Transport",
    "TransportResult",
    "create_transport",
    "exit_code_for",
    "format_header_blob",
]
