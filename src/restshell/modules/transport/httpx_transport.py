"""In-process HTTP client collaborator built on httpx.

Interprets the same option fragments curl receives and mimics curl's exit
codes and header/body files, so the executor cannot tell the two apart.
"""

import logging
import ssl
from http.cookiejar import LoadError, MozillaCookieJar
from pathlib import Path

import httpx

from restshell.utils.debug import debug_request

from .base import RequestDescriptor, Transport, TransportResult

logger = logging.getLogger(__name__)

# curl exit codes
CURLE_UNSUPPORTED_PROTOCOL = 1
CURLE_URL_MALFORMAT = 3
CURLE_COULDNT_RESOLVE_HOST = 6
CURLE_COULDNT_CONNECT = 7
CURLE_OPERATION_TIMEDOUT = 28
CURLE_SSL_CONNECT_ERROR = 35
CURLE_RECV_ERROR = 56
CURLE_PEER_FAILED_VERIFICATION = 60

_RESOLVE_MARKERS = ("name or service not known", "nodename nor servname", "getaddrinfo")


def _ssl_cause(exc: BaseException) -> ssl.SSLError | None:
    seen: BaseException | None = exc
    while seen is not None:
        if isinstance(seen, ssl.SSLError):
            return seen
        seen = seen.__cause__ or seen.__context__
    return None


def exit_code_for(exc: httpx.HTTPError) -> int:
    """Map an httpx failure to the exit status curl reports for it."""
    if isinstance(exc, httpx.UnsupportedProtocol):
        return CURLE_UNSUPPORTED_PROTOCOL
    if isinstance(exc, httpx.TimeoutException):
        return CURLE_OPERATION_TIMEDOUT
    if isinstance(exc, httpx.ConnectError):
        cause = _ssl_cause(exc)
        if isinstance(cause, ssl.SSLCertVerificationError):
            return CURLE_PEER_FAILED_VERIFICATION
        if cause is not None:
            return CURLE_SSL_CONNECT_ERROR
        if any(marker in str(exc).lower() for marker in _RESOLVE_MARKERS):
            return CURLE_COULDNT_RESOLVE_HOST
        return CURLE_COULDNT_CONNECT
    return CURLE_RECV_ERROR


def format_header_blob(response: httpx.Response) -> bytes:
    """Render status line and headers the way ``curl -D`` dumps them."""
    lines = [f"{response.http_version} {response.status_code} {response.reason_phrase}".rstrip()]
    for name, value in response.headers.raw:
        lines.append(f"{name.decode('latin-1')}: {value.decode('latin-1')}")
    return ("\r\n".join(lines) + "\r\n\r\n").encode("latin-1")


def _load_jar(read_path: str | None, write_path: str | None) -> MozillaCookieJar:
    jar = MozillaCookieJar(write_path or read_path)
    if read_path and Path(read_path).is_file() and Path(read_path).stat().st_size:
        try:
            jar.load(read_path, ignore_discard=True, ignore_expires=True)
        except (LoadError, OSError) as exc:
            logger.warning("could not read cookie jar %s: %s", read_path, exc)
    return jar


class HttpxTransport(Transport):
    """Perform requests in-process; used when curl is not installed."""

    name = "httpx"

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def send(self, descriptor: RequestDescriptor) -> TransportResult:
        debug_request(descriptor.arguments(), self.name)

        headers: list[tuple[str, str]] = []
        verify = True
        user_agent = descriptor.user_agent
        jar_read: str | None = None
        jar_write: str | None = None
        for flag, value in descriptor.options:
            if flag == "-H" and value is not None:
                name, _, header_value = value.partition(":")
                headers.append((name.strip(), header_value.strip()))
            elif flag == "-k":
                verify = False
            elif flag == "-b":
                jar_read = value
            elif flag == "-c":
                jar_write = value
            elif flag == "-A" and value is not None:
                user_agent = value
            else:
                logger.debug("httpx transport ignores option %s", flag)

        # an empty header value removes the header, as with curl
        removed = {name.lower() for name, value in headers if not value}
        headers = [(name, value) for name, value in headers if value]
        if not any(name.lower() == "user-agent" for name, _ in headers):
            headers.insert(0, ("User-Agent", user_agent))

        content = None
        if descriptor.payload_path is not None:
            content = descriptor.payload_path.read_bytes()
            if not any(name.lower() == "content-type" for name, _ in headers):
                headers.append(("Content-Type", "application/x-www-form-urlencoded"))

        method = descriptor.method.upper()
        jar = _load_jar(jar_read, jar_write)
        try:
            with httpx.Client(
                verify=verify,
                cookies=jar,
                follow_redirects=False,
                timeout=self.timeout,
            ) as client:
                # raw bytes on the wire, as curl sends them
                raw_headers = [(name.encode(), value.encode()) for name, value in headers]
                request = client.build_request(method, descriptor.url, headers=raw_headers, content=content)
                for name in removed:
                    request.headers.pop(name, None)
                response = client.send(request)
        except httpx.HTTPError as exc:
            logger.debug("request to %s failed: %s", descriptor.url, exc)
            descriptor.header_path.write_bytes(b"")
            descriptor.body_path.write_bytes(b"")
            return TransportResult(exit_code=exit_code_for(exc))
        except (httpx.InvalidURL, ValueError) as exc:
            logger.debug("could not build request for %s: %s", descriptor.url, exc)
            descriptor.header_path.write_bytes(b"")
            descriptor.body_path.write_bytes(b"")
            return TransportResult(exit_code=CURLE_URL_MALFORMAT)

        header_blob = format_header_blob(response)
        body = header_blob if method == "HEAD" else response.content
        descriptor.header_path.write_bytes(header_blob)
        descriptor.body_path.write_bytes(body)
        if jar_write:
            try:
                jar.save(jar_write, ignore_discard=True, ignore_expires=True)
            except OSError as exc:
                logger.warning("could not write cookie jar %s: %s", jar_write, exc)
        return TransportResult(exit_code=0, header_blob=header_blob, body=body)
