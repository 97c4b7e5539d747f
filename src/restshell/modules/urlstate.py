"""Current-URL state and the cd-like URL resolver."""

from dataclasses import dataclass, replace

DEFAULT_PROTOCOL = "http"
DEFAULT_HOST = "localhost"


def render_url(protocol: str, host: str, path: str) -> str:
    """Render URL components; an empty path renders as ``/``."""
    return f"{protocol}://{host}{path or '/'}"


@dataclass(frozen=True)
class URLState:
    """Where the session currently points.

    ``path`` is always empty or starts with ``/``. ``previous`` is the
    rendered URL from before the latest resolution, used by ``cq -``.
    """

    protocol: str = DEFAULT_PROTOCOL
    host: str = DEFAULT_HOST
    path: str = ""
    suffix: str = ""
    previous: str = render_url(DEFAULT_PROTOCOL, DEFAULT_HOST, "")

    def render(self) -> str:
        return render_url(self.protocol, self.host, self.path)

    def request_url(self) -> str:
        """Rendered URL with the suffix spliced in before ``?`` or appended."""
        url = self.render()
        if not self.suffix:
            return url
        if "?" in url:
            return url.replace("?", f"{self.suffix}?", 1)
        return url + self.suffix

    def with_suffix(self, suffix: str) -> "URLState":
        return replace(self, suffix=suffix)


def _split_host(rest: str) -> tuple[str, str]:
    slash = rest.find("/")
    if slash < 0:
        return rest, ""
    return rest[:slash], rest[slash:]


def resolve(state: URLState, url: str) -> URLState:
    """Resolve ``url`` against ``state`` and return the new state.

    Accepted forms: ``proto://host[/path]``, ``//host[/path]``,
    ``/absolute/path``, ``relative/path`` (with ``.`` and ``..``), a bare
    ``?query`` and ``-`` for the previous URL.
    """
    if url == "-":
        url = state.previous

    path = state.path
    protocol = state.protocol
    host = state.host

    if "://" in url:
        protocol, rest = url.split("://", 1)
        host, url = _split_host(rest)
        path = ""
    elif url.startswith("//"):
        host, url = _split_host(url[2:])
        path = ""

    if url.startswith("/"):
        path = ""
        url = url[1:]

    if url.startswith("?"):
        path = path + url
        url = ""

    for segment in url.split("/"):
        if segment == "..":
            if "/" in path:
                path = path[: path.rfind("/")]
        elif segment in (".", ""):
            continue
        else:
            path = f"{path}/{segment}"

    if url.endswith("/"):
        path = path + "/"

    return URLState(
        protocol=protocol,
        host=host,
        path=path,
        suffix=state.suffix,
        previous=state.render(),
    )
