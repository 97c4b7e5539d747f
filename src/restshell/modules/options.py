"""Request option store: headers, TLS, cookie-jar and user-agent fragments."""

import base64
from collections.abc import Iterator
from pathlib import Path

# A fragment is the ordered argument contribution of one option, e.g.
# (("-H", "Accept: */*"),) or (("-k", None),).
Fragment = tuple[tuple[str, str | None], ...]

HEADER_PREFIX = "head:"
SSL_INSECURE = "SSL_INSECURE"
COOKIEJAR = "COOKIEJAR"
USER_AGENT = "USER_AGENT"

TRUE_TOKENS = frozenset({"true", "on", "yes"})
FALSE_TOKENS = frozenset({"false", "off", "no"})


def truth(token: str) -> bool | None:
    """Parse a boolean option token.

    Returns ``None`` for anything unrecognized so callers can print usage
    instead of silently picking a default.
    """
    lowered = token.strip().lower()
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    return None


def basic_credentials(user: str, password: str) -> str:
    """Build a Basic ``Authorization`` header value."""
    token = base64.b64encode(f"{user}:{password}".encode()).decode("ascii")
    return f"Basic {token}"


class OptionStore:
    """Keyed option fragments with last-write-wins and absence-on-clear.

    Headers are kept under ``head:<Name>`` keys; the well-known flags have
    typed accessors on top of the same map.
    """

    def __init__(self) -> None:
        self._fragments: dict[str, Fragment] = {}
        self._header_names: dict[str, str] = {}

    # -- generic flags -------------------------------------------------

    def set_flag(self, key: str, fragment: Fragment) -> None:
        # unset-then-set moves the key to the end of the request order
        self._fragments.pop(key, None)
        self._fragments[key] = tuple(fragment)

    def clear_flag(self, key: str) -> None:
        self._fragments.pop(key, None)
        self._header_names.pop(key, None)

    def query_flag(self, key: str) -> Fragment | None:
        return self._fragments.get(key)

    def keys(self) -> list[str]:
        return list(self._fragments)

    def fragments(self) -> Iterator[tuple[str, str | None]]:
        """Yield every (flag, value) pair in request order."""
        for fragment in self._fragments.values():
            yield from fragment

    # -- headers -------------------------------------------------------

    def set_header(self, name: str, value: str) -> None:
        key = HEADER_PREFIX + name
        self.set_flag(key, (("-H", f"{name}: {value}"),))
        self._header_names[key] = name

    def clear_header(self, name: str) -> None:
        self.clear_flag(HEADER_PREFIX + name)

    def get_header(self, name: str) -> str | None:
        fragment = self._fragments.get(HEADER_PREFIX + name)
        if fragment is None:
            return None
        value = fragment[0][1] or ""
        return value.split(": ", 1)[1] if ": " in value else ""

    def list_headers(self) -> list[tuple[str, str]]:
        headers = []
        for key in self._fragments:
            name = self._header_names.get(key)
            if name is not None:
                headers.append((name, self.get_header(name) or ""))
        return headers

    def set_basic_auth(self, user: str, password: str) -> None:
        """Set Basic credentials; an empty user clears Authorization."""
        if not user:
            self.clear_header("Authorization")
            return
        self.set_header("Authorization", basic_credentials(user, password))

    # -- well-known options --------------------------------------------

    @property
    def ssl_insecure(self) -> bool:
        return SSL_INSECURE in self._fragments

    @ssl_insecure.setter
    def ssl_insecure(self, enabled: bool) -> None:
        if enabled:
            self.set_flag(SSL_INSECURE, (("-k", None),))
        else:
            self.clear_flag(SSL_INSECURE)

    @property
    def cookie_jar(self) -> Path | None:
        fragment = self._fragments.get(COOKIEJAR)
        if not fragment:
            return None
        return Path(fragment[-1][1] or "")

    @cookie_jar.setter
    def cookie_jar(self, path: Path | str | None) -> None:
        if path is None:
            self.clear_flag(COOKIEJAR)
        else:
            self.set_flag(COOKIEJAR, (("-b", str(path)), ("-c", str(path))))

    @property
    def user_agent(self) -> str | None:
        fragment = self._fragments.get(USER_AGENT)
        return fragment[0][1] if fragment else None

    @user_agent.setter
    def user_agent(self, value: str | None) -> None:
        if value is None:
            self.clear_flag(USER_AGENT)
        else:
            self.set_flag(USER_AGENT, (("-A", value),))
