"""Tests for the RestSession command surface."""

import base64
import io
from pathlib import Path

from conftest import FakeTools, FakeTransport, errors, make_session, output, printed

from restshell.modules.session import RestSession


class TestHeaderCommands:
    def test_set_show_and_list(self, session: RestSession):
        assert session.header("X-Trace", "a", "b") is True
        assert session.header("X-Trace") is True
        assert "X-Trace: a b" in printed(session)
        session.accept("text/html")
        session.header()
        lines = printed(session).splitlines()
        assert "Accept: text/html" in lines
        assert "X-Trace: a b" in lines

    def test_show_missing_header(self, session: RestSession):
        session.header("X-Nothing")
        assert "X-Nothing: " in printed(session)

    def test_delete(self, session: RestSession):
        session.cookie("a=b")
        assert session.cookie(delete=True) is True
        assert session.option_store.get_header("Cookie") is None

    def test_set_and_delete_conflict(self, session: RestSession):
        session.header("X-A", "1")
        assert session.header("X-A", "2", delete=True) is False
        assert "Can't set and delete at the same time." in errors(session)
        assert session.option_store.get_header("X-A") == "1"

    def test_shortcuts(self, session: RestSession):
        session.authorization("Bearer", "token")
        session.content_type("application/xml")
        assert session.option_store.get_header("Authorization") == "Bearer token"
        assert session.option_store.get_header("Content-Type") == "application/xml"


class TestBasicAuth:
    def test_with_arguments(self, session: RestSession):
        assert session.basic_auth("alice", "s3cret") is True
        expected = "Basic " + base64.b64encode(b"alice:s3cret").decode()
        assert session.option_store.get_header("Authorization") == expected

    def test_prompts_for_missing_values(self, temp_dir: Path):
        prompts = []

        def prompter(label: str, secret: bool) -> str:
            prompts.append((label, secret))
            return {"Username": "bob", "Password": "pw"}[label]

        rest = make_session(temp_dir, FakeTransport(), FakeTools(), prompter=prompter)
        rest.basic_auth()
        assert prompts == [("Username", False), ("Password", True)]
        assert rest.option_store.get_header("Authorization") == "Basic " + base64.b64encode(b"bob:pw").decode()
        rest.close()

    def test_empty_username_clears(self, temp_dir: Path):
        rest = make_session(temp_dir, FakeTransport(), FakeTools(), prompter=lambda label, secret: "")
        rest.authorization("Basic", "xyz")
        assert rest.basic_auth() is True
        assert rest.option_store.get_header("Authorization") is None
        rest.close()


class TestOptionCommands:
    def test_ssl_insecure(self, session: RestSession):
        session.ssl_insecure()
        assert "ssl-insecure: off" in printed(session)
        assert session.ssl_insecure("ON") is True
        assert session.option_store.ssl_insecure is True
        session.ssl_insecure("no")
        assert session.option_store.ssl_insecure is False

    def test_ssl_insecure_usage(self, session: RestSession):
        assert session.ssl_insecure("maybe") is False
        assert "Usage: ssl-insecure [on|off]" in errors(session)

    def test_cookie_jar(self, session: RestSession, temp_dir: Path):
        session.cookie_jar()
        assert "cookie-jar: off" in printed(session)
        session.cookie_jar("on")
        assert session.option_store.cookie_jar == session.workspace.cookie_jar
        session.cookie_jar()
        assert "cookie-jar: on" in printed(session)
        session.cookie_jar(str(temp_dir / "jar.txt"))
        session.cookie_jar()
        assert f"cookie-jar: {temp_dir / 'jar.txt'}" in printed(session)
        session.cookie_jar("off")
        assert session.option_store.cookie_jar is None

    def test_user_agent(self, session: RestSession):
        session.user_agent()
        assert "user-agent: default" in printed(session)
        session.user_agent("agent/1")
        assert session.option_store.user_agent == "agent/1"
        session.user_agent(delete=True)
        assert session.option_store.user_agent is None


class TestNavigation:
    def test_cq_and_url(self, session: RestSession):
        session.cq("https://api.test/v1")
        session.cq("users")
        assert session.url() == "https://api.test/v1/users"
        session.cq("-")
        assert session.url() == "https://api.test/v1"

    def test_suffix(self, session: RestSession, fake_transport: FakeTransport):
        session.cq("/items")
        session.suffix(".json")
        session.get()
        assert fake_transport.sent[0].url == "http://localhost/items.json"
        session.suffix()
        session.get()
        assert fake_transport.sent[1].url == "http://localhost/items"


class TestModes:
    def test_mode_switch_and_show(self, session: RestSession):
        assert session.mode("plain") is True
        session.mode()
        assert "mode: plain" in printed(session)

    def test_unknown_mode(self, session: RestSession):
        session.mode("plain")
        assert session.mode("yaml") is False
        assert "mode: 'yaml' unknown" in errors(session)
        assert session.modes.active == "plain"

    def test_missing_tool_warning_reaches_operator(self, session: RestSession):
        session.mode("xml")
        assert "xmllint unavailable" in errors(session)

    def test_sel_plain(self, session: RestSession, fake_transport: FakeTransport):
        session.mode("plain")
        fake_transport.queue(b"apple\nbanana\ncherry\n")
        session.get()
        session.output.truncate(0)
        session.output.seek(0)
        assert session.sel("an") is True
        assert output(session) == b"banana\n"

    def test_sel_unavailable(self, session: RestSession):
        assert session.sel(".a") is False
        assert "not available" in errors(session)

    def test_sel_tool_failure(self, temp_dir: Path):
        def jq(args, *data):
            from restshell.errors import ToolError

            raise ToolError("jq failed", 5)

        rest = make_session(temp_dir, FakeTransport(), FakeTools(installed=("jq",), handlers={"jq": jq}))
        rest.mode("json")
        assert rest.sel(".a") is False
        assert "jq failed" in errors(rest)
        rest.close()


class TestRequests:
    def test_get_surfaces_output(self, session: RestSession, fake_transport: FakeTransport):
        seen = []
        session.on_output = seen.append
        fake_transport.queue(b"hello", status=200)
        assert session.get() is True
        assert output(session) == b"hello"
        assert seen == [b"hello"]
        assert session.resultcode() == 200
        assert session.resultcode_label() == "200"

    def test_stdout_policy(self, session: RestSession, fake_transport: FakeTransport):
        session.stdout_policy = lambda: False
        fake_transport.queue(b"quiet")
        session.get()
        assert output(session) == b""
        assert session.workspace.read_output() == b"quiet"

    def test_http_error_returns_false(self, session: RestSession, fake_transport: FakeTransport):
        fake_transport.queue(b"gone", status=410)
        assert session.delete() is False
        assert session.last_result.returncode == 22
        assert session.resultcode() == 410

    def test_resultcode_without_response(self, session: RestSession):
        assert session.resultcode() is None
        assert session.resultcode_label() == "---"

    def test_verbs(self, session: RestSession, fake_transport: FakeTransport):
        for verb in (session.get, session.head, session.post, session.put, session.patch, session.options, session.delete):
            verb()
        assert [d.method for d in fake_transport.sent] == [
            "GET",
            "HEAD",
            "POST",
            "PUT",
            "PATCH",
            "OPTIONS",
            "DELETE",
        ]

    def test_payload_policy_flags(self, session: RestSession, fake_transport: FakeTransport):
        session.workspace.payload.write_bytes(b"body")
        session.post()
        session.post(data=False)
        session.get()
        session.get(data=True)
        assert fake_transport.payloads == [b"body", None, None, b"body"]

    def test_target_is_one_shot(self, session: RestSession, fake_transport: FakeTransport):
        session.cq("/api")
        session.get("users")
        assert fake_transport.sent[0].url == "http://localhost/api/users"
        assert session.url() == "http://localhost/api"

    def test_piped_stdin_payload(self, temp_dir: Path):
        transport = FakeTransport()
        rest = make_session(temp_dir, transport, FakeTools(), stdin=io.BytesIO(b"from pipe"))
        rest.post()
        assert transport.payloads == [b"from pipe"]
        rest.close()

    def test_load_and_use(self, session: RestSession, temp_dir: Path, fake_transport: FakeTransport):
        body = temp_dir / "body.txt"
        body.write_bytes(b"loaded")
        assert session.load(str(body)) is True
        session.put()
        own = temp_dir / "own.txt"
        own.write_bytes(b"in place")
        assert session.use(str(own)) is True
        session.put()
        assert fake_transport.payloads == [b"loaded", b"in place"]

    def test_load_missing_file(self, session: RestSession):
        assert session.load("/nonexistent/file") is False
        assert "no such file" in errors(session)

    def test_load_from_stdin(self, temp_dir: Path):
        rest = make_session(temp_dir, FakeTransport(), FakeTools(), stdin=io.BytesIO(b"typed"))
        rest.load()
        assert rest.workspace.payload.read_bytes() == b"typed"
        rest.close()

    def test_use_requires_file(self, session: RestSession):
        assert session.use() is False
        assert "Usage: use <file>" in errors(session)

    def test_unreadable_payload_fails_the_request(
        self, session: RestSession, temp_dir: Path, fake_transport: FakeTransport
    ):
        session.use(str(temp_dir / "gone.json"))
        assert session.post() is False
        assert "No such file or directory" in errors(session)
        assert fake_transport.sent == []
        assert session.get() is True

    def test_files(self, session: RestSession):
        session.files()
        text = printed(session)
        assert f"Payload: {session.workspace.payload}" in text
        assert f"Output: {session.workspace.output}" in text
        assert f"HTTP Status: {session.workspace.header}" in text


class TestHistoryCommands:
    def test_back_forward_surface_output(self, session: RestSession, fake_transport: FakeTransport):
        for body in (b"one\n", b"two\n"):
            fake_transport.queue(body)
            session.get()
        seen = []
        session.on_output = seen.append
        assert session.back() is True
        assert session.workspace.read_output() == b"one\n"
        assert session.history_label() == "1/2"
        assert session.forward() is True
        assert seen == [b"one\n", b"two\n"]
        assert session.history_label() == ""

    def test_out_of_range(self, session: RestSession):
        assert session.back() is False
        assert "No previous output" in errors(session)
        assert session.forward() is False
        assert "No later output" in errors(session)

    def test_first_and_last(self, session: RestSession, fake_transport: FakeTransport):
        for body in (b"a", b"b", b"c"):
            fake_transport.queue(body)
            session.get()
        session.first()
        assert session.workspace.read_output() == b"a"
        session.last()
        assert session.workspace.read_output() == b"c"
        session.last(1)
        assert session.workspace.read_output() == b"b"


class TestLifecycle:
    def test_default_settings(self, temp_dir: Path, monkeypatch):
        monkeypatch.setenv("RESTSHELL_SSL_INSECURE", "yes")
        rest = make_session(temp_dir, FakeTransport(), FakeTools(), apply_defaults=True)
        assert rest.modes.active == "json"
        assert rest.option_store.ssl_insecure is True
        assert rest.option_store.cookie_jar == rest.workspace.cookie_jar
        rest.close()

    def test_close_switches_to_none_and_cleans_up(self, temp_dir: Path):
        rest = make_session(temp_dir, FakeTransport(), FakeTools())
        rest.mode("plain")
        root = rest.workspace.root
        rest.close()
        assert rest.modes.active == "none"
        assert not root.exists()
        rest.close()

    def test_context_manager(self, temp_dir: Path):
        with make_session(temp_dir, FakeTransport(), FakeTools()) as rest:
            root = rest.workspace.root
        assert not root.exists()
