"""Tests for the request option store."""

import base64
from pathlib import Path

import pytest

from restshell.modules.options import (
    COOKIEJAR,
    SSL_INSECURE,
    USER_AGENT,
    OptionStore,
    basic_credentials,
    truth,
)


class TestTruth:
    @pytest.mark.parametrize("token", ["true", "TRUE", "On", "yes", "YES"])
    def test_true_tokens(self, token):
        assert truth(token) is True

    @pytest.mark.parametrize("token", ["false", "Off", "no", "NO"])
    def test_false_tokens(self, token):
        assert truth(token) is False

    @pytest.mark.parametrize("token", ["", "1", "maybe", "y"])
    def test_unrecognized(self, token):
        assert truth(token) is None


class TestHeaders:
    def test_set_and_get(self):
        store = OptionStore()
        store.set_header("Accept", "application/json")
        assert store.get_header("Accept") == "application/json"

    def test_missing_header_is_absent(self):
        assert OptionStore().get_header("Accept") is None

    def test_last_write_wins(self):
        store = OptionStore()
        store.set_header("X-A", "1")
        store.set_header("X-A", "2")
        assert store.get_header("X-A") == "2"
        assert list(store.fragments()) == [("-H", "X-A: 2")]

    def test_reset_moves_header_to_end(self):
        store = OptionStore()
        store.set_header("X-A", "1")
        store.set_header("X-B", "2")
        store.set_header("X-A", "3")
        assert [name for name, _ in store.list_headers()] == ["X-B", "X-A"]

    def test_clear_removes_key(self):
        store = OptionStore()
        store.set_header("Cookie", "a=b")
        store.clear_header("Cookie")
        assert store.get_header("Cookie") is None
        assert store.keys() == []

    def test_clear_missing_is_noop(self):
        store = OptionStore()
        store.clear_header("Nope")
        assert store.keys() == []

    def test_names_are_case_sensitive(self):
        store = OptionStore()
        store.set_header("accept", "a")
        store.set_header("Accept", "b")
        assert store.list_headers() == [("accept", "a"), ("Accept", "b")]

    def test_empty_value_is_kept(self):
        store = OptionStore()
        store.set_header("X-Empty", "")
        assert store.get_header("X-Empty") == ""
        assert list(store.fragments()) == [("-H", "X-Empty: ")]

    def test_list_headers_skips_flags(self):
        store = OptionStore()
        store.ssl_insecure = True
        store.set_header("Accept", "*/*")
        assert store.list_headers() == [("Accept", "*/*")]


class TestBasicAuth:
    def test_credentials(self):
        value = basic_credentials("user", "p|a:ss")
        assert value == "Basic " + base64.b64encode(b"user:p|a:ss").decode()

    def test_sets_authorization(self):
        store = OptionStore()
        store.set_basic_auth("alice", "secret")
        assert store.get_header("Authorization") == basic_credentials("alice", "secret")

    def test_empty_user_clears(self):
        store = OptionStore()
        store.set_header("Authorization", "Bearer x")
        store.set_basic_auth("", "ignored")
        assert store.get_header("Authorization") is None


class TestWellKnownOptions:
    def test_ssl_insecure(self):
        store = OptionStore()
        assert store.ssl_insecure is False
        store.ssl_insecure = True
        assert store.query_flag(SSL_INSECURE) == (("-k", None),)
        store.ssl_insecure = False
        assert store.query_flag(SSL_INSECURE) is None

    def test_cookie_jar(self, temp_dir: Path):
        store = OptionStore()
        jar = temp_dir / "jar"
        store.cookie_jar = jar
        assert store.cookie_jar == jar
        assert store.query_flag(COOKIEJAR) == (("-b", str(jar)), ("-c", str(jar)))
        store.cookie_jar = None
        assert store.cookie_jar is None

    def test_user_agent(self):
        store = OptionStore()
        assert store.user_agent is None
        store.user_agent = "agent/1"
        assert store.query_flag(USER_AGENT) == (("-A", "agent/1"),)
        store.user_agent = None
        assert store.user_agent is None

    def test_fragments_in_insertion_order(self, temp_dir: Path):
        store = OptionStore()
        store.set_header("Accept", "*/*")
        store.ssl_insecure = True
        store.cookie_jar = temp_dir / "jar"
        assert list(store.fragments()) == [
            ("-H", "Accept: */*"),
            ("-k", None),
            ("-b", str(temp_dir / "jar")),
            ("-c", str(temp_dir / "jar")),
        ]

    def test_generic_flag(self):
        store = OptionStore()
        store.set_flag("MAX_TIME", (("--max-time", "5"),))
        assert store.query_flag("MAX_TIME") == (("--max-time", "5"),)
        store.clear_flag("MAX_TIME")
        assert store.query_flag("MAX_TIME") is None
