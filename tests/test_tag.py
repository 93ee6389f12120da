"""Tests for annotation parsing and environment key normalization."""

from __future__ import annotations

import pytest

from confnode.tag import normalize_env_key, parse_tag


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("simple", "SIMPLE"),
        ("with%symbol", "WITH_SYMBOL"),
        ("with%two%%symbols", "WITH_TWO_SYMBOLS"),
        ("_trim_", "TRIM"),
        ("app.http-server__port", "APP_HTTP_SERVER_PORT"),
        ("", ""),
    ],
)
def test_normalize_env_key(raw: str, expected: str) -> None:
    assert normalize_env_key(raw) == expected


def test_normalize_env_key_idempotent() -> None:
    once = normalize_env_key("--db..host--")
    assert once == "DB_HOST"
    assert normalize_env_key(once) == once


def test_parse_recognised_keys() -> None:
    tag = parse_tag('yaml:"listen_port" default:"8080" env:"app.port" required')
    assert tag.key == "listen_port"
    assert tag.default == "8080"
    assert tag.env == "APP_PORT"
    assert tag.required is True


def test_parse_empty_tag() -> None:
    tag = parse_tag("")
    assert tag.key == ""
    assert tag.default == ""
    assert tag.env == ""
    assert tag.required is False
    assert tag.store == {}


def test_unknown_keys_are_stored() -> None:
    tag = parse_tag('json:"name" custom flag:"on"')
    assert tag.get("json") == "name"
    assert tag.has("custom")
    assert tag.get("custom") == ""
    assert tag.get("flag") == "on"
    assert tag.get("missing") == ""
    assert tag.key == ""


def test_value_split_on_first_colon() -> None:
    tag = parse_tag('default:"http://localhost:8080"')
    assert tag.default == "http://localhost:8080"


def test_only_outer_quotes_stripped() -> None:
    tag = parse_tag('default:"a"b"')
    assert tag.default == 'a"b'


def test_unquoted_value_and_repeated_separators() -> None:
    tag = parse_tag("default:5  yaml:port")
    assert tag.default == "5"
    assert tag.key == "port"


def test_required_with_value_still_counts() -> None:
    assert parse_tag('required:"false"').required is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("straße", "STRA_E"), ("café", "CAF"), ("Ωmega_1", "MEGA_1")],
)
def test_normalize_env_key_non_ascii_letters(raw: str, expected: str) -> None:
    assert normalize_env_key(raw) == expected
