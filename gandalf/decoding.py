"""
Decoding of Gandalf response bodies into transfer objects.

Log payloads are matched case-insensitively: the server has used both
"Ref" and "ref" style keys over time. Null fields decode to their empty
value, fields of the wrong JSON type raise DecodeError.
"""

import json
from datetime import datetime
from typing import Any

from gandalf.exceptions import DecodeError
from gandalf.types.gittime import parse_git_time
from gandalf.types.repositories import Author, Commit, Log, Repository


def decode_json(raw: bytes | str) -> Any:
    """
    Decode a JSON response body.

    Raises:
        DecodeError: If the body is not valid JSON
    """
    try:
        return json.loads(raw)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def _get(data: dict[str, Any], key: str, default: Any = None) -> Any:
    """Get value from dict, trying the exact key first then a case-insensitive match."""
    if key in data:
        return data[key]
    lowered = key.lower()
    for name, value in data.items():
        if name.lower() == lowered:
            return value
    return default


def _type_name(value: Any) -> str:
    return type(value).__name__


def _expect_dict(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise DecodeError(f"expected {what} object, got {_type_name(value)}")
    return value


def _str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DecodeError(f"field {field!r}: expected string, got {_type_name(value)}")
    return value


def _bool(value: Any, field: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise DecodeError(f"field {field!r}: expected boolean, got {_type_name(value)}")
    return value


def _list(value: Any, field: str) -> list[Any]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise DecodeError(f"field {field!r}: expected array, got {_type_name(value)}")
    return value


def _str_list(value: Any, field: str) -> list[str]:
    return [_str_item(item, field) for item in _list(value, field)]


def _str_item(item: Any, field: str) -> str:
    if not isinstance(item, str):
        raise DecodeError(f"field {field!r}: expected array of strings, got {_type_name(item)} item")
    return item


def _time(value: Any, field: str) -> datetime | None:
    if value is not None and not isinstance(value, str):
        raise DecodeError(f"field {field!r}: expected time string, got {_type_name(value)}")
    try:
        return parse_git_time(value)
    except ValueError as e:
        raise DecodeError(str(e)) from e


def parse_repository(raw: bytes | str) -> Repository:
    """Decode the body returned by GET /repository/{name}."""
    data = _expect_dict(decode_json(raw), "repository")
    return Repository(
        name=_str(data.get("name"), "name"),
        users=_str_list(data.get("users"), "users"),
        is_public=_bool(data.get("ispublic"), "ispublic"),
        ssh_url=_str(data.get("ssh_url"), "ssh_url"),
        git_url=_str(data.get("git_url"), "git_url"),
    )


def parse_author(data: Any) -> Author:
    """Decode an author or committer entry."""
    if data is None:
        data = {}
    data = _expect_dict(data, "author")
    return Author(
        name=_str(_get(data, "Name"), "name"),
        email=_str(_get(data, "Email"), "email"),
        date=_time(_get(data, "Date"), "date"),
    )


def parse_commit(data: Any) -> Commit:
    """Decode a single commit of a log page."""
    data = _expect_dict(data, "commit")
    return Commit(
        ref=_str(_get(data, "Ref"), "ref"),
        author=parse_author(_get(data, "Author")),
        committer=parse_author(_get(data, "Committer")),
        subject=_str(_get(data, "Subject"), "subject"),
        created_at=_time(_get(data, "CreatedAt"), "createdAt"),
        parent=_str_list(_get(data, "Parent"), "parent"),
    )


def parse_log(raw: bytes | str) -> Log:
    """Decode the body returned by GET /repository/{name}/logs."""
    data = _expect_dict(decode_json(raw), "log")
    return Log(
        commits=[parse_commit(commit) for commit in _list(_get(data, "Commits"), "commits")],
        next=_str(_get(data, "Next"), "next"),
    )


def parse_keys(raw: bytes | str) -> dict[str, str]:
    """Decode the body returned by GET /user/{name}/keys."""
    data = decode_json(raw)
    if data is None:
        return {}
    data = _expect_dict(data, "keys")
    for name, key in data.items():
        if not isinstance(key, str):
            raise DecodeError(f"key {name!r} is not a string")
    return dict(data)
