"""Shared test fixtures for har-sdk tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from harsdk.formats.har import (
    HarContent,
    HarEntry,
    HarFile,
    HarHeader,
    HarLog,
    HarPostData,
    HarRequest,
    HarResponse,
)


def make_entry(
    method: str,
    url: str,
    request_body: str | None = None,
    response_body: str | None = None,
    request_mime: str | None = "application/json",
    response_mime: str | None = "application/json",
    headers: list[HarHeader] | None = None,
    response_encoding: str | None = None,
) -> HarEntry:
    """Helper to create a HarEntry with minimal boilerplate."""
    post_data = None
    if request_body is not None:
        post_data = HarPostData(mime_type=request_mime, text=request_body)
    content = None
    if response_body is not None:
        content = HarContent(
            mime_type=response_mime, text=response_body, encoding=response_encoding
        )
    return HarEntry(
        request=HarRequest(
            method=method, url=url, headers=headers or [], post_data=post_data
        ),
        response=HarResponse(status=200, content=content),
    )


def make_har(entries: list[HarEntry]) -> HarFile:
    return HarFile(log=HarLog(version="1.2", entries=entries))


def make_raw_entry(
    method: str, url: str, response_body: Any = None, request_body: Any = None
) -> dict[str, Any]:
    """Helper to create a HAR entry as it appears in a .har JSON file."""
    request: dict[str, Any] = {
        "method": method,
        "url": url,
        "httpVersion": "HTTP/1.1",
        "headers": [{"name": "Accept", "value": "application/json"}],
        "queryString": [],
        "cookies": [],
        "headersSize": -1,
        "bodySize": 0,
    }
    if request_body is not None:
        request["postData"] = {
            "mimeType": "application/json",
            "text": json.dumps(request_body),
        }
    response: dict[str, Any] = {
        "status": 200,
        "statusText": "OK",
        "headers": [{"name": "Content-Type", "value": "application/json"}],
        "content": {"size": 0, "mimeType": "application/json"},
    }
    if response_body is not None:
        response["content"]["text"] = json.dumps(response_body)
    return {
        "startedDateTime": "2026-02-13T15:30:00.000Z",
        "time": 100,
        "request": request,
        "response": response,
    }


@pytest.fixture
def users_entries() -> list[HarEntry]:
    """Two reads of the same collection with different IDs and one shape."""
    return [
        make_entry(
            "GET",
            "https://api.example.com/users/1",
            response_body=json.dumps({"id": 1, "name": "Alice"}),
        ),
        make_entry(
            "GET",
            "https://api.example.com/users/2",
            response_body=json.dumps({"id": 2, "name": "Bob"}),
        ),
    ]


@pytest.fixture
def sample_har_dict() -> dict[str, Any]:
    """A raw HAR document: two user reads, an order creation, a relative URL."""
    return {
        "log": {
            "version": "1.2",
            "creator": {"name": "Chrome", "version": "133.0"},
            "entries": [
                make_raw_entry(
                    "GET",
                    "https://api.example.com/users/1",
                    response_body={"id": 1, "name": "Alice"},
                ),
                make_raw_entry(
                    "GET",
                    "https://api.example.com/users/2",
                    response_body={"id": 2, "name": "Bob"},
                ),
                make_raw_entry(
                    "POST",
                    "https://api.example.com/orders",
                    request_body={"product_id": "p1", "quantity": 2},
                    response_body={"id": "o1", "status": "created"},
                ),
                make_raw_entry("GET", "/relative/only"),
            ],
        }
    }
