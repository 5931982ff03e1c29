"""Tests for the endpoint grouping step."""

from __future__ import annotations

import pytest

from harsdk.commands.generate.steps import StepValidationError
from harsdk.commands.generate.steps.group_endpoints import (
    GroupEndpointsStep,
    group_entries,
    is_absolute_url,
    looks_like_id,
    resource_name,
)
from harsdk.commands.generate.steps.types import EndpointGroup
from tests.conftest import make_entry


class TestResourceName:
    def test_last_segment(self):
        assert resource_name("https://x.com/api/users") == "users"

    def test_trailing_slash_and_query(self):
        assert resource_name("https://x.com/api/users/?page=2") == "users"

    def test_no_path_is_root(self):
        assert resource_name("https://x.com") == "root"
        assert resource_name("https://x.com/") == "root"

    def test_numeric_id_skipped(self):
        assert resource_name("https://x.com/users/42") == "users"

    def test_uuid_skipped(self):
        url = "https://x.com/users/550e8400-e29b-41d4-a716-446655440000"
        assert resource_name(url) == "users"

    def test_hex_hash_skipped(self):
        assert resource_name("https://x.com/files/deadbeefdeadbeefdeadbeef") == "files"

    def test_only_ids_is_root(self):
        assert resource_name("https://x.com/123/456") == "root"

    def test_nested_resource_after_id(self):
        assert resource_name("https://x.com/users/42/orders") == "orders"


class TestLooksLikeId:
    def test_ids(self):
        assert looks_like_id("123")
        assert looks_like_id("550e8400-e29b-41d4-a716-446655440000")
        assert looks_like_id("user-550e8400-e29b-41d4-a716-446655440000")
        assert looks_like_id("0123456789abcdef0123")

    def test_names(self):
        assert not looks_like_id("users")
        assert not looks_like_id("v2")
        assert not looks_like_id("cafe")


class TestIsAbsoluteUrl:
    def test_absolute(self):
        assert is_absolute_url("https://api.example.com/users")
        assert is_absolute_url("http://localhost:8080")

    def test_not_absolute(self):
        assert not is_absolute_url("/api/users")
        assert not is_absolute_url("users")
        assert not is_absolute_url("data:text/plain,hello")
        assert not is_absolute_url("")

    def test_malformed_host(self):
        assert not is_absolute_url("http://[bad/x")


class TestGroupEntries:
    def test_first_seen_order(self):
        entries = [
            make_entry("GET", "https://api.example.com/users/1"),
            make_entry("POST", "https://api.example.com/orders"),
            make_entry("GET", "https://api.example.com/users/2"),
            make_entry("GET", "https://api.example.com/"),
        ]
        groups = group_entries(entries)
        assert list(groups) == ["GET_users", "POST_orders", "GET_root"]
        assert groups["GET_users"].entries == [entries[0], entries[2]]

    def test_relative_urls_dropped(self):
        entries = [
            make_entry("GET", "/api/local"),
            make_entry("GET", "https://api.example.com/users"),
        ]
        groups = group_entries(entries)
        assert list(groups) == ["GET_users"]
        assert len(groups["GET_users"].entries) == 1

    def test_method_case_insensitive(self):
        entries = [
            make_entry("get", "https://api.example.com/users"),
            make_entry("GET", "https://api.example.com/users"),
        ]
        groups = group_entries(entries)
        assert list(groups) == ["GET_users"]
        assert groups["GET_users"].method == "GET"

    def test_methods_split_groups(self):
        entries = [
            make_entry("GET", "https://api.example.com/users"),
            make_entry("POST", "https://api.example.com/users"),
        ]
        assert list(group_entries(entries)) == ["GET_users", "POST_users"]

    def test_hosts_share_resource(self):
        entries = [
            make_entry("GET", "https://a.example.com/users"),
            make_entry("GET", "https://b.example.com/users"),
        ]
        groups = group_entries(entries)
        assert len(groups["GET_users"].entries) == 2

    def test_unparseable_url_dropped(self):
        entries = [
            make_entry("GET", "http://[bad/x"),
            make_entry("GET", "https://api.example.com/users"),
        ]
        assert list(group_entries(entries)) == ["GET_users"]

    def test_empty(self):
        assert group_entries([]) == {}


class TestGroupEndpointsStep:
    def test_run(self):
        entries = [
            make_entry("GET", "https://api.example.com/users/1"),
            make_entry("GET", "https://api.example.com/users/2"),
        ]
        groups = GroupEndpointsStep().run(entries)
        assert [g.key for g in groups] == ["GET_users"]

    def test_rejects_duplicate_keys(self):
        entry = make_entry("GET", "https://api.example.com/users")
        groups = [
            EndpointGroup(method="GET", resource="users", entries=[entry]),
            EndpointGroup(method="GET", resource="users", entries=[entry]),
        ]
        with pytest.raises(StepValidationError, match="Duplicate"):
            GroupEndpointsStep()._validate_output(groups)

    def test_rejects_empty_group(self):
        with pytest.raises(StepValidationError, match="Empty"):
            GroupEndpointsStep()._validate_output(
                [EndpointGroup(method="GET", resource="users")]
            )
