"""Tests for evolution_lookup.pipeline module."""

import json
from unittest.mock import Mock

import pytest

from evolution_lookup.config import AppConfig
from evolution_lookup.errors import DecodeError, FetchError
from evolution_lookup.pipeline import build_items, render_lookup, run_lookup


class TestBuildItems:
    def test_formats_matches_in_rank_order(self, feed_bytes) -> None:
        items = build_items("actor isolation", feed_bytes, AppConfig())
        assert [item.label for item in items] == ["SE-0401", "SE-0313"]
        assert items[1].badge == "Accepted with Revisions"

    def test_uses_configured_base_url_and_icon(self, feed_bytes) -> None:
        config = AppConfig(proposals_base_url="https://mirror.example/proposals/", icon="Mirror")
        (item,) = build_items("306", feed_bytes, config)
        assert item.url == "https://mirror.example/proposals/0306-actors.md"
        assert item.icon == "Mirror"

    def test_decode_failure_propagates(self) -> None:
        with pytest.raises(DecodeError):
            build_items("", b"not json", AppConfig())


class TestRunLookup:
    def test_fetch_failure_becomes_error_item(self) -> None:
        fetch = Mock(side_effect=FetchError("Could not fetch proposals feed: offline"))
        items = run_lookup("actor", fetch, AppConfig())
        assert len(items) == 1
        assert items[0].title == "Error: Could not fetch proposals feed: offline"
        assert "FetchError" in items[0].subtitle

    def test_no_match_is_empty_not_error(self, feed_bytes) -> None:
        assert run_lookup("zzz", lambda: feed_bytes, AppConfig()) == []


class TestRenderLookup:
    def test_invalid_json_yields_single_error_item(self) -> None:
        document = render_lookup("actor", b"{not json")
        items = json.loads(document)
        assert len(items) == 1
        assert items[0]["title"].startswith("Error:")
        assert list(items[0]) == sorted(items[0])
        assert set(items[0]) == {"title", "subtitle"}

    def test_schema_mismatch_yields_single_error_item(self) -> None:
        items = json.loads(render_lookup("", b'[{"id": "SE-0001"}]'))
        assert len(items) == 1
        assert items[0]["title"].startswith("Error:")
        assert "link" in items[0]["subtitle"]

    def test_empty_query_lists_everything(self, feed_bytes) -> None:
        items = json.loads(render_lookup("", feed_bytes))
        assert len(items) == 8
        assert items[0]["title"] == "SE-0430: `sending` parameter and result values"
        assert items[-1]["label"] == "other-draft"
        assert items[-1]["badge"] == "Unknown status: .somethingNew"

    def test_output_is_reproducible(self, feed_bytes) -> None:
        assert render_lookup("actor", feed_bytes) == render_lookup("actor", feed_bytes)
        assert render_lookup("", b"oops") == render_lookup("", b"oops")
