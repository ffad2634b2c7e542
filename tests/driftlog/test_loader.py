"""Tests for loading drift log JSON."""

import json
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import httpx

from driftlog.loader import load_entries, load_from_file, load_from_url, parse_document, parse_entry


class TestParseEntry:
    def test_flattens_nested_record(self, raw_document):
        entry = parse_entry(raw_document["resonance_drift_log"][1])
        assert entry.id == "e2"
        assert entry.user_id == "user-a"
        assert entry.created_at == datetime(2024, 3, 6, 10, tzinfo=timezone.utc)
        assert entry.is_final is True
        assert entry.mood_label == "Serene"
        assert entry.field_hz == 528.0
        assert entry.field_name == "Heart Field"
        assert entry.bloom_phase == 2
        assert entry.bloom_petal == "rose"
        assert entry.constellation == "Lyra"
        assert entry.status_code == "journey_complete"
        assert entry.input_desire == "to feel grounded"


class TestParseDocument:
    def test_all_records(self, raw_document):
        assert len(parse_document(raw_document)) == 3

    def test_skips_malformed_record(self, raw_document):
        records = raw_document["resonance_drift_log"]
        del records[0]["creation"]
        records.append("not a record")
        entries = parse_document(raw_document)
        assert [e.id for e in entries] == ["e2", "e3"]

    def test_skips_bad_timestamp(self, raw_document):
        raw_document["resonance_drift_log"][2]["created_at"] = "someday"
        assert [e.id for e in parse_document(raw_document)] == ["e1", "e2"]

    def test_missing_key(self):
        assert parse_document({"other": []}) == []

    def test_not_a_dict(self):
        assert parse_document([1, 2, 3]) == []

    def test_custom_key(self, raw_document):
        doc = {"logs": raw_document["resonance_drift_log"]}
        assert len(parse_document(doc, key="logs")) == 3

    def test_skips_non_finite_phase(self, raw_document):
        """A phase of Infinity (valid JSON to Python) drops only that record."""
        raw_document["resonance_drift_log"][0]["creation"]["bloom_phase"] = float("inf")
        assert [e.id for e in parse_document(raw_document)] == ["e2", "e3"]

    def test_non_finite_phase_from_file(self, tmp_path, raw_document):
        text = json.dumps(raw_document).replace('"bloom_phase": 1', '"bloom_phase": Infinity', 1)
        path = tmp_path / "inf.json"
        path.write_text(text)
        assert len(load_from_file(path)) == 2


class TestLoadFromFile:
    def test_loads(self, data_file):
        entries = load_from_file(data_file)
        assert [e.id for e in entries] == ["e1", "e2", "e3"]

    def test_missing_file_is_empty(self, tmp_path):
        assert load_from_file(tmp_path / "missing.json") == []

    def test_invalid_json_is_empty(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        assert load_from_file(path) == []

    def test_invalid_utf8_is_empty(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b"\xff\xfe{}")
        assert load_from_file(path) == []
        assert load_entries(path=path) == []


class TestLoadFromUrl:
    def _client(self, response=None, error=None):
        client = MagicMock()
        client.__enter__.return_value = client
        if error is not None:
            client.get.side_effect = error
        else:
            client.get.return_value = response
        return client

    def test_loads(self, raw_document):
        response = MagicMock()
        response.json.return_value = raw_document
        client = self._client(response=response)
        with patch("driftlog.loader.httpx.Client", return_value=client):
            entries = load_from_url("https://example.com/mock_data.json")
        assert len(entries) == 3
        client.get.assert_called_once_with("https://example.com/mock_data.json")

    def test_http_error_is_empty(self):
        request = httpx.Request("GET", "https://example.com/mock_data.json")
        response = MagicMock()
        response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "404", request=request, response=httpx.Response(404, request=request)
        )
        client = self._client(response=response)
        with patch("driftlog.loader.httpx.Client", return_value=client):
            assert load_from_url("https://example.com/mock_data.json") == []

    def test_connect_error_retries_then_empty(self):
        client = self._client(error=httpx.ConnectError("refused"))
        with patch("driftlog.loader.httpx.Client", return_value=client):
            entries = load_from_url(
                "https://example.com/mock_data.json", max_attempts=2, min_wait=0, max_wait=0
            )
        assert entries == []
        assert client.get.call_count == 2

    def test_bad_json_is_empty(self):
        response = MagicMock()
        response.json.side_effect = json.JSONDecodeError("bad", "", 0)
        client = self._client(response=response)
        with patch("driftlog.loader.httpx.Client", return_value=client):
            assert load_from_url("https://example.com/mock_data.json") == []

    def test_undecodable_body_is_empty(self):
        response = MagicMock()
        response.json.side_effect = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        client = self._client(response=response)
        with patch("driftlog.loader.httpx.Client", return_value=client):
            assert load_from_url("https://example.com/mock_data.json") == []


class TestLoadEntries:
    def test_path(self, data_file):
        assert len(load_entries(path=data_file)) == 3

    def test_url_takes_precedence(self, data_file):
        with patch("driftlog.loader.load_from_url", return_value=[]) as from_url:
            assert load_entries(path=data_file, url="https://example.com/x.json") == []
        from_url.assert_called_once()

    def test_no_source(self):
        assert load_entries() == []
