"""Shared test fixtures for drift-insights."""

import json
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from driftlog.models import LogEntry  # noqa: E402

BASE_TIME = datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_entry():
    """Factory for LogEntry with sensible defaults."""
    counter = {"n": 0}

    def _make(**overrides) -> LogEntry:
        counter["n"] += 1
        fields = {
            "id": f"entry-{counter['n']}",
            "user_id": "user-a",
            "created_at": BASE_TIME + timedelta(hours=counter["n"]),
            "is_final": False,
            "mood_label": "Contemplative",
            "conflict_intensity": 0.5,
            "field_hz": 432.0,
            "bloom_phase": 1,
            "constellation": "Lyra",
            "status_code": "compliant",
        }
        fields.update(overrides)
        return LogEntry(**fields)

    return _make


@pytest.fixture
def sample_entries(make_entry):
    """Two users, out of chronological order."""
    return [
        make_entry(
            user_id="user-a",
            created_at=BASE_TIME + timedelta(days=2),
            mood_label="Serene",
            field_hz=528.0,
            bloom_phase=2,
            is_final=True,
            status_code="journey_complete",
        ),
        make_entry(
            user_id="user-b",
            created_at=BASE_TIME,
            mood_label="Anxious",
            conflict_intensity=0.9,
            field_hz=396.0,
            constellation="Orion",
            status_code="pending_review",
        ),
        make_entry(
            user_id="user-a",
            created_at=BASE_TIME,
            mood_label="Curious",
            conflict_intensity=0.3,
            field_hz=417.0,
        ),
        make_entry(
            user_id="user-a",
            created_at=BASE_TIME + timedelta(days=1),
            mood_label="Curious",
            conflict_intensity=0.6,
            field_hz=432.0,
            bloom_phase=2,
        ),
    ]


def _raw_record(entry_id, user_id, created_at, mood, hz, phase, final=False, status="compliant"):
    return {
        "id": entry_id,
        "user_id": user_id,
        "created_at": created_at,
        "final_payload": final,
        "creation": {
            "input_desire": "to feel grounded",
            "mood_label": mood,
            "conflict_intensity": 0.4,
            "field": {"name": "Heart Field", "hz": hz},
            "bloom_phase": phase,
            "bloom_petal": "rose",
            "equation": {"formula": "x", "description": "y"},
        },
        "law_portion": {"status": status, "rules_applied": [], "contract_scan": "clear"},
        "bloom_render": {"petal": "rose", "animation": "unfold"},
        "celestium_mapping": {"constellation": "Lyra"},
        "mirror_dna": {"dna_string": "ACGT"},
    }


@pytest.fixture
def raw_document():
    """Nested drift log JSON document as served to the dashboard."""
    return {
        "resonance_drift_log": [
            _raw_record("e1", "user-a", "2024-03-05T10:00:00Z", "Curious", 417, 1),
            _raw_record("e2", "user-a", "2024-03-06T10:00:00Z", "Serene", 528, 2, final=True,
                        status="journey_complete"),
            _raw_record("e3", "user-b", "2024-03-05T08:00:00+00:00", "Anxious", 396, 1,
                        status="pending_review"),
        ]
    }


@pytest.fixture
def data_file(tmp_path, raw_document):
    path = tmp_path / "mock_data.json"
    path.write_text(json.dumps(raw_document))
    return path
