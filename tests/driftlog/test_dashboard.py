"""Tests for overview and profile snapshots."""

import json

import pytest

from driftlog.dashboard import build_overview, build_user_profile, to_dict


class TestBuildOverview:
    def test_totals(self, sample_entries):
        overview = build_overview(sample_entries)
        assert overview.total_entries == 4
        assert overview.total_users == 2
        assert {u.user_id for u in overview.users} == {"user-a", "user-b"}

    def test_search_keeps_total_users(self, sample_entries):
        overview = build_overview(sample_entries, search="orion")
        assert overview.total_users == 2
        assert [u.user_id for u in overview.users] == ["user-b"]

    def test_empty(self):
        overview = build_overview([])
        assert overview.total_entries == 0
        assert overview.users == ()


class TestBuildUserProfile:
    def test_unknown_user(self, sample_entries):
        assert build_user_profile(sample_entries, "nobody") is None

    def test_entries_chronological(self, sample_entries):
        p = build_user_profile(sample_entries, "user-a")
        stamps = [e.created_at for e in p.entries]
        assert stamps == sorted(stamps)
        assert p.latest_entry is p.entries[-1]
        assert p.latest_entry.mood_label == "Serene"

    def test_views_cover_all_entries(self, sample_entries):
        p = build_user_profile(sample_entries, "user-a")
        assert len(p.timeline) == 3
        assert sum(b.count for b in p.phases) == 3
        assert sum(b.count for b in p.frequencies) == 3
        assert sum(s.count for s in p.statuses) == 3

    def test_timeline_follows_chronology(self, sample_entries):
        p = build_user_profile(sample_entries, "user-a")
        assert [pt.mood for pt in p.timeline] == ["Curious", "Curious", "Serene"]

    def test_metrics(self, sample_entries):
        m = build_user_profile(sample_entries, "user-a").metrics
        assert m.completion_ratio == pytest.approx(100 / 3)
        assert m.mood_diversity == 2
        assert m.journey_duration_days == 2
        assert m.average_frequency == pytest.approx((417 + 432 + 528) / 3)


class TestToDict:
    def test_profile_is_json_serializable(self, sample_entries):
        data = to_dict(build_user_profile(sample_entries, "user-a"))
        text = json.dumps(data)
        assert '"user_id": "user-a"' in text
        assert isinstance(data["latest_entry"]["created_at"], str)
        assert data["phases"][0]["value"] == 25
        assert isinstance(data["frequencies"][0]["moods"], list)

    def test_status_counts_and_fill_serialize(self, sample_entries):
        data = to_dict(build_user_profile(sample_entries, "user-a"))
        text = json.dumps(data)
        assert sum(data["metrics"]["status_counts"].values()) == 3
        assert all(s["fill"].startswith("#") for s in data["statuses"])
        assert '"fill"' in text

    def test_rejects_non_dataclass(self):
        with pytest.raises(TypeError):
            to_dict({"a": 1})
