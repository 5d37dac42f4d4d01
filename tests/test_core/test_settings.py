"""Tests for Slack settings parsing and normalization (settings.py)."""

import pytest

from build_notifier.settings import (
    ChannelList,
    ChannelString,
    StructuredSettings,
    normalize_settings,
    parse_slack_settings,
)
from build_notifier.types import DEFAULT_STATUSES, BuildStatus


# parse_slack_settings

class TestParseSlackSettings:
    def test_string_becomes_channel_string(self):
        assert parse_slack_settings("#general") == ChannelString("#general")

    def test_list_becomes_channel_list(self):
        assert parse_slack_settings(["#a", "#b"]) == ChannelList(("#a", "#b"))

    def test_object_becomes_structured(self):
        parsed = parse_slack_settings({
            "channels": ["#a"],
            "statuses": ["SUCCESS", "ABORTED"],
            "minimized": True,
        })
        assert parsed == StructuredSettings(
            channels=("#a",),
            statuses=frozenset({BuildStatus.SUCCESS, BuildStatus.ABORTED}),
            minimized=True,
        )

    def test_object_with_only_channels(self):
        parsed = parse_slack_settings({"channels": ["#a"]})
        assert parsed.statuses is None
        assert parsed.minimized is None

    @pytest.mark.parametrize("value", [
        "",
        [],
        ["#a", ""],
        ["#a", 3],
        42,
        None,
        True,
        {"channels": []},
        {"channels": "#a"},
        {"statuses": ["FAILURE"]},
        {"channels": ["#a"], "statuses": ["BROKEN"]},
        {"channels": ["#a"], "statuses": "FAILURE"},
        {"channels": ["#a"], "minimized": "yes"},
        {"channels": ["#a"], "color": "red"},
    ])
    def test_rejects_malformed_values(self, value):
        assert parse_slack_settings(value) is None


# normalize_settings

class TestNormalizeSettings:
    def test_string_wraps_single_channel(self):
        settings = normalize_settings(parse_slack_settings("#general"))
        assert settings.channels == ("#general",)
        assert settings.statuses == frozenset({BuildStatus.FAILURE})
        assert settings.minimized is False

    def test_list_keeps_channel_order(self):
        settings = normalize_settings(parse_slack_settings(["#b", "#a", "#c"]))
        assert settings.channels == ("#b", "#a", "#c")
        assert settings.statuses == DEFAULT_STATUSES
        assert settings.minimized is False

    def test_structured_defaults_statuses(self):
        settings = normalize_settings(parse_slack_settings({
            "channels": ["#a", "#b"],
            "minimized": True,
        }))
        assert settings.channels == ("#a", "#b")
        assert settings.statuses == DEFAULT_STATUSES
        assert settings.minimized is True

    def test_structured_defaults_minimized(self):
        settings = normalize_settings(parse_slack_settings({
            "channels": ["#a"],
            "statuses": ["SUCCESS"],
        }))
        assert settings.statuses == frozenset({BuildStatus.SUCCESS})
        assert settings.minimized is False

    def test_structured_empty_statuses_stay_empty(self):
        settings = normalize_settings(parse_slack_settings({
            "channels": ["#a"],
            "statuses": [],
        }))
        assert settings.statuses == frozenset()
        for status in BuildStatus:
            assert not settings.should_notify(status)

    def test_does_not_mutate_input(self):
        raw = {"channels": ["#a"]}
        normalize_settings(parse_slack_settings(raw))
        assert raw == {"channels": ["#a"]}
