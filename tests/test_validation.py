"""Tests for model reply parsing and normalization."""

import json

import pytest

from profile_analyzer.analysis.validation import (
    ensure_meaningful,
    extract_json_payload,
    validate_analysis,
)
from profile_analyzer.errors import AnalysisParseFailed, EmptyAnalysis


class TestExtractJsonPayload:
    def test_plain_json(self):
        assert extract_json_payload('{"a": 1}') == {"a": 1}

    def test_code_fence(self):
        text = '```json\n{"a": {"b": [1, 2]}}\n```'
        assert extract_json_payload(text) == {"a": {"b": [1, 2]}}

    def test_surrounding_prose(self, model_payload):
        text = "Here is the analysis you asked for:\n" + json.dumps(model_payload) + "\nHope this helps!"
        assert extract_json_payload(text) == model_payload

    def test_no_object(self):
        with pytest.raises(AnalysisParseFailed):
            extract_json_payload("I cannot analyze this profile.")

    def test_empty(self):
        with pytest.raises(AnalysisParseFailed):
            extract_json_payload("")

    def test_broken_json_logs_raw_text(self, caplog):
        with caplog.at_level("ERROR", logger="profile_analyzer.analysis.validation"):
            with pytest.raises(AnalysisParseFailed):
                extract_json_payload('{"score": 80, "strengths": [}')
        assert '"strengths": [' in caplog.text


class TestValidateAnalysis:
    def test_full_payload(self, model_payload, profile_record):
        result = validate_analysis(model_payload, profile_record)
        assert result.profile_overview.score == 78
        assert result.profile_overview.market_fit == 82
        assert result.profile_overview.hourly_rate.recommended == "$55-65/hr"
        assert result.profile_overview.hourly_rate.market_average == 52.5
        assert result.bio_analysis.recommended_length == "150-250 words"
        assert result.bio_analysis.strengths == ["Clear niche", "Mentions outcomes"]
        assert result.improvements.quick_wins[0].actions == ["Add Playwright", "Add Pandas"]
        assert result.improvements.long_term.days_90_plus == ["Target enterprise clients"]
        assert result.is_meaningful

    def test_current_bio_comes_from_profile(self, model_payload, profile_record):
        result = validate_analysis(model_payload, profile_record)
        assert result.bio_analysis.current_bio == profile_record.basic_info.bio
        assert result.bio_analysis.word_count == 10

    def test_metrics_recomputed_from_profile(self, model_payload, profile_record):
        result = validate_analysis(model_payload, profile_record)
        assert result.profile_overview.job_success_score == 98
        assert result.profile_overview.hourly_rate.current == 45

    def test_unavailable_rate_is_zero(self, model_payload, profile_record):
        profile_record.metrics.hourly_rate = "N/A"
        result = validate_analysis(model_payload, profile_record)
        assert result.profile_overview.hourly_rate.current == 0

    def test_empty_payload_gets_defaults(self, profile_record):
        result = validate_analysis({}, profile_record)
        data = result.to_dict()
        assert data["profile_overview"]["score"] == 0
        assert data["profile_overview"]["hourly_rate"]["recommended"] == "0-0"
        assert data["bio_analysis"]["strengths"] == []
        assert data["bio_analysis"]["improvement_suggestions"]["opening_hook"] == {
            "current": "", "recommended": "", "reason": "",
        }
        assert data["improvements"]["high_priority"] == []
        assert data["improvements"]["long_term"] == {
            "30_days": [], "60_90_days": [], "90_plus_days": [],
        }
        assert not result.is_meaningful

    def test_wrong_types_coerced(self, profile_record):
        payload = {
            "profile_overview": {"score": "excellent", "market_fit": None, "hourly_rate": "lots"},
            "bio_analysis": {
                "strengths": "not a list",
                "weaknesses": ["Too short", None, {"nested": True}, 3, "  "],
                "improvement_suggestions": {"opening_hook": "just a string"},
            },
            "improvements": {
                "high_priority": ["plain string", {"area": "Rate", "impact": 5}],
                "quick_wins": [{"title": "Photo", "actions": "upload"}],
                "long_term": [],
            },
        }
        result = validate_analysis(payload, profile_record)
        assert result.profile_overview.score == 0
        assert result.profile_overview.market_fit == 0
        assert result.profile_overview.hourly_rate.market_average == 0
        assert result.bio_analysis.strengths == []
        assert result.bio_analysis.weaknesses == ["Too short", "3"]
        assert result.bio_analysis.improvement_suggestions.opening_hook.recommended == ""
        assert len(result.improvements.high_priority) == 1
        assert result.improvements.high_priority[0].area == "Rate"
        assert result.improvements.high_priority[0].impact == "5"
        assert result.improvements.high_priority[0].current == ""
        assert result.improvements.quick_wins[0].actions == []
        assert result.improvements.long_term.days_30 == []

    def test_scores_clamped_to_range(self, model_payload, profile_record):
        model_payload["profile_overview"]["score"] = 250
        model_payload["profile_overview"]["market_fit"] = -40
        model_payload["bio_analysis"]["score"] = "1000"
        result = validate_analysis(model_payload, profile_record)
        assert result.profile_overview.score == 100
        assert result.profile_overview.market_fit == 0
        assert result.bio_analysis.score == 100

    def test_in_range_scores_kept(self, model_payload, profile_record):
        model_payload["profile_overview"]["score"] = 0
        model_payload["profile_overview"]["market_fit"] = 100
        model_payload["bio_analysis"]["score"] = 55.5
        result = validate_analysis(model_payload, profile_record)
        assert result.profile_overview.score == 0
        assert result.profile_overview.market_fit == 100
        assert result.bio_analysis.score == 55.5


class TestEnsureMeaningful:
    def test_meaningful_passes(self, model_payload, profile_record):
        result = validate_analysis(model_payload, profile_record)
        assert ensure_meaningful(result) is result

    def test_missing_weaknesses_rejected(self, model_payload, profile_record):
        del model_payload["bio_analysis"]["weaknesses"]
        result = validate_analysis(model_payload, profile_record)
        assert result.bio_analysis.weaknesses == []
        with pytest.raises(EmptyAnalysis):
            ensure_meaningful(result)

    @pytest.mark.parametrize("section,key", [
        ("bio_analysis", "strengths"),
        ("improvements", "high_priority"),
        ("improvements", "quick_wins"),
    ])
    def test_each_key_list_required(self, model_payload, profile_record, section, key):
        model_payload[section][key] = []
        with pytest.raises(EmptyAnalysis):
            ensure_meaningful(validate_analysis(model_payload, profile_record))

    def test_empty_30_day_bucket_rejected(self, model_payload, profile_record):
        model_payload["improvements"]["long_term"]["30_days"] = []
        with pytest.raises(EmptyAnalysis):
            ensure_meaningful(validate_analysis(model_payload, profile_record))

    def test_later_buckets_optional(self, model_payload, profile_record):
        model_payload["improvements"]["long_term"]["60_90_days"] = []
        model_payload["improvements"]["long_term"]["90_plus_days"] = []
        ensure_meaningful(validate_analysis(model_payload, profile_record))
