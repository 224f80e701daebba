"""Tests for content generator data models."""

import pytest
from pydantic import ValidationError

from src.content_generator.models import (
    AudienceType,
    ContentRequest,
    ContentResult,
    ContentTone,
    ContentType,
    GeneratorConfig,
    LLMProvider,
    Variant,
    content_types_for,
)


class TestContentType:
    def test_six_content_types(self):
        assert len(ContentType) == 6

    def test_variants(self):
        assert content_types_for(Variant.ACADEMIC) == [
            ContentType.PROJECT_IDEAS,
            ContentType.PROJECT_REPORT,
            ContentType.ASSIGNMENT_SOLUTION,
        ]
        assert content_types_for(Variant.SOCIAL) == [
            ContentType.FACEBOOK_POST,
            ContentType.REEL_SCRIPT,
            ContentType.INSTAGRAM_CAPTION,
        ]

    def test_value_lookup(self):
        assert ContentType("Project Ideas") is ContentType.PROJECT_IDEAS


class TestContentRequest:
    def test_defaults(self):
        request = ContentRequest(topic="Cloud Computing")
        assert request.content_type == ContentType.PROJECT_IDEAS
        assert request.tone == ContentTone.PROFESSIONAL
        assert request.audience == AudienceType.STUDENTS
        assert request.additional_details == ""
        assert request.variant == Variant.ACADEMIC

    def test_topic_is_stripped(self):
        assert ContentRequest(topic="  IoT  ").topic == "IoT"

    @pytest.mark.parametrize("topic", ["", "   ", "\n"])
    def test_blank_topic_rejected(self, topic):
        with pytest.raises(ValidationError, match="Please enter a topic"):
            ContentRequest(topic=topic)

    def test_frozen(self):
        request = ContentRequest(topic="IoT")
        with pytest.raises(ValidationError):
            request.topic = "Other"

    def test_string_values_accepted(self):
        request = ContentRequest(
            topic="Reels",
            content_type="Reel Script",
            tone="Trendy",
            audience="Youth",
        )
        assert request.content_type == ContentType.REEL_SCRIPT
        assert request.variant == Variant.SOCIAL

    def test_tone_must_match_variant(self):
        with pytest.raises(ValidationError, match="Tone 'Funny'"):
            ContentRequest(topic="x", content_type=ContentType.PROJECT_REPORT, tone=ContentTone.FUNNY)

    def test_audience_must_match_variant(self):
        with pytest.raises(ValidationError, match="Audience 'Researchers'"):
            ContentRequest(
                topic="x",
                content_type=ContentType.FACEBOOK_POST,
                tone=ContentTone.FUNNY,
                audience=AudienceType.RESEARCHERS,
            )

    def test_word_count_positive(self):
        with pytest.raises(ValidationError):
            ContentRequest(
                topic="x",
                content_type=ContentType.FACEBOOK_POST,
                tone=ContentTone.FUNNY,
                audience=AudienceType.YOUTH,
                word_count=0,
            )


class TestContentResult:
    def _result(self, content_type: ContentType) -> ContentResult:
        return ContentResult(
            type=content_type,
            title="Title",
            content="Body<br>text",
            sections=["A"],
            keywords=["k"],
            tips=["t"],
            estimate="1,000 words",
        )

    def test_academic_display_keys(self):
        data = self._result(ContentType.PROJECT_IDEAS).to_display_dict()
        assert data["type"] == "Project Ideas"
        assert data["tips"] == ["t"]
        assert data["estimatedLength"] == "1,000 words"
        assert "engagementTips" not in data

    def test_social_display_keys(self):
        data = self._result(ContentType.INSTAGRAM_CAPTION).to_display_dict()
        assert data["engagementTips"] == ["t"]
        assert data["estimatedReach"] == "1,000 words"
        assert "tips" not in data
        assert data["content"] == "Body<br>text"

    def test_empty_collection_rejected(self):
        with pytest.raises(ValidationError):
            ContentResult(
                type=ContentType.PROJECT_IDEAS,
                title="T",
                content="C",
                sections=[],
                keywords=["k"],
                tips=["t"],
                estimate="e",
            )


class TestGeneratorConfig:
    def test_default_config(self):
        config = GeneratorConfig()
        assert config.api_key == ""
        assert config.provider == LLMProvider.GEMINI
        assert config.model == ""
