"""Data models for the content generator module."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class LLMProvider(str, Enum):
    """Supported LLM providers."""
    GEMINI = "gemini"
    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class Variant(str, Enum):
    """Product skins sharing the generator core."""
    ACADEMIC = "academic"  # project ideas, reports, assignments
    SOCIAL = "social"  # viral Bangla social content


class ContentType(str, Enum):
    """Kind of content requested from the model."""
    PROJECT_IDEAS = "Project Ideas"
    PROJECT_REPORT = "Project Report"
    ASSIGNMENT_SOLUTION = "Assignment Solution"
    FACEBOOK_POST = "Facebook Post"
    REEL_SCRIPT = "Reel Script"
    INSTAGRAM_CAPTION = "Instagram Caption"

    @property
    def variant(self) -> Variant:
        return _CONTENT_TYPE_VARIANTS[self]


class ContentTone(str, Enum):
    """Writing tone."""
    PROFESSIONAL = "Professional"
    ACADEMIC = "Academic"
    CREATIVE = "Creative"
    TECHNICAL = "Technical"
    DETAILED = "Detailed"
    FUNNY = "Funny"
    EMOTIONAL = "Emotional"
    INSPIRATIONAL = "Inspirational"
    INFORMATIVE = "Informative"
    TRENDY = "Trendy"


class AudienceType(str, Enum):
    """Target audience."""
    STUDENTS = "Students"
    RESEARCHERS = "Researchers"
    PROFESSIONALS = "Professionals"
    BEGINNERS = "Beginners"
    ADVANCED = "Advanced"
    YOUTH = "Youth"
    FAMILIES = "Families"
    GENERAL_PUBLIC = "General Public"
    ENTREPRENEURS = "Entrepreneurs"


_CONTENT_TYPE_VARIANTS = {
    ContentType.PROJECT_IDEAS: Variant.ACADEMIC,
    ContentType.PROJECT_REPORT: Variant.ACADEMIC,
    ContentType.ASSIGNMENT_SOLUTION: Variant.ACADEMIC,
    ContentType.FACEBOOK_POST: Variant.SOCIAL,
    ContentType.REEL_SCRIPT: Variant.SOCIAL,
    ContentType.INSTAGRAM_CAPTION: Variant.SOCIAL,
}

VARIANT_TONES: dict[Variant, tuple[ContentTone, ...]] = {
    Variant.ACADEMIC: (
        ContentTone.PROFESSIONAL,
        ContentTone.ACADEMIC,
        ContentTone.CREATIVE,
        ContentTone.TECHNICAL,
        ContentTone.DETAILED,
    ),
    Variant.SOCIAL: (
        ContentTone.FUNNY,
        ContentTone.EMOTIONAL,
        ContentTone.INSPIRATIONAL,
        ContentTone.INFORMATIVE,
        ContentTone.TRENDY,
    ),
}

VARIANT_AUDIENCES: dict[Variant, tuple[AudienceType, ...]] = {
    Variant.ACADEMIC: (
        AudienceType.STUDENTS,
        AudienceType.RESEARCHERS,
        AudienceType.PROFESSIONALS,
        AudienceType.BEGINNERS,
        AudienceType.ADVANCED,
    ),
    Variant.SOCIAL: (
        AudienceType.YOUTH,
        AudienceType.STUDENTS,
        AudienceType.PROFESSIONALS,
        AudienceType.FAMILIES,
        AudienceType.GENERAL_PUBLIC,
        AudienceType.ENTREPRENEURS,
    ),
}


def content_types_for(variant: Variant) -> list[ContentType]:
    """Content types offered by a product variant, in menu order."""
    return [ct for ct, v in _CONTENT_TYPE_VARIANTS.items() if v == variant]


@dataclass
class GeneratorConfig:
    """Configuration for the content generator.

    Built once and handed to ``ContentGenerator``; an empty ``api_key``
    means the generator is unconfigured.
    """
    api_key: str = ""
    provider: LLMProvider = LLMProvider.GEMINI
    model: str = ""  # Empty = use default from settings


class ContentRequest(BaseModel):
    """One user submission. Immutable; consumed once by the prompt builder."""
    topic: str
    content_type: ContentType = ContentType.PROJECT_IDEAS
    tone: ContentTone = ContentTone.PROFESSIONAL
    audience: AudienceType = AudienceType.STUDENTS
    additional_details: str = ""

    # Social variant only
    word_count: Optional[int] = Field(default=None, gt=0)
    include_hashtags: bool = True
    include_emojis: bool = True

    model_config = {"frozen": True}

    @field_validator("topic")
    @classmethod
    def _topic_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a topic")
        return value

    @field_validator("additional_details")
    @classmethod
    def _strip_details(cls, value: str) -> str:
        return value.strip()

    @model_validator(mode="after")
    def _options_match_variant(self) -> ContentRequest:
        variant = self.content_type.variant
        if self.tone not in VARIANT_TONES[variant]:
            raise ValueError(f"Tone '{self.tone.value}' is not available for {variant.value} content")
        if self.audience not in VARIANT_AUDIENCES[variant]:
            raise ValueError(
                f"Audience '{self.audience.value}' is not available for {variant.value} content"
            )
        return self

    @property
    def variant(self) -> Variant:
        return self.content_type.variant


class ContentResult(BaseModel):
    """Structured generation result handed to the presentation layer.

    ``content`` is passed through untouched: it may carry the ``<br>``
    line-break sentinel, ``#`` headings, ``>`` quotes, list prefixes and
    ``#word`` hashtags, which only the presentation layer interprets.
    """
    type: ContentType
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    sections: list[str] = Field(min_length=1)
    keywords: list[str] = Field(min_length=1)
    tips: list[str] = Field(min_length=1)
    estimate: str = Field(min_length=1)

    @property
    def variant(self) -> Variant:
        return self.type.variant

    @property
    def engagement_tips(self) -> list[str]:
        return self.tips

    @property
    def estimated_length(self) -> str:
        return self.estimate

    @property
    def estimated_reach(self) -> str:
        return self.estimate

    def to_display_dict(self) -> dict:
        """Presentation payload with the field names each product skin expects."""
        data = {
            "type": self.type.value,
            "title": self.title,
            "content": self.content,
            "sections": list(self.sections),
            "keywords": list(self.keywords),
        }
        if self.variant == Variant.SOCIAL:
            data["engagementTips"] = list(self.tips)
            data["estimatedReach"] = self.estimate
        else:
            data["tips"] = list(self.tips)
            data["estimatedLength"] = self.estimate
        return data
