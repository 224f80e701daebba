"""Shared test fixtures for the content studio engine."""

import sys
from pathlib import Path

import pytest

# Ensure src is importable
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.content_generator.models import (
    AudienceType,
    ContentRequest,
    ContentTone,
    ContentType,
)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def academic_request() -> ContentRequest:
    """Return a project report request with additional details."""
    return ContentRequest(
        topic="Machine Learning in Healthcare",
        content_type=ContentType.PROJECT_REPORT,
        tone=ContentTone.ACADEMIC,
        audience=AudienceType.RESEARCHERS,
        additional_details="Focus on diagnostic imaging",
    )


@pytest.fixture
def social_request() -> ContentRequest:
    """Return a Bangla Facebook post request."""
    return ContentRequest(
        topic="ঈদের কেনাকাটা",
        content_type=ContentType.FACEBOOK_POST,
        tone=ContentTone.FUNNY,
        audience=AudienceType.YOUTH,
        word_count=150,
        include_hashtags=True,
        include_emojis=False,
    )


@pytest.fixture
def academic_content_response() -> str:
    """Mock content reply with every academic marker pair."""
    return """\
Sure! Here is your report.

CONTENT_TITLE_START
AI-Assisted Diagnostic Imaging: A Project Report
CONTENT_TITLE_END

CONTENT_BODY_START
# Abstract
Deep learning models now match radiologists on several imaging tasks.<br>
> Early detection saves lives.
- Objective 1: build a classifier
1. Collect data
CONTENT_BODY_END

SECTIONS_START
- Abstract
- Introduction
• Methodology

Results
SECTIONS_END

TIPS_START
- Start with a public dataset
• Validate with clinicians
Document every experiment
TIPS_END

ESTIMATED_LENGTH_START
About 3,500 words, 15 minutes reading time
ESTIMATED_LENGTH_END
"""


@pytest.fixture
def academic_keyword_response() -> str:
    """Mock keyword reply."""
    return """\
KEYWORDS_START
- Deep Learning
Medical Imaging
• Computer Vision

Radiology
KEYWORDS_END
"""


@pytest.fixture
def social_content_response() -> str:
    """Mock content reply for the social variant."""
    return """\
CONTENT_TITLE_START
ঈদের শপিং এর ৫টি মজার সত্যি
CONTENT_TITLE_END

CONTENT_BODY_START
ঈদ আসলেই মার্কেটে ভিড়!<br>কে কে একমত? #ঈদ #শপিং
CONTENT_BODY_END

SECTIONS_START
Hook
Story
Call to Action
SECTIONS_END

ENGAGEMENT_TIPS_START
- সন্ধ্যা ৮টায় পোস্ট করুন
- কমেন্টে রিপ্লাই দিন
ENGAGEMENT_TIPS_END

ESTIMATED_REACH_START
10K-50K organic reach
ESTIMATED_REACH_END
"""
