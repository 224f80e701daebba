"""Response parsing for marker-delimited model replies.

Each field is extracted independently: a missing or malformed block only
affects its own field, which then falls back to the variant default.
"""

from __future__ import annotations

import re
from typing import Optional

from src.common.logging import setup_logging

from .errors import ParseError
from .models import ContentRequest, ContentResult
from .prompts import BODY_MARKER, KEYWORDS_MARKER, SECTIONS_MARKER, TITLE_MARKER
from .profiles import get_profile

logger = setup_logging(module_name="content_generator.parser")

_BULLET_RE = re.compile(r"^[-•]\s*")
_NUMBERING_RE = re.compile(r"^\d+[.)]\s*")
_block_patterns: dict[str, re.Pattern] = {}


def _block_pattern(marker: str) -> re.Pattern:
    pattern = _block_patterns.get(marker)
    if pattern is None:
        pattern = re.compile(
            rf"{re.escape(marker)}_START\s*(.*?)\s*{re.escape(marker)}_END",
            re.DOTALL,
        )
        _block_patterns[marker] = pattern
    return pattern


def extract_block(text: str, marker: str) -> Optional[str]:
    """Return the trimmed text between MARKER_START and MARKER_END.

    Args:
        text: Raw model reply
        marker: Marker name without the _START/_END suffix

    Returns:
        First matching block, or None when the pair is absent
    """
    match = _block_pattern(marker).search(text or "")
    if match is None:
        return None
    return match.group(1).strip()


def clean_lines(block: str) -> list[str]:
    """Split a block into list items, dropping bullets and blank lines."""
    items = []
    for line in block.split("\n"):
        item = _BULLET_RE.sub("", line.strip())
        if item:
            items.append(item)
    return items


def extract_list(text: str, marker: str) -> list[str]:
    """Extract a one-item-per-line block as a list, in reply order."""
    block = extract_block(text, marker)
    if not block:
        return []
    return clean_lines(block)


def parse_response(
    content_text: str,
    keyword_text: str,
    request: ContentRequest,
) -> ContentResult:
    """Build a ContentResult from the two raw model replies.

    Keywords come only from ``keyword_text``; every other field comes from
    ``content_text``. Absent fields take the variant defaults.

    Raises:
        ParseError: If extraction fails unexpectedly.
    """
    profile = get_profile(request.variant)
    try:
        title = extract_block(content_text, TITLE_MARKER) or f"{request.content_type.value} Title"
        content = extract_block(content_text, BODY_MARKER) or profile.default_content
        sections = extract_list(content_text, SECTIONS_MARKER)
        tips = extract_list(content_text, profile.tips_marker)
        estimate = extract_block(content_text, profile.estimate_marker) or profile.default_estimate
        keywords = extract_list(keyword_text, KEYWORDS_MARKER)

        return ContentResult(
            type=request.content_type,
            title=title,
            content=content,
            sections=sections or list(profile.default_sections),
            keywords=keywords or list(profile.default_keywords),
            tips=tips or list(profile.default_tips),
            estimate=estimate,
        )
    except Exception as e:
        logger.exception("Error parsing response")
        raise ParseError() from e


def parse_topic_list(text: str, limit: int = 10) -> list[str]:
    """Parse a newline-delimited topic list, stripping numbering and bullets."""
    topics = []
    for line in (text or "").split("\n"):
        topic = _NUMBERING_RE.sub("", line.strip())
        topic = _BULLET_RE.sub("", topic).strip()
        if topic:
            topics.append(topic)
    return topics[:limit]
