# Content Generator — prompt templates, LLM client and marker-based reply parser
"""
Content Generator module for academic and social-media content.

A request is turned into a templated prompt, sent to the configured LLM
(Gemini by default) together with a keyword prompt, and the two replies are
parsed into a ContentResult for the presentation layer.
"""

from .errors import ContentGenerationError, GenerationFailedError, NotConfiguredError, ParseError
from .generator import ContentGenerator
from .models import (
    AudienceType,
    ContentRequest,
    ContentResult,
    ContentTone,
    ContentType,
    GeneratorConfig,
    LLMProvider,
    Variant,
)
from .parser import parse_response, parse_topic_list
from .prompts import build_content_prompt, build_keyword_prompt

__all__ = [
    "ContentGenerator",
    "ContentGenerationError",
    "GenerationFailedError",
    "NotConfiguredError",
    "ParseError",
    "AudienceType",
    "ContentRequest",
    "ContentResult",
    "ContentTone",
    "ContentType",
    "GeneratorConfig",
    "LLMProvider",
    "Variant",
    "parse_response",
    "parse_topic_list",
    "build_content_prompt",
    "build_keyword_prompt",
]
