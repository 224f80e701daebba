"""CLI entry point for content generation.

Usage:
    python -m src.content_generator.main --topic "Smart Home Automation" --type "Project Report"
    python -m src.content_generator.main --topic "ঈদের কেনাকাটা" --type "Facebook Post" --json
    python -m src.content_generator.main --suggest social
"""

from __future__ import annotations

import argparse
import json
import sys

from pydantic import ValidationError

from src.common.config import get_api_key, settings
from src.common.logging import setup_logging

from .errors import ContentGenerationError
from .generator import ContentGenerator
from .models import (
    VARIANT_AUDIENCES,
    VARIANT_TONES,
    AudienceType,
    ContentRequest,
    ContentResult,
    ContentTone,
    ContentType,
    GeneratorConfig,
    LLMProvider,
    Variant,
)

logger = setup_logging(module_name="content_generator.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate academic or social content with an LLM")
    parser.add_argument("--topic", help="Topic to write about")
    parser.add_argument(
        "--type",
        dest="content_type",
        choices=[ct.value for ct in ContentType],
        default=ContentType.PROJECT_IDEAS.value,
        help="Content type (default: Project Ideas)",
    )
    parser.add_argument(
        "--tone",
        choices=[t.value for t in ContentTone],
        help="Tone (default: first tone of the content type's variant)",
    )
    parser.add_argument(
        "--audience",
        choices=[a.value for a in AudienceType],
        help="Target audience (default: first audience of the content type's variant)",
    )
    parser.add_argument("--details", default="", help="Additional details or requirements")
    parser.add_argument("--word-count", type=int, help="Target word count (social content)")
    parser.add_argument("--no-hashtags", action="store_true", help="Ask for no hashtags (social content)")
    parser.add_argument("--no-emojis", action="store_true", help="Ask for no emojis (social content)")
    parser.add_argument(
        "--provider",
        choices=[p.value for p in LLMProvider],
        default=settings.default_provider,
        help=f"LLM provider (default: {settings.default_provider})",
    )
    parser.add_argument("--model", default="", help="Model name override")
    parser.add_argument(
        "--suggest",
        choices=[v.value for v in Variant],
        help="Print topic suggestions for a variant and exit",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    return parser


def build_request(args: argparse.Namespace) -> ContentRequest:
    content_type = ContentType(args.content_type)
    variant = content_type.variant
    return ContentRequest(
        topic=args.topic or "",
        content_type=content_type,
        tone=ContentTone(args.tone) if args.tone else VARIANT_TONES[variant][0],
        audience=AudienceType(args.audience) if args.audience else VARIANT_AUDIENCES[variant][0],
        additional_details=args.details,
        word_count=args.word_count,
        include_hashtags=not args.no_hashtags,
        include_emojis=not args.no_emojis,
    )


def format_result(result: ContentResult) -> str:
    """Plain-text rendering for the terminal."""
    tips_label = "Engagement Tips" if result.variant == Variant.SOCIAL else "Tips"
    estimate_label = "Estimated Reach" if result.variant == Variant.SOCIAL else "Estimated Length"
    lines = [
        f"[{result.type.value}] {result.title}",
        "",
        result.content,
        "",
        "Sections:",
        *(f"  - {s}" for s in result.sections),
        f"{tips_label}:",
        *(f"  - {t}" for t in result.tips),
        "Keywords: " + ", ".join(result.keywords),
        f"{estimate_label}: {result.estimate}",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    provider = LLMProvider(args.provider)
    config = GeneratorConfig(
        api_key=get_api_key(provider.value),
        provider=provider,
        model=args.model,
    )
    generator = ContentGenerator(config=config)

    if args.suggest:
        for topic in generator.get_suggested_topics(Variant(args.suggest)):
            print(topic)
        return 0

    try:
        request = build_request(args)
    except ValidationError as e:
        logger.error("Invalid request: %s", e)
        return 2

    try:
        result = generator.generate(request)
    except ContentGenerationError as e:
        logger.error("%s", e)
        return 1

    if args.json:
        print(json.dumps(result.to_display_dict(), ensure_ascii=False, indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
