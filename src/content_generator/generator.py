"""Content Generator — prompt building, model calls and reply parsing.

One generation request makes two model calls in sequence: the content
prompt first, then the keyword prompt. Both replies are parsed into a
single ContentResult.

Usage:
    generator = ContentGenerator(GeneratorConfig(api_key="..."))
    result = generator.generate(ContentRequest(topic="Smart Home Automation"))
"""

from __future__ import annotations

from typing import Any

from src.common.config import Settings
from src.common.logging import setup_logging

from .errors import GenerationFailedError, NotConfiguredError
from .models import ContentRequest, ContentResult, GeneratorConfig, LLMProvider, Variant
from .parser import parse_response, parse_topic_list
from .profiles import get_profile
from .prompts import build_content_prompt, build_keyword_prompt, build_topic_suggestion_prompt

logger = setup_logging(module_name="content_generator")


class ContentGenerator:
    """Generates structured content for both product variants.

    The generator holds the configured credential and one model handle,
    created on first use and shared by every later call.
    """

    def __init__(self, config: GeneratorConfig | None = None):
        self.config = config or GeneratorConfig()
        self.settings = Settings.load()
        self._client: Any = None

    @property
    def is_configured(self) -> bool:
        return bool(self.config.api_key)

    def set_api_key(self, api_key: str) -> None:
        """Replace the credential; the next call builds a fresh model handle."""
        self.config.api_key = api_key.strip()
        self._client = None

    def generate(self, request: ContentRequest) -> ContentResult:
        """Generate content for a request.

        Args:
            request: Validated content request

        Returns:
            Parsed ContentResult

        Raises:
            NotConfiguredError: If no API key is set. Checked before anything else.
            GenerationFailedError: If either model call fails.
            ParseError: If the replies cannot be parsed.
        """
        if not self.is_configured:
            raise NotConfiguredError(self.config.provider.value)

        content_prompt = build_content_prompt(request)

        try:
            content_text = self._call_llm(content_prompt)
            keyword_text = self._call_llm(build_keyword_prompt(request))
        except Exception as e:
            logger.exception("Error generating content")
            raise GenerationFailedError() from e

        result = parse_response(content_text, keyword_text, request)

        logger.info(
            "%s generated: %s (%d sections, %d keywords)",
            request.content_type.value,
            result.title,
            len(result.sections),
            len(result.keywords),
        )
        return result

    def get_suggested_topics(self, variant: Variant = Variant.ACADEMIC) -> list[str]:
        """Ask the model for topic suggestions.

        Best-effort: returns the variant's fallback list when unconfigured,
        when the call fails or when the reply holds no topics. Never raises.
        """
        profile = get_profile(variant)
        if not self.is_configured:
            return list(profile.fallback_topics)

        try:
            text = self._call_llm(build_topic_suggestion_prompt(profile.variant))
        except Exception:
            logger.exception("Error getting suggested topics")
            return list(profile.fallback_topics)

        topics = parse_topic_list(text)
        if not topics:
            logger.warning("No topics in suggestion reply, using fallback list")
            return list(profile.fallback_topics)
        return topics

    def get_trending_topics(self) -> list[str]:
        """Trending topics for the social variant."""
        return self.get_suggested_topics(Variant.SOCIAL)

    # --- LLM Integration ---

    def _model_name(self) -> str:
        if self.config.model:
            return self.config.model
        llm = self.settings.llm
        return {
            LLMProvider.GEMINI: llm.gemini_model,
            LLMProvider.OPENAI: llm.openai_model,
            LLMProvider.ANTHROPIC: llm.anthropic_model,
        }[self.config.provider]

    def _get_client(self) -> Any:
        """Return the model handle, creating it for the current credential."""
        if self._client is not None:
            return self._client

        if self.config.provider == LLMProvider.GEMINI:
            from google import genai

            self._client = genai.Client(api_key=self.config.api_key)
        elif self.config.provider == LLMProvider.OPENAI:
            import openai

            self._client = openai.OpenAI(api_key=self.config.api_key)
        else:
            import anthropic

            self._client = anthropic.Anthropic(api_key=self.config.api_key)
        return self._client

    def _call_llm(self, prompt: str) -> str:
        """Send one prompt and return the full reply text.

        Sampling parameters are left to provider defaults.
        """
        if self.config.provider == LLMProvider.GEMINI:
            return self._call_gemini(prompt)
        elif self.config.provider == LLMProvider.OPENAI:
            return self._call_openai(prompt)
        else:
            return self._call_anthropic(prompt)

    def _call_gemini(self, prompt: str) -> str:
        """Call Google Gemini API."""
        client = self._get_client()
        response = client.models.generate_content(
            model=self._model_name(),
            contents=prompt,
        )
        return response.text or ""

    def _call_openai(self, prompt: str) -> str:
        """Call OpenAI GPT API."""
        client = self._get_client()
        response = client.chat.completions.create(
            model=self._model_name(),
            messages=[{"role": "user", "content": prompt}],
        )
        return response.choices[0].message.content or ""

    def _call_anthropic(self, prompt: str) -> str:
        """Call Anthropic Claude API."""
        client = self._get_client()
        response = client.messages.create(
            model=self._model_name(),
            max_tokens=self.settings.llm.max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.content[0].text
