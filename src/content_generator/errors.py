"""Errors surfaced by the content generator.

Missing fields in a model reply are not errors: the parser substitutes
defaults for them and nothing is raised.
"""


class ContentGenerationError(Exception):
    """Base class for generator failures shown to the user."""


class NotConfiguredError(ContentGenerationError):
    """No API key configured; raised before any network call."""

    def __init__(self, provider: str = "gemini"):
        self.provider = provider
        super().__init__(
            f"{provider.capitalize()} API key not set. Please provide your API key."
        )


class GenerationFailedError(ContentGenerationError):
    """A model call failed. The underlying cause is only logged."""

    def __init__(self, message: str = "Failed to generate content. Please try again."):
        super().__init__(message)


class ParseError(ContentGenerationError):
    """Unexpected failure while extracting fields from a model reply."""

    def __init__(self, message: str = "Failed to parse generated content"):
        super().__init__(message)
