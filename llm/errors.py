"""Errors raised by the generation client.

Three kinds reach the caller:
- ConfigurationError: no API key is configured.
- InvalidImageError: an image payload is not a ``data:<mime>;base64,<payload>`` URI.
- UpstreamError: the Gemini call failed or returned no usable text.

None of them are retried.
"""


class GenerationError(Exception):
    pass


class ConfigurationError(GenerationError):
    pass


class InvalidImageError(GenerationError):
    pass


class UpstreamError(GenerationError):
    pass


__all__ = ["GenerationError", "ConfigurationError", "InvalidImageError", "UpstreamError"]
