"""
sceneparse Constants Module

Lexical tables for release-name parsing plus application, logging and
configuration constants.
"""

from .lexicon import (
    AUDIO_CODECS,
    DEVICES,
    FLAGS,
    FORMATS,
    HDR_TOKENS,
    LANGUAGE_BRACKET_CODES,
    LANGUAGES,
    MEDIA_EXTENSIONS,
    OPERATING_SYSTEMS,
    SOURCES,
)
from .providers import STREAMING_PROVIDERS
from .system import Application, Config, Logging

__all__ = [
    "AUDIO_CODECS",
    "DEVICES",
    "FLAGS",
    "FORMATS",
    "HDR_TOKENS",
    "LANGUAGES",
    "LANGUAGE_BRACKET_CODES",
    "MEDIA_EXTENSIONS",
    "OPERATING_SYSTEMS",
    "SOURCES",
    "STREAMING_PROVIDERS",
    "Application",
    "Config",
    "Logging",
]
