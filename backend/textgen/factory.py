# backend/textgen/factory.py
from __future__ import annotations

from django.conf import settings

from .fallback_engine import FallbackTextGenerator
from .openai_engine import OpenAITextGenerator


def get_text_generator():
    engine = getattr(settings, "TEXTGEN_ENGINE", "openai").strip().lower()
    api_key = getattr(settings, "OPENAI_API_KEY", "")
    if engine == "openai" and api_key:
        return OpenAITextGenerator(
            model=getattr(settings, "OPENAI_MODEL", "gpt-4o-mini"),
            api_key=api_key,
            timeout=getattr(settings, "TEXTGEN_TIMEOUT_SECONDS", None),
        )
    return FallbackTextGenerator()
