# backend/textgen/__init__.py
from .contracts import AlertDraft, QuestionDraft
from .factory import get_text_generator
from .fallback_engine import FallbackTextGenerator
from .openai_engine import OpenAITextGenerator
