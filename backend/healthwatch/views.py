from django.conf import settings
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from textgen import get_text_generator


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    generator = get_text_generator()
    return Response(
        {
            "status": "ok",
            "textgen": generator.ENGINE_NAME,
            "llm_configured": bool(getattr(settings, "OPENAI_API_KEY", "")),
        }
    )
