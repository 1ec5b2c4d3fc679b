import logging

from django.db import transaction

from textgen import get_text_generator

from .models import QuizQuestion

logger = logging.getLogger(__name__)


def generate_quiz_for(disease, generator=None):
    """
    Draft questions for `disease` and store them.
    Returns the created QuizQuestion rows; an empty list means the generator
    produced nothing usable and an admin has to retry.
    """
    generator = generator or get_text_generator()
    drafts = generator.draft_quiz_questions(
        disease.name,
        disease.description,
        disease.symptoms or [],
        disease.preventive_measures or [],
    )

    with transaction.atomic():
        created = [
            QuizQuestion.objects.create(disease=disease, **draft.to_model_fields())
            for draft in drafts
        ]

    if created:
        logger.info("Quiz generated | disease=%s | questions=%s", disease.name, len(created))
    else:
        logger.warning("No quiz questions generated | disease=%s", disease.name)
    return created
