from django.core.management.base import BaseCommand

from learning.models import Disease
from learning.quizgen import generate_quiz_for
from learning.seed_data import DISEASES


class Command(BaseCommand):
    help = "Seed reference diseases (skips names that already exist); optionally draft their quizzes."

    def add_arguments(self, parser):
        parser.add_argument(
            "--with-quiz",
            action="store_true",
            help="Draft quiz questions for seeded diseases that have none.",
        )

    def handle(self, *args, **options):
        # ---------------------------------------------------------
        # (A) Diseases, idempotent by name
        # ---------------------------------------------------------
        created = 0
        skipped = 0

        for data in DISEASES:
            _, was_created = Disease.objects.get_or_create(
                name=data["name"],
                defaults={k: v for k, v in data.items() if k != "name"},
            )
            if was_created:
                created += 1
                self.stdout.write(f"Created disease: {data['name']}")
            else:
                skipped += 1
                self.stdout.write(f"Disease already exists: {data['name']}")

        self.stdout.write(self.style.SUCCESS(f"Diseases created: {created}, skipped: {skipped}"))

        # ---------------------------------------------------------
        # (B) Quiz drafting for diseases without questions
        # ---------------------------------------------------------
        if not options["with_quiz"]:
            return

        drafted = 0
        for disease in Disease.objects.filter(name__in=[d["name"] for d in DISEASES]):
            if disease.questions.exists():
                continue
            drafted += len(generate_quiz_for(disease))

        self.stdout.write(self.style.SUCCESS(f"Quiz questions drafted: {drafted}"))
