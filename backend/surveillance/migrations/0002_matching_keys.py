from django.db import migrations, models


def fill_keys(apps, schema_editor):
    Prescription = apps.get_model("surveillance", "Prescription")
    HealthAlert = apps.get_model("surveillance", "HealthAlert")

    for rx in Prescription.objects.only("id", "diagnosis").iterator():
        Prescription.objects.filter(pk=rx.pk).update(diagnosis_key=(rx.diagnosis or "").strip().casefold())
    for alert in HealthAlert.objects.only("id", "disease").iterator():
        HealthAlert.objects.filter(pk=alert.pk).update(disease_key=(alert.disease or "").strip().casefold())


class Migration(migrations.Migration):

    dependencies = [
        ("surveillance", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="prescription",
            name="diagnosis_key",
            field=models.CharField(db_index=True, default="", editable=False, max_length=255),
        ),
        migrations.AddField(
            model_name="healthalert",
            name="disease_key",
            field=models.CharField(db_index=True, default="", editable=False, max_length=255),
        ),
        migrations.RunPython(fill_keys, migrations.RunPython.noop),
    ]
