from rest_framework import serializers

from .models import HealthAlert, Prescription


def _clean_string_list(values):
    cleaned = []
    for v in values or []:
        v = (v or "").strip()
        if v and v not in cleaned:
            cleaned.append(v)
    return cleaned


# ---------------------------------------------------------------------------
# Prescriptions
# ---------------------------------------------------------------------------

class PrescriptionSerializer(serializers.ModelSerializer):
    doctorId = serializers.IntegerField(source="doctor_id", read_only=True)
    ageGroup = serializers.ChoiceField(source="age_group", choices=Prescription.AgeGroup.choices)
    symptoms = serializers.ListField(
        child=serializers.CharField(max_length=255, allow_blank=True),
        required=False,
        default=list,
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Prescription
        fields = [
            "id",
            "doctorId",
            "region",
            "diagnosis",
            "ageGroup",
            "gender",
            "severity",
            "symptoms",
            "createdAt",
        ]
        read_only_fields = ["id", "doctorId", "createdAt"]

    def validate_diagnosis(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("diagnosis is required.")
        return v

    def validate_region(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("region is required.")
        return v

    def validate_symptoms(self, value):
        return _clean_string_list(value)


# ---------------------------------------------------------------------------
# Health alerts
# ---------------------------------------------------------------------------

class HealthAlertSerializer(serializers.ModelSerializer):
    caseCount = serializers.IntegerField(source="case_count", min_value=0, required=False, default=0)
    preventiveMeasures = serializers.ListField(
        source="preventive_measures",
        child=serializers.CharField(allow_blank=True),
        required=False,
        default=list,
    )
    symptoms = serializers.ListField(
        child=serializers.CharField(allow_blank=True),
        required=False,
        default=list,
    )
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = HealthAlert
        fields = [
            "id",
            "disease",
            "region",
            "severity",
            "caseCount",
            "message",
            "preventiveMeasures",
            "symptoms",
            "isActive",
            "createdAt",
        ]
        read_only_fields = ["id", "isActive", "createdAt"]

    def validate_disease(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("disease is required.")
        return v

    def validate_region(self, value):
        v = (value or "").strip()
        if not v:
            raise serializers.ValidationError("region is required.")
        return v

    def validate_preventiveMeasures(self, value):
        return _clean_string_list(value)

    def validate_symptoms(self, value):
        return _clean_string_list(value)
