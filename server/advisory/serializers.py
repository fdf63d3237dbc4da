from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from planner_core.domain.models import AlignmentCategory


class ProjectionRequestSerializer(serializers.Serializer):
    annualRate = serializers.DecimalField(
        max_digits=None, decimal_places=None, min_value=Decimal(0), default=Decimal(4)
    )


class ProjectionPointSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    projectedValue = serializers.CharField()


class AlignmentResponseSerializer(serializers.Serializer):
    alignmentPercentage = serializers.CharField()
    category = serializers.ChoiceField(choices=[c.value for c in AlignmentCategory])


class PlanningStatsSerializer(serializers.Serializer):
    totalClients = serializers.IntegerField()
    clientsWithPlan = serializers.IntegerField()
    percentageWithPlan = serializers.CharField()


def validation_message(errors) -> str:
    """Flatten serializer errors into one `field: reason` line per field."""
    parts = []
    for field, reasons in errors.items():
        if isinstance(reasons, (list, tuple)):
            reasons = " ".join(str(reason) for reason in reasons)
        parts.append(f"{field}: {reasons}")
    return "; ".join(parts)
