"""
Unit serializers.
"""
from rest_framework import serializers

from measurements.models import Unit


class UnitSerializer(serializers.ModelSerializer):
    """
    Serializer for Unit model - read-only.

    Units are GLOBAL reference data seeded on deployment.
    """
    is_base = serializers.BooleanField(read_only=True)

    class Meta:
        model = Unit
        fields = ['id', 'code', 'name', 'category', 'factor_to_base', 'is_base']
        read_only_fields = fields
