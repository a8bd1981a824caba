from decimal import Decimal, ROUND_HALF_UP

from rest_framework import serializers

from tool_inventory.apps.common.api.fields import CaseInsensitiveChoiceField
from tool_inventory.apps.tools.domain.value_objects import DEFAULT_TOOL_SORT_FIELD, TOOL_SORT_FIELDS
from tool_inventory.apps.tools.models import Tool

TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%SZ'


class ToolSerializer(serializers.ModelSerializer):
    """Row of the tool listing"""
    category = serializers.SlugRelatedField(slug_field='name', read_only=True)
    monthly_cost = serializers.FloatField(read_only=True)
    created_at = serializers.DateTimeField(format=TIMESTAMP_FORMAT, read_only=True)

    class Meta:
        model = Tool
        fields = (
            'id',
            'name',
            'description',
            'vendor',
            'website_url',
            'category',
            'monthly_cost',
            'owner_department',
            'status',
            'active_users_count',
            'created_at',
        )


class ToolDetailSerializer(ToolSerializer):
    """Single tool, with its cost across all of its users"""
    total_monthly_cost = serializers.SerializerMethodField()
    updated_at = serializers.DateTimeField(format=TIMESTAMP_FORMAT, read_only=True)

    class Meta(ToolSerializer.Meta):
        fields = ToolSerializer.Meta.fields + ('total_monthly_cost', 'updated_at')

    def get_total_monthly_cost(self, obj) -> float:
        total = obj.monthly_cost * obj.active_users_count
        return float(total.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP))


class ToolListQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/tools/``"""
    department = serializers.ChoiceField(
        choices=Tool.Department.values,
        required=False,
        allow_blank=True,
        error_messages={'invalid_choice': f"Must be one of: {', '.join(Tool.Department.values)}"},
    )
    status = serializers.ChoiceField(
        choices=Tool.Status.values,
        required=False,
        allow_blank=True,
        error_messages={'invalid_choice': f"Must be one of: {', '.join(Tool.Status.values)}"},
    )
    min_cost = serializers.DecimalField(
        required=False,
        allow_null=True,
        max_digits=None,
        decimal_places=None,
        min_value=Decimal('0'),
        error_messages={'invalid': 'Must be >= 0', 'min_value': 'Must be >= 0'},
    )
    max_cost = serializers.DecimalField(
        required=False,
        allow_null=True,
        max_digits=None,
        decimal_places=None,
        min_value=Decimal('0'),
        error_messages={'invalid': 'Must be >= 0', 'min_value': 'Must be >= 0'},
    )
    category = serializers.CharField(required=False, allow_blank=True, max_length=50)
    sort_by = serializers.ChoiceField(
        choices=TOOL_SORT_FIELDS,
        required=False,
        default=DEFAULT_TOOL_SORT_FIELD,
        error_messages={'invalid_choice': f"Must be one of: {', '.join(TOOL_SORT_FIELDS)}"},
    )
    sort_dir = CaseInsensitiveChoiceField(
        choices=['asc', 'desc'],
        required=False,
        default='asc',
        error_messages={'invalid_choice': 'Must be asc or desc'},
    )
