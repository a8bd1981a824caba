from decimal import Decimal

from rest_framework import serializers

from tool_inventory.apps.analytics.application.aggregators import (
    MAX_EXPENSIVE_TOOLS_LIMIT,
    MIN_EXPENSIVE_TOOLS_LIMIT,
)
from tool_inventory.apps.analytics.domain.sorting import DepartmentSortKey, SortOrder
from tool_inventory.apps.common.api.fields import CaseInsensitiveChoiceField

LIMIT_MESSAGE = f'Must be positive integer between {MIN_EXPENSIVE_TOOLS_LIMIT} and {MAX_EXPENSIVE_TOOLS_LIMIT}'


class DepartmentCostsQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/analytics/department-costs/``"""
    sort_by = serializers.ChoiceField(
        choices=DepartmentSortKey.values(),
        required=False,
        allow_blank=True,
        error_messages={'invalid_choice': f"Must be one of: {', '.join(DepartmentSortKey.values())}"},
    )
    order = CaseInsensitiveChoiceField(
        choices=SortOrder.values(),
        required=False,
        default=SortOrder.DESC.value,
        error_messages={'invalid_choice': 'Must be asc or desc'},
    )


class ExpensiveToolsQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/analytics/expensive-tools/``"""
    limit = serializers.IntegerField(
        required=False,
        min_value=MIN_EXPENSIVE_TOOLS_LIMIT,
        max_value=MAX_EXPENSIVE_TOOLS_LIMIT,
        error_messages={
            'invalid': LIMIT_MESSAGE,
            'min_value': LIMIT_MESSAGE,
            'max_value': LIMIT_MESSAGE,
        },
    )
    min_cost = serializers.DecimalField(
        required=False,
        allow_null=True,
        max_digits=None,
        decimal_places=None,
        min_value=Decimal('0'),
        error_messages={
            'invalid': 'Must be >= 0',
            'min_value': 'Must be >= 0',
        },
    )


class LowUsageToolsQuerySerializer(serializers.Serializer):
    """Query parameters of ``GET /api/analytics/low-usage-tools/``"""
    max_users = serializers.IntegerField(
        required=False,
        min_value=0,
        error_messages={
            'invalid': 'Must be a non-negative integer',
            'min_value': 'Must be a non-negative integer',
        },
    )
