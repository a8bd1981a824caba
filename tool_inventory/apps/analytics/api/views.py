"""
Viewsets for the analytics API.

The endpoints defined here report spend and usage over the tool
inventory: department costs, the most expensive tools, a category
breakdown, under-used tools and a per-vendor summary.  They are
read-only and never modify data; every request aggregates a fresh
snapshot of the active tools.
"""
import logging

from django.conf import settings
from django.core.exceptions import ValidationError
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from tool_inventory.apps.analytics.application.services import AnalyticsApplicationService
from tool_inventory.apps.analytics.domain.sorting import DepartmentSortKey
from tool_inventory.apps.common.api.errors import flatten_errors
from .serializers import (
    DepartmentCostsQuerySerializer,
    ExpensiveToolsQuerySerializer,
    LowUsageToolsQuerySerializer,
)

logger = logging.getLogger(__name__)

NO_DATA_MESSAGE = 'No analytics data available - ensure tools data exists'


def validation_failed(details) -> Response:
    logger.warning(f"Analytics request rejected: {details}")
    return Response({'error': 'Validation failed', 'details': details}, status=status.HTTP_400_BAD_REQUEST)


class AnalyticsViewSet(viewsets.ViewSet):
    """
    Read-only analytics over the tool inventory.

    Endpoints:
    - GET /api/analytics/department-costs/ - Costs per department
    - GET /api/analytics/expensive-tools/ - Most expensive tools
    - GET /api/analytics/tools-by-category/ - Costs per category
    - GET /api/analytics/low-usage-tools/ - Under-used tools
    - GET /api/analytics/vendor-summary/ - Costs per vendor
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = AnalyticsApplicationService()

    def _parse(self, serializer_class, request):
        serializer = serializer_class(data=request.query_params)
        if not serializer.is_valid():
            return None, validation_failed(flatten_errors(serializer.errors))
        return serializer.validated_data, None

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='sort_by',
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                enum=DepartmentSortKey.values(),
                required=False,
                description='Column to sort by (default: total_cost)'
            ),
            OpenApiParameter(
                name='order',
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                enum=['asc', 'desc'],
                required=False,
                description='Sort direction, case-insensitive (default: desc)'
            ),
        ],
        responses={200: OpenApiTypes.OBJECT}
    )
    @action(detail=False, methods=['get'], url_path='department-costs')
    def department_costs(self, request):
        """
        Total cost, tool count and users per owning department, with each
        department's share of the company spend.
        """
        params, error = self._parse(DepartmentCostsQuerySerializer, request)
        if error:
            return error

        try:
            result = self.service.get_department_costs(
                sort_by=params.get('sort_by') or None,
                order=params['order'],
            )
        except ValidationError as e:
            return validation_failed(flatten_errors(e.message_dict))

        if result['summary']['total_company_cost'] == 0.0:
            result['message'] = NO_DATA_MESSAGE
        return Response(result)

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='limit',
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
                description='Number of tools returned, 1-100 (default: 10)'
            ),
            OpenApiParameter(
                name='min_cost',
                type=OpenApiTypes.DECIMAL,
                location=OpenApiParameter.QUERY,
                required=False,
                description='Only tools with a monthly cost of at least this amount'
            ),
        ],
        responses={200: OpenApiTypes.OBJECT}
    )
    @action(detail=False, methods=['get'], url_path='expensive-tools')
    def expensive_tools(self, request):
        """
        Active tools ordered by monthly cost, rated against the company
        average cost per user.
        """
        params, error = self._parse(ExpensiveToolsQuerySerializer, request)
        if error:
            return error

        try:
            result = self.service.get_expensive_tools(
                min_cost=params.get('min_cost'),
                limit=params.get('limit', settings.ANALYTICS_EXPENSIVE_TOOLS_DEFAULT_LIMIT),
            )
        except ValidationError as e:
            return validation_failed(flatten_errors(e.message_dict))
        return Response(result)

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    @action(detail=False, methods=['get'], url_path='tools-by-category')
    def tools_by_category(self, request):
        """Spend, users and share of the budget per category."""
        result = self.service.get_tools_by_category()
        if not result['data']:
            result['message'] = NO_DATA_MESSAGE
        return Response(result)

    @extend_schema(
        parameters=[
            OpenApiParameter(
                name='max_users',
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                required=False,
                description='Maximum number of active users (default: 5)'
            ),
        ],
        responses={200: OpenApiTypes.OBJECT}
    )
    @action(detail=False, methods=['get'], url_path='low-usage-tools')
    def low_usage_tools(self, request):
        """
        Tools with few active users, with a warning level and a
        recommended action for each.
        """
        params, error = self._parse(LowUsageToolsQuerySerializer, request)
        if error:
            return error

        try:
            result = self.service.get_low_usage_tools(
                max_users=params.get('max_users', settings.ANALYTICS_LOW_USAGE_DEFAULT_MAX_USERS),
            )
        except ValidationError as e:
            return validation_failed(flatten_errors(e.message_dict))
        return Response(result)

    @extend_schema(responses={200: OpenApiTypes.OBJECT})
    @action(detail=False, methods=['get'], url_path='vendor-summary')
    def vendor_summary(self, request):
        """Spend, users and departments per vendor, alphabetically."""
        result = self.service.get_vendor_summary()
        if not result['data']:
            result['message'] = NO_DATA_MESSAGE
        return Response(result)
