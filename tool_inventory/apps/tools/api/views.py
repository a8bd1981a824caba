"""
Read-only viewset over the tool inventory.
"""
import logging

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from tool_inventory.apps.common.api.errors import flatten_errors
from tool_inventory.apps.tools.application.services import ToolApplicationService
from tool_inventory.apps.tools.domain.value_objects import TOOL_SORT_FIELDS, ToolSearchFilters
from tool_inventory.apps.tools.models import Tool
from .serializers import ToolDetailSerializer, ToolListQuerySerializer, ToolSerializer

logger = logging.getLogger(__name__)

FILTER_FIELDS = ('department', 'status', 'min_cost', 'max_cost', 'category', 'sort_by', 'sort_dir')


class ToolViewSet(viewsets.ViewSet):
    """
    Read-only access to the tool inventory.

    Endpoints:
    - GET /api/tools/ - Filtered, sorted list of tools
    - GET /api/tools/{id}/ - Details of one tool
    """
    lookup_value_regex = r'\d+'

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.service = ToolApplicationService()

    @extend_schema(
        parameters=[
            OpenApiParameter(name='department', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY,
                             enum=Tool.Department.values, required=False),
            OpenApiParameter(name='status', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY,
                             enum=Tool.Status.values, required=False),
            OpenApiParameter(name='min_cost', type=OpenApiTypes.DECIMAL, location=OpenApiParameter.QUERY,
                             required=False, description='Monthly cost >= min_cost'),
            OpenApiParameter(name='max_cost', type=OpenApiTypes.DECIMAL, location=OpenApiParameter.QUERY,
                             required=False, description='Monthly cost <= max_cost'),
            OpenApiParameter(name='category', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY,
                             required=False, description='Category id or name'),
            OpenApiParameter(name='sort_by', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY,
                             enum=list(TOOL_SORT_FIELDS), required=False, description='Default: name'),
            OpenApiParameter(name='sort_dir', type=OpenApiTypes.STR, location=OpenApiParameter.QUERY,
                             enum=['asc', 'desc'], required=False,
                             description='Sort direction, case-insensitive (default: asc)'),
        ],
        responses={200: OpenApiTypes.OBJECT}
    )
    def list(self, request):
        query = ToolListQuerySerializer(data=request.query_params)
        if not query.is_valid():
            details = flatten_errors(query.errors)
            logger.warning(f"Tool listing rejected: {details}")
            return Response({'error': 'Validation failed', 'details': details}, status=status.HTTP_400_BAD_REQUEST)

        params = {
            key: value for key, value in query.validated_data.items()
            if key in FILTER_FIELDS and value not in (None, '')
        }
        result = self.service.search_tools(ToolSearchFilters(**params))

        filters_applied = {
            key: float(value) if key in ('min_cost', 'max_cost') else value
            for key, value in params.items()
        }
        return Response({
            'data': ToolSerializer(result.items, many=True).data,
            'total': result.total,
            'filtered': result.filtered,
            'filters_applied': filters_applied,
        })

    @extend_schema(responses={200: ToolDetailSerializer})
    def retrieve(self, request, pk=None):
        try:
            tool = self.service.get_tool_by_id(int(pk))
        except Tool.DoesNotExist:
            return Response(
                {'error': 'Tool not found', 'message': f'Tool with ID {pk} does not exist'},
                status=status.HTTP_404_NOT_FOUND
            )
        return Response(ToolDetailSerializer(tool).data)
