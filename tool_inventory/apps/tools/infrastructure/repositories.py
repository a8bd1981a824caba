from typing import Tuple
from django.db.models import QuerySet
from tool_inventory.apps.tools.models import Tool
from tool_inventory.apps.tools.domain.repositories import ToolRepository
from tool_inventory.apps.tools.domain.value_objects import (
    DEFAULT_TOOL_SORT_FIELD,
    TOOL_SORT_FIELDS,
    ToolRecord,
    ToolSearchFilters,
    ToolSearchResult,
)


class ToolRepositoryImpl(ToolRepository):
    """
    Concrete inventory repository backed by the Django ORM.
    """
    def fetch_active_tools(self) -> Tuple[ToolRecord, ...]:
        tools = (
            Tool.objects.filter(status=Tool.Status.ACTIVE)
            .select_related('category')
            .order_by('id')
        )
        return tuple(self._to_record(tool) for tool in tools)

    def search(self, filters: ToolSearchFilters) -> ToolSearchResult:
        total = Tool.objects.count()
        queryset = self._apply_filters(Tool.objects.select_related('category'), filters)

        sort_field = filters.sort_by if filters.sort_by in TOOL_SORT_FIELDS else DEFAULT_TOOL_SORT_FIELD
        if filters.sort_dir.lower() == 'desc':
            sort_field = f'-{sort_field}'
        items = list(queryset.order_by(sort_field, 'id'))

        return ToolSearchResult(items=items, total=total, filtered=len(items))

    def get_by_id(self, tool_id: int) -> Tool:
        return Tool.objects.select_related('category').get(pk=tool_id)

    @staticmethod
    def _apply_filters(queryset: QuerySet, filters: ToolSearchFilters) -> QuerySet:
        if filters.department:
            queryset = queryset.filter(owner_department=filters.department)
        if filters.status:
            queryset = queryset.filter(status=filters.status)
        # Both cost bounds are inclusive
        if filters.min_cost is not None:
            queryset = queryset.filter(monthly_cost__gte=filters.min_cost)
        if filters.max_cost is not None:
            queryset = queryset.filter(monthly_cost__lte=filters.max_cost)
        if filters.category:
            if filters.category_id is not None:
                queryset = queryset.filter(category_id=filters.category_id)
            else:
                queryset = queryset.filter(category__name=filters.category)
        return queryset

    @staticmethod
    def _to_record(tool: Tool) -> ToolRecord:
        return ToolRecord(
            id=tool.id,
            name=tool.name,
            vendor=tool.vendor,
            monthly_cost=tool.monthly_cost,
            active_users_count=tool.active_users_count,
            owner_department=tool.owner_department,
            category_name=tool.category.name if tool.category_id else None,
            status=tool.status,
        )
