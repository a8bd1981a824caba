"""
Analytics service layer: fetches one inventory snapshot per call and
hands it to the matching aggregator.
"""
import logging
from typing import Any, Dict, Optional, Tuple

from tool_inventory.apps.tools.domain.repositories import ToolRepository
from tool_inventory.apps.tools.domain.value_objects import ToolRecord
from tool_inventory.apps.tools.infrastructure.repositories import ToolRepositoryImpl
from tool_inventory.apps.analytics.application import aggregators

logger = logging.getLogger(__name__)


class AnalyticsApplicationService:
    """Builds the analytics reports over the current tool inventory"""

    def __init__(self, tool_repository: ToolRepository = ToolRepositoryImpl()):
        self.tool_repository = tool_repository

    def _snapshot(self) -> Tuple[ToolRecord, ...]:
        # Reports must see one consistent inventory for the whole computation
        return tuple(self.tool_repository.fetch_active_tools())

    def get_department_costs(self, sort_by: Optional[str] = None, order: str = 'desc') -> Dict[str, Any]:
        snapshot = self._snapshot()
        result = aggregators.department_costs(snapshot, sort_by=sort_by, order=order)
        logger.info(
            f"Department costs computed: {result['summary']['departments_count']} departments "
            f"from {len(snapshot)} tools (sort_by={sort_by or 'total_cost'}, order={order})"
        )
        return result

    def get_expensive_tools(self, min_cost=None,
                            limit: int = aggregators.DEFAULT_EXPENSIVE_TOOLS_LIMIT) -> Dict[str, Any]:
        snapshot = self._snapshot()
        result = aggregators.expensive_tools(snapshot, min_cost=min_cost, limit=limit)
        logger.info(
            f"Expensive tools computed: {result['analysis']['total_tools_analyzed']} analyzed, "
            f"{len(result['data'])} returned (min_cost={min_cost}, limit={limit})"
        )
        return result

    def get_tools_by_category(self) -> Dict[str, Any]:
        snapshot = self._snapshot()
        result = aggregators.tools_by_category(snapshot)
        logger.info(f"Category breakdown computed: {len(result['data'])} categories from {len(snapshot)} tools")
        return result

    def get_low_usage_tools(self, max_users: int = aggregators.DEFAULT_LOW_USAGE_MAX_USERS) -> Dict[str, Any]:
        snapshot = self._snapshot()
        result = aggregators.low_usage_tools(snapshot, max_users=max_users)
        logger.info(
            f"Low usage tools computed: {result['savings_analysis']['total_underutilized_tools']} tools "
            f"with at most {max_users} users"
        )
        return result

    def get_vendor_summary(self) -> Dict[str, Any]:
        snapshot = self._snapshot()
        result = aggregators.vendor_summary(snapshot)
        logger.info(f"Vendor summary computed: {len(result['data'])} vendors from {len(snapshot)} tools")
        return result
