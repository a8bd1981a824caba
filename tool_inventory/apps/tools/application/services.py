import logging

from tool_inventory.apps.tools.models import Tool
from tool_inventory.apps.tools.domain.repositories import ToolRepository
from tool_inventory.apps.tools.domain.value_objects import ToolSearchFilters, ToolSearchResult
from tool_inventory.apps.tools.infrastructure.repositories import ToolRepositoryImpl

logger = logging.getLogger(__name__)


class ToolApplicationService:
    """
    Read-only access to the tool inventory.
    """
    def __init__(self, tool_repository: ToolRepository = ToolRepositoryImpl()):
        self.tool_repository = tool_repository

    def search_tools(self, filters: ToolSearchFilters) -> ToolSearchResult:
        result = self.tool_repository.search(filters)
        logger.info(f"Tool search: {result.filtered} of {result.total} tools match {filters}")
        return result

    def get_tool_by_id(self, tool_id: int) -> Tool:
        return self.tool_repository.get_by_id(tool_id)
