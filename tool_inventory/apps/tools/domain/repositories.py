from abc import ABC, abstractmethod
from typing import Tuple
from tool_inventory.apps.tools.models import Tool
from tool_inventory.apps.tools.domain.value_objects import ToolRecord, ToolSearchFilters, ToolSearchResult


class ToolRepository(ABC):
    """
    Abstract repository for the tool inventory.
    Read-only contract used by the tool listing and the analytics service.
    """
    @abstractmethod
    def fetch_active_tools(self) -> Tuple[ToolRecord, ...]:
        """Return a snapshot of all ``active`` tools ordered by id."""
        pass

    @abstractmethod
    def search(self, filters: ToolSearchFilters) -> ToolSearchResult:
        pass

    @abstractmethod
    def get_by_id(self, tool_id: int) -> Tool:
        pass
