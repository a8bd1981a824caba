from dataclasses import dataclass
from decimal import Decimal
from typing import Any, List, Optional

ACTIVE_STATUS = 'active'


@dataclass(frozen=True)
class ToolRecord:
    """
    Immutable snapshot of one inventory tool, as seen by the analytics
    engine.  Decoupled from the ORM so that a report never observes an
    inventory that changes while it is being aggregated.
    """
    id: int
    name: str
    vendor: Optional[str]
    monthly_cost: Decimal
    active_users_count: int
    owner_department: str
    category_name: Optional[str] = None
    status: str = ACTIVE_STATUS

    @property
    def is_active(self) -> bool:
        return self.status == ACTIVE_STATUS


TOOL_SORT_FIELDS = ('name', 'monthly_cost', 'created_at')
DEFAULT_TOOL_SORT_FIELD = 'name'


@dataclass(frozen=True)
class ToolSearchFilters:
    """Filters and ordering of the tool listing. ``None`` means "not filtered"."""
    department: Optional[str] = None
    status: Optional[str] = None
    min_cost: Optional[Decimal] = None
    max_cost: Optional[Decimal] = None
    category: Optional[str] = None
    sort_by: str = DEFAULT_TOOL_SORT_FIELD
    sort_dir: str = 'asc'

    @property
    def category_id(self) -> Optional[int]:
        """A numeric ``category`` filter is a category id, anything else a name."""
        if self.category is not None and self.category.isdigit():
            return int(self.category)
        return None


@dataclass(frozen=True)
class ToolSearchResult:
    items: List[Any]
    total: int
    filtered: int
