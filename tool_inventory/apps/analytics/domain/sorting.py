from enum import Enum
from typing import Callable, List, Sequence, TypeVar

from django.core.exceptions import ValidationError

Row = TypeVar('Row')


class SortOrder(str, Enum):
    ASC = 'asc'
    DESC = 'desc'

    @classmethod
    def parse(cls, value) -> 'SortOrder':
        """Accepts ``asc``/``desc`` in any letter case."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValidationError({'order': 'Must be asc or desc'})

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


def sort_rows(rows: Sequence[Row], key: Callable[[Row], object], order: SortOrder) -> List[Row]:
    """
    Stable sort: rows with equal keys keep their relative order in both
    directions.
    """
    # sorted(reverse=True) is stable as well, equal keys are not flipped
    return sorted(rows, key=key, reverse=order is SortOrder.DESC)


class DepartmentSortKey(str, Enum):
    """Columns the department cost report may be sorted by."""
    TOTAL_COST = 'total_cost'
    DEPARTMENT = 'department'
    TOOLS_COUNT = 'tools_count'
    TOTAL_USERS = 'total_users'
    AVERAGE_COST_PER_TOOL = 'average_cost_per_tool'
    COST_PERCENTAGE = 'cost_percentage'

    @classmethod
    def parse(cls, value) -> 'DepartmentSortKey':
        if value is None or value == '':
            return cls.TOTAL_COST
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError({'sort_by': f"Must be one of: {', '.join(cls.values())}"})

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]
