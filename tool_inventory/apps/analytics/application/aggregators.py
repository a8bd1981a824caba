"""
Analytics aggregators.

Five independent, pure report builders over a snapshot of
``ToolRecord`` objects.  Each one:

1. keeps only ``active`` records (whatever the caller passed in);
2. groups/derives rows with unrounded ``Decimal`` values;
3. runs its insight reductions over the rows in grouping order
   (first-seen order of the snapshot);
4. orders the rows and rounds values while serialising them.

No aggregator touches the database, a cache or shared state, so they
are safe to run concurrently on the same snapshot.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Dict, Iterable, List, Optional, Set

from django.core.exceptions import ValidationError

from tool_inventory.apps.tools.domain.value_objects import ToolRecord
from tool_inventory.apps.analytics.domain.classifiers import (
    EfficiencyRating,
    WarningLevel,
    efficiency_rating,
    potential_action,
    vendor_efficiency,
    warning_level,
)
from tool_inventory.apps.analytics.domain.numbers import (
    MONTHS_PER_YEAR,
    ZERO,
    divide,
    percentage,
    round_currency,
    round_percent,
    to_decimal,
)
from tool_inventory.apps.analytics.domain.sorting import DepartmentSortKey, SortOrder, sort_rows

DEFAULT_EXPENSIVE_TOOLS_LIMIT = 10
MIN_EXPENSIVE_TOOLS_LIMIT = 1
MAX_EXPENSIVE_TOOLS_LIMIT = 100
DEFAULT_LOW_USAGE_MAX_USERS = 5


def active_records(records: Iterable[ToolRecord]) -> List[ToolRecord]:
    return [record for record in records if record.is_active]


def cost_per_user(record: ToolRecord) -> Decimal:
    # A tool nobody uses costs its full price per (missing) user
    return divide(record.monthly_cost, record.active_users_count, fallback=record.monthly_cost)


def company_avg_cost_per_user(records: Iterable[ToolRecord]) -> Decimal:
    total_cost = ZERO
    total_users = 0
    for record in records:
        total_cost += record.monthly_cost
        total_users += max(record.active_users_count, 0)
    return divide(total_cost, total_users)


def most_expensive(rows: Iterable[Any], cost: Callable[[Any], Decimal], name: Callable[[Any], str]) -> Optional[str]:
    """Name of the row with strictly the highest cost; first one wins a tie."""
    best_name, best_cost = None, None
    for row in rows:
        if best_cost is None or cost(row) > best_cost:
            best_name, best_cost = name(row), cost(row)
    return best_name


def most_efficient(rows: Iterable[Any], average: Callable[[Any], Decimal], name: Callable[[Any], str]) -> Optional[str]:
    """
    Name of the row with the lowest average cost per user, ignoring rows
    without users.  First one wins a tie.
    """
    best_name, best_average = None, None
    for row in rows:
        if row.total_users <= 0:
            continue
        if best_average is None or average(row) < best_average:
            best_name, best_average = name(row), average(row)
    return best_name


# --------------------------------------------------------------------------
# Department costs
# --------------------------------------------------------------------------

@dataclass
class DepartmentCostRow:
    department: str
    total_cost: Decimal = ZERO
    tools_count: int = 0
    total_users: int = 0
    cost_percentage: Decimal = ZERO

    def add(self, record: ToolRecord):
        self.total_cost += record.monthly_cost
        self.tools_count += 1
        self.total_users += record.active_users_count

    @property
    def average_cost_per_tool(self) -> Decimal:
        return divide(self.total_cost, self.tools_count)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'department': self.department,
            'total_cost': round_currency(self.total_cost),
            'tools_count': self.tools_count,
            'total_users': self.total_users,
            'average_cost_per_tool': round_currency(self.average_cost_per_tool),
            'cost_percentage': round_percent(self.cost_percentage),
        }


DEPARTMENT_SORT_ACCESSORS: Dict[DepartmentSortKey, Callable[[DepartmentCostRow], Any]] = {
    DepartmentSortKey.TOTAL_COST: lambda row: row.total_cost,
    DepartmentSortKey.DEPARTMENT: lambda row: row.department,
    DepartmentSortKey.TOOLS_COUNT: lambda row: row.tools_count,
    DepartmentSortKey.TOTAL_USERS: lambda row: row.total_users,
    DepartmentSortKey.AVERAGE_COST_PER_TOOL: lambda row: row.average_cost_per_tool,
    DepartmentSortKey.COST_PERCENTAGE: lambda row: row.cost_percentage,
}


def department_costs(records: Iterable[ToolRecord], sort_by=None, order=SortOrder.DESC) -> Dict[str, Any]:
    """
    Cost breakdown per owning department.

    ``sort_by`` is one of ``DepartmentSortKey`` (default ``total_cost``),
    ``order`` is ``asc`` or ``desc`` (default ``desc``).
    """
    sort_key = DepartmentSortKey.parse(sort_by)
    sort_order = SortOrder.parse(order)

    groups: Dict[str, DepartmentCostRow] = {}
    for record in active_records(records):
        row = groups.get(record.owner_department)
        if row is None:
            row = groups[record.owner_department] = DepartmentCostRow(department=record.owner_department)
        row.add(record)

    rows = list(groups.values())
    total_company_cost = sum((row.total_cost for row in rows), ZERO)
    for row in rows:
        row.cost_percentage = percentage(row.total_cost, total_company_cost)

    most_expensive_department = most_expensive(
        rows, cost=lambda row: row.total_cost, name=lambda row: row.department
    )

    ordered = sort_rows(rows, DEPARTMENT_SORT_ACCESSORS[sort_key], sort_order)
    return {
        'data': [row.to_dict() for row in ordered],
        'summary': {
            'total_company_cost': round_currency(total_company_cost),
            'departments_count': len(rows),
            'most_expensive_department': most_expensive_department,
        },
    }


# --------------------------------------------------------------------------
# Per-tool rows (expensive tools, low usage)
# --------------------------------------------------------------------------

def _tool_row(record: ToolRecord) -> Dict[str, Any]:
    return {
        'id': record.id,
        'name': record.name,
        'monthly_cost': round_currency(record.monthly_cost),
        'active_users_count': record.active_users_count,
        'cost_per_user': round_currency(cost_per_user(record)),
        'department': record.owner_department,
        'vendor': record.vendor,
    }


def validate_expensive_tools_params(min_cost, limit):
    if isinstance(limit, bool) or not isinstance(limit, int) \
            or not MIN_EXPENSIVE_TOOLS_LIMIT <= limit <= MAX_EXPENSIVE_TOOLS_LIMIT:
        raise ValidationError({
            'limit': f'Must be positive integer between {MIN_EXPENSIVE_TOOLS_LIMIT} and {MAX_EXPENSIVE_TOOLS_LIMIT}'
        })
    if min_cost is not None and to_decimal(min_cost) < ZERO:
        raise ValidationError({'min_cost': 'Must be >= 0'})


def expensive_tools(records: Iterable[ToolRecord], min_cost=None,
                    limit: int = DEFAULT_EXPENSIVE_TOOLS_LIMIT) -> Dict[str, Any]:
    """
    Active tools ranked by monthly cost, each rated against the company
    average cost per user.

    The baseline is computed over every active tool, regardless of
    ``min_cost``.  ``potential_savings_identified`` covers every tool
    rated ``low`` that passes ``min_cost``, including those cut off by
    ``limit``.
    """
    validate_expensive_tools_params(min_cost, limit)
    active = active_records(records)
    company_avg = company_avg_cost_per_user(active)

    threshold = to_decimal(min_cost) if min_cost is not None else None
    qualifying = [
        record for record in active
        if threshold is None or record.monthly_cost >= threshold
    ]
    qualifying = sort_rows(qualifying, lambda record: record.monthly_cost, SortOrder.DESC)

    rows = []
    potential_savings = ZERO
    for record in qualifying:
        rating = efficiency_rating(cost_per_user(record), company_avg)
        if rating == EfficiencyRating.LOW:
            potential_savings += record.monthly_cost
        row = _tool_row(record)
        row['efficiency_rating'] = rating.value
        rows.append(row)

    return {
        'data': rows[:limit],
        'analysis': {
            'total_tools_analyzed': len(rows),
            'avg_cost_per_user_company': round_currency(company_avg),
            'potential_savings_identified': round_currency(potential_savings),
        },
    }


def low_usage_tools(records: Iterable[ToolRecord], max_users: int = DEFAULT_LOW_USAGE_MAX_USERS) -> Dict[str, Any]:
    """
    Active tools with at most ``max_users`` users, least used first and,
    among equally used tools, most expensive first.
    """
    if isinstance(max_users, bool) or not isinstance(max_users, int) or max_users < 0:
        raise ValidationError({'max_users': 'Must be a non-negative integer'})

    underused = [record for record in active_records(records) if record.active_users_count <= max_users]
    underused.sort(key=lambda record: (record.active_users_count, -record.monthly_cost))

    rows = []
    potential_monthly = ZERO
    for record in underused:
        level = warning_level(record.active_users_count, cost_per_user(record))
        if level in (WarningLevel.HIGH, WarningLevel.MEDIUM):
            potential_monthly += record.monthly_cost
        row = _tool_row(record)
        row['warning_level'] = level.value
        row['potential_action'] = potential_action(level)
        rows.append(row)

    return {
        'data': rows,
        'savings_analysis': {
            'total_underutilized_tools': len(rows),
            'potential_monthly_savings': round_currency(potential_monthly),
            'potential_annual_savings': round_currency(potential_monthly * MONTHS_PER_YEAR),
        },
    }


# --------------------------------------------------------------------------
# Categories
# --------------------------------------------------------------------------

@dataclass
class CategoryRow:
    category_name: str
    tools_count: int = 0
    total_cost: Decimal = ZERO
    total_users: int = 0
    percentage_of_budget: Decimal = ZERO

    def add(self, record: ToolRecord):
        self.tools_count += 1
        self.total_cost += record.monthly_cost
        self.total_users += record.active_users_count

    @property
    def average_cost_per_user(self) -> Decimal:
        return divide(self.total_cost, self.total_users)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category_name': self.category_name,
            'tools_count': self.tools_count,
            'total_cost': round_currency(self.total_cost),
            'total_users': self.total_users,
            'percentage_of_budget': round_percent(self.percentage_of_budget),
            'average_cost_per_user': round_currency(self.average_cost_per_user),
        }


def tools_by_category(records: Iterable[ToolRecord]) -> Dict[str, Any]:
    """Spend per category; uncategorised tools are left out."""
    groups: Dict[str, CategoryRow] = {}
    for record in active_records(records):
        if record.category_name is None:
            continue
        row = groups.get(record.category_name)
        if row is None:
            row = groups[record.category_name] = CategoryRow(category_name=record.category_name)
        row.add(record)

    rows = list(groups.values())
    total_company_cost = sum((row.total_cost for row in rows), ZERO)
    for row in rows:
        row.percentage_of_budget = percentage(row.total_cost, total_company_cost)

    return {
        'data': [row.to_dict() for row in rows],
        'insights': {
            'most_expensive_category': most_expensive(
                rows, cost=lambda row: row.total_cost, name=lambda row: row.category_name
            ),
            'most_efficient_category': most_efficient(
                rows, average=lambda row: row.average_cost_per_user, name=lambda row: row.category_name
            ),
        },
    }


# --------------------------------------------------------------------------
# Vendors
# --------------------------------------------------------------------------

@dataclass
class VendorRow:
    vendor: str
    tools_count: int = 0
    total_monthly_cost: Decimal = ZERO
    total_users: int = 0
    departments: Set[str] = field(default_factory=set)

    def add(self, record: ToolRecord):
        self.tools_count += 1
        self.total_monthly_cost += record.monthly_cost
        self.total_users += record.active_users_count
        self.departments.add(record.owner_department)

    @property
    def average_cost_per_user(self) -> Decimal:
        return divide(self.total_monthly_cost, self.total_users)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'vendor': self.vendor,
            'tools_count': self.tools_count,
            'total_monthly_cost': round_currency(self.total_monthly_cost),
            'total_users': self.total_users,
            'departments': ','.join(sorted(self.departments)),
            'average_cost_per_user': round_currency(self.average_cost_per_user),
            'vendor_efficiency': vendor_efficiency(self.average_cost_per_user).value,
        }


def vendor_summary(records: Iterable[ToolRecord]) -> Dict[str, Any]:
    """
    Spend per vendor.  Tools without a vendor share the ``""`` group.
    Insights are taken in grouping order, rows are returned sorted by
    vendor name.
    """
    groups: Dict[str, VendorRow] = {}
    for record in active_records(records):
        vendor = record.vendor or ''
        row = groups.get(vendor)
        if row is None:
            row = groups[vendor] = VendorRow(vendor=vendor)
        row.add(record)

    rows = list(groups.values())
    insights = {
        'most_expensive_vendor': most_expensive(
            rows, cost=lambda row: row.total_monthly_cost, name=lambda row: row.vendor
        ),
        'most_efficient_vendor': most_efficient(
            rows, average=lambda row: row.average_cost_per_user, name=lambda row: row.vendor
        ),
        'single_tool_vendors': sum(1 for row in rows if row.tools_count == 1),
    }

    ordered = sort_rows(rows, lambda row: row.vendor, SortOrder.ASC)
    return {
        'data': [row.to_dict() for row in ordered],
        'vendor_insights': insights,
    }
