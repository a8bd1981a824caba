"""
Threshold classifiers used by the analytics reports.

Each classifier is a pure function of its numeric inputs.  Boundaries:

* efficiency rating (ratio of a tool's cost per user to the company
  average): ``< 0.5`` excellent, ``< 0.8`` good, ``<= 1.2`` average,
  otherwise low;
* warning level (low-usage report): no users is always high, otherwise
  cost per user ``< 20`` low, ``<= 50`` medium, otherwise high;
* vendor efficiency (average cost per user): ``< 5`` excellent,
  ``<= 15`` good, ``<= 25`` average, otherwise poor.
"""
from decimal import Decimal

from django.db import models

from .numbers import ZERO, to_decimal


class EfficiencyRating(models.TextChoices):
    EXCELLENT = 'excellent', 'Excellent'
    GOOD = 'good', 'Good'
    AVERAGE = 'average', 'Average'
    LOW = 'low', 'Low'


class WarningLevel(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


class VendorEfficiency(models.TextChoices):
    EXCELLENT = 'excellent', 'Excellent'
    GOOD = 'good', 'Good'
    AVERAGE = 'average', 'Average'
    POOR = 'poor', 'Poor'


POTENTIAL_ACTIONS = {
    WarningLevel.HIGH: 'Consider canceling or downgrading',
    WarningLevel.MEDIUM: 'Review usage and consider optimization',
    WarningLevel.LOW: 'Monitor usage trends',
}


def efficiency_rating(cost_per_user, company_avg_cost_per_user) -> EfficiencyRating:
    company_avg = to_decimal(company_avg_cost_per_user)
    if company_avg <= ZERO:
        return EfficiencyRating.AVERAGE

    ratio = to_decimal(cost_per_user) / company_avg
    if ratio < Decimal('0.5'):
        return EfficiencyRating.EXCELLENT
    if ratio < Decimal('0.8'):
        return EfficiencyRating.GOOD
    if ratio <= Decimal('1.2'):
        return EfficiencyRating.AVERAGE
    return EfficiencyRating.LOW


def warning_level(active_users_count: int, cost_per_user) -> WarningLevel:
    if active_users_count == 0:
        return WarningLevel.HIGH

    cost_per_user = to_decimal(cost_per_user)
    if cost_per_user < Decimal('20'):
        return WarningLevel.LOW
    if cost_per_user <= Decimal('50'):
        return WarningLevel.MEDIUM
    return WarningLevel.HIGH


def potential_action(level: WarningLevel) -> str:
    return POTENTIAL_ACTIONS[WarningLevel(level)]


def vendor_efficiency(average_cost_per_user) -> VendorEfficiency:
    average = to_decimal(average_cost_per_user)
    if average < Decimal('5'):
        return VendorEfficiency.EXCELLENT
    if average <= Decimal('15'):
        return VendorEfficiency.GOOD
    if average <= Decimal('25'):
        return VendorEfficiency.AVERAGE
    return VendorEfficiency.POOR
