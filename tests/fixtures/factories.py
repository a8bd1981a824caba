from decimal import Decimal

import factory
from factory.django import DjangoModelFactory
from tool_inventory.apps.tools.models import Category, Tool
from tool_inventory.apps.tools.domain.value_objects import ToolRecord


class CategoryFactory(DjangoModelFactory):
    class Meta:
        model = Category
        django_get_or_create = ('name',)

    name = factory.Sequence(lambda n: f'Category {n}')


class ToolFactory(DjangoModelFactory):
    class Meta:
        model = Tool

    name = factory.Sequence(lambda n: f'Tool {n}')
    vendor = factory.Faker('company')
    category = factory.SubFactory(CategoryFactory)
    monthly_cost = Decimal('100.00')
    active_users_count = 10
    owner_department = Tool.Department.ENGINEERING
    status = Tool.Status.ACTIVE


class ToolRecordFactory(factory.Factory):
    """In-memory snapshot records for the pure aggregator tests"""
    class Meta:
        model = ToolRecord

    id = factory.Sequence(lambda n: n + 1)
    name = factory.LazyAttribute(lambda o: f'Tool {o.id}')
    vendor = 'Acme'
    monthly_cost = Decimal('100.00')
    active_users_count = 10
    owner_department = 'Engineering'
    category_name = 'Development'
    status = 'active'
