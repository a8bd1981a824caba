from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from tool_inventory.apps.tools.models import Tool
from tests.fixtures.factories import CategoryFactory, ToolFactory

NO_DATA_MESSAGE = 'No analytics data available - ensure tools data exists'


@pytest.mark.django_db
class TestAnalyticsAPI:
    def setup_method(self):
        self.client = APIClient()
        development = CategoryFactory(name='Development')
        communication = CategoryFactory(name='Communication')

        ToolFactory(name='GitHub', vendor='GitHub', category=development,
                    monthly_cost=Decimal('100.00'), active_users_count=10,
                    owner_department=Tool.Department.ENGINEERING)
        ToolFactory(name='Jira', vendor='Atlassian', category=development,
                    monthly_cost=Decimal('50.00'), active_users_count=5,
                    owner_department=Tool.Department.ENGINEERING)
        ToolFactory(name='Zoom', vendor='Zoom Video', category=communication,
                    monthly_cost=Decimal('30.00'), active_users_count=0,
                    owner_department=Tool.Department.SALES)
        ToolFactory(name='Legacy CRM', vendor='Oracle', category=communication,
                    monthly_cost=Decimal('9000.00'), active_users_count=1,
                    owner_department=Tool.Department.SALES, status=Tool.Status.DEPRECATED)

    def test_department_costs(self):
        """Department costs with the default sort"""
        url = reverse('analytics-department-costs')
        response = self.client.get(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [row['department'] for row in data['data']] == ['Engineering', 'Sales']
        assert data['data'][0]['total_cost'] == 150.0
        assert data['data'][0]['average_cost_per_tool'] == 75.0
        assert data['data'][0]['cost_percentage'] == 83.3
        assert data['data'][1]['cost_percentage'] == 16.7
        assert data['summary'] == {
            'total_company_cost': 180.0,
            'departments_count': 2,
            'most_expensive_department': 'Engineering',
        }
        assert 'message' not in data

    def test_department_costs_custom_sort(self):
        url = reverse('analytics-department-costs')
        response = self.client.get(url, {'sort_by': 'total_cost', 'order': 'ASC'})

        assert response.status_code == status.HTTP_200_OK
        assert [row['department'] for row in response.json()['data']] == ['Sales', 'Engineering']

    def test_department_costs_rejects_unknown_sort_key(self):
        url = reverse('analytics-department-costs')
        response = self.client.get(url, {'sort_by': 'name'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            'error': 'Validation failed',
            'details': {
                'sort_by': 'Must be one of: total_cost, department, tools_count, total_users, '
                           'average_cost_per_tool, cost_percentage',
            },
        }

    def test_department_costs_rejects_unknown_order(self):
        url = reverse('analytics-department-costs')
        response = self.client.get(url, {'order': 'random'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['details'] == {'order': 'Must be asc or desc'}

    @pytest.mark.parametrize('order, expected', [
        ('DeSc', ['Engineering', 'Sales']),
        ('Asc', ['Sales', 'Engineering']),
    ])
    def test_department_costs_order_is_case_insensitive(self, order, expected):
        url = reverse('analytics-department-costs')
        response = self.client.get(url, {'order': order})

        assert response.status_code == status.HTTP_200_OK
        assert [row['department'] for row in response.json()['data']] == expected

    def test_department_costs_rejects_blank_order(self):
        url = reverse('analytics-department-costs')
        response = self.client.get(url, {'order': ''})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['details'] == {'order': 'Must be asc or desc'}

    def test_expensive_tools(self):
        url = reverse('analytics-expensive-tools')
        response = self.client.get(url, {'limit': 2})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [row['name'] for row in data['data']] == ['GitHub', 'Jira']
        assert data['analysis']['total_tools_analyzed'] == 3
        # 180 spread over 15 users
        assert data['analysis']['avg_cost_per_user_company'] == 12.0
        # Zoom (30 per non-existent user) sits beyond the limit
        assert data['analysis']['potential_savings_identified'] == 30.0

    def test_expensive_tools_min_cost_boundary(self):
        url = reverse('analytics-expensive-tools')
        response = self.client.get(url, {'min_cost': '50'})

        assert [row['name'] for row in response.json()['data']] == ['GitHub', 'Jira']

    @pytest.mark.parametrize('limit', ['0', '101', 'ten'])
    def test_expensive_tools_rejects_bad_limit(self, limit):
        url = reverse('analytics-expensive-tools')
        response = self.client.get(url, {'limit': limit})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['details'] == {'limit': 'Must be positive integer between 1 and 100'}

    def test_expensive_tools_rejects_negative_min_cost(self):
        url = reverse('analytics-expensive-tools')
        response = self.client.get(url, {'min_cost': '-1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['details'] == {'min_cost': 'Must be >= 0'}

    def test_tools_by_category(self):
        url = reverse('analytics-tools-by-category')
        response = self.client.get(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [row['category_name'] for row in data['data']] == ['Development', 'Communication']
        assert data['insights'] == {
            'most_expensive_category': 'Development',
            'most_efficient_category': 'Development',
        }

    def test_low_usage_tools(self):
        url = reverse('analytics-low-usage-tools')
        response = self.client.get(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [row['name'] for row in data['data']] == ['Zoom', 'Jira']
        assert data['data'][0]['warning_level'] == 'high'
        assert data['data'][1]['warning_level'] == 'low'
        assert data['savings_analysis'] == {
            'total_underutilized_tools': 2,
            'potential_monthly_savings': 30.0,
            'potential_annual_savings': 360.0,
        }

    def test_low_usage_tools_rejects_negative_threshold(self):
        url = reverse('analytics-low-usage-tools')
        response = self.client.get(url, {'max_users': '-1'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()['details'] == {'max_users': 'Must be a non-negative integer'}

    def test_vendor_summary(self):
        url = reverse('analytics-vendor-summary')
        response = self.client.get(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [row['vendor'] for row in data['data']] == ['Atlassian', 'GitHub', 'Zoom Video']
        assert data['vendor_insights'] == {
            'most_expensive_vendor': 'GitHub',
            'most_efficient_vendor': 'GitHub',
            'single_tool_vendors': 3,
        }


@pytest.mark.django_db
class TestAnalyticsAPIWithoutData:
    def setup_method(self):
        self.client = APIClient()

    @pytest.mark.parametrize('url_name', [
        'analytics-department-costs',
        'analytics-tools-by-category',
        'analytics-vendor-summary',
    ])
    def test_empty_inventory_returns_message(self, url_name):
        response = self.client.get(reverse(url_name))

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data['data'] == []
        assert data['message'] == NO_DATA_MESSAGE

    def test_empty_inventory_department_summary(self):
        response = self.client.get(reverse('analytics-department-costs'))
        assert response.json()['summary'] == {
            'total_company_cost': 0.0,
            'departments_count': 0,
            'most_expensive_department': None,
        }

    def test_empty_inventory_expensive_tools(self):
        response = self.client.get(reverse('analytics-expensive-tools'))

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            'data': [],
            'analysis': {
                'total_tools_analyzed': 0,
                'avg_cost_per_user_company': 0.0,
                'potential_savings_identified': 0.0,
            },
        }
