from decimal import Decimal

import pytest
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from tool_inventory.apps.tools.models import Tool
from tests.fixtures.factories import CategoryFactory, ToolFactory


@pytest.mark.django_db
class TestToolAPI:
    def setup_method(self):
        self.client = APIClient()
        self.url = reverse('tools-list')
        self.development = CategoryFactory(name='Development')
        communication = CategoryFactory(name='Communication')

        self.github = ToolFactory(name='GitHub', vendor='GitHub', category=self.development,
                                  monthly_cost=Decimal('100.00'), active_users_count=10,
                                  owner_department=Tool.Department.ENGINEERING)
        ToolFactory(name='Jira', vendor='Atlassian', category=self.development,
                    monthly_cost=Decimal('50.00'), active_users_count=5,
                    owner_department=Tool.Department.ENGINEERING)
        ToolFactory(name='Zoom', vendor='Zoom Video', category=communication,
                    monthly_cost=Decimal('30.00'), active_users_count=0,
                    owner_department=Tool.Department.SALES, status=Tool.Status.DEPRECATED)

    def test_list_tools(self):
        response = self.client.get(self.url)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [row['name'] for row in data['data']] == ['GitHub', 'Jira', 'Zoom']
        assert data['total'] == 3
        assert data['filtered'] == 3
        assert data['filters_applied'] == {'sort_by': 'name', 'sort_dir': 'asc'}

        github = data['data'][0]
        assert github['category'] == 'Development'
        assert github['monthly_cost'] == 100.0
        assert github['owner_department'] == 'Engineering'
        assert github['status'] == 'active'
        assert github['created_at'].endswith('Z')

    def test_max_cost_includes_exact_value(self):
        response = self.client.get(self.url, {'max_cost': '50.00'})

        data = response.json()
        assert [row['name'] for row in data['data']] == ['Jira', 'Zoom']
        assert data['filtered'] == 2
        assert data['total'] == 3
        assert data['filters_applied']['max_cost'] == 50.0

    def test_min_cost_includes_exact_value(self):
        response = self.client.get(self.url, {'min_cost': '50'})

        assert [row['name'] for row in response.json()['data']] == ['GitHub', 'Jira']

    @pytest.mark.parametrize('sort_dir', ['desc', 'DESC', 'Desc'])
    def test_sort_dir_is_case_insensitive(self, sort_dir):
        response = self.client.get(self.url, {'sort_by': 'monthly_cost', 'sort_dir': sort_dir})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [row['name'] for row in data['data']] == ['GitHub', 'Jira', 'Zoom']
        assert data['filters_applied']['sort_dir'] == 'desc'

    def test_filters_combine(self):
        response = self.client.get(self.url, {
            'department': 'Engineering',
            'status': 'active',
            'category': str(self.development.id),
            'min_cost': '',
        })

        data = response.json()
        assert [row['name'] for row in data['data']] == ['GitHub', 'Jira']
        assert data['filters_applied'] == {
            'department': 'Engineering',
            'status': 'active',
            'category': str(self.development.id),
            'sort_by': 'name',
            'sort_dir': 'asc',
        }

    def test_filter_by_category_name(self):
        response = self.client.get(self.url, {'category': 'Communication'})

        assert [row['name'] for row in response.json()['data']] == ['Zoom']

    @pytest.mark.parametrize('params, details', [
        ({'sort_dir': 'sideways'}, {'sort_dir': 'Must be asc or desc'}),
        ({'sort_by': 'vendor'}, {'sort_by': 'Must be one of: name, monthly_cost, created_at'}),
        ({'max_cost': '-1'}, {'max_cost': 'Must be >= 0'}),
        ({'min_cost': 'abc'}, {'min_cost': 'Must be >= 0'}),
        ({'status': 'retired'}, {'status': 'Must be one of: active, deprecated, trial'}),
    ])
    def test_list_rejects_invalid_parameters(self, params, details):
        response = self.client.get(self.url, params)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {'error': 'Validation failed', 'details': details}

    def test_retrieve_tool(self):
        url = reverse('tools-detail', args=[self.github.id])
        response = self.client.get(url)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data['id'] == self.github.id
        assert data['name'] == 'GitHub'
        assert data['vendor'] == 'GitHub'
        assert data['category'] == 'Development'
        # 100.00 per user for 10 users
        assert data['total_monthly_cost'] == 1000.0
        assert 'updated_at' in data

    def test_retrieve_uncategorised_tool(self):
        tool = ToolFactory(name='Wiki', category=None)
        response = self.client.get(reverse('tools-detail', args=[tool.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.json()['category'] is None

    def test_retrieve_missing_tool(self):
        missing_id = self.github.id + 1000
        response = self.client.get(reverse('tools-detail', args=[missing_id]))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            'error': 'Tool not found',
            'message': f'Tool with ID {missing_id} does not exist',
        }

    def test_tools_are_read_only(self):
        response = self.client.post(self.url, {'name': 'New tool'}, format='json')

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert Tool.objects.count() == 3
