from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction
from tool_inventory.apps.tools.models import Category, Tool

CATEGORIES = [
    ('Development', '#3b82f6'),
    ('Communication', '#10b981'),
    ('Design', '#ec4899'),
    ('Productivity', '#f59e0b'),
    ('Analytics', '#8b5cf6'),
]

# name, vendor, category, monthly cost, active users, department, status
TOOLS = [
    ('GitHub Enterprise', 'GitHub', 'Development', '1250.00', 85, 'Engineering', 'active'),
    ('Jira', 'Atlassian', 'Development', '890.00', 64, 'Engineering', 'active'),
    ('Confluence', 'Atlassian', 'Productivity', '450.00', 40, 'Operations', 'active'),
    ('Slack', 'Slack Technologies', 'Communication', '960.00', 120, 'HR', 'active'),
    ('Zoom', 'Zoom Video', 'Communication', '380.00', 3, 'Sales', 'active'),
    ('Figma', 'Figma', 'Design', '540.00', 18, 'Design', 'active'),
    ('Salesforce', 'Salesforce', 'Analytics', '2400.00', 32, 'Sales', 'active'),
    ('HubSpot', 'HubSpot', 'Analytics', '800.00', 0, 'Marketing', 'active'),
    ('Tableau', 'Salesforce', 'Analytics', '700.00', 4, 'Finance', 'active'),
    ('Sketch', 'Sketch B.V.', 'Design', '99.00', 2, 'Design', 'deprecated'),
    ('Notion', 'Notion Labs', 'Productivity', '160.00', 12, 'Marketing', 'trial'),
]


class Command(BaseCommand):
    help = 'Creates a demo tool inventory for the analytics endpoints'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Delete existing tools and categories before creating new ones',
        )

    @transaction.atomic
    def handle(self, *args, **options):
        if options['reset']:
            self.stdout.write('Deleting existing inventory...')
            Tool.objects.all().delete()
            Category.objects.all().delete()

        self.stdout.write('Creating test data...')

        categories = {}
        for name, color in CATEGORIES:
            categories[name], _ = Category.objects.get_or_create(
                name=name,
                defaults={'color_hex': color}
            )

        created = 0
        for name, vendor, category, cost, users, department, status in TOOLS:
            _, was_created = Tool.objects.get_or_create(
                name=name,
                defaults={
                    'vendor': vendor,
                    'category': categories[category],
                    'monthly_cost': Decimal(cost),
                    'active_users_count': users,
                    'owner_department': department,
                    'status': status,
                }
            )
            created += int(was_created)

        self.stdout.write(self.style.SUCCESS(f'Test data created successfully ({created} new tools).'))
