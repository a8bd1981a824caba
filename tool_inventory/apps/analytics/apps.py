"""
Analytics app configuration
"""
from django.apps import AppConfig


class AnalyticsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tool_inventory.apps.analytics'
    verbose_name = '2. Analytics'
