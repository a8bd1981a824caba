"""
Common app configuration
"""
from django.apps import AppConfig


class CommonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tool_inventory.apps.common'
    verbose_name = '0. Common'
