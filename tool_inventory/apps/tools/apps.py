"""
Tools app configuration
"""
from django.apps import AppConfig


class ToolsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'tool_inventory.apps.tools'
    verbose_name = '1. Tool inventory'
