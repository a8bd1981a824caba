from django.contrib import admin
from tool_inventory.apps.tools import models


@admin.register(models.Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'color_hex', 'created_at']
    search_fields = ['name']
    ordering = ['name']


@admin.register(models.Tool)
class ToolAdmin(admin.ModelAdmin):
    list_display = ['name', 'vendor', 'category', 'owner_department', 'status', 'monthly_cost', 'active_users_count']
    list_filter = ['status', 'owner_department', 'category']
    search_fields = ['name', 'vendor']
    list_select_related = ['category']
    readonly_fields = ['created_at', 'updated_at']
    ordering = ['name']
