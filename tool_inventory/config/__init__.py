"""
Configuration package for the tool_inventory Django project.
"""
