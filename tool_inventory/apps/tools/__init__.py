"""
Tool inventory application.

Holds the software-tool catalogue (tools and their categories) and the
read-only repository the analytics app uses to obtain a snapshot of the
current inventory.
"""
