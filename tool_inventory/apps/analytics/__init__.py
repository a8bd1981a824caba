"""
Analytics application.

Spend and usage reports over the tool inventory: department costs,
expensive tools, category breakdown, low-usage tools and vendor
summary.  Every report is read-only and computed on demand from a
fresh snapshot of active tools; nothing is stored or cached.
"""
