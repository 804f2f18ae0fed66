"""
Per-domain repository modules for database access.

`core.db.crud` re-exports these functions as the single import surface used
by the API and service layers.
"""
