"""DMS file access layer.

This package owns the SQLite connection behind a DMS file and the
readers that turn its tables into validated value objects.
"""
