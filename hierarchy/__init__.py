"""Rebuild a management hierarchy from flat employee records."""
