"""Core domain package for archivist.

Core contains timestamp normalization, grouping, and rendering logic without
any SQLite or filesystem-specific code, keeping the export pipeline portable.
"""
