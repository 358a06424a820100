"""Adapters that connect the core export pipeline to SQLite and the filesystem."""
