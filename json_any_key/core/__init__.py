# json_any_key/core/__init__.py

"""Core types and domain definitions with no codec logic."""
