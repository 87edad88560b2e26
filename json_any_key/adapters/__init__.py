# json_any_key/adapters/__init__.py

"""Public entry points: module-level functions and pydantic field hooks"""
