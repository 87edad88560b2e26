# json_any_key/core/types/json.py

"""JSON type definitions for type-safe JSON handling."""

# JSON Type Usage Guide:
# - JSONObject: a parsed JSON object; property names are always strings
# - JSONList: a parsed JSON array
# - JSONType: any parsed JSON value, e.g. a property value before validation

type JSONPrimitive = str | int | float | bool | None

type JSONType = JSONObject | JSONList | JSONPrimitive
type JSONObject = dict[str, JSONType]
type JSONList = list[JSONType]

__all__ = ["JSONPrimitive", "JSONType", "JSONObject", "JSONList"]
