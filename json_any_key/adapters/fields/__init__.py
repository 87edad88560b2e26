# json_any_key/adapters/fields/__init__.py

"""Field-level hooks for keyed collections nested inside pydantic models

Attach ``AnyKeyField()`` to a field annotation:

    class Scores(BaseModel):
        by_player: Annotated[dict[Player, int], AnyKeyField()]
"""

# Local imports
from json_any_key.adapters.fields._any_key_field import AnyKeyField
from json_any_key.adapters.fields._any_key_field import FieldHooks
from json_any_key.adapters.fields._any_key_field import infer_field_types

__all__ = ["AnyKeyField", "FieldHooks", "infer_field_types"]
