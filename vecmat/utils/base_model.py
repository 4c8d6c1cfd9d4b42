# vecmat/utils/base_model.py
from typing import TypeVar, Any, cast
from pydantic import BaseModel

M = TypeVar('M', bound="ImmutableModel")


class ImmutableModel(BaseModel):
    """
    Frozen pydantic base shared by Vector, Matrix, Line and Plane.

    Instances never change after validation. Derived values are built with
    with_changes(), which validates the new field values exactly as the
    constructor would, so normalized normals and rectangular shapes survive
    every copy.
    """
    model_config = {
        "frozen": True,
    }

    def with_changes(self: M, **changes: Any) -> M:
        """
        Copy this value with some fields replaced.

        Replacement values may be raw sequences; the field validators of the
        concrete class convert and check them.

        Raises:
            ValueError: If a name is not a field of the model, or a new value
                breaks one of its invariants
        """
        fields = {name: getattr(self, name) for name in type(self).model_fields}

        for name, value in changes.items():
            if name not in fields:
                raise ValueError(f"Invalid field: {name}")
            fields[name] = value

        return cast(M, type(self).model_validate(fields))
