# Third-party imports
from pydantic import BaseModel

# Local application imports
from bookclub.models.base import Base


def update_model_fields(model_instance: Base, update_data: BaseModel, partial_update: bool = True) -> list[str]:
    """
    Updates model fields based on the provided update_data.

    - If `partial_update=True`, updates only non-null fields.
    - If `partial_update=False`, updates all fields, setting unspecified ones to None.

    Returns:
        The names of the fields that were assigned.
    """
    update_dict = update_data.model_dump()
    if partial_update:
        fields_to_update = {k: v for k, v in update_dict.items() if v is not None and hasattr(model_instance, k)}
    else:
        fields_to_update = {k: v for k, v in update_dict.items() if hasattr(model_instance, k)}

    for field, value in fields_to_update.items():
        setattr(model_instance, field, value)
    return list(fields_to_update)
