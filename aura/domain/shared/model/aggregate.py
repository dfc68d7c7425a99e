from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base class for aggregate roots. Identity lives in the `id` field."""

    model_config = ConfigDict(validate_assignment=True)
