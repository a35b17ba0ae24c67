from pydantic import BaseModel, ConfigDict

class BaseSchema(BaseModel):
    """Base schema for every pydantic model of the tool."""
    model_config = ConfigDict(frozen=True)
