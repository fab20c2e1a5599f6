"""
Base schemas with common functionality.
"""
from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Base schema with common functionality for all schemas"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True
    )

    def to_params(self) -> dict:
        """Field values as bind parameters, unset fields included as None"""
        return self.model_dump()
