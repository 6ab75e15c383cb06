from pydantic import BaseModel, ConfigDict


class BaseResponse(BaseModel):
    """Base response model with configuration for SQLModel serialization"""

    model_config = ConfigDict(
        from_attributes=True,  # Allows conversion from SQLModel/SQLAlchemy ORM models
        arbitrary_types_allowed=True,
    )
