# gaudi\core\domain\models.py
import uuid
from typing import Any, Dict

from pydantic import BaseModel, Field


class Room(BaseModel):
    """
    A room offered for rent.
    This is the entity handled by the example repositories and use cases.
    """
    code: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique identifier (UUID)")
    size: int = Field(..., description="Surface in square meters")
    price: int = Field(..., description="Daily price in the smallest currency unit")
    longitude: float
    latitude: float

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Room":
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
