from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Form payload for creating a new task.

    The text is taken as-is: empty and whitespace-only prompts are accepted.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "prompt": "Buy milk",
            }
        }
    )

    prompt: str = Field(..., description="Text of the new task")


# PUBLIC_INTERFACE
class HealthOut(BaseModel):
    """
    Schema returned by the health endpoint.
    """

    message: str = Field(..., description="Service status")
    tasks: int = Field(..., description="Number of tasks currently held by the store")
