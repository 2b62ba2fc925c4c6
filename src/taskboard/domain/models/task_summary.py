from pydantic import BaseModel, Field


class TaskSummary(BaseModel):
    total: int = Field(default=0, description="Number of tasks in the snapshot.")
    completed: int = Field(default=0, description="Tasks whose status is completed.")
