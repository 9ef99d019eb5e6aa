"""Task Schemas — Pydantic models for the POST/PUT request body.

Invariants:
    - TaskEnvelope requires a "task" object with name (text) and status (number)
    - Extra task fields pass through untouched; the store enforces its own schema
    - status keeps its JSON numeric type (0 stays 0, 1.5 stays 1.5)

Design Decisions:
    - StrictInt | StrictFloat over int | float: lax mode would turn true into 1
      and "1" into 1, so the echoed task would differ from what the caller sent
"""

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt


class Task(BaseModel):
    """A task as sent by the caller."""
    model_config = ConfigDict(extra="allow")

    name: str
    status: StrictInt | StrictFloat


class TaskEnvelope(BaseModel):
    """Request body for create and update: {"task": {...}}."""
    task: Task
