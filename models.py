# models.py
from pydantic import BaseModel, ConfigDict, Field


# --- HTTP API Models ---
class Task(BaseModel):
    id: int
    title: str
    status: bool = False
    priority: int = 0
    deadline: str = ""


class TaskCreate(BaseModel):
    # Strings are not coerced into numbers or booleans.
    model_config = ConfigDict(strict=True)

    title: str = ""
    priority: int = 0
    deadline: str = ""


class TaskUpdate(BaseModel):
    # Empty strings and a zero priority mean "keep the current value".
    # status has no such sentinel and is always applied.
    model_config = ConfigDict(strict=True)

    title: str = ""
    priority: int = 0
    deadline: str = ""
    status: bool = False


# --- Terminal List Models ---
class ListEntry(BaseModel):
    """One row of List.json. Stored with capitalised keys and no id."""
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field("", alias="Title")
    status: bool = Field(False, alias="Status")
    priority: int = Field(0, alias="Priority")
    deadline: str = Field("", alias="Deadline")
