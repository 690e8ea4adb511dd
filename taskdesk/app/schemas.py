from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictBool, StrictFloat, StrictInt, StrictStr

Score = Union[StrictInt, StrictFloat]


class UsernameRequest(BaseModel):
    # Shape is checked by the identity service so a missing or non-string
    # username surfaces as "Invalid username" rather than a schema error.
    username: Any = None


class OkResponse(BaseModel):
    ok: bool = True


class TaskCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[StrictStr] = None
    date: Optional[StrictStr] = None
    time: Optional[StrictStr] = None
    alarm: Optional[StrictBool] = None
    done: Optional[StrictBool] = None
    score: Optional[Score] = None

    def to_fields(self) -> dict[str, Any]:
        """Fields to persist; ``time`` is kept only when the caller sent it."""

        fields = self.model_dump(exclude={"time"})
        if "time" in self.model_fields_set:
            fields["time"] = self.time
        return fields


class TaskUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: Optional[StrictStr] = None
    date: Optional[StrictStr] = None
    time: Optional[StrictStr] = None
    alarm: Optional[StrictBool] = None
    done: Optional[StrictBool] = None
    score: Optional[Score] = None

    def to_patch(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class Task(BaseModel):
    """Stored task record as returned to callers.

    Values are passed through as persisted, so records written by older
    clients still render.
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    username: Optional[str] = None
    title: Any = None
    date: Any = None
    time: Any = None
    alarm: Any = None
    done: Any = None
    score: Any = None
