"""
Action Response envelope.

Every boundary operation answers with exactly one of:

    {"ok": true,  "data": <T>}
    {"ok": false, "error": {"code": "...", "message": "..."}}

Callers branch on `ok`. Status and error metadata never appear here.
"""

from typing import Generic, Literal, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from typing_extensions import TypeAliasType

T = TypeVar("T")

class ActionError(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    message: str

class ActionSuccess(BaseModel, Generic[T]):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    data: T

class ActionFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    error: ActionError

# Generic alias, so ActionResponse[Employee] is a valid annotation and response_model
ActionResponse = TypeAliasType("ActionResponse", Union[ActionSuccess[T], ActionFailure], type_params=(T,))

__all__ = ["ActionError", "ActionSuccess", "ActionFailure", "ActionResponse"]
