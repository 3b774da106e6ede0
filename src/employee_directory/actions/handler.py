"""
Action-response wrapper for boundary operations.

A boundary operation is anything whose result crosses a process or trust edge (an HTTP
route, a remote call). Those must never raise: `with_action_handler` turns the outcome of
the wrapped coroutine into an `ActionSuccess` or an `ActionFailure`.

    @with_action_handler
    async def create_employee(data):
        return await repository.create(data)

    response = await create_employee(payload)
    if response.ok:
        ...response.data...
    else:
        ...response.error.code / response.error.message...
"""
import functools
import logging
from typing import Any, Awaitable, Callable, ParamSpec, TypeVar

from employee_directory.exceptions.mapper import handle_error
from employee_directory.schemas.action import ActionError, ActionFailure, ActionResponse, ActionSuccess

logger = logging.getLogger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def to_failure(error: object) -> ActionFailure:
    """
    Normalize `error` and keep only the code and message.
    Status and meta are logged here and stop at this boundary.
    """
    app_error = handle_error(error)
    log = logger.warning if app_error.status >= 500 else logger.info
    log(
        "action.failure",
        extra={"code": app_error.code, "status": app_error.status, "error_meta": dict(app_error.meta or {})},
    )
    return ActionFailure(error=ActionError(**app_error.to_payload()))


def with_action_handler(fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[ActionResponse[R]]]:
    """
    Wrap an async boundary operation so it always resolves to an action response.
    """

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> ActionResponse[R]:
        try:
            data: Any = await fn(*args, **kwargs)
        except Exception as exc:
            return to_failure(exc)
        return ActionSuccess(data=data)

    return wrapper


__all__ = ["with_action_handler", "to_failure"]
