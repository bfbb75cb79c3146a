"""Observability helpers for instrumenting tool calls."""

from __future__ import annotations

import inspect
import logging
import time
from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from catalog_app.logging_config import (
    ensure_correlation_id,
    get_logger,
    log_event,
    redact_for_log,
)

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        preview[key] = value
    return redact_for_log(preview)


def _result_status(result: Any) -> str | None:
    if isinstance(result, dict):
        status = result.get("status")
        return str(status) if status is not None else None
    return None


def _positional_to_keywords(signature: inspect.Signature, args: tuple, kwargs: dict) -> tuple[tuple, dict]:
    """Move tool arguments passed positionally into ``kwargs`` for validation.

    A leading ``self``/``cls`` stays positional.
    """

    params = list(signature.parameters.values())
    receiver: tuple = ()
    if params and params[0].name in ("self", "cls") and args:
        receiver, args = args[:1], args[1:]
        params = params[1:]
    named = [p for p in params if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)]
    if len(args) > len(named):
        raise TypeError(f"expected at most {len(named)} positional arguments, got {len(args)}")
    merged = dict(kwargs)
    for param, value in zip(named, args):
        if param.name in merged:
            raise TypeError(f"got multiple values for argument '{param.name}'")
        merged[param.name] = value
    return receiver, merged


def instrument_tool(
    tool_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Wrap a tool callable with input validation and structured call logs.

    When ``input_model`` is given, the call arguments are validated against it
    and replaced by the model's field values, so wire aliases never reach the
    wrapped function.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()

            if input_model:
                args, kwargs = _positional_to_keywords(signature, args, kwargs)
                try:
                    validated = input_model.model_validate(kwargs)
                    kwargs = validated.model_dump()
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "tool_validation_failed",
                        tool=tool_name,
                        correlation_id=correlation_id,
                        errors=[err.get("msg") for err in exc.errors()],
                    )
                    if on_validation_error:
                        return on_validation_error(exc)
                    raise

            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_started",
                tool=tool_name,
                correlation_id=correlation_id,
                kwargs=_preview_kwargs(kwargs),
            )
            try:
                result = func(*args, **kwargs)
            except Exception:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "tool_call_failed",
                    tool=tool_name,
                    correlation_id=correlation_id,
                    duration_ms=duration_ms,
                    exc_info=True,
                )
                raise
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_completed",
                tool=tool_name,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
                result_status=_result_status(result),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_tool"]
