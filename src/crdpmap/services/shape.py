# src/crdpmap/services/shape.py
from __future__ import annotations
from typing import Optional, Sequence

from crdpmap.domain import UnsupportedShape
from crdpmap.domain.nodes import FunctionType, MethodSignature, Parameter, TypeReference


def _require_at_most_one(parameters: Sequence[Parameter], context: str) -> None:
    if len(parameters) > 1:
        raise UnsupportedShape(context, f"found {len(parameters)} parameters passed")


def param_type(fn: FunctionType | MethodSignature, context: str) -> Optional[TypeReference]:
    """
    Zero parameters -> None; a single parameter -> its type reference.
    Anything else is outside the supported shape.
    """
    _require_at_most_one(fn.parameters, context)
    if not fn.parameters:
        return None
    annotated = fn.parameters[0].type
    if isinstance(annotated, TypeReference):
        return annotated
    raise UnsupportedShape(context, "unexpected param passed")


def listener_param_type(method: MethodSignature, context: str) -> Optional[TypeReference]:
    """Payload type of an ``onX(listener: (params: T) => void)`` registration method."""
    _require_at_most_one(method.parameters, context)
    if not method.parameters:
        raise UnsupportedShape(context, "found 0 parameters passed")
    callback = method.parameters[0].type
    if not isinstance(callback, FunctionType):
        raise UnsupportedShape(context, "found unexpected argument passed")
    return param_type(callback, context)
