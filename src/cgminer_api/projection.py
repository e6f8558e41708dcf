"""
Schema projection — narrow a superset record to a model-specific shape.

The firmware answers every model with the same command but a different
field set, so the generic records carry every field ever seen. Narrowing
keeps the fields the target declares, taking each value from the
same-named source field when the types line up and leaving the target's
zero value otherwise. The copy plan for a (source, target) pair is built
once and reused.
"""

from functools import lru_cache
from typing import Any, Callable, Optional, TypeVar

from pydantic import BaseModel

from cgminer_api.models.number import AmbiguousNumber

T = TypeVar("T", bound=BaseModel)

Converter = Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def _converter(source: Any, target: Any) -> Optional[Converter]:
    if source == target:
        return _identity
    if source is AmbiguousNumber:
        if target is float:
            return AmbiguousNumber.to_float
        if target is int:
            return AmbiguousNumber.to_int
        return None
    if source is int and target is float:
        return float
    return None


@lru_cache(maxsize=None)
def field_plan(source: type, target: type) -> tuple[tuple[str, Converter], ...]:
    """(field name, converter) for every target field the source can fill."""
    source_fields = source.model_fields
    plan = []
    for name, info in target.model_fields.items():
        src = source_fields.get(name)
        if src is None:
            continue
        convert = _converter(src.annotation, info.annotation)
        if convert is not None:
            plan.append((name, convert))
    return tuple(plan)


def project(record: BaseModel, target: type[T]) -> T:
    """Return a new ``target`` built from the matching fields of ``record``."""
    values = {name: convert(getattr(record, name)) for name, convert in field_plan(type(record), target)}
    return target.model_validate(values)
