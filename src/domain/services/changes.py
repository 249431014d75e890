"""Helpers for validating and merging partial updates onto entities."""

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from core.exceptions import ValidationFailedError

T = TypeVar("T")


def require_text(values: Mapping[str, Any], fields: Iterable[str]) -> None:
    """Raise if any of ``fields`` present in ``values`` is missing or blank."""
    for name in fields:
        value = values.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationFailedError(f"{name} is required", field=name)


def merge(entity: T, changes: Mapping[str, Any], required: Iterable[str] = ()) -> T:
    """Return a copy of ``entity`` with only the supplied fields replaced.

    Unknown keys are ignored; required fields may be changed but not blanked.
    """
    known = {f.name for f in dataclasses.fields(entity)}  # type: ignore[arg-type]
    supplied = {key: value for key, value in changes.items() if key in known}
    require_text(supplied, [name for name in required if name in supplied])
    return dataclasses.replace(entity, **supplied)  # type: ignore[type-var]
