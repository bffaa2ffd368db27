import os
from enum import StrEnum
from typing import TypeVar

EnumT = TypeVar("EnumT", bound=StrEnum)


def _env_float(
    env_var: str,
    *,
    default: float,
    minimum: float | None = None,
    maximum: float | None = None,
) -> float:
    """Return the float value of ``env_var`` with optional bounds checking."""

    value = os.environ.get(env_var)
    if value is None:
        return default
    try:
        parsed = float(value)
    except ValueError as exc:
        raise ValueError(f"{env_var} must be a float") from exc
    if minimum is not None and parsed < minimum:
        raise ValueError(f"{env_var} must be at least {minimum}")
    if maximum is not None and parsed > maximum:
        raise ValueError(f"{env_var} must be at most {maximum}")
    return parsed


def _env_positive_float(env_var: str, *, default: float) -> float:
    parsed = _env_float(env_var, default=default, minimum=0.0)
    if parsed <= 0.0:
        raise ValueError(f"{env_var} must be greater than 0")
    return parsed


def _env_enum(env_var: str, enum_type: type[EnumT], *, default: EnumT) -> EnumT:
    """Return the ``enum_type`` member named by ``env_var``."""

    value = os.environ.get(env_var, default.value).strip().lower()
    try:
        return enum_type(value)
    except ValueError as exc:
        choices = ", ".join(f"'{member.value}'" for member in enum_type)
        raise ValueError(f"{env_var} must be one of {choices}") from exc
