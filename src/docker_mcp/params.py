"""Typed parameter models for each Docker tool."""

from typing import Any, Dict, Optional, Type, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .errors import InvalidParameters
from .security import SecurityValidator, ValidationError

DEFAULT_TAIL = 100

P = TypeVar("P", bound="ToolParams")


class ToolParams(BaseModel):
    """Base model for tool arguments. Unknown keys are ignored, nulls mean absent."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class EmptyParams(ToolParams):
    """Tools without arguments."""


class ContainerParams(ToolParams):
    container: str = Field(description="Container name or ID")

    @field_validator("container", mode="before")
    @classmethod
    def _check_container(cls, value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("must be a string")
        value = value.strip()
        try:
            SecurityValidator.validate_container(value)
        except ValidationError as e:
            raise ValueError(str(e))
        return value


class LogsParams(ContainerParams):
    tail: int = Field(
        default=DEFAULT_TAIL,
        ge=0,
        description=f"Number of lines from the end (default: {DEFAULT_TAIL})",
    )

    @field_validator("tail", mode="before")
    @classmethod
    def _parse_tail(cls, value: Any) -> Any:
        # bool is an int subclass; "true" is not a line count
        if isinstance(value, bool):
            raise ValueError("must be a non-negative integer")
        if isinstance(value, str):
            value = value.strip()
            if not value.isdigit():
                raise ValueError("must be a non-negative integer")
            return int(value)
        return value


class StatsParams(ToolParams):
    no_stream: bool = Field(
        default=True,
        description="Do not stream continuously (default: true)",
    )


class DeleteParams(ContainerParams):
    force: bool = Field(
        default=False,
        description="Force removal of a running container (default: false)",
    )


def parse_params(model: Type[P], arguments: Optional[Dict[str, Any]]) -> P:
    """
    Validate raw MCP arguments against a parameter model.

    Args:
        model: Parameter model for the tool
        arguments: Raw arguments from the caller (may be None)

    Returns:
        Validated, immutable parameter instance

    Raises:
        InvalidParameters: if the arguments do not satisfy the model
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidParameters("Arguments must be an object")

    try:
        return model.model_validate(arguments)
    except pydantic.ValidationError as e:
        problems = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "arguments"
            message = error["msg"].removeprefix("Value error, ")
            problems.append(f"{field}: {message}")
        raise InvalidParameters("Invalid arguments: " + "; ".join(problems))
