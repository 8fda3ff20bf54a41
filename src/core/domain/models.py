"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-documenting fields (Field) without coupling the
  core to subprocesses or HTTP.
- CLI input (bounds, lengths) gets validated once, at construction.

Note:
- These models describe *what* a request or a result is, not *how* it is
  produced.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


I128_MIN = -(2**127)
I128_MAX = 2**127 - 1


class DiscoveredFile(BaseModel):
    """A regular file found during discovery.

    `scramble` is decided at discovery time: when the unsuffixed output path
    is already taken, conversion writes to a randomly suffixed name instead.
    """

    model_config = ConfigDict(frozen=True)

    path: Path = Field(
        ...,
        description="Path of the input file as reached by the walk.",
    )
    scramble: bool = Field(
        default=False,
        description="Whether the output name needs a collision suffix.",
    )


class DiscoveryReport(BaseModel):
    """Result of walking the input directory."""

    files: list[DiscoveredFile] = Field(
        default_factory=list,
        description="Usable files, in walk order.",
    )
    inaccessible: int = Field(
        default=0,
        ge=0,
        description="Entries that could not be read (permissions, broken links, races).",
    )

    @property
    def accessible(self) -> int:
        return len(self.files)


class ConversionStatus(str, Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class ConversionOutcome(BaseModel):
    """Tagged result of running the conversion tool on one file."""

    model_config = ConfigDict(frozen=True)

    status: ConversionStatus
    returncode: int | None = Field(
        default=None,
        description="Tool exit status; negative means killed by a signal, None means never started.",
    )
    detail: str | None = Field(
        default=None,
        description="Spawn error text when the tool could not be started.",
    )

    @classmethod
    def success(cls) -> "ConversionOutcome":
        return cls(status=ConversionStatus.SUCCESS, returncode=0)

    @classmethod
    def failure(cls, returncode: int | None, detail: str | None = None) -> "ConversionOutcome":
        return cls(status=ConversionStatus.FAILURE, returncode=returncode, detail=detail)

    @property
    def ok(self) -> bool:
        return self.status is ConversionStatus.SUCCESS


class BooleanRequest(BaseModel):
    kind: Literal["boolean"] = "boolean"


class IntegerRequest(BaseModel):
    """Uniform draw from an inclusive signed 128-bit range."""

    kind: Literal["integer"] = "integer"
    minimum: int = Field(
        default=I128_MIN,
        ge=I128_MIN,
        le=I128_MAX,
        description="Inclusive lower bound.",
    )
    maximum: int = Field(
        default=I128_MAX,
        ge=I128_MIN,
        le=I128_MAX,
        description="Inclusive upper bound.",
    )
    hexadecimal: bool = Field(
        default=False,
        description="Render as 0x-prefixed upper-case two's complement hex.",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "IntegerRequest":
        if self.minimum > self.maximum:
            raise ValueError(f"min ({self.minimum}) is greater than max ({self.maximum})")
        return self


class DigitsRequest(BaseModel):
    """Fixed-length digit string in a given base.

    The base is not range-checked here: an out-of-range base is a command
    failure with its own exit code, not a usage error.
    """

    kind: Literal["digits"] = "digits"
    length: int = Field(
        ...,
        ge=0,
        description="Number of digits to generate.",
    )
    base: int = Field(
        default=10,
        description="Numerical base, valid from 2 to 36.",
    )


RandomRequest = Union[BooleanRequest, IntegerRequest, DigitsRequest]
