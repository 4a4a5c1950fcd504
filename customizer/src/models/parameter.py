"""
Parameter definitions and their typed default values.
"""

import math
import re
from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

class ParameterType(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    NUMBER = "number"

class StringValue(BaseModel):
    type: Literal[ParameterType.STRING] = ParameterType.STRING
    value: str = ""

    class Config:
        frozen = True

    def as_text(self) -> str:
        return self.value

class BoolValue(BaseModel):
    type: Literal[ParameterType.BOOLEAN] = ParameterType.BOOLEAN
    value: bool = False

    class Config:
        frozen = True

    def as_text(self) -> str:
        return "true" if self.value else "false"

class NumberValue(BaseModel):
    type: Literal[ParameterType.NUMBER] = ParameterType.NUMBER
    value: float = 0.0

    class Config:
        frozen = True

    def as_text(self) -> str:
        return format_number(self.value)

ParameterValue = Annotated[
    Union[StringValue, BoolValue, NumberValue],
    Field(discriminator="type"),
]

def format_number(value: float) -> str:
    """
    Shortest round-trip text form of a number: 3 not 3.0, 1e-7 not 1e-07,
    NaN, Infinity. Plain digits from 1e-6 up to 1e21, exponent form outside.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        return format(Decimal(repr(value)).normalize(), "f")
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", repr(value))

def parse_number(raw: str) -> float:
    """
    Parse numeric text leniently.
    Blank text is 0; anything unparseable is NaN rather than an error.
    """
    text = raw.strip()
    if not text:
        return 0.0

    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf

    lowered = text.lower()
    if lowered.startswith(("0x", "0o", "0b")):
        try:
            return float(int(text, 0))
        except ValueError:
            return math.nan

    # float() also takes "inf", "nan" and digit separators
    if "_" in text or lowered.lstrip("+-").startswith(("inf", "nan")):
        return math.nan

    try:
        return float(text)
    except ValueError:
        return math.nan

def coerce_value(param_type: ParameterType, raw: str) -> ParameterValue:
    """Build the default value for `param_type` from raw input text."""
    if param_type == ParameterType.BOOLEAN:
        return BoolValue(value=raw == "true")
    if param_type == ParameterType.NUMBER:
        return NumberValue(value=parse_number(raw))
    return StringValue(value=raw)

class ParameterDefinition(BaseModel):
    id: int
    name: str
    type: ParameterType
    default: ParameterValue
    is_fixed_name: bool = False

    class Config:
        frozen = True

    @model_validator(mode="after")
    def check_default_matches_type(self):
        if self.default.type != self.type:
            raise ValueError(
                f"Parameter '{self.name}' default is {self.default.type.value}, "
                f"expected {self.type.value}"
            )
        return self
