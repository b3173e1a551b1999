"""Tool manifest model - describes a hardware tool plugin loaded from tool.toml.

Example ``tool.toml``::

    [tool]
    name        = "i2c_scan"
    version     = "1.0.0"
    description = "Scan the I2C bus for connected devices"

    [exec]
    binary = "i2c_scan.py"

    [transport]
    preferred       = "serial"
    device_required = true

    [[parameters]]
    name        = "device"
    type        = "string"
    description = "Device alias e.g. pico0"
    required    = true

    [[parameters]]
    name        = "bus"
    type        = "integer"
    description = "I2C bus number"
    required    = false
    default     = 0
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, model_validator
from pydantic_core import PydanticCustomError


class ParamType(str, Enum):
    """Primitive parameter types a tool may declare."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"

    @property
    def json_type(self) -> str:
        """JSON Schema primitive this type is advertised as."""
        return self.value

    def matches(self, value: Any) -> bool:
        """Check a value's runtime type exactly, without coercion."""
        if self is ParamType.BOOLEAN:
            return isinstance(value, bool)
        if self is ParamType.INTEGER:
            # bool is a subclass of int and must not pass as an integer
            return isinstance(value, int) and not isinstance(value, bool)
        return isinstance(value, str)

    def coerce(self, value: Any) -> Any:
        """Return value as this type, raising TypeError if it cannot be.

        Integral floats (``5.0``) are accepted for integers since JSON decoders
        do not always keep the distinction.
        """
        if self.matches(value):
            return value
        if self is ParamType.INTEGER and isinstance(value, float) and value.is_integer():
            return int(value)
        raise TypeError(f"expected {self.value}, got {value!r}")


class TransportKind(str, Enum):
    """Hardware access channels a tool may prefer."""

    SERIAL = "serial"
    SWD = "swd"
    NATIVE = "native"
    ANY = "any"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ToolMeta(_Frozen):
    """Tool identity metadata."""

    name: StrictStr = Field(..., min_length=1, description="Unique tool name, used as the function-call key")
    version: StrictStr = Field(..., description="Semantic version string, e.g. '1.0.0'")
    description: StrictStr = Field(..., description="Human-readable description shown to the model")


class ExecConfig(_Frozen):
    """How the host spawns the tool."""

    binary: StrictStr = Field(
        ...,
        description="Path to the executable, relative to the plugin directory",
    )


class TransportConfig(_Frozen):
    """Optional transport preference and device requirement."""

    preferred: TransportKind = Field(..., description="Preferred transport: serial | swd | native | any")
    device_required: StrictBool = Field(..., description="Whether a physical device must be connected")


class ParameterDef(_Frozen):
    """A single parameter a tool accepts."""

    name: StrictStr = Field(..., description="Parameter name (JSON key passed to the tool)")
    type: ParamType = Field(..., description="Primitive type: string | integer | boolean")
    description: StrictStr = Field(..., description="Human-readable description shown to the model")
    required: StrictBool = Field(..., description="Whether the model must supply this parameter")
    default: Optional[Any] = Field(default=None, description="Value used when an optional parameter is omitted")

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @model_validator(mode="after")
    def _check_default(self) -> "ParameterDef":
        if not self.has_default:
            return self
        if self.required:
            raise PydanticCustomError(
                "required_with_default",
                "required parameter '{name}' must not declare a default",
                {"name": self.name, "field": "default", "value": self.default},
            )
        if not self.type.matches(self.default):
            raise PydanticCustomError(
                "default_type_mismatch",
                "default for parameter '{name}' does not match declared type {type}",
                {"name": self.name, "type": self.type.value, "field": "default", "value": self.default},
            )
        return self


class ToolManifest(_Frozen):
    """Full plugin manifest, parsed from tool.toml."""

    tool: ToolMeta
    exec: ExecConfig
    transport: Optional[TransportConfig] = None
    parameters: Tuple[ParameterDef, ...] = ()

    @model_validator(mode="after")
    def _check_unique_names(self) -> "ToolManifest":
        seen = set()
        for index, param in enumerate(self.parameters):
            if param.name in seen:
                raise PydanticCustomError(
                    "duplicate_parameter",
                    "duplicate parameter name '{name}'",
                    {"name": param.name, "index": index, "field": "name", "value": param.name},
                )
            seen.add(param.name)
        return self

    @property
    def name(self) -> str:
        return self.tool.name

    @property
    def description(self) -> str:
        return self.tool.description

    @property
    def parameter_names(self) -> Tuple[str, ...]:
        return tuple(p.name for p in self.parameters)

    @property
    def required_parameters(self) -> Tuple[ParameterDef, ...]:
        return tuple(p for p in self.parameters if p.required)

    @property
    def device_required(self) -> bool:
        return self.transport is not None and self.transport.device_required

    def get_parameter(self, name: str) -> Optional[ParameterDef]:
        """Get a declared parameter by name."""
        return next((p for p in self.parameters if p.name == name), None)

    def binary_path(self, plugin_dir: Path) -> Path:
        """Resolve the executable against its plugin directory (no existence check)."""
        return Path(plugin_dir) / self.exec.binary
