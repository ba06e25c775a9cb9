"""Cross-module type aliases."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal, TypeAlias

OutputFormat: TypeAlias = Literal["text", "json"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]

# Untrusted input: values are whatever the decoder or caller produced.
CheckEntry: TypeAlias = Mapping[str, Any]
HealthReport: TypeAlias = Mapping[str, Any]
