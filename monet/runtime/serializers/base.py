# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any


class SerializerFormat(Enum):
    """Output format for serializers."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"


def dump(data: Any, format: SerializerFormat) -> str:
    """Encode data as compact or indented JSON."""
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def camel_case(name: str) -> str:
    """'on_primary_container' → 'onPrimaryContainer'."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)
