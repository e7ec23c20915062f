# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
JSON serializer for a single resolved scheme.

Every standard role is written as ``"role_id": "#RRGGBB"``, in role
order. The scheme's configuration can be included so the document can be
turned back into a ``ColorScheme`` with ``ColorScheme.from_dict``.
"""

from __future__ import annotations

from monet.runtime.serializers.base import SerializerFormat, camel_case, dump
from monet.scheme import ColorScheme


def to_json(
    scheme: ColorScheme,
    *,
    format: SerializerFormat = SerializerFormat.JSON,
    camel_case_keys: bool = False,
    include_config: bool = False,
) -> str:
    """Serialize a scheme's colors as JSON.

    Args:
        scheme: The scheme to serialize.
        format: Output format (JSON or JSON_PRETTY).
        camel_case_keys: Write role ids as ``onPrimaryContainer`` rather
            than ``on_primary_container``.
        include_config: Wrap the colors as
            ``{"config": {...}, "colors": {...}}``.

    Returns:
        JSON string.

    Example (format=JSON_PRETTY)::

        {
          "primary": "#4C5C92",
          "on_primary": "#FFFFFF",
          ...
        }
    """
    colors = scheme.to_dict()
    if camel_case_keys:
        colors = {camel_case(role): value for role, value in colors.items()}

    data = {"config": scheme.config(), "colors": colors} if include_config else colors
    return dump(data, format)
