# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Export runtime for monet.

Turns resolved schemes into documents other tools consume:

1. JSON -- one scheme, role id → hex
2. Design tokens -- a light/dark family in Material Theme Builder shape
"""

from monet.runtime.serializers import (
    PALETTE_TONES,
    SerializerFormat,
    to_json,
    to_tokens,
)

__all__ = [
    "to_json",
    "to_tokens",
    "SerializerFormat",
    "PALETTE_TONES",
]
