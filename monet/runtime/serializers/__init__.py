# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Serializers for resolved color schemes.

Each serializer writes the colors a ColorScheme resolves; none of them
change or round the colors beyond '#RRGGBB'.
"""

from monet.runtime.serializers.base import SerializerFormat
from monet.runtime.serializers.document import to_json
from monet.runtime.serializers.tokens import PALETTE_TONES, to_tokens

__all__ = [
    "SerializerFormat",
    "to_json",
    "to_tokens",
    "PALETTE_TONES",
]
