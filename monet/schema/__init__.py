# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Schema definitions for color schemes.

Closed option sets (style variant, brightness, contrast, platform, spec
version) and the standard color roles. All types here are immutable.
"""

from monet.schema.options import (
    Brightness,
    Contrast,
    SpecVersion,
    TargetPlatform,
    Variant,
)
from monet.schema.roles import ColorRole

__all__ = [
    # Options
    "Variant",
    "Brightness",
    "Contrast",
    "TargetPlatform",
    "SpecVersion",
    # Roles
    "ColorRole",
]
