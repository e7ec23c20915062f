# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Standard Material color roles.

Each role's value is its stable identifier, also used as the key of the
role tables in ``monet.dynamiccolor`` and of serialized schemes.
"""

from __future__ import annotations

from enum import Enum


class ColorRole(Enum):
    """A semantic color role of a Material color scheme."""

    # Primary
    PRIMARY = "primary"
    ON_PRIMARY = "on_primary"
    PRIMARY_CONTAINER = "primary_container"
    ON_PRIMARY_CONTAINER = "on_primary_container"
    PRIMARY_FIXED = "primary_fixed"
    PRIMARY_FIXED_DIM = "primary_fixed_dim"
    ON_PRIMARY_FIXED = "on_primary_fixed"
    ON_PRIMARY_FIXED_VARIANT = "on_primary_fixed_variant"

    # Secondary
    SECONDARY = "secondary"
    ON_SECONDARY = "on_secondary"
    SECONDARY_CONTAINER = "secondary_container"
    ON_SECONDARY_CONTAINER = "on_secondary_container"
    SECONDARY_FIXED = "secondary_fixed"
    SECONDARY_FIXED_DIM = "secondary_fixed_dim"
    ON_SECONDARY_FIXED = "on_secondary_fixed"
    ON_SECONDARY_FIXED_VARIANT = "on_secondary_fixed_variant"

    # Tertiary
    TERTIARY = "tertiary"
    ON_TERTIARY = "on_tertiary"
    TERTIARY_CONTAINER = "tertiary_container"
    ON_TERTIARY_CONTAINER = "on_tertiary_container"
    TERTIARY_FIXED = "tertiary_fixed"
    TERTIARY_FIXED_DIM = "tertiary_fixed_dim"
    ON_TERTIARY_FIXED = "on_tertiary_fixed"
    ON_TERTIARY_FIXED_VARIANT = "on_tertiary_fixed_variant"

    # Error
    ERROR = "error"
    ON_ERROR = "on_error"
    ERROR_CONTAINER = "error_container"
    ON_ERROR_CONTAINER = "on_error_container"

    # Surfaces
    SURFACE = "surface"
    ON_SURFACE = "on_surface"
    SURFACE_DIM = "surface_dim"
    SURFACE_BRIGHT = "surface_bright"
    SURFACE_CONTAINER_LOWEST = "surface_container_lowest"
    SURFACE_CONTAINER_LOW = "surface_container_low"
    SURFACE_CONTAINER = "surface_container"
    SURFACE_CONTAINER_HIGH = "surface_container_high"
    SURFACE_CONTAINER_HIGHEST = "surface_container_highest"
    SURFACE_VARIANT = "surface_variant"
    ON_SURFACE_VARIANT = "on_surface_variant"
    BACKGROUND = "background"
    ON_BACKGROUND = "on_background"

    # Outlines and overlays
    OUTLINE = "outline"
    OUTLINE_VARIANT = "outline_variant"
    SHADOW = "shadow"
    SCRIM = "scrim"

    # Inverse
    INVERSE_SURFACE = "inverse_surface"
    INVERSE_ON_SURFACE = "inverse_on_surface"
    INVERSE_PRIMARY = "inverse_primary"

    SURFACE_TINT = "surface_tint"

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'On Primary Container'."""
        return " ".join(part.capitalize() for part in self.value.split("_"))

    @classmethod
    def lookup(cls, name: str) -> ColorRole:
        """
        Find a role by name, ignoring case, underscores and hyphens.

        ``"onPrimary"``, ``"on-primary"`` and ``"ON_PRIMARY"`` all resolve
        to ``ColorRole.ON_PRIMARY``.

        Raises:
            KeyError: If no role has that name.
        """
        role = _LOOKUP.get(_normalize(name))
        if role is None:
            raise KeyError(f"Unknown color role: {name!r}")
        return role


def _normalize(name: str) -> str:
    return name.replace("_", "").replace("-", "").lower()


_LOOKUP: dict[str, ColorRole] = {_normalize(role.value): role for role in ColorRole}
