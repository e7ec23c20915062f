# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Dynamic schemes: the inputs every role is resolved against.

A scheme fixes the source color, style, brightness, contrast level,
platform, spec version and the six key palettes. Roles are resolved on
demand and memoized per scheme instance.
"""

from __future__ import annotations

import dataclasses
import math
import threading
from dataclasses import dataclass, field
from typing import Optional, Union

from monet.dynamiccolor.color_spec import ColorSpec
from monet.dynamiccolor.spec_2021 import SPEC_2021
from monet.dynamiccolor.spec_2025 import SPEC_2025
from monet.hct import Hct
from monet.hct.color_utils import clamp, round_half_up
from monet.palettes.tonal_palette import TonalPalette
from monet.palettes.variants import SchemePalettes, build_palettes, maybe_fallback_spec_version
from monet.schema import ColorRole, SpecVersion, TargetPlatform, Variant


RoleKey = Union[ColorRole, str]

_SPECS: dict[SpecVersion, ColorSpec] = {
    SpecVersion.SPEC_2021: SPEC_2021,
    SpecVersion.SPEC_2025: SPEC_2025,
}


def get_spec(version: SpecVersion) -> ColorSpec:
    """The ColorSpec implementing a spec version."""
    return _SPECS[version]


def _role_id(role: RoleKey) -> str:
    return role.value if isinstance(role, ColorRole) else role


@dataclass(frozen=True)
class DynamicScheme:
    """
    A fully specified color scheme.

    Use ``DynamicScheme.create`` to derive the palettes from a source
    color; the constructor takes them as given. A spec version the style
    has no rules for falls back to 2021.

    Attributes:
        source_color_hct: Seed color
        variant: Palette style
        is_dark: Dark scheme
        contrast_level: Contrast level in [-1.0, 1.0]
        primary_palette .. error_palette: Key palettes
        platform: Target platform
        spec_version: Spec version the roles are resolved with
    """
    source_color_hct: Hct
    variant: Variant
    is_dark: bool
    contrast_level: float
    primary_palette: TonalPalette
    secondary_palette: TonalPalette
    tertiary_palette: TonalPalette
    neutral_palette: TonalPalette
    neutral_variant_palette: TonalPalette
    error_palette: TonalPalette
    platform: TargetPlatform = TargetPlatform.PHONE
    spec_version: SpecVersion = SpecVersion.SPEC_2021
    _tones: dict[str, float] = field(default_factory=dict, init=False, repr=False, compare=False)
    _hcts: dict[str, Hct] = field(default_factory=dict, init=False, repr=False, compare=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate the contrast level and settle the spec version."""
        if math.isnan(self.contrast_level) or not -1.0 <= self.contrast_level <= 1.0:
            raise ValueError(f"Contrast level must be between -1.0 and 1.0, got {self.contrast_level}")
        object.__setattr__(self, "spec_version", maybe_fallback_spec_version(self.spec_version, self.variant))

    @classmethod
    def create(
        cls,
        source_color_hct: Hct,
        variant: Variant = Variant.TONAL_SPOT,
        *,
        is_dark: bool = False,
        contrast_level: float = 0.0,
        platform: TargetPlatform = TargetPlatform.PHONE,
        spec_version: SpecVersion = SpecVersion.SPEC_2021,
        palettes: Optional[SchemePalettes] = None,
    ) -> DynamicScheme:
        """
        Build a scheme, deriving any palettes not given from the source color.

        Args:
            source_color_hct: Seed color
            variant: Palette style
            is_dark: Dark scheme
            contrast_level: Contrast level in [-1.0, 1.0]
            platform: Target platform
            spec_version: Requested spec version
            palettes: Precomputed key palettes

        Returns:
            DynamicScheme
        """
        spec_version = maybe_fallback_spec_version(spec_version, variant)
        if palettes is None:
            palettes = build_palettes(
                source_color_hct,
                variant,
                is_dark=is_dark,
                contrast_level=contrast_level,
                platform=platform,
                spec_version=spec_version,
            )
        return cls(
            source_color_hct=source_color_hct,
            variant=variant,
            is_dark=is_dark,
            contrast_level=contrast_level,
            primary_palette=palettes.primary,
            secondary_palette=palettes.secondary,
            tertiary_palette=palettes.tertiary,
            neutral_palette=palettes.neutral,
            neutral_variant_palette=palettes.neutral_variant,
            error_palette=palettes.error,
            platform=platform,
            spec_version=spec_version,
        )

    @property
    def spec(self) -> ColorSpec:
        return get_spec(self.spec_version)

    @property
    def source_color_argb(self) -> int:
        return self.source_color_hct.argb

    @property
    def palettes(self) -> SchemePalettes:
        return SchemePalettes(
            primary=self.primary_palette,
            secondary=self.secondary_palette,
            tertiary=self.tertiary_palette,
            neutral=self.neutral_palette,
            neutral_variant=self.neutral_variant_palette,
            error=self.error_palette,
        )

    def derive(self, *, is_dark: Optional[bool] = None, contrast_level: Optional[float] = None) -> DynamicScheme:
        """
        The same scheme with a different brightness or contrast level.

        Palettes are kept as they are, so a derived dark scheme shares the
        light scheme's palettes even where a 2025 style would have chosen
        different ones.
        """
        changes = {}
        if is_dark is not None:
            changes["is_dark"] = is_dark
        if contrast_level is not None:
            changes["contrast_level"] = contrast_level
        return dataclasses.replace(self, **changes)

    # =========================================================================
    # Role resolution
    # =========================================================================

    def get_tone(self, role: RoleKey) -> float:
        """
        Resolved tone of a role.

        Raises:
            KeyError: If the role is not defined in this scheme's spec.
        """
        role_id = _role_id(role)
        with self._lock:
            tone = self._tones.get(role_id)
        if tone is None:
            color = self.spec.color(role_id)
            tone = self.spec.resolve_tone(self, color)
            with self._lock:
                tone = self._tones.setdefault(role_id, tone)
        return tone

    def get_hct(self, role: RoleKey) -> Hct:
        """Resolved color of a role."""
        role_id = _role_id(role)
        with self._lock:
            hct = self._hcts.get(role_id)
        if hct is None:
            color = self.spec.color(role_id)
            tone = clamp(0.0, 100.0, self.get_tone(role_id))
            hct = self.spec.resolve_hct(self, color, tone)
            with self._lock:
                hct = self._hcts.setdefault(role_id, hct)
        return hct

    def get_argb(self, role: RoleKey) -> int:
        """Resolved ARGB of a role, with the role's opacity as alpha."""
        argb = self.get_hct(role).argb
        color = self.spec.color(_role_id(role))
        if color.opacity is None:
            return argb
        alpha = int(clamp(0, 255, round_half_up(color.opacity(self) * 255.0)))
        return (argb & 0x00FFFFFF) | (alpha << 24)

    def has_role(self, role: RoleKey) -> bool:
        return _role_id(role) in self.spec
