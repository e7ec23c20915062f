# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Color schemes from a seed color or an image.

``ColorScheme`` is the front door: it takes a primary seed (and optional
per-palette seeds), a brightness, a contrast level and a style, and
resolves the standard color roles on demand.

Example::

    scheme = ColorScheme.from_seed("#5C6BC0", brightness=Brightness.DARK)
    scheme.get_hex(ColorRole.PRIMARY)       # '#RRGGBB'
    scheme.derive(contrast=Contrast.HIGH)   # same seed, high contrast
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from monet.dynamiccolor import DynamicScheme
from monet.dynamiccolor.dynamic_scheme import RoleKey
from monet.hct import Hct
from monet.hct.color_utils import argb_from_hex, hex_from_argb
from monet.image import ImageInput, extract_seed
from monet.palettes.tonal_palette import TonalPalette
from monet.palettes.variants import (
    SchemePalettes,
    default_error_palette,
    maybe_fallback_spec_version,
    rules_for,
)
from monet.schema import Brightness, ColorRole, Contrast, SpecVersion, TargetPlatform, Variant
from monet.score import DEFAULT_FALLBACK


ColorInput = Union[int, str, Hct]

_SEED_FIELDS = ("secondary", "tertiary", "neutral", "neutral_variant", "error")


def to_argb(color: ColorInput) -> int:
    """
    Normalize a seed color to an opaque ARGB int.

    Accepts an ARGB or RGB int, a hex string ('#RRGGBB', '#RGB',
    '#AARRGGBB'), or an Hct. Alpha is always forced to 0xFF.

    Raises:
        ValueError: If an int is out of range or a string is not hex
        TypeError: For any other type
    """
    if isinstance(color, Hct):
        argb = color.argb
    elif isinstance(color, str):
        argb = argb_from_hex(color)
    elif isinstance(color, int) and not isinstance(color, bool):
        if not 0 <= color <= 0xFFFFFFFF:
            raise ValueError(f"ARGB color out of range: {color:#x}")
        argb = color
    else:
        raise TypeError(f"Expected ARGB int, hex string or Hct, got {type(color)}")
    return 0xFF000000 | (argb & 0x00FFFFFF)


@dataclass(frozen=True)
class ColorScheme:
    """
    A Material color scheme.

    Two schemes are equal when their configuration is equal; resolved
    colors follow from it. Seeds are stored as opaque ARGB ints.

    Attributes:
        primary: Seed color every palette without its own seed derives from
        secondary: Optional seed for the secondary palette
        tertiary: Optional seed for the tertiary palette
        neutral: Optional seed for the neutral palette
        neutral_variant: Optional seed for the neutral variant palette
        error: Optional seed for the error palette
        brightness: Light or dark
        contrast: Contrast level
        variant: Palette style
        platform: Target platform
        spec_version: Spec version; styles without 2025 rules use 2021
    """
    primary: int
    secondary: Optional[int] = None
    tertiary: Optional[int] = None
    neutral: Optional[int] = None
    neutral_variant: Optional[int] = None
    error: Optional[int] = None
    brightness: Brightness = Brightness.LIGHT
    contrast: Contrast = Contrast.STANDARD
    variant: Variant = Variant.TONAL_SPOT
    platform: TargetPlatform = TargetPlatform.PHONE
    spec_version: SpecVersion = SpecVersion.SPEC_2021
    _scheme: DynamicScheme = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize seeds, settle the spec version and build the scheme."""
        object.__setattr__(self, "primary", to_argb(self.primary))
        for name in _SEED_FIELDS:
            seed = getattr(self, name)
            if seed is not None:
                object.__setattr__(self, name, to_argb(seed))
        if not isinstance(self.contrast, Contrast):
            object.__setattr__(self, "contrast", Contrast.of(self.contrast))
        object.__setattr__(
            self, "spec_version", maybe_fallback_spec_version(self.spec_version, self.variant)
        )
        object.__setattr__(self, "_scheme", self._build())

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_seed(
        cls,
        primary: ColorInput,
        *,
        secondary: Optional[ColorInput] = None,
        tertiary: Optional[ColorInput] = None,
        neutral: Optional[ColorInput] = None,
        neutral_variant: Optional[ColorInput] = None,
        error: Optional[ColorInput] = None,
        brightness: Brightness = Brightness.LIGHT,
        contrast: Union[Contrast, float] = Contrast.STANDARD,
        variant: Variant = Variant.TONAL_SPOT,
        platform: TargetPlatform = TargetPlatform.PHONE,
        spec_version: SpecVersion = SpecVersion.SPEC_2021,
    ) -> ColorScheme:
        """
        Build a scheme from seed colors.

        Args:
            primary: Primary seed; every palette without its own seed derives from it
            secondary: Seed for the secondary palette
            tertiary: Seed for the tertiary palette
            neutral: Seed for the neutral palette
            neutral_variant: Seed for the neutral variant palette
            error: Seed for the error palette
            brightness: Light or dark
            contrast: Contrast or a level in [-1.0, 1.0]
            variant: Palette style
            platform: Target platform
            spec_version: Spec version

        Returns:
            ColorScheme
        """
        return cls(
            primary=primary,
            secondary=secondary,
            tertiary=tertiary,
            neutral=neutral,
            neutral_variant=neutral_variant,
            error=error,
            brightness=brightness,
            contrast=contrast if isinstance(contrast, Contrast) else Contrast.of(contrast),
            variant=variant,
            platform=platform,
            spec_version=spec_version,
        )

    @classmethod
    def from_image(
        cls,
        image: ImageInput,
        *,
        fallback: ColorInput = DEFAULT_FALLBACK,
        **options: Any,
    ) -> ColorScheme:
        """
        Build a scheme seeded with the most suitable color of an image.

        Args:
            image: Path to an image file (needs Pillow), or a uint8
                (H, W, 3) / (H, W, 4) array
            fallback: Seed used when the image has no suitable color
            **options: Keyword arguments of ``from_seed``

        Returns:
            ColorScheme
        """
        seed = extract_seed(image, fallback=to_argb(fallback))
        return cls.from_seed(seed, **options)

    def _build(self) -> DynamicScheme:
        source = Hct.from_argb(self.primary)
        is_dark = self.brightness.is_dark
        contrast_level = self.contrast.value
        rules = rules_for(self.variant, self.spec_version)

        def seeded(seed: Optional[int], own, fallback=None) -> TonalPalette:
            if seed is None:
                return own(source, is_dark, self.platform, contrast_level)
            builder = own if fallback is None else fallback
            return builder(Hct.from_argb(seed), is_dark, self.platform, contrast_level)

        if self.error is None:
            error = default_error_palette()
        else:
            error_rule = rules.error if rules.error is not None else rules.primary
            error = error_rule(Hct.from_argb(self.error), is_dark, self.platform, contrast_level)

        palettes = SchemePalettes(
            primary=rules.primary(source, is_dark, self.platform, contrast_level),
            secondary=seeded(self.secondary, rules.secondary, rules.primary),
            tertiary=seeded(self.tertiary, rules.tertiary, rules.primary),
            neutral=seeded(self.neutral, rules.neutral),
            neutral_variant=seeded(self.neutral_variant, rules.neutral_variant),
            error=error,
        )
        return DynamicScheme.create(
            source,
            self.variant,
            is_dark=is_dark,
            contrast_level=contrast_level,
            platform=self.platform,
            spec_version=self.spec_version,
            palettes=palettes,
        )

    def derive(self, **changes: Any) -> ColorScheme:
        """
        A copy with some options replaced.

        Accepts the keyword arguments of ``from_seed``; palettes are
        rebuilt from the seeds for the new options.
        """
        if "contrast" in changes and not isinstance(changes["contrast"], Contrast):
            changes["contrast"] = Contrast.of(changes["contrast"])
        return dataclasses.replace(self, **changes)

    # =========================================================================
    # Colors
    # =========================================================================

    @property
    def dynamic_scheme(self) -> DynamicScheme:
        """The underlying resolver."""
        return self._scheme

    @property
    def is_dark(self) -> bool:
        return self.brightness.is_dark

    @property
    def palettes(self) -> SchemePalettes:
        return self._scheme.palettes

    def get_color(self, role: RoleKey) -> int:
        """
        ARGB of a role.

        Args:
            role: ColorRole, or the snake_case id of a role

        Raises:
            KeyError: If the role is unknown
        """
        return self._scheme.get_argb(role)

    def get_hex(self, role: RoleKey) -> str:
        """'#RRGGBB' of a role."""
        return hex_from_argb(self.get_color(role))

    def get_hct(self, role: RoleKey) -> Hct:
        return self._scheme.get_hct(role)

    def to_dict(self) -> dict[str, str]:
        """Every standard role as role id → '#RRGGBB'."""
        return {role.value: self.get_hex(role) for role in ColorRole}

    # =========================================================================
    # Configuration round trip
    # =========================================================================

    def config(self) -> dict:
        """
        The scheme's configuration as plain JSON-compatible values.

        Seeds are '#RRGGBB' strings (omitted when unset), options are their
        enum values and the contrast level is a float.
        """
        data: dict[str, Any] = {"primary": hex_from_argb(self.primary)}
        for name in _SEED_FIELDS:
            seed = getattr(self, name)
            if seed is not None:
                data[name] = hex_from_argb(seed)
        data.update(
            brightness=self.brightness.value,
            contrast=self.contrast.value,
            variant=self.variant.value,
            platform=self.platform.value,
            spec_version=self.spec_version.value,
        )
        return data

    @classmethod
    def from_dict(cls, data: dict) -> ColorScheme:
        """
        Rebuild a scheme from ``config()`` output.

        Missing options take their defaults.

        Raises:
            KeyError: If the primary seed is missing
            ValueError: If an option value is not recognized
        """
        return cls(
            primary=data["primary"],
            **{name: data[name] for name in _SEED_FIELDS if data.get(name) is not None},
            brightness=Brightness(data.get("brightness", Brightness.LIGHT.value)),
            contrast=Contrast.of(float(data.get("contrast", 0.0))),
            variant=Variant(data.get("variant", Variant.TONAL_SPOT.value)),
            platform=TargetPlatform(data.get("platform", TargetPlatform.PHONE.value)),
            spec_version=SpecVersion(data.get("spec_version", SpecVersion.SPEC_2021.value)),
        )
