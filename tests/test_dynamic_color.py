# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""Tests for role resolution in dynamic schemes (2021 and 2025 specs)."""

import itertools

import pytest

from monet.dynamiccolor import (
    SPEC_2021,
    SPEC_2025,
    ContrastCurve,
    DynamicScheme,
    PALETTE_KEY_COLORS,
    ToneDeltaPair,
    TonePolarity,
    foreground_tone,
    get_spec,
    tone_prefers_light_foreground,
)
from monet.hct import Hct, contrast
from monet.schema import ColorRole, SpecVersion, TargetPlatform, Variant


SEED = Hct.from_argb(0xFF5C6BC0)
LEVELS = (-1.0, -0.5, 0.0, 0.5, 1.0)


def _scheme(variant=Variant.TONAL_SPOT, is_dark=False, level=0.0, seed=SEED, **kwargs):
    return DynamicScheme.create(seed, variant, is_dark=is_dark, contrast_level=level, **kwargs)


def _achievable(bg_tone):
    """Best ratio any tone reaches against a background."""
    return max(contrast.ratio_of_tones(bg_tone, 0.0), contrast.ratio_of_tones(bg_tone, 100.0))


class TestContrastCurve:

    def test_control_points(self):
        curve = ContrastCurve(3.0, 4.5, 7.0, 11.0)
        assert curve.get(-1.0) == 3.0
        assert curve.get(0.0) == 4.5
        assert curve.get(0.5) == 7.0
        assert curve.get(1.0) == 11.0

    def test_interpolates(self):
        curve = ContrastCurve(3.0, 4.5, 7.0, 11.0)
        assert curve.get(-0.5) == pytest.approx(3.75)
        assert curve.get(0.25) == pytest.approx(5.75)
        assert curve.get(0.75) == pytest.approx(9.0)

    def test_clamps_outside_range(self):
        curve = ContrastCurve(3.0, 4.5, 7.0, 11.0)
        assert curve.get(-2.0) == 3.0
        assert curve.get(2.0) == 11.0


class TestToneDeltaPair:

    def test_negative_delta_raises(self):
        with pytest.raises(ValueError, match="delta"):
            ToneDeltaPair("primary", "primary_container", -1.0, TonePolarity.NEARER)

    def test_same_role_raises(self):
        with pytest.raises(ValueError, match="two roles"):
            ToneDeltaPair("primary", "primary", 10.0, TonePolarity.NEARER)

    def test_other(self):
        pair = ToneDeltaPair("primary_container", "primary", 10.0, TonePolarity.NEARER)
        assert pair.other("primary") == "primary_container"
        assert pair.other("primary_container") == "primary"


class TestForegroundTone:

    def test_light_text_on_dark(self):
        tone = foreground_tone(20.0, 4.5)
        assert tone > 20.0
        assert contrast.ratio_of_tones(20.0, tone) >= 4.5

    def test_dark_text_on_light(self):
        tone = foreground_tone(90.0, 4.5)
        assert tone < 90.0
        assert contrast.ratio_of_tones(90.0, tone) >= 4.5

    def test_light_preference_boundary(self):
        assert tone_prefers_light_foreground(59.4)
        assert not tone_prefers_light_foreground(59.5)


class TestSeedScenario:
    """#5C6BC0, tonal spot, standard contrast, 2021 spec."""

    def test_light_primary_is_tone_40(self):
        scheme = _scheme()
        assert scheme.get_tone(ColorRole.PRIMARY) == pytest.approx(40.0)
        hct = scheme.get_hct(ColorRole.PRIMARY)
        assert hct.tone == pytest.approx(40.0, abs=0.5)
        assert hct.chroma == pytest.approx(36.0, abs=1.0)
        assert hct.hue == pytest.approx(SEED.hue, abs=1.0)

    def test_dark_primary_is_tone_80(self):
        scheme = _scheme(is_dark=True)
        assert scheme.get_tone(ColorRole.PRIMARY) == pytest.approx(80.0)
        hct = scheme.get_hct(ColorRole.PRIMARY)
        assert hct.chroma == pytest.approx(36.0, abs=1.0)
        assert hct.hue == pytest.approx(SEED.hue, abs=1.0)

    def test_primary_palette(self):
        scheme = _scheme()
        assert scheme.primary_palette.hue == SEED.hue
        assert scheme.primary_palette.chroma == 36.0
        assert scheme.get_argb(ColorRole.PRIMARY) == scheme.primary_palette.tone(40)

    def test_standard_surfaces(self):
        light = _scheme()
        dark = _scheme(is_dark=True)
        assert light.get_tone(ColorRole.SURFACE) == 98.0
        assert dark.get_tone(ColorRole.SURFACE) == 6.0
        assert light.get_tone(ColorRole.SURFACE_CONTAINER_LOWEST) == 100.0
        assert light.get_argb(ColorRole.SHADOW) == 0xFF000000

    def test_key_colors(self):
        scheme = _scheme()
        for role in PALETTE_KEY_COLORS:
            assert scheme.has_role(role)
        key = scheme.get_hct("primary_palette_key_color")
        assert key.chroma == pytest.approx(36.0, abs=1.5)


SPEC_2025_VARIANTS = (Variant.TONAL_SPOT, Variant.NEUTRAL, Variant.VIBRANT, Variant.EXPRESSIVE)
MONOTONIC_LEVELS = (-1.0, -0.5, 0.0, 0.25, 0.5, 0.75, 1.0)

# Every spec, variant, platform and brightness; 2025 variants outside its
# four styles fall back to 2021, so they are only listed once
SCHEME_GRID = [
    (spec_version, variant, platform, is_dark)
    for spec_version, variant, platform, is_dark in itertools.product(
        SpecVersion, Variant, TargetPlatform, [False, True],
    )
    if spec_version is SpecVersion.SPEC_2021 or variant in SPEC_2025_VARIANTS
]


def _grid_scheme(spec_version, variant, platform, is_dark, level, seed=SEED):
    return _scheme(variant, is_dark, level, seed=seed, platform=platform, spec_version=spec_version)


def _side_best(bg_tone, tone):
    """Best ratio reachable against ``bg_tone`` on the side ``tone`` sits on."""
    end = 100.0 if tone >= bg_tone else 0.0
    return contrast.ratio_of_tones(bg_tone, end)


def _pair_direction(scheme, pair, holder):
    """+1 when ``holder`` must sit above its partner, -1 when below."""
    a_is_darker = (
        pair.polarity is TonePolarity.DARKER
        or (pair.polarity is TonePolarity.RELATIVE_LIGHTER and scheme.is_dark)
        or (pair.polarity is TonePolarity.RELATIVE_DARKER and not scheme.is_dark)
    )
    sign = -1.0 if a_is_darker else 1.0
    return sign if holder == pair.role_a else -sign


def _delta_reachable(scheme, holder, partner_tone, direction, delta):
    """Whether a tone exists past the delta that still meets the holder's curve."""
    target = partner_tone + direction * delta
    if not 0.0 <= target <= 100.0:
        return False
    color = scheme.spec.color(holder)
    background = color.background_of(scheme)
    curve = color.contrast_curve_of(scheme)
    if background is None or curve is None:
        return True
    bg_tone = scheme.get_tone(background)
    desired = curve.get(scheme.contrast_level)
    end = 100.0 if direction > 0 else 0.0
    return max(contrast.ratio_of_tones(bg_tone, target), contrast.ratio_of_tones(bg_tone, end)) >= desired


def _assert_2025_delta(scheme, holder):
    pair = scheme.spec.color(holder).tone_delta_pair_of(scheme)
    partner_tone = scheme.get_tone(pair.other(holder))
    direction = _pair_direction(scheme, pair, holder)
    if not _delta_reachable(scheme, holder, partner_tone, direction, pair.delta):
        return
    separation = (scheme.get_tone(holder) - partner_tone) * direction
    assert separation >= pair.delta - 1e-6, (holder, pair, separation)


class TestContrastGuarantee:

    @pytest.mark.parametrize("level", LEVELS)
    @pytest.mark.parametrize("spec_version,variant,platform,is_dark", SCHEME_GRID)
    def test_roles_meet_their_curve(self, spec_version, variant, platform, is_dark, level):
        scheme = _grid_scheme(spec_version, variant, platform, is_dark, level)
        for role in ColorRole:
            color = scheme.spec.color(role.value)
            background = color.background_of(scheme)
            curve = color.contrast_curve_of(scheme)
            if background is None or curve is None:
                continue
            tone = scheme.get_tone(role)
            desired = curve.get(level)
            second = color.second_background_of(scheme)
            if second is None:
                bg_tone = scheme.get_tone(background)
                required = min(desired, _achievable(bg_tone))
                actual = contrast.ratio_of_tones(tone, bg_tone)
                assert actual >= required - 0.1, (role, background, actual, required)
                continue
            for bg in (background, second):
                bg_tone = scheme.get_tone(bg)
                required = min(desired, _side_best(bg_tone, tone))
                actual = contrast.ratio_of_tones(tone, bg_tone)
                assert actual >= required - 0.1, (role, bg, actual, required)

    @pytest.mark.parametrize("spec_version,variant,platform,is_dark", SCHEME_GRID)
    def test_contrast_is_monotonic(self, spec_version, variant, platform, is_dark):
        schemes = [
            _grid_scheme(spec_version, variant, platform, is_dark, level) for level in MONOTONIC_LEVELS
        ]
        for role in ColorRole:
            colors = [scheme.spec.color(role.value) for scheme in schemes]
            if colors[0].is_background:
                continue
            backgrounds = {color.background_of(scheme) for color, scheme in zip(colors, schemes)}
            if len(backgrounds) != 1 or None in backgrounds:
                continue
            if any(
                color.contrast_curve_of(scheme) is None
                or color.second_background_of(scheme) is not None
                or color.tone_delta_pair_of(scheme) is not None
                for color, scheme in zip(colors, schemes)
            ):
                continue
            background = backgrounds.pop()
            bg_tones = [scheme.get_tone(background) for scheme in schemes]
            if max(bg_tones) - min(bg_tones) > 1e-6:
                continue
            ratios = [
                contrast.ratio_of_tones(scheme.get_tone(role), bg_tone)
                for scheme, bg_tone in zip(schemes, bg_tones)
            ]
            for lower, higher in zip(ratios, ratios[1:]):
                assert higher >= lower - 0.1, (role, ratios)

    @pytest.mark.parametrize("is_dark", [False, True])
    @pytest.mark.parametrize(
        "role", [ColorRole.ON_PRIMARY, ColorRole.INVERSE_ON_SURFACE],
    )
    def test_standard_roles_are_monotonic(self, role, is_dark):
        ratios = []
        for level in LEVELS:
            scheme = _scheme(is_dark=is_dark, level=level)
            background = scheme.spec.color(role.value).background_of(scheme)
            ratios.append(contrast.ratio_of_tones(scheme.get_tone(role), scheme.get_tone(background)))
        for lower, higher in zip(ratios, ratios[1:]):
            assert higher >= lower - 0.01


class TestToneDeltaGuarantee:

    @pytest.mark.parametrize("level", LEVELS)
    @pytest.mark.parametrize("spec_version,variant,platform,is_dark", SCHEME_GRID)
    def test_pairs_keep_their_distance(self, spec_version, variant, platform, is_dark, level):
        scheme = _grid_scheme(spec_version, variant, platform, is_dark, level)
        for role in ColorRole:
            pair = scheme.spec.color(role.value).tone_delta_pair_of(scheme)
            if pair is None:
                continue
            if scheme.spec is SPEC_2025:
                _assert_2025_delta(scheme, role.value)
            else:
                separation = abs(scheme.get_tone(pair.role_a) - scheme.get_tone(pair.role_b))
                assert separation >= pair.delta - 1e-6, (pair, separation)

    @pytest.mark.parametrize("role", ["primary_dim", "secondary_dim", "tertiary_dim", "error_dim"])
    def test_neutral_dark_dims_keep_their_delta(self, role):
        scheme = _grid_scheme(SpecVersion.SPEC_2025, Variant.NEUTRAL, TargetPlatform.PHONE, True, 0.0)
        _assert_2025_delta(scheme, role)

    def test_low_contrast_dim_keeps_its_delta(self):
        scheme = _grid_scheme(SpecVersion.SPEC_2025, Variant.TONAL_SPOT, TargetPlatform.PHONE, False, -1.0)
        _assert_2025_delta(scheme, "primary_dim")

    def test_fixed_dim_keeps_its_delta_on_black_seed(self):
        black = Hct.from_argb(0xFF000000)
        scheme = _grid_scheme(
            SpecVersion.SPEC_2025, Variant.VIBRANT, TargetPlatform.PHONE, True, 1.0, seed=black,
        )
        for name in ("primary", "secondary", "tertiary"):
            _assert_2025_delta(scheme, f"{name}_fixed_dim")

    def test_container_is_nearer_to_surface(self):
        scheme = _scheme()
        surface = scheme.get_tone("surface_dim")
        primary = scheme.get_tone(ColorRole.PRIMARY)
        container = scheme.get_tone(ColorRole.PRIMARY_CONTAINER)
        assert abs(container - surface) < abs(primary - surface)


class TestAllVariants2021:

    @pytest.mark.parametrize("variant", list(Variant))
    @pytest.mark.parametrize("is_dark", [False, True])
    def test_every_role_resolves(self, variant, is_dark):
        scheme = _scheme(variant, is_dark)
        for role in ColorRole:
            tone = scheme.get_tone(role)
            assert 0.0 <= tone <= 100.0
            assert scheme.get_argb(role) >> 24 == 0xFF

    def test_monochrome_primary_is_black_in_light(self):
        scheme = _scheme(Variant.MONOCHROME)
        assert scheme.get_tone(ColorRole.PRIMARY) == 0.0


class TestSpec2025:

    @pytest.mark.parametrize(
        "variant,platform,is_dark,level",
        list(itertools.product(
            [Variant.TONAL_SPOT, Variant.NEUTRAL, Variant.VIBRANT, Variant.EXPRESSIVE],
            [TargetPlatform.PHONE, TargetPlatform.WATCH],
            [False, True],
            [-1.0, 0.0, 1.0],
        )),
    )
    def test_every_role_resolves(self, variant, platform, is_dark, level):
        scheme = _scheme(
            variant, is_dark, level, platform=platform, spec_version=SpecVersion.SPEC_2025,
        )
        assert scheme.spec is SPEC_2025
        for role in ColorRole:
            tone = scheme.get_tone(role)
            assert 0.0 <= tone <= 100.0
            assert scheme.get_argb(role) >> 24 == 0xFF

    def test_dim_roles_only_in_2025(self):
        scheme_2025 = _scheme(spec_version=SpecVersion.SPEC_2025)
        scheme_2021 = _scheme()
        assert scheme_2025.has_role("primary_dim")
        assert not scheme_2021.has_role("primary_dim")
        with pytest.raises(KeyError, match="primary_dim"):
            scheme_2021.get_tone("primary_dim")

    def test_unsupported_variant_falls_back(self):
        scheme = _scheme(Variant.FIDELITY, spec_version=SpecVersion.SPEC_2025)
        assert scheme.spec_version is SpecVersion.SPEC_2021
        assert scheme.spec is SPEC_2021


class TestDynamicScheme:

    def test_get_spec(self):
        assert get_spec(SpecVersion.SPEC_2021) is SPEC_2021
        assert get_spec(SpecVersion.SPEC_2025) is SPEC_2025

    def test_contrast_validation(self):
        with pytest.raises(ValueError, match="Contrast"):
            _scheme(level=1.5)

    def test_tones_are_memoized(self):
        scheme = _scheme()
        assert scheme.get_tone(ColorRole.ON_PRIMARY) == scheme.get_tone("on_primary")
        assert scheme.get_hct(ColorRole.ON_PRIMARY) is scheme.get_hct("on_primary")

    def test_derive_keeps_palettes(self):
        scheme = _scheme()
        dark = scheme.derive(is_dark=True)
        assert dark.is_dark
        assert dark.primary_palette is scheme.primary_palette
        assert not scheme.is_dark

    def test_equal_configuration_equal_schemes(self):
        assert _scheme() == _scheme()
        assert _scheme() != _scheme(is_dark=True)

    def test_unknown_role_raises(self):
        with pytest.raises(KeyError):
            _scheme().get_tone("not_a_role")

    def test_source_color(self):
        assert _scheme().source_color_argb == 0xFF5C6BC0
