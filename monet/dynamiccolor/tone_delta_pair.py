# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Tone delta pairs: two roles whose tones must stay a minimum distance apart.

Typical use is a container and the accent drawn next to it, e.g.
primary_container and primary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TonePolarity(Enum):
    """Which role of a pair moves, or which way the pair is ordered."""

    # role_a is darker than role_b
    DARKER = "darker"
    # role_a is lighter than role_b
    LIGHTER = "lighter"
    # role_a is nearer to the background tone than role_b
    NEARER = "nearer"
    # role_a is farther from the background tone than role_b
    FARTHER = "farther"
    # role_a is darker in light schemes and lighter in dark ones
    RELATIVE_DARKER = "relative_darker"
    # role_a is lighter in light schemes and darker in dark ones
    RELATIVE_LIGHTER = "relative_lighter"


class DeltaConstraint(Enum):
    """How strictly a 2025 pair holds its delta."""

    # Exactly ``delta`` apart
    EXACT = "exact"
    # At most ``delta`` apart
    NEARER = "nearer"
    # At least ``delta`` apart
    FARTHER = "farther"


@dataclass(frozen=True, slots=True)
class ToneDeltaPair:
    """
    A tone separation constraint between two roles.

    Attributes:
        role_a: Id of the first role
        role_b: Id of the second role
        delta: Required tone separation
        polarity: Ordering of the two roles
        stay_together: Move both roles out of the 50-59 tone band
            together (2021 resolution)
        constraint: Strictness of the delta (2025 resolution)
    """
    role_a: str
    role_b: str
    delta: float
    polarity: TonePolarity
    stay_together: bool = True
    constraint: DeltaConstraint = DeltaConstraint.EXACT

    def __post_init__(self) -> None:
        if self.delta < 0.0:
            raise ValueError(f"Tone delta must be >= 0, got {self.delta}")
        if self.role_a == self.role_b:
            raise ValueError(f"A tone delta pair needs two roles, got {self.role_a!r} twice")

    def other(self, role: str) -> str:
        """The partner of ``role`` in this pair."""
        return self.role_b if role == self.role_a else self.role_a
