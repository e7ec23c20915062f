# Copyright (c) 2026 Monet
# SPDX-License-Identifier: MIT

"""
Color quantization.

``quantize`` runs the full pipeline; the two stages are exposed for
callers that want one of them alone.
"""

from monet.quantize.celebi import QuantizerResult, opaque_pixels, quantize
from monet.quantize.wsmeans import QuantizerConfig, QuantizerWsmeans
from monet.quantize.wu import QuantizerWu

__all__ = [
    "quantize",
    "opaque_pixels",
    "QuantizerResult",
    "QuantizerConfig",
    # Stages
    "QuantizerWu",
    "QuantizerWsmeans",
]
