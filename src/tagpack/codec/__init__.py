"""Tagged value codec for tagpack.

This module provides the Encoder and Decoder together with the tag registry
and varint helpers they share.
"""

from __future__ import annotations

from .decoder import Decoder
from .encoder import Encoder
from .tags import KINDS, KindSpec, Tag, kind_spec

__all__ = [
    "Encoder",
    "Decoder",
    "Tag",
    "KindSpec",
    "KINDS",
    "kind_spec",
]
