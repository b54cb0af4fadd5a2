"""Configuration for encoders and decoders."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CodecConfig(BaseModel):
    """Options shared by Encoder and Decoder.

    Attributes:
        compression_level: zlib level used by Encoder.compress(). -1 selects
            the zlib default (currently 6), 0 stores without compression and
            9 compresses hardest.

    Examples:
        ```python
        from tagpack import CodecConfig, Encoder

        encoder = Encoder(CodecConfig(compression_level=9))
        ```
    """

    model_config = ConfigDict(
        # Configs are shared between instances
        frozen=True,
        extra="forbid",
    )

    compression_level: int = Field(default=-1, ge=-1, le=9)


DEFAULT_CONFIG = CodecConfig()
