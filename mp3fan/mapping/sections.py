#Unit Models

from typing import Any, Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, NonNegativeInt, PositiveInt, model_validator


class Section(BaseModel):
    """Byte span of one decoded unit"""
    model_config = ConfigDict(frozen=True)

    type: Literal["tag", "frame"]
    offset: NonNegativeInt
    byte_length: PositiveInt
    next_offset: NonNegativeInt

    @model_validator(mode="after")
    def check_next_offset(self) -> "Section":
        if self.next_offset != self.offset + self.byte_length:
            raise ValueError(
                f"next_offset {self.next_offset} does not follow "
                f"offset {self.offset} + byte_length {self.byte_length}"
            )
        return self


class FrameHeader(BaseModel):
    """Decoded MPEG audio frame header"""
    model_config = ConfigDict(frozen=True)

    mpeg_audio_version_bits: str
    mpeg_audio_version: str
    layer_description_bits: str
    layer_description: str
    is_protected: bool
    bitrate_bits: str
    bitrate: int
    sampling_rate_bits: str
    sampling_rate: int
    frame_is_padded: bool
    private_bit: int
    channel_mode_bits: str
    channel_mode: str
    mode_extension_bits: str
    is_copyrighted: bool
    is_original_media: bool
    emphasis_bits: str
    emphasis: str


class Tag(BaseModel):
    """
    Non-audio metadata block (ID3v2, Xing, Info)
    """
    model_config = ConfigDict(frozen=True)

    section: Section
    kind: str
    payload: Dict[str, Any]


class Frame(BaseModel):
    """
    Audio frame
    """
    model_config = ConfigDict(frozen=True)

    section: Section
    header: FrameHeader
    sample_length: PositiveInt


StructuralUnit = Union[Tag, Frame]
