# # mpeg audio frame header lexer code here
from typing import Optional


MpegVersions = {
    # version bits : name
    0b00 : 'MPEG Version 2.5',
    0b10 : 'MPEG Version 2 (ISO/IEC 13818-3)',
    0b11 : 'MPEG Version 1 (ISO/IEC 11172-3)',
}

Layers = {
    # layer bits : name
    0b01 : 'Layer III',
    0b10 : 'Layer II',
    0b11 : 'Layer I',
}

ChannelModes = {
    0b00 : 'Stereo',
    0b01 : 'Joint stereo (Stereo)',
    0b10 : 'Dual channel (Stereo)',
    0b11 : 'Single channel (Mono)',
}

Emphasis = {
    0b00 : 'none',
    0b01 : '50/15 ms',
    0b11 : 'CCIT J.17',
}

# kbps, index 1..14 ; 0 (free) and 15 (bad) are not decodable
Bitrates = {
    ('V1', 'L1') : [32, 64, 96, 128, 160, 192, 224, 256, 288, 320, 352, 384, 416, 448],
    ('V1', 'L2') : [32, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320, 384],
    ('V1', 'L3') : [32, 40, 48, 56, 64, 80, 96, 112, 128, 160, 192, 224, 256, 320],
    ('V2', 'L1') : [32, 48, 56, 64, 80, 96, 112, 128, 144, 160, 176, 192, 224, 256],
    ('V2', 'L2') : [8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160],
    ('V2', 'L3') : [8, 16, 24, 32, 40, 48, 56, 64, 80, 96, 112, 128, 144, 160],
}

SampleRates = {
    0b11 : [44100, 48000, 32000],
    0b10 : [22050, 24000, 16000],
    0b00 : [11025, 12000, 8000],
}

HEADER_SIZE = 4


def _version_key(version_bits: int) -> str:
    return 'V1' if version_bits == 0b11 else 'V2'


def _layer_key(layer_bits: int) -> str:
    return {0b11: 'L1', 0b10: 'L2', 0b01: 'L3'}[layer_bits]


def samples_per_frame(version_bits: int, layer_bits: int) -> int:
    if layer_bits == 0b11:
        return 384
    if layer_bits == 0b10:
        return 1152
    return 1152 if version_bits == 0b11 else 576


def side_info_size(version_bits: int, channel_mode_bits: int) -> int:
    """
    Layer III side information length, the Xing/Info marker sits right after it
    """
    mono = channel_mode_bits == 0b11
    if version_bits == 0b11:
        return 17 if mono else 32
    return 9 if mono else 17


def frame_length(layer_bits: int, bitrate: int, sample_rate: int, padding: int, spf: int) -> int:
    # bitrate in bit/s
    if layer_bits == 0b11:
        return (12 * bitrate // sample_rate + padding) * 4
    return spf // 8 * bitrate // sample_rate + padding


class FrameHeaderToken:
    def __init__(self, offset, raw, fields, byte_length, sample_length):
        self.offset = offset
        self.raw = raw
        self.fields = fields
        self.byte_length = byte_length
        self.sample_length = sample_length

    @property
    def next_offset(self):
        return self.offset + self.byte_length

    def __repr__(self):
        return f"FrameHeaderToken(Offset:[{self.offset}] , LEN:[{self.byte_length}] , Raw:[0x{self.raw.hex().upper()}])"


class FrameLexer:
    def __init__(self, data):
        self.data = memoryview(data)

    def peek(self, pos, width=HEADER_SIZE):
        if 0 <= pos and pos + width <= len(self.data):
            return self.data[pos:pos + width].tobytes()
        return None

    def is_sync(self, pos) -> bool:
        head = self.peek(pos, 2)
        return head is not None and head[0] == 0xFF and (head[1] & 0xE0) == 0xE0

    def interpret_header(self, header: bytes):
        """
        Header Pattern : SYNC(11) VER(2) LAYER(2) PROT(1) | BR(4) SR(2) PAD(1) PRIV(1) | MODE(2) EXT(2) COPY(1) ORIG(1) EMPH(2)
        """
        if header is None or len(header) < HEADER_SIZE:
            return None

        b1, b2, b3 = header[1], header[2], header[3]
        version_bits = (b1 >> 3) & 0b11
        layer_bits = (b1 >> 1) & 0b11
        protection_bit = b1 & 0b1
        bitrate_bits = (b2 >> 4) & 0b1111
        sample_rate_bits = (b2 >> 2) & 0b11
        padding_bit = (b2 >> 1) & 0b1
        private_bit = b2 & 0b1
        channel_mode_bits = (b3 >> 6) & 0b11
        mode_extension_bits = (b3 >> 4) & 0b11
        copyright_bit = (b3 >> 3) & 0b1
        original_bit = (b3 >> 2) & 0b1
        emphasis_bits = b3 & 0b11

        # reserved / free format values cannot be sized
        if version_bits not in MpegVersions or layer_bits not in Layers:
            return None
        if bitrate_bits in (0b0000, 0b1111) or sample_rate_bits == 0b11:
            return None
        if emphasis_bits not in Emphasis:
            return None

        bitrate = Bitrates[(_version_key(version_bits), _layer_key(layer_bits))][bitrate_bits - 1]
        sample_rate = SampleRates[version_bits][sample_rate_bits]

        return {
            'mpeg_audio_version_bits': f"{version_bits:02b}",
            'mpeg_audio_version': MpegVersions[version_bits],
            'layer_description_bits': f"{layer_bits:02b}",
            'layer_description': Layers[layer_bits],
            'is_protected': protection_bit == 0,
            'bitrate_bits': f"{bitrate_bits:04b}",
            'bitrate': bitrate,
            'sampling_rate_bits': f"{sample_rate_bits:02b}",
            'sampling_rate': sample_rate,
            'frame_is_padded': padding_bit == 1,
            'private_bit': private_bit,
            'channel_mode_bits': f"{channel_mode_bits:02b}",
            'channel_mode': ChannelModes[channel_mode_bits],
            'mode_extension_bits': f"{mode_extension_bits:02b}",
            'is_copyrighted': copyright_bit == 1,
            'is_original_media': original_bit == 1,
            'emphasis_bits': f"{emphasis_bits:02b}",
            'emphasis': Emphasis[emphasis_bits],
        }

    def lex_at(self, pos) -> Optional[FrameHeaderToken]:
        if not self.is_sync(pos):
            return None

        header = self.peek(pos)
        fields = self.interpret_header(header)
        if fields is None:
            return None

        version_bits = int(fields['mpeg_audio_version_bits'], 2)
        layer_bits = int(fields['layer_description_bits'], 2)
        spf = samples_per_frame(version_bits, layer_bits)
        length = frame_length(
            layer_bits,
            fields['bitrate'] * 1000,
            fields['sampling_rate'],
            1 if fields['frame_is_padded'] else 0,
            spf,
        )
        if length <= HEADER_SIZE:
            return None

        return FrameHeaderToken(pos, header, fields, length, spf)
