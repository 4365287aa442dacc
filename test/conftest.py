import struct
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))


INFO = (
    'info face="Test Sans" size=-12 bold=0 italic=0 charset="" unicode=1 '
    "stretchH=100 smooth=1 aa=1 padding=0,0,0,0 spacing=1,1 outline=0"
)
COMMON = (
    "common lineHeight=14 base=11 scaleW=4 scaleH=4 pages=1 packed=0 "
    "alphaChnl=0 redChnl=4 greenChnl=4 blueChnl=4"
)
PAGE = 'page id=0 file="page0.dds"'
CHAR_A = (
    "char id=65   x=0     y=1     width=2     height=3     xoffset=0     "
    "yoffset=2     xadvance=3     page=0  chnl=15"
)
CHAR_B = (
    "char id=66   x=2     y=0     width=2     height=4     xoffset=1     "
    "yoffset=1     xadvance=4     page=0  chnl=15"
)


def build_dds(width, height, pixels=None, *, magic=b"DDS ", header_size=124,
              bit_count=8, alpha_mask=0xFF):
    """Build an uncompressed 8-bit alpha DDS image."""
    header = [0] * 31
    header[0] = header_size
    header[1] = 0x100F  # caps | height | width | pitch | pixelformat
    header[2] = height
    header[3] = width
    header[4] = width
    header[18] = 32
    header[19] = 0x2  # DDPF_ALPHA
    header[21] = bit_count
    header[25] = alpha_mask
    header[26] = 0x1000  # DDSCAPS_TEXTURE
    if pixels is None:
        pixels = bytes((i * 17) % 256 for i in range(width * height))
    return magic + struct.pack("<31I", *header) + bytes(pixels)


def fnt_lines(*, info=INFO, common=COMMON, pages=(PAGE,), chars=(CHAR_A,),
              kernings=None):
    """Assemble .fnt text lines; ``kernings=None`` omits the section."""
    lines = [info, common, *pages, f"chars count={len(chars)}", *chars]
    if kernings is not None:
        lines.append(f"kernings count={len(kernings)}")
        lines.extend(kernings)
    return [line + "\n" for line in lines]


@pytest.fixture
def font_dir(tmp_path):
    """Directory holding a valid 4x4 page0.dds."""
    (tmp_path / "page0.dds").write_bytes(build_dds(4, 4))
    return tmp_path


@pytest.fixture
def write_fnt(font_dir):
    def write(name="font.fnt", **parts):
        path = font_dir / name
        path.write_text("".join(fnt_lines(**parts)))
        return path
    return write
