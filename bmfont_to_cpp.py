#!/usr/bin/env python3
"""
Convert an AngelCode BMFont text font into C++ static data.

Reads a text .fnt file and its DDS pages and writes a single C++ source
file holding the font metrics, the glyph table, the kerning table and the
raw page pixels, so a renderer can use the font without any file I/O.

Usage:
    uv run python bmfont_to_cpp.py <fnt_file> <out_file> [options.yaml]

Font requirements:
    .fnt format - text
    .fnt channel configuration:
        1) R:3 G:3 B:3 A:0
        2) R:4 G:4 B:4 A:0
    page format - DDS (alpha, 8 bit)

Options file (YAML, all keys optional):
    namespace: bmf2cpp          # C++ namespace of the generated tables
    reject_duplicates: false    # fail on repeated glyphs / kerning pairs
"""

import os
import re
import struct
import sys
import tempfile
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path

import yaml


USAGE = """BMFont to CPP converter

Font requirements:
    .fnt format - text
    .fnt channel configuration:
        1) R:3 G:3 B:3 A:0
        2) R:4 G:4 B:4 A:0
    page format - DDS (alpha, 8 bit)


Usage:

    bmfont_to_cpp.py <fnt_file> <out_file> [options.yaml]
"""

DEFAULT_OPTIONS = {
    "namespace": "bmf2cpp",
    "reject_duplicates": False,
}

# (alpha, red, green, blue) as written by BMFont for "glyph" / "outline" channels
SUPPORTED_CHANNELS = ((0, 3, 3, 3), (0, 4, 4, 4))

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
MAX_CODE_POINT = 0xFFFFFFFF

OCTETS_PER_LINE = 11


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class BMFontError(Exception):
    """Base class for every conversion failure."""


class FontIOError(BMFontError, OSError):
    """A font resource cannot be opened or read."""


class FntOpenError(FontIOError):
    """The .fnt file itself cannot be opened."""


class FormatError(BMFontError, ValueError):
    """Structural violation in the .fnt text or in a page image."""


class SemanticError(BMFontError, ValueError):
    """A well-formed field holds a value the converter does not support."""


class FieldValueError(BMFontError, ValueError):
    """A field's text is not a valid integer of the expected range."""


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def load_options(path: Path | None) -> dict:
    """Load conversion options from a YAML file, overlaid on the defaults."""
    options = dict(DEFAULT_OPTIONS)
    if path is None:
        return options

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise FontIOError(f'Failed to open options file: "{path}".') from exc
    except yaml.YAMLError as exc:
        raise FormatError(f'Invalid options file "{path}": {exc}') from exc

    if data is None:
        return options
    if not isinstance(data, dict):
        raise FormatError(f'Options file "{path}" must contain a mapping.')

    unknown = sorted(str(key) for key in data if key not in DEFAULT_OPTIONS)
    if unknown:
        raise FormatError(
            f'Unknown option(s) in "{path}": {", ".join(unknown)}'
        )
    options.update(data)

    namespace = options["namespace"]
    if not isinstance(namespace, str) or not _IDENTIFIER_RE.fullmatch(namespace):
        raise SemanticError(f"Invalid namespace: {namespace!r}")
    if not isinstance(options["reject_duplicates"], bool):
        raise SemanticError(
            f"reject_duplicates must be true or false, got {options['reject_duplicates']!r}"
        )
    return options


# ---------------------------------------------------------------------------
# Line tokenizer
# ---------------------------------------------------------------------------

class _Scan(Enum):
    KEYWORD = auto()
    KEY_START = auto()
    KEY = auto()
    EQUALS = auto()
    VALUE_START = auto()
    VALUE = auto()
    DONE = auto()


def parse_line(line: str, keyword: str) -> dict[str, str]:
    """Split one .fnt record into its key/value pairs.

    The leading token must equal ``keyword``. Values are either bare (ending
    at the next space) or enclosed in double quotes; the quotes are stripped
    and nothing inside them is unescaped. A repeated key keeps its last value.

    An empty line yields an empty mapping without looking at the keyword.
    """
    if not line:
        return {}
    if not keyword:
        raise ValueError("Empty keyword.")

    parts = {}
    end = len(line)
    pos = 0
    start = 0
    key = ""
    quoted = False
    state = _Scan.KEYWORD

    while state is not _Scan.DONE:
        if state is _Scan.KEYWORD:
            while pos < end and line[pos] != " ":
                pos += 1
            if line[start:pos] != keyword:
                raise FormatError(f'Keyword not found: "{keyword}".')
            state = _Scan.KEY_START

        elif state is _Scan.KEY_START:
            while pos < end and line[pos] == " ":
                pos += 1
            if pos == end:
                state = _Scan.DONE
            else:
                start = pos
                state = _Scan.KEY

        elif state is _Scan.KEY:
            while pos < end and line[pos] not in " =":
                pos += 1
            key = line[start:pos]
            if not key:
                raise FormatError("Empty key.")
            state = _Scan.EQUALS

        elif state is _Scan.EQUALS:
            while pos < end and line[pos] != "=":
                pos += 1
            if pos == end:
                raise FormatError(f'Equal sign expected after "{key}".')
            pos += 1
            state = _Scan.VALUE_START

        elif state is _Scan.VALUE_START:
            while pos < end and line[pos] == " ":
                pos += 1
            if pos == end:
                raise FormatError(f'Value expected for "{key}".')
            start = pos
            quoted = line[pos] == '"'
            pos += 1
            state = _Scan.VALUE

        elif state is _Scan.VALUE:
            if quoted:
                while pos < end and line[pos] != '"':
                    pos += 1
                if pos == end:
                    raise FormatError(f'Unexpected end of string value for "{key}".')
                pos += 1
                value = line[start + 1:pos - 1]
            else:
                while pos < end and line[pos] != " ":
                    pos += 1
                value = line[start:pos]
            parts[key] = value
            state = _Scan.KEY_START

    return parts


_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class LineRecord:
    """One tokenized .fnt line, with typed access to its values."""

    keyword: str
    values: dict[str, str]
    line_number: int = 0

    @property
    def where(self) -> str:
        return f"line {self.line_number}"

    def text(self, key: str, default: str | None = None) -> str:
        if key in self.values:
            return self.values[key]
        if default is None:
            raise FormatError(
                f'{self.where}: "{self.keyword}" record is missing key "{key}".'
            )
        return default

    def integer(self, key: str, low: int = INT_MIN, high: int = INT_MAX) -> int:
        raw = self.text(key)
        if not _INT_RE.fullmatch(raw):
            raise FieldValueError(
                f'{self.where}: "{self.keyword}" {key}={raw!r} is not an integer.'
            )
        value = int(raw)
        if not low <= value <= high:
            raise FieldValueError(
                f'{self.where}: "{self.keyword}" {key}={value} is out of range '
                f"[{low}, {high}]."
            )
        return value

    def code_point(self, key: str) -> int:
        return self.integer(key, 0, MAX_CODE_POINT)


# ---------------------------------------------------------------------------
# DDS pages
# ---------------------------------------------------------------------------

DDS_MAGIC = b"DDS "
DDS_HEADER_SIZE = 124

# DDS_HEADER as 31 little-endian DWORDs; DDS_PIXELFORMAT starts at word 18
_DDS_HEADER = struct.Struct("<31I")
_DDS_SIZE = 0
_DDS_RGB_BIT_COUNT = 21
_DDS_A_BIT_MASK = 25


def _read_dds_alpha(f, path, data_size: int) -> bytes:
    if f.read(len(DDS_MAGIC)) != DDS_MAGIC:
        raise FormatError(f'Page file is not DDS: "{path}".')

    raw = f.read(DDS_HEADER_SIZE)
    if len(raw) != DDS_HEADER_SIZE:
        raise FormatError(f'Truncated DDS header: "{path}".')
    header = _DDS_HEADER.unpack(raw)

    if header[_DDS_SIZE] != DDS_HEADER_SIZE:
        raise FormatError(
            f'Invalid DDS header size {header[_DDS_SIZE]} '
            f'(expected {DDS_HEADER_SIZE}): "{path}".'
        )
    if header[_DDS_RGB_BIT_COUNT] != 8 or header[_DDS_A_BIT_MASK] != 0xFF:
        raise FormatError(
            f'Unsupported image format (expected 8-bit alpha): "{path}".'
        )

    data = f.read(data_size)
    if len(data) != data_size:
        raise FormatError(
            f"Failed to read page data: expected {data_size} bytes, "
            f'got {len(data)}: "{path}".'
        )
    return data


def load_page(path, width: int, height: int) -> bytes:
    """Read the alpha samples of a DDS page, row by row, one byte per pixel.

    Anything after the first ``width * height`` bytes (mipmaps) is ignored.
    """
    try:
        with open(path, "rb") as f:
            return _read_dds_alpha(f, path, width * height)
    except OSError as exc:
        raise FontIOError(f'Failed to open page: "{path}".') from exc


# ---------------------------------------------------------------------------
# Font document
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FontInfo:
    font_size: int
    line_height: int
    base_offset: int
    page_count: int
    page_width: int
    page_height: int


@dataclass(frozen=True)
class Glyph:
    code_point: int
    page: int
    x: int
    y: int
    width: int
    height: int
    offset_x: int
    offset_y: int
    advance_x: int
    channel: int


@dataclass
class Page:
    id: int
    file: str
    data: bytes = b""


@dataclass
class FontDocument:
    """A parsed and validated BMFont description.

    ``glyphs`` keeps every ``char`` record in file order; lookups by code
    point see the last record for that code point. ``kernings`` maps a left
    code point to {right code point: amount}.
    """

    face: str = ""
    size: int = 0
    stretch_h: int = 100
    outline: int = 0
    line_height: int = 0
    base: int = 0
    scale_w: int = 0
    scale_h: int = 0
    pages: int = 0
    packed: int = 0
    alpha_chnl: int = 0
    red_chnl: int = 0
    green_chnl: int = 0
    blue_chnl: int = 0
    page_list: list[Page] = field(default_factory=list)
    glyphs: list[Glyph] = field(default_factory=list)
    kernings: dict[int, dict[int, int]] = field(default_factory=dict)
    glyph_index: dict[int, Glyph] = field(default_factory=dict, repr=False)

    def add_glyph(self, glyph: Glyph):
        self.glyphs.append(glyph)
        self.glyph_index[glyph.code_point] = glyph

    def glyph_map(self) -> dict[int, Glyph]:
        """Glyphs by code point, in first-appearance order, last record wins."""
        return self.glyph_index

    def kerning_pair_count(self) -> int:
        return sum(len(row) for row in self.kernings.values())

    # Runtime accessors, same contract as the generated Font class

    def info(self) -> FontInfo:
        return FontInfo(
            font_size=self.size,
            line_height=self.line_height,
            base_offset=self.base,
            page_count=len(self.page_list),
            page_width=self.scale_w,
            page_height=self.scale_h,
        )

    def glyph(self, code_point: int) -> Glyph | None:
        return self.glyph_index.get(code_point)

    def kerning(self, left: int, right: int) -> int:
        if left == 0 or right == 0:
            return 0
        return self.kernings.get(left, {}).get(right, 0)

    def page(self, index: int) -> bytes:
        if not 0 <= index < len(self.page_list):
            raise IndexError(f"Page index out of range: {index}")
        return self.page_list[index].data


# ---------------------------------------------------------------------------
# .fnt parser
# ---------------------------------------------------------------------------

def is_pow2(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


class _RecordReader:
    """Reads .fnt lines one at a time and tokenizes them as records."""

    def __init__(self, stream):
        self._lines = iter(stream)
        self.line_number = 0

    def next_line(self) -> str | None:
        try:
            line = next(self._lines)
        except StopIteration:
            return None
        except UnicodeDecodeError as exc:
            raise FormatError(f"line {self.line_number + 1}: {exc}") from exc
        self.line_number += 1
        return line.rstrip("\r\n")

    def record(self, line: str, keyword: str) -> LineRecord:
        try:
            values = parse_line(line, keyword)
        except FormatError as exc:
            raise FormatError(f"line {self.line_number}: {exc}") from None
        return LineRecord(keyword, values, self.line_number)

    def read(self, keyword: str) -> LineRecord:
        line = self.next_line()
        if line is None:
            raise FormatError(
                f'Unexpected end of input: expected "{keyword}" record.'
            )
        return self.record(line, keyword)


def _read_info(record: LineRecord, doc: FontDocument):
    doc.face = record.text("face", "")
    doc.size = record.integer("size")
    doc.stretch_h = record.integer("stretchH")
    doc.outline = record.integer("outline")

    if doc.size >= 0:
        raise SemanticError(
            f"{record.where}: Positive size ({doc.size}); "
            f"the font must be exported with a negative (character height) size."
        )
    if doc.stretch_h != 100:
        raise SemanticError(f"{record.where}: Stretch is not 100% ({doc.stretch_h}).")
    if doc.outline != 0:
        raise SemanticError(f"{record.where}: Outline not allowed ({doc.outline}).")


def _read_common(record: LineRecord, doc: FontDocument):
    doc.line_height = record.integer("lineHeight")
    doc.base = record.integer("base")
    doc.scale_w = record.integer("scaleW")
    doc.scale_h = record.integer("scaleH")
    doc.pages = record.integer("pages")
    doc.packed = record.integer("packed")
    doc.alpha_chnl = record.integer("alphaChnl")
    doc.red_chnl = record.integer("redChnl")
    doc.green_chnl = record.integer("greenChnl")
    doc.blue_chnl = record.integer("blueChnl")

    if doc.base <= 0:
        raise SemanticError(f"{record.where}: Invalid base ({doc.base}).")
    if not is_pow2(doc.scale_w) or not is_pow2(doc.scale_h):
        raise SemanticError(
            f"{record.where}: Non power of two dimensions "
            f"({doc.scale_w}x{doc.scale_h})."
        )
    if doc.pages <= 0:
        raise SemanticError(f"{record.where}: Invalid page count ({doc.pages}).")
    if doc.packed != 0:
        raise SemanticError(f"{record.where}: Packed data not supported.")

    channels = (doc.alpha_chnl, doc.red_chnl, doc.green_chnl, doc.blue_chnl)
    if channels not in SUPPORTED_CHANNELS:
        raise SemanticError(
            f"{record.where}: Unsupported channel configuration "
            f"A:{channels[0]} R:{channels[1]} G:{channels[2]} B:{channels[3]}."
        )


def _read_glyph(record: LineRecord) -> Glyph:
    return Glyph(
        code_point=record.code_point("id"),
        page=record.integer("page"),
        x=record.integer("x"),
        y=record.integer("y"),
        width=record.integer("width"),
        height=record.integer("height"),
        offset_x=record.integer("xoffset"),
        offset_y=record.integer("yoffset"),
        advance_x=record.integer("xadvance"),
        channel=record.integer("chnl"),
    )


def _read_count(record: LineRecord) -> int:
    count = record.integer("count")
    if count < 0:
        raise SemanticError(f'{record.where}: Negative "{record.keyword}" count ({count}).')
    return count


def _resolve_page_path(file: str, base_dir) -> Path:
    path = Path(file)
    if base_dir is None or path.is_absolute():
        return path
    return Path(base_dir) / path


def parse(stream, base_dir=None, reject_duplicates: bool = False) -> FontDocument:
    """
    Parse a text .fnt stream and load its pages.

    Args:
        stream: Iterable of lines (an open text file, a list of strings, ...)
        base_dir: Directory relative page file names are resolved against
        reject_duplicates: Fail on a repeated glyph code point or kerning
            pair instead of letting the later record win
    """
    reader = _RecordReader(stream)
    doc = FontDocument()

    _read_info(reader.read("info"), doc)
    _read_common(reader.read("common"), doc)

    # Pages are looked up by position, so ids must run 0..pages-1 in order
    for index in range(doc.pages):
        record = reader.read("page")
        page = Page(id=record.integer("id"), file=record.text("file"))
        if page.id != index:
            raise SemanticError(
                f"{record.where}: Page id {page.id} out of order; expected {index}."
            )
        page.data = load_page(
            _resolve_page_path(page.file, base_dir), doc.scale_w, doc.scale_h
        )
        doc.page_list.append(page)

    char_count = _read_count(reader.read("chars"))
    for _ in range(char_count):
        record = reader.read("char")
        glyph = _read_glyph(record)
        if not 0 <= glyph.page < len(doc.page_list):
            raise SemanticError(
                f"{record.where}: Glyph {glyph.code_point} references "
                f"unknown page {glyph.page}."
            )
        if reject_duplicates and glyph.code_point in doc.glyph_index:
            raise SemanticError(
                f"{record.where}: Duplicate glyph {glyph.code_point}."
            )
        doc.add_glyph(glyph)

    # Kerning section is optional; blank lines before it are skipped
    line = reader.next_line()
    while line is not None and not line.strip():
        line = reader.next_line()
    if line is None:
        return doc

    kerning_count = _read_count(reader.record(line, "kernings"))
    for _ in range(kerning_count):
        record = reader.read("kerning")
        first = record.code_point("first")
        second = record.code_point("second")
        amount = record.integer("amount")
        row = doc.kernings.setdefault(first, {})
        if reject_duplicates and second in row:
            raise SemanticError(
                f"{record.where}: Duplicate kerning pair ({first}, {second})."
            )
        row[second] = amount

    return doc


def parse_file(path, reject_duplicates: bool = False) -> FontDocument:
    """Parse a .fnt file; page file names are relative to its directory."""
    path = Path(path)
    try:
        f = open(path, encoding="utf-8")
    except OSError as exc:
        raise FntOpenError(f'Failed to open .fnt file: "{path}"') from exc
    with f:
        return parse(f, base_dir=path.parent, reject_duplicates=reject_duplicates)


# ---------------------------------------------------------------------------
# C++ emitter
# ---------------------------------------------------------------------------

_CPP_DECLARATIONS = """\
struct FontInfo
{
    int font_size;
    int line_height;
    int base_offset;
    int page_count;
    int page_width;
    int page_height;
}; // FontInfo

struct GlyphInfo
{
    int page_id;
    int page_x;
    int page_y;
    int width;
    int height;
    int offset_x;
    int offset_y;
    int advance_x;
}; // GlyphInfo


class Font
{
public:
    Font() = delete;

    Font(
        const Font& that) = delete;

    Font& operator=(
        const Font& that) = delete;

    ~Font() = delete;

    static const FontInfo& get_info();

    static const GlyphInfo* get_glyph(
        const char32_t index);

    static int get_kerning(
        const char32_t left_char,
        const char32_t right_char);

    static const unsigned char* get_page(
        const int page_index);
}; // Font"""

_CPP_GLYPH_LOOKUP = """\
    }; // glyphs

    auto glyph_it = glyphs.find(index);

    if (glyph_it == glyphs.cend())
    {
        return nullptr;
    }

    return &glyph_it->second;
}"""

_CPP_KERNING_LOOKUP = """\
    }; // kernings

    if (left_char == U'\\0' || right_char == U'\\0')
    {
        return 0;
    }

    auto sub_kerning_it = kernings.find(left_char);

    if (sub_kerning_it == kernings.cend())
    {
        return 0;
    }

    const auto& sub_kerning = sub_kerning_it->second;

    auto kerning_it = sub_kerning.find(right_char);

    if (kerning_it == sub_kerning.cend())
    {
        return 0;
    }

    return kerning_it->second;
}"""


def _emit_info(doc: FontDocument) -> list[str]:
    info = doc.info()
    values = ", ".join(str(v) for v in (
        info.font_size, info.line_height, info.base_offset,
        info.page_count, info.page_width, info.page_height,
    ))
    return [
        "const FontInfo& Font::get_info()",
        "{",
        "    static const FontInfo font_info = {",
        f"        {values}",
        "    }; // font_info",
        "",
        "    return font_info;",
        "}",
    ]


def _emit_glyphs(doc: FontDocument) -> list[str]:
    lines = [
        "const GlyphInfo* Font::get_glyph(",
        "    const char32_t index)",
        "{",
        "    using Glyphs = std::unordered_map<char32_t, GlyphInfo>;",
        "",
        "    static const Glyphs glyphs = {",
    ]
    for g in doc.glyph_map().values():
        fields = ", ".join(str(v) for v in (
            g.page, g.x, g.y, g.width, g.height,
            g.offset_x, g.offset_y, g.advance_x,
        ))
        lines.append(f"        {{ {g.code_point}, {{ {fields} }} }},")
    lines.append(_CPP_GLYPH_LOOKUP)
    return lines


def _emit_kernings(doc: FontDocument) -> list[str]:
    lines = [
        "int Font::get_kerning(",
        "    const char32_t left_char,",
        "    const char32_t right_char)",
        "{",
        "    using Kernings = std::unordered_map<",
        "        char32_t,",
        "        std::unordered_map<char32_t, int>>;",
        "",
        "    static const Kernings kernings = {",
    ]
    for first in sorted(doc.kernings):
        row = doc.kernings[first]
        lines.append(f"        {{ {first}, {{")
        for second in sorted(row):
            lines.append(f"            {{ {second}, {row[second]} }},")
        lines.append("        } },")
    lines.append(_CPP_KERNING_LOOKUP)
    return lines


def format_octets(data: bytes) -> list[str]:
    """Format bytes as C hex literals, OCTETS_PER_LINE to a line."""
    return [
        "            " + " ".join(f"0x{b:02X}," for b in data[i:i + OCTETS_PER_LINE])
        for i in range(0, len(data), OCTETS_PER_LINE)
    ]


def _emit_pages(doc: FontDocument) -> list[str]:
    data_size = doc.scale_w * doc.scale_h
    lines = [
        "const unsigned char* Font::get_page(",
        "    const int page_index)",
        "{",
        f"    using Pages = std::array<std::array<unsigned char, {data_size}>, "
        f"{len(doc.page_list)}>;",
        "",
        "    static const Pages pages = {{",
    ]
    for page in doc.page_list:
        lines.append("        {")
        lines.extend(format_octets(page.data))
        lines.append("        },")
    lines.extend([
        "    }}; // pages",
        "",
        "    return pages[page_index].data();",
        "}",
    ])
    return lines


def emit(doc: FontDocument, namespace: str = DEFAULT_OPTIONS["namespace"]) -> str:
    """Render a parsed font as a self-contained C++ source file.

    The output depends only on ``doc`` and ``namespace``: glyphs keep file
    order, kerning pairs are sorted by left then right code point.
    """
    lines = [
        "//",
        "// Generated by bmfont_to_cpp.",
        "//",
        "",
        "",
        "#include <array>",
        "#include <unordered_map>",
        "",
        "",
        f"namespace {namespace}",
        "{",
        "",
        "",
        _CPP_DECLARATIONS,
    ]
    for section in (_emit_info, _emit_glyphs, _emit_kernings, _emit_pages):
        lines.extend(["", ""])
        lines.extend(section(doc))
    lines.extend([
        "",
        "",
        f"}} // namespace {namespace}",
    ])
    return "\n".join(lines) + "\n"


def export(doc: FontDocument, sink, namespace: str = DEFAULT_OPTIONS["namespace"]):
    """Write the generated C++ to ``sink`` (a path or a writable text stream).

    The whole file is rendered before the sink is touched. A path is written
    through a temporary file in the same directory and then renamed over the
    target, so the target is either left alone or fully replaced.
    """
    text = emit(doc, namespace)
    if hasattr(sink, "write"):
        sink.write(text)
        return

    path = Path(sink)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", newline="\n", dir=path.parent,
            prefix=f".{path.name}.", suffix=".tmp", delete=False,
        ) as f:
            tmp_name = f.name
            f.write(text)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise FontIOError(f'Failed to write cpp file: "{sink}".') from exc


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (2, 3):
        print(USAGE)
        return 1

    fnt_path = Path(args[0])
    out_path = Path(args[1])
    options_path = Path(args[2]) if len(args) > 2 else None

    try:
        options = load_options(options_path)
        doc = parse_file(fnt_path, reject_duplicates=options["reject_duplicates"])
        export(doc, out_path, namespace=options["namespace"])
    except FntOpenError as exc:
        print(exc)
        return 2
    except BMFontError as exc:
        print(f"ERROR: {exc}")
        return 1

    print(f"Code points: {len(doc.glyph_map())}")
    print(f"Kerning pairs: {doc.kerning_pair_count()}")
    print(f"Pages: {len(doc.page_list)}")
    print(f"Page size: {doc.scale_w}x{doc.scale_h}")
    print(f"Output saved to: {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
