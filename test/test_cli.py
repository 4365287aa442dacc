"""Tests for options loading and the command line entry point."""

import pytest

from bmfont_to_cpp import (
    DEFAULT_OPTIONS,
    FontIOError,
    FormatError,
    SemanticError,
    load_options,
    main,
)
from conftest import CHAR_A, CHAR_B


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

def test_default_options():
    assert load_options(None) == DEFAULT_OPTIONS
    assert load_options(None) is not DEFAULT_OPTIONS


def test_options_from_yaml(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("namespace: game_fonts\nreject_duplicates: true\n")
    assert load_options(path) == {"namespace": "game_fonts", "reject_duplicates": True}


def test_partial_options(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("reject_duplicates: true\n")
    assert load_options(path)["namespace"] == "bmf2cpp"


def test_empty_options_file(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("")
    assert load_options(path) == DEFAULT_OPTIONS


def test_missing_options_file(tmp_path):
    with pytest.raises(FontIOError, match="Failed to open options file"):
        load_options(tmp_path / "missing.yaml")


def test_options_not_a_mapping(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("- namespace\n")
    with pytest.raises(FormatError, match="must contain a mapping"):
        load_options(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("namespace: [unclosed\n")
    with pytest.raises(FormatError, match="Invalid options file"):
        load_options(path)


def test_unknown_option(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("namespace: a\ncolour: red\n")
    with pytest.raises(FormatError, match="Unknown option.*colour"):
        load_options(path)


@pytest.mark.parametrize("namespace", ["1fonts", "my-fonts", "a b", "", 12])
def test_invalid_namespace(tmp_path, namespace):
    path = tmp_path / "options.yaml"
    path.write_text(f"namespace: {namespace!r}\n" if isinstance(namespace, str)
                    else f"namespace: {namespace}\n")
    with pytest.raises(SemanticError, match="Invalid namespace"):
        load_options(path)


def test_reject_duplicates_must_be_bool(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("reject_duplicates: sometimes\n")
    with pytest.raises(SemanticError, match="reject_duplicates"):
        load_options(path)


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("argv", [[], ["only.fnt"], ["a", "b", "c", "d"]])
def test_usage_on_bad_arity(argv, capsys):
    assert main(argv) == 1
    out = capsys.readouterr().out
    assert "BMFont to CPP converter" in out
    assert "<fnt_file> <out_file>" in out


def test_success(write_fnt, tmp_path, capsys):
    fnt = write_fnt(chars=(CHAR_A, CHAR_B), kernings=(
        "kerning first=65 second=66 amount=-1",
        "kerning first=66 second=65 amount=-1",
    ))
    out = tmp_path / "font.cpp"
    assert main([str(fnt), str(out)]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Code points: 2",
        "Kerning pairs: 2",
        "Pages: 1",
        "Page size: 4x4",
        f"Output saved to: {out}",
    ]
    assert "namespace bmf2cpp" in out.read_text()


def test_success_with_options(write_fnt, tmp_path):
    fnt = write_fnt()
    options = tmp_path / "options.yaml"
    options.write_text("namespace: ui_font\n")
    out = tmp_path / "font.cpp"
    assert main([str(fnt), str(out), str(options)]) == 0
    assert "namespace ui_font" in out.read_text()


def test_cannot_open_input(tmp_path, capsys):
    out = tmp_path / "font.cpp"
    assert main([str(tmp_path / "missing.fnt"), str(out)]) == 2
    assert capsys.readouterr().out == f'Failed to open .fnt file: "{tmp_path / "missing.fnt"}"\n'
    assert not out.exists()


def test_missing_page_is_not_an_open_failure(write_fnt, tmp_path, capsys):
    fnt = write_fnt(pages=('page id=0 file="missing.dds"',))
    assert main([str(fnt), str(tmp_path / "font.cpp")]) == 1
    assert capsys.readouterr().out.startswith('ERROR: Failed to open page: "')


def test_parse_failure(write_fnt, tmp_path, capsys):
    fnt = write_fnt(common=(
        "common lineHeight=14 base=11 scaleW=300 scaleH=4 pages=1 packed=0 "
        "alphaChnl=0 redChnl=4 greenChnl=4 blueChnl=4"
    ))
    out = tmp_path / "font.cpp"
    assert main([str(fnt), str(out)]) == 1
    assert capsys.readouterr().out.startswith("ERROR: line 2: Non power of two")
    assert not out.exists()


def test_bad_page_writes_nothing(write_fnt, font_dir, tmp_path, capsys):
    (font_dir / "page0.dds").write_bytes(b"not a dds file at all")
    fnt = write_fnt()
    out = tmp_path / "font.cpp"
    assert main([str(fnt), str(out)]) == 1
    assert "not DDS" in capsys.readouterr().out
    assert not out.exists()


def test_existing_output_kept_on_failure(write_fnt, tmp_path):
    fnt = write_fnt(chars=(CHAR_A.replace("page=0", "page=5"),))
    out = tmp_path / "font.cpp"
    out.write_text("previous")
    assert main([str(fnt), str(out)]) == 1
    assert out.read_text() == "previous"


def test_strict_duplicates_from_options(write_fnt, tmp_path, capsys):
    fnt = write_fnt(chars=(CHAR_A, CHAR_A))
    options = tmp_path / "options.yaml"
    options.write_text("reject_duplicates: true\n")
    assert main([str(fnt), str(tmp_path / "font.cpp"), str(options)]) == 1
    assert "Duplicate glyph 65" in capsys.readouterr().out
