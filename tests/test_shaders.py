import pytest

from orrery.shaders import read_shader_source


def test_text_without_trailing_newline(tmp_path):
    shader = tmp_path / "vert.glsl"
    shader.write_text("#version 430\nvoid main() {}", encoding="utf-8")
    assert read_shader_source(shader) == "#version 430\nvoid main() {}\n"


def test_text_with_trailing_newline_gets_extra_line(tmp_path):
    shader = tmp_path / "frag.glsl"
    shader.write_text("a\nb\n", encoding="utf-8")
    assert read_shader_source(str(shader)) == "a\nb\n\n"


def test_empty_file(tmp_path):
    shader = tmp_path / "empty.glsl"
    shader.write_text("", encoding="utf-8")
    assert read_shader_source(shader) == "\n"


def test_content_is_preserved(tmp_path):
    text = "layout (location=0) in vec3 position;\nuniform mat4 mv_matrix;"
    shader = tmp_path / "s.glsl"
    shader.write_text(text, encoding="utf-8")
    result = read_shader_source(shader)
    assert result.rstrip("\n") == text
    assert result.count("\n") == text.count("\n") + 1


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_shader_source(tmp_path / "missing.glsl")