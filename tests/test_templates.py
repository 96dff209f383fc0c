from __future__ import annotations

import pytest

from json_to_swift.codegen.core.templates import TemplateError, create_template_engine


@pytest.fixture
def template_dir(tmp_path):
    (tmp_path / "keys.j2").write_text(
        "\n{% for key in keys %}\n{{ key | string_literal }}\n{% endfor %}\n",
        encoding="utf-8",
    )
    (tmp_path / "strict.j2").write_text("{{ undefined_name }}", encoding="utf-8")
    return tmp_path


def test_render_keeps_framing_newlines(template_dir) -> None:
    engine = create_template_engine(template_dir)

    assert engine.template_exists("keys.j2")
    assert engine.render_template("keys.j2", {"keys": ["a", 'b"c']}) == '\n"a"\n"b\\"c"\n'


def test_rendering_errors(template_dir) -> None:
    engine = create_template_engine(template_dir)

    assert not engine.template_exists("missing.j2")
    with pytest.raises(TemplateError, match="missing.j2"):
        engine.render_template("missing.j2", {})

    with pytest.raises(TemplateError, match="strict.j2"):
        engine.render_template("strict.j2", {})


def test_missing_directory(tmp_path) -> None:
    with pytest.raises(TemplateError, match="Template directory not found"):
        create_template_engine(tmp_path / "absent")
