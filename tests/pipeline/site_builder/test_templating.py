"""Templating tests for the site builder."""

from pathlib import Path

import pytest

from folio.config import DEFAULT_TEMPLATES_DIR
from folio.exceptions import ConfigurationError, TemplateRenderError
from folio.pipeline.site_builder.templating import (
    TEMPLATE_FIELDS,
    TemplateSet,
    extract_placeholders_from_template,
    render_template,
)


def test_extract_placeholders_from_template_basic():
    template = "Hello {{ title }}! {{date}} {{ title }} {single}"
    assert extract_placeholders_from_template(template) == ["date", "title"]


def test_render_template_substitutes_known_and_keeps_unknown():
    out = render_template("<h1>{{ title }}</h1><p>{{ missing }}</p>", {"title": "Hi"})
    assert out == "<h1>Hi</h1><p>{{ missing }}</p>"


def test_render_template_none_value_is_inert_and_numbers_are_strings():
    out = render_template("{{ a }}|{{ b }}", {"a": None, "b": 2025})
    assert out == "{{ a }}|2025"


def test_render_template_does_not_escape_values():
    assert render_template("{{ content }}", {"content": "<p>x</p>"}) == "<p>x</p>"


def test_template_set_render_rejects_unknown_fields():
    templates = TemplateSet({"about": "{{ currentYear }}"})
    with pytest.raises(TemplateRenderError):
        templates.render("about", {"currentYear": 2025, "bogus": "x"})


def test_template_set_render_missing_template():
    with pytest.raises(TemplateRenderError):
        TemplateSet({}).render("detail", {})


def test_template_set_load_missing_file(tmp_path: Path):
    with pytest.raises(ConfigurationError):
        TemplateSet.load(tmp_path, ["header"])


def test_template_set_load_warns_on_unknown_placeholder(tmp_path: Path, caplog):
    (tmp_path / "about.html").write_text("{{ currentYear }} {{ mystery }}", encoding="utf-8")
    templates = TemplateSet.load(tmp_path, ["about"])
    assert "about" in templates
    assert "mystery" in caplog.text
    assert templates.render("about", {"currentYear": 1}) == "1 {{ mystery }}"


def test_shipped_templates_stay_within_field_contract():
    for name, fields in TEMPLATE_FIELDS.items():
        content = (DEFAULT_TEMPLATES_DIR / f"{name}.html").read_text(encoding="utf-8")
        assert set(extract_placeholders_from_template(content)) <= fields, name
