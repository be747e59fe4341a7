"""Tests for widget serialization and HTML embedding."""

import json

import pytest
import requests

from d3tree import d3tree2
from d3tree.config import WidgetConfig
from d3tree.conversion import normalize
from d3tree.exceptions import InvalidConfigError
from d3tree.widget import create_widget, css_size


class TestCreateWidget:
    def test_wire_format(self, flare):
        widget = create_widget(normalize(flare, click_action="function(d){}"))
        x = widget.to_dict()
        assert set(x) == {"x", "evals", "jsHooks"}
        assert x["evals"] == ["options.clickAction"]
        assert x["jsHooks"] == []
        assert x["x"]["data"] == flare

    def test_default_sizes(self, flare):
        widget = create_widget(normalize(flare))
        assert (widget.width, widget.height) == ("100%", "400px")
        assert widget.name == "d3tree2"

    def test_explicit_sizes(self, flare):
        widget = create_widget(normalize(flare), width=800, height="50vh")
        assert (widget.width, widget.height) == ("800px", "50vh")

    def test_configured_name(self, flare):
        widget = create_widget(normalize(flare), config=WidgetConfig(name="d3tree3"))
        assert widget.name == "d3tree3"
        assert 'class="d3tree3 html-widget"' in widget.to_html()

    def test_element_id_is_deterministic(self, flare):
        first = create_widget(normalize(flare))
        second = create_widget(normalize(flare))
        assert first.element_id == second.element_id
        assert first.element_id.startswith("htmlwidget-")
        assert create_widget(normalize(flare, celltext="label")).element_id != first.element_id

    def test_explicit_element_id(self, flare):
        assert create_widget(normalize(flare), element_id="tree").element_id == "tree"


class TestHtml:
    def test_container_and_data(self, flare):
        html = create_widget(normalize(flare), element_id="tree").to_html()
        assert '<div id="tree" style="width:100%;height:400px;"' in html
        assert '<script type="application/json" data-for="tree">' in html
        start = html.index('data-for="tree">') + len('data-for="tree">')
        body = html[start: html.rindex("</script>")]
        assert json.loads(body)["x"]["data"] == flare

    def test_script_terminator_escaped(self):
        widget = create_widget(normalize({"name": "</script><b>"}), element_id="t")
        html = widget.to_html()
        assert html.count("</script>") == 1
        assert "<\\/script>" in html

    def test_repr_html(self, flare):
        widget = create_widget(normalize(flare))
        assert widget._repr_html_() == widget.to_html()

    def test_byte_identical_html(self, world_result):
        first = d3tree2(world_result, rootname="World").to_html()
        second = d3tree2(world_result, rootname="World").to_html()
        assert first == second

    def test_save_html(self, tmp_path, flare):
        output = tmp_path / "tree.html"
        widget = d3tree2(flare, element_id="tree")
        result = widget.save_html(str(output), title="Flare")
        text = output.read_text(encoding="utf-8")
        assert result == str(output.resolve())
        assert text.startswith("<!DOCTYPE html>")
        assert "<title>Flare</title>" in text
        assert "d3.min.js" in text
        assert widget.to_html() in text


class TestCssSize:
    @pytest.mark.parametrize(
        "value, expected",
        [(None, "300px"), (400, "400px"), (12.5, "12.5px"), ("100%", "100%")],
    )
    def test_conversion(self, value, expected):
        assert css_size(value, "300px") == expected

    def test_bool_rejected(self):
        with pytest.raises(InvalidConfigError):
            css_size(True, "300px")


class TestD3tree2:
    def test_json_url_passthrough(self, monkeypatch, flare):
        class FakeResponse:
            text = json.dumps(flare)

            def raise_for_status(self):
                pass

        monkeypatch.setattr(requests, "get", lambda url, timeout=None: FakeResponse())
        widget = d3tree2("http://example.org/flare.json", celltext="name", width=600)
        assert widget.to_dict()["x"]["data"] == flare
        assert widget.width == "600px"

    def test_options_forwarded(self, flare):
        widget = d3tree2(flare, id_field="name", value_field="value")
        assert widget.x.options.id == "name"
        assert widget.to_dict()["x"]["options"]["valueField"] == "value"
