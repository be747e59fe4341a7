"""Tests for dashboard placeholder and render hooks."""

import pytest

from d3tree import d3tree2
from d3tree.exceptions import UnsupportedInputError
from d3tree.widget import RenderFunction, d3tree2_output, render_d3tree2


class TestOutput:
    def test_default_placeholder(self):
        html = d3tree2_output("treemap")
        assert html == (
            '<div id="treemap" style="width:100%;height:400px;" '
            'class="d3tree2 html-widget html-widget-output"></div>'
        )

    def test_custom_size(self):
        assert "width:500px;height:50%;" in d3tree2_output("t", width=500, height="50%")

    def test_id_is_escaped(self):
        assert 'id="a&quot;b"' in d3tree2_output('a"b')


class TestRender:
    def test_render_returns_widget_dict(self, flare):
        render = render_d3tree2(lambda: d3tree2(flare))
        assert isinstance(render, RenderFunction)
        assert render() == d3tree2(flare).to_dict()

    def test_expression_evaluated_each_time(self, flare):
        calls = []

        def expr():
            calls.append(1)
            return d3tree2(flare)

        render = render_d3tree2(expr)
        render()
        render()
        assert len(calls) == 2

    def test_bind(self, flare):
        message = render_d3tree2(lambda: d3tree2(flare)).bind("treemap")
        assert message["id"] == "treemap"
        assert message["value"]["x"]["data"] == flare

    def test_none_renders_nothing(self):
        assert render_d3tree2(lambda: None).bind("t") == {"id": "t", "value": None}

    def test_output_delegates(self, flare):
        render = render_d3tree2(lambda: d3tree2(flare))
        assert render.output("t") == d3tree2_output("t")

    def test_non_widget_result(self, flare):
        with pytest.raises(UnsupportedInputError):
            render_d3tree2(lambda: flare)()

    def test_expression_must_be_callable(self, flare):
        with pytest.raises(UnsupportedInputError):
            render_d3tree2(flare)
