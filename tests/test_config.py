"""Tests for render options, widget config and click-action tagging."""

import pytest

from d3tree.config import DEFAULT_WIDGET_CONFIG, RenderOptions, WidgetConfig
from d3tree.exceptions import InvalidConfigError
from d3tree.js import JS, PlainText, as_click_action


class TestRenderOptions:
    def test_defaults(self):
        assert RenderOptions().to_dict() == {"celltext": "name", "id": "id", "valueField": "size"}

    def test_click_action_serialized_as_text(self):
        options = RenderOptions(click_action=JS("function(d){}"))
        assert options.to_dict()["clickAction"] == "function(d){}"

    @pytest.mark.parametrize("field", ["celltext", "id", "value_field"])
    def test_blank_fields_rejected(self, field):
        with pytest.raises(InvalidConfigError) as exc:
            RenderOptions(**{field: "  "})
        assert exc.value.key == field

    def test_untagged_click_action_rejected(self):
        with pytest.raises(InvalidConfigError):
            RenderOptions(click_action="function(d){}")

    def test_frozen(self):
        options = RenderOptions()
        with pytest.raises(AttributeError):
            options.celltext = "label"


class TestWidgetConfig:
    def test_defaults(self):
        assert DEFAULT_WIDGET_CONFIG.name == "d3tree2"
        assert DEFAULT_WIDGET_CONFIG.default_rootname == "root"
        assert DEFAULT_WIDGET_CONFIG.fetch_timeout is None

    def test_invalid_timeout(self):
        with pytest.raises(InvalidConfigError):
            WidgetConfig(fetch_timeout=0)

    def test_blank_height(self):
        with pytest.raises(InvalidConfigError):
            WidgetConfig(default_height="")


class TestClickActionTagging:
    def test_string_becomes_js(self):
        assert as_click_action("function(d){}") == JS("function(d){}")

    def test_tagged_values_unchanged(self):
        js = JS("f")
        text = PlainText("t")
        assert as_click_action(js) is js
        assert as_click_action(text) is text

    def test_none(self):
        assert as_click_action(None) is None

    def test_other_types(self):
        with pytest.raises(InvalidConfigError):
            as_click_action(["function(d){}"])
