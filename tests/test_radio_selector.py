"""
Tests for RadioSelector: initial choice, option events, switching choices,
validation before save and rendering.
"""

import mock
import pytest

from formkit.app.content import DataJson, StateJson
from formkit.app.fastapi.websocket import WebsocketManager
from formkit.app.widgets import (
    ColorSelector,
    FileUpload,
    Input,
    Option,
    OptionType,
    RadioSelector,
)

ADDED = RadioSelector.Events.OPTION_ADDED
REMOVED = RadioSelector.Events.OPTION_REMOVED


class TestInitialChoice:
    def test_defaults_to_first_choice(self, make_selector, events):
        selector = make_selector(params={})

        assert selector.get_selected_index() == 0
        assert selector.get_stored_option() is None
        assert events == []

    def test_params_are_persisted_on_creation(self, make_selector, host):
        selector = make_selector(params=None, mount=False)

        assert host.calls == [("background", {})]
        assert host.params["background"] is selector.params

    def test_last_filled_field_wins(self, make_selector):
        selector = make_selector(params={"image": {"path": "/a.png"}, "bgColor": "00ff00"})

        assert selector.get_selected_index() == 1
        assert selector.get_stored_option() == Option(OptionType.COLOR, "#00ff00")

    def test_only_image_filled(self, make_selector):
        selector = make_selector(params={"image": {"path": "images/a.png"}})

        assert selector.get_selected_index() == 0
        assert selector.get_stored_option() == Option(OptionType.IMAGE, "/files/editor/images/a.png")

    def test_image_path_of_saved_content(self, make_selector, monkeypatch):
        monkeypatch.setenv("CONTENT_ID", "42")
        selector = make_selector(params={"image": {"path": "images/a.png"}})

        assert selector.get_stored_option().value == "/files/content/42/images/a.png"

    def test_empty_values_do_not_count(self, make_selector):
        selector = make_selector(params={"image": {"path": "/a.png"}, "bgColor": ""})

        assert selector.get_selected_index() == 0

    def test_malformed_params(self, make_selector):
        selector = make_selector(params={"image": "not-a-file", "bgColor": "zzz"})

        assert selector.get_selected_index() == 1
        assert selector.get_stored_option() is None
        assert selector.children[0].get_url() is None
        assert selector.children[1].get_color() is None

    def test_field_without_choices(self, host):
        with pytest.raises(ValueError):
            RadioSelector(None, {"name": "background", "fields": []}, {}, host.set_value)

    def test_mount_twice(self, make_selector):
        selector = make_selector()

        with pytest.raises(RuntimeError):
            selector.append_to(selector.parent)


class TestOptionEvents:
    def test_image_upload_then_switch_to_empty_color(self, make_selector, events):
        selector = make_selector(params={})
        image, color = selector.children

        image.set_file({"path": "/img.png"})
        assert events == [ADDED]
        assert selector.get_stored_option() == Option(OptionType.IMAGE, "/img.png")

        selector.set_selected_index(1)
        assert events == [ADDED, REMOVED]
        assert selector.get_stored_option() is None
        assert selector.get_selected_index() == 1

    def test_color_move_and_clear(self, make_selector, events):
        selector = make_selector(params={})
        selector.set_selected_index(1)
        color = selector.children[1]
        assert events == []

        color.color_picker.move("#ff0000")
        assert events == [ADDED]
        assert selector.get_stored_option() == Option(OptionType.COLOR, "#ff0000")
        assert selector.params["bgColor"] == "ff0000"

        color.color_picker.move(None)
        assert events == [ADDED, REMOVED]
        assert selector.get_stored_option() is None
        assert "bgColor" not in selector.params

    def test_removed_fires_before_added(self, make_selector, events):
        selector = make_selector(params={"image": {"path": "/a.png"}, "bgColor": "00ff00"})

        selector.set_selected_index(0)

        assert events == [REMOVED, ADDED]
        assert selector.get_stored_option() == Option(OptionType.IMAGE, "/a.png")

    def test_order_is_seen_by_handlers(self, make_selector):
        selector = make_selector(params={"image": {"path": "/a.png"}, "bgColor": "00ff00"})
        seen = []

        @selector.option_removed
        def on_removed(event):
            seen.append((event, selector.get_stored_option()))

        @selector.option_added
        def on_added(event):
            seen.append((event, selector.get_stored_option()))

        selector.set_selected_index(0)

        assert seen == [
            (REMOVED, Option(OptionType.COLOR, "#00ff00")),
            (ADDED, Option(OptionType.IMAGE, "/a.png")),
        ]

    def test_select_current_choice_is_noop(self, make_selector, events):
        selector = make_selector(params={"image": {"path": "/a.png"}, "bgColor": "00ff00"})

        selector.set_selected_index(0)
        selector.set_selected_index(0)

        assert events == [REMOVED, ADDED]

    def test_changes_of_hidden_choice_are_only_stored(self, make_selector, events):
        selector = make_selector(params={})
        color = selector.children[1]

        color.color_picker.move("#123456")
        assert events == []
        assert selector.get_stored_option() is None

        selector.set_selected_index(1)
        assert events == [ADDED]
        assert selector.get_stored_option() == Option(OptionType.COLOR, "#123456")

    def test_replace_image(self, make_selector, events):
        selector = make_selector(params={"image": {"path": "/a.png"}})

        selector.children[0].set_file({"path": "/b.png"})

        assert events == [ADDED]
        assert selector.get_stored_option() == Option(OptionType.IMAGE, "/b.png")

    def test_once_handler(self, make_selector):
        selector = make_selector(params={})
        calls = []
        selector.once(ADDED, calls.append)

        selector.children[0].set_file({"path": "/a.png"})
        selector.children[0].set_file({"path": "/b.png"})

        assert calls == [ADDED]

    def test_off_handler(self, make_selector):
        selector = make_selector(params={})
        calls = []
        selector.on(ADDED, calls.append)
        selector.off(ADDED, calls.append)

        selector.children[0].set_file({"path": "/a.png"})

        assert calls == []

    def test_off_once_handler(self, make_selector):
        selector = make_selector(params={})
        calls = []
        selector.once(ADDED, calls.append)
        selector.off(ADDED, calls.append)

        selector.children[0].set_file({"path": "/a.png"})

        assert calls == []

    def test_failing_handler_keeps_view_in_sync(self, make_selector):
        selector = make_selector(params={"image": {"path": "/a.png"}, "bgColor": "00ff00"})
        image, color = selector.children

        @selector.option_added
        def broken(event):
            raise RuntimeError("host failed")

        with pytest.raises(RuntimeError):
            selector.set_selected_index(0)

        assert selector.get_selected_index() == 0
        assert not image.is_hidden()
        assert color.is_hidden()
        assert StateJson()[selector.widget_id]["selectedIndex"] == 0
        assert DataJson()[selector.widget_id]["storedOption"] == {"type": "image", "value": "/a.png"}


class TestSetSelectedIndex:
    @pytest.mark.parametrize("index", [-1, 2, 10])
    def test_out_of_range(self, make_selector, index):
        selector = make_selector()

        with pytest.raises(ValueError):
            selector.set_selected_index(index)
        assert selector.get_selected_index() == 0

    def test_state_and_visibility(self, make_selector):
        selector = make_selector()
        image, color = selector.children
        assert not image.is_hidden()
        assert color.is_hidden()

        selector.set_selected_index(1)

        assert StateJson()[selector.widget_id]["selectedIndex"] == 1
        assert selector.get_checked_index() == 1
        assert image.is_hidden()
        assert not color.is_hidden()


class TestResetCheckedOption:
    def test_image(self, make_selector, events):
        selector = make_selector(params={"image": {"path": "/a.png"}})
        image = selector.children[0]

        selector.reset_checked_option()

        assert events == [REMOVED]
        assert selector.get_stored_option() is None
        assert image.params is None
        assert "image" not in selector.params

    def test_color(self, make_selector, events):
        selector = make_selector(params={"bgColor": "ff0000"})
        color = selector.children[1]

        selector.reset_checked_option()

        assert events == [REMOVED]
        assert selector.get_stored_option() is None
        assert color.color_picker.get() is None
        # the cleared color is persisted on validation
        assert selector.params["bgColor"] == "ff0000"
        assert selector.validate() is True
        assert "bgColor" not in selector.params

    def test_field_without_clear(self, make_selector, events):
        field = {
            "name": "caption",
            "fields": [
                {"name": "text", "type": "text", "label": "Text"},
                {"name": "bgColor", "type": "color", "label": "Color"},
            ],
        }
        selector = make_selector(field=field, params={"text": "hello"})
        assert isinstance(selector.children[0], Input)

        selector.reset_checked_option()

        assert events == []
        assert selector.params["text"] == "hello"

    def test_nothing_stored(self, make_selector, events):
        selector = make_selector(params={})

        selector.reset_checked_option()

        assert events == []


class TestValidate:
    def test_prunes_hidden_choices(self, make_selector, host):
        selector = make_selector(params={})
        selector.children[0].set_file({"path": "/a.png"})
        selector.set_selected_index(1)
        selector.children[1].color_picker.move("#ff0000")
        assert set(selector.params) == {"image", "bgColor"}

        assert selector.validate() is True

        assert selector.params == {"bgColor": "ff0000"}
        assert host.params["background"] == {"bgColor": "ff0000"}

    def test_keeps_checked_choice(self, make_selector):
        selector = make_selector(params={"image": {"path": "/a.png"}})

        assert selector.validate() is True

        assert selector.params == {"image": {"path": "/a.png"}}

    def test_before_mount(self, make_selector):
        selector = make_selector(params={"image": {"path": "/a.png"}, "bgColor": "ff0000"}, mount=False)

        assert selector.validate() is True

        assert selector.params == {"bgColor": "ff0000"}

    def test_always_valid(self, make_selector):
        selector = make_selector(params={})

        assert selector.validate() is True


class TestReflow:
    def test_color_choice(self, make_selector):
        selector = make_selector(params={"bgColor": "ff0000"})
        color = selector.children[1]

        selector.reflow()
        selector.reflow()

        assert DataJson()[color.widget_id]["reflow"] == 2

    def test_image_choice(self, make_selector):
        selector = make_selector(params={})
        color = selector.children[1]

        selector.reflow()

        assert DataJson()[color.widget_id]["reflow"] == 0


class TestPresentation:
    def test_children(self, make_selector):
        selector = make_selector()

        assert isinstance(selector.children[0], FileUpload)
        assert isinstance(selector.children[1], ColorSelector)
        assert selector.ready() is True
        assert selector.remove() is None

    def test_json(self, make_selector):
        selector = make_selector(params={})
        selector.children[0].set_file({"path": "/img.png"})

        data = DataJson()[selector.widget_id]
        assert data["groupName"] == selector.group_name
        assert data["choices"] == [{"label": "Image", "value": 0}, {"label": "Color", "value": 1}]
        assert data["storedOption"] == {"type": "image", "value": "/img.png"}
        assert data["widget_routes"] == {"choice_changed": "_choice_changed"}
        assert StateJson()[selector.widget_id] == {"selectedIndex": 0}

    def test_group_names_are_unique(self, make_selector):
        first = make_selector()
        second = make_selector()

        assert first.group_name != second.group_name
        assert first.group_name.startswith("formkit-radio-selector-")
        assert second.group_name.startswith("formkit-radio-selector-")

    def test_label_falls_back_to_name(self, make_selector):
        field = {
            "name": "background",
            "fields": [
                {"name": "image", "type": "image"},
                {"name": "bgColor", "type": "color", "label": "Color"},
            ],
        }
        selector = make_selector(field=field)

        assert [item.label for item in selector.get_items()] == ["image", "Color"]

    def test_to_html(self, make_selector):
        selector = make_selector()

        html = str(selector.to_html())

        assert f'name="{selector.group_name}"' in html
        assert "Image" in html
        assert "Color" in html
        assert f"/{selector.widget_id}/choice_changed" in html
        assert f"data.{selector.children[1].widget_id}.hide" in html

    def test_transition_is_published(self, make_selector):
        selector = make_selector()

        with mock.patch.object(WebsocketManager(), "broadcast", new_callable=mock.AsyncMock) as broadcast:
            selector.set_selected_index(1)

        payloads = [call.args[0] for call in broadcast.call_args_list]
        selected = {"op": "replace", "path": f"/{selector.widget_id}/selectedIndex", "value": 1}
        assert {"state": [selected]} in payloads
