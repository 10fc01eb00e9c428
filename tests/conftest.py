import pytest

from formkit.app.content import DataJson, StateJson
from formkit.app.widgets.container.container import Container
from formkit.app.widgets.radio_selector.radio_selector import RadioSelector
from formkit.app.widgets_context import JinjaWidgets


BACKGROUND_FIELD = {
    "name": "background",
    "type": "group",
    "fields": [
        {"name": "image", "type": "image", "label": "Image"},
        {"name": "bgColor", "type": "color", "label": "Color"},
    ],
}


class Host:
    """Minimal host form: keeps params and records every set_value call."""

    def __init__(self):
        self.params = {}
        self.calls = []

    def set_value(self, field, value):
        self.calls.append((field.get("name"), value))
        self.params[field["name"]] = value


@pytest.fixture(autouse=True)
def clean_app_state(monkeypatch):
    for name in ["CONTENT_ID", "FORMKIT_CONTENT_ID", "FILES_URL", "FORMKIT_FILES_URL"]:
        monkeypatch.delenv(name, raising=False)
    StateJson().reset()
    DataJson().reset()
    context = JinjaWidgets().context
    context.clear()
    context["__no_html_mode__"] = JinjaWidgets().auto_widget_id
    yield
    StateJson().reset()
    DataJson().reset()


@pytest.fixture()
def host():
    return Host()


@pytest.fixture()
def events():
    """Names of triggered selector events in trigger order."""
    return []


@pytest.fixture()
def make_selector(host, events):
    def _make(field=None, params=None, mount=True):
        field = field if field is not None else BACKGROUND_FIELD
        form = Container()
        selector = RadioSelector(form, field, params, host.set_value)
        selector.on(RadioSelector.Events.OPTION_ADDED, events.append)
        selector.on(RadioSelector.Events.OPTION_REMOVED, events.append)
        if mount:
            selector.append_to(form)
        return selector

    return _make
