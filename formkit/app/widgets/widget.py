from __future__ import annotations

import re
from pathlib import Path
from typing import List

import markupsafe
from bs4 import BeautifulSoup
from jinja2 import Environment
from varname import varname

from formkit._utils import generate_id
from formkit.app.content import DataJson, StateJson
from formkit.app.fastapi import _MainServer
from formkit.app.jinja2 import create_env
from formkit.app.widgets_context import JinjaWidgets


class Hidable:
    def __init__(self):
        self._hide = False

    def is_hidden(self):
        return self._hide

    def hide(self):
        self._hide = True
        DataJson()[self.widget_id]["hide"] = self._hide
        DataJson().send_changes()

    def show(self):
        self._hide = False
        DataJson()[self.widget_id]["hide"] = self._hide
        DataJson().send_changes()

    def get_json_data(self):
        return {"hide": self._hide}

    def _wrap_hide_html(self, widget_id, html):
        return f'<div v-if="!data.{widget_id}.hide">{html}</div>'


class Disableable:
    def __init__(self):
        self._disabled = False

    def is_disabled(self):
        return self._disabled

    def disable(self):
        self._disabled = True
        DataJson()[self.widget_id]["disabled"] = self._disabled
        DataJson().send_changes()

    def enable(self):
        self._disabled = False
        DataJson()[self.widget_id]["disabled"] = self._disabled
        DataJson().send_changes()

    def get_json_data(self):
        return {"disabled": self._disabled}

    def _wrap_disable_html(self, widget_id, html):
        soup = BeautifulSoup(html, features="html.parser")
        results = soup.find_all(re.compile("^el-"))
        for tag in results:
            if not tag.has_attr("disabled") and not tag.has_attr(":disabled"):
                tag[":disabled"] = f"data.{widget_id}.disabled"
        return str(soup)


class Widget(Hidable, Disableable):
    def __init__(self, widget_id: str = None, file_path: str = __file__):
        Hidable.__init__(self)
        Disableable.__init__(self)
        self._app = _MainServer()
        self.widget_id = self.__init_widget_id(widget_id)
        self._file_path = file_path

        self._register()

    def __init_widget_id(self, widget_id: str = None) -> str:
        if widget_id is not None:
            return widget_id
        if JinjaWidgets().auto_widget_id is True:
            return generate_id(type(self).__name__)
        try:
            return varname(frame=3)
        except Exception:  # Caller doesn't assign the result directly to variable(s).
            try:
                return varname(frame=4)
            except Exception:
                return generate_id(type(self).__name__)

    def _register(self):
        # get singletons
        data = DataJson()
        data.raise_for_key(self.widget_id)
        self.update_data()

        state = StateJson()
        state.raise_for_key(self.widget_id)
        self.update_state(state=state)

        JinjaWidgets().context[self.widget_id] = self

    def get_json_data(self):
        raise NotImplementedError()

    def get_json_state(self):
        raise NotImplementedError()

    def update_state(self, state=None):
        serialized_state = self.get_json_state()
        if serialized_state is not None:
            if state is None:
                state = StateJson()
            state.setdefault(self.widget_id, {}).update(serialized_state)

    def update_data(self):
        data = DataJson()

        widget_data = self.get_json_data()
        if widget_data is None:
            widget_data = {}
        hidable_data = Hidable.get_json_data(self)
        disableable_data = Disableable.get_json_data(self)

        serialized_data = {**widget_data, **hidable_data, **disableable_data}
        data.setdefault(self.widget_id, {}).update(serialized_data)

    def get_route_path(self, route: str) -> str:
        return f"/{self.widget_id}/{route}"

    def add_route(self, app, route):
        def decorator(f):
            existing_cb = DataJson()[self.widget_id].get("widget_routes", {}).get(route)
            if existing_cb is not None:
                raise ValueError(
                    f"Route [{route}] already attached to function with name: {existing_cb}"
                )

            app.add_api_route(self.get_route_path(route), f, methods=["POST"])
            DataJson()[self.widget_id].setdefault("widget_routes", {})[route] = f.__name__
            return f

        return decorator

    def to_html(self):
        current_dir = Path(self._file_path).parent.absolute()
        jinja2_env: Environment = create_env(current_dir)
        html = jinja2_env.get_template("template.html").render({"widget": self})
        res = self._wrap_disable_html(self.widget_id, html)
        res = self._wrap_hide_html(self.widget_id, res)
        return markupsafe.Markup(res)

    def __html__(self):
        res = self.to_html()
        return res


class ConditionalWidget(Widget):
    def __init__(self, items: List[ConditionalItem], widget_id: str = None, file_path: str = __file__):
        self._items = items
        super().__init__(widget_id=widget_id, file_path=file_path)

    def get_items(self) -> List[ConditionalItem]:
        res = []
        if self._items is not None:
            res.extend(self._items)
        return res


class ConditionalItem:
    def __init__(self, value, label: str = None, content: Widget = None) -> ConditionalItem:
        self.value = value
        self.label = label
        if label is None:
            self.label = str(self.value)
        self.content = content

    def to_json(self):
        return {"label": self.label, "value": self.value}
