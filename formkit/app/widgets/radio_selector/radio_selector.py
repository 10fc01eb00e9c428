from __future__ import annotations

import traceback
from typing import Any, Callable, Dict, List, Optional

from formkit._utils import GroupKeyFactory
from formkit.app.content import DataJson, StateJson
from formkit.app.semantics import process_semantics_chunk
from formkit.app.widgets.container.container import Container
from formkit.app.widgets.event_dispatcher import EventDispatcher, EventHandler
from formkit.app.widgets.radio_selector.controller import (
    OPTION_ADDED,
    OPTION_REMOVED,
    SelectionController,
    initial_index,
)
from formkit.app.widgets.radio_selector.option_store import Option
from formkit.app.widgets.widget import ConditionalItem, ConditionalWidget
from formkit.fk_logger import logger

_group_keys = GroupKeyFactory("formkit-radio-selector")


class RadioSelector(ConditionalWidget):
    """RadioSelector lets the author fill exactly one of several mutually
    exclusive fields (e.g. a background image or a background color).

    One radio choice is rendered per field of ``field["fields"]``, labelled with
    the label of the field; only the field of the checked choice is shown.
    The host is told about the value of the checked choice through the
    ``option_added`` and ``option_removed`` events and reads it back with
    :meth:`get_stored_option`. Before saving, :meth:`validate` removes the
    values of not checked fields from ``params``.

    :param parent: host form
    :param field: schema entry of the selector, ``fields`` lists the choices
    :type field: Dict
    :param params: values keyed by field name, owned by the host
    :type params: Optional[Dict]
    :param set_value: callback persisting ``params`` in the host
    :type set_value: Callable[[Dict, Any], None]
    :param widget_id: An identifier of the widget.
    :type widget_id: str, optional

    :Usage example:
    .. code-block:: python

        from formkit.app.widgets import Container, RadioSelector

        field = {
            "name": "background",
            "fields": [
                {"name": "image", "type": "image", "label": "Image"},
                {"name": "bgColor", "type": "color", "label": "Color"},
            ],
        }
        form = Container()
        selector = RadioSelector(form, field, params, set_value)
        selector.append_to(form)

        @selector.option_added
        def show_background(event):
            print(selector.get_stored_option())
    """

    class Routes:
        CHOICE_CHANGED = "choice_changed"

    class Events:
        OPTION_ADDED = OPTION_ADDED
        OPTION_REMOVED = OPTION_REMOVED

    def __init__(
        self,
        parent,
        field: Dict,
        params: Optional[Dict[str, Any]],
        set_value: Callable[[Dict, Any], None],
        widget_id: Optional[str] = None,
    ):
        fields = field.get("fields")
        if not fields:
            raise ValueError(f"Radio selector field has no choices: {field}")

        if params is None:
            params = {}
        self.parent = parent
        self.field = field
        self.params = params
        self.pass_readies = True
        self.children: List = []

        self._group_name = _group_keys.next_key()
        self._events = EventDispatcher()
        self._controller = SelectionController(
            self._events, size=len(fields), current_index=initial_index(fields, params)
        )
        self._values: Optional[Container] = None
        self._mounted = False
        self._changing_choice = False
        self._events.on(OPTION_ADDED, self._option_changed)
        self._events.on(OPTION_REMOVED, self._option_changed)

        # make sure params are saved in the host even if nothing is changed
        set_value(field, params)

        super().__init__(items=[], widget_id=widget_id, file_path=__file__)

    def get_json_data(self) -> Dict:
        stored = self._controller.get_stored_option()
        return {
            "groupName": self._group_name,
            "choices": [item.to_json() for item in self.get_items()],
            "valuesId": self._values.widget_id if self._values is not None else None,
            "storedOption": stored.to_json() if stored is not None else None,
        }

    def get_json_state(self) -> Dict:
        return {"selectedIndex": self._controller.get_selected_index()}

    @property
    def group_name(self) -> str:
        return self._group_name

    def append_to(self, container: Container) -> None:
        """Creates the fields and the choices and mounts the widget into ``container``."""
        if self._mounted:
            raise RuntimeError(f"Radio selector {self.widget_id} is already mounted")

        self._create_radio_content()
        self._create_radio_buttons()
        self._controller.subscribe()
        self._controller.seed()

        server = self._app.get_server()
        self.add_route(server, RadioSelector.Routes.CHOICE_CHANGED)(self._choice_changed)

        self._mounted = True
        self._sync()
        container.add_widget(self)
        logger.info(
            "Radio selector is mounted",
            extra={"widget_id": self.widget_id, "choices": len(self.children)},
        )

    def _create_radio_content(self):
        self._values = Container()
        process_semantics_chunk(self.field["fields"], self.params, self._values, self)
        self._controller.attach(self.children)

    def _create_radio_buttons(self):
        self._items = [
            ConditionalItem(value=idx, label=child.label, content=child)
            for idx, child in enumerate(self.children)
        ]
        self.show_content(self._controller.get_selected_index())

    def show_content(self, index: int) -> None:
        """Shows the field of the choice ``index`` and hides the others."""
        for idx, child in enumerate(self.children):
            if idx == index:
                child.show()
            else:
                child.hide()

    def get_checked_index(self) -> int:
        return StateJson()[self.widget_id]["selectedIndex"]

    def set_selected_index(self, index: int) -> None:
        """Checks the choice ``index``, as if the author had clicked it.
        Does nothing if the choice is already checked.

        :param index: index of the choice
        :type index: int
        """
        if index == self._controller.get_selected_index():
            return
        if not 0 <= index < len(self.field["fields"]):
            raise ValueError(f"Choice index {index} is out of {len(self.field['fields'])} choices")
        StateJson()[self.widget_id]["selectedIndex"] = index
        self._change_choice(index)

    def _change_choice(self, index: int):
        self._changing_choice = True
        try:
            self._controller.select(index)
        finally:
            # a failing handler must not leave the shown field behind the index
            self._changing_choice = False
            self.show_content(self._controller.get_selected_index())
            self._sync()

    def _option_changed(self, event: str):
        if self._mounted and not self._changing_choice:
            self._sync()

    def _choice_changed(self):
        index = self.get_checked_index()
        try:
            self._change_choice(index)
        except Exception as e:
            logger.error(traceback.format_exc(), exc_info=True, extra={"exc_str": str(e)})
            raise e

    def get_selected_index(self) -> int:
        return self._controller.get_selected_index()

    def get_stored_option(self) -> Optional[Option]:
        return self._controller.get_stored_option()

    def reset_checked_option(self) -> None:
        """Clears the value of the checked field, if the field supports it."""
        self._controller.reset_checked_option()

    def reflow(self) -> None:
        self._controller.reflow()

    def validate(self) -> bool:
        """Removes the values of the not checked fields from params.

        :return: always True
        :rtype: bool
        """
        return self._controller.validate(self.params, self.field["fields"])

    def ready(self) -> bool:
        return True

    def remove(self) -> None:
        pass

    def on(self, event: str, handler: EventHandler) -> EventHandler:
        return self._events.on(event, handler)

    def once(self, event: str, handler: EventHandler) -> EventHandler:
        return self._events.once(event, handler)

    def off(self, event: str, handler: EventHandler = None) -> None:
        self._events.off(event, handler)

    def option_added(self, func: EventHandler) -> EventHandler:
        """Decorator for function that will be called when the checked choice gets a value.

        :param func: function that will be called with the event name
        :type func: Callable[[str], None]
        :return: decorated function
        :rtype: Callable[[str], None]
        """
        return self.on(RadioSelector.Events.OPTION_ADDED, func)

    def option_removed(self, func: EventHandler) -> EventHandler:
        """Decorator for function that will be called when the checked choice loses its value.

        :param func: function that will be called with the event name
        :type func: Callable[[str], None]
        :return: decorated function
        :rtype: Callable[[str], None]
        """
        return self.on(RadioSelector.Events.OPTION_REMOVED, func)

    def _sync(self):
        self.update_data()
        StateJson()[self.widget_id]["selectedIndex"] = self._controller.get_selected_index()
        DataJson().send_changes()
        StateJson().send_changes()
