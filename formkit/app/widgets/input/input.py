from typing import Dict, Literal, Optional

from formkit.app.content import DataJson, StateJson
from formkit.app.widgets.semantic_field import SemanticField, SetValue


class Input(SemanticField):
    """Plain text form field. It contributes no option to a radio selector."""

    class Routes:
        VALUE_CHANGED = "value_changed"

    def __init__(
        self,
        parent,
        field: Dict,
        params: Optional[str],
        set_value: SetValue,
        placeholder: str = "",
        size: Literal["mini", "small", "large"] = None,
        widget_id: Optional[str] = None,
    ):
        if params is not None and not isinstance(params, str):
            params = str(params)
        self._maxlength = field.get("maxLength", 1000)
        self._placeholder = placeholder
        self._size = size
        super().__init__(parent, field, params, set_value, widget_id=widget_id, file_path=__file__)

        server = self._app.get_server()
        self.add_route(server, Input.Routes.VALUE_CHANGED)(self._value_changed)

    def get_json_data(self):
        return {
            "label": self.label,
            "maxlength": self._maxlength,
            "placeholder": self._placeholder,
            "size": self._size,
        }

    def get_json_state(self):
        return {"value": self.params or ""}

    def set_value(self, value: Optional[str]):
        if value == "":
            value = None
        self._set_params(value)
        StateJson()[self.widget_id]["value"] = value or ""
        StateJson().send_changes()

    def get_value(self) -> str:
        return StateJson()[self.widget_id]["value"]

    def set_placeholder(self, value: str):
        self._placeholder = value
        DataJson()[self.widget_id]["placeholder"] = value
        DataJson().send_changes()

    def _value_changed(self):
        self.set_value(self.get_value())
