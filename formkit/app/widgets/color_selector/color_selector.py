from typing import Dict, Optional, Union

from formkit.app.content import DataJson, StateJson
from formkit.app.widgets.color_selector.spectrum_picker import (
    Color,
    SpectrumPicker,
    to_hex_string,
)
from formkit.app.widgets.field_variant import FieldVariant
from formkit.app.widgets.semantic_field import SemanticField, SetValue
from formkit.fk_logger import logger


class ColorSelector(SemanticField):
    """ColorSelector is a form field holding one hex color.

    The serialized value is the hex string without ``#`` (e.g. ``"ff0000"``).
    The inline picker is available as :attr:`color_picker`; its changes are
    persisted only through :meth:`set_color`.

    :param parent: widget that owns the field
    :param field: field schema entry
    :type field: Dict
    :param params: initial value
    :type params: Optional[str]
    :param set_value: callback persisting the value in the host params
    :type set_value: Callable[[Dict, Any], None]
    :param widget_id: An identifier of the widget.
    :type widget_id: str, optional

    :Usage example:
    .. code-block:: python

        from formkit.app.widgets import ColorSelector

        color = ColorSelector(None, {"name": "bgColor", "type": "color"}, "ff0000", set_value)
        color.color_picker.on("move", lambda value: print(value))
    """

    field_variant = FieldVariant.COLOR

    class Routes:
        COLOR_MOVED = "color_moved"

    def __init__(
        self,
        parent,
        field: Dict,
        params: Optional[str],
        set_value: SetValue,
        widget_id: Optional[str] = None,
    ):
        try:
            color = to_hex_string(params) if isinstance(params, str) else None
        except ValueError:
            logger.warning("Malformed color is ignored", extra={"color": params})
            color = None
        params = color[1:] if color is not None else None
        self._reflow_counter = 0
        self.color_picker = SpectrumPicker(params, on_reflow=self._reflow)
        super().__init__(parent, field, params, set_value, widget_id=widget_id, file_path=__file__)

        server = self._app.get_server()
        self.add_route(server, ColorSelector.Routes.COLOR_MOVED)(self._color_moved)

    def get_json_data(self) -> Dict[str, Union[str, int]]:
        return {"label": self.label, "reflow": self._reflow_counter}

    def get_json_state(self) -> Dict[str, Optional[str]]:
        return {"color": self.color_picker.get()}

    def get_color(self) -> Optional[str]:
        """Returns persisted color as ``#rrggbb``, ``None`` if empty."""
        if self.params is None:
            return None
        return f"#{self.params}"

    def set_color(self, color: Color) -> None:
        """Persists the color in params, ``None`` removes it.

        :param color: hex string or [r, g, b]
        :type color: Union[str, List[int], None]
        """
        self.color_picker.set(color)
        value = self.color_picker.get()
        if value is not None:
            value = value[1:]
        self._set_params(value)
        StateJson()[self.widget_id]["color"] = self.color_picker.get()
        StateJson().send_changes()

    def _reflow(self):
        self._reflow_counter += 1
        DataJson()[self.widget_id]["reflow"] = self._reflow_counter
        DataJson().send_changes()

    def _color_moved(self):
        color = StateJson()[self.widget_id].get("color")
        logger.debug("Color moved", extra={"widget_id": self.widget_id, "color": color})
        try:
            to_hex_string(color)
        except ValueError:
            logger.warning("Malformed color is ignored", extra={"color": color})
            color = None
        self.color_picker.move(color)
