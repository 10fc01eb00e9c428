from typing import List, Literal, Optional

from formkit.app.content import DataJson
from formkit.app.widgets.widget import Widget


class Container(Widget):
    """Container widget organizes other widgets within it.

    :param widgets: list of widgets to be placed in the container
    :type widgets: Optional[List[Widget]]
    :param direction: direction of the container, one of: vertical, horizontal
    :type direction: Optional[Literal["vertical", "horizontal"]]
    :param gap: gap between widgets in pixels
    :type gap: Optional[int]
    :param style: CSS style for the container
    :type style: Optional[str]
    :param widget_id: An identifier of the widget.
    :type widget_id: str, optional

    :Usage example:
    .. code-block:: python

        from formkit.app.widgets import Container, RadioSelector

        form = Container()
        selector = RadioSelector(form, field, params, set_value)
        selector.append_to(form)
    """

    def __init__(
        self,
        widgets: Optional[List[Widget]] = None,
        direction: Optional[Literal["vertical", "horizontal"]] = "vertical",
        gap: Optional[int] = 10,
        style: Optional[str] = "",
        widget_id: Optional[str] = None,
    ):
        if direction not in ["vertical", "horizontal"]:
            raise ValueError("direction can be only 'vertical' or 'horizontal'")
        self._widgets = list(widgets) if widgets is not None else []
        self._direction = direction
        self._gap = gap
        self._style = style
        super().__init__(widget_id=widget_id, file_path=__file__)

    def get_json_data(self):
        return {"widgets": [widget.widget_id for widget in self._widgets]}

    def get_json_state(self):
        return None

    @property
    def widgets(self) -> List[Widget]:
        return list(self._widgets)

    def add_widget(self, widget: Widget) -> None:
        self._widgets.append(widget)
        DataJson()[self.widget_id]["widgets"] = [w.widget_id for w in self._widgets]
        DataJson().send_changes()
