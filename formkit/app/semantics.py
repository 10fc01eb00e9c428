"""Turns a list of field schema entries into live form field widgets.

A schema entry is a dictionary like ``{"name": "image", "type": "image",
"label": "Background image"}``. The ``type`` selects the widget class from the
registry below; every created widget gets the current value of its field from
``params`` and a ``set_value`` callback that writes changes back into
``params``.
"""

from typing import Any, Dict, List, Type

from formkit.app.exceptions import SemanticsError
from formkit.app.widgets.color_selector.color_selector import ColorSelector
from formkit.app.widgets.container.container import Container
from formkit.app.widgets.file_upload.file_upload import FileUpload
from formkit.app.widgets.input.input import Input
from formkit.app.widgets.semantic_field import SemanticField
from formkit.fk_logger import logger

_FIELD_WIDGETS: Dict[str, Type[SemanticField]] = {
    "image": FileUpload,
    "file": FileUpload,
    "color": ColorSelector,
    "text": Input,
}


def register_field_widget(field_type: str, widget_cls: Type[SemanticField]) -> None:
    """Makes fields of type ``field_type`` render with ``widget_cls``.

    :param field_type: value of the ``type`` key of a schema entry
    :type field_type: str
    :param widget_cls: widget class taking ``(parent, field, params, set_value)``
    :type widget_cls: Type[SemanticField]
    """
    _FIELD_WIDGETS[field_type] = widget_cls


def get_field_widget(field_type: str) -> Type[SemanticField]:
    widget_cls = _FIELD_WIDGETS.get(field_type)
    if widget_cls is None:
        raise SemanticsError(
            "Unknown field type",
            f"{field_type!r}, possible types: {sorted(_FIELD_WIDGETS.keys())}",
        )
    return widget_cls


def _params_setter(params: Dict[str, Any]):
    def set_value(field: Dict, value: Any) -> None:
        name = field.get("name")
        if name is None:
            return
        if value is None:
            params.pop(name, None)
        else:
            params[name] = value

    return set_value


def process_semantics_chunk(
    fields: List[Dict], params: Dict[str, Any], wrapper: Container, parent
) -> List[SemanticField]:
    """Creates one widget per schema entry, in schema order.

    Widgets are appended to ``parent.children`` and to ``wrapper``.

    :param fields: field schema entries
    :type fields: List[Dict]
    :param params: values keyed by field name, updated in place on changes
    :type params: Dict[str, Any]
    :param wrapper: container that renders the created widgets
    :type wrapper: Container
    :param parent: owner of the created widgets, must have a ``children`` list
    :return: created widgets
    :rtype: List[SemanticField]
    """
    set_value = _params_setter(params)
    created = []
    for field in fields:
        if "type" not in field:
            raise SemanticsError("Field has no type", f"{field}")
        widget_cls = get_field_widget(field["type"])
        value = params.get(field["name"]) if field.get("name") else None
        child = widget_cls(parent, field, value, set_value)
        logger.debug(
            "Field widget created",
            extra={"field_type": field["type"], "widget_id": child.widget_id},
        )
        parent.children.append(child)
        wrapper.add_widget(child)
        created.append(child)
    return created
