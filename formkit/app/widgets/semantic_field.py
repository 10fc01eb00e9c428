from typing import Any, Callable, Dict, Optional

from formkit.app.widgets.field_variant import FieldVariant
from formkit.app.widgets.widget import Widget

SetValue = Callable[[Dict, Any], None]


class SemanticField(Widget):
    """Base class of the widgets created from a field schema entry.

    The field keeps the raw serialized value in :attr:`params` and reports every
    change to the host form through ``set_value(field, value)``.
    """

    field_variant = FieldVariant.OTHER

    def __init__(
        self,
        parent,
        field: Dict,
        params: Any,
        set_value: SetValue,
        widget_id: Optional[str] = None,
        file_path: str = __file__,
    ):
        self.parent = parent
        self.field = field
        self.params = params
        self._set_value = set_value
        super().__init__(widget_id=widget_id, file_path=file_path)

    @property
    def name(self) -> Optional[str]:
        return self.field.get("name")

    @property
    def label(self) -> str:
        label = self.field.get("label")
        if label is None:
            label = self.name or ""
        return label

    def _set_params(self, value: Any) -> None:
        self.params = value
        self._set_value(self.field, value)
