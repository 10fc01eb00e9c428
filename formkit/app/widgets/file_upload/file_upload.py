from typing import Any, Callable, Dict, List, Optional

from formkit._utils import get_path
from formkit.app.content import DataJson, StateJson
from formkit.app.widgets.field_variant import FieldVariant
from formkit.app.widgets.semantic_field import SemanticField, SetValue
from formkit.fk_logger import logger
from formkit.io import env as fk_env

FileInfo = Dict[str, Any]


class FileUpload(SemanticField):
    """FileUpload keeps one uploaded file (usually an image) of a form field.

    The serialized value is a dictionary with at least a ``path`` key, e.g.
    ``{"path": "images/bg.png", "mime": "image/png", "width": 640, "height": 480}``.
    Every change is reported to the callbacks of :attr:`changes` with the new
    value, or with ``None`` once the file is removed.

    :param parent: widget that owns the field
    :param field: field schema entry
    :type field: Dict
    :param params: initial value
    :type params: Optional[Dict]
    :param set_value: callback persisting the value in the host params
    :type set_value: Callable[[Dict, Any], None]
    :param widget_id: An identifier of the widget.
    :type widget_id: str, optional

    :Usage example:
    .. code-block:: python

        from formkit.app.widgets import FileUpload

        upload = FileUpload(None, {"name": "image", "type": "image"}, None, set_value)
        upload.changes.append(lambda file: print(file))
        upload.set_file({"path": "images/bg.png"})
    """

    field_variant = FieldVariant.IMAGE

    class Routes:
        UPLOADED = "uploaded"
        REMOVED = "removed"

    def __init__(
        self,
        parent,
        field: Dict,
        params: Optional[FileInfo],
        set_value: SetValue,
        widget_id: Optional[str] = None,
    ):
        self.changes: List[Callable[[Optional[FileInfo]], Any]] = []
        super().__init__(parent, field, params, set_value, widget_id=widget_id, file_path=__file__)

        server = self._app.get_server()
        self.add_route(server, FileUpload.Routes.UPLOADED)(self._uploaded)
        self.add_route(server, FileUpload.Routes.REMOVED)(self._removed)

    def get_json_data(self) -> Dict:
        return {
            "label": self.label,
            "url": self.get_url(),
            "uploadUrl": f"{fk_env.files_url()}/upload",
        }

    def get_json_state(self) -> Dict:
        return {"file": self.params}

    def get_url(self) -> Optional[str]:
        if not isinstance(self.params, dict) or not self.params.get("path"):
            return None
        return get_path(self.params["path"])

    def set_file(self, file_info: FileInfo) -> None:
        """Stores an uploaded file and notifies :attr:`changes`.

        :param file_info: uploaded file description, has to contain ``path``
        :type file_info: Dict[str, Any]
        """
        if not isinstance(file_info, dict) or not file_info.get("path"):
            raise ValueError(f"Uploaded file has no path: {file_info}")
        self._set_params(dict(file_info))
        self._update()
        self._notify()

    def remove(self) -> None:
        """Removes the file, same as pressing the remove control of the field."""
        self._set_params(None)
        self._update()
        self._notify()

    def _notify(self):
        for callback in list(self.changes):
            callback(self.params)

    def _update(self):
        DataJson()[self.widget_id]["url"] = self.get_url()
        StateJson()[self.widget_id]["file"] = self.params
        DataJson().send_changes()
        StateJson().send_changes()

    def _uploaded(self):
        file_info = StateJson()[self.widget_id].get("file")
        logger.debug("File uploaded", extra={"widget_id": self.widget_id, "file": file_info})
        if isinstance(file_info, dict) and file_info.get("path"):
            self.set_file(file_info)
        else:
            self.remove()

    def _removed(self):
        logger.debug("File removed", extra={"widget_id": self.widget_id})
        self.remove()
