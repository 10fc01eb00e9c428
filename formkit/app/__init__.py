from formkit.app.content import StateJson, DataJson
import formkit.app.fastapi as fastapi
import formkit.app.widgets as widgets
from formkit.app.semantics import process_semantics_chunk, register_field_widget
from formkit.app.exceptions import SemanticsError
