from formkit.app.widgets.widget import ConditionalWidget, ConditionalItem
from formkit.app.widgets.widget import Widget
from formkit.app.widgets.event_dispatcher import EventDispatcher
from formkit.app.widgets.field_variant import FieldVariant
from formkit.app.widgets.semantic_field import SemanticField
from formkit.app.widgets.container.container import Container
from formkit.app.widgets.input.input import Input
from formkit.app.widgets.file_upload.file_upload import FileUpload
from formkit.app.widgets.color_selector.spectrum_picker import SpectrumPicker
from formkit.app.widgets.color_selector.color_selector import ColorSelector
from formkit.app.widgets.radio_selector.option_store import Option, OptionStore, OptionType
from formkit.app.widgets.radio_selector.adapters import (
    FieldAdapter,
    get_adapter,
    register_adapter,
)
from formkit.app.widgets.radio_selector.controller import SelectionController
from formkit.app.widgets.radio_selector.radio_selector import RadioSelector
