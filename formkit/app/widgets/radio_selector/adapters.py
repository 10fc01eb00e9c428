"""Inspection of the child fields of a radio selector.

Every child field carries a ``field_variant`` tag. The adapter registered for
that tag knows which :class:`Option` the field contributes, how to follow its
changes and which optional capabilities (clear, reflow, color sync) it has.
Fields with an unknown tag get :class:`FieldAdapter`, which contributes nothing.
"""

from typing import Any, Callable, Dict, List, Optional, Protocol, runtime_checkable

from formkit._utils import get_path
from formkit.app.widgets.color_selector.spectrum_picker import SpectrumPicker
from formkit.app.widgets.field_variant import FieldVariant
from formkit.app.widgets.radio_selector.option_store import Option, OptionType
from formkit.fk_logger import logger

OnValue = Callable[[Option], None]
OnEmpty = Callable[[], None]


@runtime_checkable
class HasValueNotifications(Protocol):
    changes: List[Callable[[Optional[Dict[str, Any]]], Any]]


@runtime_checkable
class HasClearable(Protocol):
    def remove(self) -> None: ...


@runtime_checkable
class HasReflow(Protocol):
    def reflow(self) -> None: ...


@runtime_checkable
class HasColorSync(Protocol):
    color_picker: SpectrumPicker

    def set_color(self, color: Optional[str]) -> None: ...


class FieldAdapter:
    """Adapter of fields that contribute no option."""

    option_type: Optional[OptionType] = None

    def initial_option(self, child) -> Optional[Option]:
        return None

    def subscribe(self, child, on_value: OnValue, on_empty: OnEmpty) -> None:
        pass

    def clear(self, child) -> bool:
        """Clears the value of the field. Returns False if the field can't be cleared."""
        return False

    def reflow(self, child) -> bool:
        return False

    def sync(self, child) -> bool:
        """Persists a value the field holds but has not saved yet."""
        return False


class ImageFieldAdapter(FieldAdapter):
    option_type = OptionType.IMAGE

    def to_option(self, file_info) -> Optional[Option]:
        if not isinstance(file_info, dict) or not file_info.get("path"):
            return None
        return Option(self.option_type, get_path(file_info["path"]))

    def initial_option(self, child) -> Optional[Option]:
        return self.to_option(child.params)

    def subscribe(self, child, on_value: OnValue, on_empty: OnEmpty) -> None:
        if not isinstance(child, HasValueNotifications):
            return

        def _changed(file_info):
            option = self.to_option(file_info)
            if option is not None:
                on_value(option)
            else:
                on_empty()

        child.changes.append(_changed)

    def clear(self, child) -> bool:
        if not isinstance(child, HasClearable):
            return False
        child.remove()
        return True


class ColorFieldAdapter(FieldAdapter):
    option_type = OptionType.COLOR

    def initial_option(self, child) -> Optional[Option]:
        if not isinstance(child.params, str) or len(child.params) == 0:
            return None
        return Option(self.option_type, f"#{child.params}")

    def subscribe(self, child, on_value: OnValue, on_empty: OnEmpty) -> None:
        if not isinstance(child, HasColorSync):
            return

        def _moved(color: Optional[str]):
            if color:
                on_value(Option(self.option_type, color))
            else:
                on_empty()
            # inline pickers don't write the color back to their field
            child.set_color(child.color_picker.get())

        child.color_picker.on("move", _moved)

    def clear(self, child) -> bool:
        if not isinstance(child, HasColorSync):
            return False
        child.color_picker.set(None)
        return True

    def reflow(self, child) -> bool:
        picker = getattr(child, "color_picker", None)
        if not isinstance(picker, HasReflow):
            return False
        picker.reflow()
        return True

    def sync(self, child) -> bool:
        if not isinstance(child, HasColorSync):
            return False
        child.set_color(child.color_picker.get())
        return True


_NULL_ADAPTER = FieldAdapter()

_ADAPTERS: Dict[str, FieldAdapter] = {
    FieldVariant.IMAGE.value: ImageFieldAdapter(),
    FieldVariant.COLOR.value: ColorFieldAdapter(),
}


def register_adapter(variant: str, adapter: FieldAdapter) -> None:
    """Registers ``adapter`` for child fields whose ``field_variant`` is ``variant``.
    A previously registered adapter of the same variant is replaced."""
    variant = str(variant)
    if variant in _ADAPTERS:
        logger.debug(f"Adapter of field variant '{variant}' is replaced")
    _ADAPTERS[variant] = adapter


def get_adapter(child) -> FieldAdapter:
    variant = getattr(child, "field_variant", None)
    if variant is None:
        return _NULL_ADAPTER
    return _ADAPTERS.get(str(variant), _NULL_ADAPTER)
