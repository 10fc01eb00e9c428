from typing import Dict, List, Optional, Sequence

from formkit.app.widgets.event_dispatcher import EventDispatcher
from formkit.app.widgets.radio_selector.adapters import get_adapter
from formkit.app.widgets.radio_selector.option_store import Option, OptionStore
from formkit.fk_logger import logger

OPTION_ADDED = "option_added"
OPTION_REMOVED = "option_removed"


def initial_index(fields: Sequence[Dict], params: Dict) -> int:
    """Returns index of the field to select first: the last named field with a
    value in ``params``, 0 when there is none."""
    index = 0
    for idx, field in enumerate(fields):
        name = field.get("name")
        if name and params.get(name):
            index = idx
    return index


class SelectionController:
    """Keeps track of the selected choice of a radio selector and of the
    options its child fields hold.

    Every transition triggers ``option_removed`` (if the selected choice had
    a value) strictly before ``option_added`` (if it has one now) on
    ``events``. Changes of choices other than the selected one only update
    the store.
    """

    def __init__(self, events: EventDispatcher, size: int, current_index: int = 0):
        if not 0 <= current_index < size:
            raise ValueError(f"Selected index {current_index} is out of {size} choices")
        self._events = events
        self._size = size
        self._store = OptionStore(current_index)
        self.children: List = []

    @property
    def store(self) -> OptionStore:
        return self._store

    def attach(self, children: List) -> None:
        if len(children) != self._size:
            raise ValueError(f"Expected {self._size} child fields, got {len(children)}")
        self.children = children

    def seed(self) -> None:
        for idx, child in enumerate(self.children):
            option = get_adapter(child).initial_option(child)
            if option is not None:
                self._store.set(idx, option)

    def subscribe(self) -> None:
        for idx, child in enumerate(self.children):
            get_adapter(child).subscribe(
                child,
                on_value=lambda option, idx=idx: self.add_option(idx, option),
                on_empty=lambda idx=idx: self.remove_option(idx),
            )

    def add_option(self, index: int, option: Option) -> None:
        self._store.set(index, option)
        logger.debug("Option stored", extra={"index": index, "option": option.to_json()})
        if index == self._store.current_index:
            self._events.trigger(OPTION_ADDED)

    def remove_option(self, index: Optional[int] = None) -> None:
        if index is None:
            index = self._store.current_index
        existed = self._store.discard(index)
        if existed:
            logger.debug("Option discarded", extra={"index": index})
        if existed and index == self._store.current_index:
            self._events.trigger(OPTION_REMOVED)

    def select(self, index: int) -> bool:
        if index == self._store.current_index:
            return False
        if not 0 <= index < self._size:
            raise ValueError(f"Choice index {index} is out of {self._size} choices")

        if self._store.current is not None:
            self._events.trigger(OPTION_REMOVED)
        logger.debug(
            "Choice selected", extra={"previous": self._store.current_index, "index": index}
        )
        self._store.current_index = index
        if self._store.current is not None:
            self._events.trigger(OPTION_ADDED)
        return True

    def get_selected_index(self) -> int:
        return self._store.current_index

    def get_stored_option(self) -> Optional[Option]:
        return self._store.current

    def get_selected_child(self):
        if len(self.children) == 0:
            return None
        return self.children[self._store.current_index]

    def reset_checked_option(self) -> bool:
        child = self.get_selected_child()
        if child is None or not get_adapter(child).clear(child):
            return False
        self.remove_option()
        return True

    def reflow(self) -> bool:
        child = self.get_selected_child()
        if child is None:
            return False
        return get_adapter(child).reflow(child)

    def validate(self, params: Dict, fields: Sequence[Dict]) -> bool:
        """Removes the values of not selected choices from ``params`` and
        persists the value of the selected one. Always succeeds."""
        for idx, field in enumerate(fields):
            if idx != self._store.current_index:
                name = field.get("name")
                if name is not None and name in params:
                    logger.debug("Unused param is pruned", extra={"param": name})
                    del params[name]
            elif idx < len(self.children):
                child = self.children[idx]
                get_adapter(child).sync(child)
        return True
