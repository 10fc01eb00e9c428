from typing import Callable, Dict, List, Tuple

from formkit.fk_logger import logger

EventHandler = Callable[[str], None]


class EventDispatcher:
    """Synchronous publish/subscribe helper for widgets.

    Handlers are called in registration order, inside the call stack of
    :meth:`trigger`, and receive the name of the triggered event.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[EventHandler]] = {}
        self._once_wrappers: Dict[Tuple[str, EventHandler], EventHandler] = {}

    def on(self, event: str, handler: EventHandler) -> EventHandler:
        handlers = self._handlers.setdefault(event, [])
        if handler not in handlers:
            handlers.append(handler)
        return handler

    def once(self, event: str, handler: EventHandler) -> EventHandler:
        """Registers ``handler`` for the next ``event`` only.
        It can be removed with :meth:`off` before it fires."""
        if (event, handler) in self._once_wrappers:
            return handler

        def _wrapper(name: str) -> None:
            self._once_wrappers.pop((event, handler), None)
            handlers = self._handlers.get(event, [])
            if _wrapper in handlers:
                handlers.remove(_wrapper)
            handler(name)

        self._once_wrappers[(event, handler)] = _wrapper
        self.on(event, _wrapper)
        return handler

    def off(self, event: str, handler: EventHandler = None) -> None:
        """Removes ``handler`` from ``event``, or every handler of ``event`` when omitted."""
        if handler is None:
            self._handlers.pop(event, None)
            for key in [key for key in self._once_wrappers if key[0] == event]:
                del self._once_wrappers[key]
            return
        handlers = self._handlers.get(event, [])
        wrapper = self._once_wrappers.pop((event, handler), None)
        if wrapper is not None and wrapper in handlers:
            handlers.remove(wrapper)
        if handler in handlers:
            handlers.remove(handler)

    def has_handlers(self, event: str) -> bool:
        return len(self._handlers.get(event, [])) > 0

    def trigger(self, event: str) -> None:
        handlers = list(self._handlers.get(event, []))
        logger.debug(f"Trigger '{event}'", extra={"handlers": len(handlers)})
        for handler in handlers:
            handler(event)
