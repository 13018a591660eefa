from typing import Callable, Protocol

Dispatcher = Callable[[Callable[[], None]], None]


def run_inline(fn: Callable[[], None]) -> None:
    """Default dispatcher: run the completion on the worker thread."""
    fn()


class LoadingIndicator(Protocol):
    """Hook shown around requests issued with ``show_loading=True``."""

    def show(self) -> None: ...

    def hide(self) -> None: ...


class NullLoadingIndicator:
    def show(self) -> None:
        pass

    def hide(self) -> None:
        pass
