"""Hot reload of the markdown config directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger(__name__)


class MarkdownChangeHandler(FileSystemEventHandler):
    """
    Forward ``.md`` changes to ``on_change`` on the event loop.

    watchdog calls back from its own thread; events are handed to ``loop`` and
    debounced there so a burst of writes triggers a single reload.
    """

    def __init__(
        self,
        loop: asyncio.AbstractEventLoop,
        on_change: Callable[[str], None],
        debounce_seconds: float = 0.2,
    ) -> None:
        self._loop = loop
        self._on_change = on_change
        self._debounce_seconds = debounce_seconds
        self._pending: asyncio.TimerHandle | None = None

    def _emit(self, path: str) -> None:
        if not str(path).endswith(".md"):
            return
        self._loop.call_soon_threadsafe(self._schedule, Path(path).name)

    def _schedule(self, filename: str) -> None:
        if self._pending is not None:
            self._pending.cancel()
        self._pending = self._loop.call_later(self._debounce_seconds, self._fire, filename)

    def _fire(self, filename: str) -> None:
        self._pending = None
        self._on_change(filename)

    def on_modified(self, event):
        if event.is_directory:
            return
        self._emit(event.src_path)

    def on_created(self, event):
        if event.is_directory:
            return
        self._emit(event.src_path)

    def on_deleted(self, event):
        if event.is_directory:
            return
        self._emit(event.src_path)

    def on_moved(self, event):
        if event.is_directory:
            return
        self._emit(event.dest_path)


def start_config_watcher(
    loop: asyncio.AbstractEventLoop,
    directory: str | Path,
    on_change: Callable[[str], None],
) -> Observer | None:
    """Watch ``directory`` for markdown changes; ``None`` if it does not exist."""

    path = Path(directory)
    if not path.is_dir():
        logger.warning("Config directory does not exist: %s", path)
        return None

    observer = Observer()
    observer.schedule(MarkdownChangeHandler(loop, on_change), str(path), recursive=False)
    observer.daemon = True
    observer.start()
    logger.info("Watching config directory for changes: %s", path)
    return observer


def stop_config_watcher(observer: Observer | None) -> None:
    if observer is None:
        return
    observer.stop()
    observer.join(timeout=2)


__all__ = ["MarkdownChangeHandler", "start_config_watcher", "stop_config_watcher"]
