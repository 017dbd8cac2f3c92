"""
Watch mode: rebuild the page whenever the content document or template changes.

Rebuilds go through a single-slot queue. A change that arrives while a build
is running marks the scheduler dirty instead of starting a second build; when
the running build finishes, a dirty scheduler builds exactly once more.
"""

import logging
import os
import subprocess
import sys
import threading
import time

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

IDLE = 'idle'
BUILDING = 'building'


class RebuildScheduler:
    """Run ``build_fn`` on demand, never more than one at a time."""

    def __init__(self, build_fn, background=True):
        self.build_fn = build_fn
        self.background = background
        self.state = IDLE
        self.dirty = False
        self.builds_run = 0
        self._lock = threading.Lock()
        self._thread = None
        self.logger = logging.getLogger('Onepager')

    def trigger(self):
        """Request a build. Returns True if a new build run was started."""
        with self._lock:
            if self.state == BUILDING:
                self.dirty = True
                return False
            self.state = BUILDING

        if self.background:
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()
        else:
            self._run()
        return True

    def _run(self):
        while True:
            try:
                self.build_fn()
            except Exception as e:
                self.logger.error(f"Build error: {e}")
            with self._lock:
                self.builds_run += 1
                if not self.dirty:
                    self.state = IDLE
                    return
                self.dirty = False

    def wait(self, timeout=None):
        """Block until the current background run finishes."""
        if self._thread is not None:
            self._thread.join(timeout)


class RebuildHandler(FileSystemEventHandler):
    """Trigger the scheduler when one of the watched files is modified."""

    def __init__(self, watched_files, scheduler):
        super().__init__()
        self.watched_files = {os.path.abspath(str(path)) for path in watched_files}
        self.scheduler = scheduler
        self.logger = logging.getLogger('Onepager')

    def on_modified(self, event):
        if event.is_directory:
            return
        src_path = os.path.abspath(os.fsdecode(event.src_path))
        if src_path in self.watched_files:
            self.logger.info(f"{os.path.basename(src_path)} changed - rebuilding...")
            self.scheduler.trigger()


def subprocess_build(command):
    """Return a build function that runs ``command`` as a child process."""
    logger = logging.getLogger('Onepager')

    def build():
        result = subprocess.run(command, capture_output=True, text=True)
        if result.stdout:
            sys.stdout.write(result.stdout)
        if result.returncode != 0:
            logger.error(f"Build error: {result.stderr.strip() or f'exit status {result.returncode}'}")
        elif result.stderr:
            sys.stderr.write(result.stderr)
        return result.returncode

    return build


def watch(config, build_command):
    """Build once, then rebuild on every change until interrupted."""
    logger = logging.getLogger('Onepager')
    scheduler = RebuildScheduler(subprocess_build(build_command))
    handler = RebuildHandler(config.watched_files, scheduler)

    logger.info("Starting watch mode...")
    for path in config.watched_files:
        logger.info(f"Watching: {path}")

    logger.info("Running initial build...")
    scheduler.trigger()

    observer = Observer()
    for directory in sorted({os.path.dirname(str(path)) for path in config.watched_files}):
        observer.schedule(handler, directory, recursive=False)
    observer.start()
    logger.info("Watch mode active, press Ctrl+C to stop")

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
    observer.join()
