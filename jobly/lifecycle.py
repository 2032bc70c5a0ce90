"""
Startup and shutdown of the process-wide database handle.

Startup loads (or creates) the database, ensures the schema and seeds a fresh
file before the first request. Shutdown writes one checkpoint and closes the
handle; it runs from ``atexit`` and is idempotent.

Only the process that serves requests opens the database. Under the debug
reloader the watching parent process never does, otherwise its stale copy
would be checkpointed over the serving process's one at exit.
"""
import atexit
import logging
import os
import signal
import sys
import threading

import click
from flask import current_app
from flask.cli import with_appcontext

from jobly.database import DatabaseHandle, initialize

logger = logging.getLogger(__name__)

EXTENSION_KEY = "jobly"


def is_reloader_parent(app):
    """True in the debug-mode process that has not been started by the reloader."""
    return app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true"


class Lifecycle:
    def __init__(self, app=None):
        self.handle = None
        self.path = None
        self.seeded = False
        self._startup_lock = threading.Lock()
        self._shutdown_lock = threading.Lock()
        self._install_signal_handlers = False
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.path = app.config["DB_FILE"]
        self._install_signal_handlers = bool(app.config.get("INSTALL_SIGNAL_HANDLERS"))

        app.extensions[EXTENSION_KEY] = self
        app.cli.add_command(init_db_command)
        app.cli.add_command(export_db_command)

        if is_reloader_parent(app):
            # the serving child, or the first use of get_db, opens it
            logger.info("Debug mode: database opening deferred to the serving process.")
            return
        self.startup()

    def startup(self):
        """Open the database once; later calls are no-ops."""
        with self._startup_lock:
            if self.handle is not None:
                return self.handle
            # StorageCorruptError propagates: a bad image must abort startup
            handle = DatabaseHandle.load(self.path)
            try:
                self.seeded = initialize(handle)
            except BaseException:
                handle.close()
                raise
            self.handle = handle

            atexit.register(self.shutdown)
            if self._install_signal_handlers:
                _install_sigterm_handler()
            return handle

    def shutdown(self):
        """Checkpoint to the database file and release the handle."""
        handle = self.handle
        if handle is None:
            return
        # no statement may run between the last checkpoint and close
        with self._shutdown_lock, handle.lock:
            if handle.closed:
                return
            try:
                logger.info("Shutting down. Saving database...")
                handle.checkpoint(self.path)
            finally:
                handle.close()
                atexit.unregister(self.shutdown)


def _install_sigterm_handler():
    if threading.current_thread() is not threading.main_thread():
        return

    def _exit(signum, frame):
        # raising SystemExit lets atexit run the checkpoint
        sys.exit(128 + signum)

    signal.signal(signal.SIGTERM, _exit)


def get_lifecycle(app=None):
    app = app or current_app
    return app.extensions[EXTENSION_KEY]


def get_db():
    """The database handle owned by the current application, opened on first use."""
    return get_lifecycle().startup()


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create the database file with schema and seed data, then save it."""
    lifecycle = get_lifecycle()
    handle = lifecycle.startup()
    state = "created and seeded" if lifecycle.seeded else "already existed"
    click.echo(f"Database {lifecycle.path} {state}.")
    handle.checkpoint(lifecycle.path)


@click.command("export-db")
@click.argument("path", type=click.Path(dir_okay=False))
@with_appcontext
def export_db_command(path):
    """Write the current database image to PATH."""
    get_db().checkpoint(path)
    click.echo(f"Database exported to {path}")
