"""Run a console application with logging, error reporting and exit codes."""

from __future__ import annotations

import enum
import sys
from typing import Callable, Mapping

from . import appinfo
from .errors import StackTraceException, TerminateException
from .log import log_error, log_info
from .stream import LogStream
from .threads import mark_main_thread, pending_exception, rethrow, store_exception


class ExitCode(enum.IntEnum):
    """Exit codes returned by :func:`run_console_app`."""

    SUCCESS = 0
    LOGERR_ERROR = 2
    UNHANDLED_EXCEPTION = 3
    UNKNOWN_ERROR = 4


def _log_program_args(argv) -> None:
    if argv:
        args = "".join(f"{arg} " for arg in argv)
    else:
        args = "UNKNOWN. (Did you pass argv to run_console_app?)"
    log_info(f"Program args: {args}")


def _log_fatal_exit() -> None:
    log_info(appinfo.name(), " exiting due to fatal error...")


def run_console_app(
    main: Callable[[], object],
    argv=None,
    log_functions: Mapping[str, Callable[[str], None]] | None = None,
) -> ExitCode:
    """Run ``main`` with standard output captured into the given log functions.

    Exceptions raised by ``main`` or stored by worker threads are logged and
    turned into an exit code. ``argv`` defaults to ``sys.argv``.
    """
    if argv is None:
        argv = list(sys.argv)
    mark_main_thread()
    code = ExitCode.SUCCESS

    with LogStream(sys.stdout) as stream:
        for fn_name, function in (log_functions or {}).items():
            stream.register_log_function(fn_name, function)
        try:
            log_info(appinfo.name(), " ", appinfo.version(), " Started.")
            _log_program_args(argv)
            try:
                main()
                rethrow()
            except (TerminateException, KeyboardInterrupt):
                log_info("[QUIT]", appinfo.name(), " exiting at user request (CTRL-C)")
                code = ExitCode.SUCCESS
            except StackTraceException as exc:
                log_error(str(exc))
                _log_fatal_exit()
                code = ExitCode.LOGERR_ERROR
            except Exception as exc:  # noqa: BLE001 - reported and mapped to an exit code
                log_error("ERROR: Caught unhandled exception -  ", exc)
                _log_fatal_exit()
                code = ExitCode.UNHANDLED_EXCEPTION
            except SystemExit:
                raise
            except BaseException:  # noqa: BLE001 - reported and mapped to an exit code
                log_error("ERROR: An unknown fatal error occurred. ")
                _log_fatal_exit()
                code = ExitCode.UNKNOWN_ERROR

            if code == ExitCode.SUCCESS:
                log_info(appinfo.name(), " Exited Successfully")
        finally:
            stream.unregister_log_function()

    return code


def notify(handler: Callable[..., object], *args):
    """Call an event handler, then raise any exception stored by worker threads.

    Non-fatal :class:`StackTraceException` errors are logged and swallowed, in
    which case ``False`` is returned; everything else is logged and re-raised.
    """
    result = False
    try:
        result = handler(*args)
        exc = pending_exception()
        store_exception(None)
        if exc is not None:
            raise exc
    except StackTraceException as exc:
        if exc.fatal:
            raise
        log_error(str(exc))
    except Exception as exc:
        log_error(exc)
        raise
    except BaseException:
        log_error("Unhandled exception caught in notify() catch-all block.")
        raise
    return result