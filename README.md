# logerr

Logging and error handling for Python console applications. It has no dependencies
outside the standard library.

## What it provides

- **Application details** (`logerr.appinfo`). `configure(name, version, organization,
  organization_domain)` sets the application's details. An argument left as `None` keeps
  its current value. The name defaults to the stem of `sys.argv[0]`. You can read them
  back with `name()`, `version()`, `organization()` and `organization_domain()`. Host
  details come from `host_name()`, `host_cpu_architecture()`, `host_kernel_type()`,
  `host_kernel_version()`, `home()` and `temp_dir()`, and `application_start_time()`
  gives the start time. `system_details()` returns all of these as a multi-line report
  with an `APPLICATION INFO:` section and a `HOST INFO:` section.
- **Timestamps** (`logerr.timestamp`). A `Timestamp` holds the moment it was created, or
  a `datetime` you pass it. `str()` gives `YYYY-MM-DD HH:MM:SS.mmm` and `int()` gives
  epoch seconds. `as_datetime()` returns the `datetime`.
- **Log lines** (`logerr.log`). `log_error`, `log_warning`, `log_info` and `log_debug`
  each write one line to standard output, and `log(level, *args)` does the same for a
  `Level` you pass. A line looks like `[timestamp] [app name] [LEVEL]    message`. Each
  call also returns the line. `disable()` and `enable()` turn writing off and on, and
  `is_enabled()` reports whether it is on.
- **Errors that know where they came from** (`logerr.errors`). A `StackTraceException`
  records the message, file name, function, line, whether the error is fatal, and the
  stack at the point it was created. `error_details()` returns the message, the system
  details and the stack trace as one report. The helpers `err(message)`,
  `fatal_err(message)`, `expects(condition, description)` and
  `ensures(condition, description)` raise it with the caller's location. The last two
  use the messages `Pre-condition failed: ...` and `Post-condition failed: ...`.
  `TerminateException` signals a request to quit.
- **Exceptions from worker threads** (`logerr.threads`). A `LogerrThread(target, *args,
  **kwargs)` stores any exception its target raises. `mark_main_thread()` records the
  main thread. After that, `rethrow()` raises the stored exception there and clears it.
  It exits with code 12 if no main thread was marked, and with code 13 if it is called
  from another thread while an exception is pending. `store_exception()` and
  `pending_exception()` give direct access to the stored exception.
- **Output capture** (`logerr.stream`). `LogStream` wraps a text stream and passes all
  written text through to it. Each time the buffered text ends in a newline, it hands
  that text to the registered callbacks, in order of their names. If the wrapped stream
  is `sys.stdout`, the `LogStream` replaces `sys.stdout` until `close()` is called, or
  until the `with` block ends. `unregister_log_function()` with no name removes every
  callback.
- **Console application runner** (`logerr.console`). `run_console_app(main, argv,
  log_functions)` does the following:
  1. It logs start-up and the program arguments.
  2. It captures standard output into the given callbacks.
  3. It runs `main`, then re-raises any exception a worker thread stored.
  4. It returns an `ExitCode`:
     - `SUCCESS` (0): normal exit, `TerminateException` or `KeyboardInterrupt`.
     - `LOGERR_ERROR` (2): `StackTraceException`.
     - `UNHANDLED_EXCEPTION` (3): any other `Exception`.
     - `UNKNOWN_ERROR` (4): any other exception. `SystemExit` is re-raised.

  `notify(handler, *args)` calls an event handler, then raises any stored thread
  exception. A non-fatal `StackTraceException` is logged and `False` is returned. Any
  other exception is logged and re-raised.
- **Log model** (`logerr.logmodel`). `parse_entry(text)` splits a log line into
  timestamp, module, type, message and detail lines. Text that does not follow that
  layout is stamped with the current time, with module `unset_name` and type `INFO`.
  `LogModel` holds the parsed entries:
  - `queue_log_entry()` can be called from any thread. `append_rows()` parses the queued
    text and adds it.
  - When the total would pass twice the scrollback size, the oldest entries are dropped
    down to the scrollback size.
  - `append_row()` parses and adds one entry at once.
  - `row_count()`, `child_count()`, `has_children()`, `data()`, `header_data()` and
    `entries()` read the contents. Columns are named by `Column`.
- **Filtering** (`logerr.proxy`). `LogFilter` accepts or rejects entries by type (error,
  warning, info, debug) and by a search on the message. The search takes a wildcard
  pattern via `set_wildcard()` or a regular expression via `set_regex()`, and is
  case-insensitive unless `case_sensitive` is set. `filter()` keeps accepted entries in
  order. `sort()` orders entries by their timestamp text.
- **Network distribution** (`logerr.blaster`, `logerr.receiver`).
  - `LogBlaster(host, port)` sends each text passed to `blast()` as one UDP datagram,
    from a background thread. The defaults are group `239.239.239.239` and port `52387`,
    with multicast TTL 1. `close()` sends anything still queued before stopping.
  - `LogReceiver(callback, group, port)` binds the port and joins the multicast group.
    Unicast datagrams still arrive if it cannot join. Its socket is non-blocking:
    `process_pending_datagrams()` passes every waiting datagram to the callback and
    returns how many it handled. `fileno()` lets you wait on it with `select`.

## Example

```python
import sys

from logerr import appinfo
from logerr.console import run_console_app
from logerr.errors import expects
from logerr.log import log_info


def main():
    log_info("doing work")
    expects(1 + 1 == 2, "1 + 1 == 2")


appinfo.configure("demo", "1.0.0", "Example Org", "example.com")
sys.exit(run_console_app(main, sys.argv, {}))
```

Each callback in the dictionary receives every line the application prints. For
example, to forward the output to other machines:

```python
from logerr.blaster import LogBlaster

with LogBlaster() as blaster:
    run_console_app(main, sys.argv, {"blaster": blaster.blast})
```

To collect those lines elsewhere:

```python
import select

from logerr.logmodel import LogModel
from logerr.receiver import LogReceiver

model = LogModel()
with LogReceiver(model.queue_log_entry) as receiver:
    while True:
        select.select([receiver], [], [])
        receiver.process_pending_datagrams()
        model.append_rows()
```

## What it does not do

- It writes no log files. To keep a file, register a callback that writes one.
- It has no graphical log window. `LogModel` and `LogFilter` hold and select the data,
  and displaying it is up to you.
- It does not install signal handlers, and it writes no crash dumps.
- It provides no command-line program. It is a library only.