"""Copy example text to the system clipboard and report the outcome.

The landing page lets visitors copy each onboarding example. In the browser
this happens in the page's own script; this module provides the same action
for the ``copy`` CLI command and for tests:

* :func:`copy_to_clipboard` writes a string verbatim through a
  :class:`ClipboardWriter` and emits exactly one notification, a success
  message when the write lands or a failure message when the clipboard is
  denied or unavailable. Failures never propagate.
* :class:`ClipboardAction` schedules copies as fire-and-forget tasks on the
  running event loop. Each invocation is independent; concurrent copies race
  for the external clipboard and the last write wins.
* :class:`SystemClipboard` shells out to the first available platform tool
  (``wl-copy``, ``xclip``, ``xsel``, ``pbcopy`` or ``clip.exe``).

Examples
--------
>>> import asyncio
>>> result = asyncio.run(
...     copy_to_clipboard("hek3ster create --config cluster.yaml")
... )  # doctest: +SKIP
Copied to clipboard!
>>> result.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import shutil
import sys
import typing as typ

from ._constants import COPY_FAILURE_MESSAGE, COPY_SUCCESS_MESSAGE

CLIPBOARD_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-copy",),
    ("xclip", "-selection", "clipboard"),
    ("xsel", "--clipboard", "--input"),
    ("pbcopy",),
    ("clip.exe",),
)


class ClipboardUnavailableError(RuntimeError):
    """Raised when the system clipboard cannot be written."""


class ClipboardWriter(typ.Protocol):
    """Destination for copied text."""

    async def write(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""
        ...


class Notifier(typ.Protocol):
    """Sink for the transient messages shown after a copy attempt."""

    def success(self, message: str) -> None:
        """Show a success notification."""
        ...

    def failure(self, message: str) -> None:
        """Show a failure notification."""
        ...


@dc.dataclass(frozen=True, slots=True)
class CopyResult:
    """Outcome of a single copy attempt."""

    text: str
    ok: bool
    error: str | None = None


class ConsoleNotifier:
    """Print notifications: successes to stdout, failures to stderr."""

    def success(self, message: str) -> None:
        """Print ``message`` to stdout."""
        print(message)

    def failure(self, message: str) -> None:
        """Print ``message`` to stderr."""
        print(message, file=sys.stderr)


class SystemClipboard:
    """Write to the desktop clipboard through a platform command-line tool."""

    def __init__(
        self,
        commands: typ.Sequence[tuple[str, ...]] = CLIPBOARD_COMMANDS,
        *,
        which: typ.Callable[[str], str | None] = shutil.which,
    ) -> None:
        """Initialize the writer with candidate commands, tried in order.

        Parameters
        ----------
        commands : Sequence[tuple[str, ...]], optional
            Argument vectors whose first element names the executable; the
            first one found on ``PATH`` is used.
        which : Callable[[str], str | None], optional
            Executable lookup, ``shutil.which`` by default.
        """
        self.commands = tuple(commands)
        self._which = which

    def resolve_command(self) -> list[str]:
        """Return the argument vector of the first available clipboard tool."""
        for command in self.commands:
            executable = self._which(command[0])
            if executable:
                return [executable, *command[1:]]
        names = ", ".join(command[0] for command in self.commands)
        msg = f"No clipboard tool found on PATH (tried: {names})."
        raise ClipboardUnavailableError(msg)

    async def write(self, text: str) -> None:
        """Pipe ``text`` into the clipboard tool, raising on a non-zero exit."""
        try:
            payload = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            msg = f"Text cannot be encoded as UTF-8: {exc.reason}"
            raise ClipboardUnavailableError(msg) from exc
        command = self.resolve_command()
        process = await asyncio.create_subprocess_exec(
            *command,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.DEVNULL,
            stderr=asyncio.subprocess.PIPE,
        )
        _, stderr = await process.communicate(payload)
        if process.returncode != 0:
            detail = stderr.decode("utf-8", errors="replace").strip()
            msg = f"'{command[0]}' exited with status {process.returncode}"
            if detail:
                msg = f"{msg}: {detail}"
            raise ClipboardUnavailableError(msg)


async def copy_to_clipboard(
    text: str,
    *,
    writer: ClipboardWriter | None = None,
    notifier: Notifier | None = None,
) -> CopyResult:
    """Copy ``text`` verbatim and emit exactly one notification.

    Parameters
    ----------
    text : str
        Already-formed text; it is neither templated nor sanitized.
    writer : ClipboardWriter, optional
        Clipboard destination. Defaults to :class:`SystemClipboard`.
    notifier : Notifier, optional
        Receives the success or failure message. Defaults to
        :class:`ConsoleNotifier`.

    Returns
    -------
    CopyResult
        ``ok`` is ``True`` when the write completed; otherwise ``error``
        describes why the clipboard could not be written.
    """
    target = writer or SystemClipboard()
    sink = notifier or ConsoleNotifier()
    try:
        await target.write(text)
    except (ClipboardUnavailableError, OSError) as exc:
        sink.failure(f"{COPY_FAILURE_MESSAGE} {exc}")
        return CopyResult(text=text, ok=False, error=str(exc))
    sink.success(COPY_SUCCESS_MESSAGE)
    return CopyResult(text=text, ok=True)


class ClipboardAction:
    """Fire-and-forget copy action bound to one writer and notifier."""

    def __init__(
        self,
        writer: ClipboardWriter | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        """Bind the action to ``writer`` and ``notifier`` (system defaults)."""
        self.writer = writer or SystemClipboard()
        self.notifier = notifier or ConsoleNotifier()
        self._pending: set[asyncio.Task[CopyResult]] = set()

    async def copy(self, text: str) -> CopyResult:
        """Copy ``text`` and wait for the outcome."""
        return await copy_to_clipboard(text, writer=self.writer, notifier=self.notifier)

    def trigger(self, text: str) -> asyncio.Task[CopyResult]:
        """Schedule a copy on the running loop without waiting for it.

        The task is tracked until it finishes so it cannot be garbage
        collected mid-write; callers may await it to read the result.
        """
        task = asyncio.get_running_loop().create_task(self.copy(text))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task


__all__ = [
    "CLIPBOARD_COMMANDS",
    "ClipboardAction",
    "ClipboardUnavailableError",
    "ClipboardWriter",
    "ConsoleNotifier",
    "CopyResult",
    "Notifier",
    "SystemClipboard",
    "copy_to_clipboard",
]
