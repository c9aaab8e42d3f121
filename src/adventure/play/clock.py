"""Background clock publisher and the foreground ``time`` handshake.

The background thread repeatedly takes the shared lock, formats the local
time, publishes it (in memory, and to the clock file when one is
configured), releases the lock and sleeps.

The foreground takes the lock *before* the thread starts, so nothing is
published until the player first asks for the time.  A ``time`` request is
a fixed-delay baton pass:

1. release the lock;
2. sleep ``handoff_delay`` seconds, during which the background thread
   acquires, publishes and releases;
3. re-acquire the lock;
4. read the published value.

This relies on ``handoff_delay`` exceeding the time the background thread
needs to publish once.  Under heavy load the window can be missed, in
which case the previous value (or nothing) is read.
"""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime
from pathlib import Path
from typing import Callable

logger = logging.getLogger(__name__)

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
"""Indexed by :meth:`datetime.weekday` (Monday is 0)."""

MONTHS: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_clock(moment: datetime) -> str:
    """Format *moment* as ``H:MMam|pm, <Weekday>, <Month> D, YYYY``.

    >>> format_clock(datetime(2017, 7, 18, 15, 7))
    '3:07pm, Tuesday, July 18, 2017'
    """
    hour = moment.hour % 12 or 12
    meridiem = "pm" if moment.hour >= 12 else "am"
    return (
        f"{hour}:{moment.minute:02d}{meridiem}, "
        f"{WEEKDAYS[moment.weekday()]}, "
        f"{MONTHS[moment.month - 1]} {moment.day}, {moment.year}"
    )


class ClockService:
    """Owns the shared clock record, its lock, and the publisher thread.

    Parameters
    ----------
    clock_file:
        Optional file mirroring the record.  When set, each publish
        overwrites it and :meth:`refresh_and_read` reads from it.
    interval:
        Seconds the publisher sleeps between publishes.
    handoff_delay:
        Seconds the foreground keeps the lock released on a ``time``
        request.
    grace:
        Seconds :meth:`stop` waits for an in-flight publish to finish.
    now:
        Source of the current local time.
    """

    def __init__(
        self,
        clock_file: Path | None = None,
        interval: float = 2.0,
        handoff_delay: float = 2.0,
        grace: float = 1.0,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.clock_file = clock_file
        self.interval = interval
        self.handoff_delay = handoff_delay
        self.grace = grace
        self.now = now

        self._lock = threading.Lock()
        self._record: str | None = None
        self._holding = False
        self._stopping = threading.Event()
        self._thread: threading.Thread | None = None

    # -- state ---------------------------------------------------------------

    @property
    def latest(self) -> str | None:
        """Last published value, or ``None`` before the first publish."""
        return self._record

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    # -- publishing ----------------------------------------------------------

    def publish(self) -> str:
        """Take the lock, publish the current time once, release the lock.

        Must not be called by a thread that already holds the lock.
        """
        with self._lock:
            return self._publish_locked()

    def _publish_locked(self) -> str:
        text = format_clock(self.now())
        if self.clock_file is not None:
            self.clock_file.write_text(text + "\n")
        self._record = text
        logger.debug("Published clock value %r", text)
        return text

    def _run(self) -> None:
        while not self._stopping.is_set():
            with self._lock:
                if self._stopping.is_set():
                    break
                try:
                    self._publish_locked()
                except OSError as exc:
                    logger.warning("Could not write clock file %s: %s", self.clock_file, exc)
            self._stopping.wait(self.interval)

    # -- foreground lifecycle ------------------------------------------------

    def start(self) -> None:
        """Take the lock for the foreground, then launch the publisher."""
        if self._thread is not None:
            raise RuntimeError("ClockService already started")
        self._lock.acquire()
        self._holding = True
        self._thread = threading.Thread(
            target=self._run, name="clock-publisher", daemon=True,
        )
        self._thread.start()

    def refresh_and_read(self) -> str | None:
        """Hand the lock to the publisher for one window and read the result.

        Returns ``None`` if nothing has been published yet.
        """
        if not self._holding:
            raise RuntimeError(
                "refresh_and_read needs the foreground to hold the clock lock; "
                "call start() first"
            )
        self._lock.release()
        self._holding = False
        try:
            time.sleep(self.handoff_delay)
        finally:
            self._lock.acquire()
            self._holding = True
        return self._read_locked()

    def _read_locked(self) -> str | None:
        if self._record is None:
            return None
        if self.clock_file is None:
            return self._record
        try:
            lines = self.clock_file.read_text().splitlines()
        except OSError as exc:
            logger.warning("Could not read clock file %s: %s", self.clock_file, exc)
            return self._record
        return lines[0] if lines else None

    def stop(self) -> None:
        """Ask the publisher to finish and give it ``grace`` seconds.

        The thread is a daemon, so one that does not finish in time is
        simply abandoned at interpreter exit.
        """
        self._stopping.set()
        if self._holding:
            self._lock.release()
            self._holding = False
        if self._thread is not None:
            self._thread.join(timeout=self.grace)
            if self._thread.is_alive():
                logger.debug("Clock publisher still running after %.1fs", self.grace)

    def __enter__(self) -> ClockService:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
