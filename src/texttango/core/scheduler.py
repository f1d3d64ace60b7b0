"""Debounced regeneration with stale-result discard.

Interactive callers change settings in bursts. RegenerationScheduler waits
until requests stop arriving for `delay` seconds before running a
generation. A run that has already started is never interrupted; instead
every request gets a token, and a finished run delivers its result only if
no newer request has been made in the meantime.
"""

import threading
from collections.abc import Callable
from typing import Any

import structlog

from texttango.config import TextSettings
from texttango.exceptions import TextTangoError


class RegenerationScheduler:
    """Debounces generation requests and drops stale results.

    Example:
        scheduler = RegenerationScheduler(
            generate=lambda settings, token: pipeline.generate(settings, token=token),
            on_result=show_mesh,
            on_error=show_error,
        )
        scheduler.request(settings)
    """

    def __init__(
        self,
        generate: Callable[[TextSettings, int], Any],
        on_result: Callable[[Any], None],
        on_error: Callable[[Exception], None] | None = None,
        delay: float = 1.5,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            generate: Runs one generation for (settings, token)
            on_result: Receives results of current requests
            on_error: Receives generation errors of current requests
            delay: Quiet period in seconds before a request runs
            logger: structlog logger
        """
        self._generate = generate
        self._on_result = on_result
        self._on_error = on_error
        self.delay = delay
        self._logger = logger if logger is not None else structlog.get_logger("texttango")
        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._latest = 0
        self._running = 0

    @property
    def latest_token(self) -> int:
        """Token of the most recent request."""
        with self._lock:
            return self._latest

    def is_busy(self) -> bool:
        """True while a request is pending or a run is in flight."""
        with self._lock:
            return self._timer is not None or self._running > 0

    def request(self, settings: TextSettings) -> int:
        """Schedule a generation, replacing any pending one.

        Args:
            settings: Settings to generate; copied immediately

        Returns:
            Token identifying this request
        """
        snapshot = settings.model_copy(deep=True)
        with self._lock:
            self._latest += 1
            token = self._latest
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.delay, self._run, args=(snapshot, token))
            self._timer.daemon = True
            self._timer.start()

        self._logger.debug("Regeneration requested", token=token)
        return token

    def cancel(self) -> None:
        """Cancel the pending request and mark any in-flight run stale."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._latest += 1

    def is_current(self, token: int) -> bool:
        """True if token belongs to the most recent request."""
        with self._lock:
            return token == self._latest

    def _run(self, settings: TextSettings, token: int) -> None:
        with self._lock:
            if token != self._latest:
                return
            self._timer = None
            self._running += 1

        try:
            result = self._generate(settings, token)
        except TextTangoError as e:
            self._deliver_error(e, token)
            return
        except Exception as e:
            # Timer threads drop uncaught exceptions, so route them to on_error
            self._logger.exception("Unexpected generation error", token=token)
            self._deliver_error(e, token)
            return
        finally:
            with self._lock:
                self._running -= 1

        if self.is_current(token):
            self._on_result(result)
        else:
            self._logger.info("Discarding stale generation result", token=token)

    def _deliver_error(self, error: Exception, token: int) -> None:
        if not self.is_current(token):
            self._logger.info("Discarding stale generation error", token=token, error=str(error))
            return

        self._logger.error(
            "Generation failed", token=token, error=str(error), error_type=type(error).__name__
        )
        if self._on_error is not None:
            self._on_error(error)
