from __future__ import annotations

import logging
import os
import subprocess
import threading
from enum import Enum

from morphstem.core.errors import ProcessSpawnError, WorkerIOError

logger = logging.getLogger(__name__)

# mystem can answer a long input with a single very long JSON line.
READ_BUFFER_SIZE = 512 * 1024
TERMINATE_TIMEOUT = 5.0


class AnalysisMode(Enum):
    WEIGHTED = "weighted"
    DISAMBIGUATED = "disambiguated"


MYSTEM_ARGS = {
    # every candidate with its weight
    AnalysisMode.WEIGHTED: ("-i", "--format", "json", "--eng-gr", "--weight"),
    # contextual disambiguation, single best candidate, no weights
    AnalysisMode.DISAMBIGUATED: ("-i", "-d", "--format", "json", "--eng-gr"),
}


def default_executable() -> str:
    return os.environ.get("MYSTEM_BIN", "mystem")


class MystemSession:
    """Owns one mystem worker and talks to it one line at a time.

    Every exchange polls the worker first and restarts it if it has exited,
    so a crash between calls costs latency rather than an error. A request
    that cannot be written (closed pipe) restarts the worker and is sent
    once more. Reads block until mystem answers; there is no timeout.
    """

    def __init__(self, executable: str | None = None, mode: AnalysisMode = AnalysisMode.WEIGHTED) -> None:
        self.executable = executable or default_executable()
        self.mode = mode
        self.restarts = 0
        self._lock = threading.Lock()
        self.process: subprocess.Popen[bytes] | None = None
        self.start()

    @property
    def args(self) -> list[str]:
        return [self.executable, *MYSTEM_ARGS[self.mode]]

    @property
    def pid(self) -> int | None:
        return self.process.pid if self.process is not None else None

    def start(self) -> subprocess.Popen[bytes]:
        # Binary pipes: the response is decoded by the codec, so invalid
        # UTF-8 from the worker cannot break the stream.
        try:
            process = subprocess.Popen(
                self.args,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                bufsize=READ_BUFFER_SIZE,
            )
        except OSError as exc:
            raise ProcessSpawnError(f"Не удалось запустить mystem ({self.executable}): {exc}") from exc
        logger.debug("mystem запущен, PID %s", process.pid)
        self.process = process
        return process

    def ensure_alive(self) -> subprocess.Popen[bytes]:
        if self.process is None:
            return self.start()
        exit_status = self.process.poll()
        if exit_status is None:
            return self.process
        logger.warning(
            "Процесс mystem (PID %s) завершился с кодом %s. Перезапуск...",
            self.process.pid,
            exit_status,
        )
        return self._restart()

    def _restart(self) -> subprocess.Popen[bytes]:
        old = self.process
        if old is not None:
            if old.poll() is None:
                old.kill()
                old.wait()
            _close_pipes(old)
        process = self.start()
        self.restarts += 1
        return process

    def exchange(self, line: str) -> bytes:
        """Send one request line and return the raw response line (empty at EOF)."""
        if "\n" in line:
            raise ValueError("Запрос к mystem должен быть одной строкой")
        payload = (line + "\n").encode("utf-8")
        with self._lock:
            process = self.ensure_alive()
            try:
                _write(process, payload)
            except OSError as exc:
                logger.warning(
                    "Не удалось отправить запрос mystem (PID %s): %s. Перезапуск...",
                    process.pid,
                    exc,
                )
                process = self._restart()
                try:
                    _write(process, payload)
                except OSError as retry_exc:
                    raise WorkerIOError(f"mystem не принимает запросы: {retry_exc}") from retry_exc
            return process.stdout.readline()

    def terminate(self) -> None:
        process = self.process
        if process is None:
            return
        try:
            process.terminate()
            try:
                process.wait(timeout=TERMINATE_TIMEOUT)
            except subprocess.TimeoutExpired:
                process.kill()
                process.wait()
        except OSError as exc:
            logger.debug("Не удалось остановить mystem (PID %s): %s", process.pid, exc)
        finally:
            _close_pipes(process)

    def __enter__(self) -> MystemSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.terminate()


def _write(process: subprocess.Popen[bytes], payload: bytes) -> None:
    process.stdin.write(payload)
    process.stdin.flush()


def _close_pipes(process: subprocess.Popen[bytes]) -> None:
    for stream in (process.stdin, process.stdout):
        if stream is None:
            continue
        try:
            stream.close()
        except OSError:
            # stdin of a dead worker can fail to flush on close
            pass
