"""A file logger with level filtering, size-based rotation and coloured echo."""

from __future__ import annotations

import functools
import inspect
import os
import sys
import time
from enum import IntEnum

DEFAULT_DIRECTORY = "./logs"
DEFAULT_FILENAME = "runlog"
DEFAULT_EXTENSION = "log"
DEFAULT_MAX_LINES = 10000

_LINE_LIMIT = 1023
_SEPARATOR = "-" * 100
_RESET = "\033[0m"


class LogLevel(IntEnum):
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def colour(self) -> str:
        return {
            LogLevel.INFO: "\033[0;32m",
            LogLevel.WARNING: "\033[0;33m",
            LogLevel.ERROR: "\033[0;31m",
            LogLevel.FATAL: "\033[0;31m",
        }.get(self, "\033[0;37m")


def _count_lines(path: str) -> int:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return sum(1 for _ in handle)
    except OSError:
        return 0


class Logger:
    """Appends formatted records to a log file, rolling over to numbered files."""

    def __init__(
        self,
        directory: str = DEFAULT_DIRECTORY,
        filename: str = DEFAULT_FILENAME,
        extension: str = DEFAULT_EXTENSION,
        level: LogLevel = LogLevel.INFO,
        repeat_in_stdout: bool = True,
        timestamps: bool = True,
        max_lines: int = DEFAULT_MAX_LINES,
    ) -> None:
        self.directory = directory[:254]
        self.filename = filename[:127]
        self.extension = extension[:15]
        self.level = LogLevel(level)
        self.repeat_in_stdout = repeat_in_stdout
        self.timestamps = timestamps
        self.max_lines = max_lines
        self.file_index = 0
        self._line_count = 0
        self._path = self.current_path()

    def set_directory(self, directory: str) -> None:
        self.directory = directory[:254]
        self._line_count = 0

    def set_filename(self, filename: str) -> None:
        self.filename = filename[:127]
        self._line_count = 0

    def set_extension(self, extension: str) -> None:
        self.extension = extension[:15]
        self._line_count = 0

    def current_path(self) -> str:
        """Path of the file that records go to for the current file index."""
        if self.file_index > 0:
            name = f"{self.filename}.{self.file_index}.{self.extension}"
        else:
            name = f"{self.filename}.{self.extension}"
        return f"{self.directory}/{name}"

    def _select_file(self) -> None:
        if self._line_count == 0:
            self._path = self.current_path()
            self._line_count = _count_lines(self._path)
        while self._line_count >= self.max_lines:
            self.file_index += 1
            self._path = self.current_path()
            self._line_count = _count_lines(self._path)

    def write_separator(self) -> None:
        """Append a dashed separator line to the current file."""
        path = self.current_path()
        try:
            with open(path, "a", encoding="utf-8") as out:
                out.write(_SEPARATOR + "\n")
        except OSError:
            print(f"Logger error: could not open file {path} for writing", file=sys.stderr)

    @staticmethod
    def _caller() -> tuple[str, int, str]:
        frame = inspect.currentframe()
        try:
            while frame is not None and frame.f_code.co_filename == __file__:
                frame = frame.f_back
            if frame is None:
                return "?", 0, "?"
            code = frame.f_code
            return os.path.basename(code.co_filename), frame.f_lineno, code.co_name
        finally:
            del frame

    def write(self, level: LogLevel, message: str, *args: object) -> None:
        """Record ``message % args`` at ``level``; a fatal record exits the program."""
        level = LogLevel(level)
        if self.level > level:
            return
        self._select_file()

        src, line, func = self._caller()
        prefix = f"[{level.label}] {src}:{line} {func}() - "
        if self.timestamps:
            prefix = time.strftime("%Y-%m-%d %H:%M:%S") + " " + prefix
        text = (prefix + (message % args if args else message))[:_LINE_LIMIT]

        try:
            with open(self._path, "a", encoding="utf-8") as out:
                out.write(text + "\n")
        except OSError:
            print(f"Logger error: could not open file '{self._path}' for writing", file=sys.stderr)
            return
        self._line_count += 1

        if self.repeat_in_stdout:
            sys.stdout.write(f"{level.colour}{text}{_RESET}\n")

        if level is LogLevel.FATAL:
            raise SystemExit(1)

    def debug(self, message: str, *args: object) -> None:
        self.write(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: object) -> None:
        self.write(LogLevel.INFO, message, *args)

    def warning(self, message: str, *args: object) -> None:
        self.write(LogLevel.WARNING, message, *args)

    def error(self, message: str, *args: object) -> None:
        self.write(LogLevel.ERROR, message, *args)

    def fatal(self, message: str, *args: object) -> None:
        self.write(LogLevel.FATAL, message, *args)


@functools.lru_cache(maxsize=None)
def default_logger() -> Logger:
    """The shared logger with default settings."""
    return Logger()