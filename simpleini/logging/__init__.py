"""Module de logging."""

from simpleini.logging.base import Logger
from simpleini.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
