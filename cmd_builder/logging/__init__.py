"""Module de logging."""

from cmd_builder.logging.base import Logger
from cmd_builder.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
