"""Services module - Business logic layer"""

from .config_manager import ConfigManager
from .content_classifier import classify, classify_line, extension_from_path
from .diff_generator import DiffGenerator
from .file_store import FileTooLargeError, read_file, write_file
from .formatters import FormatError, format_json, format_segments
from .segmenter import detect_segments

__all__ = [
    "ConfigManager",
    "classify",
    "classify_line",
    "extension_from_path",
    "DiffGenerator",
    "FileTooLargeError",
    "read_file",
    "write_file",
    "FormatError",
    "format_json",
    "format_segments",
    "detect_segments",
]
