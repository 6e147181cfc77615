"""Lib module - I/O adapters.

TIER 1: May import from core only.
"""

from lib.config import clear_cache, get, get_config_dir, get_config_path, load_config
from lib.logger import configure_logging, get_logger, set_log_level
from lib.messages import message, output_response, read_request
from lib.paths import PlatformLocator, default_locator, detect_platform, snippets_file_path
from lib.storage import read_snippets_file, write_snippets_file

__all__ = [
    "PlatformLocator",
    "clear_cache",
    "configure_logging",
    "default_locator",
    "detect_platform",
    "get",
    "get_config_dir",
    "get_config_path",
    "get_logger",
    "load_config",
    "message",
    "output_response",
    "read_request",
    "read_snippets_file",
    "set_log_level",
    "snippets_file_path",
    "write_snippets_file",
]
