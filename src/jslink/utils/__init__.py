"""
jslink utilities package
"""

from .io_utils import read_source_file, write_output_file, read_stream
from .logging_config import setup_logging

__all__ = ["read_source_file", "write_output_file", "read_stream", "setup_logging"]
