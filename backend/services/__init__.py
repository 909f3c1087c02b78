"""Services module - Business logic layer"""

from .compare_service import CompareService, build_result, compare
from .config_manager import ConfigManager
from .diff_formatter import render_plain
from .line_differ import LineDiffer, common_subsequence
from .line_tokenizer import split_lines
from .side_by_side import align_rows

__all__ = [
    "CompareService",
    "build_result",
    "compare",
    "ConfigManager",
    "render_plain",
    "LineDiffer",
    "common_subsequence",
    "split_lines",
    "align_rows",
]
