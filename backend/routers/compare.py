"""Compare API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from models.compare import CompareOptions, CompareRequest, CompareResponse
from models.diff import DiffResult
from services.compare_service import CompareService
from services.config_manager import ConfigManager
from services.diff_formatter import render_plain
from services.line_tokenizer import LINE_BREAK_PATTERN

router = APIRouter()


def count_lines(text: str) -> int:
    """Number of lines the tokenizer will produce for text"""
    if not text:
        return 0
    return len(LINE_BREAK_PATTERN.findall(text)) + 1


def resolve_options(request: CompareRequest, defaults: CompareOptions) -> CompareOptions:
    """Overlay per-request options on the persisted defaults"""
    if request.options is None:
        return defaults
    overrides = request.options.model_dump(exclude_none=True)
    return defaults.model_copy(update=overrides)


def run_comparison(request: CompareRequest) -> DiffResult:
    """Apply the size guard, then compare"""
    config_manager = ConfigManager.get_instance()
    max_lines = config_manager.max_lines()

    total_lines = count_lines(request.old_text) + count_lines(request.new_text)
    if total_lines > max_lines:
        print(f"[Compare] Rejected comparison: {total_lines} lines exceeds limit of {max_lines}")
        raise HTTPException(
            status_code=413,
            detail=f"Input too large to compare ({total_lines} lines, limit {max_lines})",
        )

    options = resolve_options(request, config_manager.compare_options())
    return CompareService(options).compare(request.old_text, request.new_text)


@router.post("", response_model=CompareResponse)
def compare_texts(request: CompareRequest) -> CompareResponse:
    """Compare two texts and return side-by-side rows"""
    result = run_comparison(request)
    return CompareResponse(result=result, stats=result.stats())


@router.post("/preview", response_class=PlainTextResponse)
def compare_preview(request: CompareRequest) -> str:
    """Compare two texts and return a prefixed plain-text rendering"""
    result = run_comparison(request)
    return render_plain(result)
