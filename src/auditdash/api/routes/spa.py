"""Static assets and single-page app fallback."""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from auditdash.errors.exceptions import NotFoundError

router = APIRouter(include_in_schema=False)

INDEX_FILE = "index.html"


def resolve_asset(static_dir: Path, requested: str) -> Path:
    """Map a request path to a file under ``static_dir``, defaulting to the SPA shell."""
    root = static_dir.resolve()
    if requested:
        candidate = (root / requested).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    return root / INDEX_FILE


@router.get("/{full_path:path}")
def serve_spa(full_path: str, request: Request) -> FileResponse:
    asset = resolve_asset(request.app.state.static_dir, full_path)
    if not asset.is_file():
        raise NotFoundError("Static asset", full_path)
    return FileResponse(asset)
