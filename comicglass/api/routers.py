"""
FastAPI router definitions for the library endpoints.
"""

import logging
import os
from typing import Optional
from urllib.parse import parse_qs, unquote

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.responses import FileResponse, HTMLResponse
from fastapi.templating import Jinja2Templates

from comicglass.api.dependencies import get_browse_directory_uc, get_open_file_uc
from comicglass.api.schemas import EntryView, ErrorResponse, ListingResponse
from comicglass.api.views import display_name
from comicglass.exceptions import BaseAppError, PathNotExistError
from comicglass.use_cases.library.browse_directory import DirectoryListing

TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")
templates = Jinja2Templates(directory=TEMPLATES_DIR)

logger = logging.getLogger(__name__)

router = APIRouter()


def _raw_query_path(request: Request, default: Optional[str]) -> Optional[str]:
    """The ``path`` query value with undecodable bytes kept as surrogates."""
    query = request.scope.get("query_string", b"").decode("latin-1")
    values = parse_qs(query, encoding="utf-8", errors="surrogateescape").get("path")
    return values[0] if values else default


def _raw_file_path(request: Request, default: str) -> str:
    """The request path with undecodable bytes kept as surrogates."""
    raw = request.scope.get("raw_path")
    if not raw:
        return default
    path = raw.split(b"?", 1)[0].decode("latin-1")
    return unquote(path, encoding="utf-8", errors="surrogateescape")


def _browse(path: Optional[str]) -> DirectoryListing:
    """Run the browse use case and translate domain errors to HTTP errors."""
    try:
        return get_browse_directory_uc().execute(path)
    except PathNotExistError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except BaseAppError as e:
        logger.error(f"Server error while browsing: {e}")
        raise HTTPException(status_code=500, detail=BaseAppError.message)
    except Exception as e:
        logger.exception(f"Unexpected error while browsing: {e}")
        raise HTTPException(status_code=500, detail=BaseAppError.message)


@router.get(
    "/",
    response_class=HTMLResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def index(
    request: Request,
    path: Optional[str] = Query(None, description="Directory to list, relative to the library root"),
):
    """
    Render a directory of the library as an HTML page.

    Args:
        path: Directory relative to the library root; empty means the root

    Returns:
        HTMLResponse: Listing page understood by ComicGlass clients

    Raises:
        HTTPException: 400 if the path does not exist, 500 on server errors
    """
    listing = _browse(_raw_query_path(request, path))
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "label": display_name(listing.label),
            "entries": [EntryView.from_entity(e) for e in listing.entries],
        },
    )


@router.get(
    "/api/listing",
    response_model=ListingResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def listing(
    request: Request,
    path: Optional[str] = Query(None, description="Directory to list, relative to the library root"),
):
    """
    List a directory of the library as JSON.

    Args:
        path: Directory relative to the library root; empty means the root

    Returns:
        ListingResponse: Label and entries of the directory
    """
    return ListingResponse.from_listing(_browse(_raw_query_path(request, path)))


@router.get("/{file_path:path}", include_in_schema=False)
def serve_file(request: Request, file_path: str):
    """Stream a library file; anything that is not a servable file is a 404."""
    try:
        absolute = get_open_file_uc().execute(_raw_file_path(request, file_path))
    except PathNotExistError:
        raise HTTPException(status_code=404)
    except BaseAppError as e:
        logger.error(f"Server error while serving a file: {e}")
        raise HTTPException(status_code=404)
    return FileResponse(absolute)
