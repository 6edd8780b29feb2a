"""Serves the pre-built single page frontend, when one is configured."""
from pathlib import Path

from fastapi import APIRouter, FastAPI, HTTPException, status
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles


def mount_frontend(app: FastAPI, static_dir: str | Path) -> None:
    root = Path(static_dir)
    index = root / "index.html"
    if not index.is_file():
        raise FileNotFoundError(f"index.html not found in {root}")

    app.mount("/assets", StaticFiles(directory=root / "assets", check_dir=False), name="assets")

    router = APIRouter(include_in_schema=False)

    @router.get("/")
    @router.get("/index.html")
    def index_page():
        return FileResponse(index)

    # Client side routes have no file; answer with the app shell so they resolve.
    @router.get("/{path:path}")
    def spa_fallback(path: str):
        if path == "api" or path.startswith("api/"):
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
        return FileResponse(index)

    app.include_router(router)
