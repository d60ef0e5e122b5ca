"""
Serving of the built single-page frontend.

Static assets are mounted at ``/assets``; any other GET that is not an API
path falls back to ``index.html`` so client-side routing keeps working.
"""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

logger = logging.getLogger("macrotracker.spa")


def mount_spa(app: FastAPI, static_dir: str, api_prefix: str) -> bool:
    """Attach the frontend bundle to ``app``; returns False when there is none to serve"""
    root = Path(static_dir).resolve()
    index_file = root / "index.html"
    if not index_file.is_file():
        logger.info(f"No frontend bundle at {root}; serving API only")
        return False

    assets_dir = root / "assets"
    if assets_dir.is_dir():
        app.mount("/assets", StaticFiles(directory=str(assets_dir)), name="assets")

    api_root = api_prefix.strip("/")

    @app.get("/{full_path:path}", include_in_schema=False)
    async def spa_fallback(full_path: str):
        if api_root and (full_path == api_root or full_path.startswith(api_root + "/")):
            raise HTTPException(status_code=404, detail="Not Found")

        candidate = (root / full_path).resolve()
        if full_path and candidate.is_file() and root in candidate.parents:
            return FileResponse(str(candidate))
        return FileResponse(str(index_file))

    logger.info(f"Serving frontend bundle from {root}")
    return True
