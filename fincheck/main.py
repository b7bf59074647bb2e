"""
Fintech Checker — FastAPI app factory with startup registry loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from fincheck.data.store import RecordStore
from fincheck.api.dependencies import set_store
from fincheck.api.router_meta import router as meta_router
from fincheck.api.router_search import router as search_router
from fincheck.api.router_upload import router as upload_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the registry at startup."""
    import os
    from fincheck.config import DATA_FILE
    print(f"  FINCHECK_DATA_FILE = {os.environ.get('FINCHECK_DATA_FILE', '(not set)')}")
    print(f"  DATA_FILE = {DATA_FILE}")
    print(f"  DATA_FILE exists = {DATA_FILE.exists()}")

    store = RecordStore.from_file(DATA_FILE)
    set_store(store)

    if store.row_count() > 0:
        print(f"\nFintech Checker ready — {store.row_count():,} registered entities, "
              f"{len(store.business_types())} business types\n")
    else:
        print("\nFintech Checker ready — registry is empty. Upload data.json via /api/upload.\n")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Fintech Checker API",
        description="Registry lookup — not found in the official list means possibly unlisted",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(search_router)
    app.include_router(upload_router)

    # Search page, served with no-cache headers
    static_dir = Path(__file__).parent / "static"
    if static_dir.is_dir():
        index_html = static_dir / "index.html"

        @app.get("/", response_class=HTMLResponse)
        async def serve_index():
            return HTMLResponse(
                content=index_html.read_text(encoding="utf-8"),
                headers={"Cache-Control": "no-cache, no-store, must-revalidate", "Pragma": "no-cache"},
            )

        app.mount("/", StaticFiles(directory=str(static_dir)), name="static")

    return app


app = create_app()
