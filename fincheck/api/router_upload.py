"""
Upload endpoint: replace the registry file and swap in a new store.
Reload of the existing file lives in router_meta.py.
"""
from __future__ import annotations

import gzip
import os

from fastapi import APIRouter, HTTPException, UploadFile, File

from fincheck.config import DATA_FILE
from fincheck.data.loader import parse_registry
from fincheck.data.store import RecordStore
from fincheck.api.dependencies import set_store
from fincheck.api.response_models import ReloadResponse

router = APIRouter(prefix="/api", tags=["upload"])


@router.post("/upload", response_model=ReloadResponse)
async def upload_registry(file: UploadFile = File(...)):
    """Upload a new data.json (optionally gzip-compressed)."""
    if not file.filename:
        raise HTTPException(400, "Missing filename")

    filename = file.filename
    is_gzipped = filename.lower().endswith(".json.gz")
    if is_gzipped:
        filename = filename[:-3]

    if not filename.lower().endswith(".json"):
        raise HTTPException(400, f"Only .json files are accepted (got '{file.filename}')")

    content = await file.read()
    if is_gzipped:
        try:
            content = gzip.decompress(content)
        except (OSError, EOFError) as exc:
            raise HTTPException(400, f"Invalid gzip data: {exc}")

    # Validate before touching the file on disk
    try:
        raw = parse_registry(content)
    except ValueError as exc:
        raise HTTPException(400, f"Invalid registry file: {exc}")

    # Temp file beside the live one, swapped in atomically
    DATA_FILE.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = DATA_FILE.with_suffix(".tmp")
    tmp_path.write_bytes(content)
    os.replace(tmp_path, DATA_FILE)

    store = RecordStore.load(raw, source=str(DATA_FILE))
    set_store(store)
    print(f"  Uploaded {filename} — {store.row_count():,} records")
    return ReloadResponse(status="uploaded", records=store.row_count(), source=store.source)
