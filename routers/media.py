# routers/media.py

from fastapi import APIRouter, UploadFile, File, Form, Depends, HTTPException
from typing import Optional
from pathlib import Path as PathLib
import re
import time
import uuid

from dependencies.auth import require_staff
from core.config import settings
from core.formatting import format_response
from core.logging_config import logger
from core.s3_client import get_s3, public_url
from core.supabase_helpers import safe_select, safe_insert, safe_update, safe_delete
from core.utils import strip_read_only, utc_now_iso
from models.media import MediaUpdate


router = APIRouter(
    prefix="/api",
    tags=["Media"],
)

TABLE = "media"
UPLOAD_PREFIX = "uploads"


# -----------------------------------------------------
# Filename helpers
# -----------------------------------------------------
def safe_filename(filename: str) -> str:
    return re.sub(r"[^A-Za-z0-9._-]", "_", filename)


def unique_filename(original: str) -> str:
    """`<epoch ms>-<random><ext>`, keeping the original extension."""
    ext = PathLib(original).suffix.lower()
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:9]}{ext}"


def allowed_extension(filename: str) -> bool:
    ext = PathLib(filename).suffix.lower().lstrip(".")
    return ext in settings.ALLOWED_UPLOAD_EXTENSIONS


# -----------------------------------------------------
# LIST / GET
# -----------------------------------------------------
@router.get("/media", summary="List Media (newest first)")
def list_media():
    rows = safe_select(TABLE, order="uploadDate", desc=True)
    return format_response(rows, entity="media")


@router.get("/media/{media_id}", summary="Get Media")
def get_media(media_id: str):
    row = safe_select(TABLE, {"id": media_id}, single=True)
    if not row:
        raise HTTPException(404, "Media not found")
    return format_response(row, entity="media")


# -----------------------------------------------------
# UPLOAD
# -----------------------------------------------------
@router.post(
    "/upload",
    summary="Upload an image and create a media record",
    dependencies=[Depends(require_staff)],
)
async def upload_media(
    file: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    category: str = Form("general"),
):
    if file is None or not file.filename:
        raise HTTPException(400, "No file uploaded")

    if not allowed_extension(file.filename):
        raise HTTPException(400, "Only image files are allowed!")

    content = await file.read()
    size = len(content)
    if size == 0:
        raise HTTPException(400, "File upload failed - file appears to be empty")
    if size > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            413,
            f"File too large. Maximum size is {settings.MAX_UPLOAD_BYTES // (1024 * 1024)}MB",
        )

    try:
        s3, bucket, region = get_s3()
    except RuntimeError as e:
        logger.error(f"Upload rejected: {e}")
        raise HTTPException(500, "File storage is not configured")

    filename = unique_filename(file.filename)
    s3_key = f"{UPLOAD_PREFIX}/{filename}"

    try:
        s3.put_object(
            Bucket=bucket,
            Key=s3_key,
            Body=content,
            ContentType=file.content_type,
        )
    except Exception as e:
        logger.error(f"S3 upload error for {file.filename}: {e}")
        raise HTTPException(500, f"Failed to upload file: {e}")

    original_name = safe_filename(file.filename)
    row = safe_insert(TABLE, {
        "filename": filename,
        "originalName": original_name,
        "path": public_url(bucket, region, s3_key),
        "type": file.content_type,
        "size": size,
        "title": title or PathLib(file.filename).stem,
        "category": category or "general",
        "uploadDate": utc_now_iso(),
    })
    if not row:
        raise HTTPException(500, "Insert returned no data")

    logger.info(f"Media uploaded: {s3_key} ({size} bytes)")

    result = format_response(row, entity="media")
    result["fullPath"] = result["thumbnailUrl"] = row["path"]
    return result


# -----------------------------------------------------
# UPDATE METADATA
# -----------------------------------------------------
@router.put(
    "/media/{media_id}",
    summary="Update Media title/category",
    dependencies=[Depends(require_staff)],
)
def update_media(media_id: str, payload: MediaUpdate):
    data = strip_read_only(payload.to_row(exclude_unset=True))

    row = safe_update(TABLE, {"id": media_id}, data)
    if not row:
        raise HTTPException(404, "Media not found")

    return format_response(row, entity="media")


# -----------------------------------------------------
# DELETE (row first, then best-effort object removal)
# -----------------------------------------------------
@router.delete(
    "/media/{media_id}",
    summary="Delete Media",
    dependencies=[Depends(require_staff)],
)
def delete_media(media_id: str):
    row = safe_delete(TABLE, {"id": media_id})
    if not row:
        raise HTTPException(404, "Media not found")

    try:
        s3, bucket, _ = get_s3()
        s3.delete_object(Bucket=bucket, Key=f"{UPLOAD_PREFIX}/{row['filename']}")
    except Exception as e:
        logger.warning(f"Media {media_id} removed but S3 object was not: {e}")

    logger.info(f"Media deleted: {media_id}")
    return {"message": "Media deleted successfully"}
