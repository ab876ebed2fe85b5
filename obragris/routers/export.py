from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import Response

from .. import schemas
from ..config import settings
from ..exporter import (
    build_embed_snippet, build_text_report, build_whatsapp_message,
    report_filename, whatsapp_share_url,
)
from .estimate import run_estimate

router = APIRouter(tags=["export"])


@router.post("/export/text")
def export_text(request: schemas.ExportRequest):
    """Download the estimate as a plain-text budget."""
    result = run_estimate(request)
    text = build_text_report(
        result["materials"], result["system"], request.inputs.model_dump(), request.location,
    )
    filename = report_filename(result["system"])
    return Response(
        content=text.encode("utf-8"),
        media_type="text/plain; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
        },
    )


@router.post("/export/whatsapp", response_model=schemas.WhatsAppExport)
def export_whatsapp(request: schemas.ExportRequest):
    result = run_estimate(request)
    text = build_whatsapp_message(
        result["materials"], result["system"], request.inputs.model_dump(), request.location,
    )
    return {"text": text, "url": whatsapp_share_url(text)}


@router.get("/embed", response_model=schemas.EmbedSnippet)
def embed_snippet(url: Optional[str] = Query(None)):
    """iframe code for embedding the calculator; defaults to the configured APP_URL."""
    url = url or settings.APP_URL
    return {"url": url, "iframe": build_embed_snippet(url)}
