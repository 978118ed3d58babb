"""SRT parse endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from srtparse.core.config import Settings, get_settings
from srtparse.core.exceptions import SRTParseError
from srtparse.schemas import ParseErrorSchema, ParseResponse, SubtitleEntrySchema
from srtparse.services.srt_parser import parse_srt

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=ParseResponse,
    status_code=status.HTTP_200_OK,
    summary="Parse SRT subtitle file",
    description="Parses the raw request body as an SRT file into structured subtitle entries",
)
async def parse_srt_body(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    best_effort: Annotated[
        bool, Query(description="Return entries parsed before the first error")
    ] = False,
    encoding: Annotated[str | None, Query(description="Encoding of cue text")] = None,
):
    """Parse an SRT file sent as the request body.

    Args:
        request: Incoming request carrying the SRT bytes as its body
        best_effort: Return the entries completed before a parse error instead of failing

    Returns:
        Parsed entries, plus the parse error in best-effort mode

    Raises:
        HTTPException: 413 for oversized bodies, 400 for unknown encodings,
            422 when the content is not valid SRT
    """
    body = await request.body()
    if len(body) > settings.max_file_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"SRT content exceeds {settings.max_file_size} bytes",
        )

    try:
        entries = parse_srt(body, encoding=encoding or settings.default_encoding)
    except LookupError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown encoding: {encoding}",
        )
    except SRTParseError as e:
        logger.info("Rejected SRT content: %s", e)
        if not best_effort:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.to_dict(),
            )
        return ParseResponse(
            entry_count=len(e.entries),
            entries=[SubtitleEntrySchema.from_entry(entry) for entry in e.entries],
            error=ParseErrorSchema(**e.to_dict()),
        )

    logger.debug("Parsed %d SRT entries from %d bytes", len(entries), len(body))
    return ParseResponse(
        entry_count=len(entries),
        entries=[SubtitleEntrySchema.from_entry(entry) for entry in entries],
    )
