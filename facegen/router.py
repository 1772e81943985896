"""
facegen: avatar routes.

Mounted under ``settings.API_PREFIX`` (``/api`` by default). Size bounds are
enforced here; the generator is only ever called with an accepted size.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import Response

from .audit import audit_event
from .config import settings
from .errors import AvatarAPIError, InvalidSize
from .generator import AvatarGenerator
from .models import AvatarFeaturesModel, AvatarInfoResponse, ErrorResponse

logger = logging.getLogger("facegen.router")

router = APIRouter(tags=["avatars"])

SVG_MEDIA_TYPE = "image/svg+xml"

# Whole numbers only: "250.5" is rejected rather than floored. Leading zeros
# are dropped and the remaining digits capped so int() never sees a huge string.
_INT_RE = re.compile(r"([+-]?)0*([0-9]{1,9})")


def parse_size(raw: Optional[str]) -> int:
    """Validate the ``size`` query value against the configured bounds."""
    if raw is None:
        return settings.DEFAULT_SIZE
    match = _INT_RE.fullmatch(raw.strip())
    if match is None:
        raise InvalidSize(settings.MIN_SIZE, settings.MAX_SIZE)
    sign, digits = match.groups()
    size = -int(digits) if sign == "-" else int(digits)
    if size < settings.MIN_SIZE or size > settings.MAX_SIZE:
        raise InvalidSize(settings.MIN_SIZE, settings.MAX_SIZE)
    return size


# ------------------------------------------------------------------
# Feature metadata
# ------------------------------------------------------------------


@router.get(
    "/avatar/{identifier}/info",
    response_model=AvatarInfoResponse,
    responses={500: {"model": ErrorResponse}},
)
def avatar_info(identifier: str) -> AvatarInfoResponse:
    """Return the feature set the avatar for *identifier* is drawn from."""
    try:
        generator = AvatarGenerator(identifier)
        features = AvatarFeaturesModel.from_features(generator.get_features())
    except Exception as exc:
        logger.exception("Feature extraction failed")
        raise AvatarAPIError(500, "Generation failed", "Failed to generate avatar info") from exc

    audit_event("info", generator.digest)
    return AvatarInfoResponse(
        identifier=identifier,
        digest=generator.digest,
        features=features,
    )


# ------------------------------------------------------------------
# Render
# ------------------------------------------------------------------


@router.get(
    "/avatar/{identifier}",
    response_class=Response,
    responses={
        200: {"content": {SVG_MEDIA_TYPE: {}}},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def avatar_svg(
    identifier: str,
    size: Optional[str] = Query(
        default=None,
        description="Edge length in pixels; whole number within the configured bounds",
    ),
) -> Response:
    """Render the avatar for *identifier* as an SVG document."""
    avatar_size = parse_size(size)

    try:
        generator = AvatarGenerator(identifier)
        svg = generator.render(avatar_size)
    except Exception as exc:
        logger.exception("Avatar rendering failed")
        raise AvatarAPIError(500, "Generation failed", "Failed to generate avatar") from exc

    audit_event("render", generator.digest, size=avatar_size)
    return Response(
        content=svg,
        media_type=SVG_MEDIA_TYPE,
        headers={"Cache-Control": settings.CACHE_CONTROL},
    )
