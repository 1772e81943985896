"""
facegen: audit logging for generated avatars.

Identifiers are often email addresses, so only a digest prefix is logged.
"""

from __future__ import annotations

import logging
from typing import Optional

logger = logging.getLogger("facegen.audit")

DIGEST_PREFIX = 12


def audit_event(event: str, hex_digest: str, size: Optional[int] = None) -> None:
    """Log one served avatar event, keyed by a digest prefix."""
    if size is None:
        logger.info("avatar_event=%s digest=%s", event, hex_digest[:DIGEST_PREFIX])
    else:
        logger.info(
            "avatar_event=%s digest=%s size=%d", event, hex_digest[:DIGEST_PREFIX], size
        )
