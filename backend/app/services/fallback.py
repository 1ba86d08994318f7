"""Two-tier reads: primary source, or a static fixture when it fails or is empty."""

import logging
from typing import Awaitable, Callable, List, Optional, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_fallback(
    primary: Callable[[], Awaitable[List[T]]],
    fallback: Callable[[], List[T]],
    label: str,
    session: Optional[AsyncSession] = None,
) -> List[T]:
    """Return ``primary()``, or ``fallback()`` on error or an empty result.

    No retry is attempted. When a session is given it is rolled back after a
    failed read so the request can still complete.
    """
    try:
        rows = await primary()
    except Exception as e:
        logger.warning("Falling back to demo %s: %s: %s", label, type(e).__name__, e)
        if session is not None:
            await session.rollback()
        return fallback()

    if not rows:
        logger.info("No %s stored, serving demo data", label)
        return fallback()
    return rows
