from __future__ import annotations

import logging

from fastapi import status
from fastapi.responses import JSONResponse

from users_api.services.errors import NotFoundError

logger = logging.getLogger(__name__)


def not_found_response(error: NotFoundError) -> JSONResponse:
    logger.info("%s %s not found", error.resource, error.identifier)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(error)})
