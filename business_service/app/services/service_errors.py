import logging
from contextlib import contextmanager
from typing import Optional

import requests
from pydantic import ValidationError

from shared.utils.exceptions import CommunicationError, DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


def _error_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("error")
    return None


@contextmanager
def data_service_errors(action: str, not_found: Optional[str] = None):
    """Translate data service failures into domain errors.

    A 404 becomes ``NotFoundError`` when ``not_found`` is given and a 409
    becomes ``DuplicateError``. Anything else that goes wrong on the wire
    is logged and surfaces as ``CommunicationError``.
    """
    try:
        yield
    except requests.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else None
        if status_code == 404 and not_found:
            raise NotFoundError(not_found)
        if status_code == 409:
            raise DuplicateError(_error_message(e.response) or "Resource already exists")
        logger.error("Data service error while %s", action, exc_info=True)
        raise CommunicationError()
    except (requests.RequestException, ValidationError):
        logger.error("Data service error while %s", action, exc_info=True)
        raise CommunicationError()
