"""Controller API client: function listing and archive storage uploads."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional

from common import http_client
from common.errors import TransportError
from constants import Constants

logger = logging.getLogger(__name__)

HEADERS_JSON = {"Accept": "application/json"}


class ControllerClient:
    """Thin wrapper around the controller's REST endpoints."""

    def __init__(self, server_url: Optional[str] = None):
        self.server_url = (server_url or Constants.SERVER_URL).rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self.server_url}{path}"

    def function_list(self, namespace: str) -> List[Dict[str, Any]]:
        """List function objects in ``namespace``.

        Raises:
            TransportError: Request failed or the response was not a JSON list.
        """
        data = http_client.get_json(
            self._url(Constants.FUNCTIONS_PATH),
            context="list functions",
            params={"namespace": namespace},
            headers=HEADERS_JSON,
        )
        if not isinstance(data, list):
            raise TransportError("list functions", "expected a JSON list of functions")
        return data

    def storage_url(self, archive_id: str) -> str:
        return f"{self._url(Constants.STORAGE_ARCHIVE_PATH)}?id={archive_id}"

    def upload_file(self, path: str) -> str:
        """Upload ``path`` to the storage service and return its archive id.

        Raises:
            TransportError: Upload failed or the response carried no id.
        """
        with open(path, "rb") as fh:
            res = http_client.safe_post(
                self._url(Constants.STORAGE_ARCHIVE_PATH),
                context="upload archive",
                files={"uploadfile": (os.path.basename(path), fh)},
                headers=HEADERS_JSON,
            )
        try:
            archive_id = res.json().get("id")
        except ValueError as exc:
            raise TransportError("upload archive", "invalid JSON in storage response") from exc
        if not archive_id:
            raise TransportError("upload archive", "storage response has no archive id")
        logger.debug("Uploaded %s as archive %s", path, archive_id)
        return str(archive_id)
