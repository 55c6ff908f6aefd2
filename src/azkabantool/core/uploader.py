from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from azkabantool.config import AzkabanConfig
from azkabantool.errors import DirectoryNotFound, UploadFailed
from .archive import archive, remove_archive
from .client import AzkabanClient, failure_reason, parse_json
from .render import check_name
from .session import SessionAuthenticator


class Uploader:
    def __init__(self, config: AzkabanConfig, client: Optional[AzkabanClient] = None, base_dir: str = "."):
        self.config = config
        self.client = client or AzkabanClient(config)
        self.authenticator = SessionAuthenticator(config, self.client)
        self.base_dir = Path(base_dir)

    def upload(self, collection_name: str) -> Dict[str, Any]:
        """
        Zip the collection and upload it as a project of the same name.

        The archive is removed whatever the outcome, including login and
        transport failures.
        """
        collection_name = check_name(collection_name, "collection")
        collection_dir = self.base_dir / collection_name
        if not collection_dir.is_dir():
            raise DirectoryNotFound(f"Collection directory not found: {collection_dir}")

        archive_path = archive(collection_dir)
        try:
            session_id = self.authenticator.authenticate()
            return self._submit(collection_name, archive_path, session_id)
        finally:
            remove_archive(archive_path)

    def _submit(self, project: str, archive_path: Path, session_id: str) -> Dict[str, Any]:
        logger.info(f"📤 Uploading {archive_path.name} as project {project}")
        with open(archive_path, "rb") as f:
            response = self.client.post(
                "/manager",
                data={
                    "session.id": session_id,
                    "ajax": "upload",
                    "project": project,
                },
                files={"file": (archive_path.name, f, "application/zip")},
            )

        body = parse_json(response)
        reason = failure_reason(response, body)
        if reason is not None:
            logger.error(f"✗ Upload of project {project} failed: {reason}")
            raise UploadFailed(f"Upload of project {project} failed: {reason}", detail=response.text)

        logger.info(f"✓ Project {project} uploaded (version {body.get('version', '?')})")
        return body


def upload(collection_name: str, config: Optional[AzkabanConfig] = None) -> Dict[str, Any]:
    return Uploader(config or AzkabanConfig()).upload(collection_name)
