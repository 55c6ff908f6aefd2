from typing import Any, Dict, Optional

from loguru import logger

from azkabantool.config import AzkabanConfig
from azkabantool.errors import ExecutionFailed
from .client import AzkabanClient, failure_reason, parse_json
from .render import check_name
from .session import SessionAuthenticator
from .uploader import Uploader


def final_flow_name(collection_name: str) -> str:
    return f"final_{collection_name}_job"


class Executor:
    def __init__(self, config: AzkabanConfig, client: Optional[AzkabanClient] = None, base_dir: str = "."):
        self.config = config
        self.client = client or AzkabanClient(config)
        self.uploader = Uploader(config, self.client, base_dir=base_dir)
        self.authenticator = SessionAuthenticator(config, self.client)

    def execute(self, collection_name: str) -> Dict[str, Any]:
        """
        Upload the collection, then run its final job flow.

        Execution always re-uploads and logs in a second time for the
        execute call. Failure emails go to the configured address, if any,
        and the remaining branches keep running after a failure
        (finishPossible).
        """
        collection_name = check_name(collection_name, "collection")
        self.uploader.upload(collection_name)
        session_id = self.authenticator.authenticate()

        flow = final_flow_name(collection_name)
        params = {
            "session.id": session_id,
            "ajax": "executeFlow",
            "project": collection_name,
            "flow": flow,
            "failureAction": "finishPossible",
        }
        # without an address the project's own failure emails stay in effect
        if self.config.failure_email:
            params["failureEmailsOverride"] = "true"
            params["failureEmails"] = self.config.failure_email
        logger.info(f"🚀 Executing flow {flow} of project {collection_name}")
        response = self.client.get("/executor", params=params)
        logger.info(f"Executor response: {response.text}")

        body = parse_json(response)
        reason = failure_reason(response, body)
        if reason is not None:
            logger.error(f"✗ Execution of flow {flow} failed: {reason}")
            raise ExecutionFailed(f"Execution of flow {flow} in project {collection_name} failed: {reason}", detail=response.text)

        logger.info(f"✓ Flow {flow} submitted (exec id {body.get('execid', '?')})")
        return body


def execute(collection_name: str, config: Optional[AzkabanConfig] = None) -> Dict[str, Any]:
    return Executor(config or AzkabanConfig()).execute(collection_name)
