"""Worker that handles one invocation's records and orchestration."""

import json
from typing import Any

from transcribe_common.logging import setup_logging

from config import InvocationConfig
from domain import Deadline, iter_records
from exceptions import DispatchError
from handlers import Dispatcher

logger = setup_logging()


class Worker:
    """Dispatches every record of an invocation payload, failing on the first error."""

    def __init__(self, handler: Dispatcher, config: InvocationConfig):
        self._handler = handler
        self._config = config

    def run(self, event: Any, context: object | None = None) -> dict[str, Any]:
        """Processes an invocation payload and returns the Lambda response."""
        deadline = Deadline.from_context(context, self._config.invocation_timeout_seconds)
        request_id = getattr(context, "aws_request_id", None)

        records = iter_records(event)
        logger.info(
            "Invocation received",
            extra={"request_id": request_id, "record_count": len(records)},
        )

        results = []
        for index, record in enumerate(records):
            try:
                outcome = self._handler.handle(record, deadline)
            except DispatchError as e:
                logger.exception(
                    "Notification dispatch failed",
                    extra={
                        "request_id": request_id,
                        "record_index": index,
                        "error_type": type(e).__name__,
                        "retryable": e.retryable,
                        "error": str(e),
                        **e.log_fields(),
                    },
                )
                raise
            logger.info(
                "Notification dispatched",
                extra={
                    "request_id": request_id,
                    "record_index": index,
                    "job_name": outcome.job_name,
                    "outcome": outcome.status,
                    "media_uri": outcome.media_uri,
                    "event_id": outcome.event_id,
                },
            )
            results.append(outcome.model_dump(mode="json"))

        job_names = [r["job_name"] for r in results]
        logger.info(
            "Invocation processed",
            extra={"request_id": request_id, "job_names": job_names},
        )
        return {
            "statusCode": 200,
            "body": json.dumps(
                f"Started transcription jobs: {', '.join(job_names)}"
                if job_names
                else "No transcription jobs started"
            ),
            "results": results,
        }
