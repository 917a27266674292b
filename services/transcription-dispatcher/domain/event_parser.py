"""Parsing of raw invocation payloads into notification records."""

import json
import urllib.parse
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from exceptions import MalformedEventError

from .models import NotificationEvent

S3_TEST_EVENT = "s3:TestEvent"


def iter_records(event: Any) -> list[Mapping[str, Any]]:
    """
    Flattens an invocation payload into individual notification records.

    Supports a bare ``{"bucket", "key"}`` record, an S3 notification
    envelope, and SQS messages whose bodies carry S3 notifications. S3 test
    events carry no object and yield no records.

    Raises:
        MalformedEventError: If the payload or an SQS body cannot be read,
            or an envelope holds no records.
    """
    if not isinstance(event, Mapping):
        raise MalformedEventError("event is not a JSON object", event)

    if event.get("Event") == S3_TEST_EVENT:
        return []

    if "Records" not in event:
        return [event]

    records = event["Records"]
    if not isinstance(records, list):
        raise MalformedEventError("'Records' is not a list", event)
    if not records:
        raise MalformedEventError("'Records' is empty", event)

    flattened: list[Mapping[str, Any]] = []
    for record in records:
        if isinstance(record, Mapping) and record.get("eventSource") == "aws:sqs":
            try:
                body = json.loads(record.get("body") or "{}")
            except (TypeError, ValueError) as e:
                raise MalformedEventError("SQS body is not valid JSON", record, e) from e
            flattened.extend(iter_records(body))
        else:
            flattened.append(record)
    return flattened


def parse_record(record: Any) -> NotificationEvent:
    """
    Extracts bucket and key from a single notification record.

    Raises:
        MalformedEventError: If bucket or key is missing or not a string.
    """
    if not isinstance(record, Mapping):
        raise MalformedEventError("record is not a JSON object", record)

    if "s3" in record:
        bucket, key, extra = _from_s3_record(record)
    else:
        bucket, key = record.get("bucket"), record.get("key")
        extra = {"event_id": record.get("event_id")}

    if not isinstance(bucket, str) or not bucket:
        raise MalformedEventError("missing bucket name", record)
    if not isinstance(key, str) or not key:
        raise MalformedEventError("missing object key", record)

    try:
        return NotificationEvent(bucket_name=bucket, object_key=key, **extra)
    except ValidationError as e:
        raise MalformedEventError(str(e), record, e) from e


def _from_s3_record(record: Mapping[str, Any]) -> tuple[Any, Any, dict[str, Any]]:
    s3_info = record.get("s3")
    if not isinstance(s3_info, Mapping):
        raise MalformedEventError("'s3' is not an object", record)

    bucket_info = s3_info.get("bucket")
    object_info = s3_info.get("object")
    if not isinstance(bucket_info, Mapping) or not isinstance(object_info, Mapping):
        raise MalformedEventError("'s3.bucket' or 's3.object' missing", record)

    key = object_info.get("key")
    if isinstance(key, str):
        key = urllib.parse.unquote_plus(key)

    response = record.get("responseElements")
    request_id = response.get("x-amz-request-id") if isinstance(response, Mapping) else None
    sequencer = object_info.get("sequencer")
    event_id = f"{request_id}:{sequencer}" if request_id and sequencer else request_id

    return (
        bucket_info.get("name"),
        key,
        {
            "event_id": event_id,
            "event_name": record.get("eventName"),
            "size": object_info.get("size"),
        },
    )
