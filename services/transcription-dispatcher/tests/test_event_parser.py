import json

import pytest

from conftest import s3_record
from domain import iter_records, parse_record
from exceptions import MalformedEventError


def test_bare_record_is_single_record() -> None:
    event = {"bucket": "in", "key": "a.wav"}
    assert iter_records(event) == [event]


def test_s3_envelope_yields_every_record() -> None:
    event = {"Records": [s3_record("in", "a.wav"), s3_record("in", "b.mp3")]}
    records = iter_records(event)

    assert [parse_record(r).object_key for r in records] == ["a.wav", "b.mp3"]


def test_sqs_wrapped_notifications_are_unwrapped() -> None:
    body = json.dumps({"Records": [s3_record("in", "a.wav")]})
    event = {"Records": [{"eventSource": "aws:sqs", "body": body}]}

    records = iter_records(event)

    assert len(records) == 1
    assert parse_record(records[0]).bucket_name == "in"


def test_s3_test_event_yields_nothing() -> None:
    event = {"Service": "Amazon S3", "Event": "s3:TestEvent", "Bucket": "in"}
    assert iter_records(event) == []


def test_sqs_body_with_s3_test_event_yields_nothing() -> None:
    body = json.dumps({"Service": "Amazon S3", "Event": "s3:TestEvent"})
    event = {"Records": [{"eventSource": "aws:sqs", "body": body}]}
    assert iter_records(event) == []


@pytest.mark.parametrize(
    "event",
    [
        None,
        ["not", "a", "dict"],
        {"Records": "nope"},
        {"Records": [{"eventSource": "aws:sqs", "body": "{not json"}]},
        {"Records": []},
        {"Records": [{"eventSource": "aws:sqs", "body": json.dumps({"Records": []})}]},
    ],
)
def test_unreadable_payloads_are_malformed(event) -> None:
    with pytest.raises(MalformedEventError):
        iter_records(event)


def test_parse_s3_record_fields() -> None:
    event = parse_record(s3_record("in", "folder/my+file.wav", request_id="R1"))

    assert event.bucket_name == "in"
    assert event.object_key == "folder/my file.wav"
    assert event.event_id == "R1:0055AED6DCD90281E5"
    assert event.event_name == "ObjectCreated:Put"
    assert event.size == 1024


def test_parse_bare_record_keeps_event_id() -> None:
    event = parse_record({"bucket": "in", "key": "a.wav", "event_id": "evt-1"})
    assert event.event_id == "evt-1"


def test_malformed_error_keeps_record() -> None:
    record = {"bucket": "in"}
    with pytest.raises(MalformedEventError) as exc_info:
        parse_record(record)
    assert exc_info.value.record is record
    assert exc_info.value.retryable is False
