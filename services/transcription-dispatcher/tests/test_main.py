import main


def test_handler_delegates_to_worker(monkeypatch) -> None:
    calls = []

    class RecordingWorker:
        def run(self, event, context):
            calls.append((event, context))
            return {"statusCode": 200}

    monkeypatch.setattr(main, "get_worker", lambda: RecordingWorker())

    response = main.handler({"bucket": "in", "key": "a.wav"}, None)

    assert response == {"statusCode": 200}
    assert calls == [({"bucket": "in", "key": "a.wav"}, None)]
