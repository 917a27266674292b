"""
Transcription Dispatcher.

Lambda entry point: starts an Amazon Transcribe job for every audio object
created in the input bucket.
"""

from ddtrace import patch_all

from dependencies import get_worker

patch_all()


def handler(event, context):
    """Lambda handler for S3 object-created notifications."""
    return get_worker().run(event, context)
