"""Dependency injection configuration for the transcription-dispatcher service."""

from functools import lru_cache

from transcribe_common import setup_logging
from transcribe_common.aws import get_boto3_client

from config import AppConfig, load_config
from domain import JobNameBuilder
from handlers import Dispatcher
from infrastructure import AWSTranscribeService, S3StorageLocator
from infrastructure.interfaces import StorageLocator, TranscriptionService
from worker import Worker

logger = setup_logging()


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


@lru_cache(maxsize=1)
def get_transcription_service() -> TranscriptionService:
    """Returns the configured transcription service, reused across warm invocations."""
    client = get_boto3_client("transcribe", get_config().aws)
    logger.info("Transcribe client created", extra={"region": get_config().aws.region})
    return AWSTranscribeService(client)


def get_storage() -> StorageLocator:
    """Returns the storage locator."""
    return S3StorageLocator()


def get_handler() -> Dispatcher:
    """Returns the configured dispatcher."""
    config = get_config()
    return Dispatcher(
        transcription_service=get_transcription_service(),
        storage=get_storage(),
        job_names=JobNameBuilder(config.transcribe.job_name_strategy),
        output_bucket=config.transcribe.output_bucket,
        output_key_prefix=config.transcribe.output_key_prefix,
        language_code=config.transcribe.language_code,
        supported_formats=config.transcribe.supported_formats,
        request_timeout=config.invocation.request_timeout_seconds,
        input_bucket=config.invocation.input_bucket,
    )


def get_worker() -> Worker:
    """Returns the configured worker."""
    return Worker(get_handler(), get_config().invocation)
