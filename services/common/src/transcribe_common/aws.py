import logging

import boto3
from botocore.config import Config

from transcribe_common.config import AWSConfig

logger = logging.getLogger(__name__)


def get_boto3_client(service_name: str, config: AWSConfig):
    """
    Initialize and return a boto3 client for the given AWS service.

    Timeouts are bounded by the config and botocore's own retry loop is capped
    at ``config.max_attempts`` so a single invocation never retries silently.

    Returns:
        botocore.client.BaseClient: Configured client
    """
    try:
        return boto3.client(
            service_name,
            region_name=config.region,
            endpoint_url=config.endpoint_url or None,
            config=Config(
                connect_timeout=config.connect_timeout,
                read_timeout=config.read_timeout,
                retries={"total_max_attempts": config.max_attempts, "mode": "standard"},
            ),
        )
    except Exception as e:
        logger.exception(
            "AWS Client Initialization Failed",
            extra={
                "service_name": service_name,
                "region": config.region,
            },
        )
        raise e
