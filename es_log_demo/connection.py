import logging

from elasticsearch import ApiError, Elasticsearch, TransportError

from es_log_demo.config import DemoConfig
from es_log_demo.errors import ServiceConnectionError

logger = logging.getLogger(__name__)

# Exceptions raised by the client for failed requests
CLIENT_ERRORS = (ApiError, TransportError)


def create_client(config: DemoConfig) -> Elasticsearch:
    """
    Create the Elasticsearch client used for the whole run.

    Node discovery (sniffing) is switched off, so the client only talks to
    the configured host. A single info request checks that the host answers
    before the client is handed out.

    Args:
        config: Demo configuration holding the host and optional API key

    Returns:
        Elasticsearch client instance

    Raises:
        ServiceConnectionError: if the client cannot be built from the config
            or the host does not answer
    """
    options = {
        "sniff_on_start": False,
        "sniff_before_requests": False,
        "sniff_on_node_failure": False,
    }
    if config.es_api_key:
        options["api_key"] = config.es_api_key

    try:
        es_client = Elasticsearch(config.es_host, **options)
    except (ValueError, TypeError) as e:
        raise ServiceConnectionError(
            f"Failed to connect to Elasticsearch at {config.es_host}: {str(e)}"
        ) from e

    try:
        es_client.info()
    except CLIENT_ERRORS as e:
        raise ServiceConnectionError(
            f"Elasticsearch at {config.es_host} is unreachable: {str(e)}"
        ) from e

    logger.info(f"Connected to Elasticsearch at {config.es_host}")
    return es_client
