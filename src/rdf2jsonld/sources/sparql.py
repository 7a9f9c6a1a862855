"""Triple source backed by a SPARQL CONSTRUCT query."""

__all__ = ["triples_from_construct"]

from typing import Iterator, Optional

from loguru import logger
from rdflib import Graph

from rdf2jsonld.config import CONFIG
from rdf2jsonld.convert.accumulator import Triple
from rdf2jsonld.sparql.client import SPARQLClient
from rdf2jsonld.sparql.retry import RetryConfig, with_retry


def triples_from_construct(
    query: str,
    endpoint: str,
    timeout: Optional[int] = None,
    max_retries: Optional[int] = None,
    backoff_base: Optional[float] = None,
    client: Optional[SPARQLClient] = None,
) -> Iterator[Triple]:
    """
    Run a CONSTRUCT query and iterate over the resulting triples.

    Args:
        query: SPARQL CONSTRUCT (or DESCRIBE) query
        endpoint: SPARQL endpoint URL
        timeout: Query timeout in seconds (uses CONFIG default if None)
        max_retries: Max attempts (uses CONFIG default if None)
        backoff_base: Exponential backoff base (uses CONFIG default if None)
        client: Preconfigured client, mainly for tests

    Returns:
        Iterator over (subject, predicate, object) rdflib terms

    Raises:
        ValueError: On an empty query or max_retries < 1
        TimeoutError: If every attempt timed out
        ConnectionError: On HTTP/URL errors after all attempts
        RuntimeError: On any other failure after all attempts
    """
    if not query or not query.strip():
        raise ValueError("SPARQL query cannot be empty")

    if max_retries is None:
        max_retries = CONFIG["sparql_max_retries"]
    if backoff_base is None:
        backoff_base = CONFIG["sparql_retry_backoff"]
    config = RetryConfig(max_attempts=max_retries, backoff_base=backoff_base)
    if client is None:
        client = SPARQLClient(endpoint=endpoint, timeout=timeout)

    logger.debug(f"Sending CONSTRUCT query to {endpoint}")
    data = with_retry(lambda: client.query_ntriples(query), config)

    graph = Graph().parse(data=data, format="nt")
    logger.info(f"Received {len(graph):,} triples from {endpoint}")
    return graph.triples((None, None, None))
