"""
SPARQL utilities subpackage.

Contains the HTTP client and retry logic.
"""

from rdf2jsonld.sparql.client import (
    SPARQLClient,
    NTRIPLES_MIMETYPE,
)

from rdf2jsonld.sparql.retry import (
    with_retry,
    RetryConfig,
    classify_failure,
)

__all__ = [
    # client
    "SPARQLClient",
    "NTRIPLES_MIMETYPE",
    # retry
    "with_retry",
    "RetryConfig",
    "classify_failure",
]
