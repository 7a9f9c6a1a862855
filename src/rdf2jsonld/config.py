"""
Converter configuration and settings.

All tunables are centralized here. Functions take explicit arguments
and fall back to these values when an argument is left as None.
"""

import os
from typing import Dict, Any, Tuple

__all__ = ["CONFIG", "LITERAL_TYPE_POLICIES", "LOG_LEVEL_ENV", "log_level"]

# ====================================================================
# CONVERTER CONFIGURATION
# ====================================================================

CONFIG: Dict[str, Any] = {
    # Application Metadata
    "app_version": "0.1.0",
    "app_name": "rdf2jsonld",
    # Conversion
    "literal_type_policy": "skip",  # What to do with literal objects of rdf:type ("skip" or "null")
    "json_indent": 2,  # Indentation of printed documents (None for compact output)
    # External Services
    "sparql_timeout": 120,  # SPARQL query timeout in seconds
    "sparql_max_retries": 3,  # Max attempts for a CONSTRUCT query
    "sparql_retry_backoff": 2.0,  # Exponential backoff base (wait time = backoff^attempt seconds)
    "user_agent": "rdf2jsonld/0.1",
    # Logging
    "log_level": "WARNING",  # Level of the CLI stderr sink
}

# "skip" drops the triple, "null" keeps a None placeholder under @type
LITERAL_TYPE_POLICIES: Tuple[str, ...] = ("skip", "null")

LOG_LEVEL_ENV = "RDF2JSONLD_LOG_LEVEL"


def log_level() -> str:
    """Return the CLI log level, honouring the environment override."""
    return os.environ.get(LOG_LEVEL_ENV, CONFIG["log_level"]).upper()
