"""
HTTP client for SPARQL endpoints - minimal dependencies (urllib only).

Fetches CONSTRUCT results as N-Triples so they can be fed to the converter.
Works in both native Python and browser (Pyodide/WASM) environments.
"""

__all__ = [
    "SPARQLClient",
    "NTRIPLES_MIMETYPE",
]

import sys
import urllib.parse
import urllib.request
from typing import Optional

from rdf2jsonld.config import CONFIG

# Patch urllib for Pyodide/WASM (browser) compatibility
if "pyodide" in sys.modules:
    import pyodide_http
    pyodide_http.patch_all()

NTRIPLES_MIMETYPE = "application/n-triples"


class SPARQLClient:
    """
    Simple SPARQL client using urllib.

    Example:
        >>> client = SPARQLClient("https://query.wikidata.org/sparql")
        >>> nt_bytes = client.query_ntriples("CONSTRUCT { ?s ?p ?o } WHERE { ?s ?p ?o } LIMIT 10")
    """

    def __init__(
        self,
        endpoint: str,
        timeout: Optional[int] = None,
        user_agent: Optional[str] = None,
    ):
        """
        Initialize SPARQL client.

        Args:
            endpoint: SPARQL endpoint URL
            timeout: Query timeout in seconds (uses CONFIG default if None)
            user_agent: User agent string for requests (uses CONFIG default if None)
        """
        self.endpoint = endpoint
        self.timeout = timeout if timeout is not None else CONFIG["sparql_timeout"]
        self.user_agent = user_agent or CONFIG["user_agent"]

    def _request(self, query: str, accept: str) -> bytes:
        """Execute HTTP request to SPARQL endpoint."""
        if not query or not query.strip():
            raise ValueError("SPARQL query cannot be empty")

        headers = {
            "Accept": accept,
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": self.user_agent,
        }
        data = urllib.parse.urlencode({"query": query}).encode("utf-8")
        req = urllib.request.Request(self.endpoint, data=data, headers=headers, method="POST")
        with urllib.request.urlopen(req, timeout=self.timeout) as response:
            return response.read()

    def query_ntriples(self, query: str) -> bytes:
        """
        Execute a CONSTRUCT or DESCRIBE query, returning N-Triples bytes.

        Raises:
            ValueError: On an empty query
            urllib.error.URLError: On network errors
            urllib.error.HTTPError: On HTTP errors
        """
        return self._request(query, NTRIPLES_MIMETYPE)

    def query_json(self, query: str) -> bytes:
        """Execute a SELECT or ASK query, returning SPARQL JSON results bytes."""
        return self._request(query, "application/sparql-results+json")
