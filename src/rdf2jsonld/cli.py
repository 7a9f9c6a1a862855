"""
Command line interface for rdf2jsonld.

Converts an RDF file, or the result of a SPARQL CONSTRUCT query, into a
JSON-LD document printed on stdout. Logs go to stderr.

Usage:
    rdf2jsonld file data.ttl [--format=turtle] [--indent=2] [--literal_type_policy=skip]
    rdf2jsonld sparql "CONSTRUCT { ?s ?p ?o } WHERE { ?s ?p ?o } LIMIT 10" \
        --endpoint=https://query.wikidata.org/sparql [--timeout=120] [--retries=3]

Set RDF2JSONLD_LOG_LEVEL (e.g. INFO, DEBUG) for more verbose logs.
"""

__all__ = ["dumps", "file", "sparql", "main"]

import json
import sys
from pathlib import Path
from typing import Any, List, Optional, Union

import fire
from loguru import logger

from rdf2jsonld.config import CONFIG, log_level
from rdf2jsonld.convert import rdf_to_jsonld
from rdf2jsonld.sources import triples_from_construct, triples_from_file


def dumps(document: List[Any], indent: Optional[int] = None, compact: bool = False) -> str:
    """Render a JSON-LD document as JSON text."""
    if compact:
        return json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    if indent is None:
        indent = CONFIG["json_indent"]
    return json.dumps(document, ensure_ascii=False, indent=indent)


def file(
    path: Union[str, Path],
    format: Optional[str] = None,
    indent: Optional[int] = None,
    compact: bool = False,
    literal_type_policy: Optional[str] = None,
) -> None:
    """Convert an RDF file to JSON-LD.

    Args:
        path: RDF file to read
        format: rdflib parser name (guessed from the extension if omitted)
        indent: JSON indentation (default from CONFIG)
        compact: Print without whitespace
        literal_type_policy: "skip" or "null" for literal rdf:type objects
    """
    logger.info(f"Converting {path}")
    try:
        document = rdf_to_jsonld(triples_from_file(path, format), literal_type_policy)
    except Exception as e:
        logger.error(f"Conversion of {path} failed: {type(e).__name__}: {e}")
        raise
    print(dumps(document, indent, compact))


def sparql(
    query: str,
    endpoint: str,
    timeout: Optional[int] = None,
    retries: Optional[int] = None,
    indent: Optional[int] = None,
    compact: bool = False,
    literal_type_policy: Optional[str] = None,
) -> None:
    """Convert the result of a SPARQL CONSTRUCT query to JSON-LD.

    Args:
        query: CONSTRUCT or DESCRIBE query
        endpoint: SPARQL endpoint URL
        timeout: Query timeout in seconds (default from CONFIG)
        retries: Max attempts (default from CONFIG)
        indent: JSON indentation (default from CONFIG)
        compact: Print without whitespace
        literal_type_policy: "skip" or "null" for literal rdf:type objects
    """
    logger.info(f"Querying {endpoint}")
    try:
        triples = triples_from_construct(query, endpoint, timeout=timeout, max_retries=retries)
        document = rdf_to_jsonld(triples, literal_type_policy)
    except Exception as e:
        logger.error(f"Conversion of {endpoint} results failed: {type(e).__name__}: {e}")
        raise
    print(dumps(document, indent, compact))


def main() -> None:
    """Console script entry point."""
    logger.remove()
    logger.add(sys.stderr, level=log_level())
    fire.Fire({"file": file, "sparql": sparql})


if __name__ == "__main__":
    main()
