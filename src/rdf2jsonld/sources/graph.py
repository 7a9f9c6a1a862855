"""
Triple sources backed by rdflib graphs.

Parsing is delegated to rdflib; these helpers only hand its triples
to the converter.
"""

__all__ = ["triples_from_graph", "load_graph", "triples_from_file"]

from pathlib import Path
from typing import Iterator, Optional, Union

from loguru import logger
from rdflib import Graph
from rdflib.util import guess_format

from rdf2jsonld.convert.accumulator import Triple
from rdf2jsonld.rdf.namespaces import COMMON_NAMESPACES

DEFAULT_FORMAT = "turtle"


def triples_from_graph(graph: Graph) -> Iterator[Triple]:
    """Iterate over every triple of an rdflib graph."""
    return graph.triples((None, None, None))


def load_graph(path: Union[str, Path], format: Optional[str] = None) -> Graph:
    """
    Parse an RDF file into an rdflib Graph.

    Args:
        path: File to parse
        format: rdflib parser name (guessed from the extension if None,
            falling back to turtle)

    Returns:
        Parsed graph with COMMON_NAMESPACES bound

    Example:
        >>> g = load_graph("people.ttl")
        >>> len(g)
        12
    """
    path = Path(path)
    if format is None:
        format = guess_format(str(path)) or DEFAULT_FORMAT

    graph = Graph()
    for prefix, uri in COMMON_NAMESPACES.items():
        graph.bind(prefix, uri)
    graph.parse(str(path), format=format)
    logger.info(f"Parsed {len(graph):,} triples from {path} ({format})")
    return graph


def triples_from_file(path: Union[str, Path], format: Optional[str] = None) -> Iterator[Triple]:
    """Parse an RDF file and iterate over its triples."""
    return triples_from_graph(load_graph(path, format))
