"""Convert a triple sequence into a JSON-LD document."""

__all__ = ["rdf_to_jsonld"]

from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from rdf2jsonld.convert.accumulator import GraphAccumulator, Triple
from rdf2jsonld.convert.nodes import serialize_nodes


def rdf_to_jsonld(
    triples: Iterable[Triple],
    literal_type_policy: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """
    Convert RDF triples into a list of JSON-LD node objects.

    The sequence is drained completely before any node is built.
    ``rdf:type`` values become ``@type`` (a bare string when there is
    exactly one), every other predicate becomes an array of value objects.

    Args:
        triples: Single-pass iterable of (subject, predicate, object) rdflib terms
        literal_type_policy: Handling of literal rdf:type objects
            ("skip" or "null", uses CONFIG default if None)

    Returns:
        One node object per distinct subject, in first-seen order

    Raises:
        TripleSourceError: If the triple source fails; nothing is returned
        ValueError: On an unknown literal_type_policy

    Example:
        >>> g = Graph().parse(data=TTL, format="turtle")
        >>> rdf_to_jsonld(g.triples((None, None, None)))
        [{'@id': 'http://example.org/Alice', '@type': 'http://example.org/Person', ...}]
    """
    accumulator = GraphAccumulator(literal_type_policy).consume(triples)
    document = serialize_nodes(accumulator.state)
    logger.info(
        f"Converted {accumulator.consumed:,} triples "
        f"({accumulator.skipped:,} skipped) into {len(document):,} nodes"
    )
    return document
