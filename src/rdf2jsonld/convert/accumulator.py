"""
Graph accumulator - groups triples by subject, then predicate.

Dicts keep insertion order, so subjects and predicates come out in the
order they were first seen.
"""

__all__ = ["GraphAccumulator", "Triple"]

from typing import Any, Dict, Iterable, List, Optional, Tuple

from loguru import logger
from rdflib import Literal

from rdf2jsonld.config import CONFIG, LITERAL_TYPE_POLICIES
from rdf2jsonld.convert.errors import TripleSourceError
from rdf2jsonld.convert.terms import (
    is_supported_object,
    is_supported_subject,
    object_value,
    predicate_key,
    subject_key,
)
from rdf2jsonld.rdf.namespaces import RDF_TYPE, TYPE_KEY

Triple = Tuple[Any, Any, Any]


class GraphAccumulator:
    """
    Per-conversion grouping state.

    ``state`` maps a subject key to a mapping of predicate keys to the
    values collected for them, in input order. Values of ``rdf:type`` are
    kept under ``@type`` as bare identifiers, everything else as full
    JSON-LD value fragments.

    Example:
        >>> acc = GraphAccumulator().consume(graph.triples((None, None, None)))
        >>> acc.state["http://example.org/Alice"]["@type"]
        ['http://example.org/Person']
    """

    def __init__(self, literal_type_policy: Optional[str] = None):
        """
        Initialize an empty accumulator.

        Args:
            literal_type_policy: "skip" drops literal objects of rdf:type,
                "null" keeps a None placeholder (uses CONFIG default if None)

        Raises:
            ValueError: On an unknown policy
        """
        if literal_type_policy is None:
            literal_type_policy = CONFIG["literal_type_policy"]
        if literal_type_policy not in LITERAL_TYPE_POLICIES:
            raise ValueError(
                f"Unknown literal_type_policy {literal_type_policy!r}, "
                f"expected one of {LITERAL_TYPE_POLICIES}"
            )
        self.literal_type_policy = literal_type_policy
        self.state: Dict[str, Dict[str, List[Any]]] = {}
        self.consumed = 0
        self.skipped = 0

    def add(self, triple: Triple) -> bool:
        """Add one triple. Returns False when the triple was dropped."""
        self.consumed += 1
        subject, predicate, obj = triple

        if not is_supported_subject(subject) or not is_supported_object(obj):
            logger.debug(f"Dropping triple with unsupported term: {triple!r}")
            self.skipped += 1
            return False

        key = predicate_key(predicate)
        is_type = key == str(RDF_TYPE)

        if is_type and isinstance(obj, Literal):
            logger.warning(f"Literal object of rdf:type on {subject_key(subject)}: {obj!r}")
            if self.literal_type_policy == "skip":
                self.skipped += 1
                return False

        predicates = self.state.setdefault(subject_key(subject), {})
        value = object_value(obj)

        if is_type:
            # Literals have no @id; the "null" policy carries None through
            predicates.setdefault(TYPE_KEY, []).append(value.get("@id"))
        else:
            predicates.setdefault(key, []).append(value)
        return True

    def consume(self, triples: Iterable[Triple]) -> "GraphAccumulator":
        """
        Drain a single-pass triple sequence into the accumulator.

        Args:
            triples: Iterable of (subject, predicate, object) tuples

        Returns:
            self, for chaining

        Raises:
            TripleSourceError: If the source fails to produce a triple
        """
        iterator = iter(triples)
        position = 0
        while True:
            try:
                triple = next(iterator)
            except StopIteration:
                break
            except Exception as e:
                logger.error(f"Triple source failed after {position} triples: {e}")
                raise TripleSourceError(position, e) from e
            position += 1
            self.add(triple)
        return self
