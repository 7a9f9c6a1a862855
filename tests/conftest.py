import os

import pytest
from hypothesis import settings
from hypothesis.errors import InvalidArgument
from loguru import logger
from rdflib import BNode, Literal, URIRef
from rdflib.namespace import XSD

from rdf2jsonld.rdf.namespaces import RDF_TYPE

try:
    settings.register_profile(
        "ci",
        settings(max_examples=100, deadline=None, derandomize=True),
    )
except InvalidArgument:
    # profile already registered in this session
    pass
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


EX = "http://example.org/"


def ex(name: str) -> URIRef:
    return URIRef(EX + name)


@pytest.fixture
def people_triples():
    """Small mixed graph: typed named nodes, a blank node and literals."""
    return [
        (ex("Alice"), RDF_TYPE, ex("Person")),
        (ex("Alice"), ex("name"), Literal("Alice", lang="en")),
        (ex("Bob"), RDF_TYPE, ex("Person")),
        (ex("Bob"), RDF_TYPE, ex("Employee")),
        (ex("Bob"), ex("age"), Literal("42", datatype=XSD.integer)),
        (BNode("b0"), ex("knows"), ex("Carol")),
    ]


@pytest.fixture
def log_records():
    """Collect (level, message) pairs emitted through loguru."""
    records = []
    handler_id = logger.add(
        lambda message: records.append(
            (message.record["level"].name, message.record["message"])
        ),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)
