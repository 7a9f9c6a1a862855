"""Tests for rdf2jsonld/sources/"""

import socket
import urllib.error

import pytest
from rdflib import Graph, Literal, URIRef

from rdf2jsonld import rdf_to_jsonld
from rdf2jsonld.sources import (
    load_graph,
    triples_from_construct,
    triples_from_file,
    triples_from_graph,
)

EX = "http://example.org/"

TURTLE = """
@prefix ex: <http://example.org/> .
ex:Alice a ex:Person ;
    ex:name "Alice"@en ;
    ex:knows [ ex:name "Anon" ] .
"""

NTRIPLES = (
    b'<http://example.org/Alice> <http://www.w3.org/1999/02/22-rdf-syntax-ns#type> '
    b'<http://example.org/Person> .\n'
    b'<http://example.org/Alice> <http://example.org/name> "Alice"@en .\n'
)


class FakeClient:
    def __init__(self, responses):
        self.responses = list(responses)
        self.queries = []

    def query_ntriples(self, query):
        self.queries.append(query)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr("rdf2jsonld.sparql.retry.time.sleep", lambda seconds: None)


def test_triples_from_graph():
    graph = Graph()
    graph.add((URIRef(EX + "a"), URIRef(EX + "p"), Literal("1")))
    assert list(triples_from_graph(graph)) == [
        (URIRef(EX + "a"), URIRef(EX + "p"), Literal("1"))
    ]


def test_load_graph_guesses_format(tmp_path):
    path = tmp_path / "people.ttl"
    path.write_text(TURTLE, encoding="utf-8")

    graph = load_graph(path)
    assert len(graph) == 4
    assert URIRef("http://schema.org/") in {ns for _, ns in graph.namespaces()}


def test_triples_from_file_to_document(tmp_path):
    path = tmp_path / "people.ttl"
    path.write_text(TURTLE, encoding="utf-8")

    document = rdf_to_jsonld(triples_from_file(path))
    by_id = {node["@id"]: node for node in document}

    alice = by_id[EX + "Alice"]
    assert alice["@type"] == EX + "Person"
    blank_id = alice[EX + "knows"][0]["@id"]
    assert blank_id.startswith("_:")
    assert by_id[blank_id][EX + "name"] == [
        {"@value": "Anon", "@type": "http://www.w3.org/2001/XMLSchema#string"}
    ]


def test_triples_from_construct():
    client = FakeClient([NTRIPLES])
    triples = triples_from_construct("CONSTRUCT WHERE { ?s ?p ?o }", "http://sparql.test", client=client)

    document = rdf_to_jsonld(triples)
    assert document == [
        {
            "@id": EX + "Alice",
            "@type": EX + "Person",
            EX + "name": [{"@value": "Alice", "@language": "en"}],
        }
    ]
    assert client.queries == ["CONSTRUCT WHERE { ?s ?p ?o }"]


def test_triples_from_construct_retries(no_sleep):
    client = FakeClient([OSError("flaky"), NTRIPLES])
    triples = list(
        triples_from_construct("CONSTRUCT WHERE { ?s ?p ?o }", "http://sparql.test", max_retries=2, client=client)
    )
    assert len(triples) == 2
    assert len(client.queries) == 2


def test_triples_from_construct_empty_query():
    with pytest.raises(ValueError, match="empty"):
        triples_from_construct("   ", "http://sparql.test", client=FakeClient([]))


@pytest.mark.parametrize(
    "error, expected",
    [
        (TimeoutError("timed out"), TimeoutError),
        (urllib.error.URLError(socket.timeout("timed out")), TimeoutError),
        (urllib.error.URLError("refused"), ConnectionError),
        (urllib.error.HTTPError("http://sparql.test", 503, "Service Unavailable", None, None), ConnectionError),
        (ConnectionResetError("reset by peer"), ConnectionError),
        (ValueError("boom"), RuntimeError),
    ],
)
def test_triples_from_construct_error_mapping(error, expected):
    client = FakeClient([error])
    with pytest.raises(expected) as excinfo:
        triples_from_construct("CONSTRUCT WHERE { ?s ?p ?o }", "http://sparql.test", max_retries=1, client=client)
    assert excinfo.value.__cause__ is error


@pytest.mark.parametrize("max_retries", [0, -1])
def test_triples_from_construct_needs_one_attempt(max_retries):
    client = FakeClient([NTRIPLES])
    with pytest.raises(ValueError, match="max_attempts"):
        triples_from_construct("CONSTRUCT WHERE { ?s ?p ?o }", "http://sparql.test", max_retries=max_retries, client=client)
    assert client.queries == []
