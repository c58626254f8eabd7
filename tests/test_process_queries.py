import pytest

from search_server import (
    DocumentStatus,
    InvalidQueryError,
    SearchServer,
    process_queries,
    process_queries_joined,
)


@pytest.fixture
def server():
    search_server = SearchServer("and with")
    texts = [
        "funny pet and nasty rat",
        "funny pet with curly hair",
        "funny pet and not very nasty rat",
        "pet with rat and rat and rat",
        "nasty rat with curly hair",
    ]
    for document_id, text in enumerate(texts, start=1):
        search_server.add_document(document_id, text, DocumentStatus.ACTUAL, [1, 2])
    search_server.add_document(6, "nasty banned rat", DocumentStatus.BANNED, [9])
    return search_server


QUERIES = ["nasty rat -not", "not very funny nasty pet", "curly hair", "parrot"]


class TestProcessQueries:
    @pytest.mark.parametrize("min_queries_for_parallel", [1, 100])
    def test_matches_individual_searches(self, server, min_queries_for_parallel):
        results = process_queries(
            server, QUERIES, num_workers=4, min_queries_for_parallel=min_queries_for_parallel
        )
        assert results == [server.find_top_documents(query) for query in QUERIES]

    def test_preserves_query_order(self, server):
        results = process_queries(server, QUERIES, min_queries_for_parallel=1)
        assert len(results) == len(QUERIES)
        assert [document.id for document in results[2]] == [2, 5]
        assert results[3] == []

    def test_actual_status_only(self, server):
        [results] = process_queries(server, ["banned"])
        assert results == []

    def test_empty(self, server):
        assert process_queries(server, []) == []
        assert process_queries_joined(server, []) == []

    def test_invalid_query_propagates(self, server):
        with pytest.raises(InvalidQueryError):
            process_queries(server, ["cat", "--dog"], min_queries_for_parallel=1)


class TestProcessQueriesJoined:
    def test_concatenates_in_order(self, server):
        joined = process_queries_joined(server, QUERIES, min_queries_for_parallel=1)
        expected = [
            document for query in QUERIES for document in server.find_top_documents(query)
        ]
        assert joined == expected

    def test_keeps_repeated_documents(self, server):
        joined = process_queries_joined(server, ["curly", "hair"], min_queries_for_parallel=1)
        assert [document.id for document in joined] == [2, 5, 2, 5]
