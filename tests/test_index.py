import pytest

from search_server.execution import ExecutionPolicy
from search_server.index import InvertedIndex


@pytest.fixture
def index():
    inverted_index = InvertedIndex()
    inverted_index.add(1, ["cat", "dog", "dog", "bird"])
    inverted_index.add(2, ["dog", "fish"])
    return inverted_index


def assert_views_mirror(inverted_index: InvertedIndex, document_ids: list[int]) -> None:
    """Every (term, document, frequency) is present in both views."""
    for document_id in document_ids:
        for term, frequency in inverted_index.word_frequencies(document_id).items():
            assert inverted_index.postings(term)[document_id] == frequency


class TestInvertedIndex:
    def test_add(self, index):
        assert index.vocabulary_size == 4
        assert dict(index.word_frequencies(1)) == {"cat": 0.25, "dog": 0.5, "bird": 0.25}
        assert dict(index.postings("dog")) == {1: 0.5, 2: 0.5}
        assert index.document_frequency("dog") == 2
        assert_views_mirror(index, [1, 2])

    def test_add_without_words(self, index):
        index.add(3, [])
        assert index.word_frequencies(3) == {}
        assert index.vocabulary_size == 4

    def test_add_existing_document(self, index):
        with pytest.raises(KeyError):
            index.add(1, ["parrot"])
        assert "parrot" not in index

    @pytest.mark.parametrize("policy", list(ExecutionPolicy))
    def test_remove_prunes_terms(self, index, policy):
        index.remove(1, policy)
        # cat and bird only occurred in document 1
        assert "cat" not in index
        assert "bird" not in index
        assert index.vocabulary_size == 2
        assert dict(index.postings("dog")) == {2: 0.5}
        assert index.document_frequency("cat") == 0
        assert index.word_frequencies(1) == {}
        assert_views_mirror(index, [2])

    def test_remove_unknown(self, index):
        index.remove(42)
        assert index.vocabulary_size == 4
        assert_views_mirror(index, [1, 2])

    def test_remove_all(self, index):
        index.remove(1)
        index.remove(2)
        assert index.vocabulary_size == 0
        assert index.postings("dog") == {}

    def test_contains(self, index):
        assert index.contains("fish", 2)
        assert not index.contains("fish", 1)
        assert not index.contains("parrot", 1)
