"""Unit tests for tokenizer and TF-IDF index"""

import math

import pytest

from papertime.services.tfidf import CorpusBuilder, TfidfIndex, tokenize
from papertime.utils.exceptions import IndexStateError


DOCUMENTS = [
    "Attention is all you need: the Transformer.",
    "Deep residual learning for image recognition",
    "Attention-based models for speech recognition",
]


class TestTokenize:
    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Hello, World! Deep-Learning.") == [
            "hello",
            "world",
            "deep",
            "learning",
        ]

    def test_drops_short_tokens(self):
        assert tokenize("a an the of cat AI gpt") == ["the", "cat", "gpt"]

    def test_empty_and_whitespace(self):
        assert tokenize("") == []
        assert tokenize("   \n\t ") == []

    def test_is_deterministic(self):
        text = "Graph neural networks, graph kernels; and graphs."
        assert tokenize(text) == tokenize(text)


class TestTfidfIndex:
    def test_idf_uses_natural_log(self):
        index = TfidfIndex.build(DOCUMENTS)

        # "attention" appears in 2 of 3 documents
        assert index.idf("attention") == pytest.approx(math.log(3 / 2))
        # "residual" appears in 1 of 3
        assert index.idf("residual") == pytest.approx(math.log(3))

    def test_tfidf_weight(self):
        index = TfidfIndex.build(DOCUMENTS)

        # Doc 1 tokens: deep residual learning for image recognition (6)
        expected = (1 / 6) * math.log(3)
        assert index.tfidf("residual", 1) == pytest.approx(expected)

    def test_term_frequency_counts_repeats(self):
        index = TfidfIndex.build(["graph graph node", "edge list"])

        assert index.tfidf("graph", 0) == pytest.approx((2 / 3) * math.log(2))
        assert index.tfidf("node", 0) == pytest.approx((1 / 3) * math.log(2))

    def test_unknown_term_and_bad_index_return_zero(self):
        index = TfidfIndex.build(DOCUMENTS)

        assert index.tfidf("quantum", 0) == 0.0
        assert index.tfidf("attention", 99) == 0.0
        assert index.tfidf("attention", -1) == 0.0
        assert index.get_vector(5) == []

    def test_vocabulary_in_first_discovery_order(self):
        index = TfidfIndex.build(["beta alpha beta", "gamma alpha"])

        assert index.get_all_terms() == ["beta", "alpha", "gamma"]
        assert index.get_all_terms() == index.get_all_terms()

    def test_vector_aligned_with_vocabulary(self):
        index = TfidfIndex.build(DOCUMENTS)
        terms = index.get_all_terms()

        for doc_index in range(len(DOCUMENTS)):
            vector = index.get_vector(doc_index)
            assert len(vector) == index.vocabulary_size == len(terms)
            assert vector == [index.tfidf(t, doc_index) for t in terms]

    def test_single_document_has_zero_idf(self):
        index = TfidfIndex.build(["transformers for language modelling"])

        assert index.document_count == 1
        assert all(w == 0.0 for w in index.get_vector(0))

    def test_empty_corpus(self):
        index = TfidfIndex.build([])

        assert index.document_count == 0
        assert index.get_all_terms() == []

    def test_document_without_tokens(self):
        index = TfidfIndex.build(["a b c", "graph networks"])

        assert index.get_vector(0) == [0.0, 0.0]

    def test_rebuild_is_identical(self):
        first = TfidfIndex.build(DOCUMENTS)
        second = TfidfIndex.build(DOCUMENTS)

        assert first.get_all_terms() == second.get_all_terms()
        for doc_index in range(len(DOCUMENTS)):
            assert first.get_vector(doc_index) == second.get_vector(doc_index)


class TestCorpusBuilder:
    def test_stores_lowercased_documents(self):
        builder = CorpusBuilder()
        builder.add_document("Hello WORLD")

        assert builder.documents == ("hello world",)

    def test_build_matches_pure_constructor(self):
        builder = CorpusBuilder()
        for doc in DOCUMENTS:
            builder.add_document(doc)

        built = builder.build()
        direct = TfidfIndex.build(DOCUMENTS)

        assert built.get_all_terms() == direct.get_all_terms()
        assert built.get_vector(0) == direct.get_vector(0)

    def test_build_is_idempotent(self):
        builder = CorpusBuilder()
        builder.add_document("graph neural networks")

        assert builder.build() is builder.build()
        assert builder.is_built

    def test_add_after_build_raises(self):
        builder = CorpusBuilder()
        builder.add_document("graph neural networks")
        builder.build()

        with pytest.raises(IndexStateError):
            builder.add_document("another document")
