import pytest

from journals.similarity import cosine_similarity, tokenize


class TestTokenize:
    def test_lowercases_and_drops_stop_words(self):
        assert tokenize("I had a GREAT walk, and the sun was out!") == ["great", "walk", "sun", "out"]

    def test_none_is_empty(self):
        assert tokenize(None) == []


class TestCosineSimilarity:
    def test_identical_text_scores_one(self):
        text = "Had a great walk in the park"
        assert cosine_similarity(text, text) == pytest.approx(1.0)

    def test_disjoint_text_scores_zero(self):
        assert cosine_similarity("walk park", "tax report meeting") == 0.0

    def test_partial_overlap(self):
        # query [walk] vs [great, walk, felt, happy] -> 1 / (1 * 2)
        score = cosine_similarity("walk", "- Had a great walk - Felt happy")
        assert score == pytest.approx(0.5)

    def test_symmetric(self):
        a = "Ran five kilometers and felt proud"
        b = "Felt tired after the run, proud anyway"
        assert cosine_similarity(a, b) == cosine_similarity(b, a)

    def test_deterministic(self):
        a, b = "walk with my dog", "dog walk in the rain"
        assert cosine_similarity(a, b) == cosine_similarity(a, b)

    @pytest.mark.parametrize("a,b", [("", "walk"), ("walk", ""), ("the and", "walk"), (None, None)])
    def test_empty_vectors_score_zero(self, a, b):
        assert cosine_similarity(a, b) == 0.0

    def test_bounded(self):
        score = cosine_similarity("walk walk walk", "walk")
        assert 0.0 <= score <= 1.0
