import math

import pytest

from abstractknn.corpus import Document
from abstractknn.vectors import (
    MAX_COUNT,
    Vector,
    build_word_vocabulary,
    learn_byte_pairs,
    token_vector,
    word_frequencies,
    word_vector,
)


def doc(*words):
    return Document(label="x", text=" ".join(words), words=tuple(words))


def test_vector_length():
    assert Vector((3, 4)).length == pytest.approx(5.0)


def test_cosine_with_itself_is_one():
    v = Vector((1, 2, 3))
    assert v.cosine(v) == pytest.approx(1.0)


def test_cosine_orthogonal_is_zero():
    assert Vector((1, 0)).cosine(Vector((0, 7))) == 0.0


def test_cosine_zero_vector_is_nan():
    result = Vector((0, 0)).cosine(Vector((1, 1)))
    assert math.isnan(result)
    assert str(result) == "nan"


def test_cosine_dimension_mismatch():
    with pytest.raises(ValueError):
        Vector((1,)).cosine(Vector((1, 2)))


def test_word_frequencies_counts_in_first_appearance_order():
    counts = word_frequencies([doc("b", "a", "b"), doc("c", "b")])
    assert counts == {"b": 3, "a": 1, "c": 1}
    assert list(counts) == ["b", "a", "c"]


def test_word_frequencies_capped():
    counts = word_frequencies([doc(*(["w"] * (MAX_COUNT + 10)))])
    assert counts["w"] == MAX_COUNT


def test_vocabulary_ordered_by_count_with_stable_ties():
    vocabulary = build_word_vocabulary([doc("x", "y", "z", "z", "y")], 10)
    assert list(vocabulary) == ["y", "z", "x"]
    assert vocabulary["y"] == 2


def test_vocabulary_size_limit():
    vocabulary = build_word_vocabulary([doc("x", "y", "z", "z")], 2)
    assert list(vocabulary) == ["z", "x"]


def test_vocabulary_negative_size():
    with pytest.raises(ValueError):
        build_word_vocabulary([], -1)


def test_word_vector_counts_unknown_in_last_slot():
    vocabulary = {"alpha": 5, "beta": 2}
    words = ["beta", "gamma", "alpha", "beta", "delta"]
    vector = word_vector(words, vocabulary)
    assert vector.items == (1, 2, 2)
    assert sum(vector.items) == len(words)


def test_byte_pair_single_merge():
    model = learn_byte_pairs(["abab"], 10)
    assert len(model.vocabulary) == 1
    token = model.vocabulary[0]
    assert model.pairs[token] == (ord("a"), ord("b"))
    assert model.encoded == ((token, token),)
    assert model.expand(token) == "ab"
    assert model.describe(token) == "(a)(b)"
    assert model.counts == (2,)


def test_byte_pair_nested_merges():
    model = learn_byte_pairs(["aaaaaaaa"], 10)
    assert len(model.vocabulary) == 2
    outer = model.vocabulary[1]
    assert model.expand(outer) == "aaaa"
    assert model.describe(outer) == "((a)(a))((a)(a))"
    assert model.encoded == ((outer, outer),)


def test_byte_pair_expansion_reconstructs_text():
    model = learn_byte_pairs(["aaaaaaaa", "abab"], 10)
    for text, tokens in zip(["aaaaaaaa", "abab"], model.encoded):
        assert "".join(model.expand(token) for token in tokens) == text


def test_byte_pair_vocabulary_limit():
    model = learn_byte_pairs(["aaaaaaaa"], 1)
    token = model.vocabulary[0]
    assert model.encoded == ((token,) * 4,)


def test_byte_pair_zero_vocabulary_keeps_characters():
    model = learn_byte_pairs(["hi there"], 0)
    assert model.vocabulary == ()
    assert model.encoded == (tuple(ord(c) for c in "hi there"),)


def test_byte_pair_merge_before_final_token_drops_it():
    model = learn_byte_pairs(["abc", "ab"], 1)
    token = model.vocabulary[0]
    assert model.encoded == ((token,), (token,))


def test_byte_pair_rejects_non_ascii():
    with pytest.raises(ValueError):
        learn_byte_pairs(["caf\u00e9"], 5)


def test_expand_unknown_index():
    model = learn_byte_pairs(["ab"], 5)
    with pytest.raises(IndexError):
        model.expand(len(model.pairs))


def test_token_vector_counts_other_tokens_last():
    vector = token_vector([200, 200, 97, 201], (200, 201))
    assert vector.items == (2, 1, 1)
    assert sum(vector.items) == 4