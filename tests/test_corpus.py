import pytest

from abstractknn.corpus import (
    CORPUS_FILE_NAME,
    CorpusError,
    Document,
    clean_abstract,
    load_corpus,
    parse_corpus,
    remove_stopwords,
)
from abstractknn.stopwords import is_stopword


def test_clean_abstract_lowercases_and_drops_punctuation():
    assert clean_abstract("Hello, World! 42") == "hello world 42"


def test_clean_abstract_drops_non_ascii_bytes():
    assert clean_abstract(b"Caf\xe9 au Lait") == "caf au lait"


def test_clean_abstract_keeps_newlines_but_drops_tabs():
    assert clean_abstract("a\tb\nc") == "ab\nc"


def test_remove_stopwords_keeps_leading_whitespace_of_kept_words():
    text, words = remove_stopwords("the cat and the hat")
    assert words == ("cat", "hat")
    assert text == " cat hat"


def test_remove_stopwords_first_word_has_no_prefix():
    text, words = remove_stopwords("cat the")
    assert text == "cat"
    assert words == ("cat",)


def test_remove_stopwords_result_has_no_stopwords():
    _, words = remove_stopwords("we study the growth of crystals in a lattice")
    assert words
    assert not any(is_stopword(word) for word in words)
    assert text_words_match("we study the growth of crystals in a lattice")


def text_words_match(text):
    kept_text, words = remove_stopwords(text)
    return tuple(kept_text.split()) == words


def test_remove_stopwords_only_whitespace():
    assert remove_stopwords("   \n ") == ("", ())


def test_parse_corpus_reads_labels_and_words():
    documents = parse_corpus(b"physics:The Atom is small\nbiology:Cells divide\n")
    assert [d.label for d in documents] == ["physics", "biology"]
    assert documents[0].words == ("atom", "small")
    assert documents[1].words == ("cells", "divide")
    assert documents[1].text == "cells divide"


def test_parse_corpus_without_trailing_newline():
    documents = parse_corpus("x:alpha beta")
    assert documents == [Document(label="x", text="alpha beta", words=("alpha", "beta"))]


def test_parse_corpus_missing_separator():
    with pytest.raises(CorpusError):
        parse_corpus(b"a:first line\nno separator here")


def test_parse_corpus_empty():
    assert parse_corpus(b"") == []


def test_load_corpus_reads_file(tmp_path):
    (tmp_path / CORPUS_FILE_NAME).write_bytes(b"cs:Neural Networks\n")
    documents = load_corpus(tmp_path)
    assert len(documents) == 1
    assert documents[0].label == "cs"
    assert documents[0].words == ("neural", "networks")


def test_load_corpus_missing_file(tmp_path):
    with pytest.raises(CorpusError):
        load_corpus(tmp_path)


def test_load_corpus_empty_file(tmp_path):
    (tmp_path / CORPUS_FILE_NAME).write_bytes(b"")
    with pytest.raises(CorpusError):
        load_corpus(tmp_path)