# abstractknn

Building blocks for classifying short labelled texts, such as paper
abstracts. The package reads a labelled corpus and cleans its text. It then
turns each document into count vectors in two ways:

- **words**: counts over the most frequent words of the corpus, with
  stopwords removed;
- **tokens**: counts over a byte-pair vocabulary learned from the same texts.

Vectors are compared by cosine similarity.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library.

## Corpus format

A corpus is a directory holding a file named `raw.txt`. Each line of that
file is one document, written as a label, a colon and the text:

```
physics:We measure the decay rate of excited atoms in a cavity
biology:Protein folding pathways are studied with molecular dynamics
```

## Modules

### `abstractknn.corpus`

- `load_corpus(directory)` reads `raw.txt` in the directory and parses it. It
  raises `CorpusError` if the file cannot be opened, is empty, or is larger
  than `MAX_CORPUS_BYTES`.
- `parse_corpus(data)` parses `label:abstract` records, one per line, into a
  list of `Document`. A record without a `:` raises `CorpusError`.
- `Document` is a frozen dataclass with `label`, `text` and `words`.
- `clean_abstract(raw)` does the first cleaning step. It keeps ASCII letters,
  digits, spaces and newlines, and lower-cases the letters.
- `remove_stopwords(text)` returns the text with stopwords dropped, together
  with the kept words.

### `abstractknn.stopwords`

`STOPWORDS` is a frozenset of English stopwords. `is_stopword(word)` tests
membership.

### `abstractknn.vectors`

- `word_frequencies(documents)` counts each word over all documents, capped
  at 65535.
- `build_word_vocabulary(documents, size)` keeps the `size` most frequent
  words. When counts are tied, words stay in order of first appearance.
- `word_vector(words, vocabulary)` returns a `Vector` with one slot per
  vocabulary word and a final slot for unknown words.
- `learn_byte_pairs(texts, vocabulary_size)` returns a `BytePairModel`. It
  repeatedly merges the most frequent adjacent token pair. It stops after
  `vocabulary_size` merges, or once no pair occurs at least twice. Texts must
  contain only non-null ASCII characters.
- A `BytePairModel` holds four things: the `pairs` table, the learned
  `vocabulary` with its `counts`, and the `encoded` token sequence of each
  text.
- `expand(index)` returns the text a token stands for.
- `describe(index)` shows each merge of that text in parentheses.
- `token_vector(indices, vocabulary)` counts tokens by vocabulary position,
  with a final slot for other tokens.
- `Vector` holds integer `items` and their Euclidean `length`.
  `Vector.cosine(other)` returns the cosine similarity. The result is NaN when
  either vector is all zeros.

```python
from abstractknn.corpus import parse_corpus
from abstractknn.vectors import build_word_vocabulary, word_vector

docs = parse_corpus(b"a:atoms decay in a cavity\nb:protein folding pathways\n")
vocab = build_word_vocabulary(docs, 5000)
vectors = [word_vector(d.words, vocab) for d in docs]
print(vectors[0].cosine(vectors[1]))
```

### `abstractknn.formatting`

- `format_message(template, *args)` replaces each `%` with the next argument.
  Each argument is formatted according to its type.
- `format_bool` writes `true` or `false`.
- `format_integer` writes an integer in a base from 2 to 16.
- `format_float` writes two truncated decimals. It also handles `Infinity`
  and `NaN`.
- `int_from_string(text, base)` parses an unsigned integer and raises
  `ValueError` on an invalid digit.

### `abstractknn.ascii`

`is_alpha`, `is_decimal`, `is_hexadecimal` and `is_whitespace` classify a
single character or byte value.

### `abstractknn.linalg`

This module holds small frozen vector types `V2`, `V3` and `V4`. `V4` also
serves as `Quat`. There are also column-major matrices `M3` and `M4`. The
helpers are:

- quaternions: `quat_from_rotation`, `quat_mul`, `quat_rotate`;
- matrix builders: `m4_fill_diagonal`, `m4_from_rotation`,
  `m4_from_translation`, `m4_look_at`, `m4_perspective`;
- `unproject`.

`M4` supports:

- `transpose()`;
- `inverse()`, which raises `ValueError` when the matrix is singular;
- `mul_vector()`;
- `@` for matrix products;
- `forward()`, `right()` and `up()` for view matrices.

## What the package does not do

There is no command-line tool. The package does not contain the
nearest-neighbour classifier itself, and it does not evaluate results:

- no shuffling or train/validation/test splitting;
- no choice of `k`;
- no accuracy, confusion, precision, recall or F1 reporting;
- no McNemar test.

The modules above provide the corpus parsing, vectorisation and similarity
pieces on which such a classifier is built.