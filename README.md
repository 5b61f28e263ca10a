# docindex

`docindex` builds an inverted index over a collection of plain-text documents
and answers word queries against it. Each indexed word records the documents
it occurs in and how many times it occurs in each. A query's documents are
scored by adding up the frequencies of the distinct query words, and the best
ten are reported.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building an index

Put a file named `files.txt` in the data directory. It lists the documents to
index, one per line, relative to that directory. Then run:

```
docindex-index DATA_DIR index.txt
docindex-index DATA_DIR index.txt --layout vector
```

Each listed document is read whole and split into words at space characters
only. Other whitespace, newlines included, stays part of the word next to it,
and no case folding or punctuation stripping is done. The command prints the
time spent building the index (`TEMPO DE CONSTRUÇÃO DO ÍNDICE = ...`) and
writes the index to the output file. If a file cannot be opened, it prints
`Erro ao abrir o arquivo <name>` to standard error and exits with status 1.

The index file is plain text:

```
<number of words>
<word>
<number of documents holding it>
<document> <frequency>
...
```

## Searching

```
docindex-search index.txt results.txt
docindex-search index.txt results.txt --layout vector
```

The command prompts with `Query: ` and reads one line from standard input.
Repeated words in the query count once. `results.txt` begins with a line
`Tempo de busca: <seconds>`, followed by up to ten `document: score` lines,
the highest score first. Documents with equal scores keep the order in which
the search produced them.

## Layouts

`docindex.indexer.IndexLayout` has two members, and both commands take a
`--layout` option with their values:

- `IndexLayout.TREE` (`tree`, the default) stores words and each word's
  documents in binary search trees. The index file lists them in level order
  of those trees, and search results come sorted by document name.
- `IndexLayout.VECTOR` (`vector`) keeps words and documents in the order they
  were first seen, and search results come in the order documents were first
  met.

## Using it from Python

```python
from docindex.textutils import read_file_list
from docindex.indexer import IndexLayout, build_index
from docindex.engine import load_index, search, rank, format_results, write_results

files = read_file_list("data", "files.txt")
index = build_index(files, IndexLayout.TREE)
index.save("index.txt")

loaded = load_index("index.txt", IndexLayout.TREE)
results = search(loaded, "some query words")
for result in rank(results, 10):
    print(result.document, result.frequency)
print(format_results(results, 0.0))
write_results(results, "results.txt", 0.0)
```

`InvertedIndex` can also be filled by hand with `add_occurrence`,
`set_posting` and `add_document`, inspected with `words()` and
`postings(word)`, and rendered with `dumps()`. `parse_index` reads the text
that `dumps` produces.

The package also has two containers that can be used on their own:

- `docindex.bst.BinarySearchTree`: an unbalanced binary search tree that
  keeps equal keys rather than replacing them, with lookups by key or by
  sorted position, min/max access and in-, pre-, post- and level-order
  iteration.
- `docindex.hash_table.HashTable`: a chained hash table with a fixed number
  of buckets and an optional `hash_fn(key, table_size)`.

## What it does not do

The saved index is rebuilt in full each time; there is no way to add
documents to an existing index file. Queries are matched word for word,
with no stemming, case folding or phrase search.