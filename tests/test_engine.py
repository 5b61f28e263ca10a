import io

import pytest

from docindex.engine import (
    SearchResult,
    format_results,
    load_index,
    main,
    parse_index,
    rank,
    search,
    write_results,
)
from docindex.indexer import IndexLayout, InvertedIndex


def _sample(layout):
    index = InvertedIndex(layout)
    index.set_posting("apple", "d2", 2)
    index.set_posting("apple", "d1", 1)
    index.set_posting("banana", "d1", 4)
    index.set_posting("banana", "d3", 1)
    index.set_posting("cherry", "d3", 7)
    return index


@pytest.mark.parametrize("layout", list(IndexLayout))
def test_parse_index_round_trips_dumps(layout):
    original = _sample(layout)
    restored = parse_index(original.dumps(), layout)
    assert restored.words() == original.words()
    for word in original.words():
        assert restored.postings(word) == original.postings(word)
    assert restored.dumps() == original.dumps()


@pytest.mark.parametrize("layout", list(IndexLayout))
def test_load_index_reads_saved_file(tmp_path, layout):
    original = _sample(layout)
    path = tmp_path / "index.txt"
    original.save(path)
    loaded = load_index(path, layout)
    assert loaded.dumps() == original.dumps()


def test_parse_index_rejects_truncated_text():
    with pytest.raises(ValueError):
        parse_index("2\napple\n1\nd1 1\n")


def test_parse_index_rejects_non_numeric_count():
    with pytest.raises(ValueError):
        parse_index("one\napple\n")


def test_load_index_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_index(tmp_path / "absent.txt")


@pytest.mark.parametrize("layout", list(IndexLayout))
def test_search_sums_frequencies_per_document(layout):
    index = _sample(layout)
    results = {r.document: r.frequency for r in search(index, "apple banana")}
    expected = {}
    for word in ("apple", "banana"):
        for document, frequency in index.postings(word):
            expected[document] = expected.get(document, 0) + frequency
    assert results == expected


@pytest.mark.parametrize("layout", list(IndexLayout))
def test_search_counts_repeated_query_words_once(layout):
    index = _sample(layout)
    assert search(index, "cherry cherry  cherry") == search(index, "cherry")


def test_search_ignores_unknown_words():
    index = _sample(IndexLayout.TREE)
    assert search(index, "durian") == []
    assert search(index, "durian cherry") == search(index, "cherry")


def test_search_tree_layout_sorts_by_document():
    results = search(_sample(IndexLayout.TREE), "apple banana cherry")
    names = [r.document for r in results]
    assert names == sorted(names)


def test_search_vector_layout_keeps_first_seen_order():
    results = search(_sample(IndexLayout.VECTOR), "apple banana")
    assert [r.document for r in results] == ["d2", "d1", "d3"]


def test_rank_orders_by_descending_frequency_and_is_stable():
    results = [
        SearchResult("a", 1),
        SearchResult("b", 3),
        SearchResult("c", 1),
        SearchResult("d", 3),
    ]
    ranked = rank(results)
    assert [r.document for r in ranked] == ["b", "d", "a", "c"]


def test_rank_limits_to_ten_by_default():
    results = [SearchResult(f"doc{i}", i) for i in range(15)]
    ranked = rank(results)
    assert len(ranked) == 10
    assert ranked[0] == SearchResult("doc14", 14)
    assert rank(results, 3) == ranked[:3]


def test_format_results_layout():
    text = format_results([SearchResult("x", 1), SearchResult("y", 5)], 0.5)
    lines = text.splitlines()
    assert lines[0] == "Tempo de busca: 0.500000"
    assert lines[1:] == ["y: 5", "x: 1"]
    assert text.endswith("\n")


def test_format_results_with_no_results():
    assert format_results([], 0.0) == "Tempo de busca: 0.000000\n"


def test_write_results_matches_format(tmp_path):
    results = [SearchResult("doc", 2)]
    path = tmp_path / "out.txt"
    write_results(results, path, 1.25)
    assert path.read_text(encoding="utf-8") == format_results(results, 1.25)


def test_main_writes_ranking(tmp_path, monkeypatch, capsys):
    index_path = tmp_path / "index.txt"
    _sample(IndexLayout.TREE).save(index_path)
    output = tmp_path / "result.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO("banana cherry\n"))

    assert main([str(index_path), str(output)]) == 0

    assert "Query: " in capsys.readouterr().out
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Tempo de busca: ")
    expected = rank(search(_sample(IndexLayout.TREE), "banana cherry"))
    assert lines[1:] == [f"{r.document}: {r.frequency}" for r in expected]


def test_main_missing_index_returns_error(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("apple\n"))
    output = tmp_path / "result.txt"
    assert main([str(tmp_path / "absent.txt"), str(output)]) == 1
    assert not output.exists()