from pathrelax.paths import PathBuilder


def test_path_walks_parents_back_to_source():
    builder = PathBuilder("A", {"B": "A", "C": "B", "D": "C"})
    assert builder.path("D") == ["A", "B", "C", "D"]
    assert builder.path("B") == ["A", "B"]


def test_source_is_trivial_path():
    assert PathBuilder("A", {}).path("A") == ["A"]


def test_missing_parent_means_unreachable():
    builder = PathBuilder("A", {"B": "A", "D": "C"})
    assert builder.path("X") is None
    # D's chain stops at C, which has no parent and is not the source
    assert builder.path("D") is None


def test_falsy_vertices():
    builder = PathBuilder(0, {1: 0, None: 1, "": None})
    assert builder.path("") == [0, 1, None, ""]


def test_paths_for_all_vertices():
    builder = PathBuilder(1, {2: 1, 3: 2})
    assert builder.paths([1, 2, 3, 4]) == {
        1: [1],
        2: [1, 2],
        3: [1, 2, 3],
        4: None,
    }
