import pytest

from contestkit.baggage import count_paths, main

CASES = [
    (1, 3, [(1, 1), (1, 3)]),
    (2, 2, [(1, 1), (2, 2)]),
    (3, 3, [(1, 1), (2, 2), (3, 3)]),
    (3, 3, [(1, 1), (2, 2), (1, 3)]),
    (4, 4, [(1, 1), (1, 3), (3, 3), (3, 1)]),
    (2, 3, [(1, 1), (2, 2), (1, 3)]),
]


def test_single_cell_has_one_path():
    assert count_paths(5, 5, [(3, 3)]) == 1


def test_straight_line_has_one_bridge():
    assert count_paths(1, 3, [(1, 1), (1, 3)]) == 1


def test_diagonal_has_two_bridges():
    assert count_paths(2, 2, [(1, 1), (2, 2)]) == 2


def test_far_apart_cells_have_no_path():
    assert count_paths(5, 5, [(1, 1), (5, 5)]) == 0


@pytest.mark.parametrize("n,m,cells", CASES)
def test_transpose_symmetry(n, m, cells):
    transposed = [(y, x) for x, y in cells]
    assert count_paths(n, m, cells) == count_paths(m, n, transposed)


@pytest.mark.parametrize("n,m,cells", CASES)
def test_bounded_by_two_choices_per_segment(n, m, cells):
    value = count_paths(n, m, cells)
    assert 0 <= value <= 2 ** (len(cells) - 1)


@pytest.mark.parametrize("n,m,cells", CASES)
def test_reversing_path_keeps_count(n, m, cells):
    assert count_paths(n, m, cells) == count_paths(n, m, list(reversed(cells)))


def test_grid_bounds_limit_bridges():
    wide = count_paths(3, 3, [(2, 1), (2, 3)])
    narrow = count_paths(1, 3, [(1, 1), (1, 3)])
    assert wide == narrow


def test_empty_path_rejected():
    with pytest.raises(ValueError):
        count_paths(3, 3, [])


def test_main_reads_cases(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("2\n2 2 1\n1 1\n2 2\n3 3 2\n1 1\n2 2\n3 3\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == [
        str(count_paths(2, 2, [(1, 1), (2, 2)])),
        str(count_paths(3, 3, [(1, 1), (2, 2), (3, 3)])),
    ]