import pytest

from contestkit.bermuda import MAX_REFLECTIONS, count_reflections, main

CASES = [
    (6, 2, 2, -1, -1),
    (4, 1, 1, 1, -1),
    (10, 1, 3, 2, 1),
    (7, 2, 1, -1, 3),
    (12, 5, 2, 3, -2),
    (9, 1, 1, 1, 2),
]


def test_straight_into_origin():
    assert count_reflections(6, 2, 2, -1, -1) == 0


def test_resting_ball_never_escapes():
    assert count_reflections(5, 1, 1, 0, 0) == -1


def test_periodic_orbit_never_escapes():
    assert count_reflections(4, 1, 1, 1, -1) == -1


@pytest.mark.parametrize("n,x,y,vx,vy", CASES)
def test_mirror_symmetry(n, x, y, vx, vy):
    assert count_reflections(n, x, y, vx, vy) == count_reflections(n, y, x, vy, vx)


@pytest.mark.parametrize("n,x,y,vx,vy", CASES)
def test_result_in_range(n, x, y, vx, vy):
    value = count_reflections(n, x, y, vx, vy)
    assert value == -1 or 0 <= value < MAX_REFLECTIONS


def test_direct_hit_on_other_corners_needs_no_reflection():
    assert count_reflections(8, 2, 3, -2, 5) == count_reflections(8, 2, 2, -1, -1)
    assert count_reflections(8, 3, 2, 5, -2) == count_reflections(8, 2, 2, -1, -1)


def test_main_reads_cases(tmp_path, capsys):
    path = tmp_path / "in.txt"
    path.write_text("3\n6 2 2 -1 -1\n5 1 1 0 0\n10 1 3 2 1\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == [
        str(count_reflections(6, 2, 2, -1, -1)),
        str(count_reflections(5, 1, 1, 0, 0)),
        str(count_reflections(10, 1, 3, 2, 1)),
    ]