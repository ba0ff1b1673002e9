import pytest

from macrokata.kata.coordinates import (
    Coordinate2D,
    Coordinate3D,
    Coordinate4D,
    coord,
    run_hygienic_macros,
)


def test_coord_two_values():
    assert coord(1, 2) == Coordinate2D(x=1, y=2)


def test_coord_three_values():
    assert coord(1, 2, 3) == Coordinate3D(x=1, y=2, z=3)


def test_coord_four_values():
    assert coord(1, 2, 3, 1000) == Coordinate4D(x=1, y=2, z=3, t=1000)


def test_as_3d_drops_time():
    assert coord(1, 2, 3, 1000).as_3d() == Coordinate3D(1, 2, 3)


def test_as_2d_drops_depth():
    assert Coordinate3D(1, 2, 3).as_2d() == Coordinate2D(1, 2)


@pytest.mark.parametrize("args", [(), (1,), (1, 2, 3, 4, 5)])
def test_coord_wrong_number_of_values(args):
    with pytest.raises(TypeError):
        coord(*args)


def test_debug_layout():
    assert str(Coordinate2D(1, 2)) == "Coordinate { x: 1, y: 2 }"
    assert str(Coordinate4D(1, 2, 3, 1000)) == "Coordinate { x: 1, y: 2, z: 3, t: 1000 }"


def test_run_hygienic_macros(capsys):
    run_hygienic_macros()
    assert capsys.readouterr().out == "Coordinate { x: 1, y: 2 }\n"