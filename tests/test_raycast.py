import pytest

from cubcaster.raycast import (
    MAX_DISTANCE,
    cast_horizontal,
    cast_ray,
    cast_vertical,
    deg2rad,
    distance,
    faces_west,
    in_view,
    is_solid,
)

BOX = ["11111", "10001", "10001", "10001", "11111"]
CENTRE = 160.0


def test_deg2rad_uses_game_pi():
    assert deg2rad(180) == pytest.approx(3.14)
    assert deg2rad(0) == 0


def test_distance_basic_and_symmetric():
    assert distance((0, 0), (3, 4)) == pytest.approx(5)
    assert distance((1, 2), (7, -3)) == pytest.approx(distance((7, -3), (1, 2)))
    assert distance((2.5, 2.5), (2.5, 2.5)) == 0


def test_is_solid():
    grid = ["111", "102", "111"]
    assert is_solid(grid, 3, 3, 32, 32) is True
    assert is_solid(grid, 3, 3, 96, 96) is False
    assert is_solid(grid, 3, 3, 160, 96) is True
    assert is_solid(grid, 3, 3, -1, 32) is False
    assert is_solid(grid, 3, 3, 200, 32) is False


def test_is_solid_short_row_is_not_solid():
    grid = ["111", "1", "111"]
    assert is_solid(grid, 3, 3, 150, 96) is False


@pytest.mark.parametrize("angle", [0, 45, 90, 135, 180, 225, 270, 315])
def test_hits_lie_in_walls(angle):
    hit = cast_ray(BOX, 5, 5, CENTRE, CENTRE, angle)
    assert hit.distance < MAX_DISTANCE
    assert is_solid(BOX, 5, 5, hit.x, hit.y)
    assert hit.distance == pytest.approx(distance((CENTRE, CENTRE), (hit.x, hit.y)))


def test_west_and_east_are_symmetric():
    west = cast_ray(BOX, 5, 5, CENTRE, CENTRE, 0)
    east = cast_ray(BOX, 5, 5, CENTRE, CENTRE, 180)
    assert west.vertical and east.vertical
    assert west.x < CENTRE < east.x
    assert west.distance == pytest.approx(east.distance, rel=1e-3)


def test_north_and_south_use_horizontal_lines():
    south = cast_ray(BOX, 5, 5, CENTRE, CENTRE, 90)
    north = cast_ray(BOX, 5, 5, CENTRE, CENTRE, 270)
    assert not south.vertical and not north.vertical
    assert north.y < CENTRE < south.y
    assert south.distance == pytest.approx(north.distance, rel=1e-3)


def test_degenerate_angles_give_max_distance():
    assert cast_horizontal(BOX, 5, 5, CENTRE, CENTRE, 0).distance == MAX_DISTANCE
    assert cast_horizontal(BOX, 5, 5, CENTRE, CENTRE, 180).distance == MAX_DISTANCE
    assert cast_vertical(BOX, 5, 5, CENTRE, CENTRE, 90).distance == MAX_DISTANCE
    assert cast_vertical(BOX, 5, 5, CENTRE, CENTRE, 270).distance == MAX_DISTANCE


def test_no_walls_gives_max_distance_and_clamps():
    grid = ["000", "000", "000"]
    hit = cast_horizontal(grid, 3, 3, 96, 96, 270)
    assert hit.distance == MAX_DISTANCE
    assert hit.y == 0
    assert hit.x >= 0


def test_in_view():
    assert in_view(0, 0)
    assert in_view(799.5, 0)
    assert not in_view(800, 0)
    assert not in_view(-1, 5)
    assert not in_view(5, 800)


def test_faces_west():
    assert not faces_west(90)
    assert faces_west(91)
    assert faces_west(269)
    assert not faces_west(270)
    assert not faces_west(0)