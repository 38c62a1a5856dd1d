import pytest

from dungeon_rooms.generators.rooms import (
    DoorAlreadyPresentError,
    InvalidLocationError,
    NoDoorPresentError,
    RoomBoundary,
    WallDirection,
    WallLocation,
)

N, S, E, W = WallDirection.NORTH, WallDirection.SOUTH, WallDirection.EAST, WallDirection.WEST


@pytest.fixture
def room():
    return RoomBoundary.create(width=4, length=3)


def test_walls_follow_footprint(room):
    assert len(room.get_wall(N)) == 4
    assert len(room.get_wall(S)) == 4
    assert len(room.get_wall(E)) == 3
    assert len(room.get_wall(W)) == 3


@pytest.mark.parametrize("width, length", [(1, 1), (2, 5), (6, 4)])
def test_fresh_room_has_no_doors(width, length):
    room = RoomBoundary.create(width, length)
    locations = list(room.wall_locations())
    assert len(locations) == 2 * width + 2 * length
    assert not any(room.has_door_at_location(loc) for loc in locations)
    assert room.door_locations() == []


@pytest.mark.parametrize("width, length", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_footprint_rejected(width, length):
    with pytest.raises(ValueError):
        RoomBoundary.create(width, length)


def test_valid_location_boundaries(room):
    assert room.is_valid_location(WallLocation(N, 3))
    assert not room.is_valid_location(WallLocation(N, 4))
    assert room.is_valid_location(WallLocation(S, 3))
    assert not room.is_valid_location(WallLocation(S, 4))
    assert room.is_valid_location(WallLocation(E, 2))
    assert not room.is_valid_location(WallLocation(E, 3))
    assert room.is_valid_location(WallLocation(W, 2))
    assert not room.is_valid_location(WallLocation(W, 3))
    assert not room.is_valid_location(WallLocation(N, -1))


def test_add_then_remove_door(room):
    loc = WallLocation(E, 1)
    room.add_door(loc)
    assert room.has_door_at_location(loc)

    room.remove_door(loc)
    assert not room.has_door_at_location(loc)


def test_adding_door_twice_raises(room):
    loc = WallLocation(N, 0)
    room.add_door(loc)
    with pytest.raises(DoorAlreadyPresentError):
        room.add_door(loc)
    assert room.has_door_at_location(loc)


def test_removing_missing_door_raises(room):
    with pytest.raises(NoDoorPresentError):
        room.remove_door(WallLocation(S, 2))


@pytest.mark.parametrize("loc", [WallLocation(N, 4), WallLocation(E, 3), WallLocation(W, -1)])
def test_invalid_location_raises(room, loc):
    with pytest.raises(InvalidLocationError):
        room.has_door_at_location(loc)
    with pytest.raises(InvalidLocationError):
        room.add_door(loc)
    with pytest.raises(InvalidLocationError):
        room.remove_door(loc)


def test_four_by_three_scenario(room):
    doors = [WallLocation(N, 0), WallLocation(S, 2), WallLocation(E, 1), WallLocation(W, 0)]
    for loc in doors:
        room.add_door(loc)

    for loc in doors:
        assert room.has_door_at_location(loc)

    others = [loc for loc in room.wall_locations() if loc not in doors]
    assert len(others) == 10
    assert not any(room.has_door_at_location(loc) for loc in others)
    assert sorted(others, key=str) == sorted([
        WallLocation(N, 1), WallLocation(N, 2), WallLocation(N, 3),
        WallLocation(S, 0), WallLocation(S, 1), WallLocation(S, 3),
        WallLocation(E, 0), WallLocation(E, 2),
        WallLocation(W, 1), WallLocation(W, 2),
    ], key=str)
    assert set(room.door_locations()) == set(doors)


def test_door_on_one_wall_does_not_affect_others(room):
    room.add_door(WallLocation(N, 1))
    assert not room.has_door_at_location(WallLocation(S, 1))
    assert not room.has_door_at_location(WallLocation(E, 1))
    assert room.get_wall(N).door_indices() == [1]


def test_wall_location_is_hashable():
    assert WallLocation(N, 1) == WallLocation(N, 1)
    assert len({WallLocation(N, 1), WallLocation(N, 1), WallLocation(S, 1)}) == 2
    assert str(WallLocation(W, 2)) == "west[2]"
