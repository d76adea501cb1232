import pytest

from autobattle.domain import ALL_POSITIONS, BoardPosition, InvalidPositionError, create_position


@pytest.mark.parametrize("row, slot", [("front", 0), ("front", 1), ("front", 2), ("back", 0), ("back", 1)])
def test_valid_positions(row: str, slot: int) -> None:
    position = create_position(row, slot)  # type: ignore[arg-type]

    assert position.row == row
    assert position.slot == slot


@pytest.mark.parametrize("row, slot", [("front", 3), ("front", -1), ("back", 2), ("back", -1), ("middle", 0)])
def test_out_of_range_positions_rejected(row: str, slot: int) -> None:
    with pytest.raises(InvalidPositionError):
        create_position(row, slot)  # type: ignore[arg-type]


def test_invalid_position_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="Back row slot must be 0-1"):
        BoardPosition("back", 2)


def test_positions_compare_by_value() -> None:
    assert create_position("front", 1) == BoardPosition("front", 1)
    assert create_position("front", 1) != BoardPosition("back", 1)


def test_position_string() -> None:
    assert str(create_position("back", 1)) == "back-1"


def test_scan_order_is_front_then_back_left_to_right() -> None:
    assert [str(pos) for pos in ALL_POSITIONS] == ["front-0", "front-1", "front-2", "back-0", "back-1"]
