import json
from pathlib import Path

import pytest

from autobattle.data.errors import DataLoadError, DataReferenceError, DataValidationError
from autobattle.data.repositories import CompositionsRepository, UnitsRepository
from autobattle.domain import BoardPosition


def test_units_repo_loads_shipped_units() -> None:
    repo = UnitsRepository()

    warrior = repo.get("warrior")
    knight = repo.get("knight")

    assert (warrior.max_hp, warrior.attack) == (3, 2)
    assert (knight.max_hp, knight.attack) == (4, 1)


def test_compositions_repo_loads_shipped_compositions() -> None:
    repo = CompositionsRepository()

    ids = [composition.id for composition in repo.all()]
    mixed = repo.get("mixed")

    assert {"simple_warrior", "simple_knight", "balanced", "mixed"}.issubset(ids)
    assert ids == sorted(ids)
    assert [(p.unit_id, str(p.position)) for p in mixed.placements] == [
        ("warrior", "front-0"),
        ("warrior", "front-2"),
        ("knight", "back-0"),
        ("knight", "back-1"),
    ]


def test_units_repo_get_missing_raises(tmp_path: Path) -> None:
    definitions_dir = _make_definitions_dir(tmp_path)
    _write_json(definitions_dir / "units.json", {"warrior": {"max_hp": 3, "attack": 2}})
    repo = UnitsRepository(base_path=definitions_dir)

    with pytest.raises(KeyError):
        repo.get("dragon")


def test_missing_file_raises_load_error(tmp_path: Path) -> None:
    repo = UnitsRepository(base_path=tmp_path)

    with pytest.raises(DataLoadError):
        repo.all()


def test_invalid_json_raises_load_error(tmp_path: Path) -> None:
    (tmp_path / "units.json").write_text("{not json", encoding="utf-8")
    repo = UnitsRepository(base_path=tmp_path)

    with pytest.raises(DataLoadError):
        repo.all()


def test_top_level_must_be_object(tmp_path: Path) -> None:
    _write_json(tmp_path / "units.json", [1, 2, 3])
    repo = UnitsRepository(base_path=tmp_path)

    with pytest.raises(DataValidationError):
        repo.all()


@pytest.mark.parametrize(
    "payload",
    [
        {"warrior": {"max_hp": 3}},
        {"warrior": {"max_hp": 3, "attack": 2, "speed": 1}},
        {"warrior": {"max_hp": "3", "attack": 2}},
        {"warrior": {"max_hp": 0, "attack": 2}},
        {"warrior": {"max_hp": 3, "attack": -1}},
        {"warrior": {"max_hp": True, "attack": 1}},
    ],
)
def test_units_repo_rejects_bad_unit(tmp_path: Path, payload: dict) -> None:
    _write_json(tmp_path / "units.json", payload)
    repo = UnitsRepository(base_path=tmp_path)

    with pytest.raises(DataValidationError):
        repo.all()


def test_compositions_repo_builds_positions(tmp_path: Path) -> None:
    _write_units(tmp_path)
    _write_json(
        tmp_path / "compositions.json",
        {"duo": {"name": "Duo", "placements": [{"unit_id": "warrior", "row": "back", "slot": 1}]}},
    )

    composition = CompositionsRepository(base_path=tmp_path).get("duo")

    assert composition.name == "Duo"
    assert composition.placements[0].position == BoardPosition("back", 1)


def test_compositions_repo_rejects_out_of_range_slot(tmp_path: Path) -> None:
    _write_units(tmp_path)
    _write_json(
        tmp_path / "compositions.json",
        {"bad": {"name": "Bad", "placements": [{"unit_id": "warrior", "row": "back", "slot": 2}]}},
    )

    with pytest.raises(DataValidationError):
        CompositionsRepository(base_path=tmp_path).all()


def test_compositions_repo_rejects_reused_position(tmp_path: Path) -> None:
    _write_units(tmp_path)
    placement = {"unit_id": "warrior", "row": "front", "slot": 0}
    _write_json(tmp_path / "compositions.json", {"bad": {"name": "Bad", "placements": [placement, placement]}})

    with pytest.raises(DataValidationError):
        CompositionsRepository(base_path=tmp_path).all()


def test_compositions_repo_rejects_missing_unit_reference(tmp_path: Path) -> None:
    _write_units(tmp_path)
    _write_json(
        tmp_path / "compositions.json",
        {"bad": {"name": "Bad", "placements": [{"unit_id": "dragon", "row": "front", "slot": 0}]}},
    )

    with pytest.raises(DataReferenceError):
        CompositionsRepository(base_path=tmp_path).all()


def _make_definitions_dir(tmp_path: Path) -> Path:
    definitions_dir = tmp_path / "definitions"
    definitions_dir.mkdir()
    return definitions_dir


def _write_units(path: Path) -> None:
    _write_json(path / "units.json", {"warrior": {"max_hp": 3, "attack": 2}})


def _write_json(path: Path, payload: object) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")
