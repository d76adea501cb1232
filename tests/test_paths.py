from pathlib import Path

import autobattle.data
from autobattle.data import paths


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_get_definitions_path_ships_inside_package() -> None:
    definitions_path = paths.get_definitions_path()

    assert definitions_path.name == "definitions"
    assert definitions_path.parent == Path(autobattle.data.__file__).resolve().parent
    assert (definitions_path / "units.json").exists()
    assert (definitions_path / "compositions.json").exists()


def test_get_definitions_path_independent_of_working_directory(monkeypatch, tmp_path: Path) -> None:
    expected = paths.get_definitions_path()
    monkeypatch.chdir(tmp_path)

    assert paths.get_definitions_path() == expected
