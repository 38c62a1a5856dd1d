from dungeon_rooms.settings import RoomKitSettings, get_config_dir, load_settings, save_settings


def test_defaults_when_missing(tmp_path):
    assert load_settings(tmp_path / "settings.json") == RoomKitSettings()


def test_round_trip(tmp_path):
    path = tmp_path / "settings.json"
    settings = RoomKitSettings(catalog_path="/data/rooms", strict_validation=True, mesh_seed=5)
    save_settings(settings, path)
    assert load_settings(path) == settings


def test_invalid_file_falls_back(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert load_settings(path) == RoomKitSettings()
    assert "Ignoring invalid settings file" in caplog.text


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"validate_catalog": false, "legacy": 1}', encoding="utf-8")
    assert load_settings(path) == RoomKitSettings(validate_catalog=False)


def test_default_location(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    save_settings(RoomKitSettings(mesh_seed=1))
    assert (get_config_dir() / "settings.json").exists()
    assert load_settings().mesh_seed == 1


def test_unreadable_path_falls_back(tmp_path, caplog):
    directory = tmp_path / "settings.json"
    directory.mkdir()
    assert load_settings(directory) == RoomKitSettings()
    assert "Ignoring invalid settings file" in caplog.text
