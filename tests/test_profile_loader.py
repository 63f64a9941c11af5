from pathlib import Path

from stickybar.engine import ProfileLoader, StickySidebarOptions

PROFILE_DIR = Path(__file__).resolve().parent.parent / "stickybar" / "profiles"


def write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


def test_load_valid_profile(tmp_path):
    path = write(tmp_path / "wide.yaml", "name: Wide\nsidebar:\n  top_spacing: 24\n  min_width: 900\n")
    loader = ProfileLoader()

    data = loader.load_profile(path)
    assert data["name"] == "Wide"
    assert loader.loaded_profiles["wide"] is data

    options = loader.apply_profile(data, StickySidebarOptions(bottom_spacing=8))
    assert options.top_spacing == 24
    assert options.bottom_spacing == 8
    assert options.min_width == 900


def test_unknown_option_is_rejected(tmp_path, capsys):
    path = write(tmp_path / "bad.yaml", "sidebar:\n  top_spacing: 1\n  sparkle: true\n")
    assert ProfileLoader().load_profile(path) is None
    assert "Unknown sidebar options: sparkle" in capsys.readouterr().out


def test_invalid_option_value_is_rejected(tmp_path):
    path = write(tmp_path / "neg.yaml", "sidebar:\n  min_width: -5\n")
    assert ProfileLoader().load_profile(path) is None


def test_yaml_error_and_missing_file_return_none(tmp_path, capsys):
    broken = write(tmp_path / "broken.yaml", "sidebar: [unclosed\n")
    loader = ProfileLoader()
    assert loader.load_profile(broken) is None
    assert loader.load_profile(tmp_path / "missing.yaml") is None
    out = capsys.readouterr().out
    assert "YAML parse error" in out
    assert "not found" in out


def test_empty_profile_returns_none(tmp_path):
    path = write(tmp_path / "empty.yaml", "")
    assert ProfileLoader().load_profile(path) is None


def test_apply_profile_without_data_returns_base():
    base = StickySidebarOptions(top_spacing=3)
    assert ProfileLoader().apply_profile(None, base) is base


def test_list_available_profiles_includes_bundled_profile(tmp_path):
    write(tmp_path / "other.yaml", "sidebar:\n  bottom_spacing: 4\n")
    profiles = ProfileLoader().list_available_profiles([PROFILE_DIR, tmp_path, tmp_path / "nope"])

    names = [profile["name"] for profile in profiles]
    assert "Docs layout" in names
    assert "other" in names
