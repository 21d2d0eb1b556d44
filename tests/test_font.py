import os

from render_engine.font import FontManager, candidate_paths, canonical_family, estimate_text_width, font_search_dirs
from render_engine.font.table import LINUX, MACOS, WINDOWS
from render_engine.utils.config import Config


def test_fallback_width_is_heuristic(tmp_path):
    fonts = FontManager(platform=LINUX, search_dirs=[str(tmp_path)])
    assert fonts.measure_text("hello", "Arial", 16.0) == 5 * 16.0 * 0.5
    assert fonts.measure_text("", "Arial", 16.0) == 0.0
    assert estimate_text_width("abc", 10.0) == 15.0


def test_unusable_font_file_falls_back(tmp_path):
    target = tmp_path / "liberation"
    target.mkdir()
    (target / "LiberationSans-Regular.ttf").write_bytes(b"not a font")
    fonts = FontManager(platform=LINUX, search_dirs=[str(tmp_path)])

    assert fonts.load_font_variant("Arial", False, False) is None
    assert fonts.measure_text("abcd", "Arial", 12.0, bold=True) == 24.0


def test_family_lists_and_misses_are_cached(tmp_path):
    fonts = FontManager(platform=LINUX, search_dirs=[str(tmp_path)])
    assert fonts.load_font_variant("system-ui, sans-serif") is None
    assert ("system-ui, sans-serif", False, False) in fonts._font_data
    fonts.clear()
    assert fonts._font_data == {}


def test_canonical_family_aliases():
    assert canonical_family("Times New Roman") == "times"
    assert canonical_family("serif") == "times"
    assert canonical_family("'Courier New'") == "courier"
    assert canonical_family("system-ui") == "arial"
    assert canonical_family("Comic Sans") == "fallback"


def test_windows_variants_pick_distinct_files():
    dirs = ["C:\\Windows\\Fonts"]
    regular = candidate_paths("georgia", False, False, WINDOWS, dirs)
    bold_italic = candidate_paths("georgia", True, True, WINDOWS, dirs)
    assert regular[0].endswith("georgia.ttf")
    assert bold_italic[0].endswith("georgiaz.ttf")


def test_linux_candidates_search_every_directory():
    paths = candidate_paths("monospace", False, False, LINUX, ["/a", "/b"])
    assert paths == [
        os.path.join("/a", "liberation/LiberationMono-Regular.ttf"),
        os.path.join("/a", "dejavu/DejaVuSansMono.ttf"),
        os.path.join("/b", "liberation/LiberationMono-Regular.ttf"),
        os.path.join("/b", "dejavu/DejaVuSansMono.ttf"),
    ]


def test_macos_has_no_fallback_for_unknown_families():
    assert candidate_paths("Comic Sans", False, False, MACOS, ["/Library/Fonts"]) == []
    assert candidate_paths("anything", False, False, None, ["/x"]) == []


def test_search_dirs_follow_environment(monkeypatch):
    monkeypatch.setenv("WINDIR", "C:\\Windows")
    monkeypatch.setenv("HOME", "/home/user")
    assert font_search_dirs(WINDOWS) == [os.path.join("C:\\Windows", "Fonts")]
    assert font_search_dirs(LINUX)[-1] == os.path.join("/home/user", ".local", "share", "fonts")
    assert font_search_dirs(MACOS)[0] == os.path.join("/home/user", "Library", "Fonts")
    assert font_search_dirs(None) == []


def test_from_config_prepends_extra_dirs(tmp_path):
    config = Config(str(tmp_path / "config.json"))
    config.set("fonts.extra_dirs", [str(tmp_path)])
    fonts = FontManager.from_config(config)
    assert fonts.search_dirs[0] == str(tmp_path)
