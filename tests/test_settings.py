"""
Tests for ExplorerSettings load/save
"""

import json

from systems.galaxy import GalaxyGenerator
from ui.settings import ExplorerSettings


def test_missing_file_gives_defaults(tmp_path):
    settings = ExplorerSettings.load(str(tmp_path / "nope.json"))

    assert settings.galaxy.num_stars == 100
    assert settings.galaxy.max_attempts == 1000
    assert settings.camera.min_zoom == 0.5
    assert settings.camera.max_zoom == 3.0
    assert settings.camera.transition_zoom == 5.0
    assert settings.input.ui_band_height == 150
    assert settings.audio.falloff == 200.0


def test_default_window_fits_default_galaxy(capsys):
    settings = ExplorerSettings()
    width, height = settings.graphics.resolution

    generator = GalaxyGenerator(seed=9, max_attempts=settings.galaxy.max_attempts)
    stars = generator.generate(settings.galaxy.num_stars, width, height)

    assert len(stars) == settings.galaxy.num_stars
    assert "Warning" not in capsys.readouterr().out


def test_save_and_load(tmp_path):
    path = str(tmp_path / "settings.json")
    settings = ExplorerSettings()
    settings.galaxy.num_stars = 150
    settings.galaxy.seed = 4242
    settings.camera.transition_duration = 2.5
    settings.graphics.resolution = (1600, 1200)
    settings.save(path)

    loaded = ExplorerSettings.load(path)
    assert loaded.galaxy.num_stars == 150
    assert loaded.galaxy.seed == 4242
    assert loaded.camera.transition_duration == 2.5
    assert loaded.graphics.resolution == (1600, 1200)


def test_unknown_keys_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({
        "galaxy": {"num_stars": 12, "spiral_arms": 7},
        "plugins": {"x": 1},
    }))

    loaded = ExplorerSettings.load(str(path))
    assert loaded.galaxy.num_stars == 12
    assert not hasattr(loaded.galaxy, "spiral_arms")


def test_malformed_file_gives_defaults(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text("{ not json")

    loaded = ExplorerSettings.load(str(path))
    assert loaded.galaxy.num_stars == 100
    assert "Error loading settings" in capsys.readouterr().out
