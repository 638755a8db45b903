import pytest

from core import settings
from presets.vignette_presets import VignettePresetsManager, get_default_manager

PRESET_NAMES = [
    'cinematic', 'sepia', 'oval', 'dramatic', 'vintage', 'horror', 'dream', 'focus',
    'glowing', 'cyberpunk', 'split', 'retro', 'oldfilm', 'sunset', 'duotone', 'neon',
]


@pytest.fixture(scope='module')
def manager():
    return VignettePresetsManager()


def test_all_presets_load_in_order(manager):
    assert manager.names() == PRESET_NAMES
    assert len(manager) == 16


def test_get_returns_a_copy(manager):
    preset = manager.get('cyberpunk')
    assert preset['rotation'] == 30.0
    assert preset['shape_type'] == 1
    preset['rotation'] = 0.0
    assert manager.get('cyberpunk')['rotation'] == 30.0


def test_unknown_preset(manager):
    assert manager.get('nope') is None
    assert 'nope' not in manager
    assert 'neon' in manager


@pytest.mark.parametrize("name", PRESET_NAMES)
def test_presets_use_known_keys_within_slider_ranges(manager, name):
    preset = manager.get(name)
    assert set(preset) <= set(settings.DEFAULTS)
    normalized = settings.normalize_settings(preset)
    for key, value in preset.items():
        assert normalized[key] == value, key


def test_retro_is_a_star(manager):
    params = settings.to_params(manager.get('retro'))
    assert params.shape == 3
    assert params.blend_mode == 1
    assert params.vignette_color == (0.4, 0.0, 0.4)


def test_missing_file_leaves_manager_empty(tmp_path, capsys):
    manager = VignettePresetsManager(str(tmp_path / 'missing.json'))
    assert len(manager) == 0
    assert 'Error loading' in capsys.readouterr().out


def test_broken_json_leaves_manager_empty(tmp_path):
    path = tmp_path / 'broken.json'
    path.write_text('{"vignette_presets": [')
    assert VignettePresetsManager(str(path)).names() == []


def test_entries_without_settings_are_skipped(tmp_path):
    path = tmp_path / 'partial.json'
    path.write_text('{"vignette_presets": [{"name": "a"}, {"settings": {}}, '
                    '{"name": "b", "settings": {"opacity": 0.1}}]}')
    assert VignettePresetsManager(str(path)).names() == ['b']


def test_default_manager_is_shared():
    assert get_default_manager() is get_default_manager()
