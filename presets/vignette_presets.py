# -*- coding: utf-8 -*-
"""
Manages loading and accessing the Vignetter presets from the
vignette_presets.json file.
"""

import json
import os
from tqdm import tqdm

DEFAULT_PRESETS_PATH = os.path.join(os.path.dirname(__file__), 'vignette_presets.json')


class VignettePresetsManager:
    """
    Loads the named vignette presets and hands out copies of their settings.

    A preset is a partial settings dict: only the keys it lists override the
    current filter settings, everything else is left as it was.
    """

    def __init__(self, json_path=None):
        self.json_path = json_path or DEFAULT_PRESETS_PATH
        self.presets = {}
        self._load_presets()

    def _load_presets(self):
        """
        Loads the presets file into self.presets, keeping file order.

        The final structure is:
        self.presets['cinematic'] = {'inner_radius': 0.75, ...}
        """
        try:
            with open(self.json_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (IOError, json.JSONDecodeError) as e:
            print(f"Error loading or parsing {os.path.basename(self.json_path)}: {e}")
            return

        entries = data.get("vignette_presets", [])
        for entry in tqdm(entries, desc="Loading vignette presets", disable=len(entries) < 100):
            name = entry.get("name")
            settings = entry.get("settings")
            if name and isinstance(settings, dict):
                self.presets[name] = settings

    def names(self):
        """Preset names in file order."""
        return list(self.presets)

    def get(self, name):
        """
        Returns a copy of the preset's settings, or None if it is unknown.
        """
        settings = self.presets.get(name)
        return dict(settings) if settings is not None else None

    def __contains__(self, name):
        return name in self.presets

    def __len__(self):
        return len(self.presets)


_default_manager = None


def get_default_manager():
    """Shared manager for the bundled presets file, loaded on first use."""
    global _default_manager
    if _default_manager is None:
        _default_manager = VignettePresetsManager()
    return _default_manager
