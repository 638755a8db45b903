# -*- coding: utf-8 -*-
"""
UI strings of the Vignetter filter in English and German.

The language is picked from a locale string such as "en-US" or "de_DE";
lookups fall back to English and finally to the key itself.
"""

LANG_EN = 1
LANG_DE = 2

TRANSLATIONS = {
    LANG_DE: {
        'script_description': "Fügt einen Vignette-Effekt-Filter hinzu",
        'filter_name': "Vignetter",

        'inner_radius': "Innerer Radius",
        'inner_radius_desc': "Innerer Radius des Vignetteneffekts",
        'outer_radius': "Äußerer Radius",
        'outer_radius_desc': "Äußerer Radius des Vignetteneffekts (Bestimmt das Abfallen des Effekts)",
        'opacity': "Deckkraft",
        'opacity_desc': "Bestimmt die Intensität des Vignetteneffekts",

        'position': "Position",
        'center_x': "Zentrum X",
        'center_y': "Zentrum Y",

        'form': "Form",
        'shape_type': "Form-Typ",
        'shape_oval': "Oval",
        'shape_rectangle': "Rechteck",
        'shape_diamond': "Diamant",
        'shape_star': "Stern",
        'shape_strength': "Form-Stärke",
        'rotation': "Rotation",
        'aspect_ratio': "Seitenverhältnis",

        'vignette_color': "Vignettenfarbe",
        'use_color': "Eigene Farbe verwenden",
        'color_red': "Rot",
        'color_green': "Grün",
        'color_blue': "Blau",

        'blend_mode': "Mischungsmodus",
        'blend_normal': "Normal",
        'blend_multiply': "Multiplizieren",
        'blend_screen': "Screen",
        'blend_overlay': "Overlay",

        'presets': "Voreinstellungen",
        'preset_cinematic': "Kinematischer Look",
        'preset_sepia': "Sepia-Ton",
        'preset_oval': "Ovale Vignette",
        'preset_dramatic': "Dramatischer Kontrast",
        'preset_vintage': "Vintage Look",
        'preset_horror': "Horror/Mystery",
        'preset_dream': "Traum-Sequenz",
        'preset_focus': "Fokus-Vignette",
        'preset_glowing': "Leuchtende Ränder",
        'preset_cyberpunk': "Cyberpunk",
        'preset_split': "Split-Toning",
        'preset_retro': "Retro-Gaming",
        'preset_oldfilm': "Alter Film",
        'preset_sunset': "Sonnenuntergang",
        'preset_duotone': "Duotone",
        'preset_neon': "Neon-Lichter",

        'info': "Innerer Radius wird immer angezeigt, äußerer Radius bestimmt den Übergang",
        'error_loading_effect': "Konnte Vignetter-Effekt nicht laden: ",
        'apply_preset': "Voreinstellung anwenden",
    },
    LANG_EN: {
        'script_description': "Vignetter adds a professional vignette effect filter with extensive "
                              "customization options, multiple shapes and predefined presets for "
                              "creative effects.",
        'filter_name': "Vignetter",

        'inner_radius': "Inner Radius",
        'inner_radius_desc': "Inner radius of the vignette effect",
        'outer_radius': "Outer Radius",
        'outer_radius_desc': "Outer radius of the vignette effect (determines the falloff)",
        'opacity': "Opacity",
        'opacity_desc': "Determines the intensity of the vignette effect",

        'position': "Position",
        'center_x': "Center X",
        'center_y': "Center Y",

        'form': "Shape",
        'shape_type': "Shape Type",
        'shape_oval': "Oval",
        'shape_rectangle': "Rectangle",
        'shape_diamond': "Diamond",
        'shape_star': "Star",
        'shape_strength': "Shape Strength",
        'rotation': "Rotation",
        'aspect_ratio': "Aspect Ratio",

        'vignette_color': "Vignette Color",
        'use_color': "Use Custom Color",
        'color_red': "Red",
        'color_green': "Green",
        'color_blue': "Blue",

        'blend_mode': "Blend Mode",
        'blend_normal': "Normal",
        'blend_multiply': "Multiply",
        'blend_screen': "Screen",
        'blend_overlay': "Overlay",

        'presets': "Presets",
        'preset_cinematic': "Cinematic Look",
        'preset_sepia': "Sepia Tone",
        'preset_oval': "Oval Vignette",
        'preset_dramatic': "Dramatic Contrast",
        'preset_vintage': "Vintage Look",
        'preset_horror': "Horror/Mystery",
        'preset_dream': "Dream Sequence",
        'preset_focus': "Focus Vignette",
        'preset_glowing': "Glowing Borders",
        'preset_cyberpunk': "Cyberpunk",
        'preset_split': "Split-Toning",
        'preset_retro': "Retro Gaming",
        'preset_oldfilm': "Old Film",
        'preset_sunset': "Sunset",
        'preset_duotone': "Duotone",
        'preset_neon': "Neon Lights",

        'info': "Inner radius is always visible, outer radius determines the transition",
        'error_loading_effect': "Could not load vignette effect: ",
        'apply_preset': "Apply Preset",
    },
}


def detect_language(locale=None):
    """
    "en*" -> LANG_EN, "de*" -> LANG_DE; anything else (or None) -> LANG_DE.
    """
    if locale:
        locale = locale.lower()
        if locale.startswith('en'):
            return LANG_EN
        if locale.startswith('de'):
            return LANG_DE
    return LANG_DE


def translate(key, lang=LANG_DE):
    if key in TRANSLATIONS.get(lang, {}):
        return TRANSLATIONS[lang][key]
    # fallback: English, then the key
    return TRANSLATIONS[LANG_EN].get(key, key)


_ = translate


def preset_label(name, lang=LANG_DE):
    """Display name of a preset id, e.g. 'oldfilm' -> 'Old Film'."""
    return translate(f'preset_{name}', lang)
