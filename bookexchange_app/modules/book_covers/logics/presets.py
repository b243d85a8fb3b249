from dataclasses import dataclass
from typing import Dict, Tuple

# --- Constants: Preset names ---
BACKGROUND_SMALL = 'background_small'
BACKGROUND_LARGE = 'background_large'
COVER = 'cover'
COVER_PREVIEW = 'cover_preview'


@dataclass(frozen=True)
class CoverPreset:
    """A fixed Cloudinary transformation and the matching placeholder file."""

    name: str
    placeholder_suffix: str
    # Cloudinary transformation segment, passed through untouched
    transformation: str


# --- Preset Matrix ---
COVER_PRESETS: Dict[str, CoverPreset] = {
    # Quick link boxes in the sidebars
    BACKGROUND_SMALL: CoverPreset(
        name=BACKGROUND_SMALL,
        placeholder_suffix='background-small.jpg',
        transformation='c_fill,e_vibrance:100,g_north,h_100,w_300',
    ),
    # Splash image on the book details page
    BACKGROUND_LARGE: CoverPreset(
        name=BACKGROUND_LARGE,
        placeholder_suffix='background-large.jpg',
        transformation=',c_fill,e_blur:800,g_north,h_350,w_1500/e_vibrance:100',
    ),
    # Scaled cover on the book details page
    COVER: CoverPreset(
        name=COVER,
        placeholder_suffix='cover.jpg',
        transformation='c_pad,e_vibrance:100,h_355,w_275',
    ),
    # Search results and browsing pages
    COVER_PREVIEW: CoverPreset(
        name=COVER_PREVIEW,
        placeholder_suffix='preview.jpg',
        transformation='c_pad,e_vibrance:100,h_300,w_200',
    ),
}

PRESET_NAMES: Tuple[str, ...] = tuple(COVER_PRESETS)


def find_preset(name: str):
    """Return the preset with this name, or None."""
    return COVER_PRESETS.get(name)
