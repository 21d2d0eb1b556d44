"""
Cross-platform font lookup table.

Maps a font family alias and variant to candidate filenames per platform.
The OS-specific directory roots are the only platform-dependent input.
"""

import os
import sys
from typing import Dict, List, Optional, Tuple

WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"

# (bold, italic) -> filename
Variants = Dict[Tuple[bool, bool], List[str]]


def _windows(regular: str, bold: str, italic: str, bold_italic: str) -> Variants:
    return {
        (False, False): [regular],
        (True, False): [bold],
        (False, True): [italic],
        (True, True): [bold_italic],
    }


def _same_for_all(*filenames: str) -> Variants:
    files = list(filenames)
    return {(False, False): files, (True, False): files, (False, True): files, (True, True): files}


# Canonical family -> aliases that resolve to it
FAMILY_ALIASES: Dict[str, Tuple[str, ...]] = {
    "times": ("times new roman", "times", "serif"),
    "arial": ("arial", "sans-serif", "system-ui", "sans"),
    "georgia": ("georgia",),
    "verdana": ("verdana",),
    "courier": ("courier new", "courier", "monospace"),
}

FALLBACK_FAMILY = "fallback"

FONT_TABLE: Dict[str, Dict[str, Variants]] = {
    "times": {
        WINDOWS: _windows("times.ttf", "timesbd.ttf", "timesi.ttf", "timesbi.ttf"),
        MACOS: _same_for_all("Times New Roman.ttf"),
        LINUX: _same_for_all("liberation/LiberationSerif-Regular.ttf", "dejavu/DejaVuSerif.ttf"),
    },
    "arial": {
        WINDOWS: _windows("arial.ttf", "arialbd.ttf", "ariali.ttf", "arialbi.ttf"),
        MACOS: _same_for_all("Arial.ttf"),
        LINUX: _same_for_all("liberation/LiberationSans-Regular.ttf", "dejavu/DejaVuSans.ttf",
                             "ubuntu/Ubuntu-Regular.ttf", "noto/NotoSans-Regular.ttf"),
    },
    "georgia": {
        WINDOWS: _windows("georgia.ttf", "georgiab.ttf", "georgiai.ttf", "georgiaz.ttf"),
        MACOS: _same_for_all("Georgia.ttf"),
        LINUX: _same_for_all("liberation/LiberationSerif-Regular.ttf", "dejavu/DejaVuSerif.ttf"),
    },
    "verdana": {
        WINDOWS: _windows("verdana.ttf", "verdanab.ttf", "verdanai.ttf", "verdanaz.ttf"),
        MACOS: _same_for_all("Verdana.ttf"),
        LINUX: _same_for_all("liberation/LiberationSans-Regular.ttf", "dejavu/DejaVuSans.ttf"),
    },
    "courier": {
        WINDOWS: _windows("cour.ttf", "courbd.ttf", "couri.ttf", "courbi.ttf"),
        MACOS: _same_for_all("Courier New.ttf"),
        LINUX: _same_for_all("liberation/LiberationMono-Regular.ttf", "dejavu/DejaVuSansMono.ttf"),
    },
    # Unknown families; macOS has no fallback
    FALLBACK_FAMILY: {
        WINDOWS: _windows("arial.ttf", "arialbd.ttf", "ariali.ttf", "arialbi.ttf"),
        LINUX: _same_for_all("liberation/LiberationSans-Regular.ttf", "dejavu/DejaVuSans.ttf"),
    },
}


def current_platform() -> Optional[str]:
    """Get the table key for the running OS, or None if unsupported."""
    if sys.platform.startswith("win"):
        return WINDOWS
    if sys.platform == "darwin":
        return MACOS
    if sys.platform.startswith("linux"):
        return LINUX
    return None


def canonical_family(family: str) -> str:
    """Map a family name or generic alias to its table key."""
    name = family.strip().strip('"\'').lower()
    for canonical, aliases in FAMILY_ALIASES.items():
        if name in aliases:
            return canonical
    return FALLBACK_FAMILY


def font_search_dirs(platform: Optional[str]) -> List[str]:
    """
    Get the font directories searched on a platform, in order.

    Args:
        platform: WINDOWS, MACOS or LINUX

    Returns:
        Directory paths; empty when the platform or its environment is unknown
    """
    if platform == WINDOWS:
        windir = os.environ.get("WINDIR")
        return [os.path.join(windir, "Fonts")] if windir else []

    home = os.environ.get("HOME")
    if platform == MACOS:
        dirs = ["/Library/Fonts", "/System/Library/Fonts"]
        return ([os.path.join(home, "Library", "Fonts")] if home else []) + dirs

    if platform == LINUX:
        dirs = ["/usr/share/fonts/truetype", "/usr/local/share/fonts/truetype"]
        return dirs + ([os.path.join(home, ".local", "share", "fonts")] if home else [])

    return []


def candidate_paths(family: str, bold: bool, italic: bool, platform: Optional[str],
                    search_dirs: List[str]) -> List[str]:
    """
    List the font files to try for one family and variant, in order.

    Args:
        family: A single family name (not a comma list)
        bold: Bold variant
        italic: Italic variant
        platform: Table platform key
        search_dirs: Directories to join filenames onto

    Returns:
        Candidate file paths, directories outermost
    """
    variants = FONT_TABLE[canonical_family(family)].get(platform)
    if not variants:
        return []

    filenames = variants[(bold, italic)]
    return [os.path.join(directory, filename) for directory in search_dirs for filename in filenames]
