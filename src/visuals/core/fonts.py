"""Font helpers for visuals."""

from matplotlib.font_manager import FontProperties

from .constants import dpi


def px_to_pt(px: float, at_dpi: int = dpi) -> float:
    """Convert a pixel length to typographic points at ``at_dpi``."""
    return px * 72.0 / at_dpi


def get_font(size_px: float, weight: str = "bold", at_dpi: int = dpi) -> FontProperties:
    return FontProperties(
        family="sans-serif",
        style="normal",
        variant="normal",
        weight=weight,
        stretch="normal",
        size=px_to_pt(size_px, at_dpi),
    )
