"""Plot styling helpers for visuals."""

import matplotlib.pyplot as plt

from .constants import background, foreground


def setup_curve_plot_style(
    ax: plt.Axes,
    face: str = background,
    ink: str = foreground,
) -> None:
    ax.set_facecolor(face)
    ax.figure.set_facecolor(face)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["left"].set_color(ink)
    ax.spines["bottom"].set_color(ink)
    ax.spines["left"].set_linewidth(1)
    ax.spines["bottom"].set_linewidth(1)
    ax.tick_params(axis="both", colors=ink, labelcolor=ink)
    ax.set_autoscale_on(False)
    ax.margins(0)
