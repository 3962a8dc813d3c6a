"""Common visualization constants used across modules."""

# Canvas layout (pixels)
width: int = 900
height: int = 400
margin: dict[str, int] = {"top": 100, "right": 60, "bottom": 60, "left": 60}
dpi: int = 100

# Animation timing (milliseconds)
transition_ms: int = 200
frame_interval_ms: int = 200
tween_step_ms: int = 20

# Scales and strokes
band_padding: float = 0.1
trace_opacity: float = 0.4
primary_stroke_width: float = 3
trace_stroke_width: float = 1
gradient_height: int = 10

# Colors and text
background: str = "black"
foreground: str = "white"
colormap: str = "viridis"
title: str = "US Treasury yield development in 2022"
title_font_px: int = 24
date_font_px: int = 16
