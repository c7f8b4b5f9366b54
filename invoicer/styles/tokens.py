from __future__ import annotations

"""Colour and spacing tokens shared by the editor chrome and the printable sheet.

The sheet palette (Paper) never follows dark mode: exports must look the
same whichever theme the editor is in.
"""


class Colors:
    # Light
    bg = "#f4f5f7"
    card = "#ffffff"
    text = "#222"
    subtext = "#444"
    border = "#e0e0e0"
    input_border = "#cfcfcf"
    primary = "#2f5bd3"
    primary_hover = "#2649ad"
    danger = "#c62828"
    danger_hover = "#a31f1f"

    # Dark
    bg_dark = "#2b2b2b"
    card_dark = "#2f2f2f"
    text_dark = "#f0f0f0"
    border_dark = "#3d3d3d"
    input_border_dark = "#666"
    primary_dark = "#7aa2ff"
    danger_dark = "#ef5350"


class Paper:
    background = "#ffffff"
    text = "#111"
    muted = "#444"
    placeholder = "#999"
    ink = "#1B1464"
    brand_red = "#c8102e"
    table_head = "#eef0f8"


class Radius:
    sm = 6
    md = 10


class Space:
    xs = 4
    sm = 8
    md = 12
    lg = 16
