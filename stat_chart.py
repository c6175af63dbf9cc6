"""Base-stat bar chart for the detail view.

Stats are read by position (HP, Attack, Defense, Sp. Atk, Sp. Def, Speed).
Font settings live in CHART_DEFAULTS and are shared by every chart; a chart
picks up a change only the next time it is drawn.
"""
import logging

import altair as alt
import pandas as pd

logger = logging.getLogger('pokedex.chart')

STAT_LABELS = ("HP", "Attack", "Defense", "Sp. Atk", "Sp. Def", "Speed")
STAT_COLORS = ("#2C2C2C", "#FF4500", "#0A42E3", "#FFD700", "#32CD32", "#00CED1")
STAT_BORDER_COLORS = ("#000000", "#2C2C2C", "#2C2C2C", "#2C2C2C", "#2C2C2C", "#2C2C2C")

CHART_DEFAULTS = {
    'font_size': 18,
    'font_weight': 400,
    'font_family': 'Roboto Slab',
    'color': '#2c2c2c',
}


def font_size_for_width(width):
    if width < 380:
        return 14
    if width < 600:
        return 16
    return 18


def update_font_size(width):
    """Recompute the shared chart font size for a viewport width and return it."""
    size = font_size_for_width(width)
    if CHART_DEFAULTS['font_size'] != size:
        logger.debug('Chart font size %s -> %s (width=%s)', CHART_DEFAULTS['font_size'], size, width)
    CHART_DEFAULTS['font_size'] = size
    return size


def extract_stats(record):
    hp, attack, defense, sp_attack, sp_defense, speed = record.stats
    return {
        'HP': hp,
        'Attack': attack,
        'Defense': defense,
        'Sp. Atk': sp_attack,
        'Sp. Def': sp_defense,
        'Speed': speed,
    }


def stat_frame(record):
    stats = extract_stats(record)
    return pd.DataFrame({
        'stat': list(STAT_LABELS),
        'value': [stats[name] for name in STAT_LABELS],
        'label': [f"{name} {stats[name]}" for name in STAT_LABELS],
        'color': list(STAT_COLORS),
        'border': list(STAT_BORDER_COLORS),
    })


class StatChart:
    """Handle to a record's stat chart; draw() renders it with the current defaults."""

    def __init__(self, record):
        self.record = record
        self.data = stat_frame(record)

    @property
    def labels(self):
        return list(self.data['label'])

    @property
    def values(self):
        return [int(v) for v in self.data['value']]

    def draw(self):
        labels = self.labels
        chart = alt.Chart(self.data).mark_bar(
            cornerRadiusEnd=8,
            strokeWidth=1.5,
        ).encode(
            y=alt.Y('label:N', sort=labels, title=None, axis=alt.Axis(grid=False)),
            x=alt.X('value:Q', scale=alt.Scale(zero=True), title=None, axis=alt.Axis(grid=False)),
            color=alt.Color('label:N', scale=alt.Scale(domain=labels, range=list(STAT_COLORS)), legend=None),
            stroke=alt.Stroke('label:N', scale=alt.Scale(domain=labels, range=list(STAT_BORDER_COLORS)), legend=None),
        ).properties(
            height=260,
        )
        return chart.configure_axis(
            labelFontSize=CHART_DEFAULTS['font_size'],
            labelFontWeight=CHART_DEFAULTS['font_weight'],
            labelFont=CHART_DEFAULTS['font_family'],
            labelColor=CHART_DEFAULTS['color'],
        ).configure_view(strokeWidth=0)


def render_chart(record, width=None):
    if width is not None:
        update_font_size(width)
    return StatChart(record)
