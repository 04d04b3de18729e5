"""
Design system constants and reusable component functions.
Neutral palette, minimal motion, mobile-first.
"""

import html

import streamlit as st

# Color tokens
COLORS = {
    'primary': '#111111',
    'accent': '#F5A623',
    'background': '#F5F5F7',
    'surface': '#FFFFFF',
    'success': '#34C759',
    'warning': '#FF9F0A',
    'error': '#FF3B30',
    'text_primary': '#111111',
    'text_secondary': '#6E6E73',
    'border_medium': '#D2D2D7',
    'border_light': '#E5E5EA',
}

# Dark mode colors
COLORS_DARK = {
    'primary': '#FFFFFF',
    'accent': '#FFB940',
    'background': '#0B0B0C',
    'surface': '#1C1C1E',
    'success': '#30D158',
    'warning': '#FF9F0A',
    'error': '#FF453A',
    'text_primary': '#F5F5F7',
    'text_secondary': '#8E8E93',
    'border_medium': '#2C2C2E',
    'border_light': '#3A3A3C',
}


def get_colors(dark_mode=None):
    """Color scheme for the given theme; reads the session toggle when not passed."""
    if dark_mode is None:
        dark_mode = st.session_state.get('dark_mode', False)
    return COLORS_DARK if dark_mode else COLORS


def get_metric_card_html(label, value, icon="", color_scheme=None):
    """Metric card used for the dashboard counters"""
    if color_scheme is None:
        color_scheme = get_colors()

    icon_html = f'<span style="font-size: 1.25rem;">{html.escape(str(icon))}</span>' if icon else ''
    return f"""
    <div style="
        background: {color_scheme['surface']};
        border: 1px solid {color_scheme['border_medium']};
        padding: 1rem;
        border-radius: 10px;
    " class="metric-card">
        <div style="display: flex; align-items: center; gap: 0.5rem; margin-bottom: 0.5rem;">
            {icon_html}
            <div style="font-size: 0.75rem; text-transform: uppercase; font-weight: 700; color: {color_scheme['text_secondary']}; letter-spacing: 0.05em;">{html.escape(str(label))}</div>
        </div>
        <div style="font-size: 1.875rem; font-weight: 700; color: {color_scheme['text_primary']};">{html.escape(str(value))}</div>
    </div>
    """.strip()


def get_empty_state_html(icon, title, description, color_scheme=None):
    """Consistent empty state component"""
    if color_scheme is None:
        color_scheme = get_colors()

    icon_block = ""
    if icon:
        icon_block = f'<div style="font-size: 3rem; margin-bottom: 1rem;">{html.escape(str(icon))}</div>'

    return f"""
    <div style="
        text-align: center;
        padding: 3rem 2rem;
        background: {color_scheme['surface']};
        border: 1px solid {color_scheme['border_medium']};
        border-radius: 16px;
        margin: 2rem 0;
    ">
        {icon_block}
        <div style="font-size: 1.25rem; font-weight: 600; margin-bottom: 0.5rem; color: {color_scheme['text_primary']};">{html.escape(str(title))}</div>
        <div style="color: {color_scheme['text_secondary']}; line-height: 1.5;">{html.escape(str(description))}</div>
    </div>
    """.strip()


def get_streak_card_html(streak, color_scheme=None):
    """Day streak banner; a zero streak renders in the muted color."""
    if color_scheme is None:
        color_scheme = get_colors()

    days = int(streak or 0)
    unit = "day" if days == 1 else "days"
    value_color = color_scheme['accent'] if days > 0 else color_scheme['text_secondary']
    card_class = "streak-card active" if days > 0 else "streak-card"

    return f"""<div class="{card_class}" style="
        background: {color_scheme['surface']};
        border: 1px solid {color_scheme['border_medium']};
        border-radius: 10px;
        padding: 1rem;
        text-align: center;
    ">
        <div style="font-size: 0.75rem; font-weight: 700; text-transform: uppercase; color: {color_scheme['text_secondary']};">Day Streak</div>
        <div style="font-size: 2.25rem; font-weight: 700; color: {value_color};">🔥 {days} {unit}</div>
        <div style="font-size: 0.75rem; color: {color_scheme['text_secondary']};">Up to 2 rest days a week keep it alive</div>
    </div>""".strip()


def get_record_card_html(record, color_scheme=None):
    """Personal record row: exercise name with its heaviest set."""
    if color_scheme is None:
        color_scheme = get_colors()

    exercise = html.escape(str(record.get('exercise', '')))
    weight = html.escape(str(record.get('weight', 0)))
    reps = html.escape(str(record.get('reps', 0)))

    return f"""<div class="record-card" style="
        display: flex;
        justify-content: space-between;
        border-bottom: 1px solid {color_scheme['border_light']};
        padding: 0.5rem 0;
    ">
        <span style="font-weight: 600; color: {color_scheme['text_primary']};">🏆 {exercise}</span>
        <span style="color: {color_scheme['text_secondary']};">{weight} kg × {reps}</span>
    </div>""".strip()
