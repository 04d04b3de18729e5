import unittest

from src.design_system import (
    COLORS,
    COLORS_DARK,
    get_colors,
    get_record_card_html,
    get_streak_card_html,
)


class StreakCardHtmlTests(unittest.TestCase):
    def test_active_streak_uses_accent(self):
        html_output = get_streak_card_html(4, color_scheme=COLORS)
        self.assertIn('class="streak-card active"', html_output)
        self.assertIn("4 days", html_output)
        self.assertIn(COLORS["accent"], html_output)

    def test_single_day_and_zero(self):
        self.assertIn("1 day<", get_streak_card_html(1, color_scheme=COLORS))
        html_output = get_streak_card_html(0, color_scheme=COLORS)
        self.assertIn('class="streak-card"', html_output)
        self.assertIn("0 days", html_output)


class RecordCardHtmlTests(unittest.TestCase):
    def test_record_card_escapes_text_content(self):
        html_output = get_record_card_html(
            {"exercise": "Curl<script>", "weight": 20, "reps": 8},
            color_scheme=COLORS,
        )
        self.assertIn("Curl&lt;script&gt;", html_output)
        self.assertIn("20 kg × 8", html_output)


class ThemeTests(unittest.TestCase):
    def test_explicit_theme_choice(self):
        self.assertIs(get_colors(dark_mode=True), COLORS_DARK)
        self.assertIs(get_colors(dark_mode=False), COLORS)


if __name__ == "__main__":
    unittest.main()
