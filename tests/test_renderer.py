"""
Tests for the SVG bar renderer: geometry, reconciliation, hover and
serialisation.
"""

import unittest

from chart import BarState, Frame
from config import CONFIG
from ui import SvgBarRenderer


class TestInitialDraw(unittest.TestCase):

    def setUp(self):
        self.renderer = SvgBarRenderer()
        self.renderer.initial([1, 3, 5, 8, 9])

    def test_one_bar_per_element(self):
        self.assertEqual(len(self.renderer.bars), 5)
        self.assertEqual(self.renderer.values, [1, 3, 5, 8, 9])

    def test_width_and_positions(self):
        # 1000 / 5 - 1
        self.assertAlmostEqual(self.renderer.bar_width, 199.0)
        xs = [bar.x for bar in self.renderer.bars]
        for i, x in enumerate(xs):
            self.assertAlmostEqual(x, i * (199.0 + 0.95))

    def test_vertical_scale_has_headroom(self):
        self.assertEqual(self.renderer.scale.domain, (0, 19))
        tallest = self.renderer.bars[-1]
        self.assertAlmostEqual(tallest.y, CONFIG.height - 9 * CONFIG.height / 19)
        self.assertAlmostEqual(tallest.height, 9 * CONFIG.height / 19)
        self.assertGreater(tallest.y, 0)

    def test_heights_follow_values(self):
        heights = [bar.height for bar in self.renderer.bars]
        self.assertEqual(heights, sorted(heights))

    def test_initial_replaces_previous_canvas(self):
        first = self.renderer.canvas.generation
        self.renderer.initial([4, 2, 5])
        self.assertEqual(len(self.renderer.bars), 3)
        self.assertEqual(self.renderer.canvas.generation, first + 1)
        self.assertEqual(self.renderer.to_svg().count('class="bar '), 3)

    def test_empty_sequence_draws_nothing(self):
        self.renderer.initial([])
        self.assertEqual(self.renderer.bars, [])
        self.assertNotIn('class="bar ', self.renderer.to_svg())


class TestUpdate(unittest.TestCase):

    def setUp(self):
        self.renderer = SvgBarRenderer()
        self.renderer.initial([5, 3, 8, 1, 9])

    def test_highlight_only_named_indices(self):
        self.renderer.update(Frame((3, 5, 8, 1, 9), frozenset({0, 1})))
        states = [bar.state for bar in self.renderer.bars]
        self.assertEqual(states[:2], [BarState.HIGHLIGHT, BarState.HIGHLIGHT])
        self.assertTrue(all(s is BarState.NORMAL for s in states[2:]))
        self.assertEqual(self.renderer.values, [3, 5, 8, 1, 9])

    def test_highlight_cleared_on_next_frame(self):
        self.renderer.update(Frame((3, 5, 8, 1, 9), frozenset({0, 1})))
        self.renderer.update(Frame((3, 5, 1, 8, 9), frozenset({2, 3})))
        self.assertIs(self.renderer.bars[0].state, BarState.NORMAL)
        self.assertIs(self.renderer.bars[3].state, BarState.HIGHLIGHT)

    def test_geometry_tracks_new_values(self):
        self.renderer.update(Frame((1, 3, 5, 8, 9)))
        first = self.renderer.bars[0]
        self.assertEqual(first.value, 1)
        self.assertAlmostEqual(first.height, CONFIG.height - self.renderer.scale(1))

    def test_shrink_removes_surplus_bars(self):
        self.renderer.update(Frame((2, 1, 3)))
        self.assertEqual(len(self.renderer.bars), 3)
        self.assertEqual(self.renderer.values, [2, 1, 3])
        # 1000 / 3 - 1
        self.assertAlmostEqual(self.renderer.bar_width, CONFIG.width / 3 - 1)
        self.assertTrue(all(bar.width == self.renderer.bar_width for bar in self.renderer.bars))

    def test_grow_adds_bars(self):
        self.renderer.update(Frame((5, 3, 8, 1, 2, 4, 9)))
        self.assertEqual(len(self.renderer.bars), 7)
        self.assertEqual([bar.index for bar in self.renderer.bars], list(range(7)))

    def test_grow_keeps_bars_inside_chart(self):
        self.renderer.update(Frame((5, 3, 8, 1, 2, 4, 9)))
        width = CONFIG.width / 7 - 1
        self.assertAlmostEqual(self.renderer.bar_width, width)
        for i, bar in enumerate(self.renderer.bars):
            self.assertAlmostEqual(bar.width, width)
            self.assertAlmostEqual(bar.x, i * (width + CONFIG.bar_gap))
        last = self.renderer.bars[-1]
        self.assertLessEqual(last.x + last.width, CONFIG.width)

    def test_update_without_canvas_draws_first(self):
        renderer = SvgBarRenderer()
        renderer.update(Frame((2, 1, 3), frozenset({0})))
        self.assertIsNotNone(renderer.canvas)
        self.assertEqual(renderer.values, [2, 1, 3])

    def test_finish_marks_every_bar_done(self):
        self.renderer.update(Frame((3, 5, 8, 1, 9), frozenset({0, 1})))
        self.renderer.finish()
        self.assertTrue(all(bar.state is BarState.DONE for bar in self.renderer.bars))
        self.assertEqual(self.renderer.color_of(self.renderer.bars[0]), CONFIG.bar_colors["done"])


class TestHover(unittest.TestCase):

    def setUp(self):
        self.renderer = SvgBarRenderer()
        self.renderer.initial([5, 3, 8, 1, 9])

    def test_hover_adds_label_and_dims_bar(self):
        label = self.renderer.hover(2)
        self.assertEqual(label.text, "8")
        self.assertAlmostEqual(label.y, self.renderer.scale(8) - 5)
        self.assertEqual(self.renderer.bars[2].opacity, CONFIG.hover_opacity)
        self.assertIn('class="hover-label"', self.renderer.to_svg())

    def test_leave_restores_bar(self):
        self.renderer.hover(2)
        self.renderer.leave(2)
        self.assertIsNone(self.renderer.label)
        self.assertEqual(self.renderer.bars[2].opacity, 1.0)
        self.assertNotIn("hover-label", self.renderer.to_svg())

    def test_hover_never_changes_values(self):
        self.renderer.hover(0)
        self.renderer.hover(4)
        self.renderer.leave(4)
        self.assertEqual(self.renderer.values, [5, 3, 8, 1, 9])
        self.assertEqual(self.renderer.bars[0].opacity, 1.0)

    def test_hover_out_of_range(self):
        self.assertIsNone(self.renderer.hover(10))
        self.assertIsNone(self.renderer.label)

    def test_label_dropped_when_bar_removed(self):
        self.renderer.hover(4)
        self.renderer.update(Frame((2, 1, 3)))
        self.assertIsNone(self.renderer.label)


class TestSerialisation(unittest.TestCase):

    def test_empty_chart_before_first_draw(self):
        self.assertIn('class="chart empty"', SvgBarRenderer().to_svg())

    def test_bars_carry_index_and_value(self):
        renderer = SvgBarRenderer()
        renderer.initial([2, 1, 3])
        svg = renderer.to_svg()
        self.assertEqual(svg.count('class="bar normal"'), 3)
        self.assertIn('data-index="1" data-value="1"', svg)
        self.assertTrue(svg.startswith("<svg"))
        self.assertTrue(svg.endswith("</svg>"))


if __name__ == "__main__":
    unittest.main()
