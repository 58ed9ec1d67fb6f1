"""Scroll-state clamping tests.

The offset must stay within ``[0, max(0, total - viewport)]`` after every
operation, including resizes and out-of-range requests.
"""

from __future__ import annotations

import random
import unittest

from mess.runtime.scroll import ScrollDirection, ScrollState, max_scroll_offset


def _assert_in_bounds(case: unittest.TestCase, state: ScrollState) -> None:
    case.assertGreaterEqual(state.offset, 0)
    case.assertLessEqual(state.offset, max(0, state.total_lines - state.viewport_height))


class ScrollStateTests(unittest.TestCase):
    def test_end_of_short_document_stays_at_zero(self) -> None:
        state = ScrollState(total_lines=3, viewport_height=10)
        self.assertEqual(state.scroll_end(), 0)

    def test_end_and_home(self) -> None:
        state = ScrollState(total_lines=100, viewport_height=20)
        self.assertEqual(state.scroll_end(), 80)
        self.assertEqual(state.scroll_by(5), 80)
        self.assertEqual(state.scroll_home(), 0)

    def test_page_moves_ten_lines_by_default(self) -> None:
        state = ScrollState(total_lines=100, viewport_height=20)
        self.assertEqual(state.scroll_page(ScrollDirection.DOWN), 10)
        self.assertEqual(state.scroll_page(ScrollDirection.DOWN), 20)
        self.assertEqual(state.scroll_page(ScrollDirection.UP), 10)
        self.assertEqual(state.scroll_page(ScrollDirection.UP, lines_per_page=50), 0)

    def test_scrolling_up_from_top_clamps(self) -> None:
        state = ScrollState(total_lines=100, viewport_height=20)
        self.assertEqual(state.scroll_by(-5), 0)

    def test_resize_reclamps_offset(self) -> None:
        state = ScrollState(total_lines=100, viewport_height=20)
        state.scroll_end()
        self.assertEqual(state.set_viewport_height(50), 50)
        self.assertEqual(state.visible_range, (50, 100))

    def test_construction_clamps_and_normalizes(self) -> None:
        state = ScrollState(total_lines=5, viewport_height=2, offset=99)
        self.assertEqual(state.offset, 3)
        self.assertEqual(ScrollState(total_lines=5, viewport_height=0).viewport_height, 1)

    def test_max_scroll_offset_helper(self) -> None:
        self.assertEqual(max_scroll_offset(0, 10), 0)
        self.assertEqual(max_scroll_offset(30, 10), 20)

    def test_invariant_holds_for_arbitrary_operation_sequences(self) -> None:
        rng = random.Random(1234)
        for total in (0, 1, 7, 10, 11, 250):
            state = ScrollState(total_lines=total, viewport_height=10)
            for _ in range(300):
                op = rng.randrange(5)
                if op == 0:
                    state.scroll_by(rng.randint(-40, 40))
                elif op == 1:
                    state.scroll_page(rng.choice(list(ScrollDirection)))
                elif op == 2:
                    state.scroll_home()
                elif op == 3:
                    state.scroll_end()
                else:
                    state.set_viewport_height(rng.randint(1, 60))
                _assert_in_bounds(self, state)


if __name__ == "__main__":
    unittest.main()
