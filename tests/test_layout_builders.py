"""Chain, module and full-window layout regression tests."""

import math
import unittest
from collections import Counter

from layout_system import (
    CHAIN_WIRING,
    COUNTERCLOCKWISE,
    LayoutBuffer,
    build_chain,
    build_installation,
    build_module,
    wiring_slots,
)


class ChainTests(unittest.TestCase):
    def setUp(self):
        self.buffer = LayoutBuffer(128)
        build_chain(self.buffer.region(), (0, 0))

    def test_channel_padding_left_empty(self):
        filled = {index for index, _ in self.buffer.populated()}
        self.assertEqual(filled, set(range(0, 54)) | set(range(64, 118)))

    def test_each_block_gets_full_ring(self):
        per_block = Counter(record.grid_xy for _, record in self.buffer.populated())
        self.assertEqual(per_block, {(0, 0): 36, (1, 0): 36, (2, 0): 36})

    def test_wiring_table_offsets(self):
        offsets = [row[0] for row in CHAIN_WIRING]
        self.assertEqual(offsets, [0, 9, 18, 27, 36, 45, 64, 73, 82, 91, 100, 109])

    def test_wiring_table_matches_hardware(self):
        # side: 0=top 1=left 2=bottom 3=right, direction: 0=cw 1=ccw
        expected = [
            (0, (2, 0), 2, 0),
            (9, (2, 0), 1, 0),
            (18, (1, 0), 3, 0),
            (27, (1, 0), 2, 0),
            (36, (1, 0), 1, 0),
            (45, (0, 0), 3, 0),
            (64, (2, 0), 3, 1),
            (73, (2, 0), 0, 1),
            (82, (1, 0), 0, 1),
            (91, (0, 0), 0, 1),
            (100, (0, 0), 1, 1),
            (109, (0, 0), 2, 1),
        ]
        self.assertEqual(len(CHAIN_WIRING), len(expected))
        for row, (actual, wanted) in enumerate(zip(CHAIN_WIRING, expected)):
            self.assertEqual(tuple(actual), wanted, f"wiring row {row}")

    def test_first_led_of_each_strip(self):
        expected = {
            0: ((2, 0), (0.6, -0.75)),
            9: ((2, 0), (-0.75, -0.6)),
            18: ((1, 0), (0.75, 0.6)),
            27: ((1, 0), (0.6, -0.75)),
            36: ((1, 0), (-0.75, -0.6)),
            45: ((0, 0), (0.75, 0.6)),
            64: ((2, 0), (0.75, -0.6)),
            73: ((2, 0), (0.6, 0.75)),
            82: ((1, 0), (0.6, 0.75)),
            91: ((0, 0), (0.6, 0.75)),
            100: ((0, 0), (-0.75, 0.6)),
            109: ((0, 0), (-0.6, -0.75)),
        }
        for index, (grid_xy, (bx, by)) in expected.items():
            record = self.buffer[index]
            self.assertEqual(record.grid_xy, grid_xy, f"slot {index}")
            self.assertAlmostEqual(record.block_xy[0], bx, msg=f"slot {index}")
            self.assertAlmostEqual(record.block_xy[1], by, msg=f"slot {index}")

    def test_channel_inputs_start_on_rightmost_block(self):
        # Both Fadecandy channels enter the chain at its right end
        self.assertEqual(self.buffer[0].grid_xy, (2, 0))
        self.assertEqual(self.buffer[64].grid_xy, (2, 0))
        # First strip runs along the bottom, second channel starts up the right side
        self.assertAlmostEqual(self.buffer[0].block_xy[1], -0.75)
        self.assertAlmostEqual(self.buffer[64].block_xy[0], 0.75)

    def test_second_channel_runs_counterclockwise(self):
        self.assertTrue(all(row[3] == COUNTERCLOCKWISE for row in CHAIN_WIRING[6:]))
        self.assertFalse(any(row[3] == COUNTERCLOCKWISE for row in CHAIN_WIRING[:6]))

    def test_no_block_side_wired_twice(self):
        seen = {(record.grid_xy, tuple(round(v, 6) for v in record.block_xy))
                for _, record in self.buffer.populated()}
        self.assertEqual(len(seen), 108)


class ModuleTests(unittest.TestCase):
    def test_module_tiles_six_by_two(self):
        buffer = LayoutBuffer(512)
        build_module(buffer.region(), (0, 4))
        blocks = {record.grid_xy for _, record in buffer.populated()}
        self.assertEqual(blocks, {(x, y) for x in range(6) for y in (4, 5)})

    def test_chain_order_matches_fadecandy_chain(self):
        buffer = LayoutBuffer(512)
        build_module(buffer.region(), (0, 0))
        # Chain 0 is the bottom-right chain, chain 3 the top-left
        self.assertEqual(buffer[0].grid_xy, (5, 0))
        self.assertEqual(buffer[128].grid_xy, (2, 0))
        self.assertEqual(buffer[256].grid_xy, (5, 1))
        self.assertEqual(buffer[384].grid_xy, (2, 1))


class InstallationTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.buffer = build_installation()
        cls.populated = cls.buffer.populated()

    def test_buffer_size_and_led_count(self):
        self.assertEqual(len(self.buffer), 3072)
        self.assertEqual(len(self.populated), 2592)

    def test_all_points_on_y_plane(self):
        self.assertTrue(all(record.point[1] == 0 for _, record in self.populated))

    def test_block_xy_in_unit_square(self):
        for _, record in self.populated:
            for v in record.block_xy:
                self.assertGreaterEqual(v, -1.0)
                self.assertLessEqual(v, 1.0)

    def test_block_angle_is_atan2_of_block_xy(self):
        for _, record in self.populated:
            self.assertEqual(record.block_angle, math.atan2(*record.block_xy))

    def test_grid_bounds(self):
        columns = {record.grid_xy[0] for _, record in self.populated}
        rows = {record.grid_xy[1] for _, record in self.populated}
        self.assertEqual(columns, set(range(6)))
        self.assertEqual(rows, set(range(12)))

    def test_every_block_has_36_leds(self):
        per_block = Counter(record.grid_xy for _, record in self.populated)
        self.assertEqual(len(per_block), 72)
        self.assertTrue(all(count == 36 for count in per_block.values()))

    def test_padding_slots(self):
        for start in range(0, 3072, 64):
            for index in range(start + 54, start + 64):
                self.assertIsNone(self.buffer[index], f"slot {index} should be padding")

    def test_last_populated_slot(self):
        self.assertEqual(self.populated[-1][0], 3061)
        self.assertEqual(self.populated[-1][1].grid_xy, (0, 11))

    def test_wiring_is_injective(self):
        slots = wiring_slots()
        self.assertEqual(len(slots), 2592)
        self.assertEqual(len(set(slots.values())), 2592)
        self.assertEqual(sorted(slots.values()), [index for index, _ in self.populated])


if __name__ == "__main__":
    unittest.main()
