import unittest

from config import BLACK, RED, SCREEN_HEIGHT, SCREEN_WIDTH, WHITE
from console import Console
from ui import ClearScreen, PrintCentered, PrintText, SetCell


class ConsoleTests(unittest.TestCase):
    def setUp(self):
        self.console = Console()

    def test_dimensions_follow_config(self):
        self.assertEqual(self.console.glyphs.shape, (SCREEN_HEIGHT, SCREEN_WIDTH))
        self.assertEqual(self.console.bg.shape, (SCREEN_HEIGHT, SCREEN_WIDTH, 3))

    def test_clear_fills_background(self):
        self.console.apply([SetCell(3, 3, RED, BLACK, "x"), ClearScreen(WHITE)])
        self.assertEqual(self.console.glyph_at(3, 3), " ")
        self.assertTrue((self.console.bg == WHITE).all())

    def test_set_cell(self):
        self.console.apply([SetCell(5, 7, RED, WHITE, "{")])
        self.assertEqual(self.console.glyph_at(5, 7), "{")
        self.assertEqual(tuple(self.console.fg[7, 5]), RED)
        self.assertEqual(tuple(self.console.bg[7, 5]), WHITE)

    def test_off_grid_cells_are_dropped(self):
        self.console.apply([
            SetCell(SCREEN_WIDTH + 4, 10, RED, BLACK, "f"),
            SetCell(-1, 10, RED, BLACK, "f"),
            SetCell(0, SCREEN_HEIGHT, RED, BLACK, "f"),
        ])
        self.assertEqual(list(self.console.occupied_cells()), [])

    def test_print_text_clips_at_right_edge(self):
        self.console.apply([PrintText(SCREEN_WIDTH - 3, 1, "Score: 12")])
        self.assertEqual(self.console.row_text(1)[-3:], "Sco")

    def test_print_centered(self):
        self.console.apply([PrintCentered(3, "DEAD")])
        row = self.console.row_text(3)
        self.assertEqual(row.index("DEAD"), SCREEN_WIDTH // 2 - 2)

    def test_occupied_cells_reports_color(self):
        self.console.apply([SetCell(1, 2, RED, BLACK, "&")])
        self.assertEqual(list(self.console.occupied_cells()), [(1, 2, "&", RED)])

    def test_unknown_command_rejected(self):
        with self.assertRaises(TypeError):
            self.console.apply(["not a command"])


if __name__ == "__main__":
    unittest.main()
