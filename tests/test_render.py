import tempfile
import unittest
from pathlib import Path

from PIL import Image

from mazegame import Maze, MazeGenerator
from mazegame.maze.generator import main as generate_main
from mazegame.maze.render import (
    EXIT_COLOR,
    PATH_COLOR,
    PLAYER_COLOR,
    WALL_COLOR,
    maze_to_array,
    render_maze,
    render_reveal_frames,
    render_text,
    save_reveal_animation,
)

from tests.support import FIXED_ROWS


class RenderTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.maze = Maze.from_strings(FIXED_ROWS)

    def tearDown(self) -> None:
        self.tmp.cleanup()

    def test_array_colors(self) -> None:
        pixels = maze_to_array(self.maze, player=(2, 1))
        self.assertEqual(pixels.shape, (5, 5, 3))
        self.assertEqual(tuple(pixels[0, 0]), WALL_COLOR)
        self.assertEqual(tuple(pixels[1, 1]), PATH_COLOR)
        self.assertEqual(tuple(pixels[1, 2]), PLAYER_COLOR)
        self.assertEqual(tuple(pixels[3, 3]), EXIT_COLOR)

    def test_hidden_cells_are_drawn_as_walls(self) -> None:
        pixels = maze_to_array(self.maze, hidden=[(1, 1)])
        self.assertEqual(tuple(pixels[1, 1]), WALL_COLOR)

    def test_render_scales_by_cell_size(self) -> None:
        image = render_maze(self.maze, player=(1, 1), cell_size=10)
        self.assertEqual(image.size, (50, 50))
        self.assertEqual(image.getpixel((15, 15)), PLAYER_COLOR)
        self.assertEqual(image.getpixel((35, 35)), EXIT_COLOR)
        self.assertEqual(image.getpixel((5, 5)), WALL_COLOR)
        with self.assertRaises(ValueError):
            render_maze(self.maze, cell_size=0)

    def test_text_matches_source_rows(self) -> None:
        self.assertEqual(render_text(self.maze), "\n".join(FIXED_ROWS))
        text = render_text(self.maze, player=(1, 1), hidden=[(2, 1)])
        self.assertEqual(text.splitlines()[1], "#@#..")

    def test_text_rebuilds_generated_maze(self) -> None:
        maze = MazeGenerator(9, 7, seed=6).generate()
        rebuilt = Maze.from_strings(render_text(maze).splitlines(), carve_order=maze.carve_order)
        self.assertEqual(rebuilt, maze)

    def test_from_strings_validates_input(self) -> None:
        with self.assertRaises(ValueError):
            Maze.from_strings(["###", "##"])
        with self.assertRaises(ValueError):
            Maze.from_strings(["#E#", "#E#", "###"])
        with self.assertRaises(ValueError):
            Maze.from_strings([])

    def test_reveal_frames_start_hidden_and_end_revealed(self) -> None:
        maze = MazeGenerator(7, 7, seed=3).generate()
        frames = list(render_reveal_frames(maze, cell_size=2))
        self.assertEqual(len(frames), len(maze.carve_order) + 1)
        self.assertEqual(frames[0].getpixel((2, 2)), WALL_COLOR)
        self.assertEqual(frames[-1].tobytes(), render_maze(maze, cell_size=2).tobytes())

    def test_save_reveal_animation(self) -> None:
        maze = MazeGenerator(7, 7, seed=3).generate()
        path = save_reveal_animation(Path(self.tmp.name) / "reveal.gif", maze, cell_size=4)
        with Image.open(path) as image:
            self.assertEqual(image.size, (28, 28))
            self.assertGreater(image.n_frames, 1)

    def test_generate_cli_writes_images(self) -> None:
        output_dir = Path(self.tmp.name) / "out"
        generate_main(
            ["2", "--output-dir", str(output_dir), "--width", "7", "--height", "7", "--seed", "1", "--animate"]
        )
        self.assertEqual(len(list(output_dir.glob("*_maze.png"))), 2)
        self.assertEqual(len(list(output_dir.glob("*_reveal.gif"))), 2)


if __name__ == "__main__":
    unittest.main()
