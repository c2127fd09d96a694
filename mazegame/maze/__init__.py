"""Maze generation, model and rendering."""

__all__ = [
    "Cell",
    "Maze",
    "MazeGenerator",
    "render_maze",
    "render_text",
    "save_reveal_animation",
]

from .model import Cell, Maze
from .generator import MazeGenerator
from .render import render_maze, render_text, save_reveal_animation
