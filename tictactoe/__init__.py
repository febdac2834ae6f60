"""Terminal tic-tac-toe.

The game engine (grid, phase machine, win/tie detection) is importable on its
own; console input and rendering are thin collaborators wired up in `main`.
"""
