"""Move validation and turn helpers.

Every move, whether typed at the console or fed from a script, goes through
the same pipeline before it touches the grid.
"""
