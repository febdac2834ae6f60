"""Core gameplay primitives (the mark grid and its text rendering).

Kept free of console I/O so it can be reused by the game loop, scripts, and tests.
"""
