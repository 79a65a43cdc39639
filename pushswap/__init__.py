"""Two-stack sorting with a limited instruction set, a solver, a checker and a frame renderer."""

__version__ = "1.0.0"