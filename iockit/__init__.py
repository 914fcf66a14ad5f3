"""An explicit inversion-of-control container with deterministic boot, ordered events and lifecycle hooks."""

__version__ = "0.1.0"