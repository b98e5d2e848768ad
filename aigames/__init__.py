"""2D game simulations with simple AI agents: hex-grid pursuit and flocking."""

__version__ = "0.1.0"