"""A 2D fruit-seeking environment for reinforcement-learning agents."""

__version__ = "0.1.0"
__all__ = ["fruit_env"]