"""In-memory learning progress for the catalog codes met during play."""

from .progress import ACHIEVEMENTS, Achievement, LearningProgress

__all__ = ["ACHIEVEMENTS", "Achievement", "LearningProgress"]
