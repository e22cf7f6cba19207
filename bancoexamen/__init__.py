"""Exam question bank with Bloom taxonomy levels, plain-text storage and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["cli", "exam", "questions", "storage"]