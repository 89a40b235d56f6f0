"""Declarative test harness for language-model prompts."""

__version__ = "1.0.0"
