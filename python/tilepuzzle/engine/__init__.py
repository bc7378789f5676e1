"""Puzzle engine: rules, generation, session state and gameplay."""
