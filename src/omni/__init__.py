"""Omni: a small command-line task tracker backed by a flat text file."""
