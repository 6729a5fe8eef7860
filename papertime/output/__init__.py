"""Rendering of papers for terminal and markdown output."""
