"""Presentation layer."""
from .text_renderer import render, legend

__all__ = ['render', 'legend']
