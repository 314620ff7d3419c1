"""Gemtext conversion module.

This module provides the GemtextConverter for converting Gemtext documents
to Markdown, together with the line classifier, renderer and spacing policy
it is built from.
"""

from .classifier import classify
from .gemtext_converter import BREAK_MARKER, GemtextConverter
from .models import (
    ConversionResult,
    ConversionState,
    LineCategory,
    RenderedLine,
    SpacingDecision,
)
from .renderer import render, render_link
from .spacing import SpacingPolicy, decide

__all__ = [
    'BREAK_MARKER',
    'GemtextConverter',
    'ConversionResult',
    'ConversionState',
    'LineCategory',
    'RenderedLine',
    'SpacingDecision',
    'SpacingPolicy',
    'classify',
    'decide',
    'render',
    'render_link',
]
