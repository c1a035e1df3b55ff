"""Backends: linked output generation."""

from .iife import IIFEWriter

__all__ = ['IIFEWriter']
