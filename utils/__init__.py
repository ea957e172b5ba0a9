"""Utility module"""
from .display import format_atoms, describe_atoms

__all__ = ['format_atoms', 'describe_atoms']
