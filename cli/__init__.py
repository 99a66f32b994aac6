"""
Command Line Interface Module
"""
from .shell import RecipeShell

__all__ = ['RecipeShell']
