"""
Utility modules: process input/generation and result visualization
"""

from .input_parser import InputParser
from .visualization import Visualizer

__all__ = ['InputParser', 'Visualizer']
