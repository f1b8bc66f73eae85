"""
Code Generator
Turns a project into IMGUI declarations and an OnGUI drawing routine
"""

from .generator import CodeGenerator, generate_code
from .formatting import format_number, float_literal

__all__ = ['CodeGenerator', 'generate_code', 'format_number', 'float_literal']
