"""
Text Binding Module
===================
Cell / text-run association by anchor point.
"""

from .binder import TextBinder, BinderConfig, bind_text

__all__ = ['TextBinder', 'BinderConfig', 'bind_text']
