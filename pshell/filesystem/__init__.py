"""
pshell Filesystem Module

Program lookup on the executable search path.
"""

from .locator import ExecutableLocator

__all__ = [
    'ExecutableLocator',
]
