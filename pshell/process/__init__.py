"""
pshell Process Module

Launching external programs and capturing their output.
"""

from .runner import ProcessRunner, ProcessOutput

__all__ = [
    'ProcessRunner',
    'ProcessOutput',
]
