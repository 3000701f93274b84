"""
nehv_lib - Shared library for the nehv network configuration shell

This package contains the components of the interactive configuration
shell: the command tree and tab completion, the configuration store,
input validation and the actions that apply configuration to the system.
"""

__version__ = "1.0.0"
