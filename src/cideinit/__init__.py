"""cideinit - project scaffolding for CMake-based C/C++ projects."""

__version__ = "0.1.0"
