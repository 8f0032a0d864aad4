# Path: stream_decoder/core/__init__.py
"""
stream_decoder Core Package

Core utilities shared by the engine, loaders and CLI.

Submodules:
    - logger: IPO-aware logging system
"""
