# Path: stream_decoder/process/__init__.py
"""
stream_decoder Process Package

Submodules:
    - decoder: incremental matcher engine
    - programs: reference decoding programs built on the engine
"""
