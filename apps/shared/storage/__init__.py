"""
Storage backends

Import directly from submodules:
- from .base import AbstractStorageService
- from .factory import StorageFactory
"""
