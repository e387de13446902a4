"""Translation backends for TranslationIndex.

Submodules:
    base   - Backend protocol
    memory - MemoryBackend (writable, dict-backed)
    yaml   - YamlBackend (read-only, files/directories/packaged resources)

Python 3.13+.
"""

from transdex.backends.base import Backend
from transdex.backends.memory import MemoryBackend
from transdex.backends.yaml import YamlBackend, load_yaml_content

__all__ = [
    "Backend",
    "MemoryBackend",
    "YamlBackend",
    "load_yaml_content",
]
