from .memory_store import InMemorySettingsStore

__all__ = ["InMemorySettingsStore"]
