from transcribe_common.infrastructure.interfaces.storage import StorageLocator

__all__ = ["StorageLocator"]
