from .directory import DirectoryBlobStore

__all__ = ["DirectoryBlobStore"]
