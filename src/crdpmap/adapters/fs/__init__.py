from .file_sink import FileSink, MemorySink

__all__ = ["FileSink", "MemorySink"]
