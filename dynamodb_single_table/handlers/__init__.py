from .records import RecordReadApi, RecordWriteApi

__all__ = [
    "RecordReadApi",
    "RecordWriteApi",
]
