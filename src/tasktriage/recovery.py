class TriageError(Exception):
    """Base exception for errors raised at the edges of tasktriage (file loading, CLI)."""
    pass

class RecoverableError(TriageError):
    """An error that can be recovered from without data loss."""
    pass

class FatalError(TriageError):
    """An error that requires the caller to stop processing the input."""
    pass

class CorruptionError(FatalError):
    """Input records are unreadable - from syntax errors in data formats to records that fail model validation"""
    pass

class FileOperationError(RecoverableError):
    """File operation failed but can be retried."""
    pass
