"""
Exceptions raised by the knowledge analysis layer.
"""


class KnowledgeAnalysisError(Exception):
    """Base exception for knowledge analysis operations."""
    pass


class InvalidReferenceError(KnowledgeAnalysisError):
    """Raised when a relation references a missing point or itself."""

    def __init__(self, source_id: str, target_id: str, reason: str):
        self.source_id = source_id
        self.target_id = target_id
        super().__init__(f"Invalid relation {source_id} -> {target_id}: {reason}")


class CyclicDependencyError(KnowledgeAnalysisError):
    """Raised when prerequisite relations form a cycle in strict mode."""

    def __init__(self, cycle: list[str]):
        self.cycle = cycle
        super().__init__(f"Cycle detected: {' -> '.join(cycle)}")


class StorageError(KnowledgeAnalysisError):
    """Raised when a store cannot be read or written."""
    pass
