from infrastructure.repositories.in_memory_document_repository import InMemoryDocumentRepository

__all__ = ["InMemoryDocumentRepository"]
