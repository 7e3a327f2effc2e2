# ============================================================================
# FILE: app/db/models/document.py
# ============================================================================
from sqlalchemy import Column, Integer, String, JSON, Index
from app.db.base import Base

class DocumentRecord(Base):
    """One schemaless document inside a named collection"""
    __tablename__ = "documents"

    seq = Column(Integer, primary_key=True, autoincrement=True)  # insertion order
    id = Column(String(32), unique=True, index=True, nullable=False)
    collection = Column(String(100), nullable=False)
    data = Column(JSON, nullable=False, default=dict)

    __table_args__ = (
        Index("ix_documents_collection_seq", "collection", "seq"),
    )

    def __repr__(self):
        return f"<DocumentRecord {self.collection}/{self.id}>"
