"""
Document-style persistence.

Rows keep caller-supplied fields in a JSON ``document`` column; only the
fields the application filters or updates on are lifted into real columns.
"""
import uuid
from typing import Any, Dict, Tuple

from sqlalchemy import Column, DateTime, Integer, JSON, String
from sqlalchemy.sql import func


def new_document_id() -> str:
    return uuid.uuid4().hex


class DocumentMixin:
    # Lifted fields: (document key, column attribute)
    __lifted_fields__: Tuple[Tuple[str, str], ...] = ()

    # Insertion order; the public identifier is ``id``.
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, index=True, nullable=False, default=new_document_id)
    document = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    @classmethod
    def from_document(cls, fields: Dict[str, Any]):
        payload = dict(fields)
        lifted = {attr: payload.pop(key) for key, attr in cls.__lifted_fields__ if key in payload}
        return cls(id=new_document_id(), document=payload, **lifted)

    def to_document(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"_id": self.id}
        data.update(self.document or {})
        for key, attr in self.__lifted_fields__:
            value = getattr(self, attr)
            if value is not None:
                data[key] = value
        return data
