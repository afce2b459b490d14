"""Document rendering shared by every stored collection."""

from sqlalchemy import JSON, Column


class DocumentMixin:
    """Maps a row to and from the JSON document clients exchange.

    ``__document_fields__`` maps column attribute names to document keys. Any
    key a client sends that has no column is kept in ``extra`` and merged back
    into the document on the way out.
    """

    __document_fields__: dict[str, str] = {}

    extra = Column(JSON, default=dict)

    @classmethod
    def from_document(cls, document: dict):
        columns = {key: attribute for attribute, key in cls.__document_fields__.items()}
        values = {}
        extra = {}
        for key, value in document.items():
            if key == '_id':
                continue
            if key in columns:
                values[columns[key]] = value
            else:
                extra[key] = value
        return cls(**values, extra=extra)

    def to_document(self) -> dict:
        document = dict(self.extra or {})
        document['_id'] = self.id
        for attribute, key in self.__document_fields__.items():
            document[key] = getattr(self, attribute)
        return document
