from __future__ import annotations

import json
from typing import Any, Iterable, Optional

from styleruns.documents.runs import Document
from styleruns.utils import exactly_one

# ================================================================================================
# SERIALIZATION/DESERIALIZATION (SERDE) RELATED FUNCTIONS
# ================================================================================================

# == DESERIALIZERS ===============================


def documents_from_dicts(document_dicts: Iterable[dict[str, Any]]) -> list[Document]:
    """Convert a list of document-dicts to a list of documents.

    Raises `ValueError` when a run carries a style name that is not one of the four known ones.
    """
    return [Document.from_dict(item) for item in document_dicts]


def documents_from_json(
    filename: str = "", text: str = "", encoding: str = "utf-8"
) -> list[Document]:
    """Loads a list of documents from a JSON file or a string."""
    exactly_one(filename=filename, text=text)

    if filename:
        with open(filename, encoding=encoding) as f:
            document_dicts = json.load(f)
    else:
        document_dicts = json.loads(text)

    return documents_from_dicts(document_dicts)


# == SERIALIZERS =================================


def documents_to_dicts(documents: Iterable[Document]) -> list[dict[str, Any]]:
    """Convert documents to document-dicts."""
    return [d.to_dict() for d in documents]


def documents_to_json(
    documents: Iterable[Document],
    filename: Optional[str] = None,
    indent: Optional[int] = 4,
    encoding: str = "utf-8",
) -> Optional[str]:
    """Saves a list of documents to a JSON file if filename is specified.

    Otherwise, return the list of documents as a string. Keys keep their natural order, "style"
    before "content" in each run.
    """
    json_str = json.dumps(documents_to_dicts(documents), indent=indent, ensure_ascii=False)

    if filename is not None:
        with open(filename, "w", encoding=encoding) as f:
            f.write(json_str)
        return None

    return json_str
