"""Provides `partition_html()`."""

from __future__ import annotations

from typing import IO, Iterator, Optional

from styleruns.config import env_config
from styleruns.documents.nodes import Node
from styleruns.documents.runs import Document
from styleruns.extract import extract_documents
from styleruns.file_utils.encoding import read_txt_file
from styleruns.html.parser import parse_html_fragment
from styleruns.logger import logger
from styleruns.utils import exactly_one, lazyproperty


def partition_html(
    filename: Optional[str] = None,
    *,
    file: Optional[IO[bytes]] = None,
    text: Optional[str] = None,
    encoding: Optional[str] = None,
    container_tag: Optional[str] = None,
) -> list[Document]:
    """Extracts a styled-run document from each top-level container of an HTML fragment.

    HTML source parameters
    ----------------------
    The HTML fragment can be specified three different ways:

    filename
        A string defining the target filename path.
    file
        A file-like object using "rb" mode --> open(filename, "rb").
    text
        The string representation of the HTML fragment.
    encoding
        The encoding used to decode `filename` or `file`. When None, the encoding is detected.

    Other parameters
    ----------------
    container_tag
        Tag name of the top-level elements that each become a document. Defaults to the
        `STYLERUNS_CONTAINER_TAG` environment variable, "div" when that is not set.
    """
    # -- an empty fragment has no containers; don't make the caller handle a ValueError for it --
    if text is not None and text.strip() == "" and not file and not filename:
        return []

    opts = HtmlPartitionerOptions(
        file_path=filename,
        file=file,
        text=text,
        encoding=encoding,
        container_tag=container_tag,
    )

    return list(_HtmlPartitioner.iter_documents(opts))


class HtmlPartitionerOptions:
    """Encapsulates partitioning option validation, computation, and application of defaults."""

    def __init__(
        self,
        *,
        file_path: str | None,
        file: IO[bytes] | None,
        text: str | None,
        encoding: str | None,
        container_tag: str | None,
    ):
        exactly_one(filename=file_path, file=file, text=text)
        self._file_path = file_path
        self._file = file
        self._text = text
        self._encoding = encoding
        self._container_tag = container_tag

    @lazyproperty
    def container_tag(self) -> str:
        """Lower-case tag name identifying a top-level container."""
        return (self._container_tag or env_config.CONTAINER_TAG).lower()

    @lazyproperty
    def html_text(self) -> str:
        """The HTML fragment as a string, loaded from wherever the caller specified."""
        if self._file_path:
            return read_txt_file(filename=self._file_path, encoding=self._encoding)[1]

        if self._file:
            return read_txt_file(file=self._file, encoding=self._encoding)[1]

        return str(self._text)


class _HtmlPartitioner:
    """Partition an HTML fragment into styled-run documents."""

    def __init__(self, opts: HtmlPartitionerOptions):
        self._opts = opts

    @classmethod
    def iter_documents(cls, opts: HtmlPartitionerOptions) -> Iterator[Document]:
        """Partition the HTML fragment provided by `opts` into documents."""
        yield from cls(opts)._iter_documents()

    def _iter_documents(self) -> Iterator[Document]:
        """Documents in the order their containers appear in the fragment."""
        nodes = self._top_level_nodes
        documents = extract_documents(nodes, container_tag=self._opts.container_tag)
        logger.debug(
            "extracted %d document(s) from %d top-level node(s) with container tag <%s>",
            len(documents),
            len(nodes),
            self._opts.container_tag,
        )
        yield from documents

    @lazyproperty
    def _top_level_nodes(self) -> list[Node]:
        """The nodes at the top of the fragment, none of which has a parent."""
        # NOTE - get `html_text` first so any encoding error raised is not confused with a
        # parsing error.
        html_text = self._opts.html_text
        return parse_html_fragment(html_text)
