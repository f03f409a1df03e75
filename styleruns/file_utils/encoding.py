from __future__ import annotations

from io import BytesIO
from typing import IO, Optional, Tuple, Union

import chardet

from styleruns.logger import logger

ENCODE_REC_THRESHOLD = 0.8

# -- tried in order when detection is unsure; ISO-8859-1 decodes any byte sequence --
FALLBACK_ENCODINGS = ("utf_8", "iso_8859_1")


def format_encoding_str(encoding: str) -> str:
    """Format input encoding string (e.g., `utf-8`, `iso-8859-1`, etc).

    Parameters
    ----------
    encoding
        The encoding string to be formatted (e.g., `UTF-8`, `utf_8`, `ISO-8859-1`, `iso_8859_1`).
    """
    return encoding.lower().replace("_", "-")


def convert_to_bytes(file: Union[bytes, IO[bytes]]) -> bytes:
    """Extract the bytes from `file` without preventing it from being read again later.

    As a convenience to simplify client code, also returns `file` unchanged if it is already bytes.
    """
    if isinstance(file, bytes):
        return file

    if isinstance(file, BytesIO):
        return file.getvalue()

    if hasattr(file, "read"):
        position = file.tell() if file.seekable() else None
        f_bytes = file.read()
        if position is not None:
            file.seek(position)
        return f_bytes

    raise ValueError("Invalid file-like object type")


def detect_file_encoding(
    filename: str = "",
    file: Optional[Union[bytes, IO[bytes]]] = None,
) -> Tuple[str, str]:
    """Detect the encoding of `filename` or `file` and decode it.

    Returns the formatted encoding name and the decoded text.
    """
    if filename:
        with open(filename, "rb") as f:
            byte_data = f.read()
    elif file:
        byte_data = convert_to_bytes(file)
    else:
        raise FileNotFoundError("No filename nor file were specified")

    result = chardet.detect(byte_data)
    encoding = result["encoding"]
    confidence = result["confidence"]

    if encoding is None or confidence < ENCODE_REC_THRESHOLD:
        logger.debug(
            "encoding detection inconclusive (%s, confidence=%s), trying %s",
            encoding,
            confidence,
            ", ".join(FALLBACK_ENCODINGS),
        )
        encoding, file_text = _decode_with_fallback(byte_data)
    else:
        file_text = byte_data.decode(encoding)

    return format_encoding_str(encoding), file_text


def _decode_with_fallback(byte_data: bytes) -> Tuple[str, str]:
    """The first of `FALLBACK_ENCODINGS` that decodes `byte_data`, and the decoded text."""
    *preferred, last_resort = FALLBACK_ENCODINGS
    for enc in preferred:
        try:
            return enc, byte_data.decode(enc)
        except UnicodeDecodeError:
            continue
    return last_resort, byte_data.decode(last_resort)


def read_txt_file(
    filename: str = "",
    file: Optional[Union[bytes, IO[bytes]]] = None,
    encoding: Optional[str] = None,
) -> Tuple[str, str]:
    """Read the text of `filename` or `file`, detecting its encoding when none is given.

    Returns the formatted encoding name and the text.
    """
    if filename:
        if encoding:
            formatted_encoding = format_encoding_str(encoding)
            with open(filename, encoding=formatted_encoding) as f:
                file_text = f.read()
        else:
            formatted_encoding, file_text = detect_file_encoding(filename)
    elif file:
        if encoding:
            formatted_encoding = format_encoding_str(encoding)
            file_content = file if isinstance(file, bytes) else file.read()
            if isinstance(file_content, bytes):
                file_text = file_content.decode(formatted_encoding)
            else:
                file_text = file_content
        else:
            formatted_encoding, file_text = detect_file_encoding(file=file)
    else:
        raise FileNotFoundError("No filename was specified")

    return formatted_encoding, file_text
