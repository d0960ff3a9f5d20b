"""
MIME-type validators for uploaded files.
"""

from __future__ import annotations

import os
from typing import Any, Iterable, List, Optional, Union

from ..core.base import AbstractValidator
from ..errors import InvalidArgumentError
from .information import FileDescriptor, check_file_information
from .sniffing import MagicSniffer, MimeSniffer

MimeTypeSpec = Union[str, Iterable[str]]


def split_mime_types(mime_type: MimeTypeSpec) -> List[str]:
    """
    Flatten a string, comma-separated string or sequence into trimmed tokens.
    """
    if isinstance(mime_type, str):
        entries: Iterable[Any] = [mime_type]
    elif isinstance(mime_type, Iterable) and not isinstance(mime_type, (bytes, bytearray)):
        entries = mime_type
    else:
        raise InvalidArgumentError(f"Invalid options to validator provided: {mime_type!r}")

    tokens: List[str] = []
    for entry in entries:
        if not isinstance(entry, str):
            raise InvalidArgumentError(f"Mimetype entries must be strings, got {type(entry).__name__}")
        tokens.extend(part.strip() for part in entry.split(","))
    return [token for token in tokens if token]


def mime_type_matches(detected: str, tokens: Iterable[str]) -> bool:
    """
    ``True`` when ``detected`` equals a token or one of its ``/``, ``-`` or ``;`` parts does.
    """
    detected = detected.lower()
    parts = {detected}
    for separator in ("/", "-", ";"):
        parts.update(part.strip() for part in detected.split(separator))
    return any(token.lower() in parts for token in tokens if token)


def _is_readable(path: str) -> bool:
    return os.path.isfile(path) and os.access(path, os.R_OK)


class MimeType(AbstractValidator):
    """
    Accept files whose detected MIME type matches one of the configured tokens.

    Tokens are full types (``image/jpeg``) or parts of one (``image``,
    ``jpeg``). The type is sniffed from the file content unless magic
    detection is disabled; with the header check enabled, the type declared
    by the upload is used when sniffing yields nothing.
    """

    FALSE_TYPE = "fileMimeTypeFalse"
    NOT_DETECTED = "fileMimeTypeNotDetected"
    NOT_READABLE = "fileMimeTypeNotReadable"

    message_templates = {
        FALSE_TYPE: "File has an incorrect mimetype of '{type}'",
        NOT_DETECTED: "The mimetype could not be detected from the file",
        NOT_READABLE: "File is not readable or does not exist",
    }
    message_variables = {"type": "type"}
    option_names = ("mime_type", "header_check", "magic_disabled", "sniffer")
    option_aliases = {
        "enable_header_check": "header_check",
        "disable_magic_file": "magic_disabled",
        "mimetype": "mime_type",
    }

    def __init__(
        self,
        mime_type: Optional[MimeTypeSpec] = None,
        header_check: Optional[bool] = None,
        magic_disabled: Optional[bool] = None,
        sniffer: Optional[MimeSniffer] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._mime_types: List[str] = []
        self.type: Optional[str] = None
        self.header_check = self.settings.header_check if header_check is None else bool(header_check)
        self.magic_disabled = self.settings.magic_disabled if magic_disabled is None else bool(magic_disabled)
        self.sniffer: MimeSniffer = sniffer or MagicSniffer()
        if mime_type is not None:
            self.add_mime_type(mime_type)

    # Mimetype list -------------------------------------------------------
    def get_mime_type(self, as_list: bool = False) -> Union[str, List[str]]:
        if as_list:
            return list(self._mime_types)
        return ",".join(self._mime_types)

    def set_mime_type(self, mime_type: MimeTypeSpec) -> None:
        self._mime_types = []
        self.add_mime_type(mime_type)

    def add_mime_type(self, mime_type: MimeTypeSpec) -> None:
        for token in split_mime_types(mime_type):
            if token not in self._mime_types:
                self._mime_types.append(token)

    # Detection switches --------------------------------------------------
    def get_header_check(self) -> bool:
        return self.header_check

    def set_header_check(self, header_check: bool) -> None:
        self.header_check = bool(header_check)

    def enable_header_check(self, header_check: bool = True) -> None:
        self.set_header_check(header_check)

    def get_magic_disabled(self) -> bool:
        return self.magic_disabled

    def set_magic_disabled(self, magic_disabled: bool) -> None:
        self.magic_disabled = bool(magic_disabled)

    def disable_magic(self, magic_disabled: bool = True) -> None:
        self.set_magic_disabled(magic_disabled)

    def is_magic_disabled(self) -> bool:
        return self.magic_disabled

    def get_sniffer(self) -> MimeSniffer:
        return self.sniffer

    def set_sniffer(self, sniffer: MimeSniffer) -> None:
        self.sniffer = sniffer

    def get_type(self) -> Optional[str]:
        return self.type

    # Validation ----------------------------------------------------------
    def is_valid(self, value: Any, file: Any = None) -> bool:
        """
        Validate an upload given as a path, a ``$_FILES``-style mapping, an
        uploaded file object, or a name plus legacy ``file`` mapping.
        """
        return super().is_valid(value, file)

    def _validate(self, value: Any, context: Any) -> bool:
        descriptor = check_file_information(value, context, include_type=True)
        self.value = descriptor.filename
        self.type = None

        if not descriptor.file or not _is_readable(descriptor.file):
            self._error(self.NOT_READABLE)
            return False

        try:
            self.type = self._detect_type(descriptor)
        except OSError as exc:
            self.logger.warning("Unable to read %s: %s", descriptor.file, exc)
            self._error(self.NOT_READABLE)
            return False

        if not self.type:
            self._error(self.NOT_DETECTED)
            return False

        if self._accepts(self.type):
            return True
        self._error(self.FALSE_TYPE)
        return False

    def _detect_type(self, descriptor: FileDescriptor) -> Optional[str]:
        detected = None
        if not self.magic_disabled:
            detected = self.sniffer.detect(descriptor.file)
        if not detected and self.header_check:
            detected = descriptor.filetype
        return detected

    def _accepts(self, detected: str) -> bool:
        return mime_type_matches(detected, self._mime_types)


class ExcludeMimeType(MimeType):
    """
    Reject files whose detected MIME type matches one of the configured tokens.
    """

    FALSE_TYPE = "fileExcludeMimeTypeFalse"
    NOT_DETECTED = "fileExcludeMimeTypeNotDetected"
    NOT_READABLE = "fileExcludeMimeTypeNotReadable"

    message_templates = {
        FALSE_TYPE: "File has an incorrect mimetype of '{type}'",
        NOT_DETECTED: "The mimetype could not be detected from the file",
        NOT_READABLE: "File is not readable or does not exist",
    }

    def _accepts(self, detected: str) -> bool:
        return not mime_type_matches(detected, self._mime_types)
