"""
Normalization of uploaded-file representations into one descriptor.

Four shapes are accepted:

* legacy uploads, where the value is the client filename and a second
  ``$_FILES``-style mapping (``name``, ``tmp_name``, ``type``) describes it;
* SAPI uploads, where that mapping is passed as the value itself;
* upload objects exposing ``get_client_filename()``,
  ``get_client_media_type()`` and ``get_stream()``, whose stream answers
  ``get_metadata("uri")``;
* plain filesystem paths.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Protocol, Union, runtime_checkable

from ..errors import InvalidArgumentError

FILES_FORMAT_ERROR = "Value array must be in $_FILES format"


@runtime_checkable
class UploadStream(Protocol):
    def get_metadata(self, key: Optional[str] = None) -> Any: ...


@runtime_checkable
class UploadedFile(Protocol):
    def get_client_filename(self) -> Optional[str]: ...

    def get_client_media_type(self) -> Optional[str]: ...

    def get_stream(self) -> UploadStream: ...


@dataclass
class FileDescriptor:
    """
    Canonical description of an uploaded or referenced file.
    """

    filename: str
    file: str
    filetype: Optional[str] = None
    basename: Optional[str] = None
    include_type: bool = field(default=False, repr=False, compare=False)
    include_basename: bool = field(default=False, repr=False, compare=False)

    def as_dict(self) -> Dict[str, Optional[str]]:
        data: Dict[str, Optional[str]] = {"filename": self.filename, "file": self.file}
        if self.include_type:
            data["filetype"] = self.filetype
        if self.include_basename:
            data["basename"] = self.basename
        return data


def _basename(path: str) -> str:
    return os.path.basename(path.rstrip("/\\")) if path else ""


def _require_files_format(upload: Any) -> Mapping[str, Any]:
    if not isinstance(upload, Mapping) or "tmp_name" not in upload or "name" not in upload:
        raise InvalidArgumentError(FILES_FORMAT_ERROR)
    return upload


def _build(
    filename: Any,
    file: Any,
    filetype: Any,
    include_type: bool,
    include_basename: bool,
) -> FileDescriptor:
    path = os.fspath(file) if file is not None else ""
    return FileDescriptor(
        filename="" if filename is None else str(filename),
        file=path,
        filetype=(filetype or None) if include_type else None,
        basename=_basename(path) if include_basename else None,
        include_type=include_type,
        include_basename=include_basename,
    )


@dataclass(frozen=True)
class LegacyUpload:
    name: Any
    upload: Mapping[str, Any]

    def describe(self, include_type: bool = False, include_basename: bool = False) -> FileDescriptor:
        return _build(
            self.upload["name"],
            self.upload["tmp_name"],
            self.upload.get("type"),
            include_type,
            include_basename,
        )


@dataclass(frozen=True)
class ArrayUpload:
    upload: Mapping[str, Any]

    def describe(self, include_type: bool = False, include_basename: bool = False) -> FileDescriptor:
        return _build(
            self.upload["name"],
            self.upload["tmp_name"],
            self.upload.get("type"),
            include_type,
            include_basename,
        )


@dataclass(frozen=True)
class StreamUpload:
    upload: UploadedFile

    def describe(self, include_type: bool = False, include_basename: bool = False) -> FileDescriptor:
        uri = self.upload.get_stream().get_metadata("uri")
        return _build(
            self.upload.get_client_filename(),
            uri,
            self.upload.get_client_media_type() if include_type else None,
            include_type,
            include_basename,
        )


@dataclass(frozen=True)
class PathUpload:
    path: str

    def describe(self, include_type: bool = False, include_basename: bool = False) -> FileDescriptor:
        return _build(_basename(self.path), self.path, None, include_type, include_basename)


Upload = Union[LegacyUpload, ArrayUpload, StreamUpload, PathUpload]


def classify_upload(value: Any, file: Any = None) -> Upload:
    """
    Pick the upload variant matching ``value`` (and the legacy ``file`` mapping).
    """
    if file is not None:
        return LegacyUpload(value, _require_files_format(file))
    if isinstance(value, Mapping):
        return ArrayUpload(_require_files_format(value))
    if isinstance(value, UploadedFile):
        return StreamUpload(value)
    if isinstance(value, (str, os.PathLike)):
        return PathUpload(os.fspath(value))
    raise InvalidArgumentError(
        f"Unsupported file value of type {type(value).__name__}; expected a path, "
        "a $_FILES-style mapping or an uploaded file object"
    )


def check_file_information(
    value: Any,
    file: Any = None,
    include_type: bool = False,
    include_basename: bool = False,
) -> FileDescriptor:
    return classify_upload(value, file).describe(include_type, include_basename)
