"""
File validators and upload normalization.
"""

from .information import (
    ArrayUpload,
    FileDescriptor,
    LegacyUpload,
    PathUpload,
    StreamUpload,
    UploadedFile,
    UploadStream,
    check_file_information,
    classify_upload,
)
from .mime_type import ExcludeMimeType, MimeType, mime_type_matches, split_mime_types
from .sniffing import MagicSniffer, MimeSniffer

__all__ = [
    "ArrayUpload",
    "ExcludeMimeType",
    "FileDescriptor",
    "LegacyUpload",
    "MagicSniffer",
    "MimeSniffer",
    "MimeType",
    "PathUpload",
    "StreamUpload",
    "UploadStream",
    "UploadedFile",
    "check_file_information",
    "classify_upload",
    "mime_type_matches",
    "split_mime_types",
]
