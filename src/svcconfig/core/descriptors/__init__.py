"""
Descritores consumidos pelo svcconfig e o índice explícito por run.
"""
from .index import (
    AnnotationLookup,
    ConflictingServiceError,
    DescriptorConflictError,
    DescriptorIndex,
    DuplicateFileError,
)
from .model import AnnotationState, FileDescriptor, ServiceDescriptor, parent_package_name

__all__ = [
    "AnnotationLookup",
    "AnnotationState",
    "ConflictingServiceError",
    "DescriptorConflictError",
    "DescriptorIndex",
    "DuplicateFileError",
    "FileDescriptor",
    "ServiceDescriptor",
    "parent_package_name",
]
