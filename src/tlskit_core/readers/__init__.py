"""Path readers that fetch raw bytes from backing stores."""

from .aws_secrets import AWSSecretsManagerPathReader
from .aws_ssm import AWSParameterStorePathReader
from .base import PathReader
from .factory import READER_TYPES, create_path_reader
from .local import LocalPathReader
from .memory import InMemoryPathReader

__all__ = [
    "READER_TYPES",
    "AWSParameterStorePathReader",
    "AWSSecretsManagerPathReader",
    "InMemoryPathReader",
    "LocalPathReader",
    "PathReader",
    "create_path_reader",
]
