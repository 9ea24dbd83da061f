# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exceptions raised by the partition manager."""

from awslabs.glue_partition_manager.consts import (
    ALREADY_EXISTS_ERROR_CODE,
    ENTITY_NOT_FOUND_ERROR_CODE,
)
from botocore.exceptions import BotoCoreError, ClientError
from enum import Enum
from typing import Optional, Union


class PartitionManagerError(Exception):
    """Base class for all partition manager errors."""


class InvalidPartitionFormatError(PartitionManagerError):
    """Raised when a partition specification string cannot be parsed."""


class MissingLocationError(PartitionManagerError):
    """Raised when a partition is added without a storage location."""


class MalformedDescriptorError(PartitionManagerError):
    """Raised when a custom storage descriptor payload cannot be parsed."""


class InvalidOperationError(PartitionManagerError):
    """Raised when the requested operation is not one of add, delete or exists."""


class CatalogErrorKind(str, Enum):
    """Discriminant for catalog failures."""

    NOT_FOUND = 'not_found'
    ALREADY_EXISTS = 'already_exists'
    REMOTE_FAILURE = 'remote_failure'


class CatalogError(PartitionManagerError):
    """A failed catalog call, tagged with the kind of failure.

    Operation handlers switch on ``kind`` to decide whether the condition is an
    expected outcome (for example a missing partition on delete) or a failure.
    """

    def __init__(
        self, kind: CatalogErrorKind, message: str, error_code: Optional[str] = None
    ):
        """Initialize the catalog error with its kind, message and AWS error code."""
        self.kind = kind
        self.error_code = error_code
        super().__init__(message)

    @classmethod
    def from_boto_error(cls, error: Union[ClientError, BotoCoreError]) -> 'CatalogError':
        """Build a catalog error from a botocore exception."""
        if isinstance(error, ClientError):
            error_code = error.response.get('Error', {}).get('Code')
            if error_code == ENTITY_NOT_FOUND_ERROR_CODE:
                kind = CatalogErrorKind.NOT_FOUND
            elif error_code == ALREADY_EXISTS_ERROR_CODE:
                kind = CatalogErrorKind.ALREADY_EXISTS
            else:
                kind = CatalogErrorKind.REMOTE_FAILURE
            return cls(kind, str(error), error_code)
        return cls(CatalogErrorKind.REMOTE_FAILURE, str(error))
