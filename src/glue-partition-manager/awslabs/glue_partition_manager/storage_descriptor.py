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

"""Resolution of the storage descriptor attached to a new partition.

The descriptor comes from the first source that yields one:

1. a custom descriptor payload supplied with the request
2. the storage descriptor of the owning table
3. a minimal text-format default

Whatever the source, the location always comes from the request.
"""

from awslabs.glue_partition_manager.consts import (
    DEFAULT_INPUT_FORMAT,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SERIALIZATION_LIBRARY,
    ERROR_MALFORMED_DESCRIPTOR,
)
from awslabs.glue_partition_manager.errors import (
    CatalogError,
    CatalogErrorKind,
    MalformedDescriptorError,
)
from awslabs.glue_partition_manager.logging_helper import LogLevel, log_with_partition
from awslabs.glue_partition_manager.models import PartitionConfig, SerdeInfo, StorageDescriptor
from pydantic import ValidationError
from typing import Any, Callable, Dict, Optional


TableDescriptorFetcher = Callable[[], Optional[Dict[str, Any]]]


def parse_custom_descriptor(payload: str) -> StorageDescriptor:
    """Parse a JSON storage descriptor payload.

    Raises:
        MalformedDescriptorError: If the payload is not a valid descriptor object
    """
    try:
        return StorageDescriptor.model_validate_json(payload)
    except ValidationError as e:
        raise MalformedDescriptorError(ERROR_MALFORMED_DESCRIPTOR.format(error=e)) from e


def custom_descriptor(config: PartitionConfig) -> Optional[StorageDescriptor]:
    """Return the request's own descriptor, if one was supplied."""
    if config.custom_descriptor is None:
        return None
    descriptor = parse_custom_descriptor(config.custom_descriptor)
    log_with_partition(config, LogLevel.INFO, 'Using custom storage descriptor')
    return descriptor


def inherited_descriptor(
    config: PartitionConfig, fetch_table_descriptor: TableDescriptorFetcher
) -> Optional[StorageDescriptor]:
    """Return a copy of the table's descriptor, or None when it cannot be obtained.

    Lookup failures are logged and swallowed; only the create call may fail the
    operation.
    """
    try:
        table_descriptor = fetch_table_descriptor()
    except CatalogError as e:
        if e.kind == CatalogErrorKind.NOT_FOUND:
            log_with_partition(
                config,
                LogLevel.WARNING,
                f'Table {config.database}.{config.table} was not found while looking up its '
                f'storage descriptor: {e}',
            )
        else:
            log_with_partition(
                config, LogLevel.WARNING, f'Could not retrieve table storage descriptor: {e}'
            )
        return None

    if not table_descriptor:
        return None

    try:
        descriptor = StorageDescriptor.model_validate(table_descriptor)
    except ValidationError as e:
        log_with_partition(
            config, LogLevel.WARNING, f'Ignoring unreadable table storage descriptor: {e}'
        )
        return None

    log_with_partition(config, LogLevel.INFO, 'Inherited storage descriptor from table')
    return descriptor


def default_descriptor(config: PartitionConfig) -> StorageDescriptor:
    """Return a minimal plain-text descriptor."""
    log_with_partition(
        config,
        LogLevel.WARNING,
        'No table storage descriptor available, using minimal default',
    )
    return StorageDescriptor(
        location=config.location,
        input_format=DEFAULT_INPUT_FORMAT,
        output_format=DEFAULT_OUTPUT_FORMAT,
        serde_info=SerdeInfo(serialization_library=DEFAULT_SERIALIZATION_LIBRARY),
    )


def resolve_storage_descriptor(
    config: PartitionConfig, fetch_table_descriptor: TableDescriptorFetcher
) -> StorageDescriptor:
    """Determine the storage descriptor for a new partition.

    Args:
        config: The partition configuration; its location is applied to the result
        fetch_table_descriptor: Returns the owning table's descriptor, raising
            ``CatalogError`` when the lookup fails. Only called when no custom
            descriptor is supplied.

    Returns:
        A descriptor owned by the caller, located at ``config.location``

    Raises:
        MalformedDescriptorError: If the custom descriptor payload is invalid
    """
    descriptor = custom_descriptor(config)
    if descriptor is None:
        descriptor = inherited_descriptor(config, fetch_table_descriptor)
    if descriptor is None:
        descriptor = default_descriptor(config)
    return descriptor.with_location(config.location)
