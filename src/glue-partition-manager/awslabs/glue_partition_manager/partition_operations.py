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

"""Add, delete and existence-check operations for Glue partitions.

Each handler receives the catalog client explicitly and returns a
``PartitionResult``. Expected catalog conditions (a missing partition on
exists/delete, a duplicate on an idempotent add) become successful results;
any other catalog failure becomes a failed result carrying the original
message. Local validation errors are raised before any remote call.
"""

from awslabs.glue_partition_manager.catalog_client import CatalogClient
from awslabs.glue_partition_manager.consts import ERROR_INVALID_OPERATION, ERROR_MISSING_LOCATION
from awslabs.glue_partition_manager.errors import (
    CatalogError,
    CatalogErrorKind,
    InvalidOperationError,
    MissingLocationError,
)
from awslabs.glue_partition_manager.logging_helper import LogLevel, log_with_partition
from awslabs.glue_partition_manager.models import Operation, PartitionConfig, PartitionResult
from awslabs.glue_partition_manager.storage_descriptor import resolve_storage_descriptor
from typing import Callable, Dict, Union


def _failed(config: PartitionConfig, error: CatalogError) -> PartitionResult:
    return PartitionResult(
        success=False,
        exists=False,
        partition_values=config.partition_values,
        error_message=str(error),
    )


def partition_exists(client: CatalogClient, config: PartitionConfig) -> PartitionResult:
    """Check whether a partition exists in the catalog.

    Args:
        client: The catalog client
        config: The partition to look up

    Returns:
        A result with ``exists`` set, and the partition's location and creation
        time when it exists
    """
    log_with_partition(config, LogLevel.INFO, 'Checking if partition exists')
    try:
        partition = client.get_partition(
            config.database,
            config.table,
            config.partition_values,
            catalog_id=config.catalog_id,
        )
    except CatalogError as e:
        if e.kind == CatalogErrorKind.NOT_FOUND:
            log_with_partition(config, LogLevel.INFO, 'Partition does not exist')
            return PartitionResult(
                success=True, exists=False, partition_values=config.partition_values
            )
        log_with_partition(
            config, LogLevel.ERROR, f'Failed to check partition existence: {e}'
        )
        return _failed(config, e)

    if not partition:
        log_with_partition(config, LogLevel.INFO, 'Partition does not exist')
        return PartitionResult(
            success=True, exists=False, partition_values=config.partition_values
        )

    log_with_partition(config, LogLevel.INFO, 'Partition exists')
    return PartitionResult(
        success=True,
        exists=True,
        partition_values=config.partition_values,
        location=partition.get('StorageDescriptor', {}).get('Location'),
        created_at=partition.get('CreationTime'),
    )


def add_partition(client: CatalogClient, config: PartitionConfig) -> PartitionResult:
    """Add a partition to the catalog.

    With ``if_not_exists`` the call is idempotent: an existing partition is
    reported as success without issuing a create, and a duplicate reported by
    the create call itself (another writer won the race) is also a success.

    Args:
        client: The catalog client
        config: The partition to add; ``location`` is required

    Returns:
        The result of the operation

    Raises:
        MissingLocationError: If ``config.location`` is not set
        MalformedDescriptorError: If ``config.custom_descriptor`` cannot be parsed
    """
    if not config.location:
        raise MissingLocationError(ERROR_MISSING_LOCATION)

    if config.if_not_exists:
        existing = partition_exists(client, config)
        if existing.exists:
            log_with_partition(
                config,
                LogLevel.INFO,
                'Partition already exists, skipping creation (if-not-exists=true)',
            )
            return PartitionResult(
                success=True,
                exists=True,
                partition_values=config.partition_values,
                location=existing.location,
            )

    log_with_partition(config, LogLevel.INFO, f'Adding partition at {config.location}')

    storage_descriptor = resolve_storage_descriptor(
        config,
        lambda: client.get_table_storage_descriptor(
            config.database, config.table, catalog_id=config.catalog_id
        ),
    )

    try:
        client.create_partition(
            config.database,
            config.table,
            config.partition_values,
            storage_descriptor,
            catalog_id=config.catalog_id,
        )
    except CatalogError as e:
        if e.kind == CatalogErrorKind.ALREADY_EXISTS and config.if_not_exists:
            log_with_partition(
                config, LogLevel.INFO, 'Partition already exists (race condition handled)'
            )
            return PartitionResult(
                success=True,
                exists=True,
                partition_values=config.partition_values,
                location=config.location,
            )
        log_with_partition(config, LogLevel.ERROR, f'Failed to add partition: {e}')
        return _failed(config, e)

    log_with_partition(config, LogLevel.INFO, 'Partition created successfully')
    return PartitionResult(
        success=True,
        exists=True,
        partition_values=config.partition_values,
        location=config.location,
    )


def delete_partition(client: CatalogClient, config: PartitionConfig) -> PartitionResult:
    """Delete a partition from the catalog; deleting a missing partition succeeds."""
    log_with_partition(config, LogLevel.INFO, 'Deleting partition')
    try:
        client.delete_partition(
            config.database,
            config.table,
            config.partition_values,
            catalog_id=config.catalog_id,
        )
    except CatalogError as e:
        if e.kind == CatalogErrorKind.NOT_FOUND:
            log_with_partition(
                config, LogLevel.INFO, 'Partition does not exist, nothing to delete'
            )
            return PartitionResult(
                success=True, exists=False, partition_values=config.partition_values
            )
        log_with_partition(config, LogLevel.ERROR, f'Failed to delete partition: {e}')
        return _failed(config, e)

    log_with_partition(config, LogLevel.INFO, 'Partition deleted successfully')
    return PartitionResult(success=True, exists=False, partition_values=config.partition_values)


OPERATION_HANDLERS: Dict[Operation, Callable[[CatalogClient, PartitionConfig], PartitionResult]] = {
    Operation.ADD: add_partition,
    Operation.DELETE: delete_partition,
    Operation.EXISTS: partition_exists,
}


def parse_operation(operation: Union[str, Operation]) -> Operation:
    """Normalize an operation name, case-insensitively.

    Raises:
        InvalidOperationError: If the name is not a known operation
    """
    if isinstance(operation, Operation):
        return operation
    try:
        return Operation(operation.strip().lower())
    except ValueError:
        valid = ', '.join(op.value for op in Operation)
        raise InvalidOperationError(
            ERROR_INVALID_OPERATION.format(operation=operation, valid=valid)
        ) from None


def run_operation(
    operation: Union[str, Operation], client: CatalogClient, config: PartitionConfig
) -> PartitionResult:
    """Run the handler for ``operation``."""
    return OPERATION_HANDLERS[parse_operation(operation)](client, config)
