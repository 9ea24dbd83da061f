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

"""Catalog client abstraction and its AWS Glue implementation.

The operation handlers only talk to a ``CatalogClient``. Failures are reported
as ``CatalogError`` instances whose ``kind`` tells the handler whether the
condition is a missing entity, a duplicate, or any other remote failure.
"""

from awslabs.glue_partition_manager.errors import CatalogError
from awslabs.glue_partition_manager.models import StorageDescriptor
from botocore.exceptions import BotoCoreError, ClientError
from loguru import logger
from typing import Any, Dict, List, Optional, Protocol


class CatalogClient(Protocol):
    """Remote catalog operations used by the partition handlers."""

    def get_partition(
        self,
        database_name: str,
        table_name: str,
        partition_values: List[str],
        catalog_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Return the partition structure or raise ``CatalogError``."""
        ...

    def create_partition(
        self,
        database_name: str,
        table_name: str,
        partition_values: List[str],
        storage_descriptor: StorageDescriptor,
        catalog_id: Optional[str] = None,
    ) -> None:
        """Create the partition or raise ``CatalogError``."""
        ...

    def delete_partition(
        self,
        database_name: str,
        table_name: str,
        partition_values: List[str],
        catalog_id: Optional[str] = None,
    ) -> None:
        """Delete the partition or raise ``CatalogError``."""
        ...

    def get_table_storage_descriptor(
        self,
        database_name: str,
        table_name: str,
        catalog_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Return the table's storage descriptor, if it has one, or raise ``CatalogError``."""
        ...


class GlueCatalogClient:
    """``CatalogClient`` backed by a boto3 Glue client."""

    def __init__(self, glue_client: Any):
        """Initialize the catalog client.

        Args:
            glue_client: A boto3 client for the ``glue`` service
        """
        self.glue_client = glue_client

    @staticmethod
    def _with_catalog_id(kwargs: Dict[str, Any], catalog_id: Optional[str]) -> Dict[str, Any]:
        if catalog_id:
            kwargs['CatalogId'] = catalog_id
        return kwargs

    def get_partition(
        self,
        database_name: str,
        table_name: str,
        partition_values: List[str],
        catalog_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Get a partition from the Glue Data Catalog.

        Args:
            database_name: Name of the database containing the table
            table_name: Name of the table containing the partition
            partition_values: Values that define the partition
            catalog_id: Optional catalog ID (defaults to AWS account ID)

        Returns:
            The Glue ``Partition`` structure, or None when the response carries none

        Raises:
            CatalogError: NOT_FOUND when the partition does not exist
        """
        kwargs = self._with_catalog_id(
            {
                'DatabaseName': database_name,
                'TableName': table_name,
                'PartitionValues': partition_values,
            },
            catalog_id,
        )
        try:
            response = self.glue_client.get_partition(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise CatalogError.from_boto_error(e) from e
        return response.get('Partition')

    def create_partition(
        self,
        database_name: str,
        table_name: str,
        partition_values: List[str],
        storage_descriptor: StorageDescriptor,
        catalog_id: Optional[str] = None,
    ) -> None:
        """Create a partition in the Glue Data Catalog.

        Raises:
            CatalogError: ALREADY_EXISTS when another partition holds the same values
        """
        kwargs = self._with_catalog_id(
            {
                'DatabaseName': database_name,
                'TableName': table_name,
                'PartitionInput': {
                    'Values': partition_values,
                    'StorageDescriptor': storage_descriptor.to_glue(),
                },
            },
            catalog_id,
        )
        try:
            self.glue_client.create_partition(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise CatalogError.from_boto_error(e) from e

    def delete_partition(
        self,
        database_name: str,
        table_name: str,
        partition_values: List[str],
        catalog_id: Optional[str] = None,
    ) -> None:
        """Delete a partition from the Glue Data Catalog.

        Raises:
            CatalogError: NOT_FOUND when the partition does not exist
        """
        kwargs = self._with_catalog_id(
            {
                'DatabaseName': database_name,
                'TableName': table_name,
                'PartitionValues': partition_values,
            },
            catalog_id,
        )
        try:
            self.glue_client.delete_partition(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise CatalogError.from_boto_error(e) from e

    def get_table_storage_descriptor(
        self,
        database_name: str,
        table_name: str,
        catalog_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """Get the storage descriptor of a table, or None when the table has none."""
        kwargs = self._with_catalog_id(
            {'DatabaseName': database_name, 'Name': table_name},
            catalog_id,
        )
        try:
            response = self.glue_client.get_table(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise CatalogError.from_boto_error(e) from e

        storage_descriptor = response.get('Table', {}).get('StorageDescriptor')
        if storage_descriptor is None:
            logger.debug(f'Table {database_name}.{table_name} has no storage descriptor')
        return storage_descriptor
