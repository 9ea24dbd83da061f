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

"""Shared fixtures for the partition manager tests."""

import pytest
from awslabs.glue_partition_manager.catalog_client import GlueCatalogClient
from awslabs.glue_partition_manager.consts import INPUT_ENV_VARS, LOG_LEVEL_ENV_VAR
from awslabs.glue_partition_manager.models import PartitionConfig
from loguru import logger
from unittest.mock import MagicMock


@pytest.fixture(autouse=True)
def clean_input_env(monkeypatch):
    """Keep the caller's environment from leaking into option defaults."""
    for env_var in INPUT_ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop log handlers bound to a test's captured stderr."""
    yield
    logger.remove()


@pytest.fixture
def mock_glue_client():
    """Create a mock Glue client."""
    return MagicMock()


@pytest.fixture
def catalog(mock_glue_client):
    """Create a GlueCatalogClient around the mock Glue client."""
    return GlueCatalogClient(mock_glue_client)


@pytest.fixture
def table_storage_descriptor():
    """A Parquet table storage descriptor as returned by glue.get_table."""
    return {
        'Columns': [
            {'Name': 'event_id', 'Type': 'string'},
            {'Name': 'payload', 'Type': 'string', 'Comment': 'raw event body'},
        ],
        'Location': 's3://data-lake/raw/events/',
        'InputFormat': 'org.apache.hadoop.hive.ql.io.parquet.MapredParquetInputFormat',
        'OutputFormat': 'org.apache.hadoop.hive.ql.io.parquet.MapredParquetOutputFormat',
        'Compressed': False,
        'SerdeInfo': {
            'SerializationLibrary': 'org.apache.hadoop.hive.ql.io.parquet.serde.ParquetHiveSerDe',
            'Parameters': {'serialization.format': '1'},
        },
        'StoredAsSubDirectories': False,
    }


@pytest.fixture
def make_config():
    """Build a PartitionConfig for the events table with overridable fields."""

    def _make_config(**overrides):
        fields = {
            'database': 'analytics',
            'table': 'events',
            'partition_values': ['2025-11-24'],
            'location': 's3://data-lake/raw/events/date=2025-11-24/',
        }
        fields.update(overrides)
        return PartitionConfig(**fields)

    return _make_config
