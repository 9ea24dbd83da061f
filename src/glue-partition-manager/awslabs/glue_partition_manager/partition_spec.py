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

"""Parsing of partition specifications and construction of S3 locations."""

from awslabs.glue_partition_manager.consts import (
    ERROR_INVALID_PARTITION_FORMAT,
    ERROR_NO_PARTITION_VALUES,
    KEY_VALUE_SEPARATOR,
    PARTITION_SEPARATOR,
    S3_SCHEME,
)
from awslabs.glue_partition_manager.errors import InvalidPartitionFormatError
from awslabs.glue_partition_manager.models import PartitionSpec


def parse_partition_spec(spec: str) -> PartitionSpec:
    """Parse a partition specification into ordered keys and values.

    Supported formats:
    - ``date=2025-11-24`` gives keys ``['date']`` and values ``['2025-11-24']``
    - ``year=2025;month=11;day=24`` gives values ``['2025', '11', '24']``

    Segments are separated by ``;`` and blank segments are ignored. Each segment
    is split on its first ``=``; the value may be empty but the key may not.

    Args:
        spec: The raw partition specification

    Returns:
        The parsed keys and values, in input order

    Raises:
        InvalidPartitionFormatError: If a segment is malformed or nothing is left to parse
    """
    segments = [segment.strip() for segment in spec.split(PARTITION_SEPARATOR)]

    keys = []
    values = []
    for segment in filter(None, segments):
        key, separator, value = segment.partition(KEY_VALUE_SEPARATOR)
        key = key.strip()
        if not separator or not key:
            raise InvalidPartitionFormatError(ERROR_INVALID_PARTITION_FORMAT.format(segment=segment))
        keys.append(key)
        values.append(value.strip())

    if not values:
        raise InvalidPartitionFormatError(ERROR_NO_PARTITION_VALUES)

    return PartitionSpec(keys=keys, values=values)


def build_s3_location(bucket: str, prefix: str) -> str:
    """Build a canonical S3 location that always ends with a single ``/``."""
    clean_bucket = bucket.strip('/')
    clean_prefix = prefix.strip('/')
    if not clean_prefix:
        return f'{S3_SCHEME}://{clean_bucket}/'
    return f'{S3_SCHEME}://{clean_bucket}/{clean_prefix}/'
