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

"""Defines constants used across the partition manager."""

# Service constants
GLUE_SERVICE_NAME = 'glue'
S3_SCHEME = 's3'
LOG_LEVEL_ENV_VAR = 'GLUE_PARTITION_MANAGER_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'INFO'

# Partition specification syntax
PARTITION_SEPARATOR = ';'
KEY_VALUE_SEPARATOR = '='

# Glue error codes
ENTITY_NOT_FOUND_ERROR_CODE = 'EntityNotFoundException'
ALREADY_EXISTS_ERROR_CODE = 'AlreadyExistsException'

# Minimal storage descriptor used when the table has none
DEFAULT_INPUT_FORMAT = 'org.apache.hadoop.mapred.TextInputFormat'
DEFAULT_OUTPUT_FORMAT = 'org.apache.hadoop.hive.ql.io.HiveIgnoreKeyTextOutputFormat'
DEFAULT_SERIALIZATION_LIBRARY = 'org.apache.hadoop.hive.serde2.lazy.LazySimpleSerDe'

# Input environment variables, one per command line option
INPUT_ENV_VARS = {
    'operation': 'INPUT_OPERATION',
    'database': 'INPUT_DATABASE',
    'table': 'INPUT_TABLE',
    'partition_values': 'INPUT_PARTITION_VALUES',
    's3_bucket': 'INPUT_S3_BUCKET',
    's3_prefix': 'INPUT_S3_PREFIX',
    'catalog_id': 'INPUT_CATALOG_ID',
    'if_not_exists': 'INPUT_IF_NOT_EXISTS',
    'storage_descriptor': 'INPUT_STORAGE_DESCRIPTOR',
    'region': 'AWS_REGION',
    'profile': 'AWS_PROFILE',
    'output_file': 'GITHUB_OUTPUT',
}

# Output names
OUTPUT_SUCCESS = 'success'
OUTPUT_EXISTS = 'exists'
OUTPUT_PARTITION_VALUES = 'partition-values'
OUTPUT_LOCATION = 'location'
OUTPUT_CREATED_AT = 'created-at'

# Error messages
ERROR_NO_PARTITION_VALUES = 'No partition values provided'
ERROR_INVALID_PARTITION_FORMAT = (
    'Invalid partition value format: "{segment}". Expected format: key=value'
)
ERROR_MISSING_LOCATION = 'S3 location (s3-bucket and s3-prefix) is required for add operation'
ERROR_MALFORMED_DESCRIPTOR = 'Invalid storage descriptor: {error}'
ERROR_INVALID_OPERATION = 'Invalid operation: "{operation}". Must be one of: {valid}'
