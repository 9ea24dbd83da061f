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

"""Command line entry point for the AWS Glue partition manager.

Runs exactly one partition operation per invocation. Every option can also be
supplied through an environment variable (see ``INPUT_ENV_VARS``), which lets
the tool run unchanged as a CI action step.
"""

import argparse
import os
import sys
from awslabs.glue_partition_manager.aws_helper import AwsHelper
from awslabs.glue_partition_manager.catalog_client import GlueCatalogClient
from awslabs.glue_partition_manager.consts import (
    DEFAULT_LOG_LEVEL,
    ERROR_MISSING_LOCATION,
    GLUE_SERVICE_NAME,
    INPUT_ENV_VARS,
    LOG_LEVEL_ENV_VAR,
    OUTPUT_SUCCESS,
)
from awslabs.glue_partition_manager.errors import MissingLocationError, PartitionManagerError
from awslabs.glue_partition_manager.models import Operation, PartitionConfig, PartitionResult
from awslabs.glue_partition_manager.outputs import result_outputs, write_outputs
from awslabs.glue_partition_manager.partition_operations import parse_operation, run_operation
from awslabs.glue_partition_manager.partition_spec import (
    build_s3_location,
    parse_partition_spec,
)
from loguru import logger
from pydantic import ValidationError
from typing import List, Optional


REQUIRED_OPTIONS = ['operation', 'database', 'table', 'partition_values']


def configure_logging() -> None:
    """Send logs to stderr at the configured level.

    An unknown level falls back to ``DEFAULT_LOG_LEVEL`` with a warning.
    """
    level = os.getenv(LOG_LEVEL_ENV_VAR, DEFAULT_LOG_LEVEL).strip().upper()
    logger.remove()
    try:
        logger.add(sys.stderr, level=level)
    except ValueError:
        logger.add(sys.stderr, level=DEFAULT_LOG_LEVEL)
        logger.warning(f'Unknown log level {level!r}, using {DEFAULT_LOG_LEVEL}')


def _env(option: str) -> Optional[str]:
    return os.environ.get(INPUT_ENV_VARS[option]) or None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, falling back to environment variables."""
    parser = argparse.ArgumentParser(
        description='Add, delete or check partitions in the AWS Glue Data Catalog'
    )
    parser.add_argument(
        '--operation',
        default=_env('operation'),
        help=f'Operation to run: {", ".join(op.value for op in Operation)}',
    )
    parser.add_argument('--database', default=_env('database'), help='Glue database name')
    parser.add_argument('--table', default=_env('table'), help='Glue table name')
    parser.add_argument(
        '--partition-values',
        default=_env('partition_values'),
        help='Partition values, e.g. "year=2025;month=11;day=24"',
    )
    parser.add_argument(
        '--s3-bucket', default=_env('s3_bucket'), help='S3 bucket of the partition data'
    )
    parser.add_argument(
        '--s3-prefix', default=_env('s3_prefix'), help='S3 prefix of the partition data'
    )
    parser.add_argument(
        '--catalog-id',
        default=_env('catalog_id'),
        help='Glue catalog ID (defaults to the caller account)',
    )
    parser.add_argument(
        '--if-not-exists',
        default=_env('if_not_exists') or 'true',
        help='Succeed without changes when the partition already exists (default: true)',
    )
    parser.add_argument(
        '--storage-descriptor',
        default=_env('storage_descriptor'),
        help='Custom storage descriptor as JSON (defaults to the table descriptor)',
    )
    parser.add_argument('--region', default=_env('region'), help='AWS region')
    parser.add_argument('--profile', default=_env('profile'), help='AWS profile')
    parser.add_argument(
        '--output-file',
        default=_env('output_file'),
        help='File to append name=value outputs to',
    )
    return parser.parse_args(argv)


def missing_options(args: argparse.Namespace) -> List[str]:
    """Return the command line flags of required options that have no value."""
    return [
        f'--{option.replace("_", "-")}' for option in REQUIRED_OPTIONS if not getattr(args, option)
    ]


def build_config(args: argparse.Namespace, operation: Operation) -> PartitionConfig:
    """Build the partition configuration from parsed arguments.

    Raises:
        InvalidPartitionFormatError: If the partition values cannot be parsed
        MissingLocationError: If an add is requested without bucket and prefix
    """
    spec = parse_partition_spec(args.partition_values)
    logger.info(f'Partition keys: [{", ".join(spec.keys)}]')
    logger.info(f'Partition values: [{", ".join(spec.values)}]')

    location = None
    if args.s3_bucket and args.s3_prefix:
        location = build_s3_location(args.s3_bucket, args.s3_prefix)

    if operation == Operation.ADD and not location:
        raise MissingLocationError(ERROR_MISSING_LOCATION)

    return PartitionConfig(
        database=args.database,
        table=args.table,
        partition_values=spec.values,
        location=location,
        catalog_id=args.catalog_id or None,
        if_not_exists=args.if_not_exists.strip().lower() == 'true',
        custom_descriptor=args.storage_descriptor or None,
    )


def _log_summary(operation: Operation, result: PartitionResult) -> None:
    logger.info('=' * 50)
    logger.info('Operation completed successfully')
    logger.info(f'Operation: {operation.value}')
    logger.info(f'Partition exists: {result.exists}')
    if result.location:
        logger.info(f'Location: {result.location}')
    logger.info('=' * 50)


def main(argv: Optional[List[str]] = None) -> int:
    """Run one partition operation and report its outcome.

    Returns:
        0 when the operation succeeded, 1 otherwise
    """
    configure_logging()
    args = parse_args(argv)
    missing = missing_options(args)
    if missing:
        logger.error(f'The following arguments are required: {", ".join(missing)}')
        write_outputs({OUTPUT_SUCCESS: 'false'}, args.output_file)
        return 1

    try:
        operation = parse_operation(args.operation)
        logger.info(f'AWS Glue Partition Manager - Operation: {operation.value}')
        logger.info(f'Database: {args.database}')
        logger.info(f'Table: {args.table}')

        config = build_config(args, operation)
        glue_client = AwsHelper.create_boto3_client(
            GLUE_SERVICE_NAME, region_name=args.region, profile_name=args.profile
        )
        result = run_operation(operation, GlueCatalogClient(glue_client), config)
    except (PartitionManagerError, ValidationError) as e:
        logger.error(f'Partition operation failed: {e}')
        write_outputs({OUTPUT_SUCCESS: 'false'}, args.output_file)
        return 1
    except Exception as e:
        logger.error(f'Unexpected error: {e}')
        write_outputs({OUTPUT_SUCCESS: 'false'}, args.output_file)
        return 1

    write_outputs(result_outputs(result), args.output_file)
    print(result.model_dump_json())

    if not result.success:
        logger.error(f'Partition operation failed: {result.error_message or "Operation failed"}')
        return 1

    _log_summary(operation, result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
