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

"""Logging helper for the partition manager."""

from awslabs.glue_partition_manager.models import PartitionConfig
from enum import Enum
from loguru import logger
from typing import Any


class LogLevel(Enum):
    """Enum for log levels."""

    DEBUG = 'debug'
    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'
    CRITICAL = 'critical'


def partition_reference(config: PartitionConfig) -> str:
    """Return a short ``database.table[values]`` reference for a partition."""
    values = ', '.join(config.partition_values)
    return f'{config.database}.{config.table}[{values}]'


def log_with_partition(
    config: PartitionConfig, level: LogLevel, message: str, **kwargs: Any
) -> None:
    """Log a message prefixed with the partition it concerns.

    Args:
        config: The partition configuration of the running operation
        level: The log level
        message: The message to log
        **kwargs: Additional fields to include in the log message
    """
    log_message = f'[{partition_reference(config)}] {message}'

    if level == LogLevel.DEBUG:
        logger.debug(log_message, **kwargs)
    elif level == LogLevel.INFO:
        logger.info(log_message, **kwargs)
    elif level == LogLevel.WARNING:
        logger.warning(log_message, **kwargs)
    elif level == LogLevel.ERROR:
        logger.error(log_message, **kwargs)
    elif level == LogLevel.CRITICAL:
        logger.critical(log_message, **kwargs)
