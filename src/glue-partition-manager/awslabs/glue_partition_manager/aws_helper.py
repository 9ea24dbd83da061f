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

"""AWS helper for the Glue partition manager."""

import boto3
import os
from awslabs.glue_partition_manager import __user_agent__
from botocore.config import Config
from loguru import logger
from typing import Any, Optional


class AwsHelper:
    """Helper class for AWS operations.

    Resolves region and profile from the environment and creates boto3 clients
    tagged with the partition manager's user agent.
    """

    @staticmethod
    def get_aws_region() -> Optional[str]:
        """Get the AWS region from the environment if set."""
        return os.environ.get('AWS_REGION') or None

    @staticmethod
    def get_aws_profile() -> Optional[str]:
        """Get the AWS profile from the environment if set."""
        return os.environ.get('AWS_PROFILE') or None

    @classmethod
    def create_boto3_client(
        cls,
        service_name: str,
        region_name: Optional[str] = None,
        profile_name: Optional[str] = None,
    ) -> Any:
        """Create a boto3 client with the appropriate profile and region.

        The client is configured with the user agent suffix
        'awslabs/glue-partition-manager/{version}' to identify API calls made by
        the partition manager.

        Args:
            service_name: The AWS service name (e.g., 'glue')
            region_name: Optional region override, defaults to AWS_REGION
            profile_name: Optional profile override, defaults to AWS_PROFILE

        Returns:
            A boto3 client for the specified service

        Raises:
            Exception: If there's an error creating the client
        """
        try:
            region = region_name if region_name is not None else cls.get_aws_region()
            profile = profile_name if profile_name is not None else cls.get_aws_profile()

            config = Config(user_agent_extra=__user_agent__)

            if profile:
                session = boto3.Session(profile_name=profile)
                if region is not None:
                    client = session.client(service_name, region_name=region, config=config)
                else:
                    client = session.client(service_name, config=config)
            else:
                if region is not None:
                    client = boto3.client(service_name, region_name=region, config=config)
                else:
                    client = boto3.client(service_name, config=config)

            logger.debug(f'Created boto3 client for {service_name} in {region}')
            return client
        except Exception as e:
            # Re-raise with more context
            raise Exception(f'Failed to create boto3 client for {service_name}: {str(e)}')
