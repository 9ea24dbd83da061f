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

"""Tests for the AwsHelper class."""

import pytest
from awslabs.glue_partition_manager import __user_agent__
from awslabs.glue_partition_manager.aws_helper import AwsHelper
from unittest.mock import MagicMock, patch


class TestAwsHelper:
    """Tests for the AwsHelper class."""

    def test_get_aws_region(self, monkeypatch):
        """Test that the region comes from AWS_REGION."""
        monkeypatch.setenv('AWS_REGION', 'eu-west-1')
        assert AwsHelper.get_aws_region() == 'eu-west-1'

    def test_get_aws_region_unset(self, monkeypatch):
        """Test that an unset or empty AWS_REGION yields None."""
        monkeypatch.setenv('AWS_REGION', '')
        assert AwsHelper.get_aws_region() is None

    def test_get_aws_profile(self, monkeypatch):
        """Test that the profile comes from AWS_PROFILE."""
        monkeypatch.setenv('AWS_PROFILE', 'data-eng')
        assert AwsHelper.get_aws_profile() == 'data-eng'

    @patch('awslabs.glue_partition_manager.aws_helper.boto3')
    def test_create_client_with_region(self, mock_boto3):
        """Test creating a client without a profile."""
        mock_client = MagicMock()
        mock_boto3.client.return_value = mock_client

        client = AwsHelper.create_boto3_client('glue', region_name='us-west-2')

        assert client is mock_client
        args, kwargs = mock_boto3.client.call_args
        assert args == ('glue',)
        assert kwargs['region_name'] == 'us-west-2'
        assert kwargs['config'].user_agent_extra == __user_agent__

    @patch('awslabs.glue_partition_manager.aws_helper.boto3')
    def test_create_client_without_region(self, mock_boto3):
        """Test that the region is left to boto3 when none is configured."""
        AwsHelper.create_boto3_client('glue')

        assert 'region_name' not in mock_boto3.client.call_args[1]

    @patch('awslabs.glue_partition_manager.aws_helper.boto3')
    def test_create_client_with_profile(self, mock_boto3, monkeypatch):
        """Test that a profile from the environment creates a session."""
        monkeypatch.setenv('AWS_PROFILE', 'data-eng')
        monkeypatch.setenv('AWS_REGION', 'us-east-2')
        mock_session = MagicMock()
        mock_boto3.Session.return_value = mock_session

        AwsHelper.create_boto3_client('glue')

        mock_boto3.Session.assert_called_once_with(profile_name='data-eng')
        assert mock_session.client.call_args[1]['region_name'] == 'us-east-2'
        mock_boto3.client.assert_not_called()

    @patch('awslabs.glue_partition_manager.aws_helper.boto3')
    def test_create_client_failure(self, mock_boto3):
        """Test that client creation errors are re-raised with context."""
        mock_boto3.client.side_effect = ValueError('bad region')

        with pytest.raises(Exception, match='Failed to create boto3 client for glue: bad region'):
            AwsHelper.create_boto3_client('glue', region_name='nowhere-1')
