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

"""Tests for the outputs module."""

from awslabs.glue_partition_manager.models import PartitionResult
from awslabs.glue_partition_manager.outputs import result_outputs, write_outputs
from tests.test_utils import CREATION_TIME


class TestResultOutputs:
    """Tests for result_outputs."""

    def test_successful_result(self):
        """Test all outputs of a successful lookup."""
        result = PartitionResult(
            success=True,
            exists=True,
            partition_values=['2025', '11', '24'],
            location='s3://data-lake/raw/events/',
            created_at=CREATION_TIME,
        )

        assert result_outputs(result) == {
            'success': 'true',
            'exists': 'true',
            'partition-values': '2025;11;24',
            'location': 's3://data-lake/raw/events/',
            'created-at': '2025-11-24T08:30:00+00:00',
        }

    def test_optional_outputs_are_omitted(self):
        """Test that location and creation time are only set when known."""
        result = PartitionResult(success=True, exists=False, partition_values=['2025-11-24'])

        assert result_outputs(result) == {
            'success': 'true',
            'exists': 'false',
            'partition-values': '2025-11-24',
        }

    def test_failed_result(self):
        """Test that a failed result only reports success=false."""
        result = PartitionResult(
            success=False, exists=False, partition_values=['1'], error_message='boom'
        )

        assert result_outputs(result) == {'success': 'false'}


class TestWriteOutputs:
    """Tests for write_outputs."""

    def test_appends_lines(self, tmp_path):
        """Test that outputs are appended as name=value lines."""
        output_file = tmp_path / 'outputs'
        output_file.write_text('previous=1\n')

        write_outputs({'success': 'true', 'exists': 'false'}, str(output_file))

        assert output_file.read_text() == 'previous=1\nsuccess=true\nexists=false\n'

    def test_no_path(self, tmp_path):
        """Test that nothing is written without an outputs file."""
        write_outputs({'success': 'true'}, None)

        assert list(tmp_path.iterdir()) == []
