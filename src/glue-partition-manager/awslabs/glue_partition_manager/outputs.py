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

"""Named outputs of a partition operation."""

from awslabs.glue_partition_manager.consts import (
    OUTPUT_CREATED_AT,
    OUTPUT_EXISTS,
    OUTPUT_LOCATION,
    OUTPUT_PARTITION_VALUES,
    OUTPUT_SUCCESS,
    PARTITION_SEPARATOR,
)
from awslabs.glue_partition_manager.models import PartitionResult
from typing import Dict, Optional


def _flag(value: bool) -> str:
    return 'true' if value else 'false'


def result_outputs(result: PartitionResult) -> Dict[str, str]:
    """Map a successful result to its named outputs.

    Only ``success=false`` is reported for a failed result.
    """
    if not result.success:
        return {OUTPUT_SUCCESS: 'false'}

    outputs = {
        OUTPUT_SUCCESS: 'true',
        OUTPUT_EXISTS: _flag(result.exists),
        OUTPUT_PARTITION_VALUES: PARTITION_SEPARATOR.join(result.partition_values),
    }
    if result.location:
        outputs[OUTPUT_LOCATION] = result.location
    if result.created_at:
        outputs[OUTPUT_CREATED_AT] = result.created_at.isoformat()
    return outputs


def write_outputs(outputs: Dict[str, str], path: Optional[str]) -> None:
    """Append ``name=value`` lines to the outputs file, if one is configured."""
    if not path:
        return
    with open(path, 'a', encoding='utf-8') as f:
        for name, value in outputs.items():
            f.write(f'{name}={value}\n')
