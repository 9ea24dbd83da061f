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

"""Pydantic models for partition configuration, storage descriptors and results."""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.types import StringConstraints
from typing import Annotated, Any, Dict, List, Optional


NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]


class Operation(str, Enum):
    """Partition operations supported by the manager."""

    ADD = 'add'
    DELETE = 'delete'
    EXISTS = 'exists'


class PartitionSpec(BaseModel):
    """Ordered partition keys and values parsed from a ``key=value`` string."""

    model_config = ConfigDict(frozen=True)

    keys: List[str]
    values: List[str]


class GlueModel(BaseModel):
    """Base model for Glue structures.

    Fields are addressed by their Glue API names through aliases. Keys that the
    model does not declare are kept, so a structure read from Glue can be sent
    back without losing anything.
    """

    model_config = ConfigDict(populate_by_name=True, extra='allow', frozen=True)


class Column(GlueModel):
    """A column of a storage descriptor."""

    name: str = Field(alias='Name')
    type: Optional[str] = Field(default=None, alias='Type')
    comment: Optional[str] = Field(default=None, alias='Comment')


class SerdeInfo(GlueModel):
    """Serialization/deserialization settings of a storage descriptor."""

    serialization_library: Optional[str] = Field(default=None, alias='SerializationLibrary')
    name: Optional[str] = Field(default=None, alias='Name')
    parameters: Optional[Dict[str, str]] = Field(default=None, alias='Parameters')


class StorageDescriptor(GlueModel):
    """Schema and physical format metadata of a table or partition."""

    columns: List[Column] = Field(default_factory=list, alias='Columns')
    location: Optional[str] = Field(default=None, alias='Location')
    input_format: Optional[str] = Field(default=None, alias='InputFormat')
    output_format: Optional[str] = Field(default=None, alias='OutputFormat')
    serde_info: Optional[SerdeInfo] = Field(default=None, alias='SerdeInfo')

    def with_location(self, location: Optional[str]) -> 'StorageDescriptor':
        """Return a copy of this descriptor pointing at ``location``."""
        return self.model_copy(update={'location': location}, deep=True)

    def to_glue(self) -> Dict[str, Any]:
        """Serialize to the structure expected by the Glue API."""
        return self.model_dump(by_alias=True, exclude_none=True)


class PartitionConfig(BaseModel):
    """Everything needed to run one partition operation."""

    model_config = ConfigDict(frozen=True)

    database: NonEmptyStr
    table: NonEmptyStr
    partition_values: Annotated[List[str], Field(min_length=1)]
    location: Optional[str] = None
    catalog_id: Optional[str] = None
    if_not_exists: bool = True
    custom_descriptor: Optional[str] = None


class PartitionResult(BaseModel):
    """Outcome of a partition operation."""

    model_config = ConfigDict(frozen=True)

    success: bool
    exists: bool
    partition_values: List[str]
    location: Optional[str] = None
    created_at: Optional[datetime] = None
    error_message: Optional[str] = None
