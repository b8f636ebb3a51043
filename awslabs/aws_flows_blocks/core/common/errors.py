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

from pydantic import BaseModel


class Failure(BaseModel):
    """A failure that can be reported back to the caller of a block."""

    reason: str
    block_id: str | None = None
    details: list[str] | None = None


class AwsFlowsBlocksError(Exception):
    """Base class for all errors raised by the blocks catalog."""

    def as_failure(self) -> Failure:
        """Return the error as a failure payload."""
        return Failure(reason=str(self))


class UnknownBlockError(AwsFlowsBlocksError):
    """Raised when a block identifier is not registered in the catalog."""

    def __init__(self, block_id: str):
        """Initialize the error with the unknown block identifier."""
        self.block_id = block_id
        super().__init__(f"The block '{block_id}' does not exist in the catalog.")

    def as_failure(self) -> Failure:
        """Return the error as a failure payload."""
        return Failure(reason=str(self), block_id=self.block_id)


class DuplicateBlockError(AwsFlowsBlocksError):
    """Raised when two blocks are registered with the same identifier."""

    def __init__(self, block_id: str):
        """Initialize the error with the duplicated block identifier."""
        self.block_id = block_id
        super().__init__(f"The block '{block_id}' is already registered.")


class InvalidInputError(AwsFlowsBlocksError):
    """Raised when an invocation input does not match the block's declared fields."""

    def __init__(self, block_id: str, errors: list[str]):
        """Initialize the error with every structural violation found."""
        self.block_id = block_id
        self.errors = errors
        super().__init__(f"Invalid input for block '{block_id}': {'; '.join(errors)}")

    def as_failure(self) -> Failure:
        """Return the error as a failure payload."""
        return Failure(
            reason=f"Invalid input for block '{self.block_id}'",
            block_id=self.block_id,
            details=self.errors,
        )


class IncompleteCredentialsError(AwsFlowsBlocksError):
    """Raised when AssumeRole succeeds without returning a full set of credentials."""

    def __init__(self, role_arn: str, missing: list[str]):
        """Initialize the error with the assumed role and the missing credential fields."""
        self.role_arn = role_arn
        self.missing = missing
        super().__init__(
            f"AssumeRole for '{role_arn}' returned incomplete credentials, "
            f'missing: {", ".join(missing)}'
        )
