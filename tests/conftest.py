"""
Pytest configuration and fixtures for test isolation.
"""
import os
from unittest.mock import MagicMock

import pytest

from readme_check.config.environment import EnvironmentVariables


VALID_README = """\
# terraform-aws-network

Creates a VPC. See the [module docs](https://example.com/docs/network).

## Goals

Provide a reusable network baseline.

## Resources

| Name | Type |
|------|------|
| [aws_vpc.this](https://registry.terraform.io/providers/hashicorp/aws/latest/docs/resources/vpc) | resource |

## Inputs

| Name | Description | Type | Required |
|------|-------------|------|:--------:|
| cidr_block | CIDR block of the VPC | `string` | yes |

## Outputs

| Name | Description |
|------|-------------|
| vpc_id | ID of the VPC |

## Features

- Flow logs

## Testing

Run the test suite.

## Authors

Platform team.

## License

Apache 2.0 licensed. See <https://www.apache.org/licenses/LICENSE-2.0>.

## Usage

Reference the module from your configuration.
"""


def make_response(status_code=200, content=b'{"errors": []}'):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.__enter__.return_value = response
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture(autouse=True)
def isolate_tests(tmp_path, monkeypatch):
    """
    Automatically isolate each test by:
    1. Running from a temporary working directory
    2. Removing readme-check environment variables
    """
    monkeypatch.chdir(tmp_path)
    for var in EnvironmentVariables.get_all_variables():
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture(autouse=True, scope="function")
def reset_environment():
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def valid_readme():
    return VALID_README


@pytest.fixture
def readme_file(tmp_path):
    """Write README text to a temporary file and return its path."""
    def _write(text=VALID_README, name="README.md"):
        fp = tmp_path / name
        fp.write_text(text, encoding="utf-8")
        return str(fp)
    return _write


@pytest.fixture
def ok_response():
    return make_response()


@pytest.fixture
def response_factory():
    return make_response
