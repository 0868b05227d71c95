"""Shared fixtures for the driver Lambda tests.

DynamoDB is provided by moto; every test that uses `table` gets a fresh,
empty drivers table keyed on (team, driverId).
"""

import pytest
import boto3
from moto import mock_aws

from backend.common.config import get_services
from backend.common.store import DriverStore

TABLE_NAME = "Formula1Drivers"
REGION = "us-east-1"


@pytest.fixture(autouse=True)
def aws_env(monkeypatch):
    """Fake credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", REGION)
    monkeypatch.setenv("TABLE_NAME", TABLE_NAME)
    monkeypatch.setenv("REGION", REGION)
    get_services.cache_clear()
    yield
    get_services.cache_clear()


@pytest.fixture
def table():
    with mock_aws():
        dynamodb = boto3.resource("dynamodb", region_name=REGION)
        table = dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[
                {"AttributeName": "team", "KeyType": "HASH"},
                {"AttributeName": "driverId", "KeyType": "RANGE"},
            ],
            AttributeDefinitions=[
                {"AttributeName": "team", "AttributeType": "S"},
                {"AttributeName": "driverId", "AttributeType": "S"},
            ],
            BillingMode="PAY_PER_REQUEST",
        )
        yield table


@pytest.fixture
def store(table):
    return DriverStore(table)


def make_driver(**overrides):
    driver = {
        "team": "Mercedes",
        "driverId": "HAM",
        "driverName": "Lewis Hamilton",
        "nationality": "British",
        "carNumber": 44,
        "points": 400,
        "description": "Seven-time champion",
        "isActive": True,
    }
    driver.update(overrides)
    return driver
