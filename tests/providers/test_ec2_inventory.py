import pytest
from unittest.mock import Mock
from botocore.exceptions import ClientError, ConnectTimeoutError

from instance_finder.domain.base.ports import VMInventoryPort
from instance_finder.domain.instance.value_objects import QueryFilter, Tag
from instance_finder.infrastructure.exceptions import InventoryBackendError
from instance_finder.providers.aws.inventory import EC2Inventory


@pytest.fixture
def ec2_inventory(ec2_client):
    return EC2Inventory(ec2_client)


def test_implements_port(ec2_inventory):
    assert isinstance(ec2_inventory, VMInventoryPort)


def test_describe_by_instance_id(ec2_inventory, launch_instance):
    # Arrange
    instance = launch_instance(name="web-01")
    launch_instance(name="web-02")

    # Act
    records = ec2_inventory.describe_instances(
        [QueryFilter(name="instance-id", values=[instance['InstanceId']])]
    )

    # Assert
    assert len(records) == 1
    assert records[0].instance_id == instance['InstanceId']
    assert records[0].name == "web-01"
    assert Tag(key="Name", value="web-01") in records[0].tags


def test_describe_by_name_tag(ec2_inventory, launch_instance):
    # Arrange
    launch_instance(name="web-01")
    db = launch_instance(name="db-01")

    # Act
    records = ec2_inventory.describe_instances([QueryFilter(name="tag:Name", values=["db-01"])])

    # Assert
    assert [r.instance_id for r in records] == [db['InstanceId']]


def test_describe_by_private_ip(ec2_inventory, launch_instance):
    # Arrange
    instance = launch_instance(name="web-01")
    launch_instance(name="web-02")

    # Act
    records = ec2_inventory.describe_instances(
        [QueryFilter(name="private-ip-address", values=[instance['PrivateIpAddress']])]
    )

    # Assert
    assert [r.instance_id for r in records] == [instance['InstanceId']]


def test_describe_flattens_reservations(ec2_inventory, launch_instance):
    # Arrange
    ids = {launch_instance()['InstanceId'] for _ in range(3)}

    # Act
    records = ec2_inventory.describe_instances(
        [QueryFilter(name="instance-id", values=sorted(ids))]
    )

    # Assert
    assert {r.instance_id for r in records} == ids
    assert all(r.name == "" for r in records)


def test_running_state_filter_excludes_stopped(ec2_inventory, ec2_client, launch_instance):
    # Arrange
    running = launch_instance(name="running")
    stopped = launch_instance(name="stopped")
    ec2_client.stop_instances(InstanceIds=[stopped['InstanceId']])

    # Act
    records = ec2_inventory.describe_instances([
        QueryFilter(name="instance-state-name", values=["running"]),
        QueryFilter(name="instance-id", values=[running['InstanceId'], stopped['InstanceId']]),
    ])

    # Assert
    assert [r.instance_id for r in records] == [running['InstanceId']]


def test_describe_no_match(ec2_inventory, launch_instance):
    launch_instance(name="web-01")

    records = ec2_inventory.describe_instances([QueryFilter(name="tag:Name", values=["nope"])])

    assert records == []


def test_client_error_is_wrapped():
    # Arrange
    client = Mock()
    client.describe_instances.side_effect = ClientError(
        {'Error': {'Code': 'UnauthorizedOperation', 'Message': 'not authorized'}},
        'DescribeInstances'
    )
    inventory = EC2Inventory(client)

    # Act & Assert
    with pytest.raises(InventoryBackendError) as exc:
        inventory.describe_instances([QueryFilter(name="tag:Name", values=["x"])])
    assert "UnauthorizedOperation" in str(exc.value)
    assert exc.value.service == "ec2"
    assert exc.value.details == {"service": "ec2", "operation": "DescribeInstances"}
    assert isinstance(exc.value.__cause__, ClientError)


def test_timeout_is_wrapped():
    # Arrange
    client = Mock()
    client.describe_instances.side_effect = ConnectTimeoutError(
        endpoint_url="https://ec2.us-east-1.amazonaws.com"
    )
    inventory = EC2Inventory(client)

    # Act & Assert
    with pytest.raises(InventoryBackendError, match="ec2.us-east-1.amazonaws.com"):
        inventory.describe_instances([QueryFilter(name="instance-id", values=["i-1"])])


def test_filters_are_sent_in_aws_format():
    # Arrange
    client = Mock()
    client.describe_instances.return_value = {'Reservations': []}
    inventory = EC2Inventory(client)

    # Act
    inventory.describe_instances([
        QueryFilter(name="instance-state-name", values=["running"]),
        QueryFilter(name="instance-id", values=["i-1", "i-2"]),
    ])

    # Assert
    client.describe_instances.assert_called_once_with(Filters=[
        {'Name': 'instance-state-name', 'Values': ['running']},
        {'Name': 'instance-id', 'Values': ['i-1', 'i-2']},
    ])
