import boto3
import pytest
from botocore.stub import Stubber
from moto import mock_aws
from unittest.mock import Mock

from instance_finder.domain.base.ports import AgentInventoryPort, VMInventoryPort
from instance_finder.domain.instance.value_objects import (
    AgentRecord,
    ResourceType,
    Tag,
    VMRecord,
)

REGION = 'us-east-1'


@pytest.fixture(autouse=True)
def aws_credentials(monkeypatch):
    """Mocked AWS Credentials for moto."""
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_SECURITY_TOKEN', 'testing')
    monkeypatch.setenv('AWS_SESSION_TOKEN', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', REGION)
    for var in ('AWS_REGION', 'AWS_PROFILE', 'AWS_ENDPOINT_URL',
                'INSTANCE_FINDER_TIMEOUT', 'INSTANCE_FINDER_CONFDIR',
                'INSTANCE_FINDER_LOGDIR', 'LOG_LEVEL', 'LOG_DESTINATION'):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def ec2_client():
    """EC2 client backed by moto."""
    with mock_aws():
        yield boto3.client('ec2', region_name=REGION)


@pytest.fixture
def image_id(ec2_client):
    """An AMI from moto's default image catalogue."""
    return ec2_client.describe_images()['Images'][0]['ImageId']


@pytest.fixture
def launch_instance(ec2_client, image_id):
    """Launch a moto EC2 instance, optionally tagged, and return its description."""
    def _launch(name=None):
        kwargs = {}
        if name is not None:
            kwargs['TagSpecifications'] = [{
                'ResourceType': 'instance',
                'Tags': [{'Key': 'Name', 'Value': name}],
            }]
        response = ec2_client.run_instances(
            ImageId=image_id,
            InstanceType='t2.micro',
            MinCount=1,
            MaxCount=1,
            **kwargs
        )
        return response['Instances'][0]
    return _launch


@pytest.fixture
def ssm_client():
    return boto3.client('ssm', region_name=REGION)


@pytest.fixture
def ssm_stubber(ssm_client):
    """Stubber supplying SSM responses without any network call."""
    with Stubber(ssm_client) as stubber:
        yield stubber
        stubber.assert_no_pending_responses()


@pytest.fixture
def mock_agent_inventory():
    return Mock(spec=AgentInventoryPort)


@pytest.fixture
def mock_vm_inventory():
    return Mock(spec=VMInventoryPort)


@pytest.fixture
def make_agent_record():
    def _make(instance_id, name='', resource_type=ResourceType.EC2_INSTANCE):
        return AgentRecord(instance_id=instance_id, name=name, resource_type=resource_type)
    return _make


@pytest.fixture
def make_vm_record():
    def _make(instance_id, name=None, extra_tags=None):
        tags = [Tag(key=k, value=v) for k, v in (extra_tags or {}).items()]
        if name is not None:
            tags.append(Tag(key='Name', value=name))
        return VMRecord(instance_id=instance_id, tags=tags)
    return _make
