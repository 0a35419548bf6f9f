from functools import lru_cache
from typing import Dict, List, Optional

import boto3
from pydantic import BaseModel, ConfigDict

from sumo.config.store import ConfigStore
from sumo.config.sumo_config import SumoConfig
from sumo.errors import MissingParameter

from .util import logger

DEFAULT_INSTANCE_SIZE = "m1.small"


@lru_cache()
def _get_ec2_client(
    region, *, access_id: Optional[str], access_secret: Optional[str]
):
    session = boto3.Session(
        aws_access_key_id=access_id,
        aws_secret_access_key=access_secret,
    )
    return session.client(
        "ec2",
        region_name=region,
    )


class Instance(BaseModel):
    model_config = ConfigDict(frozen=True)

    instance_id: str
    status: str
    hostname: Optional[str] = None

    @classmethod
    def from_response(cls, item: Dict) -> "Instance":
        return cls(
            instance_id=item["InstanceId"],
            status=item["State"]["Name"],
            hostname=item.get("PublicDnsName") or None,
        )


class InstanceClient:
    def __init__(self, config_store: ConfigStore, *, ec2_client=None):
        self.config_store = config_store
        self._client = ec2_client

    @property
    def config(self) -> SumoConfig:
        return self.config_store.load()

    @property
    def _ec2_client(self):
        if self._client is None:
            self._client = _get_ec2_client(
                self.config.region,
                access_id=self.config.access_id,
                access_secret=self.config.access_secret,
            )
        return self._client

    def launch(self) -> str:
        ami = self.config_store.get("ami")
        if ami is None:
            raise MissingParameter("ami", "No AMI selected")

        instance_size = self.config_store.get("instance_size", DEFAULT_INSTANCE_SIZE)

        logger.info("Launching %s instance from %s", instance_size, ami)
        result = self._ec2_client.run_instances(
            ImageId=ami,
            InstanceType=instance_size,
            MinCount=1,
            MaxCount=1,
        )

        instances = result["Instances"]
        if len(instances) > 1:
            logger.warning(
                "Launch returned %d instances, ignoring %s",
                len(instances),
                ", ".join(i["InstanceId"] for i in instances[1:]),
            )
        return instances[0]["InstanceId"]

    def list(self) -> List[Instance]:
        logger.debug("Describing instances")
        result = self._ec2_client.describe_instances()

        reservations = result.get("Reservations")
        if not reservations:
            return []

        return [
            Instance.from_response(item)
            for reservation in reservations
            for item in reservation["Instances"]
        ]

    def terminate(self, instance_id: str) -> Dict:
        logger.info("Terminating %s", instance_id)
        return self._ec2_client.terminate_instances(InstanceIds=[instance_id])
