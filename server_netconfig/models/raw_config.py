"""
Raw network configuration schema.

The configuration document comes in two shapes selected by ``servertype``:
blade servers list their cards under ``fabrics``, rack servers under
``interfaces``. Both lists are usually present in the raw data; the one that
does not belong to the server type is dropped before validation.
"""

from typing import Annotated, Any, List, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..exceptions import InvalidConfigurationError

SERVER_TYPES = ("blade", "rack")


def to_boolean(value: Any) -> bool:
    """True for a boolean True or the string 'true' in any case, False otherwise"""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return False


BooleanFlag = Annotated[bool, BeforeValidator(to_boolean)]


class RawModel(BaseModel):
    """Base for raw configuration models: camelCase aliases, unknown keys ignored"""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NamedRawModel(RawModel):
    name: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _stringify_name(cls, value):
        return None if value is None else str(value)


class StaticNetworkConfiguration(RawModel):
    """Static addressing of a network"""
    gateway: Optional[str] = None
    subnet: Optional[str] = None
    primary_dns: Optional[str] = Field(None, alias="primaryDns")
    secondary_dns: Optional[str] = Field(None, alias="secondaryDns")
    dns_suffix: Optional[str] = Field(None, alias="dnsSuffix")
    ip_address: Optional[str] = Field(None, alias="ipAddress")
    ip_range: Optional[Any] = Field(None, alias="ipRange")


class NetworkObject(RawModel):
    """Logical network attached to a partition"""
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    vlan_id: Optional[int] = Field(None, alias="vlanId")
    static: BooleanFlag = False
    static_network_configuration: Optional[StaticNetworkConfiguration] = Field(
        None, alias="staticNetworkConfiguration"
    )

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value):
        return None if value is None else str(value)


class RawPartition(NamedRawModel):
    networks: List[Any] = Field(default_factory=list)
    network_objects: Optional[List[NetworkObject]] = Field(None, alias="networkObjects")
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    lan_mac_address: Optional[str] = Field(None, alias="lanMacAddress")
    iscsi_mac_address: Optional[str] = Field(None, alias="iscsiMacAddress")
    iscsi_iqn: Optional[str] = Field(None, alias="iscsiIQN")


class RawInterface(NamedRawModel):
    partitioned: BooleanFlag = False
    partitions: List[RawPartition] = Field(default_factory=list)


class RawCard(NamedRawModel):
    enabled: BooleanFlag = False
    used_for_fc: BooleanFlag = Field(False, alias="usedforfc")
    nictype: Optional[str] = None
    partitioned: BooleanFlag = False
    interfaces: List[RawInterface] = Field(default_factory=list)


class RawNetworkConfiguration(RawModel):
    """
    Network configuration document for one server.

    Attributes:
        server_type: 'blade' or 'rack'
        fabrics: Blade cards (None for rack servers)
        interfaces: Rack cards (None for blade servers)
    """
    server_type: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("servertype", "serverType", "server_type"),
        validate_default=True
    )
    fabrics: Optional[List[RawCard]] = None
    interfaces: Optional[List[RawCard]] = None

    @model_validator(mode="before")
    @classmethod
    def _drop_inactive_cards(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        server_type = data.get("servertype", data.get("serverType", data.get("server_type")))
        if server_type == "blade":
            data["interfaces"] = None
        elif server_type == "rack":
            data["fabrics"] = None
        return data

    @field_validator("server_type")
    @classmethod
    def _check_server_type(cls, value):
        if value not in SERVER_TYPES:
            raise ValueError(f"Unsupported server type in network configuration: {value}")
        return value

    @property
    def cards(self) -> List[RawCard]:
        """Raw cards for the server type, empty when none are given"""
        source = self.fabrics if self.server_type == "blade" else self.interfaces
        return source or []

    @classmethod
    def parse(cls, data: Any) -> 'RawNetworkConfiguration':
        """
        Validate a raw configuration mapping.

        Raises:
            InvalidConfigurationError: If the document does not match the schema
        """
        if isinstance(data, cls):
            return data
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc']) or 'config'}: {err['msg']}"
                for err in e.errors()
            )
            raise InvalidConfigurationError(f"Invalid network configuration: {details}") from e
