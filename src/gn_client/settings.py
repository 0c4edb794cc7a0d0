"""Connection settings via Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from gn_client.versions import GNVersion


class GeoNetworkSettings(BaseSettings):
    """GeoNetwork connection settings."""

    model_config = SettingsConfigDict(env_prefix="GEONETWORK_")

    service_url: str = "http://localhost:8080/geonetwork"
    username: str = "admin"
    password: str = "admin"
    version: GNVersion = GNVersion.V28
    timeout: float = 30.0
    online_enabled: bool = False
