"""Configuration helpers for the outfit catalog server."""

from dataclasses import dataclass, field
from pathlib import Path
import os
from typing import Optional

DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_WIDGET_NAME = "outfit-images"
DEFAULT_PUBLIC_ROUTE = "/mcp-use/public"
WIDGET_ROUTE_ROOT = "/mcp-use/widgets"
BASE_URL_ENV_KEYS = ("MCP_URL", "MCP_BASE_URL", "BASE_URL")


@dataclass
class AppConfig:
    """Runtime settings for the catalog server.

    ``base_url`` is the address the service is reachable under. It may be the
    wildcard bind address; client-facing URLs are normalised where they are
    built rather than here.
    """

    base_url: str = DEFAULT_BASE_URL
    port: int = 3000
    widget_name: str = DEFAULT_WIDGET_NAME
    public_route_base: str = DEFAULT_PUBLIC_ROUTE
    widgets_dir: Path = field(default_factory=lambda: Path.cwd() / "dist" / "resources" / "widgets")
    public_dir: Path = field(default_factory=lambda: Path.cwd() / "public")
    probe_timeout: float = 10.0
    environment: str | None = None

    @property
    def widget_route_base(self) -> str:
        return f"{WIDGET_ROUTE_ROOT}/{self.widget_name}"

    @property
    def widget_dist_dir(self) -> Path:
        return Path(self.widgets_dir) / self.widget_name

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default. Environment variables always win over file values so that the
        deployment platform can inject the public URL.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("CATALOG_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        base_url = next(
            (os.environ[key] for key in BASE_URL_ENV_KEYS if os.getenv(key)),
            yaml_config.get("base_url") or DEFAULT_BASE_URL,
        )
        widgets_dir = get_value("widgets_dir")
        public_dir = get_value("public_dir")

        return cls(
            base_url=str(base_url),
            port=int(get_value("port", "3000") or 3000),
            widget_name=str(get_value("widget_name", DEFAULT_WIDGET_NAME) or DEFAULT_WIDGET_NAME),
            public_route_base=str(
                get_value("public_route_base", DEFAULT_PUBLIC_ROUTE) or DEFAULT_PUBLIC_ROUTE
            ),
            widgets_dir=Path(widgets_dir) if widgets_dir else Path.cwd() / "dist" / "resources" / "widgets",
            public_dir=Path(public_dir) if public_dir else Path.cwd() / "public",
            probe_timeout=float(get_value("probe_timeout", "10") or 10),
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal YAML/INI-style config without external dependencies."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
