"""
Dev Server Configuration - static settings of the page-serving process

The capture run only needs the address the dev server listens on. The rest
of the settings are kept so devserver.yaml stays the single place where the
server and build options are written down.

File format (camelCase keys, as the dev server itself reads them):

    root: ./
    server:
      port: 5173
      open: true
      strictPort: false
      allowedHosts: []
    build:
      outDir: dist
      emptyOutDir: true
      minify: esbuild
      sourcemap: false
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml


@dataclass
class DevServerConfig:
    """Dev/build server settings"""

    root: str = "./"

    # Server
    host: str = "localhost"
    port: int = 5173
    open: bool = True  # auto-open browser
    strict_port: bool = False  # try next port if taken
    allowed_hosts: List[str] = field(default_factory=list)  # preview deployments

    # Build
    out_dir: str = "dist"
    empty_out_dir: bool = True
    minify: str = "esbuild"
    sourcemap: bool = False

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": self.root,
            "server": {
                "host": self.host,
                "port": self.port,
                "open": self.open,
                "strictPort": self.strict_port,
                "allowedHosts": list(self.allowed_hosts),
            },
            "build": {
                "outDir": self.out_dir,
                "emptyOutDir": self.empty_out_dir,
                "minify": self.minify,
                "sourcemap": self.sourcemap,
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DevServerConfig':
        server = data.get("server") or {}
        build = data.get("build") or {}
        defaults = cls()
        return cls(
            root=str(data.get("root", defaults.root)),
            host=str(server.get("host", defaults.host)),
            port=int(server.get("port", defaults.port)),
            open=bool(server.get("open", defaults.open)),
            strict_port=bool(server.get("strictPort", defaults.strict_port)),
            allowed_hosts=[str(h) for h in server.get("allowedHosts") or []],
            out_dir=str(build.get("outDir", defaults.out_dir)),
            empty_out_dir=bool(build.get("emptyOutDir", defaults.empty_out_dir)),
            minify=str(build.get("minify", defaults.minify)),
            sourcemap=bool(build.get("sourcemap", defaults.sourcemap)),
        )


def load_dev_server_config(path: Union[str, Path] = "devserver.yaml") -> DevServerConfig:
    """
    Load dev server settings from a YAML file.

    A missing or empty file gives the defaults; unknown keys are ignored.

    Raises:
        ValueError: If the document is not a mapping
    """
    path = Path(path)
    if not path.exists():
        return DevServerConfig()

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if data is None:
        return DevServerConfig()
    if not isinstance(data, dict):
        raise ValueError(f"Dev server config must be a mapping: {path}")
    return DevServerConfig.from_dict(data)
