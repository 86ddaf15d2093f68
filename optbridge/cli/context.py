"""
Click context extension for optbridge CLI.

Provides OptBridgeContext dataclass that holds the loaded settings and
the bridge, passed through the Click command chain via ctx.obj.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..bridge import OptionBridge
from ..core.bootstrap import bootstrap
from ..core.settings import OptBridgeSettings, load_settings


@dataclass
class OptBridgeContext:
    """Extended context passed through Click command chain.

    Attributes:
        cwd: Current working directory
        settings: Loaded settings
        bridge: Bridge bound to the platform functions
    """

    cwd: Path
    settings: OptBridgeSettings
    bridge: OptionBridge

    @classmethod
    def create(cls, config_path: Path | None = None, cwd: Path | None = None) -> OptBridgeContext:
        """Load settings, bootstrap the container and resolve the bridge.

        Args:
            config_path: Explicit config file (searched for when omitted)
            cwd: Working directory override (defaults to Path.cwd())

        Returns:
            Configured OptBridgeContext instance
        """
        if cwd is None:
            cwd = Path.cwd()

        settings = load_settings(config_path=config_path, start_dir=str(cwd))
        container = bootstrap(settings)

        return cls(
            cwd=cwd,
            settings=settings,
            bridge=container.resolve(OptionBridge),
        )
