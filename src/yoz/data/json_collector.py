# Author: PB & Claude
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/yoz/data/json_collector.py

import json
from datetime import datetime
from pathlib import Path
from typing import Any


class JSONCollector:
    """Collects structured data from CLI commands for scripting.

    When enabled, captures command results and metadata as JSON.
    When disabled, all methods are no-ops.
    """

    def __init__(self, enabled: bool = False) -> None:
        """Initialize collector.

        Args:
            enabled: If True, collects data. If False, all methods are no-ops.
        """
        self.enabled = enabled
        self.data = {} if enabled else None

    def capture_success(self, result: Any, config: Any = None) -> None:
        """Capture successful command data.

        Args:
            result: Value returned by the command handler
            config: Configuration object used
        """
        if not self.enabled:
            return

        self.data["status"] = "success"
        self.data["timestamp"] = datetime.now().isoformat()

        if result is not None:
            self.data["result"] = self._extract(result)

        if config is not None:
            self.data["config"] = self._extract_config(config)

    def capture_error(self, error: Exception, config: Any = None, partial_result: Any = None) -> None:
        """Capture failed command data.

        Args:
            error: Exception that occurred
            config: Configuration object used
            partial_result: Any partial results before the error
        """
        if not self.enabled:
            return

        self.data["status"] = "error"
        self.data["timestamp"] = datetime.now().isoformat()
        self.data["error"] = str(error)
        self.data["error_type"] = type(error).__name__

        command = getattr(error, "command", None)
        if command:
            self.data["command"] = command

        if config is not None:
            self.data["config"] = self._extract_config(config)

        if partial_result is not None:
            self.data["partial_result"] = self._extract(partial_result)

    def output(self) -> None:
        """Print collected JSON data to stdout if enabled."""
        if not self.enabled:
            return

        json_str = json.dumps(self.data, indent=2, default=str)
        print(f"<JSON-STDOUT>{json_str}</JSON-STDOUT>")

    def _extract(self, value: Any) -> Any:
        """Turn results into JSON-friendly structures."""
        if hasattr(value, "to_dict") and callable(value.to_dict):
            return value.to_dict()
        if isinstance(value, dict):
            return {str(k): self._extract(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._extract(v) for v in value]
        if isinstance(value, Path):
            return str(value)
        return value

    def _extract_config(self, config: Any) -> Any:
        # pydantic models
        if hasattr(config, "model_dump") and callable(config.model_dump):
            return config.model_dump(mode="json")
        return self._extract(config)
