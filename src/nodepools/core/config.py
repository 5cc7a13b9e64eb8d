# src/nodepools/core/config.py

import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.

    Every value is exposed as a property so it is resolved at access time,
    which lets tests and wrappers change the environment after import.
    """

    # --- Pool classification ---
    @property
    def NODEPOOLS_LABEL(self) -> str:
        """Process-wide default for the custom pool label (empty disables it)."""
        return os.getenv("NODEPOOLS_LABEL", "")

    # --- Logging variables ---
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv("LOG_LEVEL", "WARNING")

    # --- Kubernetes variables ---
    @property
    def KUBE_CONTEXT(self) -> Optional[str]:
        return os.getenv("NODEPOOLS_CONTEXT") or None

    def resolve_label(self, label: Optional[str]) -> str:
        """
        Returns the custom label to group nodes with: an explicit value wins,
        otherwise the process-wide default is used.
        """
        if label is not None:
            return label
        return self.NODEPOOLS_LABEL

    def validate_instance(self):
        if self.LOG_LEVEL.upper() not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}.")


# Instantiate the config to be imported by other modules
config = Config()
config.validate_instance()
