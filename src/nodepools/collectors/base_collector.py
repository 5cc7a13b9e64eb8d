# src/nodepools/collectors/base_collector.py
"""
This module defines the abstract base class for all data collectors.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class BaseCollector(ABC):
    """
    Abstract Base Class for all collectors.
    """

    @abstractmethod
    async def collect(self) -> List[Any]:
        """
        Fetch data from its source, parse it, and return a list of
        Pydantic models.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., close API clients).
        """
        pass
