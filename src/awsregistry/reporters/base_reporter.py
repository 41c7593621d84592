# src/awsregistry/reporters/base_reporter.py
"""
Defines the abstract base class for all reporters.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class BaseReporter(ABC):
    """
    Abstract Base Class for all reporters.
    """
    @abstractmethod
    def report(self, data: List[Dict[str, Any]], title: str = "Identifiers"):
        """
        Takes catalog rows and presents them in a specific format.
        """
        pass
