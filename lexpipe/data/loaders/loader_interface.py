"""
Loader interface for the resource layer.
"""
from abc import ABC, abstractmethod
from typing import List


class LoaderInterface(ABC):
    """Abstract base class for resource loaders."""

    @abstractmethod
    async def load_lines(self, name: str) -> List[str]:
        """
        Load a line-oriented resource.

        Args:
            name: resource name relative to the resource root, e.g. 'tokenizer/units.txt'

        Returns:
            The resource lines without line terminators.

        Raises:
            ResourceNotFoundError: if the resource does not exist
        """
        pass

    @abstractmethod
    async def test_connection(self) -> bool:
        """Test if the resource root is reachable."""
        pass
