"""
Package resource loader - reads line-oriented resources from disk.

Defaults to the resources bundled inside the lexpipe package; a different
root can be given to use an external resource set.
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

import aiofiles

from ..errors import ResourceNotFoundError
from .loader_interface import LoaderInterface

logger = logging.getLogger(__name__)

BUNDLED_RESOURCE_DIR = Path(__file__).resolve().parents[2] / "resources"


class PackageResourceLoader(LoaderInterface):
    """Loads resources as UTF-8 text files under a root directory."""

    def __init__(self, base_dir: Optional[Union[str, Path]] = None):
        self.base_dir = Path(base_dir) if base_dir else BUNDLED_RESOURCE_DIR
        logger.info(f"📂 PackageResourceLoader root: {self.base_dir}")

    def resolve(self, name: str) -> Path:
        return self.base_dir / name

    async def load_lines(self, name: str) -> List[str]:
        path = self.resolve(name)
        if not path.is_file():
            raise ResourceNotFoundError(f"resource not found under {self.base_dir}", name)

        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            content = await f.read()

        # Only line terminators are stripped; leading/trailing spaces and tabs may be data
        lines = [line.rstrip("\r") for line in content.split("\n")]
        if lines and not lines[-1]:
            lines.pop()
        logger.debug(f"📄 Loaded {name}: {len(lines)} lines")
        return lines

    async def test_connection(self) -> bool:
        return self.base_dir.is_dir()
