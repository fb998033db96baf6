"""
Module Path Resolution

Pure path resolution algorithm for CommonJS-style specifiers.

- ./lib/util    → <requester dir>/lib/util, lib/util.py, lib/util/index.py
- /abs/util     → /abs/util, /abs/util.py, /abs/util/index.py
- util          → requester dir, then base path, then each search path

Resolvers hold no per-load state and can be shared between engines.
"""

import logging
import os
import posixpath
from abc import ABC, abstractmethod
from typing import Any, Collection, Dict, Iterable, List, Mapping, Optional, Sequence

from ..shared.errors import ModuleResolutionError
from ..utils.config import DEFAULT_LOADER_KEY, DEFAULT_FILE_ENCODING, INDEX_FILE_STEM, RELATIVE_PREFIXES
from ..utils.io_utils import read_source_file, is_loadable_file

logger = logging.getLogger(__name__)


class PathResolver(ABC):
    """
    Strategy mapping (specifier, requesting module) to a loadable location.

    Subclasses must be deterministic for a given backing-store state and must
    accept ``requester=None`` for the entry module.
    """

    @abstractmethod
    def resolve_path(self, specifier: str, requester: Optional[Any] = None) -> str:
        """
        Resolve a specifier to a location.

        Raises:
            ModuleResolutionError: If no candidate exists
        """
        raise NotImplementedError

    def extension_of(self, location: str) -> str:
        return os.path.splitext(location)[1]

    @abstractmethod
    def read_all_text(self, location: str) -> str:
        raise NotImplementedError


class CommonJSPathResolver(PathResolver):
    """
    Filesystem resolver following CommonJS resolution order.

    Candidates for each base directory, first existing file wins:
    1. the literal path
    2. the path with each recognized extension appended, in registration order
    3. <path>/index with each recognized extension appended
    """

    def __init__(
        self,
        extensions: Collection[str],
        base_path: Optional[str] = None,
        search_paths: Sequence[str] = (),
        encoding: str = DEFAULT_FILE_ENCODING,
    ):
        """
        Args:
            extensions: Recognized extensions; a live view (e.g. registry keys)
                        so loaders registered later are picked up
            base_path: Directory for the entry module and bare specifiers
                       (current working directory if None)
            search_paths: Extra directories tried for bare specifiers
            encoding: Source file encoding
        """
        self.extensions = extensions
        self.base_path = self._normalize(base_path) if base_path is not None else None
        self.search_paths = [self._normalize(p) for p in search_paths]
        self.encoding = encoding

    def resolve_path(self, specifier: str, requester: Optional[Any] = None) -> str:
        if not specifier:
            raise ModuleResolutionError(specifier)

        requester_dir = getattr(requester, "dirname", None) if requester is not None else None
        searched: List[str] = []
        for base in self._search_bases(specifier, requester_dir):
            target = self._normalize(self._join(base, specifier)) if base else self._normalize(specifier)
            for candidate in self._candidates(target):
                searched.append(candidate)
                if self._is_file(candidate):
                    logger.debug(f"PathResolver: '{specifier}' -> {candidate}")
                    return candidate

        requester_name = getattr(requester, "filename", None) or getattr(requester, "id", None)
        raise ModuleResolutionError(specifier, searched=searched, requester=requester_name)

    def read_all_text(self, location: str) -> str:
        return read_source_file(location, encoding=self.encoding)

    def file_extensions(self) -> List[str]:
        """Recognized extensions in registration order, without the default key."""
        return [ext for ext in self.extensions if ext and ext != DEFAULT_LOADER_KEY]

    def _search_bases(self, specifier: str, requester_dir: Optional[str]) -> List[Optional[str]]:
        if self._is_absolute(specifier):
            return [None]
        base = self.base_path if self.base_path is not None else self._cwd()
        if specifier.startswith(RELATIVE_PREFIXES) or specifier in (".", ".."):
            return [requester_dir or base]
        bases: List[Optional[str]] = []
        for candidate in [requester_dir, base, *self.search_paths]:
            if candidate and candidate not in bases:
                bases.append(candidate)
        return bases

    def _candidates(self, target: str) -> Iterable[str]:
        extensions = self.file_extensions()
        yield target
        for ext in extensions:
            yield target + ext
        for ext in extensions:
            yield self._join(target, INDEX_FILE_STEM + ext)

    # Backing-store hooks (overridden by in-memory resolvers)

    def _is_file(self, location: str) -> bool:
        return is_loadable_file(location)

    def _is_absolute(self, specifier: str) -> bool:
        return os.path.isabs(specifier)

    def _join(self, *parts: str) -> str:
        return os.path.join(*parts)

    def _normalize(self, location: str) -> str:
        return os.path.abspath(location)

    def _cwd(self) -> str:
        return os.getcwd()


class OverlayPathResolver(CommonJSPathResolver):
    """
    In-memory resolver over a {location: source} mapping.

    Uses POSIX path semantics regardless of platform; lets a host bundle its
    scripts (and tests avoid disk I/O) while keeping the CommonJS order.
    """

    def __init__(
        self,
        sources: Mapping[str, str],
        extensions: Collection[str],
        base_path: str = "/",
        search_paths: Sequence[str] = (),
    ):
        self.sources: Dict[str, str] = {posixpath.normpath(k): v for k, v in sources.items()}
        super().__init__(extensions, base_path=base_path, search_paths=search_paths)

    def add_source(self, location: str, source: str) -> None:
        self.sources[posixpath.normpath(location)] = source

    def read_all_text(self, location: str) -> str:
        if location not in self.sources:
            raise ModuleResolutionError(location, searched=[location])
        return self.sources[location]

    def extension_of(self, location: str) -> str:
        return posixpath.splitext(location)[1]

    def _is_file(self, location: str) -> bool:
        return location in self.sources

    def _is_absolute(self, specifier: str) -> bool:
        return specifier.startswith("/")

    def _join(self, *parts: str) -> str:
        return posixpath.join(*parts)

    def _normalize(self, location: str) -> str:
        return posixpath.normpath(posixpath.join("/", location))

    def _cwd(self) -> str:
        return "/"
