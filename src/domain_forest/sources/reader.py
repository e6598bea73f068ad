"""Named sources of text lines.

A source has a name (used as the origin of every label it contributes)
and a read() that returns either the raw lines or the reason they could
not be read. Failures are returned, not logged or raised here, so the
caller decides whether to skip the source, retry, or abort.

Lines come back untouched: whitespace, blank lines and malformed
entries are the caller's to filter (see service.py).
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Iterable, TypeAlias


@dataclass(frozen=True, slots=True)
class Lines:
    """Successful read."""
    lines: list[str]


@dataclass(frozen=True, slots=True)
class ReadFailure:
    """Failed read, with a human-readable reason."""
    reason: str


ReadResult: TypeAlias = Lines | ReadFailure


def _split_lines(text: str) -> list[str]:
    """Split on line feeds only; text mode has already translated CRLF and CR."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class NamedSource(ABC):
    """A named, readable sequence of text lines."""

    name: str

    @abstractmethod
    def read(self) -> ReadResult:
        """Read all lines. Never raises for I/O or decoding problems."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class FileSource(NamedSource):
    """Lines of a text file. The origin is the path as given."""

    def __init__(self, path: str | Path, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.name = str(path)
        self.encoding = encoding

    def read(self) -> ReadResult:
        try:
            text = self.path.read_text(encoding=self.encoding)
        except OSError as exc:
            return ReadFailure(f"cannot read {self.path}: {exc.strerror or exc}")
        except UnicodeDecodeError as exc:
            return ReadFailure(f"cannot decode {self.path} as {self.encoding}: {exc.reason}")
        except LookupError:
            return ReadFailure(f"unknown encoding {self.encoding!r} for {self.path}")
        return Lines(_split_lines(text))


class LinesSource(NamedSource):
    """Predefined lines held in memory."""

    def __init__(self, name: str, lines: Iterable[str]) -> None:
        self.name = name
        self._lines = list(lines)

    def read(self) -> ReadResult:
        return Lines(list(self._lines))


class ResourceSource(NamedSource):
    """A text resource shipped inside an importable package."""

    def __init__(self, package: str, resource: str, encoding: str = "utf-8") -> None:
        self.package = package
        self.resource = resource
        self.name = resource
        self.encoding = encoding

    def read(self) -> ReadResult:
        try:
            text = resources.files(self.package).joinpath(self.resource).read_text(
                encoding=self.encoding
            )
        except ModuleNotFoundError:
            return ReadFailure(f"no package {self.package!r}")
        except TypeError:
            return ReadFailure(f"{self.package!r} is not a package")
        except OSError as exc:
            return ReadFailure(
                f"cannot read resource {self.resource!r} from {self.package}: "
                f"{exc.strerror or exc}"
            )
        except UnicodeDecodeError as exc:
            return ReadFailure(
                f"cannot decode resource {self.resource!r} as {self.encoding}: {exc.reason}"
            )
        except LookupError:
            return ReadFailure(f"unknown encoding {self.encoding!r} for resource {self.resource!r}")
        return Lines(_split_lines(text))


def sources_of(paths: Iterable[str | Path], encoding: str = "utf-8") -> list[NamedSource]:
    """Build one FileSource per path, keeping the given order."""
    return [FileSource(p, encoding=encoding) for p in paths]
