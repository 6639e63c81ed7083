from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from pkglists.errors import ListReadError
from pkglists.logsink import LogSink


class Source(str, Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'


@dataclass
class PackageList:
    """Package names read from one list file, in file order."""

    source: Source
    path: Path | None = None
    packages: list[str] = field(default_factory=list)

    def __iter__(self):
        return iter(self.packages)

    def __len__(self):
        return len(self.packages)


def parse_package_lines(lines: Iterable[str]) -> list[str]:
    """Strip comments and whitespace, drop empty lines."""
    packages = []
    for line in lines:
        name = line.split('#', 1)[0].strip()
        if name:
            packages.append(name)
    return packages


def read_package_list(path: Path, source: Source, sink: LogSink | None = None) -> PackageList:
    """Read a package list file. A missing file gives an empty list."""
    path = Path(path)
    if not path.is_file():
        if sink:
            sink.log(f'No {source.value} list at {path}')
        return PackageList(source=source, path=path)

    try:
        with open(path, encoding='utf-8') as f:
            packages = parse_package_lines(f)
    except (OSError, UnicodeDecodeError) as e:
        raise ListReadError(f'Cannot read {source.value} list {path}: {e}') from e

    if sink:
        sink.log(f'Read {len(packages)} {source.value} packages from {path}')
    return PackageList(source=source, path=path, packages=packages)
