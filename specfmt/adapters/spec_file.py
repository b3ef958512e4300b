from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)

WATTSI_SOURCE_NAME = "source"
BIKESHED_SUFFIX = ".bs"


class SpecDiscoveryError(Exception):
    pass


class SpecFileError(Exception):
    def __init__(self, path: Path, message: str):
        super().__init__(f"{message}: '{path}'")
        self.path = path


@dataclass
class SpecDocument:
    path: Path
    lines: List[str]
    newline: str = "\n"

    def render(self, lines: Optional[List[str]] = None) -> str:
        return self.newline.join(self.lines if lines is None else lines)


def resolve_spec_path(filename: Optional[str] = None) -> Path:
    """
    Finds the spec to format.

    An existing file is used as-is. Anything else is taken as the directory
    to search (default "."): a Wattsi "source" file wins, otherwise the one
    .bs file in it.
    """
    directory = Path(".")
    if filename:
        path = Path(filename)
        if path.is_file():
            return path
        directory = path

    source = directory / WATTSI_SOURCE_NAME
    if source.exists():
        return source

    if directory.is_dir():
        bs_files = sorted(p for p in directory.iterdir() if p.suffix == BIKESHED_SUFFIX and p.is_file())
        if len(bs_files) == 1:
            return bs_files[0]
        if len(bs_files) > 1:
            raise SpecDiscoveryError("Must specify filename: directory contains multiple .bs files")

    raise SpecDiscoveryError("Must specify filename: directory doesn't contain \"source\" or .bs spec")


def read_spec(path: Path) -> SpecDocument:
    """
    Splits on the file's own newline convention so that writing the lines
    back with render() reproduces untouched files byte for byte.
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SpecFileError(path, f"Error opening file ({e})")

    newline = "\r\n" if "\r\n" in text else "\n"
    logger.info(f"Successfully read file '{path}'")
    return SpecDocument(path=path, lines=text.split(newline), newline=newline)


def write_spec(document: SpecDocument, lines: List[str]) -> None:
    try:
        with document.path.open("w", encoding="utf-8", newline="") as f:
            f.write(document.render(lines))
    except OSError as e:
        raise SpecFileError(document.path, f"Error writing file ({e})")
    logger.info("Write succeeded")
