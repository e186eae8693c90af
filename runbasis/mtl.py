"""Reading Wavefront material library (``.mtl``) files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from runbasis.materials import InvalidTokenError, Material, ParseError, parse_material

MTL = dict[str, Material]


class LoadMTLError(Exception):
    """A material library could not be read or parsed."""

    def __init__(self, error: Exception) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        if isinstance(self.error, ParseError):
            return str(self.error)
        return f"IO error: {self.error}"


def _tokens(line: str) -> list[str]:
    return [part.strip() for part in line.split(" ") if part.strip()]


def parse_mtl(data: str) -> MTL:
    """Parse the text of a material library into materials keyed by name."""
    mtl: MTL = {}
    lines = [line.strip() for line in data.split("\n") if line.strip()]
    current_line = 1
    position = 0

    while position < len(lines):
        tokens = _tokens(lines[position])
        position += 1
        if not tokens:
            raise InvalidTokenError(current_line, "Missing command")

        if tokens[0] == "newmtl":
            if len(tokens) < 2:
                raise InvalidTokenError(current_line, "Missing material name")
            name = tokens[1]
            material, read = parse_material(name, lines[position:], current_line)
            mtl[name] = material
            position += read
        current_line += 1

    return mtl


def load(file_path: str | Path) -> MTL:
    """Read and parse the material library at ``file_path``."""
    try:
        content = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise LoadMTLError(error) from error
    try:
        return parse_mtl(content)
    except ParseError as error:
        raise LoadMTLError(error) from error


def load_files(file_paths: Iterable[str | Path]) -> list[MTL]:
    """Load several material libraries, in order."""
    return [load(path) for path in file_paths]