"""Material definitions of Wavefront material libraries and the statement parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Iterator


class ParseError(Exception):
    """A material library statement could not be parsed."""

    kind = "token"

    def __init__(self, line: int, message: str) -> None:
        super().__init__(line, message)
        self.line = line
        self.message = message

    def __str__(self) -> str:
        return f"Invalid {self.kind} at line {self.line}: {self.message}"


class InvalidTokenError(ParseError):
    kind = "token"


class InvalidValueError(ParseError):
    kind = "value"


@dataclass
class Rgb:
    """Red, green and blue components, normally between 0 and 1."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0


class IlluminationModel(Enum):
    COLOR_ON_AMBIENT_OFF = 0
    COLOR_ON_AMBIENT_ON = 1
    HIGHLIGHT_ON = 2
    REFLECTION_ON_RAY_TRACE_ON = 3
    TRANSPARENCY_GLASS_ON_REFLECTION_RAY_TRACE_ON = 4
    REFLECTION_FRESNEL_ON_RAY_TRACE_ON = 5
    TRANSPARENCY_REFRACTION_ON_REFLECTION_FRESNEL_OFF_RAY_TRACE_ON = 6
    TRANSPARENCY_REFRACTION_ON_REFLECTION_FRESNEL_ON_RAY_TRACE_ON = 7
    REFLECTION_ON_RAY_TRACE_OFF = 8
    TRANSPARENCY_GLASS_ON_REFLECTION_RAY_TRACE_OFF = 9
    CASTS_SHADOWS = 10

    @classmethod
    def from_token(cls, token: str) -> IlluminationModel:
        """Model for an ``illum`` number written exactly as ``0`` to ``10``."""
        for model in cls:
            if str(model.value) == token:
                return model
        raise ValueError(f"unknown illumination model: {token!r}")


@dataclass
class DissolveFactor:
    factor: float = 0.0
    halo: bool = False


@dataclass
class Material:
    name: str = ""
    ambient_reflectivity: Rgb = field(default_factory=Rgb)
    diffuse_reflectivity: Rgb = field(default_factory=Rgb)
    atmosphere_reflectivity: Rgb = field(default_factory=Rgb)
    transmission_filter: Rgb = field(default_factory=Rgb)
    illumination_model: IlluminationModel = IlluminationModel.COLOR_ON_AMBIENT_OFF
    dissolve_factor: DissolveFactor = field(default_factory=DissolveFactor)
    specular_highlight_exponent: float = 0.0
    sharpness: float = 0.0
    optical_density: float = 0.0


def _tokenize(line: str) -> list[str]:
    return [part.strip() for part in line.split(" ") if part.strip()]


def _to_float(token: str | None, line_n: int, message: str) -> float:
    if token is None or "_" in token:
        raise InvalidTokenError(line_n, message)
    try:
        return float(token)
    except ValueError:
        raise InvalidTokenError(line_n, message) from None


def _parse_rgb(tokens: Iterator[str], line_n: int) -> Rgb:
    r = _to_float(next(tokens, None), line_n, "Invalid R value")
    g_token = next(tokens, None)
    g = r if g_token is None else _to_float(g_token, line_n, "Invalid G value")
    b_token = next(tokens, None)
    b = r if b_token is None else _to_float(b_token, line_n, "Invalid B value")
    return Rgb(r, g, b)


def _parse_illumination_model(tokens: Iterator[str], line_n: int) -> IlluminationModel:
    token = next(tokens, None)
    try:
        return IlluminationModel.from_token(token if token is not None else "")
    except ValueError:
        raise InvalidTokenError(line_n, "Invalid 'illumn_#' value") from None


def _parse_dissolve_factor(tokens: Iterator[str], line_n: int) -> DissolveFactor:
    token = next(tokens, None)
    if token == "-halo":
        factor = _to_float(next(tokens, None), line_n, "Invalid 'd' value")
        return DissolveFactor(factor=factor, halo=True)
    return DissolveFactor(factor=_to_float(token, line_n, "Invalid 'd' value"), halo=False)


def _parse_specular_highlight_exponent(tokens: Iterator[str], line_n: int) -> float:
    return _to_float(next(tokens, None), line_n, "Invalid 'exponent' value")


def _parse_sharpness(tokens: Iterator[str], line_n: int) -> float:
    return _to_float(next(tokens, None), line_n, "Invalid 'sharpness' value")


def _parse_optical_density(tokens: Iterator[str], line_n: int) -> float:
    density = _to_float(next(tokens, None), line_n, "Invalid 'Ni' value")
    if not 0.001 <= density <= 10.0:
        raise InvalidValueError(line_n, "'Ni' value should range between 0.001 and 10")
    return density


_STATEMENTS: dict[str, tuple[str, Callable[[Iterator[str], int], object]]] = {
    "Ka": ("ambient_reflectivity", _parse_rgb),
    "Kd": ("diffuse_reflectivity", _parse_rgb),
    "Ks": ("atmosphere_reflectivity", _parse_rgb),
    "Tf": ("transmission_filter", _parse_rgb),
    "illum": ("illumination_model", _parse_illumination_model),
    "d": ("dissolve_factor", _parse_dissolve_factor),
    "Ns": ("specular_highlight_exponent", _parse_specular_highlight_exponent),
    "sharpness": ("sharpness", _parse_sharpness),
    "Ni": ("optical_density", _parse_optical_density),
}


def parse_material(name: str, lines: Iterable[str], initial_line_n: int) -> tuple[Material, int]:
    """Read the statements of one material until the next ``newmtl``.

    Returns the material and the number of recognised statements read; comments
    and unknown statements are skipped without being counted.
    """
    material = Material()
    read_lines = 0

    for line in lines:
        line_n = initial_line_n + read_lines
        tokens = iter(_tokenize(line))
        statement = next(tokens, None)
        if statement is None:
            raise InvalidTokenError(line_n, "Missing statement")

        material.name = name

        if statement == "newmtl":
            break
        entry = _STATEMENTS.get(statement)
        if entry is None:
            continue
        attribute, parser = entry
        setattr(material, attribute, parser(tokens, line_n))
        read_lines += 1

    return material, read_lines