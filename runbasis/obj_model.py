"""Data structures of Wavefront object files and the statement parsers that fill them."""

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Mapping, Sequence, TypeVar

from runbasis.aabb import AABB
from runbasis.materials import Material
from runbasis.vector import Vec3, Vec4

_T = TypeVar("_T")

_USIZE = re.compile(r"\+?[0-9]+")


class ParseErrorKind(Enum):
    MISSING_FACES = auto()
    MISSING_VERTICES = auto()
    EMPTY_FILE = auto()
    INVALID_TOKEN = auto()
    INVALID_VALUE = auto()
    INVALID_VERTEX = auto()
    INVALID_VERTEX_TEXTURE = auto()
    INVALID_VERTEX_NORMAL = auto()
    INVALID_VERTEX_PARAMETER_SPACE = auto()
    INVALID_FACE = auto()
    INVALID_FACE_SIDE = auto()
    INVALID_FACE_MATERIAL = auto()
    INVALID_GROUP = auto()
    INVALID_SMOOTHING_GROUP = auto()
    INVALID_MATERIAL_LIBRARY = auto()


_DESCRIPTIONS = {
    ParseErrorKind.EMPTY_FILE: "token",
    ParseErrorKind.INVALID_TOKEN: "token",
    ParseErrorKind.INVALID_VALUE: "value",
    ParseErrorKind.INVALID_VERTEX: "vertex",
    ParseErrorKind.INVALID_VERTEX_TEXTURE: "vertex texture",
    ParseErrorKind.INVALID_VERTEX_NORMAL: "vertex normal",
    ParseErrorKind.INVALID_VERTEX_PARAMETER_SPACE: "vertex parameter space",
    ParseErrorKind.INVALID_FACE: "face",
    ParseErrorKind.INVALID_FACE_SIDE: "face side",
    ParseErrorKind.INVALID_FACE_MATERIAL: "face material",
    ParseErrorKind.INVALID_GROUP: "group",
    ParseErrorKind.INVALID_SMOOTHING_GROUP: "smoothing group",
    ParseErrorKind.INVALID_MATERIAL_LIBRARY: "material library",
}


class ParseError(Exception):
    """An object file statement could not be parsed."""

    def __init__(self, kind: ParseErrorKind, line: int | None = None, message: str = "") -> None:
        super().__init__(kind, line, message)
        self.kind = kind
        self.line = line
        self.message = message

    def __str__(self) -> str:
        if self.kind is ParseErrorKind.MISSING_FACES:
            return "Missing faces"
        if self.kind is ParseErrorKind.MISSING_VERTICES:
            return "Missing vertices"
        return f"Invalid {_DESCRIPTIONS[self.kind]} at line {self.line}: {self.message}"


@dataclass
class VerticeParameterSpace:
    u: float = 0.0
    v: float = 0.0
    w: float = 0.0


@dataclass
class VerticeNormal:
    i: float = 0.0
    j: float = 0.0
    k: float = 0.0


@dataclass
class VerticeTexture:
    u: float = 0.0
    v: float = 0.0
    w: float = 0.0


@dataclass(frozen=True)
class VertexDataReference:
    """One-based indices of a face corner's vertex, texture vertex and normal; 0 means absent."""

    v: int = 0
    vt: int = 0
    vn: int = 0


@dataclass(eq=False)
class Face:
    id: int = 0
    max_id: int = 0
    vertex_references: list[VertexDataReference] = field(default_factory=list)
    material_name: str | None = None
    material: Material | None = None
    smoothing_group: int | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Face):
            return NotImplemented
        return self.vertex_references == other.vertex_references

    __hash__ = None  # type: ignore[assignment]

    def is_partial(self) -> bool:
        """True while no material has been resolved for the face."""
        return self.material is None

    def set_material(self, material: Material | None) -> None:
        self.material = material


@dataclass
class SmoothingGroup:
    id: int
    faces: list[Face] = field(default_factory=list)


def _get(items: Sequence[_T], index: int, default: _T) -> _T:
    return items[index] if 0 <= index < len(items) else default


@dataclass
class OBJ:
    """Geometry, grouping and material references of one object file."""

    vertices: list[Vec4] = field(default_factory=list)
    vertices_texture: list[VerticeTexture] = field(default_factory=list)
    vertices_normal: list[VerticeNormal] = field(default_factory=list)
    vertices_parameter_space: list[VerticeParameterSpace] = field(default_factory=list)
    faces: list[Face] = field(default_factory=list)
    name: str | None = None
    mtls_identifiers: list[str] = field(default_factory=list)
    mtls: list[dict[str, Material]] = field(default_factory=list)
    texture: tuple[int, int, bytes] = (0, 0, b"")

    def has_loaded_materials(self) -> bool:
        return bool(self.mtls)

    def _generated_texture(self) -> list[VerticeTexture]:
        """Texture coordinates spread over the bounding box of the vertices."""
        aabb = AABB.from_vertices(self.vertices)
        ranges = [
            (high - low) or 1.0
            for low, high in zip(aabb.min, aabb.max)
        ]
        return [
            VerticeTexture(
                (vertex.x - aabb.min.x) / ranges[0],
                (vertex.y - aabb.min.y) / ranges[1],
                (vertex.z - aabb.min.z) / ranges[2],
            )
            for vertex in self.vertices
        ]

    def get_raw_vertices(self, rgb: Vec3) -> list[float]:
        """Interleaved vertex data, twelve floats per face corner.

        Each corner holds position (4), colour (3), texture coordinate (3),
        face id and the total number of faces.
        """
        generated = not self.vertices_texture
        textures = self._generated_texture() if generated else list(self.vertices_texture)

        data: list[float] = []
        for face in self.faces:
            for reference in face.vertex_references:
                if generated:
                    texture_index = reference.v - 1
                else:
                    texture_index = 0 if reference.vt == 0 else reference.vt - 1
                vertex = _get(self.vertices, reference.v - 1, Vec4())
                texture = _get(textures, texture_index, VerticeTexture())
                data.extend(
                    (
                        vertex.x, vertex.y, vertex.z, vertex.w,
                        rgb.x, rgb.y, rgb.z,
                        texture.u, texture.v, texture.w,
                        float(face.id), float(face.max_id),
                    )
                )
        return data

    def get_raw_indices(self) -> list[int]:
        """Zero-based vertex indices of every face corner, in order."""
        return [reference.v - 1 for face in self.faces for reference in face.vertex_references]

    def load_mtls(self, mtls: Iterable[Mapping[str, Material]]) -> OBJ:
        """Attach material libraries and resolve each named face material.

        Libraries are searched in order and the last one decides, so a face
        whose material the last library lacks ends up without one.
        """
        self.mtls = [dict(library) for library in mtls]
        for face in self.faces:
            if face.material_name is None:
                continue
            for library in self.mtls:
                material = library.get(face.material_name)
                face.set_material(copy.deepcopy(material) if material is not None else None)
        return self

    def get_smoothing_group_by_id(self, group_id: int) -> SmoothingGroup:
        faces = [face for face in self.faces if face.smoothing_group == group_id]
        return SmoothingGroup(id=group_id, faces=faces)


def triangulate_fan(vertex_references: Sequence[VertexDataReference]) -> list[VertexDataReference]:
    """Split a convex polygon into triangles fanning out from its first corner."""
    if len(vertex_references) <= 3:
        return list(vertex_references)
    first = vertex_references[0]
    triangles: list[VertexDataReference] = []
    for current, following in zip(vertex_references[1:-1], vertex_references[2:]):
        triangles.extend((first, current, following))
    return triangles


def _tokenize(line: str) -> list[str]:
    return [part.strip() for part in line.split(" ") if part.strip()]


def _parse_float(token: str | None) -> float | None:
    if token is None or not token or "_" in token or token != token.strip():
        return None
    try:
        return float(token)
    except ValueError:
        return None


def _parse_usize(token: str | None) -> int | None:
    if token is None or not _USIZE.fullmatch(token):
        return None
    return int(token)


def _floats(tokens: Iterable[str], defaults: Sequence[str | None]) -> list[float] | None:
    it = iter(tokens)
    values = [_parse_float(next(it, default)) for default in defaults]
    if any(value is None for value in values):
        return None
    return [value for value in values if value is not None]


def parse_vertice(tokens: Iterable[str], line_n: int) -> Vec4:
    """Parse ``x y z [w]``; ``w`` defaults to 1."""
    values = _floats(tokens, (None, None, None, "1.0"))
    if values is None:
        raise ParseError(ParseErrorKind.INVALID_VERTEX, line_n, "Invalid vertex coordinates")
    return Vec4(*values)


def parse_vertice_parameter_space(tokens: Iterable[str], line_n: int) -> VerticeParameterSpace:
    """Parse ``u v [w]``; ``w`` defaults to 1."""
    values = _floats(tokens, (None, None, "1.0"))
    if values is None:
        raise ParseError(
            ParseErrorKind.INVALID_VERTEX_PARAMETER_SPACE, line_n, "Invalid parameter space vertex"
        )
    return VerticeParameterSpace(*values)


def parse_vertice_normal(tokens: Iterable[str], line_n: int) -> VerticeNormal:
    """Parse ``i j k``."""
    values = _floats(tokens, (None, None, None))
    if values is None:
        raise ParseError(ParseErrorKind.INVALID_VERTEX_NORMAL, line_n, "Invalid vertex normal")
    return VerticeNormal(*values)


def parse_vertice_texture(tokens: Iterable[str], line_n: int) -> VerticeTexture:
    """Parse ``u [v] [w]``; ``v`` and ``w`` default to 0."""
    values = _floats(tokens, (None, "0.0", "0.0"))
    if values is None:
        raise ParseError(ParseErrorKind.INVALID_VERTEX_TEXTURE, line_n, "Invalid texture vertex")
    return VerticeTexture(*values)


def _material_name(line: str | None, line_n: int) -> str | None:
    if line is None:
        return None
    tokens = _tokenize(line)
    if not tokens or tokens[0] != "usemtl":
        return None
    if len(tokens) < 2:
        raise ParseError(ParseErrorKind.INVALID_FACE_MATERIAL, line_n, "Missing material name")
    return tokens[1]


def parse_face(tokens: Iterable[str], previous_line: str | None, line_n: int) -> Face:
    """Parse the corners of an ``f`` statement.

    A ``usemtl`` statement on the line just before names the face's material.
    """
    face = Face(material_name=_material_name(previous_line, line_n))
    has_triplets = False
    has_twins = False

    for token in tokens:
        parts = token.split("/")
        v = _parse_usize(parts[0])
        vt = _parse_usize(parts[1] if len(parts) > 1 else "0")
        vn = _parse_usize(parts[2] if len(parts) > 2 else "0")
        if v is None or vn is None:
            raise ParseError(ParseErrorKind.INVALID_FACE_SIDE, line_n, f"Invalid corner: '{token}'")
        if vt is None:
            face.vertex_references.append(VertexDataReference(v, 0, vn))
            has_twins = True
        else:
            face.vertex_references.append(VertexDataReference(v, vt, vn))
            has_triplets = True

    if has_triplets and has_twins:
        raise ParseError(
            ParseErrorKind.INVALID_FACE,
            line_n,
            "Illegal to give vertex texture for some vertices, but not all",
        )
    return face


def parse_smoothing_group(tokens: Iterable[str], line_n: int) -> int:
    """Parse an ``s`` statement; a missing value or ``off`` gives group 0."""
    token = next(iter(tokens), None)
    if token is None or token == "off":
        return 0
    group = _parse_usize(token)
    if group is None:
        raise ParseError(ParseErrorKind.INVALID_SMOOTHING_GROUP, line_n, "Invalid smoothing group")
    return group


def triangulate_polygons(obj: OBJ) -> None:
    """Replace every face's corners with a fan triangulation, in place."""
    for face in obj.faces:
        face.vertex_references = triangulate_fan(face.vertex_references)