"""Reading Wavefront object (``.obj``) files."""

from __future__ import annotations

from pathlib import Path

from runbasis.mtl import LoadMTLError
from runbasis.obj_model import (
    OBJ,
    ParseError,
    ParseErrorKind,
    parse_face,
    parse_smoothing_group,
    parse_vertice,
    parse_vertice_normal,
    parse_vertice_parameter_space,
    parse_vertice_texture,
    triangulate_polygons,
)

# Statements of the format that are recognised but not acted upon.
_IGNORED_STATEMENTS = frozenset(
    {
        "cstype", "deg", "bmat", "step",
        "p", "l", "curv", "curv2", "surf",
        "parm", "trim", "hole", "scrv", "sp", "end",
        "con",
        "g", "mg",
        "bevel", "c_interp", "d_interp", "lod",
        "shadow_obj", "trace_obj", "ctech", "stech",
    }
)


class LoadOBJError(Exception):
    """An object file, or a material library it needs, could not be read or parsed."""

    def __init__(self, error: Exception) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        if isinstance(self.error, (ParseError, LoadMTLError)):
            return str(self.error)
        return f"IO error: {self.error}"


def _tokens(line: str) -> list[str]:
    return [part.strip() for part in line.split(" ") if part.strip()]


def parse_obj(data: str) -> OBJ:
    """Parse the text of an object file.

    Faces are numbered in order of appearance, each learns the total face
    count, and polygons are split into triangles.
    """
    if not data:
        raise ParseError(ParseErrorKind.EMPTY_FILE, 0, "Object file is empty")

    obj = OBJ()
    lines = [line.strip() for line in data.split("\n") if line.strip()]
    previous_line: str | None = None
    smoothing_group = 0
    face_id = 0

    for current_line, line in enumerate(lines, start=1):
        command, *arguments = _tokens(line)

        match command:
            case "v":
                obj.vertices.append(parse_vertice(arguments, current_line))
            case "vt":
                obj.vertices_texture.append(parse_vertice_texture(arguments, current_line))
            case "vn":
                obj.vertices_normal.append(parse_vertice_normal(arguments, current_line))
            case "vp":
                obj.vertices_parameter_space.append(
                    parse_vertice_parameter_space(arguments, current_line)
                )
            case "f":
                face = parse_face(arguments, previous_line, current_line)
                if smoothing_group != 0:
                    face.smoothing_group = smoothing_group
                face.id = face_id
                obj.faces.append(face)
                face_id += 1
            case "s":
                smoothing_group = parse_smoothing_group(arguments, current_line)
            case "o":
                if arguments:
                    obj.name = arguments[0]
            case "usemtl":
                # The material is attached while parsing the face that follows.
                if len(arguments) > 2:
                    raise ParseError(
                        ParseErrorKind.INVALID_FACE_MATERIAL,
                        current_line,
                        "You can only specify one material",
                    )
            case "mtllib":
                obj.mtls_identifiers = [name for name in arguments if name != "mtllib"]
            case _ if command in _IGNORED_STATEMENTS or command.startswith("#"):
                pass
            case _:
                raise ParseError(
                    ParseErrorKind.INVALID_TOKEN,
                    current_line,
                    f"Unknown token: '{command}'",
                )

        previous_line = line

    if not obj.vertices:
        raise ParseError(ParseErrorKind.MISSING_VERTICES)
    if not obj.faces:
        raise ParseError(ParseErrorKind.MISSING_FACES)

    for face in obj.faces:
        face.max_id = face_id

    triangulate_polygons(obj)
    return obj


def load(file_path: str | Path) -> OBJ:
    """Read and parse the object file at ``file_path``."""
    try:
        content = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise LoadOBJError(error) from error
    try:
        return parse_obj(content)
    except ParseError as error:
        raise LoadOBJError(error) from error