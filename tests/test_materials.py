import pytest

from runbasis.materials import (
    DissolveFactor,
    IlluminationModel,
    InvalidTokenError,
    InvalidValueError,
    Material,
    ParseError,
    Rgb,
    parse_material,
)


def test_rgb_statements_are_resolved():
    material, _ = parse_material(
        "Rock",
        ["Ka 0.2 0.5 0.1", "Kd 0.2 0.5 0.1", "Ks 0.2 0.5 0.1", "Tf 0.2 0.5 0.1"],
        1,
    )
    expected = Rgb(0.2, 0.5, 0.1)
    assert material.ambient_reflectivity == expected
    assert material.diffuse_reflectivity == expected
    assert material.atmosphere_reflectivity == expected
    assert material.transmission_filter == expected


def test_rgb_falls_back_to_red():
    material, _ = parse_material("Rock", ["Ka 0.2", "Kd 0.2 0.5"], 1)
    assert material.ambient_reflectivity == Rgb(0.2, 0.2, 0.2)
    assert material.diffuse_reflectivity == Rgb(0.2, 0.5, 0.2)


def test_name_is_stored():
    material, _ = parse_material("Rock", ["Ka 0.2 0.2 0.2"], 1)
    assert material.name == "Rock"


def test_no_lines_leave_default_material():
    material, read = parse_material("Rock", [], 1)
    assert material == Material()
    assert read == 0


def test_default_illumination_model():
    material, _ = parse_material("Rock", ["Ka 0.2 0.5"], 1)
    assert material.illumination_model == IlluminationModel.COLOR_ON_AMBIENT_OFF


@pytest.mark.parametrize(
    "token, model",
    [("2", IlluminationModel.HIGHLIGHT_ON), ("10", IlluminationModel.CASTS_SHADOWS)],
)
def test_illumination_model_is_resolved(token, model):
    material, _ = parse_material("Rock", [f"illum {token}"], 1)
    assert material.illumination_model == model


def test_illumination_model_round_trips_through_tokens():
    for model in IlluminationModel:
        assert IlluminationModel.from_token(str(model.value)) is model


def test_unknown_illumination_model_is_an_error():
    with pytest.raises(ValueError):
        IlluminationModel.from_token("11")
    with pytest.raises(InvalidTokenError, match="Invalid 'illumn_#' value"):
        parse_material("Rock", ["illum 11"], 1)


def test_scalar_statements_are_resolved():
    material, _ = parse_material("Rock", ["Ns 96.07843", "sharpness 100", "Ni 0.002"], 1)
    assert material.specular_highlight_exponent == 96.07843
    assert material.sharpness == 100.0
    assert material.optical_density == 0.002


def test_dissolve_factor_with_and_without_halo():
    plain, _ = parse_material("Rock", ["d 1.000000"], 1)
    assert plain.dissolve_factor == DissolveFactor(factor=1.0, halo=False)
    halo, _ = parse_material("Rock", ["d -halo 0.5"], 1)
    assert halo.dissolve_factor == DissolveFactor(factor=0.5, halo=True)


@pytest.mark.parametrize("value", ["-0.1", "11"])
def test_optical_density_out_of_range(value):
    with pytest.raises(InvalidValueError) as excinfo:
        parse_material("Rock", [f"Ni {value}"], 7)
    assert "'Ni' value should range between 0.001 and 10" in str(excinfo.value)
    assert excinfo.value.line == 7


@pytest.mark.parametrize("value", ["0.001", "10"])
def test_optical_density_bounds_are_inclusive(value):
    material, _ = parse_material("Rock", [f"Ni {value}"], 1)
    assert material.optical_density == float(value)


def test_invalid_number_is_a_token_error():
    with pytest.raises(InvalidTokenError, match="Invalid R value"):
        parse_material("Rock", ["Ka abc"], 1)
    with pytest.raises(InvalidTokenError, match="Invalid G value"):
        parse_material("Rock", ["Ka 0.2 nope"], 1)


def test_missing_value_is_a_token_error():
    with pytest.raises(InvalidTokenError, match="Invalid 'exponent' value"):
        parse_material("Rock", ["Ns"], 1)


def test_stops_at_next_material_and_leaves_rest():
    lines = iter(["Ka 0.2", "newmtl Other", "Ka 0.9"])
    material, read = parse_material("Rock", lines, 1)
    assert material.ambient_reflectivity == Rgb(0.2, 0.2, 0.2)
    assert read == 1
    assert next(lines) == "Ka 0.9"


def test_comments_and_unknown_statements_are_not_counted():
    material, read = parse_material("Rock", ["# Ka 0.2 0.2 0.2", "Ns 10", "map_Kd rock.png"], 1)
    assert material.ambient_reflectivity == Rgb()
    assert material.specular_highlight_exponent == 10.0
    assert read == 1


def test_parse_error_messages():
    assert str(InvalidTokenError(3, "Missing statement")) == "Invalid token at line 3: Missing statement"
    assert str(InvalidValueError(4, "bad")) == "Invalid value at line 4: bad"
    assert issubclass(InvalidValueError, ParseError)