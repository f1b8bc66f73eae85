"""Tests for the code generator."""

import pytest
from hypothesis import given, strategies as st

from guiwizard.codegen import CodeGenerator, format_number, float_literal, generate_code
from guiwizard.extraction import CodeExtractor, parse_rect
from guiwizard.models import ControlDescriptor, ControlKind, Project, Vec2, WindowDescriptor


EXPECTED_DEMO = '''// Generated by GUI-Wizard
// Project: Demo


void OnGUI()
{
    // Window: Main
    GUI.color = new Color(0.2f, 0.2f, 0.2f, 0.8f);
    GUI.Box(new Rect(50f, 50f, 300f, 200f), "Main");
    GUI.color = Color.white;

    GUI.color = new Color(1f, 1f, 1f, 1f);
    GUI.Label(new Rect(60f, 85f, 100f, 30f), "Hello");
    GUI.color = Color.white;

    GUI.color = new Color(1f, 1f, 1f, 1f);
    if (GUI.Button(new Rect(60f, 125f, 80f, 20f), "Go"))
    {
        // Go button clicked
    }
    GUI.color = Color.white;

}
'''


def _single(*controls):
    return Project(name="P", windows=[WindowDescriptor(controls=list(controls))])


@pytest.mark.unit
def test_generate_full_listing(sample_project):
    """Test the complete output for a label and a button."""
    assert generate_code(sample_project) == EXPECTED_DEMO


@pytest.mark.unit
def test_generate_is_deterministic(sample_project):
    """Same project, same text; project untouched."""
    before = sample_project.model_copy(deep=True)
    generator = CodeGenerator()

    assert generator.generate(sample_project) == generator.generate(sample_project)
    assert sample_project == before


@pytest.mark.unit
def test_toggle_declaration_and_assignment():
    """One boolean declaration and one assignment for a toggle."""
    toggle = ControlDescriptor(kind=ControlKind.TOGGLE, variable_name="flag", toggle_value=True)
    lines = generate_code(_single(toggle)).splitlines()

    declarations = [line for line in lines if line.startswith("private ")]
    assignments = [line for line in lines if line.strip().startswith("flag = ")]

    assert declarations == ["private bool flag = true;"]
    assert assignments == ['    flag = GUI.Toggle(new Rect(60f, 85f, 100f, 30f), flag, "New Control");']


@pytest.mark.unit
def test_slider_statements(slider_control):
    """Slider declares a float and passes its range."""
    code = generate_code(_single(slider_control))

    assert "private float volume = 0.25f;" in code
    assert "    GUI.color = new Color(1f, 0.5f, 0f, 1f);" in code
    assert "volume = GUI.HorizontalSlider(new Rect(60f, 155f, 150f, 20f), volume, -1f, 2.5f);" in code


@pytest.mark.unit
@pytest.mark.parametrize("kind,call", [(ControlKind.TEXT_FIELD, "TextField"), (ControlKind.TEXT_AREA, "TextArea")])
def test_text_controls(kind, call):
    """Text kinds declare strings and assign the draw result."""
    control = ControlDescriptor(kind=kind, variable_name="notes", text_value="hi there")
    code = generate_code(_single(control))

    assert 'private string notes = "hi there";' in code
    assert f"    notes = GUI.{call}(new Rect(60f, 85f, 100f, 30f), notes);" in code


@pytest.mark.unit
def test_label_and_button_have_no_declaration(sample_project):
    """Stateless kinds emit no field."""
    assert "private " not in generate_code(sample_project)


@pytest.mark.unit
def test_declarations_follow_traversal_order():
    """Declarations run window by window, control by control."""
    first = WindowDescriptor(controls=[
        ControlDescriptor(kind=ControlKind.TOGGLE, variable_name="a"),
        ControlDescriptor(kind=ControlKind.SLIDER, variable_name="b"),
    ])
    second = WindowDescriptor(controls=[ControlDescriptor(kind=ControlKind.TEXT_FIELD, variable_name="c")])
    lines = generate_code(Project(windows=[first, second])).splitlines()

    assert [line for line in lines if line.startswith("private ")] == [
        "private bool a = false;",
        "private float b = 0.5f;",
        'private string c = "";',
    ]


@pytest.mark.unit
def test_duplicate_variable_names_emitted():
    """Duplicates are kept; both declarations appear."""
    project = _single(
        ControlDescriptor(kind=ControlKind.TOGGLE, variable_name="dup"),
        ControlDescriptor(kind=ControlKind.TOGGLE, variable_name="dup", toggle_value=True),
    )
    code = generate_code(project)

    assert code.count("private bool dup =") == 2


@pytest.mark.unit
def test_window_name_is_verbatim():
    """Names are not escaped."""
    project = Project(windows=[WindowDescriptor(name='Say "hi"')])
    assert 'GUI.Box(new Rect(50f, 50f, 300f, 200f), "Say "hi"");' in generate_code(project)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,text",
    [(10.0, "10"), (0.5, "0.5"), (0.2, "0.2"), (-3.0, "-3"), (-0.0, "0"), (1e20, "1e+20"), (1.25e-7, "1.25e-07")],
)
def test_format_number(value, text):
    """Locale-independent shortest decimal text."""
    assert format_number(value) == text


@pytest.mark.unit
@given(st.floats(allow_nan=False, allow_infinity=False))
def test_float_literal_reparses(value):
    """Property test: generated literals parse back to the same value."""
    literal = float_literal(value)
    assert literal.endswith("f")

    parsed = parse_rect(", ".join([literal] * 4))
    assert parsed is not None
    assert parsed[0].x == value


@pytest.mark.unit
def test_extract_of_generated_drops_stateful(label_control, slider_control):
    """Round-trip keeps labels and buttons only."""
    project = _single(label_control, slider_control)

    window = CodeExtractor().extract(generate_code(project))

    assert [c.kind for c in window.controls] == [ControlKind.LABEL]
    assert window.controls[0].text == "Hello"
    assert window.controls[0].position == Vec2(x=60, y=85)
    assert window.controls[0].size == Vec2(x=100, y=30)


@pytest.mark.unit
def test_empty_project():
    """A project without windows still yields the routine skeleton."""
    code = generate_code(Project(name="Empty"))
    assert code.endswith("void OnGUI()\n{\n}\n")


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,text",
    [(float("inf"), "float.PositiveInfinity"), (float("-inf"), "float.NegativeInfinity"), (float("nan"), "float.NaN")],
)
def test_float_literal_non_finite(value, text):
    """Overflowed values become float constants."""
    assert float_literal(value) == text


@pytest.mark.unit
def test_generate_coordinate_overflow():
    """Window and control offsets that sum past the float range still generate."""
    control = ControlDescriptor(text="Far", position=Vec2(x=1.7e308, y=10))
    window = WindowDescriptor(name="Edge", position=Vec2(x=1.7e308, y=50), controls=[control])

    code = generate_code(Project(windows=[window]))

    assert 'GUI.Box(new Rect(1.7e+308f, 50f, 300f, 200f), "Edge");' in code
    assert 'GUI.Label(new Rect(float.PositiveInfinity, 85f, 100f, 30f), "Far");' in code
