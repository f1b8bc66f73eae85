"""Pytest configuration and fixtures."""

import os
import pytest

from guiwizard.models import (
    ControlDescriptor,
    ControlKind,
    Project,
    RGBA,
    Vec2,
    WindowDescriptor,
)
from guiwizard.project import ProjectSession


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ['GUIWIZARD_LOG_LEVEL'] = 'DEBUG'


# ============================================================================
# Model Fixtures
# ============================================================================

@pytest.fixture
def label_control():
    """Label at the default offset."""
    return ControlDescriptor(kind=ControlKind.LABEL, text="Hello", variable_name="title")


@pytest.fixture
def button_control():
    """Button below the label."""
    return ControlDescriptor(
        kind=ControlKind.BUTTON,
        text="Go",
        variable_name="go",
        position=Vec2(x=10, y=50),
        size=Vec2(x=80, y=20),
    )


@pytest.fixture
def slider_control():
    """Slider with a custom range."""
    return ControlDescriptor(
        kind=ControlKind.SLIDER,
        text="Volume",
        variable_name="volume",
        color=RGBA(r=1.0, g=0.5, b=0.0, a=1.0),
        position=Vec2(x=10, y=80),
        size=Vec2(x=150, y=20),
        slider_value=0.25,
        slider_min=-1.0,
        slider_max=2.5,
    )


@pytest.fixture
def sample_window(label_control, button_control):
    """Default-geometry window with a label and a button."""
    return WindowDescriptor(name="Main", controls=[label_control, button_control])


@pytest.fixture
def sample_project(sample_window):
    """Single-window project."""
    return Project(name="Demo", windows=[sample_window])


@pytest.fixture
def session(sample_project):
    """Session editing the sample project."""
    return ProjectSession(sample_project)


# ============================================================================
# Source Fixtures
# ============================================================================

@pytest.fixture
def sample_source():
    """Hand-written OnGUI code with a window, labels and buttons."""
    return '''
using UnityEngine;

public class Menu : MonoBehaviour
{
    private Rect windowRect = new Rect(20, 20, 220, 160);

    void OnGUI()
    {
        windowRect = GUI.Window(0, new Rect(20, 20, 220, 160), DoWindow, "Main Menu");
    }

    void DoWindow(int id)
    {
        if (GUI.Button(new Rect(10f, 30f, 200f, 25f), "Start"))
        {
            StartGame();
        }
        GUI.Label(new Rect(10, 60, 200, 20), "Welcome");
        GUILayout.Label("Version 1.0");
        if (GUILayout.Button("Quit")) Application.Quit();
    }
}
'''
