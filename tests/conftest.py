"""Shared test fixtures."""

import json

import pytest

from odf2json import LineClassifier


@pytest.fixture
def classifier():
    return LineClassifier()


@pytest.fixture
def bare_classifier():
    return LineClassifier(())


@pytest.fixture
def sample_odf():
    return "\r\n".join(
        [
            "; Scion scout",
            "[GameObjectClass]",
            'baseName = "fvscout"',
            "geometryName = fvscout00.xsi",
            "maxHealth = 1800 ; tougher than ISDF",
            "",
            "[CraftClass]",
            "rangeScan = 200.0",
            "LightColor = 1 1 1",
            "// engine tuning",
            "omegaVelocity = 3.2",
        ]
    )


def parse_fragment(fragment):
    """Parse a single file fragment by wrapping it in document braces."""
    return json.loads("{" + fragment.rstrip(",") + "}")
