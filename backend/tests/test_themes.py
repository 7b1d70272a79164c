from __future__ import annotations

import pytest

from infusesecret.themes import THEME_TEMPLATES, THEME_VALUES, Theme, template_for


def test_theme_values():
    assert THEME_VALUES == ("romantic", "friendship", "motivation", "general")


@pytest.mark.parametrize("value", list(THEME_VALUES))
def test_parse_known(value):
    assert Theme.parse(value).value == value


@pytest.mark.parametrize("value", ["", "ROMANTIC", "spooky", None, 3, ["general"]])
def test_parse_unknown(value):
    assert Theme.parse(value) is None


def test_every_theme_has_a_template():
    assert set(THEME_TEMPLATES) == set(Theme)
    for template in THEME_TEMPLATES.values():
        assert template.emojis
        assert template.pattern


def test_template_for_falls_back_to_general():
    assert template_for("unknown") is THEME_TEMPLATES[Theme.GENERAL]
    assert template_for("friendship") is THEME_TEMPLATES[Theme.FRIENDSHIP]
