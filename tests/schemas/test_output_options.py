import dataclasses

import pytest

from localekit.schemas import OutputOptions, TemplateMode


@pytest.mark.parametrize(
    "flags, expected",
    [
        ({}, TemplateMode.LIBRARY),
        ({"window_object": True}, TemplateMode.WINDOW),
        ({"json": True, "window_object": True}, TemplateMode.JSON),
        ({"no_lib": True, "json": True, "window_object": True}, TemplateMode.DATA),
        ({"compress": True, "group_locales": True}, TemplateMode.LIBRARY),
    ],
)
def test_template_mode_precedence(flags, expected):
    assert OutputOptions(**flags).template_mode is expected


def test_output_options_are_frozen():
    options = OutputOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.compress = True  # type: ignore[misc]
