from __future__ import annotations

from string.templatelib import Template
from typing import NamedTuple


class TemplateParts(NamedTuple):
    strings: tuple[str, ...]
    values: tuple[object, ...]


def split_template(template: Template) -> TemplateParts:
    # conversions and format specs are ignored; slots carry raw values
    return TemplateParts(
        tuple(template.strings),
        tuple(interpolation.value for interpolation in template.interpolations),
    )
