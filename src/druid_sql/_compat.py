from __future__ import annotations

import sys
from typing import NoReturn

__all__ = ["Template", "split_template"]

if sys.version_info >= (3, 14):
    from string.templatelib import Template

    from ._render import split_template
else:  # pragma: no cover

    class Template:
        pass

    def split_template(template: Template) -> NoReturn:  # noqa: ARG001
        msg = "t-strings require Python 3.14+"
        raise RuntimeError(msg)
