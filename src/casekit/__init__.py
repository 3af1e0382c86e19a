"""casekit: word splitting, case conversion, wildcards, string templates."""

from __future__ import annotations

__version__ = "0.1.0"

from casekit.casing import camel_case, capitalize, kebab_case, lower_case, snake_case, trim
from casekit.errors import InvalidArgument, TemplateError
from casekit.functions import compose, curry, identity, noop, pipe
from casekit.template import CompiledTemplate, template, template_object
from casekit.wildcard import wildcard_to_regexp
from casekit.words import map_words, words

__all__ = [
    "CompiledTemplate",
    "InvalidArgument",
    "TemplateError",
    "camel_case",
    "capitalize",
    "compose",
    "curry",
    "identity",
    "kebab_case",
    "lower_case",
    "map_words",
    "noop",
    "pipe",
    "snake_case",
    "template",
    "template_object",
    "trim",
    "wildcard_to_regexp",
    "words",
]
