"""Template engine module.

This module renders declarative HTML templates. Directives are plain
attributes, variables are `<var>` elements:

    <ul>
      <li loop="users" if="!hidden">
        <img attr="src:avatar|alt:name" style="border-color:color">
        <var>name</var>
      </li>
    </ul>

Supported directives (in processing order):
    include - replace the element with a rendered partial
    if      - keep or drop the element ([!]path)
    loop    - repeat the element per list item / map entry
    style   - bind CSS properties
    attr    - bind attributes
"""

from vanillatemplates.templates.bindings import AttributeBinder, StyleBinder
from vanillatemplates.templates.conditions import (
    ConditionalFilter,
    ConditionEvaluator,
    ConditionOutcome,
)
from vanillatemplates.templates.context import RenderSettings
from vanillatemplates.templates.context_builder import ContextBuilder
from vanillatemplates.templates.directives import (
    DIRECTIVES,
    Directive,
    DirectiveDispatcher,
    DirectiveKind,
)
from vanillatemplates.templates.includes import IncludeResolver
from vanillatemplates.templates.loops import LoopExpander
from vanillatemplates.templates.paths import UNDEFINED, is_truthy, resolve, to_text
from vanillatemplates.templates.renderer import TreeWalker, render, render_markup, render_sync
from vanillatemplates.templates.variables import VariableInterpolator

__all__ = [
    # Paths
    "UNDEFINED",
    "is_truthy",
    "resolve",
    "to_text",
    # Context
    "ContextBuilder",
    "RenderSettings",
    # Directives
    "DIRECTIVES",
    "Directive",
    "DirectiveDispatcher",
    "DirectiveKind",
    # Handlers
    "AttributeBinder",
    "ConditionEvaluator",
    "ConditionOutcome",
    "ConditionalFilter",
    "IncludeResolver",
    "LoopExpander",
    "StyleBinder",
    "VariableInterpolator",
    # Renderer
    "TreeWalker",
    "render",
    "render_markup",
    "render_sync",
]
