"""Transitions and keyframe animations."""

from .transition import (
    EASE_IN_OUT_TIMING,
    EASE_IN_TIMING,
    EASE_OUT_TIMING,
    EASE_TIMING,
    LINEAR_TIMING,
    Animation,
    cubic_bezier_timing,
    parse_animation,
    steps_timing,
    transition_css,
    transition_entries,
    validate_timing_function,
)
from .keyframes import (
    AnimatedProperty,
    KeyframeAnimation,
    animation_list,
    parse_animated_property,
    parse_keyframe_animation,
    value_to_css,
)

__all__ = [
    # Transitions
    "EASE_TIMING",
    "EASE_IN_TIMING",
    "EASE_OUT_TIMING",
    "EASE_IN_OUT_TIMING",
    "LINEAR_TIMING",
    "Animation",
    "cubic_bezier_timing",
    "parse_animation",
    "steps_timing",
    "transition_css",
    "transition_entries",
    "validate_timing_function",
    # Keyframes
    "AnimatedProperty",
    "KeyframeAnimation",
    "animation_list",
    "parse_animated_property",
    "parse_keyframe_animation",
    "value_to_css",
]
