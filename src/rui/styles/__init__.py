"""Style engine: CSS builders, composite properties and the view style bag."""

from .css import (
    CSSBuilder,
    CSSDeclarations,
    CSSStyleBuilder,
    CSSValueBuilder,
    CSSWriter,
    DISABLED_STYLES,
    SYSTEM_STYLES,
)
from .composite import CompositeProperty, split_values
from .bounds import Bounds, bounds_property, explode_bounds, side_tags
from .border import BorderProperty, ViewBorder, ViewBorders
from .radius import BoxRadius, RadiusProperty
from .outline import OutlineProperty, ViewOutline
from .shadow import ShadowProperty, new_shadow, shadow_list, shadows_css
from .filter import FilterProperty
from .transform import TRANSFORM_TAGS, TransformProperty, transform_origin_css
from .column_separator import ColumnSeparatorProperty
from .background import (
    BackgroundConicGradient,
    BackgroundElement,
    BackgroundGradient,
    BackgroundImage,
    BackgroundLinearGradient,
    BackgroundRadialGradient,
    GradientAngle,
    GradientPoint,
    background_css,
    background_list,
    create_background,
    new_background_image,
    new_conic_gradient,
    new_linear_gradient,
    new_radial_gradient,
)
from .view_style import COMPOSITE_CLASSES, ViewStyle, composite_tag

__all__ = [
    # CSS builders
    "CSSBuilder",
    "CSSDeclarations",
    "CSSStyleBuilder",
    "CSSValueBuilder",
    "CSSWriter",
    "DISABLED_STYLES",
    "SYSTEM_STYLES",
    # Composites
    "CompositeProperty",
    "split_values",
    "Bounds",
    "bounds_property",
    "explode_bounds",
    "side_tags",
    "BorderProperty",
    "ViewBorder",
    "ViewBorders",
    "BoxRadius",
    "RadiusProperty",
    "OutlineProperty",
    "ViewOutline",
    "ShadowProperty",
    "new_shadow",
    "shadow_list",
    "shadows_css",
    "FilterProperty",
    "TRANSFORM_TAGS",
    "TransformProperty",
    "transform_origin_css",
    "ColumnSeparatorProperty",
    # Background
    "BackgroundConicGradient",
    "BackgroundElement",
    "BackgroundGradient",
    "BackgroundImage",
    "BackgroundLinearGradient",
    "BackgroundRadialGradient",
    "GradientAngle",
    "GradientPoint",
    "background_css",
    "background_list",
    "create_background",
    "new_background_image",
    "new_conic_gradient",
    "new_linear_gradient",
    "new_radial_gradient",
    # View style
    "COMPOSITE_CLASSES",
    "ViewStyle",
    "composite_tag",
]
