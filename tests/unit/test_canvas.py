"""Tests for the canvas recorder and the canvas view."""

import math
from types import SimpleNamespace

import pytest

from rui.canvas import Canvas, FontParams, GradientStop, LineJoin, TextAlign, font_text
from rui.data import parse_data
from rui.session import RecordingBridge, Session
from rui.values import Color, px
from rui.views import CanvasView, View


def draw_bar(canvas):
    canvas.fill_rect(0, 0, canvas.width(), 1)


# ============================================================================
# Recorder
# ============================================================================

@pytest.mark.unit
def test_script_block(offline_session):
    """Test the recorded draw is one block bound to the view's canvas."""
    canvas = Canvas(View(offline_session))
    canvas.fill_rect(1, 2, 3, 4.5)
    script = canvas.finish()
    assert script.startswith('{\nconst canvas = document.getElementById("id000001");')
    assert script.endswith("\nctx.fillRect(1,2,3,4.5);\n}")


@pytest.mark.unit
def test_styles_and_text(offline_session):
    """Test style setters and text drawing."""
    canvas = Canvas(View(offline_session))
    canvas.set_solid_color_fill_style("red")
    canvas.set_line_width(2)
    canvas.set_line_width(0)
    canvas.set_line_join(LineJoin.ROUND)
    canvas.set_text_align(TextAlign.CENTER)
    canvas.fill_text(5, 6, 'say "hi"')
    script = canvas.finish()
    assert '\nctx.fillStyle = "rgb(255,0,0)";' in script
    assert script.count("ctx.lineWidth") == 1
    assert "\nctx.lineJoin = 'round';" in script
    assert "\nctx.textAlign = 'center';" in script
    assert '\nctx.fillText("say \\"hi\\"",5,6);' in script


@pytest.mark.unit
def test_linear_gradient(offline_session):
    """Test gradients get unique names and skip out-of-range stops."""
    canvas = Canvas(View(offline_session))
    stops = [GradientStop(0.5, Color(0xFF00FF00)), GradientStop(2, Color(0))]
    first = canvas.linear_gradient(0, 0, "red", 10, 0, "blue", stops)
    canvas.set_fill_style(first)
    second = canvas.radial_gradient(0, 0, 1, "red", 0, 0, 5, "blue")
    script = canvas.finish()
    assert (first, second) == ("gradient1", "gradient2")
    assert "\nconst gradient1 = ctx.createLinearGradient(0,0,10,0);" in script
    assert '\ngradient1.addColorStop(0.5, "rgb(0,255,0)");' in script
    assert "addColorStop(2," not in script
    assert "\nif (gradient1) ctx.fillStyle = gradient1;" in script


@pytest.mark.unit
def test_shadow(offline_session):
    """Test transparent shadows are not drawn."""
    canvas = Canvas(View(offline_session))
    canvas.set_shadow(1, 2, 3, "#00000000")
    assert "shadowColor" not in canvas.finish()
    canvas.set_shadow(1, 2, 3, "black")
    assert "\nctx.shadowBlur = 3;" in canvas.finish()


@pytest.mark.unit
def test_paths(offline_session):
    """Test path commands and their direction flag."""
    canvas = Canvas(View(offline_session))
    path = canvas.new_path()
    path.move_to(0, 0)
    path.arc(5, 5, 5, 0, math.pi, True)
    path.arc(5, 5, 0, 0, math.pi, True)
    path.close()
    canvas.stroke_path(path)
    script = canvas.finish()
    assert "\nctx.beginPath();\nctx.moveTo(0,0);\nctx.arc(5,5,5,0,3.141592653589793,false);" in script
    assert script.count("ctx.arc(") == 1
    assert "\nctx.closePath();\nctx.stroke();" in script


@pytest.mark.unit
def test_ellipse_and_line(offline_session):
    """Test ellipses with negative radii are skipped."""
    canvas = Canvas(View(offline_session))
    canvas.fill_ellipse(0, 0, -1, 1)
    canvas.draw_line(0, 0, 10, 10)
    script = canvas.finish()
    assert "ellipse" not in script
    assert "\nctx.lineTo(10,10);\nctx.stroke();" in script


@pytest.mark.unit
def test_images_must_be_loaded(offline_session):
    """Test only loaded images are drawn."""
    canvas = Canvas(View(offline_session))
    canvas.draw_image(0, 0, SimpleNamespace(ready=False, url="/a.png"))
    canvas.draw_image(0, 0, SimpleNamespace(ready=True, url="/b.png"))
    script = canvas.finish()
    assert "/a.png" not in script
    assert '\nif (images.has("/b.png")) ctx.drawImage(images.get("/b.png"),0,0);' in script


@pytest.mark.unit
def test_font_text():
    """Test the font shorthand."""
    assert font_text("Arial", px(12)) == "12px Arial"
    assert font_text("", px(10), FontParams(italic=True, weight=7)) == "italic 700 10px serif"


# ============================================================================
# Text Metrics
# ============================================================================

@pytest.mark.unit
def test_text_metrics_from_browser(params):
    """Test text metrics come back through the getter-RPC."""
    bridge = RecordingBridge(responder=lambda function, args: {"width": 42, "ascent": 9})
    session = Session(3, None, params, bridge)
    canvas = Canvas(View(session))
    metrics = canvas.text_metrics("Hello", "Arial", px(12))
    assert (metrics.width, metrics.ascent, metrics.descent) == (42.0, 9.0, 0.0)
    assert bridge.calls == [("canvasTextMetrics", ("id000001", "12px Arial", "Hello"))]


@pytest.mark.unit
def test_text_metrics_unanswered(session):
    """Test an unanswered measurement gives zero metrics."""
    metrics = Canvas(View(session)).text_metrics("Hello", "Arial", px(12))
    assert metrics.width == 0.0


# ============================================================================
# Canvas View
# ============================================================================

@pytest.mark.unit
def test_canvas_view_redraw(session, bridge, live_root):
    """Test redraw sends the recorded draw handler."""
    view = live_root(CanvasView(session, {"draw-function": draw_bar}))
    assert view.html().startswith('<canvas id="id000001"')
    bridge.reset()
    view.redraw()
    assert len(bridge.messages) == 1
    assert "\nctx.fillRect(0,0,0,1);" in bridge.messages[0]


@pytest.mark.unit
def test_canvas_view_redraws_on_resize(session, bridge, live_root):
    """Test a resize report redraws with the new size."""
    view = live_root(CanvasView(session, {"draw-function": draw_bar}))
    session.handle_message(parse_data("resize{views=[_{id=id000001, x=0, y=0, width=100, height=50}]}"))
    assert view.frame.width == 100
    assert "\nctx.fillRect(0,0,100,1);" in bridge.text()


@pytest.mark.unit
def test_canvas_view_without_handler(session, bridge, live_root):
    """Test a canvas without a draw handler is cleared."""
    view = live_root(CanvasView(session))
    view.redraw()
    assert "\nctx.clearRect(0,0,0,0);" in bridge.text()


@pytest.mark.unit
def test_draw_function_must_be_callable(offline_session):
    """Test non-callable draw handlers are refused."""
    view = CanvasView(offline_session)
    assert view.set("draw-function", "draw") is False
    assert view.draw_function() is None


@pytest.mark.unit
def test_offline_canvas_does_not_draw(offline_session):
    """Test redraw does nothing before the view is rendered."""
    drawn = []
    view = CanvasView(offline_session, {"draw-function": drawn.append})
    view.redraw()
    assert drawn == []
