"""Shared fixtures: a tiny TrueType font built with fontTools."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

UNITS_PER_EM = 1000


def _draw_ring(pen: TTGlyphPen) -> None:
    """Square ring: outer 100..700 x 0..700, hole 300..500 x 200..500."""
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((700, 700))
    pen.lineTo((700, 0))
    pen.closePath()
    pen.moveTo((300, 200))
    pen.lineTo((500, 200))
    pen.lineTo((500, 500))
    pen.lineTo((300, 500))
    pen.closePath()


def _draw_bowl(pen: TTGlyphPen) -> None:
    """D-like outline with two quadratic arcs on the right side."""
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((400, 700))
    pen.qCurveTo((700, 700), (700, 350))
    pen.qCurveTo((700, 0), (400, 0))
    pen.closePath()


def build_test_font(path: Path) -> Path:
    """Write a TrueType font mapping 'A' to a ring, 'D' to a bowl and a blank space."""
    drawings = {".notdef": None, "space": None, "A": _draw_ring, "D": _draw_bowl}

    glyphs = {}
    for name, draw in drawings.items():
        pen = TTGlyphPen(None)
        if draw is not None:
            draw(pen)
        glyphs[name] = pen.glyph()

    fb = FontBuilder(UNITS_PER_EM, isTTF=True)
    fb.setupGlyphOrder(list(drawings))
    fb.setupCharacterMap({ord(" "): "space", ord("A"): "A", ord("D"): "D"})
    fb.setupGlyf(glyphs)
    glyf = fb.font["glyf"]
    fb.setupHorizontalMetrics({name: (800, getattr(glyf[name], "xMin", 0)) for name in drawings})
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": "GlyphSdf Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()
    fb.save(str(path))
    return path


@pytest.fixture(scope="session")
def sample_font(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Path to the generated test font."""
    return build_test_font(tmp_path_factory.mktemp("fonts") / "GlyphSdfTest.ttf")
