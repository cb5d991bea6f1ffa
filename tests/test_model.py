import pytest

from inkcanvas.errors import (InkDecodeWarning, InkReferenceWarning,
                              InkStructureWarning)
from inkcanvas.model import (BRUSH_PROPERTIES, Brush, BrushProperty, Channel,
                             ChannelProperty, Context, Ink, InkSource, Trace,
                             TraceFormat)


def make_source(resolution_units="1/mm", force=(0, 1024)):
    channels = [Channel("X", "integer", units="mm"),
                Channel("Y", "integer", units="mm")]
    if force is not None:
        channels.append(Channel("F", "integer", min=force[0], max=force[1],
                                units="dev"))
    properties = [ChannelProperty("X", "resolution", 100, resolution_units),
                  ChannelProperty("Y", "resolution", 50, resolution_units)]
    return InkSource("src", TraceFormat("fmt", channels), properties)


def test_channel_defaults():
    channel = Channel("X")
    assert channel.min == 0
    assert channel.resolution == 0
    assert channel.max is None


def test_resolution_refines_channel():
    source = make_source()
    assert source.trace_format.channels["X"].resolution == 100
    assert source.trace_format.channels["Y"].resolution == 50
    assert source.trace_format.channels["F"].resolution == 0
    assert len(source.channel_properties) == 2


@pytest.mark.parametrize("units", ["mm", "1/in", None])
def test_resolution_with_wrong_units_is_reported(units):
    with pytest.warns(InkStructureWarning):
        source = make_source(resolution_units=units)
    assert source.trace_format.channels["X"].resolution == 0


def test_context_factors():
    context = Context("ctx", make_source(), dpi=254)
    # 100 samples per mm: a sample is one himetric, i.e. 0.1 pixel
    assert context.x_factor == pytest.approx(.1)
    assert context.y_factor == pytest.approx(.2)
    assert context.f_factor == pytest.approx(1 / 1024)
    assert context.f_neutral == 512


def test_context_without_force_channel():
    context = Context("ctx", make_source(force=None))
    assert (context.f_factor, context.f_neutral) == (1, .5)


def test_context_with_degenerate_force_range():
    with pytest.warns(InkStructureWarning):
        context = Context("ctx", make_source(force=(3, 3)))
    assert (context.f_factor, context.f_neutral) == (1, .5)


def test_context_without_resolution():
    source = InkSource("src", TraceFormat(channels=[Channel("X"),
                                                    Channel("Y")]))
    with pytest.warns(InkStructureWarning):
        context = Context("ctx", source)
    assert context.x_factor == 1


def test_context_recomputes_factors_for_new_source():
    context = Context("ctx", dpi=254)
    assert context.x_factor == 1
    context.ink_source = make_source()
    assert context.x_factor == pytest.approx(.1)
    assert context.trace_format.index("F") == 2
    context.ink_source = None
    assert context.x_factor == 1
    assert len(context.trace_format) == 2


def test_brush_interprets_known_properties():
    brush = Brush("pen", [BrushProperty("color", "#00FF00", None),
                          BrushProperty("width", "2", "cm"),
                          BrushProperty("transparency", "128", None)])
    assert brush.color == "#00FF00"
    assert brush.width == 2000
    assert list(brush.properties) == ["color", "width", "transparency"]


def test_brush_defaults():
    brush = Brush("pen")
    assert (brush.width, brush.color) == (10, "#000000")


def test_brush_width_not_a_number():
    with pytest.warns(InkStructureWarning):
        brush = Brush("pen", [BrushProperty("width", "thick", "mm")])
    assert brush.width == 10
    assert "width" in brush.properties


def test_brush_property_registry_is_extensible(monkeypatch):
    def interpret_tip(brush, brush_property):
        brush.tip = brush_property.value

    monkeypatch.setitem(BRUSH_PROPERTIES, "tip", interpret_tip)
    brush = Brush("pen", [BrushProperty("tip", "rectangle", None)])
    assert brush.tip == "rectangle"


def test_statistics_span_all_traces():
    ink = Ink()
    tables = []
    for text in ["1 5,2 2,0 -1", "-4 9,1 1", "7 0"]:
        tables.append(ink.decode_trace(text).table)
    points = [point for table in tables for point in table]
    assert ink.counts.tolist() == [len(points), len(points)]
    assert ink.count == 2 * len(points)
    for j in range(2):
        column = [point[j] for point in points]
        assert ink.mins[j] == min(column)
        assert ink.maxs[j] == max(column)
        assert ink.sums[j] == sum(column)


def test_decode_trace_uses_channel_count_of_context():
    ink = Ink()
    ink.add_context(Context("ctx", make_source()))
    with pytest.warns(Warning):
        trace = ink.decode_trace("1 2", context_ref="#ctx")
    assert trace.table == [[1, 2, 0]]


def test_trace_keeps_attributes():
    trace, statistics = Trace.decode("3 4", id="t", context_ref="#c",
                                     brush_ref="#b", time_offset="10")
    assert (trace.id, trace.context_ref, trace.brush_ref, trace.time_offset) \
        == ("t", "#c", "#b", "10")
    assert trace.encode() == "3 4"
    assert statistics.count == 2


def test_append_point_updates_statistics():
    ink = Ink()
    trace = Trace()
    ink.add_trace(trace)
    ink.append_point(trace, (4, -1))
    ink.append_point(trace, (2, 3))
    assert trace.table == [[4, -1], [2, 3]]
    assert ink.mins.tolist() == [2, -1]
    assert ink.maxs.tolist() == [4, 3]


def test_resolve_references():
    ink = Ink()
    ink.add_context(Context("ctx"))
    ink.add_brush(Brush("pen"))
    trace = Trace([[0, 0]], context_ref="#ctx", brush_ref="#pen")
    assert ink.resolve_context(trace) is ink.contexts["ctx"]
    assert ink.resolve_brush(trace) is ink.brushes["pen"]
    assert ink.resolve_context(Trace()) is ink.default_context
    assert ink.resolve_brush(Trace()) is None


def test_unresolved_references_are_reported():
    ink = Ink()
    trace = Trace(context_ref="#missing", brush_ref="#missing")
    with pytest.warns(InkReferenceWarning):
        assert ink.resolve_context(trace) is None
    with pytest.warns(InkReferenceWarning):
        assert ink.resolve_brush(trace) is None


def test_decode_trace_without_context_uses_default_format():
    ink = Ink()
    with pytest.warns(InkDecodeWarning):
        trace = ink.decode_trace("5,1 2 3")
    assert trace.table == [[5, 0], [6, 2]]
    assert ink.counts.tolist() == [2, 2]


def test_decode_trace_with_undefined_context_infers_format():
    ink = Ink()
    trace = ink.decode_trace("1 2 3", context_ref="#missing")
    assert trace.table == [[1, 2, 3]]
