import logging

import pytest

from courier.domain.entities.geography import Coordinate
from courier.io.inputs import (
    MapFormatError,
    load_deliveries,
    load_street_map,
    parse_deliveries,
    parse_street_map,
)

MAP = """\
Broxton Avenue
2
34.0626647 -118.4472813 34.0629463 -118.4468728
34.0629463 -118.4468728 34.0632373 -118.4464515
Weyburn Avenue
1
34.0629463 -118.4468728 34.0625000 -118.4475000
"""


def test_parse_street_map_blocks():
    g = parse_street_map(MAP.splitlines())
    assert len(g) == 4
    assert g.segment_count == 6
    junction = Coordinate.parse("34.0629463", "-118.4468728")
    assert sorted(s.name for s in g.outgoing(junction)) == [
        "Broxton Avenue",
        "Broxton Avenue",
        "Weyburn Avenue",
    ]


def test_blank_lines_between_blocks_are_fine():
    g = parse_street_map(["A St", "1", "34.0 -118.0 34.1 -118.0", "", "B St", "0"])
    assert g.segment_count == 2


@pytest.mark.parametrize(
    "lines,lineno",
    [
        (["A St"], 2),
        (["A St", "two"], 2),
        (["A St", "2", "34.0 -118.0 34.1 -118.0"], 2),
        (["A St", "1", "34.0 -118.0 34.1"], 3),
        (["A St", "1", "34.0 -118.0 north -118.0"], 3),
    ],
)
def test_malformed_map_names_the_line(lines, lineno):
    with pytest.raises(MapFormatError) as ei:
        parse_street_map(lines)
    assert ei.value.lineno == lineno
    assert str(ei.value).startswith(f"line {lineno}:")


def test_parse_deliveries_skips_bad_lines(caplog):
    lines = [
        "34.0625329 -118.4470263",
        "34.0712323 -118.4505969:Chicken tenders",
        "34.0687443 -118.4449195",
        "34.0685657 -118.4489289:",
        "34.0685657:Pen",
        "abc -118.4489289:Pen",
        "",
        "34.0685657 -118.4489289:Salmon: smoked",
    ]
    with caplog.at_level(logging.WARNING, logger="courier.io.inputs"):
        depot, stops = parse_deliveries(lines)
    assert depot == Coordinate.parse("34.0625329", "-118.4470263")
    assert [s.item for s in stops] == ["Chicken tenders", "Salmon: smoked"]
    assert stops[0].location == Coordinate.parse("34.0712323", "-118.4505969")
    assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 4


@pytest.mark.parametrize("first", ["", "34.0", "34.0 west"])
def test_bad_depot_line_raises(first):
    with pytest.raises(ValueError):
        parse_deliveries([first, "34.0 -118.0:Book"])


def test_load_from_files(tmp_path):
    m = tmp_path / "map.txt"
    m.write_text(MAP)
    d = tmp_path / "deliveries.txt"
    d.write_text("34.0626647 -118.4472813\n34.0632373 -118.4464515:Books\n")
    g = load_street_map(m)
    depot, stops = load_deliveries(d)
    assert depot in g
    assert stops[0].location in g
