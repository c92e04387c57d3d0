"""End-to-end tests: notation text in, laid-out components and wires out."""

import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from notation import parse, parse_notation_with_warnings
from notation.settings import LayoutSettings
from tests.conftest import shape


def kinds(layout):
    return [c.component_type for c in layout.components]


class TestBasicNotations:
    def test_empty(self):
        assert parse("").to_dict() == {"components": [], "wires": []}

    def test_blank(self):
        assert parse("  \n ").is_empty()

    def test_single_resistor(self):
        layout = parse("R1")
        assert len(layout.components) == 1
        comp = layout.components[0]
        assert comp.component_type == "resistor"
        assert comp.label == "R1"
        assert comp.rotation == 0
        assert layout.wires == []

    def test_series_pair(self):
        layout = parse("R1ntR2")
        assert [c.label for c in layout.components] == ["R1", "R2"]
        x1, x2 = (c.position[0] for c in layout.components)
        assert x1 < x2
        assert len(layout.wires) == 1

    def test_parallel_pair(self):
        layout = parse("R1//R2")
        top, bottom = layout.components
        assert top.position[1] != bottom.position[1]
        assert len(layout.wires) == 4
        centers = {c.position for c in layout.components}
        for wire in layout.wires:
            first, last = wire.get_endpoints()
            assert not (first in centers and last in centers)

    def test_nested_parallel_groups(self):
        layout = parse("R//R1nt(R2//R3)")
        assert len(layout.components) == 4
        assert [c.label for c in layout.components] == ["R", "R1", "R2", "R3"]

    def test_textbook_circuit(self):
        layout = parse("UntKdntR1nt(R2//R3)")
        assert kinds(layout) == ["battery", "switch_closed", "resistor", "resistor", "resistor"]
        assert len(layout.wires) == 7
        straight = [w for w in layout.wires if w.bend_count() == 0]
        bent = [w for w in layout.wires if w.bend_count() == 1]
        assert len(straight) == 3
        assert len(bent) == 4


class TestProperties:
    @pytest.mark.parametrize("text", ["R1", "R1ntR2", "R//R1nt(R2//R3)", "UntKdntR1nt(R2//R3)"])
    def test_repeatable(self, text):
        first = parse(text)
        second = parse(text)
        assert shape(first) == shape(second)

    def test_ids_restart_each_call(self):
        parse("R1ntR2ntR3//R4")
        layout = parse("R1")
        assert layout.components[0].component_id == "parsed_0"

    def test_ids_unique(self):
        layout = parse("UntKdntR1nt(R2//R3)//(C1ntL1)ntA")
        ids = [c.component_id for c in layout.components] + [w.wire_id for w in layout.wires]
        assert len(ids) == len(set(ids))

    def test_case_insensitive_classification(self):
        lower = parse("untkdntr1")
        upper = parse("UNTKDNTR1")
        assert kinds(lower) == kinds(upper)
        assert [c.label for c in lower.components] == ["u", "kd", "r1"]
        assert [c.label for c in upper.components] == ["U", "KD", "R1"]

    def test_all_wires_orthogonal(self):
        layout = parse("R4//((R1//R2)ntR3)ntĐ//LED//V")
        for wire in layout.wires:
            assert wire.is_orthogonal()
            assert wire.bend_count() <= 1

    def test_concurrent_calls(self):
        texts = ["R1ntR2", "R1//R2", "UntKdntR1nt(R2//R3)"] * 10
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(parse, texts))
        for text, layout in zip(texts, results):
            assert shape(layout) == shape(parse(text))
            assert layout.components[0].component_id == "parsed_0"

    def test_settings_respected(self):
        layout = parse("R1ntR2", LayoutSettings(series_gap=60))
        x1, x2 = (c.position[0] for c in layout.components)
        assert x2 - x1 == 140


class TestRobustness:
    @pytest.mark.parametrize("text", ["R1nt(R2", "R1nt", "R1//", "((", ")R1", "//", "R1 nt nt R2"])
    def test_malformed_input_still_draws(self, text):
        layout = parse(text)
        assert layout.components

    def test_placeholder_component(self):
        layout = parse("R1//")
        assert [c.label for c in layout.components] == ["R1", "?"]

    def test_only_closing_parens(self):
        assert parse(")))").is_empty()

    def test_unexpected_failure_gives_empty_layout(self, monkeypatch, caplog):
        def explode(*_args, **_kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("notation.pipeline.layout_tree", explode)
        with caplog.at_level(logging.ERROR, logger="notation.pipeline"):
            layout = parse("R1ntR2")
        assert layout.is_empty()
        assert "boom" in caplog.text

    @pytest.mark.parametrize("depth", [400, 5000])
    def test_deeply_nested_group(self, depth):
        layout = parse("(" * depth + "R1" + ")" * depth)
        assert [c.label for c in layout.components] == ["R1"]


class TestWarnings:
    def test_clean_input_has_no_warnings(self):
        layout, warnings = parse_notation_with_warnings("R//R1nt(R2//R3)")
        assert len(layout.components) == 4
        assert warnings == []

    def test_recovered_input_reports_warnings(self):
        layout, warnings = parse_notation_with_warnings("R1nt(R2")
        assert [c.label for c in layout.components] == ["R1", "R2"]
        assert any("unclosed" in w for w in warnings)

    def test_layout_matches_parse(self):
        layout, _warnings = parse_notation_with_warnings("UntKdntR1nt(R2//R3)")
        assert shape(layout) == shape(parse("UntKdntR1nt(R2//R3)"))

    def test_blank_input(self):
        assert parse_notation_with_warnings("   ") == (parse(""), [])

    def test_failure_keeps_warnings(self, monkeypatch):
        def explode(*_args, **_kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("notation.pipeline.layout_tree", explode)
        layout, warnings = parse_notation_with_warnings("R1//")
        assert layout.is_empty()
        assert warnings
