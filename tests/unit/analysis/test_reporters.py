"""Unit tests for metrics records and reporters."""

import json

from rich.console import Console

from lk_metrics.analysis.metrics import ClassInfo, MethodInfo
from lk_metrics.analysis.reporters import ConsoleReporter, load_json, render_json


def sample_infos():
    return [
        ClassInfo(
            name="Circle",
            parent_name="Shape",
            class_size=4,
            inheritance_depth=1,
            overridden_operations=2,
            added_operations=1,
            specialization_index=2 / 3,
            operation_complexity=0.1 + 0.2,
            method_infos=(
                MethodInfo("Area", 0, 0.0),
                MethodInfo("Scale", 2, 0.1 + 0.2),
            ),
            average_parameters_per_operation=2 / 3,
        ),
        ClassInfo(
            name="Empty",
            parent_name=None,
            class_size=0,
            inheritance_depth=0,
            overridden_operations=0,
            added_operations=0,
            specialization_index=0.0,
            operation_complexity=0.0,
        ),
    ]


class TestJsonReporter:
    """JSON output keeps every field and full float precision."""

    def test_round_trip(self):
        infos = sample_infos()
        assert load_json(render_json(infos)) == infos

    def test_floats_are_exact(self):
        (circle, _) = load_json(render_json(sample_infos()))
        assert circle.specialization_index == 2 / 3
        assert circle.operation_complexity == 0.1 + 0.2

    def test_snake_case_keys(self):
        data = json.loads(render_json(sample_infos()))
        assert data[0]["parent_name"] == "Shape"
        assert data[1]["parent_name"] is None
        assert data[0]["method_infos"][1] == {
            "name": "Scale",
            "parameter_count": 2,
            "complexity": 0.1 + 0.2,
        }

    def test_writes_file(self, tmp_path):
        output = tmp_path / "reports" / "metrics.json"
        render_json(sample_infos(), output)
        assert output.exists()
        assert load_json(output) == sample_infos()

    def test_empty(self):
        assert load_json(render_json([])) == []


class TestClassInfo:
    def test_method_count(self):
        circle, empty = sample_infos()
        assert circle.method_count == 3
        assert empty.method_count == 0

    def test_dict_round_trip(self):
        for info in sample_infos():
            assert ClassInfo.from_dict(info.to_dict()) == info


class TestConsoleReporter:
    """Console reporter renders a summary and a per-class table."""

    def test_prints_classes(self):
        console = Console(record=True, width=200)
        reporter = ConsoleReporter(console)

        reporter.print_summary(sample_infos())
        reporter.print_classes(sample_infos())

        text = console.export_text()
        assert "Classes Analyzed: 2" in text
        assert "Circle" in text
        assert "Shape" in text

    def test_top_limits_rows(self):
        console = Console(record=True, width=200)
        ConsoleReporter(console).print_classes(sample_infos(), top=1)
        text = console.export_text()
        assert "Circle" in text
        assert "Empty" not in text

    def test_no_classes(self):
        console = Console(record=True, width=200)
        ConsoleReporter(console).print_classes([])
        assert "No classes found" in console.export_text()
