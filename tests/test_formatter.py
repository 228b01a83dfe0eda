"""Tests for list, tree, json and summary output."""

from __future__ import annotations

import json

import pytest

from codepick.extract import extract_functions
from codepick.extract.elements import ExtractedElement, FileResult
from codepick.output.formatter import (
    FORMATS,
    format_json,
    format_list,
    format_results,
    format_summary,
    format_table,
    format_tree,
    json_envelope,
    to_json,
)


@pytest.fixture
def base(tmp_path):
    return tmp_path


@pytest.fixture
def results(base):
    return [
        FileResult(str(base / "src" / "app.js"), (
            ExtractedElement("function", "main", 1, "function main() {"),
            ExtractedElement("single-line-comment", "Comment at line 2", 2, "entry point"),
            ExtractedElement("function", "helper", 5, "helper() {"),
        )),
        FileResult(str(base / "empty.js"), ()),
    ]


class TestListFormat:
    def test_layout(self, results, base):
        assert format_list(results, base) == (
            "--- src/app.js ---\n"
            "function: main (line 1)\n"
            "  function main() {\n"
            "single-line-comment: Comment at line 2 (line 2)\n"
            "  entry point\n"
            "function: helper (line 5)\n"
            "  helper() {\n"
            "\n"
            "--- empty.js ---\n"
            "No elements found"
        )

    def test_empty_content_has_no_indented_line(self, base):
        res = [FileResult(str(base / "a.js"), (ExtractedElement("single-line-comment", "Comment at line 1", 1, ""),))]
        assert format_list(res, base) == "--- a.js ---\nsingle-line-comment: Comment at line 1 (line 1)"

    def test_no_results(self):
        assert format_list([]) == ""


class TestTreeFormat:
    def test_groups_by_type_in_first_seen_order(self, results, base):
        assert format_tree(results, base) == (
            "src/app.js\n"
            "  function (2)\n"
            "    main (line 1)\n"
            "    helper (line 5)\n"
            "  single-line-comment (1)\n"
            "    Comment at line 2 (line 2)\n"
            "\n"
            "empty.js\n"
            "  (No elements found)"
        )


class TestSummaryFormat:
    def test_total_and_per_file_counts(self, results, base):
        assert format_summary(results, base) == (
            "Total elements extracted: 3\n"
            "\n"
            "src/app.js: 3 elements\n"
            "empty.js: 0 elements"
        )

    def test_total_equals_sum_of_counts(self, base):
        res = [
            FileResult(str(base / f"f{i}.js"), tuple(
                ExtractedElement("variable", f"v{j}", j + 1, f"let v{j};") for j in range(i)
            ))
            for i in range(4)
        ]
        first = format_summary(res, base).splitlines()[0]
        assert first == f"Total elements extracted: {sum(range(4))}"


class TestJsonFormat:
    def test_structure(self, results):
        data = json.loads(format_json(results))
        assert [d["filePath"] for d in data] == [r.file_path for r in results]
        assert data[0]["elements"][0] == {
            "type": "function", "name": "main", "line": 1, "content": "function main() {",
        }
        assert data[1]["elements"] == []

    def test_pretty_printed(self, results):
        assert format_json(results).startswith("[\n  {")

    def test_round_trip_matches_extractor(self, base):
        source = "function a() {\n}\nconst b = () => 1;\n"
        elements = extract_functions(source, "javascript")
        res = [FileResult(str(base / "x.js"), tuple(elements))]
        parsed = json.loads(format_results(res, "json", base))
        assert len(parsed[0]["elements"]) == len(elements)
        assert parsed[0]["elements"] == [e.to_dict() for e in elements]


class TestDispatch:
    @pytest.mark.parametrize("mode", FORMATS)
    def test_every_format_renders(self, results, base, mode):
        assert format_results(results, mode, base)

    def test_unknown_mode_falls_back_to_list(self, results, base):
        assert format_results(results, "yaml", base) == format_list(results, base)

    def test_default_is_list(self, results, base):
        assert format_results(results, None, base) == format_list(results, base)

    def test_paths_outside_base_are_shown_as_given(self, tmp_path):
        res = [FileResult("/elsewhere/a.js", ())]
        assert format_list(res, tmp_path).startswith("--- /elsewhere/a.js ---")


class TestHelpers:
    def test_json_envelope(self):
        env = json_envelope("extract", summary={"verdict": "ok"}, results=[])
        assert env == {"command": "extract", "summary": {"verdict": "ok"}, "results": []}

    def test_to_json(self):
        assert json.loads(to_json({"a": 1})) == {"a": 1}

    def test_format_table(self):
        table = format_table(["Name", "Kind"], [["go", "func"]])
        assert table.splitlines() == ["Name  Kind", "----  ----", "go    func"]

    def test_format_table_empty(self):
        assert format_table(["A"], []) == "(none)"
