"""Unit tests for summary, JSON and markdown report output."""

from __future__ import annotations

import json
from dataclasses import replace

import pytest

from avsafeguard.domain.entities import ProjectConfig, SeatingRow
from avsafeguard.domain.services.analysis import AnalysisResult, ProjectAnalyzer
from avsafeguard.domain.value_objects import MaskingConfig, WallConstruction
from avsafeguard.infrastructure import (
    JsonExporter,
    ReportFormatter,
    SummaryFormatter,
    architectural_provisions,
)


@pytest.fixture
def result(default_project: ProjectConfig) -> AnalysisResult:
    return ProjectAnalyzer().analyze(default_project)


class TestJsonExporter:
    """Tests for JsonExporter."""

    def test_round_trips_to_dict(self, result: AnalysisResult) -> None:
        assert json.loads(JsonExporter().export(result)) == result.to_dict()

    def test_degree_sign_not_escaped(self, result: AnalysisResult) -> None:
        assert "°" in JsonExporter().export(result)

    def test_indent(self, result: AnalysisResult) -> None:
        output = JsonExporter(indent=4).export(result)

        assert '\n    "certification"' in output


class TestSummaryFormatter:
    """Tests for SummaryFormatter."""

    def test_header(self, result: AnalysisResult) -> None:
        output = SummaryFormatter().format(result)

        assert output.startswith("THEATER ANALYSIS")
        assert "Certification: CEDIA Compliant" in output
        assert "Score: 100/100" in output

    def test_rows_and_notes(self, result: AnalysisResult) -> None:
        output = SummaryFormatter().format(result)

        assert "N/A" in output
        assert "OPTIMAL" in output
        assert "  Row 1: VVA marginal:" in output

    def test_acoustics(self, result: AnalysisResult) -> None:
        output = SummaryFormatter().format(result)

        assert "RT60: 1.24s untreated, target 0.45s (needs-treatment, ~15% coverage)" in output
        assert "ROOM MODES" in output
        assert "28.1 Hz" in output
        assert "TREATMENT" in output
        assert "Hybrid Bass Trap (12-16 in)" in output

    def test_drywall_flags(self, default_project: ProjectConfig) -> None:
        project = replace(default_project, wall_construction=WallConstruction.DRYWALL)

        output = SummaryFormatter().format(ProjectAnalyzer().analyze(project))

        assert "Bass leakage" in output
        assert "[bass leakage]" in output


class TestReportFormatter:
    """Tests for the markdown design report."""

    def test_sections_in_order(self, default_project: ProjectConfig, result: AnalysisResult) -> None:
        report = ReportFormatter().format(default_project, result)

        headings = [line for line in report.splitlines() if line.startswith("#")]
        assert headings == [
            "# AV Safeguard Analysis Report",
            "## Room Configuration",
            "## Multi-Row Seating Analysis",
            "## Reverb Analysis (RT60)",
            "## Room Mode Analysis",
            "## Acoustic Treatment Strategy",
            "## Issues & Recommendations",
            "## Project Handover Checklist",
            "## Architectural Provisions Checklist",
        ]

    def test_header(self, default_project: ProjectConfig, result: AnalysisResult) -> None:
        report = ReportFormatter().format(default_project, result)

        assert "**Certification:** CEDIA COMPLIANT" in report
        assert "**Score:** 100%" in report
        assert report.rstrip().endswith("Date: ______________")

    def test_room_configuration(
        self, default_project: ProjectConfig, result: AnalysisResult
    ) -> None:
        report = ReportFormatter().format(default_project, result)

        assert "- Dimensions: 20' L x 14' W x 9' H" in report
        assert '- Screen: 120" diagonal (16:9)' in report
        assert "- Masking: Fixed 2.40:1 (Standard)" in report
        assert "- Wall Construction: Hybrid (Concrete + Studs)" in report

    def test_seating_table(self, default_project: ProjectConfig, result: AnalysisResult) -> None:
        report = ReportFormatter().format(default_project, result)

        assert "| Row 1 | 11 ft |" in report
        assert '| 6.0" | OPTIMAL |' in report
        assert "| N/A | ACCEPTABLE |" in report

    def test_reverb_coverage(self, default_project: ProjectConfig, result: AnalysisResult) -> None:
        report = ReportFormatter().format(default_project, result)

        assert "- Untreated RT60: 1.24s" in report
        assert "Treatment Coverage Required: ~15%" in report
        assert "foam would require ~20% coverage" in report

    def test_mode_table_limited(
        self, default_project: ProjectConfig, result: AnalysisResult
    ) -> None:
        """Only the eight lowest modes are tabulated."""
        report = ReportFormatter().format(default_project, result)

        assert (
            "| 28.1 Hz | Axial | Length (1st) | 85% | -3 dB (Untreated) | Diaphragmatic |"
            in report
        )
        assert "125 Hz" in report
        assert "187.5 Hz" not in report
        assert "Intensity % represents" in report

    def test_treatment_strategy(
        self, default_project: ProjectConfig, result: AnalysisResult
    ) -> None:
        report = ReportFormatter().format(default_project, result)

        assert "Diaphragmatic (membrane) absorber tuned near 28.1 Hz" in report
        assert "*Calculations adjusted for Hybrid impedance" in report
        assert "*Wall damping factor applied: 0.85*" in report
        assert "Standard Residential Construction" not in report

    def test_drywall_note(self, default_project: ProjectConfig) -> None:
        project = replace(default_project, wall_construction=WallConstruction.DRYWALL)

        report = ReportFormatter().format(project, ProjectAnalyzer().analyze(project))

        assert "Standard Residential Construction (Drywall) detected" in report

    def test_issues_omitted_without_notes(self, default_project: ProjectConfig) -> None:
        project = replace(
            default_project,
            rows=(SeatingRow(id=1, distance_from_screen=13, ear_height=42),),
        )

        report = ReportFormatter().format(project, ProjectAnalyzer().analyze(project))

        assert "## Issues & Recommendations" not in report

    def test_handover_checklist(
        self, default_project: ProjectConfig, result: AnalysisResult
    ) -> None:
        report = ReportFormatter().format(default_project, result)

        assert "- [ ] Verify RT60 decay (Target: 0.45s ±0.05s)" in report


class TestArchitecturalProvisions:
    """Tests for architectural_provisions."""

    def test_stud_walls_standard_screen(self, default_project: ProjectConfig) -> None:
        items = architectural_provisions(default_project)

        assert [item.split(":")[0] for item in items] == [
            "In-Wall Speaker Depth",
            "Recessed Subwoofers",
            "Projector Ventilation",
            "Conduit",
        ]

    def test_concrete_motorized(self, default_project: ProjectConfig) -> None:
        project = replace(
            default_project,
            wall_construction=WallConstruction.CONCRETE,
            screen=replace(default_project.screen, masking=MaskingConfig.MOTORIZED),
        )

        items = architectural_provisions(project)

        assert [item.split(":")[0] for item in items] == [
            "Ceiling Pocket",
            "Power",
            "Projector Ventilation",
            "Conduit",
        ]

    def test_large_screen_needs_pocket(self, default_project: ProjectConfig) -> None:
        project = replace(default_project, screen=replace(default_project.screen, size=135))

        items = architectural_provisions(project)

        assert any(item.startswith("Ceiling Pocket") for item in items)
