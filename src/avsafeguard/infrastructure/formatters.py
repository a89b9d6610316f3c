"""Output formatters and exporters for theater analysis results."""

from __future__ import annotations

import json

from avsafeguard.domain.entities import ProjectConfig
from avsafeguard.domain.services.analysis import AnalysisResult, RowAnalysis
from avsafeguard.domain.services.analysis.constants import MASKING_LABELS, WALL_LABELS
from avsafeguard.domain.value_objects import MaskingConfig, WallConstruction

# Modes shown in summaries and reports
MODE_DISPLAY_LIMIT = 8

# Coverage multiplier converting NRC 0.95 panel coverage to NRC 0.70 foam
FOAM_COVERAGE_FACTOR = 1.36

# Screens above this diagonal need a motorized housing pocket (inches)
LARGE_SCREEN_SIZE = 120.0

HANDOVER_CHECKLIST: tuple[str, ...] = (
    "Verify RT60 decay (Target: 0.45s ±0.05s)",
    "Sweep 20-200Hz for Seat-to-Seat Variance (<5dB)",
    "Verify Subwoofer Phase alignment at Crossover",
)

# Wall constructions with stud cavities that can take in-wall equipment
STUD_WALL_CONSTRUCTIONS: frozenset[WallConstruction] = frozenset(
    {
        WallConstruction.DRYWALL,
        WallConstruction.TREATED_DRYWALL,
        WallConstruction.HYBRID,
    }
)

INTENSITY_FOOTNOTE = (
    "Intensity % represents the theoretical modal energy distribution relative "
    "to a rigid boundary (100%). Lower values indicate damping from flexible "
    "wall construction."
)


class JsonExporter:
    """Exports analysis results as JSON."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def export(self, result: AnalysisResult) -> str:
        """Export an analysis result as a JSON string."""
        return json.dumps(result.to_dict(), indent=self._indent, ensure_ascii=False)


class SummaryFormatter:
    """Formats an analysis result as a plain-text console summary."""

    def format(self, result: AnalysisResult) -> str:
        """Format the certification, rows, RT60, modes and treatments."""
        lines = [
            "THEATER ANALYSIS",
            "=" * 70,
            f"Certification: {result.certification.value}",
            f"Score: {result.overall_score}/100",
        ]
        if not result.screen_fit.fits:
            lines.append(
                f'Screen does not fit: {result.screen_fit.screen_width_inches:.1f}" wide '
                f'in a {result.screen_fit.room_width_inches:.1f}" room'
            )
        if result.bass_leakage_warning:
            lines.append("Bass leakage: flexible wall construction detected")

        lines.append("")
        lines.append(
            f"{'Row':<6} {'Dist (ft)':<10} {'VVA':<8} {'HVA':<8} {'Clearance':<11} {'Status'}"
        )
        lines.append("-" * 70)
        for row in result.rows:
            lines.append(
                f"{row.row_id:<6} {row.distance_from_screen:<10g} "
                f"{row.vertical_viewing_angle:<8.1f} {row.horizontal_viewing_angle:<8.1f} "
                f"{_format_clearance(row):<11} {row.overall_status.value.upper()}"
            )
        for row in result.rows:
            for note in row.notes:
                lines.append(f"  Row {row.row_id}: {note}")

        rt60 = result.rt60_analysis
        lines.append("")
        lines.append(
            f"RT60: {rt60.untreated_rt60}s untreated, target {rt60.target_rt60}s "
            f"({rt60.status.value}, ~{rt60.coverage_required}% coverage)"
        )

        lines.append("")
        lines.append("ROOM MODES")
        lines.append("-" * 70)
        for mode in result.room_modes[:MODE_DISPLAY_LIMIT]:
            leak = " [bass leakage]" if mode.is_bass_leakage else ""
            lines.append(
                f"{mode.frequency:>7.1f} Hz  {mode.axis:<14} "
                f"{mode.intensity * 100:>4.0f}%  {mode.treatment.type.label}{leak}"
            )

        if result.treatment_prescriptions:
            lines.append("")
            lines.append("TREATMENT")
            lines.append("-" * 70)
            for prescription in result.treatment_prescriptions:
                lines.append(
                    f"- {prescription.type.label} ({prescription.depth}): "
                    f"{prescription.placement}"
                )

        return "\n".join(lines)


def _format_clearance(row: RowAnalysis) -> str:
    if row.sightline_clearance is None:
        return "N/A"
    return f'{row.sightline_clearance:.1f}"'


def _wall_name(wall_construction: WallConstruction) -> str:
    value = wall_construction.value
    return value[:1].upper() + value[1:]


class ReportFormatter:
    """Formatter for generating the theater design report in markdown.

    Example:
        ```python
        formatter = ReportFormatter()
        result = ProjectAnalyzer().analyze(config)
        report = formatter.format(config, result)
        ```
    """

    def format(self, config: ProjectConfig, result: AnalysisResult) -> str:
        """Generate a markdown report.

        Args:
            config: The analyzed project configuration.
            result: Its analysis result.

        Returns:
            Markdown-formatted report string.
        """
        sections: list[str] = [
            self._format_header(result),
            self._format_room_configuration(config),
            self._format_seating(result),
            self._format_reverb(result),
            self._format_room_modes(result),
            self._format_treatment(config, result),
        ]

        issues = self._format_issues(result)
        if issues:
            sections.append(issues)

        sections.append(self._format_handover_checklist())
        sections.append(self._format_architectural_checklist(config))
        sections.append(
            "---\n\nVerified By: ________________________________    Date: ______________"
        )

        return "\n\n".join(sections)

    def _format_header(self, result: AnalysisResult) -> str:
        return "\n".join(
            [
                "# AV Safeguard Analysis Report",
                "",
                "CEDIA/CTA-CEB23 home theater design analysis",
                "",
                f"**Certification:** {result.certification.value.upper()}",
                f"**Score:** {result.overall_score}%",
            ]
        )

    def _format_room_configuration(self, config: ProjectConfig) -> str:
        room = config.room
        screen = config.screen
        return "\n".join(
            [
                "## Room Configuration",
                "",
                f"- Dimensions: {room.length:g}' L x {room.width:g}' W x {room.height:g}' H",
                f'- Screen: {screen.size:g}" diagonal ({screen.aspect_ratio.value})',
                f"- Masking: {MASKING_LABELS[screen.masking]}",
                f"- Wall Construction: {WALL_LABELS[config.wall_construction]}",
                f"- Content Standard: {config.content_standard.value}",
            ]
        )

    def _format_seating(self, result: AnalysisResult) -> str:
        lines = [
            "## Multi-Row Seating Analysis",
            "",
            "| Row | Distance | VVA | HVA | Clearance | Status |",
            "|-----|----------|-----|-----|-----------|--------|",
        ]
        for row in result.rows:
            lines.append(
                f"| Row {row.row_id} | {row.distance_from_screen:g} ft | "
                f"{row.vertical_viewing_angle:.1f}° | {row.horizontal_viewing_angle:.1f}° | "
                f"{_format_clearance(row)} | {row.overall_status.value.upper()} |"
            )
        return "\n".join(lines)

    def _format_reverb(self, result: AnalysisResult) -> str:
        rt60 = result.rt60_analysis
        lines = [
            "## Reverb Analysis (RT60)",
            "",
            f"- Untreated RT60: {rt60.untreated_rt60}s",
            f"- Target RT60: {rt60.target_rt60}s (CEDIA Standard)",
            f"- Status: {rt60.status.value}",
        ]
        if rt60.coverage_required > 0:
            lines.append(
                f"- Treatment Coverage Required: ~{rt60.coverage_required}% "
                "(Calculated for High-Efficiency NRC 0.95 Panels)."
            )
            lines.append(
                f"\n*Note: Standard NRC 0.70 foam would require "
                f"~{round(rt60.coverage_required * FOAM_COVERAGE_FACTOR)}% coverage.*"
            )
        return "\n".join(lines)

    def _format_room_modes(self, result: AnalysisResult) -> str:
        lines = [
            "## Room Mode Analysis",
            "",
            "| Freq | Type | Axis | Intensity | Est. Reduction | Treatment | Placement |",
            "|------|------|------|-----------|----------------|-----------|-----------|",
        ]
        for mode in result.room_modes[:MODE_DISPLAY_LIMIT]:
            lines.append(
                f"| {mode.frequency:g} Hz | {mode.mode_type.value.capitalize()} | "
                f"{mode.axis} | {mode.intensity * 100:.0f}% | {mode.estimated_reduction} | "
                f"{mode.treatment.type.label} | {mode.treatment.placement} |"
            )
        lines.append("")
        lines.append(f"*{INTENSITY_FOOTNOTE}*")
        return "\n".join(lines)

    def _format_treatment(self, config: ProjectConfig, result: AnalysisResult) -> str:
        lines = ["## Acoustic Treatment Strategy", ""]
        if result.treatment_prescriptions:
            for prescription in result.treatment_prescriptions:
                lines.append(f"- {prescription.description} ({prescription.depth})")
        else:
            lines.append("- No specific treatment required based on current configuration.")

        lines.append("")
        lines.append(
            f"*Calculations adjusted for {_wall_name(config.wall_construction)} impedance "
            "according to CEDIA CEB-22 standards.*"
        )
        lines.append(f"*Wall damping factor applied: {result.wall_damping_factor:.2f}*")

        if result.bass_leakage_warning:
            lines.append("")
            lines.append(
                "Note: Standard Residential Construction (Drywall) detected. Consider "
                "acoustic treatment or hybrid construction to improve bass containment."
            )
        return "\n".join(lines)

    def _format_issues(self, result: AnalysisResult) -> str:
        notes = [f"- Row {row.row_id}: {note}" for row in result.rows for note in row.notes]
        if not notes:
            return ""
        return "\n".join(["## Issues & Recommendations", "", *notes])

    def _format_handover_checklist(self) -> str:
        lines = ["## Project Handover Checklist", ""]
        lines.extend(f"- [ ] {item}" for item in HANDOVER_CHECKLIST)
        return "\n".join(lines)

    def _format_architectural_checklist(self, config: ProjectConfig) -> str:
        lines = [
            "## Architectural Provisions Checklist",
            "",
            "*Engineer's Note to Architect: Pre-Construction Infrastructure Requirements*",
            "",
        ]
        lines.extend(f"- [ ] {item}" for item in architectural_provisions(config))
        return "\n".join(lines)


def architectural_provisions(config: ProjectConfig) -> list[str]:
    """Pre-construction items for the architect, based on walls and screen."""
    items: list[str] = []

    if config.wall_construction in STUD_WALL_CONSTRUCTIONS:
        items.append(
            'In-Wall Speaker Depth: Verify minimum 3.5" clear stud depth (Standard) '
            'or 5.5" (Reference/Backbox).'
        )
        items.append(
            'Recessed Subwoofers: Confirm 2x6 framing or 6" cavity depth at '
            "designated sub locations."
        )

    if config.screen.masking == MaskingConfig.MOTORIZED or config.screen.size > LARGE_SCREEN_SIZE:
        items.append(
            'Ceiling Pocket: Verify 8" x 8" continuous blocking/pocket for motorized '
            "screen housing."
        )
        items.append(
            "Power: Dedicated 110V/220V AC drop at screen casing location "
            "(Left/Right per screen manufacturer)."
        )

    items.append(
        'Projector Ventilation: Ensure 12" clearance or active exhaust for High-Lumen unit.'
    )
    items.append(
        'Conduit: 2" Smurf Tube from Rack Location to Display/Projector (Future Proofing).'
    )
    return items
