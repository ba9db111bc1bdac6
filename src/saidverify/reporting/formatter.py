"""Console rendering of a decoded verification result."""

from __future__ import annotations

from saidverify.models.verification import ResultFormat, VerificationResult

DETAILED_HEADER = "----------------- Valid ID -----------------"
DETAILED_FOOTER = "----------------- End of Details -----------------"


def summary_lines(result: VerificationResult) -> list[str]:
    """The four field lines shared by every result format."""
    dob = result.date_of_birth
    if not result.is_valid or dob is None:
        raise ValueError("only valid results can be rendered")
    return [
        f"Born: {dob.day:02d}/{dob.month:02d}/{dob.resolved_full_year}",
        f"Age: {result.age}",
        f"Gender: {result.gender}",
        f"Citizenship Status: {result.citizenship_status}",
    ]


def render_result(result: VerificationResult, result_format: ResultFormat) -> list[str]:
    lines = summary_lines(result)
    if result_format == ResultFormat.SUMMARY:
        return lines
    return [DETAILED_HEADER, *lines, DETAILED_FOOTER, ""]
