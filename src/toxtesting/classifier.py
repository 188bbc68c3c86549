#
# src/toxtesting/classifier.py
#
"""
Turns an ExecutionOutcome into the text and verdict returned to the caller.

The verdict is a substring heuristic over the runner's report, not a parse
of it: any occurrence of a failure marker counts, including ones inside
test names or log lines.
"""
from attrs import define

from toxtesting.testing.protocols import ExecutionOutcome

FAILURE_MARKERS = ("FAILED", "ERROR:")


@define(frozen=True, slots=True)
class ToolResult:
    """The only value handed back to the protocol layer."""
    text: str
    is_error: bool


def classify_output(text: str) -> bool:
    """Returns True if the text contains any failure marker."""
    return any(marker in text for marker in FAILURE_MARKERS)


def merge_output(outcome: ExecutionOutcome) -> str:
    """
    Joins stdout and stderr, stderr after a newline when non-empty.

    A failed run with no output gets a synthesized message so the caller
    always receives readable text. A run that never completed also carries
    its error after whatever partial output was captured.
    """
    output = outcome.stdout
    if outcome.stderr:
        output += "\n" + outcome.stderr
    if not output and outcome.failed:
        return f"Error running tests: {outcome.error}"
    if not outcome.completed:
        output += f"\nError running tests: {outcome.error}"
    return output


def build_tool_result(outcome: ExecutionOutcome) -> ToolResult:
    text = merge_output(outcome)
    # A run that never completed has no trustworthy report to classify.
    return ToolResult(text=text, is_error=classify_output(text) or not outcome.completed)


# 🔼⚙️
