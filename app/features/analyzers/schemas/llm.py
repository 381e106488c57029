from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Report(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ContentFinding(_Report):
    section: Optional[str] = Field(default=None, alias="Section")
    issue: Optional[str] = Field(default=None, alias="Issue")
    details: Optional[str] = Field(default=None, alias="Details")
    code: Optional[str] = Field(default=None, alias="Code")
    recommended_fix: Optional[str] = Field(default=None, alias="Recommended Fix")


class ContentDiscrepancy(_Report):
    summary: Optional[str] = Field(default=None, alias="Summary")
    findings: List[ContentFinding] = Field(default_factory=list, alias="Findings")


class StylingDiscrepancy(_Report):
    summary: Optional[str] = Field(default=None, alias="Summary")
    findings: List[ContentFinding] = Field(default_factory=list, alias="Findings")


class IntentionalFinding(_Report):
    category: Optional[str] = Field(default=None, alias="Category")
    issue: Optional[str] = Field(default=None, alias="Issue")
    details: Optional[str] = Field(default=None, alias="Details")
    recommended_fix: Optional[str] = Field(default=None, alias="Recommended Fix")


class IntentionalFlawsAndKnownIssues(_Report):
    summary: Optional[str] = Field(default=None, alias="Summary")
    findings: List[IntentionalFinding] = Field(default_factory=list, alias="Findings")


class FunctionalFinding(_Report):
    issue: Optional[str] = Field(default=None, alias="Issue")
    details: Optional[str] = Field(default=None, alias="Details")
    code: Optional[str] = Field(default=None, alias="Code")
    recommended_fix: Optional[str] = Field(default=None, alias="Recommended Fix")


class FunctionalDiscrepancy(_Report):
    summary: Optional[str] = Field(default=None, alias="Summary")
    findings: List[FunctionalFinding] = Field(default_factory=list, alias="Findings")


class DetailedAnalysis(_Report):
    content_discrepancies: Optional[ContentDiscrepancy] = Field(
        default=None, alias="Content Discrepancies"
    )
    styling_discrepancies: Optional[StylingDiscrepancy] = Field(
        default=None, alias="Styling Discrepancies"
    )
    intentional_flaws_and_known_issues: Optional[IntentionalFlawsAndKnownIssues] = Field(
        default=None, alias="Intentional Flaws And Known Issues"
    )
    functional_discrepancies: Optional[FunctionalDiscrepancy] = Field(
        default=None, alias="Functional Discrepancies"
    )


class KeyFinding(_Report):
    issue: Optional[str] = Field(default=None, alias="Issue")
    recommended_fix: Optional[str] = Field(default=None, alias="Recommended Fix")


class EvaluationReport(_Report):
    summary: Optional[str] = Field(default=None, alias="Summary")
    key_findings: List[KeyFinding] = Field(default_factory=list, alias="Key Findings")


class LayoutReport(_Report):
    summary: Optional[str] = Field(default=None, alias="Summary")
    recommended_fix: Optional[str] = Field(default=None, alias="Recommended Fix")


class NonLLMEvaluations(_Report):
    accessibility_report: Optional[EvaluationReport] = Field(
        default=None, alias="Accessibility Report"
    )
    performance_report: Optional[EvaluationReport] = Field(default=None, alias="Performance Report")
    validation_report: Optional[EvaluationReport] = Field(default=None, alias="Validation Report")
    layout_report: Optional[LayoutReport] = Field(default=None, alias="Layout Report")


class OtherIssue(_Report):
    issue: Optional[str] = Field(default=None, alias="Issue")
    details: Optional[str] = Field(default=None, alias="Details")
    code: Optional[str] = Field(default=None, alias="Code")
    recommended_fix: Optional[str] = Field(default=None, alias="Recommended Fix")


class LLMResponse(_Report):
    """Structured critique returned by the LLM review service."""
    executive_summary: Optional[str] = Field(default=None, alias="Executive Summary")
    detailed_analysis: Optional[DetailedAnalysis] = Field(default=None, alias="Detailed Analysis")
    non_llm_evaluations: Optional[NonLLMEvaluations] = Field(
        default=None, alias="Non-LLM Evaluations"
    )
    other_issues: List[OtherIssue] = Field(default_factory=list, alias="Other Issues")
