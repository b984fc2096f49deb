# svm_lab/professions.py
# Domain vocabulary so the same confusion matrix reads as a diagnosis, a credit
# decision, a campaign forecast or a quality-control check.
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .core.types import ConfusionMatrix, PerformanceMetrics, ChoiceEnum


class Profession(ChoiceEnum):
    MEDICAL = "medical"
    FINANCE = "finance"
    MARKETING = "marketing"
    ENGINEERING = "engineering"


@dataclass(frozen=True)
class ProfessionTerms:
    positive: str
    negative: str
    true_positive: str
    true_negative: str
    false_positive: str
    false_negative: str
    accuracy: str
    precision: str
    recall: str


PROFESSION_TERMS: Dict[Profession, ProfessionTerms] = {
    Profession.MEDICAL: ProfessionTerms(
        positive="Disease Detected",
        negative="Healthy",
        true_positive="Correctly Diagnosed Sick",
        true_negative="Correctly Diagnosed Healthy",
        false_positive="False Alarm (Healthy flagged as Sick)",
        false_negative="Missed Diagnosis (Sick flagged as Healthy)",
        accuracy="Overall Diagnostic Accuracy",
        precision="Positive Diagnosis Reliability",
        recall="Disease Detection Rate",
    ),
    Profession.FINANCE: ProfessionTerms(
        positive="High Risk",
        negative="Low Risk",
        true_positive="Correctly Flagged as High Risk",
        true_negative="Correctly Flagged as Low Risk",
        false_positive="Safe Client Flagged as Risky",
        false_negative="Risky Client Missed",
        accuracy="Overall Risk Assessment Accuracy",
        precision="High-Risk Prediction Reliability",
        recall="Risk Detection Rate",
    ),
    Profession.MARKETING: ProfessionTerms(
        positive="Will Convert",
        negative="Won't Convert",
        true_positive="Correctly Predicted Conversion",
        true_negative="Correctly Predicted No Conversion",
        false_positive="Expected Conversion but Didn't",
        false_negative="Missed Potential Customer",
        accuracy="Overall Campaign Accuracy",
        precision="Conversion Prediction Reliability",
        recall="Customer Capture Rate",
    ),
    Profession.ENGINEERING: ProfessionTerms(
        positive="Defective",
        negative="Functional",
        true_positive="Correctly Identified Defect",
        true_negative="Correctly Identified Functional",
        false_positive="False Defect Alert",
        false_negative="Missed Defect",
        accuracy="Overall Quality Control Accuracy",
        precision="Defect Detection Reliability",
        recall="Defect Detection Rate",
    ),
}

PROFESSION_DESCRIPTIONS: Dict[Profession, str] = {
    Profession.MEDICAL: "Diagnose diseases and predict patient outcomes",
    Profession.FINANCE: "Assess credit risk and detect fraudulent transactions",
    Profession.MARKETING: "Predict customer conversion and campaign success",
    Profession.ENGINEERING: "Detect defects and ensure quality control",
}

PROFESSION_ICONS: Dict[Profession, str] = {
    Profession.MEDICAL: "🏥",
    Profession.FINANCE: "💰",
    Profession.MARKETING: "📊",
    Profession.ENGINEERING: "⚙️",
}


def terms_for(profession: Profession | str) -> ProfessionTerms:
    return PROFESSION_TERMS[Profession.coerce(profession)]


def describe_confusion(cm: ConfusionMatrix, terms: ProfessionTerms) -> List[Tuple[str, int]]:
    return [
        (terms.true_positive, cm.true_positive),
        (terms.false_negative, cm.false_negative),
        (terms.false_positive, cm.false_positive),
        (terms.true_negative, cm.true_negative),
    ]


def describe_metrics(metrics: PerformanceMetrics, terms: ProfessionTerms) -> List[Tuple[str, float]]:
    return [
        (terms.accuracy, metrics.accuracy),
        (terms.precision, metrics.precision),
        (terms.recall, metrics.recall),
        ("F1 Score", metrics.f1_score),
    ]
