"""
Assessment type configurations.

Each assessment type (keyed by the record's ``assessment_id``) declares
the report it produces: ordered sections, ordered fields, where each
field's value lives in the raw record, and how it is classified.

Adding a new assessment type is a data change here, not a code change.
The raw dicts are validated into AssessmentConfig models on lookup.
"""

from typing import Optional

from assessment_api.schemas.assessments import AssessmentConfig

# --- Shared classification bands ---
# Several fields use the same 0-100 scoring scale.
SCORE_RANGES = [
    {"min": 0, "max": 50, "label": "Poor", "color": "red"},
    {"min": 51, "max": 70, "label": "Fair", "color": "yellow"},
    {"min": 71, "max": 85, "label": "Good", "color": "green"},
    {"min": 86, "max": 100, "label": "Excellent", "color": "blue"},
]

ENDURANCE_RANGES = [
    {"min": 0, "max": 30, "label": "Poor", "color": "red"},
    {"min": 31, "max": 60, "label": "Fair", "color": "yellow"},
    {"min": 61, "max": 90, "label": "Good", "color": "green"},
    {"min": 91, "max": 120, "label": "Excellent", "color": "blue"},
]

# Jog test lives in exercise 235, first set.
JOG_TEST_PATH = "exercises[?(@.id==235)].setList[0].time"


def _field(key, label, path, unit, ranges=None, type_="number") -> dict:
    field = {"key": key, "label": label, "path": path, "unit": unit, "type": type_}
    if ranges is not None:
        field["classification"] = {"ranges": ranges}
    return field


OVERALL_HEALTH_SECTION = {
    "id": "overall_health",
    "title": "Overall Health Score",
    "fields": [
        _field("accuracy", "Overall Health Score", "accuracy", "%", SCORE_RANGES),
    ],
}

KEY_VITALS_SECTION = {
    "id": "key_vitals",
    "title": "Key Body Vitals",
    "fields": [
        _field("heart_rate", "Heart Rate", "vitalsMap.vitals.heart_rate", "bpm", [
            {"min": 0, "max": 60, "label": "Low", "color": "blue"},
            {"min": 61, "max": 100, "label": "Normal", "color": "green"},
            {"min": 101, "max": 120, "label": "Elevated", "color": "yellow"},
            {"min": 121, "max": 200, "label": "High", "color": "red"},
        ]),
        _field("bp_sys", "Blood Pressure Systolic", "vitalsMap.vitals.bp_sys", "mmHg", [
            {"min": 0, "max": 90, "label": "Low", "color": "blue"},
            {"min": 91, "max": 120, "label": "Normal", "color": "green"},
            {"min": 121, "max": 140, "label": "Elevated", "color": "yellow"},
            {"min": 141, "max": 200, "label": "High", "color": "red"},
        ]),
        _field("bp_dia", "Blood Pressure Diastolic", "vitalsMap.vitals.bp_dia", "mmHg", [
            {"min": 0, "max": 60, "label": "Low", "color": "blue"},
            {"min": 61, "max": 80, "label": "Normal", "color": "green"},
            {"min": 81, "max": 90, "label": "Elevated", "color": "yellow"},
            {"min": 91, "max": 120, "label": "High", "color": "red"},
        ]),
        _field("oxy_sat", "Oxygen Saturation", "vitalsMap.vitals.oxy_sat_prcnt", "%", [
            {"min": 0, "max": 94, "label": "Low", "color": "red"},
            {"min": 95, "max": 100, "label": "Normal", "color": "green"},
        ]),
        _field("resp_rate", "Respiratory Rate", "vitalsMap.vitals.resp_rate", "breaths/min", [
            {"min": 0, "max": 12, "label": "Low", "color": "blue"},
            {"min": 13, "max": 20, "label": "Normal", "color": "green"},
            {"min": 21, "max": 30, "label": "Elevated", "color": "yellow"},
            {"min": 31, "max": 50, "label": "High", "color": "red"},
        ]),
    ],
}

BODY_COMPOSITION_SECTION = {
    "id": "body_composition",
    "title": "Body Composition",
    "fields": [
        _field("bmi", "BMI", "bodyCompositionData.BMI", "", [
            {"min": 0, "max": 18.5, "label": "Underweight", "color": "blue"},
            {"min": 18.6, "max": 24.9, "label": "Normal", "color": "green"},
            {"min": 25, "max": 29.9, "label": "Overweight", "color": "yellow"},
            {"min": 30, "max": 50, "label": "Obese", "color": "red"},
        ]),
        _field("body_fat", "Body Fat Percentage", "bodyCompositionData.BFC", "%", [
            {"min": 0, "max": 10, "label": "Very Low", "color": "blue"},
            {"min": 11, "max": 20, "label": "Low", "color": "green"},
            {"min": 21, "max": 25, "label": "Normal", "color": "yellow"},
            {"min": 26, "max": 40, "label": "High", "color": "red"},
        ]),
    ],
}


ASSESSMENT_CONFIGS: dict[str, dict] = {
    "as_hr_02": {
        "name": "Health & Fitness Assessment",
        "sections": [
            OVERALL_HEALTH_SECTION,
            KEY_VITALS_SECTION,
            {
                "id": "heart_health",
                "title": "Heart Health",
                "fields": [
                    _field("stress_index", "Stress Index",
                           "vitalsMap.metadata.heart_scores.stress_index", "", [
                               {"min": 0, "max": 1.5, "label": "Low Stress", "color": "green"},
                               {"min": 1.6, "max": 2.5, "label": "Moderate Stress", "color": "yellow"},
                               {"min": 2.6, "max": 5, "label": "High Stress", "color": "red"},
                           ]),
                    _field("hrv_rmssd", "Heart Rate Variability (RMSSD)",
                           "vitalsMap.metadata.heart_scores.rmssd", "ms", [
                               {"min": 0, "max": 20, "label": "Low", "color": "red"},
                               {"min": 21, "max": 40, "label": "Moderate", "color": "yellow"},
                               {"min": 41, "max": 100, "label": "Good", "color": "green"},
                           ]),
                ],
            },
            {
                "id": "stress_level",
                "title": "Stress Level",
                "fields": [
                    _field("wellness_score", "Wellness Score",
                           "vitalsMap.wellness_score", "", SCORE_RANGES),
                ],
            },
            {
                "id": "fitness_levels",
                "title": "Fitness Levels",
                "fields": [
                    _field("vo2max", "VO2 Max",
                           "vitalsMap.metadata.physiological_scores.vo2max", "ml/kg/min", [
                               {"min": 0, "max": 30, "label": "Poor", "color": "red"},
                               {"min": 31, "max": 40, "label": "Fair", "color": "yellow"},
                               {"min": 41, "max": 50, "label": "Good", "color": "green"},
                               {"min": 51, "max": 60, "label": "Excellent", "color": "blue"},
                           ]),
                    _field("cardiovascular_endurance", "Cardiovascular Endurance",
                           JOG_TEST_PATH, "seconds", ENDURANCE_RANGES),
                ],
            },
            {
                "id": "posture",
                "title": "Posture",
                "fields": [
                    _field("posture_analysis", "Posture Analysis",
                           "exercises[?(@.id==73)].analysisScore", "", SCORE_RANGES),
                ],
            },
            BODY_COMPOSITION_SECTION,
        ],
    },
    "as_card_01": {
        "name": "Cardiac Assessment",
        "sections": [
            OVERALL_HEALTH_SECTION,
            KEY_VITALS_SECTION,
            {
                "id": "cardiovascular_endurance",
                "title": "Cardiovascular Endurance",
                "fields": [
                    _field("cardiac_output", "Cardiac Output",
                           "vitalsMap.metadata.cardiovascular.cardiac_out", "L/min", [
                               {"min": 0, "max": 4, "label": "Low", "color": "red"},
                               {"min": 4.1, "max": 6, "label": "Normal", "color": "green"},
                               {"min": 6.1, "max": 8, "label": "Good", "color": "blue"},
                           ]),
                    _field("jog_test_time", "Jog Test Duration",
                           JOG_TEST_PATH, "seconds", ENDURANCE_RANGES),
                ],
            },
            BODY_COMPOSITION_SECTION,
        ],
    },
}


def get_assessment_config(assessment_id: Optional[str]) -> Optional[AssessmentConfig]:
    """Look up and validate the config for an assessment type."""
    raw = ASSESSMENT_CONFIGS.get(assessment_id) if assessment_id else None
    if raw is None:
        return None
    return AssessmentConfig.model_validate(raw)
