"""
Demonstration assessment records.

These stand in for the output of the assessment devices. Each record is
an arbitrary nested structure; the only keys the service itself relies
on are ``session_id`` (lookup) and ``assessment_id`` (config selection).
Everything else is reached through config paths.

Records are treated as read-only. Lookups hand back the stored object,
so callers must not mutate it.
"""

from typing import Optional

ASSESSMENT_RECORDS: list[dict] = [
    {
        "session_id": "session_001",
        "assessment_id": "as_hr_02",
        "accuracy": 80,
        "assessmentResultId": "res_hr_02_001",
        "gender": "male",
        "height": 175,
        "weight": 72,
        "timeElapsed": 1840,
        "bodyCompositionData": {
            "AGR": "0.91",
            "BFC": 18.5,
            "BMI": 23.4,
            "BMR": "1650",
            "FM": "13.3",
            "LM": "58.7",
        },
        "exercises": [
            {
                "id": 235,
                "name": "Jog test",
                "assignReps": 1,
                "totalReps": 1,
                "setList": [{"time": 62, "reps": 1}],
            },
            {
                "id": 73,
                "name": "Posture analysis",
                "analysisScore": 76,
                "setList": [],
            },
            {
                "id": 259,
                "name": "Squat",
                "totalReps": 12,
                "setList": [{"time": 40, "reps": 12}],
            },
        ],
        "vitalsMap": {
            "vitals": {
                "heart_rate": 72,
                "bp_sys": 124,
                "bp_dia": 82,
                "oxy_sat_prcnt": 98,
                "resp_rate": 16,
            },
            "metadata": {
                "heart_scores": {
                    "stress_index": 1.8,
                    "rmssd": 45,
                    "sdnn": 52,
                    "pNN50_per": 21,
                },
                "physiological_scores": {
                    "vo2max": 42,
                    "bmi": 23.4,
                    "bodyfat": 18.5,
                },
            },
            "wellness_score": 74,
        },
    },
    {
        "session_id": "session_002",
        "assessment_id": "as_card_01",
        "accuracy": 17,
        "assessmentResultId": "res_card_01_002",
        "gender": "female",
        "height": 162,
        "weight": 71,
        "timeElapsed": 960,
        "bodyCompositionData": {
            "BFC": 24,
            "BMI": 27.1,
            "BMR": "1420",
        },
        "exercises": [
            {
                "id": 235,
                "name": "Jog test",
                "setList": [{"time": 45, "reps": 1}],
            },
        ],
        "vitalsMap": {
            "vitals": {
                "heart_rate": 66,
                "bp_sys": 135,
                "bp_dia": 88,
                "oxy_sat_prcnt": 96,
                "resp_rate": 18,
            },
            "metadata": {
                "cardiovascular": {
                    "cardiac_out": 5.2,
                    "map": 103.7,
                },
            },
            "wellness_score": 58,
        },
    },
]


def find_assessment(session_id: Optional[str]) -> Optional[dict]:
    """Return the record for ``session_id``, or None."""
    if not session_id:
        return None
    return next(
        (record for record in ASSESSMENT_RECORDS if record.get("session_id") == session_id),
        None,
    )


def list_assessments() -> list[dict]:
    """All records, in declaration order."""
    return list(ASSESSMENT_RECORDS)
