"""
inference_engine/services/static_catalog.py
===========================================
Embedded disease catalog served when the database cannot be read.

The identifiers are prefixed with ``static-`` so they never collide
with database primary keys.
"""

from __future__ import annotations

from .schemas import Disease

STATIC_CATALOG: tuple[Disease, ...] = (
    Disease(
        id="static-1",
        name="Common Cold",
        description="A viral infection of the upper respiratory tract.",
        icd_code="J00",
        severity_level="mild",
        is_common=True,
        prevalence=0.15,
        treatment_info="Rest, hydration, over-the-counter medications for symptom relief.",
        prevention_info="Frequent hand washing, avoiding close contact with sick individuals.",
    ),
    Disease(
        id="static-2",
        name="Influenza (Flu)",
        description="A contagious respiratory illness caused by influenza viruses.",
        icd_code="J10",
        severity_level="moderate",
        is_common=True,
        prevalence=0.08,
        treatment_info="Antiviral medications, rest, hydration, and symptom management.",
        prevention_info="Annual flu vaccination, good hygiene practices.",
    ),
    Disease(
        id="static-3",
        name="Pneumonia",
        description="Infection of the lungs causing inflammation and fluid buildup.",
        icd_code="J18",
        severity_level="severe",
        is_common=True,
        prevalence=0.03,
        treatment_info="Antibiotics (if bacterial), antiviral medications (if viral), supportive care.",
        prevention_info="Vaccination, good hygiene, avoiding smoking.",
    ),
    Disease(
        id="static-4",
        name="Migraine",
        description="Recurrent headaches, often with nausea and sensitivity to light and sound.",
        icd_code="G43",
        severity_level="moderate",
        is_common=True,
        prevalence=0.12,
        treatment_info="Pain relievers, triptans, preventive medications, rest in a dark room.",
        prevention_info="Identify and avoid triggers, regular sleep, stress management.",
    ),
    Disease(
        id="static-5",
        name="Hypertension",
        description="High blood pressure, a chronic condition that can lead to serious complications.",
        icd_code="I10",
        severity_level="moderate",
        is_common=True,
        prevalence=0.25,
        treatment_info="Lifestyle modifications, antihypertensive medications, regular monitoring.",
        prevention_info="Healthy diet, regular exercise, weight management, stress reduction.",
    ),
    Disease(
        id="static-6",
        name="Diabetes Type 2",
        description="A chronic condition affecting the way the body processes blood sugar.",
        icd_code="E11",
        severity_level="severe",
        is_common=True,
        prevalence=0.09,
        treatment_info="Lifestyle changes, oral medications, insulin if needed, blood sugar monitoring.",
        prevention_info="Healthy weight, regular exercise, balanced diet.",
    ),
    Disease(
        id="static-7",
        name="Anxiety Disorder",
        description="Persistent, excessive worry that interferes with daily activities.",
        icd_code="F41",
        severity_level="moderate",
        is_common=True,
        prevalence=0.18,
        treatment_info="Psychotherapy, medications, stress management techniques.",
        prevention_info="Stress management, regular exercise, adequate sleep.",
    ),
    Disease(
        id="static-8",
        name="Gastroenteritis",
        description="Inflammation of the stomach and intestines, usually from infection.",
        icd_code="K59.1",
        severity_level="moderate",
        is_common=True,
        prevalence=0.06,
        treatment_info="Hydration, rest, gradual return to normal diet.",
        prevention_info="Hand hygiene, safe food handling, clean water.",
    ),
)
