"""
knowledge_base/catalog_data.py
==============================
Reference disease catalog with ICD-10 codes, loaded by the
``seed_data`` management command.
"""

from __future__ import annotations

DISEASE_CATALOG: list[dict] = [
    # Respiratory Diseases
    {
        "name": "Common Cold",
        "description":
            "A viral infection of the upper respiratory tract, typically causing symptoms like runny nose, sneezing, and mild fever.",
        "icd_code": "J00",
        "severity_level": "mild",
        "is_common": True,
        "prevalence": "0.15",
        "treatment_info":
            "Rest, hydration, over-the-counter medications for symptom relief.",
        "prevention_info":
            "Frequent hand washing, avoiding close contact with sick individuals.",
    },
    {
        "name": "Influenza (Flu)",
        "description":
            "A contagious respiratory illness caused by influenza viruses, with symptoms including fever, body aches, and fatigue.",
        "icd_code": "J10",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.08",
        "treatment_info":
            "Antiviral medications, rest, hydration, and symptom management.",
        "prevention_info": "Annual flu vaccination, good hygiene practices.",
    },
    {
        "name": "Pneumonia",
        "description":
            "Infection of the lungs that can cause inflammation and fluid buildup, leading to breathing difficulties and chest pain.",
        "icd_code": "J18",
        "severity_level": "severe",
        "is_common": True,
        "prevalence": "0.03",
        "treatment_info":
            "Antibiotics (if bacterial), antiviral medications (if viral), supportive care.",
        "prevention_info":
            "Vaccination, good hygiene, avoiding smoking, managing chronic conditions.",
    },
    {
        "name": "Bronchitis",
        "description":
            "Inflammation of the bronchial tubes, causing coughing, chest discomfort, and sometimes difficulty breathing.",
        "icd_code": "J40",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.05",
        "treatment_info":
            "Rest, hydration, cough suppressants, bronchodilators if needed.",
        "prevention_info":
            "Avoid smoking, get flu and pneumonia vaccines, practice good hygiene.",
    },
    {
        "name": "Asthma",
        "description":
            "A chronic respiratory condition causing airway inflammation and narrowing, leading to wheezing and breathing difficulties.",
        "icd_code": "J45",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.08",
        "treatment_info":
            "Inhalers (bronchodilators and corticosteroids), avoiding triggers, emergency medications.",
        "prevention_info":
            "Identify and avoid triggers, regular medication use, flu vaccination.",
    },

    # Cardiovascular Diseases
    {
        "name": "Hypertension",
        "description":
            "High blood pressure, a chronic condition that can lead to serious health complications if left untreated.",
        "icd_code": "I10",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.25",
        "treatment_info":
            "Lifestyle modifications, antihypertensive medications, regular monitoring.",
        "prevention_info":
            "Healthy diet, regular exercise, weight management, stress reduction.",
    },
    {
        "name": "Coronary Artery Disease",
        "description":
            "Narrowing of coronary arteries due to plaque buildup, reducing blood flow to the heart muscle.",
        "icd_code": "I25",
        "severity_level": "severe",
        "is_common": True,
        "prevalence": "0.07",
        "treatment_info":
            "Lifestyle changes, medications (statins, antiplatelets), procedures (stents, bypass surgery).",
        "prevention_info":
            "Healthy diet, regular exercise, no smoking, manage diabetes and hypertension.",
    },
    {
        "name": "Heart Failure",
        "description":
            "A condition where the heart cannot pump blood effectively, leading to fluid buildup and breathing difficulties.",
        "icd_code": "I50",
        "severity_level": "severe",
        "is_common": True,
        "prevalence": "0.02",
        "treatment_info":
            "Medications (ACE inhibitors, diuretics), lifestyle modifications, device therapy if needed.",
        "prevention_info":
            "Control risk factors, regular exercise, healthy diet, medication adherence.",
    },
    {
        "name": "Atrial Fibrillation",
        "description":
            "An irregular heart rhythm that can increase the risk of stroke and other complications.",
        "icd_code": "I48",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.03",
        "treatment_info":
            "Rate control medications, rhythm control, anticoagulation, procedures if needed.",
        "prevention_info":
            "Control risk factors, regular monitoring, medication adherence.",
    },

    # Endocrine Diseases
    {
        "name": "Diabetes Type 2",
        "description":
            "A chronic condition where the body cannot effectively use insulin, leading to high blood sugar levels.",
        "icd_code": "E11",
        "severity_level": "severe",
        "is_common": True,
        "prevalence": "0.09",
        "treatment_info":
            "Lifestyle changes, oral medications, insulin therapy, blood sugar monitoring.",
        "prevention_info":
            "Healthy diet, regular exercise, weight management, regular health checkups.",
    },
    {
        "name": "Diabetes Type 1",
        "description":
            "An autoimmune condition where the pancreas produces little or no insulin, requiring insulin therapy.",
        "icd_code": "E10",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.005",
        "treatment_info":
            "Insulin therapy, blood sugar monitoring, carbohydrate counting, regular medical care.",
        "prevention_info":
            "No known prevention, early detection and management are crucial.",
    },
    {
        "name": "Hypothyroidism",
        "description":
            "Underactive thyroid gland, leading to fatigue, weight gain, and other metabolic symptoms.",
        "icd_code": "E03",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.05",
        "treatment_info":
            "Thyroid hormone replacement medication, regular monitoring of thyroid function.",
        "prevention_info": "Regular thyroid screening, especially for women over 60.",
    },
    {
        "name": "Hyperthyroidism",
        "description":
            "Overactive thyroid gland, causing weight loss, rapid heartbeat, and nervousness.",
        "icd_code": "E05",
        "severity_level": "moderate",
        "is_common": False,
        "prevalence": "0.01",
        "treatment_info":
            "Antithyroid medications, radioactive iodine, surgery, beta-blockers for symptoms.",
        "prevention_info":
            "Regular thyroid screening, especially for women and those with family history.",
    },

    # Gastrointestinal Diseases
    {
        "name": "Gastroenteritis",
        "description":
            "Inflammation of the stomach and intestines, commonly caused by viral or bacterial infections, leading to diarrhea and vomiting.",
        "icd_code": "K59.1",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.06",
        "treatment_info":
            "Fluid replacement, electrolyte solutions, rest, dietary modifications.",
        "prevention_info":
            "Proper food handling, hand hygiene, safe water consumption.",
    },
    {
        "name": "Irritable Bowel Syndrome (IBS)",
        "description":
            "A functional gastrointestinal disorder causing abdominal pain, bloating, and changes in bowel habits.",
        "icd_code": "K58",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.1",
        "treatment_info":
            "Dietary modifications, stress management, medications for specific symptoms.",
        "prevention_info":
            "Identify trigger foods, manage stress, regular exercise, adequate sleep.",
    },
    {
        "name": "Gastroesophageal Reflux Disease (GERD)",
        "description":
            "Chronic acid reflux causing heartburn, chest pain, and potential damage to the esophagus.",
        "icd_code": "K21",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.2",
        "treatment_info":
            "Lifestyle modifications, antacids, H2 blockers, proton pump inhibitors.",
        "prevention_info":
            "Avoid trigger foods, maintain healthy weight, don't lie down after eating.",
    },
    {
        "name": "Peptic Ulcer Disease",
        "description":
            "Sores in the lining of the stomach or duodenum, often caused by H. pylori infection or NSAID use.",
        "icd_code": "K25",
        "severity_level": "moderate",
        "is_common": False,
        "prevalence": "0.01",
        "treatment_info":
            "Antibiotics for H. pylori, acid-reducing medications, avoiding NSAIDs.",
        "prevention_info":
            "Avoid NSAIDs when possible, treat H. pylori infection, manage stress.",
    },

    # Neurological Diseases
    {
        "name": "Migraine",
        "description":
            "A neurological condition characterized by severe headaches, often accompanied by nausea, vomiting, and sensitivity to light.",
        "icd_code": "G43",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.12",
        "treatment_info":
            "Pain relievers, triptans, preventive medications, lifestyle modifications.",
        "prevention_info":
            "Identify and avoid triggers, maintain regular sleep schedule, stress management.",
    },
    {
        "name": "Tension Headache",
        "description":
            "The most common type of headache, characterized by mild to moderate pain and pressure around the head.",
        "icd_code": "G44.2",
        "severity_level": "mild",
        "is_common": True,
        "prevalence": "0.3",
        "treatment_info":
            "Over-the-counter pain relievers, stress management, relaxation techniques.",
        "prevention_info":
            "Manage stress, maintain good posture, regular exercise, adequate sleep.",
    },
    {
        "name": "Epilepsy",
        "description":
            "A neurological disorder characterized by recurrent seizures due to abnormal electrical activity in the brain.",
        "icd_code": "G40",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.01",
        "treatment_info":
            "Antiepileptic medications, lifestyle modifications, surgery in some cases.",
        "prevention_info":
            "Avoid head injuries, manage stress, take medications as prescribed.",
    },
    {
        "name": "Multiple Sclerosis",
        "description":
            "An autoimmune disease affecting the central nervous system, causing various neurological symptoms.",
        "icd_code": "G35",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.001",
        "treatment_info":
            "Disease-modifying therapies, symptom management, physical therapy.",
        "prevention_info":
            "No known prevention, early diagnosis and treatment are important.",
    },

    # Musculoskeletal Diseases
    {
        "name": "Osteoarthritis",
        "description":
            "Degenerative joint disease causing pain, stiffness, and reduced mobility in affected joints.",
        "icd_code": "M19",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.15",
        "treatment_info":
            "Pain management, physical therapy, joint protection, surgery in severe cases.",
        "prevention_info":
            "Maintain healthy weight, regular exercise, joint protection, avoid overuse.",
    },
    {
        "name": "Rheumatoid Arthritis",
        "description":
            "An autoimmune disease causing chronic inflammation of joints, leading to pain, swelling, and deformity.",
        "icd_code": "M06",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.01",
        "treatment_info":
            "Disease-modifying antirheumatic drugs, anti-inflammatory medications, physical therapy.",
        "prevention_info":
            "No known prevention, early diagnosis and treatment are crucial.",
    },
    {
        "name": "Fibromyalgia",
        "description":
            "A chronic condition characterized by widespread pain, fatigue, and tender points throughout the body.",
        "icd_code": "M79.3",
        "severity_level": "moderate",
        "is_common": False,
        "prevalence": "0.02",
        "treatment_info":
            "Pain management, physical therapy, stress reduction, sleep improvement.",
        "prevention_info":
            "Manage stress, maintain regular sleep schedule, gentle exercise.",
    },
    {
        "name": "Osteoporosis",
        "description":
            "A condition characterized by weak, brittle bones that are more prone to fractures.",
        "icd_code": "M81",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.1",
        "treatment_info":
            "Calcium and vitamin D supplements, bisphosphonates, fall prevention.",
        "prevention_info":
            "Adequate calcium and vitamin D, weight-bearing exercise, avoid smoking and excessive alcohol.",
    },

    # Dermatological Diseases
    {
        "name": "Eczema (Atopic Dermatitis)",
        "description":
            "A chronic skin condition causing dry, itchy, and inflamed skin, often appearing in childhood.",
        "icd_code": "L20",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.1",
        "treatment_info":
            "Moisturizers, topical corticosteroids, antihistamines, avoiding triggers.",
        "prevention_info":
            "Keep skin moisturized, avoid harsh soaps, identify and avoid triggers.",
    },
    {
        "name": "Psoriasis",
        "description":
            "An autoimmune skin condition causing red, scaly patches on the skin, often on elbows, knees, and scalp.",
        "icd_code": "L40",
        "severity_level": "moderate",
        "is_common": False,
        "prevalence": "0.02",
        "treatment_info":
            "Topical treatments, phototherapy, systemic medications, biologics.",
        "prevention_info":
            "Manage stress, avoid triggers, maintain healthy lifestyle.",
    },
    {
        "name": "Acne",
        "description":
            "A common skin condition causing pimples, blackheads, and whiteheads, primarily on the face and back.",
        "icd_code": "L70",
        "severity_level": "mild",
        "is_common": True,
        "prevalence": "0.2",
        "treatment_info":
            "Topical treatments, oral medications, proper skin care, professional treatments.",
        "prevention_info":
            "Gentle skin care, avoid picking, manage stress, proper hygiene.",
    },
    {
        "name": "Urticaria (Hives)",
        "description":
            "A skin condition causing raised, itchy welts that can appear anywhere on the body.",
        "icd_code": "L50",
        "severity_level": "mild",
        "is_common": True,
        "prevalence": "0.15",
        "treatment_info":
            "Antihistamines, avoiding triggers, cool compresses, emergency treatment if severe.",
        "prevention_info":
            "Identify and avoid triggers, manage stress, carry emergency medication if needed.",
    },

    # Genitourinary Diseases
    {
        "name": "Urinary Tract Infection (UTI)",
        "description":
            "Bacterial infection of the urinary system, commonly affecting the bladder and urethra.",
        "icd_code": "N39.0",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.12",
        "treatment_info":
            "Antibiotics, increased fluid intake, pain management, prevention strategies.",
        "prevention_info":
            "Stay hydrated, urinate frequently, wipe front to back, avoid irritating products.",
    },
    {
        "name": "Kidney Stones",
        "description":
            "Hard deposits of minerals and salts that form in the kidneys and can cause severe pain when passing.",
        "icd_code": "N20",
        "severity_level": "severe",
        "is_common": True,
        "prevalence": "0.05",
        "treatment_info":
            "Pain management, increased fluid intake, medical procedures if needed, dietary changes.",
        "prevention_info":
            "Stay hydrated, limit sodium and oxalate, maintain healthy weight, adequate calcium intake.",
    },
    {
        "name": "Benign Prostatic Hyperplasia (BPH)",
        "description":
            "Enlargement of the prostate gland in men, causing urinary symptoms such as frequent urination and difficulty starting urination.",
        "icd_code": "N40",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.25",
        "treatment_info":
            "Medications, minimally invasive procedures, surgery in severe cases.",
        "prevention_info":
            "Regular exercise, maintain healthy weight, limit alcohol and caffeine.",
    },

    # Psychiatric Diseases
    {
        "name": "Anxiety Disorder",
        "description":
            "A mental health condition characterized by excessive worry, fear, and physical symptoms like rapid heartbeat.",
        "icd_code": "F41",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.18",
        "treatment_info":
            "Therapy, medications, lifestyle modifications, stress management techniques.",
        "prevention_info":
            "Stress management, regular exercise, healthy sleep habits, social support.",
    },
    {
        "name": "Depression",
        "description":
            "A mood disorder causing persistent feelings of sadness, hopelessness, and loss of interest in activities.",
        "icd_code": "F32",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.15",
        "treatment_info":
            "Therapy, antidepressant medications, lifestyle changes, support groups.",
        "prevention_info":
            "Maintain social connections, regular exercise, healthy sleep, stress management.",
    },
    {
        "name": "Bipolar Disorder",
        "description":
            "A mood disorder characterized by episodes of mania and depression, affecting mood, energy, and activity levels.",
        "icd_code": "F31",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.01",
        "treatment_info":
            "Mood stabilizers, therapy, lifestyle management, support systems.",
        "prevention_info":
            "No known prevention, early diagnosis and treatment are crucial.",
    },
    {
        "name": "Insomnia",
        "description":
            "A sleep disorder characterized by difficulty falling asleep, staying asleep, or getting quality sleep.",
        "icd_code": "G47.0",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.2",
        "treatment_info":
            "Sleep hygiene, cognitive behavioral therapy, medications if needed.",
        "prevention_info":
            "Maintain regular sleep schedule, create comfortable sleep environment, limit caffeine and screens.",
    },

    # Infectious Diseases
    {
        "name": "Malaria",
        "description":
            "A mosquito-borne infectious disease caused by Plasmodium parasites, common in tropical regions.",
        "icd_code": "B54",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.001",
        "treatment_info":
            "Antimalarial medications, supportive care, prevention of complications.",
        "prevention_info":
            "Use mosquito nets, insect repellent, antimalarial prophylaxis when traveling.",
    },
    {
        "name": "Tuberculosis",
        "description":
            "A bacterial infection primarily affecting the lungs, spread through airborne droplets.",
        "icd_code": "A15",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.001",
        "treatment_info":
            "Long-term antibiotic treatment, directly observed therapy, isolation if needed.",
        "prevention_info":
            "BCG vaccination, early detection and treatment, infection control measures.",
    },
    {
        "name": "Hepatitis B",
        "description":
            "A viral infection of the liver that can cause acute or chronic liver disease.",
        "icd_code": "B16",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.005",
        "treatment_info":
            "Antiviral medications, monitoring, liver transplant in severe cases.",
        "prevention_info":
            "Hepatitis B vaccination, safe sex practices, avoid sharing needles.",
    },
    {
        "name": "HIV/AIDS",
        "description":
            "A viral infection that attacks the immune system, leading to acquired immunodeficiency syndrome.",
        "icd_code": "B20",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.001",
        "treatment_info":
            "Antiretroviral therapy, prevention of opportunistic infections, supportive care.",
        "prevention_info":
            "Safe sex practices, avoid sharing needles, pre-exposure prophylaxis (PrEP).",
    },

    # Eye and Ear Diseases
    {
        "name": "Conjunctivitis (Pink Eye)",
        "description":
            "Inflammation of the conjunctiva, causing redness, itching, and discharge from the eye.",
        "icd_code": "H10",
        "severity_level": "mild",
        "is_common": True,
        "prevalence": "0.08",
        "treatment_info":
            "Antibiotic or antiviral eye drops, warm compresses, good hygiene.",
        "prevention_info":
            "Wash hands frequently, avoid touching eyes, don't share personal items.",
    },
    {
        "name": "Cataracts",
        "description":
            "Clouding of the eye's natural lens, causing blurred vision and sensitivity to light.",
        "icd_code": "H25",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.2",
        "treatment_info":
            "Surgery to remove and replace the lens, glasses or contact lenses.",
        "prevention_info":
            "Wear sunglasses, avoid smoking, manage diabetes, regular eye exams.",
    },
    {
        "name": "Glaucoma",
        "description":
            "A group of eye conditions that damage the optic nerve, often caused by high eye pressure.",
        "icd_code": "H40",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.02",
        "treatment_info":
            "Eye drops, oral medications, laser treatment, surgery if needed.",
        "prevention_info":
            "Regular eye exams, early detection and treatment, manage risk factors.",
    },
    {
        "name": "Otitis Media (Ear Infection)",
        "description":
            "Infection of the middle ear, common in children, causing ear pain and sometimes fever.",
        "icd_code": "H66",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.1",
        "treatment_info":
            "Antibiotics if bacterial, pain management, warm compresses, monitoring.",
        "prevention_info":
            "Avoid secondhand smoke, treat allergies, practice good hygiene.",
    },

    # Blood and Immune System Diseases
    {
        "name": "Anemia",
        "description":
            "A condition where the body lacks enough healthy red blood cells to carry adequate oxygen.",
        "icd_code": "D64",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.15",
        "treatment_info":
            "Iron supplements, dietary changes, treating underlying cause, blood transfusions if severe.",
        "prevention_info":
            "Eat iron-rich foods, manage chronic conditions, regular blood tests.",
    },
    {
        "name": "Leukemia",
        "description":
            "Cancer of the blood-forming tissues, including bone marrow and lymphatic system.",
        "icd_code": "C91",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.001",
        "treatment_info":
            "Chemotherapy, radiation therapy, bone marrow transplant, targeted therapy.",
        "prevention_info":
            "Avoid known risk factors, early detection through regular checkups.",
    },
    {
        "name": "Lymphoma",
        "description":
            "Cancer of the lymphatic system, affecting lymph nodes and other lymphatic tissues.",
        "icd_code": "C85",
        "severity_level": "severe",
        "is_common": False,
        "prevalence": "0.001",
        "treatment_info":
            "Chemotherapy, radiation therapy, immunotherapy, stem cell transplant.",
        "prevention_info":
            "Avoid known risk factors, early detection through regular checkups.",
    },

    # Metabolic Diseases
    {
        "name": "Gout",
        "description":
            "A form of arthritis caused by excess uric acid in the blood, leading to joint pain and inflammation.",
        "icd_code": "M10",
        "severity_level": "moderate",
        "is_common": False,
        "prevalence": "0.02",
        "treatment_info":
            "Pain management, medications to reduce uric acid, dietary changes.",
        "prevention_info":
            "Limit purine-rich foods, maintain healthy weight, limit alcohol, stay hydrated.",
    },
    {
        "name": "Hyperlipidemia",
        "description":
            "High levels of fats (lipids) in the blood, including cholesterol and triglycerides.",
        "icd_code": "E78",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.2",
        "treatment_info":
            "Statins, lifestyle changes, dietary modifications, regular monitoring.",
        "prevention_info":
            "Healthy diet, regular exercise, maintain healthy weight, avoid smoking.",
    },
    {
        "name": "Metabolic Syndrome",
        "description":
            "A cluster of conditions that increase the risk of heart disease, stroke, and diabetes.",
        "icd_code": "E88.81",
        "severity_level": "moderate",
        "is_common": True,
        "prevalence": "0.25",
        "treatment_info":
            "Lifestyle changes, medications for individual conditions, weight management.",
        "prevention_info":
            "Maintain healthy weight, regular exercise, healthy diet, manage blood pressure and blood sugar.",
    },
]
